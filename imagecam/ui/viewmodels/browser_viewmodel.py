import asyncio
import os
from typing import Callable, Optional

from PySide6.QtCore import QFileSystemWatcher, Signal, Slot
from loguru import logger

from ...browser import Entry, Navigator, NavigatorError
from ...capture import CaptureError, save_snapshot
from ...core.config import AppConfig
from ..mvvm.bindable import BindableBase, BindableProperty


class BrowserViewModel(BindableBase):
    """
    ViewModel for the main window.

    Wraps a Navigator: exposes the current folder, its listing and the
    enablement of back/forward/up/capture as bindable properties, and turns
    browser errors into ``errorOccurred(title, message)``.
    """
    currentFolderChanged = Signal(str)
    entriesChanged = Signal(object)
    canGoBackChanged = Signal(bool)
    canGoForwardChanged = Signal(bool)
    canGoUpChanged = Signal(bool)
    canCaptureChanged = Signal(bool)

    errorOccurred = Signal(str, str)
    imageRequested = Signal(object)
    snapshotSaved = Signal(str)

    # Listings may be produced on a worker thread (rename); this hop
    # delivers them on the thread that owns the view model.
    _listingReady = Signal(str, object)

    current_folder = BindableProperty("", "currentFolderChanged", coerce=lambda folder: folder or "")
    entries = BindableProperty((), "entriesChanged", coerce=tuple)
    can_go_back = BindableProperty(False, "canGoBackChanged")
    can_go_forward = BindableProperty(False, "canGoForwardChanged")
    can_go_up = BindableProperty(False, "canGoUpChanged")
    can_capture = BindableProperty(False, "canCaptureChanged")

    def __init__(self, navigator: Navigator, settings: Optional[AppConfig] = None, parent=None):
        super().__init__(parent)
        self.navigator = navigator
        self.settings = settings or AppConfig()
        self._frame_available = False

        self._watcher: Optional[QFileSystemWatcher] = None
        if self.settings.browser.watch_folder:
            self._watcher = QFileSystemWatcher(self)
            self._watcher.directoryChanged.connect(self._on_directory_changed)

        self._listingReady.connect(self._apply_listing)
        navigator.listing_changed.connect(self._on_listing_changed)
        navigator.history_changed.connect(self._on_history_changed)

    # --- Navigation commands ---

    @Slot(str)
    def browse(self, path: str) -> bool:
        """Open ``path`` as a new history entry."""
        return self._run(lambda: self.navigator.open_folder(path))

    def open_entry(self, entry: Entry) -> bool:
        """Folders are entered; images are handed to the image viewer."""
        if entry.is_folder:
            return self.browse(entry.path)
        if entry.is_image:
            self.imageRequested.emit(entry)
            return True
        return False

    @Slot()
    def go_back(self) -> bool:
        return self._run(self.navigator.open_previous)

    @Slot()
    def go_forward(self) -> bool:
        return self._run(self.navigator.open_next)

    @Slot()
    def go_up(self) -> bool:
        parent = self.navigator.parent_folder()
        if parent is None:
            return False
        return self.browse(parent)

    @Slot()
    def refresh(self) -> bool:
        return self._run(self.navigator.refresh)

    # --- File operations ---

    async def rename(self, path: str, new_name: str) -> Optional[str]:
        """Rename off the GUI thread; returns the new path or None on failure."""
        try:
            return await asyncio.to_thread(self.navigator.rename, path, new_name)
        except NavigatorError as e:
            self._report(e)
            return None

    async def capture_snapshot(self, frame) -> Optional[str]:
        """Save ``frame`` into the current folder and refresh the listing."""
        folder = self.navigator.current_folder()
        try:
            path = await asyncio.to_thread(
                save_snapshot, frame, folder, self.settings.camera.snapshot_prefix
            )
        except CaptureError as e:
            self._report(e)
            return None
        self.refresh()
        self.snapshotSaved.emit(path)
        return path

    def set_frame_available(self, available: bool):
        """Called by the camera view whenever frames start or stop arriving."""
        self._frame_available = available
        self._update_can_capture()

    # --- Internals ---

    def _run(self, action: Callable) -> bool:
        try:
            action()
        except NavigatorError as e:
            self._report(e)
            return False
        return True

    def _report(self, error: Exception):
        title = getattr(error, "title", "Error")
        logger.warning(f"{title}: {error}")
        self.errorOccurred.emit(title, str(error))

    def _on_listing_changed(self, folder: str, listing):
        self._listingReady.emit(folder, listing)

    @Slot(str, object)
    def _apply_listing(self, folder: str, listing):
        if folder == self.navigator.current_folder():
            self.entries = listing

    def _on_history_changed(self, folder: str):
        previous = self.current_folder
        self.current_folder = folder
        self.can_go_back = self.navigator.can_go_back()
        self.can_go_forward = self.navigator.can_go_forward()
        self.can_go_up = self.navigator.parent_folder() is not None
        self._update_can_capture()
        self._watch(previous, self.current_folder)

    def _update_can_capture(self):
        self.can_capture = bool(self.current_folder) and self._frame_available

    def _watch(self, previous: str, folder: str):
        if self._watcher is None or previous == folder:
            return
        if previous:
            self._watcher.removePath(previous)
        if folder and os.path.isdir(folder):
            self._watcher.addPath(folder)

    @Slot(str)
    def _on_directory_changed(self, path: str):
        if os.path.normcase(path) != os.path.normcase(self.current_folder):
            return
        logger.debug(f"Folder changed on disk: {path}")
        self.refresh()
