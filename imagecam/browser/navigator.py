"""
Folder navigation controller.

Owns the back/forward history and turns folder contents into listings of
folders and images. Qt-free: the shell observes it through ``history_changed``
and ``listing_changed``.
"""
import os
from typing import Iterable, Optional

from loguru import logger

from ..core.events import Signal
from .entries import Entry, EntryKind, IMAGE_EXTENSIONS, Listing, classify, listing_sort_key
from .errors import (
    InvalidNameError,
    InvalidPathError,
    MoveConflictError,
    NotFoundError,
    RenameFailedError,
)
from .filesystem import FileSystemReader, LocalFileSystemReader
from .history import FolderHistory
from .icons import IconResolver


class Navigator:
    """
    Back/forward folder history plus filtered folder listings.

    Not thread-safe: callers run one mutating call at a time.

    Usage:
        nav = Navigator(LocalFileSystemReader())
        listing = nav.open_folder("/home/me/Pictures")
        nav.go_back()
    """

    def __init__(
        self,
        reader: Optional[FileSystemReader] = None,
        icons: Optional[IconResolver] = None,
        image_extensions: Iterable[str] = IMAGE_EXTENSIONS,
    ):
        self.reader = reader or LocalFileSystemReader()
        self.icons = icons or IconResolver()
        self.image_extensions = frozenset(ext.lower() for ext in image_extensions)
        self._history = FolderHistory()

        # history_changed(current_folder); listing_changed(folder, listing)
        self.history_changed = Signal("HistoryChanged")
        self.listing_changed = Signal("ListingChanged")

    @property
    def history(self) -> FolderHistory:
        return self._history

    # --- History ---

    def navigate_to(self, path: str) -> str:
        """Push ``path`` as the new current folder and drop forward history."""
        if path is None or not str(path).strip():
            raise InvalidPathError("Folder path is empty.")
        folder = os.path.abspath(str(path))
        self._history.push(folder)
        logger.debug(f"Navigated to {folder}")
        self.history_changed.emit(folder)
        return folder

    def go_back(self) -> str:
        folder = self._history.back()
        logger.debug(f"Back to {folder}")
        self.history_changed.emit(folder)
        return folder

    def go_forward(self) -> str:
        folder = self._history.forward()
        logger.debug(f"Forward to {folder}")
        self.history_changed.emit(folder)
        return folder

    def current_folder(self) -> Optional[str]:
        return self._history.current

    def can_go_back(self) -> bool:
        return self._history.can_go_back()

    def can_go_forward(self) -> bool:
        return self._history.can_go_forward()

    def parent_folder(self) -> Optional[str]:
        """Parent of the current folder, None at a filesystem root."""
        current = self.current_folder()
        if current is None:
            return None
        parent = os.path.dirname(current)
        if not parent or parent == current:
            return None
        return parent

    # --- Listing ---

    def list_folder(self, folder: str) -> Listing:
        """
        Folders and images inside ``folder``, folders first.

        Raises DirectoryUnavailableError (from the reader) if the folder
        cannot be enumerated.
        """
        entries = []
        for raw in self.reader.list_entries(folder):
            kind = classify(raw, self.image_extensions)
            if kind is EntryKind.OTHER:
                continue
            entries.append(Entry(raw.name, raw.full_path, kind, self.icons.resolve(kind)))
        entries.sort(key=listing_sort_key)
        return tuple(entries)

    def refresh(self) -> Listing:
        """Re-list the current folder and announce the result."""
        folder = self.current_folder()
        if folder is None:
            return ()
        listing = self.list_folder(folder)
        self.listing_changed.emit(folder, listing)
        return listing

    # Listing happens before the history move so a failure leaves it untouched.

    def open_folder(self, path: str) -> Listing:
        if path is None or not str(path).strip():
            raise InvalidPathError("Folder path is empty.")
        listing = self.list_folder(os.path.abspath(str(path)))
        folder = self.navigate_to(path)
        self.listing_changed.emit(folder, listing)
        return listing

    def open_previous(self) -> Listing:
        listing = self.list_folder(self._history.peek_back())
        folder = self.go_back()
        self.listing_changed.emit(folder, listing)
        return listing

    def open_next(self) -> Listing:
        listing = self.list_folder(self._history.peek_forward())
        folder = self.go_forward()
        self.listing_changed.emit(folder, listing)
        return listing

    # --- Rename ---

    def rename(self, path: str, new_name: str) -> str:
        """
        Rename ``path`` inside its own folder and re-list that folder.

        A file keeps its extension unless the new name already ends with it
        (any case), so the base name shown in the image popup, "img.v1" for
        "img.v1.png", names the same file. Existing destinations are never
        overwritten, except by a case-only change of the same file.
        """
        name = (new_name or "").strip()
        if not name:
            raise InvalidNameError("New name is empty.")
        if name in (".", "..") or os.sep in name or (os.altsep and os.altsep in name):
            raise InvalidNameError(f"'{name}' is not a valid file name.")

        source = os.path.abspath(path)
        if not os.path.lexists(source):
            raise NotFoundError(f"The file '{source}' does not exist.")

        _, extension = os.path.splitext(source)
        if extension and not os.path.isdir(source) and not name.casefold().endswith(extension.casefold()):
            name += extension

        parent = os.path.dirname(source)
        destination = os.path.join(parent, name)
        if destination == source:
            return source
        if os.path.lexists(destination) and not _same_file(source, destination):
            raise MoveConflictError(source, destination)

        try:
            os.rename(source, destination)
        except FileNotFoundError:
            raise NotFoundError(f"The file '{source}' does not exist.")
        except FileExistsError:
            raise MoveConflictError(source, destination)
        except OSError as e:
            raise RenameFailedError(source, e.strerror or str(e))
        logger.info(f"Renamed {source} -> {destination}")

        listing = self.list_folder(parent)
        self.listing_changed.emit(parent, listing)
        return destination


def _same_file(source: str, destination: str) -> bool:
    # "a.png" -> "A.png" on a case-insensitive volume
    if os.path.normcase(source) == os.path.normcase(destination):
        return True
    if os.path.basename(source).casefold() != os.path.basename(destination).casefold():
        return False
    try:
        return os.path.samefile(source, destination)
    except OSError:
        return False
