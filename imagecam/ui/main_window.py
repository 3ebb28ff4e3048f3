"""
Main window: folder browser on the left, camera on the right.
"""
import asyncio
from typing import Optional

from PySide6.QtCore import QSize, QUrl, Qt
from PySide6.QtGui import QAction, QDesktopServices, QKeySequence
from PySide6.QtWidgets import (
    QFileDialog, QLineEdit, QListView, QMainWindow, QMenu, QMessageBox,
    QPushButton, QSplitter, QToolBar, QVBoxLayout, QWidget
)
from loguru import logger

from ..browser import Entry
from ..capture import CaptureDevice
from ..core.config import AppConfig
from .models.entry_list_model import EntryListModel
from .viewmodels.browser_viewmodel import BrowserViewModel
from .widgets.camera_view import CameraView
from .widgets.image_popup import ImagePopup


class MainWindow(QMainWindow):
    """
    Features:
    - Back / forward / up history navigation
    - Folder picker and read-only path bar
    - Folder + image listing with thumbnails
    - Live camera preview and snapshots into the current folder
    - Image popup with rename
    """

    def __init__(self, viewmodel: BrowserViewModel, device: Optional[CaptureDevice] = None,
                 settings: Optional[AppConfig] = None):
        super().__init__()
        self.viewmodel = viewmodel
        self.settings = settings or viewmodel.settings
        self.device = device
        self._popup: Optional[ImagePopup] = None
        self._pending = None

        self.setWindowTitle("Image Camera Manager")
        self.resize(1200, 720)

        self.setup_ui()
        self.bind_viewmodel()

    # --- UI setup ---

    def setup_ui(self):
        self.addToolBar(self.create_toolbar())
        self.create_menu()

        splitter = QSplitter(Qt.Horizontal)

        browser_settings = self.settings.browser
        self.model = EntryListModel(
            show_thumbnails=browser_settings.show_thumbnails,
            thumbnail_size=browser_settings.thumbnail_size,
            parent=self,
        )
        self.list_view = QListView()
        self.list_view.setModel(self.model)
        self.list_view.setIconSize(QSize(browser_settings.thumbnail_size, browser_settings.thumbnail_size))
        self.list_view.setUniformItemSizes(True)
        self.list_view.setContextMenuPolicy(Qt.CustomContextMenu)
        self.list_view.customContextMenuRequested.connect(self.show_context_menu)
        self.list_view.doubleClicked.connect(self.on_double_click)
        splitter.addWidget(self.list_view)

        camera_panel = QWidget()
        camera_layout = QVBoxLayout(camera_panel)
        camera_layout.setContentsMargins(0, 0, 0, 0)
        self.camera_view = CameraView(self.device, self.settings.camera.frame_interval_ms)
        camera_layout.addWidget(self.camera_view, 1)
        self.take_picture_btn = QPushButton("Take Picture")
        self.take_picture_btn.setEnabled(False)
        self.take_picture_btn.clicked.connect(self.on_take_picture)
        camera_layout.addWidget(self.take_picture_btn)
        splitter.addWidget(camera_panel)

        splitter.setSizes([600, 600])
        self.setCentralWidget(splitter)
        self.statusBar().showMessage("Ready")

    def create_toolbar(self) -> QToolBar:
        toolbar = QToolBar("Navigation")
        toolbar.setMovable(False)

        self.back_action = QAction("←", self)
        self.back_action.setToolTip("Go back")
        self.back_action.setShortcut(QKeySequence.Back)
        self.back_action.triggered.connect(self.viewmodel.go_back)
        self.back_action.setEnabled(False)
        toolbar.addAction(self.back_action)

        self.forward_action = QAction("→", self)
        self.forward_action.setToolTip("Go forward")
        self.forward_action.setShortcut(QKeySequence.Forward)
        self.forward_action.triggered.connect(self.viewmodel.go_forward)
        self.forward_action.setEnabled(False)
        toolbar.addAction(self.forward_action)

        self.up_action = QAction("↑", self)
        self.up_action.setToolTip("Go up")
        self.up_action.triggered.connect(self.viewmodel.go_up)
        self.up_action.setEnabled(False)
        toolbar.addAction(self.up_action)

        toolbar.addSeparator()

        self.path_bar = QLineEdit()
        self.path_bar.setPlaceholderText("No folder selected")
        self.path_bar.setReadOnly(True)
        toolbar.addWidget(self.path_bar)

        self.browse_action = QAction("Browse...", self)
        self.browse_action.setShortcut(QKeySequence.Open)
        self.browse_action.triggered.connect(self.on_browse)
        toolbar.addAction(self.browse_action)

        self.refresh_action = QAction("⟳", self)
        self.refresh_action.setToolTip("Refresh")
        self.refresh_action.setShortcut(QKeySequence.Refresh)
        self.refresh_action.triggered.connect(self.viewmodel.refresh)
        toolbar.addAction(self.refresh_action)

        return toolbar

    def create_menu(self):
        file_menu = self.menuBar().addMenu("&File")
        file_menu.addAction(self.browse_action)
        file_menu.addSeparator()
        exit_action = file_menu.addAction("E&xit")
        exit_action.triggered.connect(self.close)

    def bind_viewmodel(self):
        vm = self.viewmodel
        self.model.countChanged.connect(
            lambda: self.statusBar().showMessage(f"{self.model.rowCount()} items")
        )

        vm.bind("current_folder", self.path_bar.setText)
        vm.bind("entries", self.model.set_entries)
        vm.bind("can_go_back", self.back_action.setEnabled)
        vm.bind("can_go_forward", self.forward_action.setEnabled)
        vm.bind("can_go_up", self.up_action.setEnabled)
        vm.bind("can_capture", self.take_picture_btn.setEnabled)
        vm.errorOccurred.connect(self.show_error)
        vm.imageRequested.connect(self.open_image)
        vm.snapshotSaved.connect(self.on_snapshot_saved)
        self.camera_view.frameAvailabilityChanged.connect(vm.set_frame_available)

    # --- Lifecycle ---

    def start_camera(self) -> bool:
        if not self.settings.camera.enabled:
            self.camera_view.set_placeholder("Camera disabled")
            return False
        return self.camera_view.start()

    def closeEvent(self, event):
        self.camera_view.stop()
        super().closeEvent(event)

    # --- Actions ---

    def on_browse(self):
        start = self.viewmodel.current_folder or ""
        folder = QFileDialog.getExistingDirectory(self, "Select Folder", start)
        if folder:
            self.viewmodel.browse(folder)

    def on_double_click(self, index):
        if not index.isValid():
            return
        self.viewmodel.open_entry(self.model.entry_at(index.row()))

    def open_image(self, entry: Entry):
        logger.info(f"Opening image: {entry.path}")
        self._popup = ImagePopup(entry, self.viewmodel, self)
        self._popup.open()

    def open_external(self, entry: Entry):
        """Hand the file to the desktop's default application."""
        if not QDesktopServices.openUrl(QUrl.fromLocalFile(entry.path)):
            self.show_error("Error", f"No application available to open {entry.name}.")

    def show_context_menu(self, position):
        index = self.list_view.indexAt(position)
        if not index.isValid():
            return
        entry = self.model.entry_at(index.row())

        menu = QMenu(self)
        open_action = menu.addAction("Open")
        open_action.triggered.connect(lambda: self.viewmodel.open_entry(entry))
        external_action = menu.addAction("Open with Default Application")
        external_action.triggered.connect(lambda: self.open_external(entry))
        if entry.is_image:
            menu.addSeparator()
            rename_action = menu.addAction("Rename...")
            rename_action.triggered.connect(lambda: self.open_image(entry))

        menu.exec(self.list_view.viewport().mapToGlobal(position))

    def on_take_picture(self):
        if self._pending is not None and not self._pending.done():
            return
        self._pending = asyncio.ensure_future(self.take_picture())

    async def take_picture(self) -> Optional[str]:
        return await self.viewmodel.capture_snapshot(self.camera_view.latest_frame)

    def on_snapshot_saved(self, path: str):
        self.statusBar().showMessage(f"Snapshot saved to {path}")
        self.show_info("Selfie Saved", f"Snapshot saved to {path}")

    # --- Messages ---

    def show_error(self, title: str, message: str):
        QMessageBox.critical(self, title, message)

    def show_info(self, title: str, message: str):
        QMessageBox.information(self, title, message)
