import asyncio
import os

from PySide6.QtCore import Qt
from PySide6.QtGui import QPixmap
from PySide6.QtWidgets import (
    QDialog, QHBoxLayout, QLabel, QLineEdit, QPushButton, QVBoxLayout
)
from loguru import logger

from ...browser import Entry


class ImagePopup(QDialog):
    """
    Shows one image with its base name; editing the name and submitting
    renames the file through the view model.
    """

    def __init__(self, entry: Entry, viewmodel, parent=None):
        super().__init__(parent)
        self.entry = entry
        self.viewmodel = viewmodel
        self.renamed_to = None
        self._pending = None
        self._pixmap = QPixmap()

        self.setWindowTitle(entry.name)
        self.resize(800, 600)
        self._init_ui()
        self.load_image()

    def _init_ui(self):
        layout = QVBoxLayout(self)

        self.image_label = QLabel()
        self.image_label.setAlignment(Qt.AlignCenter)
        self.image_label.setMinimumSize(200, 200)
        layout.addWidget(self.image_label, 1)

        name_layout = QHBoxLayout()
        name_layout.addWidget(QLabel("Name:"))
        self.name_input = QLineEdit()
        self.name_input.returnPressed.connect(self.on_submit_clicked)
        name_layout.addWidget(self.name_input, 1)

        self.submit_btn = QPushButton("Rename")
        self.submit_btn.setDefault(True)
        self.submit_btn.clicked.connect(self.on_submit_clicked)
        name_layout.addWidget(self.submit_btn)

        self.close_btn = QPushButton("Close")
        self.close_btn.clicked.connect(self.reject)
        name_layout.addWidget(self.close_btn)

        layout.addLayout(name_layout)

    def load_image(self) -> bool:
        self.name_input.setText(self.entry.stem)
        self._pixmap = QPixmap(self.entry.path)
        if self._pixmap.isNull():
            logger.warning(f"Error loading image: {self.entry.path}")
            self.image_label.setText(f"Error loading image: {os.path.basename(self.entry.path)}")
            return False
        self._show_scaled()
        return True

    def resizeEvent(self, event):
        super().resizeEvent(event)
        if not self._pixmap.isNull():
            self._show_scaled()

    def _show_scaled(self):
        size = self.image_label.size()
        if size.isEmpty():
            self.image_label.setPixmap(self._pixmap)
            return
        self.image_label.setPixmap(
            self._pixmap.scaled(size, Qt.KeepAspectRatio, Qt.SmoothTransformation)
        )

    def on_submit_clicked(self):
        if self._pending is not None and not self._pending.done():
            return
        self._pending = asyncio.ensure_future(self.submit())

    async def submit(self):
        """Rename the file; the dialog closes only when the rename succeeded."""
        self.submit_btn.setEnabled(False)
        try:
            new_path = await self.viewmodel.rename(self.entry.path, self.name_input.text())
        finally:
            self.submit_btn.setEnabled(True)
        if new_path is None:
            return None
        self.renamed_to = new_path
        self.accept()
        return new_path
