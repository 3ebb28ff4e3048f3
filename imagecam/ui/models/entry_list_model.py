from typing import Dict, Sequence, Tuple

from PySide6.QtCore import QAbstractListModel, QModelIndex, QSize, Qt, Signal
from PySide6.QtGui import QIcon, QImageReader, QPixmap

from ...browser import Entry


class EntryListModel(QAbstractListModel):
    """
    List model over one folder listing.

    Images show a scaled thumbnail of themselves when thumbnails are on,
    everything else shows the icon resolved for its kind.
    """

    EntryRole = Qt.UserRole + 1

    countChanged = Signal()

    def __init__(self, show_thumbnails: bool = True, thumbnail_size: int = 64, parent=None):
        super().__init__(parent)
        self._entries: Tuple[Entry, ...] = ()
        self.show_thumbnails = show_thumbnails
        self.thumbnail_size = QSize(thumbnail_size, thumbnail_size)
        self._icon_cache: Dict[str, QIcon] = {}
        self._thumb_cache: Dict[str, QIcon] = {}

    def set_entries(self, entries: Sequence[Entry]):
        self.beginResetModel()
        self._entries = tuple(entries)
        self._thumb_cache.clear()
        self.endResetModel()
        self.countChanged.emit()

    def entry_at(self, row: int) -> Entry:
        return self._entries[row]

    def rowCount(self, parent=QModelIndex()):
        if parent.isValid():
            return 0
        return len(self._entries)

    def data(self, index, role=Qt.DisplayRole):
        if not index.isValid() or index.row() >= len(self._entries):
            return None

        entry = self._entries[index.row()]

        if role == Qt.DisplayRole:
            return entry.name
        if role == Qt.ToolTipRole:
            return entry.path
        if role == Qt.DecorationRole:
            return self._decoration(entry)
        if role == self.EntryRole:
            return entry
        return None

    def _decoration(self, entry: Entry) -> QIcon:
        if entry.is_image and self.show_thumbnails:
            icon = self._thumb_cache.get(entry.path)
            if icon is None:
                icon = self._load_thumbnail(entry)
                self._thumb_cache[entry.path] = icon
            return icon
        return self._icon(entry.icon_ref)

    def _icon(self, icon_ref: str) -> QIcon:
        icon = self._icon_cache.get(icon_ref)
        if icon is None:
            icon = QIcon(icon_ref)
            self._icon_cache[icon_ref] = icon
        return icon

    def _load_thumbnail(self, entry: Entry) -> QIcon:
        # Decode at thumbnail size instead of loading full-size images
        reader = QImageReader(entry.path)
        reader.setAutoTransform(True)
        size = reader.size()
        if size.isValid():
            reader.setScaledSize(size.scaled(self.thumbnail_size, Qt.KeepAspectRatio))
        image = reader.read()
        if image.isNull():
            return self._icon(entry.icon_ref)
        return QIcon(QPixmap.fromImage(image))
