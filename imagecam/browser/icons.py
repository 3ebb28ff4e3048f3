import os
from pathlib import Path
from typing import Dict, Optional

from loguru import logger

from .entries import EntryKind

ICONS_DIR = Path(__file__).resolve().parent.parent / "resources" / "icons"

DEFAULT_ICONS: Dict[EntryKind, str] = {
    EntryKind.FOLDER: str(ICONS_DIR / "folder.svg"),
    EntryKind.IMAGE: str(ICONS_DIR / "image.svg"),
    EntryKind.OTHER: str(ICONS_DIR / "file.svg"),
}


class IconResolver:
    """
    Maps an entry kind to an icon file.

    Overrides come from the ``icons`` config section; a missing override file
    falls back to the packaged icon for that kind.
    """

    def __init__(self, overrides: Optional[Dict[EntryKind, Optional[str]]] = None):
        self._icons = dict(DEFAULT_ICONS)
        for kind, path in (overrides or {}).items():
            if not path:
                continue
            if os.path.isfile(path):
                self._icons[kind] = path
            else:
                logger.warning(f"Icon for {kind.value} not found at {path}, using default")

    @classmethod
    def from_settings(cls, icon_settings) -> "IconResolver":
        return cls({
            EntryKind.FOLDER: icon_settings.folder,
            EntryKind.IMAGE: icon_settings.image,
        })

    def resolve(self, kind: EntryKind) -> str:
        return self._icons[kind]
