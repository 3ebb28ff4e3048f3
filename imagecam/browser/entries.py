import os
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Tuple

IMAGE_EXTENSIONS = (".jpg", ".jpeg", ".png", ".gif", ".bmp")


class EntryKind(Enum):
    FOLDER = "folder"
    IMAGE = "image"
    OTHER = "other"


@dataclass(frozen=True)
class RawEntry:
    """One item as reported by a FileSystemReader, before classification."""
    name: str
    full_path: str
    is_directory: bool


@dataclass(frozen=True)
class Entry:
    """A classified listing item. Listings are rebuilt, never mutated."""
    name: str
    path: str
    kind: EntryKind
    icon_ref: str = ""

    @property
    def is_folder(self) -> bool:
        return self.kind is EntryKind.FOLDER

    @property
    def is_image(self) -> bool:
        return self.kind is EntryKind.IMAGE

    @property
    def stem(self) -> str:
        """Name without extension, as shown in the image popup."""
        if self.is_folder:
            return self.name
        return os.path.splitext(self.name)[0]


Listing = Tuple[Entry, ...]


def classify(raw: RawEntry, image_extensions: Iterable[str] = IMAGE_EXTENSIONS) -> EntryKind:
    """Directories are folders; files are images when the extension matches (any case)."""
    if raw.is_directory:
        return EntryKind.FOLDER
    extension = os.path.splitext(raw.name)[1].lower()
    if extension and extension in image_extensions:
        return EntryKind.IMAGE
    return EntryKind.OTHER


def listing_sort_key(entry: Entry):
    # folders first, then case-insensitive name, exact name breaks ties
    return (0 if entry.is_folder else 1, entry.name.casefold(), entry.name)
