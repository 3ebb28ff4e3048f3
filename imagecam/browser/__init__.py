"""
Folder browser core: history, listings and rename.
"""
from .entries import Entry, EntryKind, Listing, RawEntry, IMAGE_EXTENSIONS
from .errors import (
    NavigatorError,
    InvalidPathError,
    NoHistoryError,
    DirectoryUnavailableError,
    InvalidNameError,
    NotFoundError,
    MoveConflictError,
    RenameFailedError,
)
from .filesystem import FileSystemReader, LocalFileSystemReader
from .history import FolderHistory
from .icons import IconResolver
from .navigator import Navigator

__all__ = [
    "Entry", "EntryKind", "Listing", "RawEntry", "IMAGE_EXTENSIONS",
    "NavigatorError", "InvalidPathError", "NoHistoryError",
    "DirectoryUnavailableError", "InvalidNameError", "NotFoundError",
    "MoveConflictError", "RenameFailedError",
    "FileSystemReader", "LocalFileSystemReader",
    "FolderHistory", "IconResolver", "Navigator",
]
