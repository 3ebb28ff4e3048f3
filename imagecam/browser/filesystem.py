import os
from abc import ABC, abstractmethod
from typing import List

from loguru import logger

from .entries import RawEntry
from .errors import DirectoryUnavailableError


class FileSystemReader(ABC):
    """
    Strategy interface for enumerating a folder.
    """

    @abstractmethod
    def list_entries(self, path: str) -> List[RawEntry]:
        """
        Return the items directly inside ``path``.

        Raises DirectoryUnavailableError when the folder is missing, is not a
        folder, or cannot be read.
        """
        pass


class LocalFileSystemReader(FileSystemReader):
    """Reads the local disk with ``os.scandir``."""

    def list_entries(self, path: str) -> List[RawEntry]:
        entries = []
        try:
            with os.scandir(path) as it:
                for item in it:
                    try:
                        is_dir = item.is_dir()
                    except OSError:
                        # vanished or unreadable between scandir and stat
                        is_dir = False
                    entries.append(RawEntry(item.name, os.path.abspath(item.path), is_dir))
        except FileNotFoundError:
            raise DirectoryUnavailableError(path, "folder does not exist")
        except NotADirectoryError:
            raise DirectoryUnavailableError(path, "not a folder")
        except PermissionError:
            raise DirectoryUnavailableError(path, "permission denied")
        except OSError as e:
            raise DirectoryUnavailableError(path, e.strerror or str(e))

        logger.debug(f"Scanned {len(entries)} entries in {path}")
        return entries
