from typing import List, Optional, Tuple

from .errors import NoHistoryError


class FolderHistory:
    """
    Browser-style back/forward stacks of folder paths.

    The top of ``back`` is the folder on screen. ``back`` never shrinks
    below one entry once something was pushed, so the current folder stays
    available after any number of back steps.
    """

    def __init__(self):
        self._back: List[str] = []
        self._forward: List[str] = []

    @property
    def current(self) -> Optional[str]:
        return self._back[-1] if self._back else None

    @property
    def back_entries(self) -> Tuple[str, ...]:
        """Back stack, oldest first."""
        return tuple(self._back)

    @property
    def forward_entries(self) -> Tuple[str, ...]:
        """Forward stack, oldest first (next ``forward()`` target is last)."""
        return tuple(self._forward)

    def can_go_back(self) -> bool:
        return len(self._back) > 1

    def can_go_forward(self) -> bool:
        return len(self._forward) > 0

    def push(self, path: str):
        """Record a new folder visit; clears the forward stack."""
        self._back.append(path)
        self._forward.clear()

    def peek_back(self) -> str:
        """Folder that ``back()`` would reveal, without moving."""
        if not self.can_go_back():
            raise NoHistoryError("Nothing to go back to.")
        return self._back[-2]

    def peek_forward(self) -> str:
        """Folder that ``forward()`` would reveal, without moving."""
        if not self.can_go_forward():
            raise NoHistoryError("Nothing to go forward to.")
        return self._forward[-1]

    def back(self) -> str:
        if not self.can_go_back():
            raise NoHistoryError("Nothing to go back to.")
        self._forward.append(self._back.pop())
        return self._back[-1]

    def forward(self) -> str:
        if not self.can_go_forward():
            raise NoHistoryError("Nothing to go forward to.")
        folder = self._forward.pop()
        self._back.append(folder)
        return folder

    def __len__(self):
        return len(self._back)

    def __repr__(self):
        return f"FolderHistory(back={self._back!r}, forward={self._forward!r})"
