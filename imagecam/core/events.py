"""
Qt-free notifications for the browser core (Navigator).

Handlers run synchronously on the emitting thread, in connection order.
"""
from typing import Callable, List

from loguru import logger


class Signal:
    def __init__(self, name: str = "Signal"):
        self.name = name
        self._handlers: List[Callable] = []

    def __len__(self):
        return len(self._handlers)

    def __repr__(self):
        return f"Signal({self.name!r}, handlers={len(self._handlers)})"

    def connect(self, handler: Callable) -> Callable:
        """Subscribe ``handler``; connecting it twice has no effect. Usable as a decorator."""
        if handler not in self._handlers:
            self._handlers.append(handler)
        return handler

    def disconnect(self, handler: Callable):
        if handler in self._handlers:
            self._handlers.remove(handler)

    def emit(self, *args, **kwargs) -> int:
        """
        Call every handler connected when emission starts.

        A handler that raises is logged with its traceback and skipped.
        Returns the number of handlers that completed.
        """
        delivered = 0
        for handler in tuple(self._handlers):
            try:
                handler(*args, **kwargs)
            except Exception:
                logger.exception(f"{self.name}: handler {handler!r} failed")
                continue
            delivered += 1
        return delivered
