"""
Errors raised by the folder browser core.

Every error ends the operation that raised it. Nothing is retried, and the
history and filesystem are left as they were before the call.
"""


class NavigatorError(Exception):
    """Base class for browser errors; ``title`` is used for message boxes."""
    title = "Error"


class InvalidPathError(NavigatorError):
    title = "Invalid Path"


class NoHistoryError(NavigatorError):
    title = "No History"


class DirectoryUnavailableError(NavigatorError):
    title = "Folder Unavailable"

    def __init__(self, folder: str, reason: str = ""):
        self.folder = folder
        self.reason = reason
        message = f"Cannot read folder '{folder}'"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class InvalidNameError(NavigatorError):
    title = "Invalid Name"


class NotFoundError(NavigatorError):
    title = "Not Found"


class MoveConflictError(NavigatorError):
    title = "Rename Conflict"

    def __init__(self, source: str, destination: str):
        self.source = source
        self.destination = destination
        super().__init__(f"Cannot rename '{source}': '{destination}' already exists")


class RenameFailedError(NavigatorError):
    title = "Rename Failed"

    def __init__(self, source: str, reason: str = ""):
        self.source = source
        self.reason = reason
        message = f"Cannot rename '{source}'"
        if reason:
            message += f": {reason}"
        super().__init__(message)
