"""Custom exceptions for whspr."""
from pathlib import Path
from typing import List, Optional


class WhsprError(Exception):
    """Base exception for all whspr errors."""

    pass


class ConfigurationError(WhsprError):
    """Raised when configuration is invalid or missing."""

    pass


class AcquireError(WhsprError):
    """Raised when a model artifact cannot be acquired."""

    def __init__(self, message: str, model: Optional[str] = None):
        super().__init__(message)
        self.model = model


class UnknownModelError(AcquireError):
    """Raised when the requested model is not in the catalog."""

    def __init__(self, model: str, available: Optional[List[str]] = None):
        message = f"Unknown model: {model}"
        if available:
            message += f". Available: {', '.join(available)}"
        super().__init__(message, model=model)
        self.available = list(available or [])


class CacheDirUnavailableError(AcquireError):
    """Raised when the local cache directory cannot be created."""

    def __init__(self, message: str, path: Path, model: Optional[str] = None):
        super().__init__(message, model=model)
        self.path = path


class DownloadError(AcquireError):
    """Raised when transferring a model artifact fails."""

    def __init__(self, message: str, url: str, path: Path, model: Optional[str] = None):
        super().__init__(message, model=model)
        self.url = url
        self.path = path


class IntegrityMismatchError(AcquireError):
    """Raised when a downloaded artifact does not match its expected digest."""

    def __init__(
        self,
        message: str,
        path: Path,
        expected: str,
        actual: str,
        model: Optional[str] = None,
    ):
        super().__init__(message, model=model)
        self.path = path
        self.expected = expected
        self.actual = actual


class CleanupError(AcquireError):
    """Raised when an invalid artifact could not be removed.

    The invalid file is still on disk when this is raised.
    """

    def __init__(self, message: str, path: Path, model: Optional[str] = None):
        super().__init__(message, model=model)
        self.path = path
