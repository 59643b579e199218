"""whspr - local cache of whisper.cpp speech recognition models.

Downloads catalog models on demand, verifies them against known SHA256
digests and keeps them in the user data directory so they are only
transferred once.
"""

from .exceptions import (
    WhsprError,
    ConfigurationError,
    AcquireError,
    UnknownModelError,
    CacheDirUnavailableError,
    DownloadError,
    IntegrityMismatchError,
    CleanupError,
)
from .models import ModelAcquirer, ModelDescriptor, lookup
from .config import Config

__version__ = "0.1.0"
__all__ = [
    "ModelAcquirer",
    "ModelDescriptor",
    "Config",
    "lookup",
    "WhsprError",
    "ConfigurationError",
    "AcquireError",
    "UnknownModelError",
    "CacheDirUnavailableError",
    "DownloadError",
    "IntegrityMismatchError",
    "CleanupError",
]
