"""Model Store - Download, cache, and verify whisper.cpp models.

This module handles acquisition of catalog models:
- Downloads ggml model files from the upstream host
- Caches them as <data dir>/whspr/models/<name>.bin
- Verifies SHA256 hashes before trusting any cached or downloaded file
- Removes files that fail verification
"""

import hashlib
import logging
import os
import platform
import threading
from pathlib import Path
from typing import Dict, Optional, Union

import requests

from .catalog import ModelDescriptor, available_models, lookup
from ..exceptions import (
    AcquireError,
    CacheDirUnavailableError,
    CleanupError,
    DownloadError,
    IntegrityMismatchError,
    UnknownModelError,
)

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://huggingface.co/ggerganov/whisper.cpp/resolve/main"
DEFAULT_CHUNK_SIZE = 1024 * 1024

APP_NAME = "whspr"


def default_cache_dir() -> Path:
    """Get the platform-specific user data directory for models."""
    system = platform.system()
    if system == "Darwin":
        # macOS: ~/Library/Application Support/whspr/models
        base = Path.home() / "Library" / "Application Support"
    elif system == "Windows":
        # Windows: %APPDATA%\whspr\models
        app_data = os.environ.get("APPDATA")
        base = Path(app_data) if app_data else Path.home() / "AppData" / "Roaming"
    else:
        # Linux/other: $XDG_DATA_HOME or ~/.local/share
        xdg_data = os.environ.get("XDG_DATA_HOME")
        base = Path(xdg_data) if xdg_data else Path.home() / ".local" / "share"

    return base / APP_NAME / "models"


def compute_sha256(path: Union[str, Path], chunk_size: int = DEFAULT_CHUNK_SIZE) -> str:
    """Compute SHA256 hash of a file, reading it in fixed-size chunks."""
    sha256 = hashlib.sha256()
    with open(path, 'rb') as f:
        for chunk in iter(lambda: f.read(chunk_size), b''):
            sha256.update(chunk)
    return sha256.hexdigest()


def digest_matches(actual: str, expected: str) -> bool:
    """Compare two hex digests ignoring case."""
    return actual.lower() == expected.lower()


class ModelAcquirer:
    """Fetches catalog models into the local cache.

    A model is only ever reported as available once its file hashes to the
    catalog digest. Files that fail the check are deleted.

    Example:
        acquirer = ModelAcquirer()

        # Download if needed, get path
        path = acquirer.fetch("base")

        # Check without touching the network
        if acquirer.is_cached("tiny"):
            path = acquirer.model_path("tiny")

    Concurrent fetches of the same name are serialized within one process.
    Separate processes sharing a cache directory are not coordinated.
    """

    def __init__(
        self,
        cache_dir: Optional[Union[str, Path]] = None,
        base_url: str = DEFAULT_BASE_URL,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
    ):
        """Initialize the acquirer.

        Nothing is created on disk until a fetch needs the cache directory.

        Args:
            cache_dir: Custom path for model storage. Defaults to the platform data dir
            base_url: Remote location of the ggml files
            session: requests session used for downloads
            timeout: Network timeout in seconds, None for the transport default
            chunk_size: Buffer size for hashing and streaming
        """
        self.cache_dir = Path(cache_dir) if cache_dir else default_cache_dir()
        self.base_url = base_url.rstrip("/")
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout
        self.chunk_size = chunk_size

        self._locks: Dict[str, threading.Lock] = {}
        self._locks_guard = threading.Lock()

    @classmethod
    def from_config(cls, config, session: Optional[requests.Session] = None) -> "ModelAcquirer":
        """Build an acquirer from a Config object."""
        return cls(
            cache_dir=config.cache_dir,
            base_url=config.base_url,
            session=session,
            timeout=config.timeout,
            chunk_size=config.chunk_size,
        )

    def _resolve(self, name: str) -> ModelDescriptor:
        model = lookup(name)
        if model is None:
            raise UnknownModelError(name, available_models())
        return model

    def _lock_for(self, name: str) -> threading.Lock:
        with self._locks_guard:
            lock = self._locks.get(name)
            if lock is None:
                lock = self._locks[name] = threading.Lock()
            return lock

    def model_path(self, name: str) -> Path:
        """Get the deterministic cache path of a model.

        Raises:
            UnknownModelError: If name is not in the catalog
        """
        return self.cache_dir / self._resolve(name).filename

    def model_url(self, name: str) -> str:
        """Get the remote URL a model is downloaded from.

        Raises:
            UnknownModelError: If name is not in the catalog
        """
        return f"{self.base_url}/{self._resolve(name).remote_filename}"

    def is_cached(self, name: str) -> bool:
        """Check whether a valid copy of the model is already cached.

        Hashes the cached file if present. Never touches the network and
        never modifies the cache.
        """
        model = self._resolve(name)
        path = self.cache_dir / model.filename
        if not path.is_file():
            return False
        return self._hash_matches(path, model)

    def fetch(self, name: str) -> Path:
        """Get a catalog model, downloading it if necessary.

        Args:
            name: Catalog model name (e.g., "tiny")

        Returns:
            Path to the verified model file

        Raises:
            UnknownModelError: If name is not in the catalog
            CacheDirUnavailableError: If the cache directory cannot be created
            DownloadError: If the transfer fails
            IntegrityMismatchError: If the downloaded file fails verification
            CleanupError: If an invalid file could not be removed
        """
        model = self._resolve(name)

        with self._lock_for(model.name):
            self._ensure_cache_dir(model)
            path = self.cache_dir / model.filename

            if path.exists():
                if self._hash_matches(path, model):
                    logger.info(f"Model already cached: {model.name} ({path})")
                    return path
                logger.warning(f"Cached model {model.name} is corrupt, removing {path}")
                self._unlink(path, model)

            url = f"{self.base_url}/{model.remote_filename}"
            logger.info(f"Downloading {model.name} ({model.size_mb:.0f}MB) from {url}")
            self._download(url, path, model)

            actual = self._hash(path, model)
            if not digest_matches(actual, model.sha256):
                logger.error(
                    f"Downloaded {model.name} failed verification: "
                    f"expected {model.sha256[:16]}..., got {actual[:16]}..."
                )
                self._unlink(path, model)
                raise IntegrityMismatchError(
                    f"Hash mismatch for {model.name}! "
                    f"Expected {model.sha256}, got {actual}",
                    path=path,
                    expected=model.sha256,
                    actual=actual,
                    model=model.name,
                )

            logger.info(f"Model installed: {path}")
            return path

    def remove(self, name: str) -> bool:
        """Delete a cached model.

        Returns:
            True if a file was deleted, False if nothing was cached

        Raises:
            CleanupError: If the file exists but could not be deleted
        """
        model = self._resolve(name)
        path = self.cache_dir / model.filename
        with self._lock_for(model.name):
            if not path.exists():
                return False
            self._unlink(path, model, "cached model")
        logger.info(f"Model deleted: {model.name}")
        return True

    def _ensure_cache_dir(self, model: ModelDescriptor) -> None:
        try:
            self.cache_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise CacheDirUnavailableError(
                f"Cannot create cache directory {self.cache_dir}: {e}",
                path=self.cache_dir,
                model=model.name,
            ) from e

    def _hash(self, path: Path, model: ModelDescriptor) -> str:
        try:
            return compute_sha256(path, self.chunk_size)
        except OSError as e:
            raise AcquireError(f"Cannot read {path} to verify {model.name}: {e}", model=model.name) from e

    def _hash_matches(self, path: Path, model: ModelDescriptor) -> bool:
        return digest_matches(self._hash(path, model), model.sha256)

    def _unlink(self, path: Path, model: ModelDescriptor, what: str = "invalid file") -> None:
        try:
            path.unlink()
        except FileNotFoundError:
            return
        except OSError as e:
            logger.error(f"Failed to remove {what} {path}: {e}")
            raise CleanupError(
                f"Failed to remove {what} {path}: {e}",
                path=path,
                model=model.name,
            ) from e

    def _download(self, url: str, path: Path, model: ModelDescriptor) -> None:
        """Stream url into path. A partial file may remain on failure."""
        try:
            with self.session.get(url, stream=True, timeout=self.timeout) as response:
                if response.status_code != 200:
                    logger.error(f"Download of {model.name} failed: HTTP {response.status_code} from {url}")
                    raise DownloadError(
                        f"Download failed: HTTP {response.status_code} from {url}",
                        url=url,
                        path=path,
                        model=model.name,
                    )
                with open(path, 'wb') as f:
                    for chunk in response.iter_content(chunk_size=self.chunk_size):
                        if chunk:
                            f.write(chunk)
        except requests.exceptions.RequestException as e:
            logger.error(f"Download of {model.name} from {url} failed: {e}")
            raise DownloadError(
                f"Download failed: {url}: {e}", url=url, path=path, model=model.name
            ) from e
        except OSError as e:
            logger.error(f"Writing {path} failed: {e}")
            raise DownloadError(
                f"Download failed: cannot write {path}: {e}", url=url, path=path, model=model.name
            ) from e
