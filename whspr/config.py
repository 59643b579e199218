"""Configuration management for whspr."""
import os
from dataclasses import dataclass
from typing import Optional
from dotenv import load_dotenv

from .exceptions import ConfigurationError
from .models.store import DEFAULT_BASE_URL, DEFAULT_CHUNK_SIZE


@dataclass
class Config:
    """whspr configuration.

    Attributes:
        cache_dir: Directory holding downloaded models (None = platform data dir)
        base_url: Remote location the ggml model files are fetched from
        timeout: Network timeout in seconds (None = transport default)
        chunk_size: Read/write buffer size in bytes for hashing and downloads
        log_level: Default logging level name
    """

    # Storage
    cache_dir: Optional[str] = None

    # Network
    base_url: str = DEFAULT_BASE_URL
    timeout: Optional[float] = None

    # Hashing / streaming
    chunk_size: int = DEFAULT_CHUNK_SIZE

    # Logging
    log_level: str = "INFO"

    def __post_init__(self):
        try:
            self.chunk_size = int(self.chunk_size)
            if self.timeout is not None:
                self.timeout = float(self.timeout)
        except (TypeError, ValueError) as e:
            raise ConfigurationError(f"Invalid numeric setting: {e}") from e
        if self.chunk_size <= 0:
            raise ConfigurationError(f"chunk_size must be positive, got {self.chunk_size}")
        if self.timeout is not None and self.timeout <= 0:
            raise ConfigurationError(f"timeout must be positive, got {self.timeout}")
        self.base_url = self.base_url.rstrip("/")

    @classmethod
    def from_env(cls, env_file: Optional[str] = None) -> "Config":
        """Load configuration from environment variables.

        Args:
            env_file: Path to .env file (optional)

        Returns:
            Config instance with values from environment

        Raises:
            ConfigurationError: If a numeric variable cannot be parsed
        """
        if env_file:
            load_dotenv(env_file)
        else:
            load_dotenv()

        return cls(
            cache_dir=os.getenv("WHSPR_CACHE_DIR") or None,
            base_url=os.getenv("WHSPR_BASE_URL", DEFAULT_BASE_URL),
            timeout=_parse_number(float, "WHSPR_TIMEOUT", None),
            chunk_size=_parse_number(int, "WHSPR_CHUNK_SIZE", DEFAULT_CHUNK_SIZE),
            log_level=os.getenv("WHSPR_LOG_LEVEL", "INFO").upper(),
        )

    @classmethod
    def from_dict(cls, config_dict: dict) -> "Config":
        """Load configuration from dictionary.

        Args:
            config_dict: Dictionary with configuration values

        Returns:
            Config instance
        """
        return cls(**{k: v for k, v in config_dict.items() if k in cls.__annotations__})


def _parse_number(kind, var: str, default):
    raw = os.getenv(var)
    if raw is None or raw.strip() == "":
        return default
    try:
        return kind(raw)
    except ValueError:
        raise ConfigurationError(f"{var} must be a {kind.__name__}, got {raw!r}")
