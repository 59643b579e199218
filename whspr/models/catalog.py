"""Model catalog - the fixed table of known whisper.cpp models.

Each entry names a ggml model file published upstream together with the
SHA256 digest the downloaded file must reproduce. The table is built once at
import time and never changes.
"""

import re
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

_SHA256_RE = re.compile(r"^[0-9a-f]{64}$")


@dataclass(frozen=True)
class ModelDescriptor:
    """Remote identity of a downloadable model."""
    name: str                           # "tiny"
    sha256: str                         # Expected hash, lowercase hex
    size_mb: float                      # Approximate, informational only

    def __post_init__(self):
        if not self.name:
            raise ValueError("Model name must not be empty")
        if not _SHA256_RE.match(self.sha256):
            raise ValueError(f"Malformed SHA256 digest for model {self.name}: {self.sha256!r}")

    @property
    def filename(self) -> str:
        return f"{self.name}.bin"

    @property
    def remote_filename(self) -> str:
        return f"ggml-{self.name}.bin"

    def to_dict(self) -> Dict[str, object]:
        return {
            "name": self.name,
            "sha256": self.sha256,
            "size_mb": self.size_mb,
        }


# Registry of known models with verified hashes
MODELS: Tuple[ModelDescriptor, ...] = (
    ModelDescriptor(
        name="tiny",
        sha256="be07e048e1e599ad46341c8d2a135645097a538221678b7acdd1b1919c6e1b21",
        size_mb=77.7,
    ),
    ModelDescriptor(
        name="base",
        sha256="60ed5bc3dd14eea856493d334349b405782ddcaf0028d4b5df4088345fba2efe",
        size_mb=148.0,
    ),
    ModelDescriptor(
        name="small",
        sha256="1be3a9b2063867b937e64e2ec7483364a79917e157fa98c5d94b5c1fffea987b",
        size_mb=488.0,
    ),
    ModelDescriptor(
        name="medium",
        sha256="6c14d5adee5f86394037b4e4e8b59f1673b6cee10e3cf0b11bbdbee79c156208",
        size_mb=1530.0,
    ),
    ModelDescriptor(
        name="large-v3",
        sha256="64d182b440b98d5203c4f9bd541544d84c605196c4f7b845dfa11fb23594d1e2",
        size_mb=3100.0,
    ),
)


def _check_unique(models: Tuple[ModelDescriptor, ...]) -> None:
    seen = set()
    for model in models:
        if model.name in seen:
            raise ValueError(f"Duplicate model name in catalog: {model.name}")
        seen.add(model.name)


_check_unique(MODELS)


def lookup(name: str) -> Optional[ModelDescriptor]:
    """Find a model by exact, case-sensitive name.

    Args:
        name: Model name, e.g. "tiny" or "large-v3"

    Returns:
        The matching descriptor, or None if the catalog has no such model
    """
    for model in MODELS:
        if model.name == name:
            return model
    return None


def available_models() -> List[str]:
    """Names of all catalog models, in catalog order."""
    return [model.name for model in MODELS]
