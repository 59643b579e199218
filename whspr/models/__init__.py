"""whspr model store - catalog lookup, download, cache, and verification.

This module provides functionality for:
- Looking up the fixed catalog of whisper.cpp models
- Downloading ggml model files into the local cache
- Verifying model hashes and removing corrupt files
"""

from .catalog import MODELS, ModelDescriptor, available_models, lookup
from .store import ModelAcquirer, compute_sha256, default_cache_dir, digest_matches

__all__ = [
    "MODELS",
    "ModelDescriptor",
    "ModelAcquirer",
    "available_models",
    "compute_sha256",
    "default_cache_dir",
    "digest_matches",
    "lookup",
]
