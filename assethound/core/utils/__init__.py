"""Core utilities package."""

from .classify import is_binary
from .hashing import content_digest
from .path_utils import display_path

__all__ = [
    "content_digest",
    "display_path",
    "is_binary",
]
