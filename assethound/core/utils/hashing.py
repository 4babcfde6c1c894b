"""Content digest helpers used for content-addressed asset names."""

import hashlib

from assethound.core.constants import DIGEST_SIZE_BYTES


def content_digest(data: bytes) -> str:
    """Return a stable fixed-width lowercase hex digest of ``data``.

    Uses unkeyed BLAKE2b truncated to 64 bits, so the result is always
    16 hex characters and identical bytes always produce identical digests
    across runs and machines.

    Args:
        data: Raw file content

    Returns:
        Lowercase hexadecimal digest string
    """
    return hashlib.blake2b(data, digest_size=DIGEST_SIZE_BYTES).hexdigest()
