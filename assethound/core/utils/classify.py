"""Text/binary classification for file buffers."""

from assethound.core.constants import BINARY_CONTROL_RATIO, BINARY_SNIFF_BYTES

# Bytes that may legitimately appear in text: common whitespace/control
# characters, printable ASCII and everything >= 0x80 (UTF-8 multibyte).
_TEXT_CHARS = bytes({7, 8, 9, 10, 11, 12, 13, 27} | set(range(0x20, 0x100)))


def is_binary(data: bytes) -> bool:
    """Return True if ``data`` looks like binary content.

    Only the first ``BINARY_SNIFF_BYTES`` are inspected. A NUL byte marks
    the buffer as binary outright; otherwise the buffer is binary when the
    share of non-text bytes exceeds ``BINARY_CONTROL_RATIO``.
    """
    if not data:
        return False

    sample = data[:BINARY_SNIFF_BYTES]
    if b"\x00" in sample:
        return True

    non_text = sample.translate(None, _TEXT_CHARS)
    return len(non_text) / len(sample) > BINARY_CONTROL_RATIO
