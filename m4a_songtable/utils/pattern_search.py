"""
Pattern search utilities including mismatch-tolerant comparison.
"""

from typing import Optional


def loose_compare(window: bytes, pattern: bytes, tolerance: int) -> int:
    """
    Count the bytes that differ between a window and a pattern.

    Counting stops as soon as ``tolerance`` differences have been seen,
    so the result never exceeds ``tolerance``. A window is considered a
    match when the result is strictly less than ``tolerance``; with a
    tolerance of zero or less nothing can match and 0 is returned.

    Args:
        window: Bytes taken from the data being searched
        pattern: Pattern bytes, same length as window
        tolerance: Number of differences that disqualifies the window

    Returns:
        Number of differing bytes, capped at tolerance
    """
    if tolerance <= 0:
        return 0

    differences = 0
    for actual, expected in zip(window, pattern):
        if actual != expected:
            differences += 1
            if differences >= tolerance:
                return differences

    return differences


def loose_search(
    data: bytes,
    pattern: bytes,
    tolerance: int,
    stride: int = 1
) -> Optional[int]:
    """
    Find the first window of data that loosely matches a pattern.

    Only offsets ``0, stride, 2 * stride, ...`` are tried, and only while
    the whole pattern still fits inside the data.

    Args:
        data: Binary data to search
        pattern: Pattern bytes to find
        tolerance: Windows with this many differences or more are rejected
        stride: Distance between candidate offsets

    Returns:
        Offset of the first match, or None
    """
    if stride <= 0:
        raise ValueError(f"stride must be positive, got {stride}")

    pattern_len = len(pattern)
    if pattern_len == 0 or tolerance <= 0:
        return None

    view = memoryview(data)
    last = len(data) - pattern_len

    for offset in range(0, last + 1, stride):
        if loose_compare(view[offset:offset + pattern_len], pattern, tolerance) < tolerance:
            return offset

    return None


def hex_to_bytes(hex_string: str) -> bytes:
    """
    Convert a hex string to bytes.

    Args:
        hex_string: Hex string (e.g., "00B5 0004")

    Returns:
        Bytes representation
    """
    return bytes.fromhex(hex_string.replace(' ', ''))
