"""Fixed-width byte encoders and byte-buffer helpers."""

from __future__ import annotations

from typing import List

import numpy as np

from .errors import OversizedInputError, SubstringNotFoundError


def int32_to_bytes(num: int) -> bytes:
    """Big-endian unsigned 32-bit encoding of ``num``."""
    if not 0 <= num < 1 << 32:
        raise OversizedInputError(f"{num} does not fit in an unsigned 32-bit field")
    return np.array([num], dtype=">u4").tobytes()


def int8_to_bytes(num: int) -> bytes:
    if not 0 <= num < 1 << 8:
        raise OversizedInputError(f"{num} does not fit in an unsigned 8-bit field")
    return np.array([num], dtype=np.uint8).tobytes()


def merge_bytes(a: bytes, b: bytes) -> bytes:
    return bytes(a) + bytes(b)


def bytes_to_bigint(data: bytes) -> int:
    return int.from_bytes(data, "big")


def bytes_to_signals(data: bytes) -> List[str]:
    """Render each byte as a decimal string, the way circuit signals are fed."""
    return [str(value) for value in np.frombuffer(bytes(data), dtype=np.uint8).tolist()]


def find_subsequence(haystack: bytes, needle: bytes) -> int:
    index = bytes(haystack).find(bytes(needle))
    if index < 0:
        raise SubstringNotFoundError(f"{bytes(needle)!r} not found in {len(haystack)}-byte buffer")
    return index
