"""SHA-256 message padding extended to a fixed circuit buffer size.

The circuit consumes the message schedule input directly, so the padding is
computed here and handed over as a buffer of exactly ``max_len`` bytes plus
the offset where the real padding ends.

The length suffix is a 4-byte big-endian bit count rather than the 8-byte
field of FIPS 180-4. For messages under 2**32 bits the bytes written are the
same as the low half of the standard field. Messages whose bit length does
not fit 32 bits are rejected.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np

from .binary import int8_to_bytes, int32_to_bytes, merge_bytes
from .errors import MalformedPaddingError, OversizedInputError

logger = logging.getLogger(__name__)

BLOCK_BITS = 512
LENGTH_FIELD_BYTES = 4
DELIMITER = 0x80


@dataclass(frozen=True, slots=True)
class PaddedMessage:
    data: bytes
    length: int

    @property
    def max_len(self) -> int:
        return len(self.data)

    @property
    def length_bits(self) -> int:
        return self.length * 8


def sha256_pad(message: bytes, max_len: int) -> PaddedMessage:
    message = bytes(message)
    length_bits = len(message) * 8
    length_field = int32_to_bytes(length_bits)

    padded = merge_bytes(message, int8_to_bytes(DELIMITER))
    fill = (-(len(padded) * 8 + len(length_field) * 8) % BLOCK_BITS) // 8
    padded = merge_bytes(padded, bytes(fill))
    padded = merge_bytes(padded, length_field)
    if (len(padded) * 8) % BLOCK_BITS != 0:
        raise MalformedPaddingError(f"padded length {len(padded)} bytes is not a multiple of {BLOCK_BITS} bits")

    true_length = len(padded)
    if true_length > max_len:
        raise OversizedInputError(
            f"message of {len(message)} bytes pads to {true_length} bytes, above the {max_len}-byte maximum"
        )

    buffer = np.zeros(max_len, dtype=np.uint8)
    buffer[:true_length] = np.frombuffer(padded, dtype=np.uint8)
    data = buffer.tobytes()
    if len(data) != max_len:
        raise MalformedPaddingError(f"padded buffer is {len(data)} bytes, expected {max_len}")

    logger.debug("padded %d-byte message to %d bytes (max %d)", len(message), true_length, max_len)
    return PaddedMessage(data=data, length=true_length)
