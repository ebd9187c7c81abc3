"""Field reduction and limb encoding for circuit big-integer inputs."""

from __future__ import annotations

import hashlib
from typing import Callable, List, Sequence

from .binary import bytes_to_bigint
from .config import BN254_FIELD_MODULUS
from .errors import OversizedInputError

FIELD_MODULUS = BN254_FIELD_MODULUS

HashFn = Callable[[bytes], bytes]


def sha256_digest(data: bytes) -> bytes:
    return hashlib.sha256(data).digest()


def reduce_to_field(value: int, modulus: int = FIELD_MODULUS) -> int:
    if value < 0:
        raise ValueError("Field elements must be non-negative")
    return value % modulus


def hash_to_field(data: bytes, modulus: int = FIELD_MODULUS, hash_fn: HashFn = sha256_digest) -> int:
    """Hash ``data`` and read the digest as a big-endian integer reduced into the field."""
    digest = hash_fn(bytes(data))
    return reduce_to_field(bytes_to_bigint(digest), modulus)


def to_limbs(value: int, limb_bits: int, limb_count: int | None = None) -> List[str]:
    """Split ``value`` into ``limb_bits``-wide chunks, least significant first.

    Without ``limb_count`` the minimal number of limbs is returned (one for
    zero). With a fixed count the result is zero-extended to that many limbs;
    a value wider than ``limb_bits * limb_count`` raises OversizedInputError.
    """
    if value < 0:
        raise ValueError("Limb encoding requires a non-negative integer")
    if limb_bits <= 0:
        raise ValueError("limb_bits must be positive")
    needed = max(1, -(-value.bit_length() // limb_bits))
    if limb_count is None:
        limb_count = needed
    elif needed > limb_count:
        raise OversizedInputError(
            f"{value.bit_length()}-bit value does not fit in {limb_count} limbs of {limb_bits} bits"
        )
    mask = (1 << limb_bits) - 1
    return [str((value >> (i * limb_bits)) & mask) for i in range(limb_count)]


def limbs_to_int(limbs: Sequence[int | str], limb_bits: int) -> int:
    value = 0
    for limb in reversed(limbs):
        chunk = int(limb)
        if not 0 <= chunk < 1 << limb_bits:
            raise ValueError(f"limb {chunk} is outside [0, 2**{limb_bits})")
        value = (value << limb_bits) | chunk
    return value
