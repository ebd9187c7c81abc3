"""Circuit input assembly for the RSA, SHA and email circuits."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Tuple, Union

from .binary import bytes_to_signals, find_subsequence
from .config import CircuitConfig
from .errors import UnsupportedVariantError
from .field import HashFn, hash_to_field, sha256_digest, to_limbs
from .sha_padding import PaddedMessage, sha256_pad

logger = logging.getLogger(__name__)

Signal = Union[str, List[str]]


class CircuitType(str, Enum):
    RSA = "rsa"
    SHA = "sha"
    TEST = "test"
    EMAIL = "email"

    @classmethod
    def parse(cls, value: str | CircuitType) -> "CircuitType":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError as exc:
            raise UnsupportedVariantError(f"Unsupported circuit type: {value!r}") from exc


@dataclass(frozen=True, slots=True)
class RSAInputs:
    modulus: Tuple[str, ...]
    signature: Tuple[str, ...]
    base_message: Tuple[str, ...]

    circuit = CircuitType.RSA

    def to_dict(self) -> Dict[str, Signal]:
        return {
            "modulus": list(self.modulus),
            "signature": list(self.signature),
            "base_message": list(self.base_message),
        }


@dataclass(frozen=True, slots=True)
class SHAInputs:
    in_padded: PaddedMessage

    circuit = CircuitType.SHA

    def to_dict(self) -> Dict[str, Signal]:
        return {
            "in_padded": bytes_to_signals(self.in_padded.data),
            "in_len_padded_bytes": str(self.in_padded.length),
        }


@dataclass(frozen=True, slots=True)
class EmailInputs:
    modulus: Tuple[str, ...]
    signature: Tuple[str, ...]
    in_padded: PaddedMessage
    in_body_padded: PaddedMessage
    body_hash_idx: int

    circuit = CircuitType.EMAIL

    def to_dict(self) -> Dict[str, Signal]:
        return {
            "modulus": list(self.modulus),
            "signature": list(self.signature),
            "in_padded": bytes_to_signals(self.in_padded.data),
            "in_len_padded_bytes": str(self.in_padded.length),
            "in_body_padded": bytes_to_signals(self.in_body_padded.data),
            "in_body_len_padded_bytes": str(self.in_body_padded.length),
            "body_hash_idx": str(self.body_hash_idx),
        }


@dataclass(frozen=True, slots=True)
class NoopInputs:
    circuit = CircuitType.TEST

    def to_dict(self) -> Dict[str, Signal]:
        return {}


CircuitInputs = Union[RSAInputs, SHAInputs, EmailInputs, NoopInputs]


def generate_circuit_inputs(
    signature: int,
    modulus: int,
    message: bytes,
    body: bytes,
    body_hash: str,
    circuit: CircuitType | str,
    config: CircuitConfig | None = None,
    hash_fn: HashFn = sha256_digest,
) -> CircuitInputs:
    """Build the input record for ``circuit``.

    ``message`` is the DKIM-signed header block and ``body_hash`` the base64
    body hash claimed in its DKIM-Signature header. Only the values the
    selected circuit consumes are computed.
    """
    circuit = CircuitType.parse(circuit)
    cfg = config or CircuitConfig()
    message = bytes(message)
    logger.debug("building %s inputs for %d-byte header, %d-byte body", circuit.value, len(message), len(body))

    if circuit is CircuitType.TEST:
        return NoopInputs()

    if circuit is CircuitType.SHA:
        return SHAInputs(in_padded=sha256_pad(message, cfg.max_header_padded_bytes))

    modulus_limbs = tuple(to_limbs(modulus, cfg.limb_bits, cfg.limb_count))
    signature_limbs = tuple(to_limbs(signature, cfg.limb_bits, cfg.limb_count))

    if circuit is CircuitType.RSA:
        base_message = hash_to_field(message, cfg.field_modulus, hash_fn)
        return RSAInputs(
            modulus=modulus_limbs,
            signature=signature_limbs,
            base_message=tuple(to_limbs(base_message, cfg.limb_bits, cfg.limb_count)),
        )

    header_padded = sha256_pad(message, cfg.max_header_padded_bytes)
    body_padded = sha256_pad(body, cfg.max_body_padded_bytes)
    body_hash_idx = find_subsequence(message, body_hash.encode("utf-8"))
    logger.debug("body hash found at header offset %d", body_hash_idx)
    return EmailInputs(
        modulus=modulus_limbs,
        signature=signature_limbs,
        in_padded=header_padded,
        in_body_padded=body_padded,
        body_hash_idx=body_hash_idx,
    )
