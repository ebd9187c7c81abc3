"""Boundary to the DKIM verifier and public-key parser."""

from __future__ import annotations

import base64
import binascii
import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Protocol

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

from .binary import bytes_to_bigint
from .circuit_inputs import CircuitInputs, CircuitType, generate_circuit_inputs
from .config import CircuitConfig
from .errors import MalformedDkimResultError, UnsupportedKeyError


def _b64decode_field(raw: Dict[str, Any], name: str) -> bytes:
    try:
        return base64.b64decode(raw[name], validate=True)
    except KeyError as exc:
        raise MalformedDkimResultError(f"DKIM result is missing {name!r}") from exc
    except (binascii.Error, TypeError, ValueError) as exc:
        raise MalformedDkimResultError(f"{name} must be base64 encoded") from exc


def _text_field(raw: Dict[str, Any], name: str) -> str:
    try:
        value = raw[name]
    except KeyError as exc:
        raise MalformedDkimResultError(f"DKIM result is missing {name!r}") from exc
    if not isinstance(value, str):
        raise MalformedDkimResultError(f"{name} must be a string")
    return value


@dataclass(frozen=True, slots=True)
class DkimResult:
    """Signed parts of a verified email.

    Stored as JSON with ``signature``, ``signed_header`` and ``body`` base64
    encoded, since canonicalized headers and bodies may hold 8-bit bytes.
    """

    signature: bytes
    signed_header: bytes
    body: bytes
    body_hash: str
    public_key_pem: str

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "DkimResult":
        if not isinstance(raw, dict):
            raise MalformedDkimResultError(f"DKIM result must be a JSON object, got {type(raw).__name__}")
        return cls(
            signature=_b64decode_field(raw, "signature"),
            signed_header=_b64decode_field(raw, "signed_header"),
            body=_b64decode_field(raw, "body"),
            body_hash=_text_field(raw, "body_hash"),
            public_key_pem=_text_field(raw, "public_key_pem"),
        )

    def to_dict(self) -> Dict[str, str]:
        return {
            "signature": base64.b64encode(self.signature).decode("ascii"),
            "signed_header": base64.b64encode(self.signed_header).decode("ascii"),
            "body": base64.b64encode(self.body).decode("ascii"),
            "body_hash": self.body_hash,
            "public_key_pem": self.public_key_pem,
        }


class DkimVerifier(Protocol):
    def verify(self, raw_email: bytes) -> DkimResult:
        """Return the signed parts of ``raw_email`` or raise VerificationFailedError."""
        ...


def load_dkim_result(path: Path) -> DkimResult:
    with path.open("r", encoding="utf-8") as handle:
        try:
            raw = json.load(handle)
        except json.JSONDecodeError as exc:
            raise MalformedDkimResultError(f"{path} is not valid JSON: {exc}") from exc
    return DkimResult.from_dict(raw)


def signature_to_int(signature: bytes) -> int:
    return bytes_to_bigint(signature)


def modulus_from_pem(pem: str | bytes) -> int:
    try:
        data = pem.encode("ascii") if isinstance(pem, str) else pem
        public_key = serialization.load_pem_public_key(data)
    except (ValueError, UnsupportedAlgorithm) as exc:
        raise UnsupportedKeyError(f"Could not parse DKIM public key: {exc}") from exc
    if not isinstance(public_key, rsa.RSAPublicKey):
        raise UnsupportedKeyError(f"Expected an RSA public key, got {type(public_key).__name__}")
    return public_key.public_numbers().n


def generate_inputs_from_dkim(
    result: DkimResult,
    circuit: CircuitType | str = CircuitType.EMAIL,
    config: CircuitConfig | None = None,
) -> CircuitInputs:
    return generate_circuit_inputs(
        signature=signature_to_int(result.signature),
        modulus=modulus_from_pem(result.public_key_pem),
        message=result.signed_header,
        body=result.body,
        body_hash=result.body_hash,
        circuit=circuit,
        config=config,
    )


def generate_inputs_from_email(
    raw_email: bytes,
    verifier: DkimVerifier,
    circuit: CircuitType | str = CircuitType.EMAIL,
    config: CircuitConfig | None = None,
) -> CircuitInputs:
    """Verify ``raw_email`` with ``verifier`` and build inputs from its signed parts."""
    return generate_inputs_from_dkim(verifier.verify(raw_email), circuit, config)
