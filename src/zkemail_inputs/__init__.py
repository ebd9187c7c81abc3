"""Circuit input generation for zk-email proofs."""

from .binary import bytes_to_bigint, bytes_to_signals, find_subsequence, int8_to_bytes, int32_to_bytes, merge_bytes
from .circuit_inputs import (
    CircuitInputs,
    CircuitType,
    EmailInputs,
    RSAInputs,
    SHAInputs,
    NoopInputs,
    generate_circuit_inputs,
)
from .config import BN254_FIELD_MODULUS, CircuitConfig
from .dkim import (
    DkimResult,
    DkimVerifier,
    generate_inputs_from_dkim,
    generate_inputs_from_email,
    load_dkim_result,
    modulus_from_pem,
    signature_to_int,
)
from .errors import (
    CircuitInputError,
    MalformedDkimResultError,
    MalformedPaddingError,
    OversizedInputError,
    SubstringNotFoundError,
    UnsupportedKeyError,
    UnsupportedVariantError,
    VerificationFailedError,
)
from .field import FIELD_MODULUS, hash_to_field, limbs_to_int, reduce_to_field, sha256_digest, to_limbs
from .sha_padding import PaddedMessage, sha256_pad

__all__ = [
    "BN254_FIELD_MODULUS",
    "CircuitConfig",
    "CircuitInputError",
    "CircuitInputs",
    "CircuitType",
    "DkimResult",
    "DkimVerifier",
    "EmailInputs",
    "FIELD_MODULUS",
    "MalformedDkimResultError",
    "MalformedPaddingError",
    "OversizedInputError",
    "PaddedMessage",
    "RSAInputs",
    "SHAInputs",
    "SubstringNotFoundError",
    "NoopInputs",
    "UnsupportedKeyError",
    "UnsupportedVariantError",
    "VerificationFailedError",
    "bytes_to_bigint",
    "bytes_to_signals",
    "find_subsequence",
    "generate_circuit_inputs",
    "generate_inputs_from_dkim",
    "generate_inputs_from_email",
    "hash_to_field",
    "int8_to_bytes",
    "int32_to_bytes",
    "limbs_to_int",
    "load_dkim_result",
    "merge_bytes",
    "modulus_from_pem",
    "reduce_to_field",
    "sha256_digest",
    "sha256_pad",
    "signature_to_int",
    "to_limbs",
]
