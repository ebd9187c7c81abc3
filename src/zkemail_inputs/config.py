"""Circuit profile configuration."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict

BN254_FIELD_MODULUS = 21888242871839275222246405745257275088548364400416034343698204186575808495617

SHA256_BLOCK_BYTES = 64


@dataclass(frozen=True, slots=True)
class CircuitConfig:
    max_header_padded_bytes: int = 1024
    max_body_padded_bytes: int = 1536
    field_modulus: int = BN254_FIELD_MODULUS
    limb_bits: int = 121
    limb_count: int = 17

    def __post_init__(self) -> None:
        for name in ("max_header_padded_bytes", "max_body_padded_bytes"):
            value = getattr(self, name)
            if value <= 0 or value % SHA256_BLOCK_BYTES:
                raise ValueError(f"{name} must be a positive multiple of {SHA256_BLOCK_BYTES}, got {value}")
        if self.field_modulus < 2:
            raise ValueError("field_modulus must be at least 2")
        if self.limb_bits <= 0 or self.limb_bits >= self.field_modulus.bit_length():
            raise ValueError(
                f"limb_bits must be in [1, {self.field_modulus.bit_length() - 1}] for this field, got {self.limb_bits}"
            )
        if self.limb_count <= 0:
            raise ValueError("limb_count must be positive")

    @property
    def max_limb_value_bits(self) -> int:
        return self.limb_bits * self.limb_count

    def to_dict(self) -> Dict[str, Any]:
        payload = asdict(self)
        # stored as a decimal string
        payload["field_modulus"] = str(self.field_modulus)
        return payload

    def dump(self, path: Path) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as handle:
            json.dump(self.to_dict(), handle, indent=2)

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "CircuitConfig":
        if not isinstance(raw, dict):
            raise ValueError(f"Circuit config must be a JSON object, got {type(raw).__name__}")
        values = dict(raw)
        if "field_modulus" in values:
            values["field_modulus"] = int(values["field_modulus"])
        try:
            return cls(**values)
        except TypeError as exc:
            raise ValueError(f"Invalid circuit config: {exc}") from exc

    @classmethod
    def load(cls, path: Path) -> "CircuitConfig":
        with path.open("r", encoding="utf-8") as handle:
            raw = json.load(handle)
        return cls.from_dict(raw)
