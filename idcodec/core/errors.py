"""Error values for the identity codec. No domain function raises.

A single CodecError value type is tagged with an ErrorKind. Kind values
are stable string codes; the prefix names the layer that produced it:
IIN (identity number), IDC (bit-field codec), ENC (cipher).
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import final


class ErrorKind(Enum):
    """Failure taxonomy. Values are the externally visible error codes."""

    INVALID_LENGTH = "IIN-001"
    INVALID_CHECK_CODE = "IIN-002"
    INVALID_CHARACTER = "IIN-003"
    INVALID_DATE = "IIN-004"
    FIELD_OUT_OF_RANGE = "IIN-005"

    ENCRYPTION_ERROR = "ENC-001"
    DECRYPTION_ERROR = "ENC-002"
    INVALID_KEY = "ENC-003"

    UNSUPPORTED_VERSION = "IDC-001"
    RESERVED_BITS_NOT_ZERO = "IDC-002"
    INVALID_BIT_FIELD = "IDC-003"


_LAYERS: dict[str, str] = {
    "IIN": "identity",
    "ENC": "cipher",
    "IDC": "bitfield",
}


@final
@dataclass(frozen=True, slots=True)
class CodecError:
    """A rejected input, with enough context to report it without lookup.

    field/actual/expected are empty strings when they do not apply.
    """

    kind: ErrorKind
    message: str
    source: str  # "module.function" that produced this error
    field: str = ""
    actual: str = ""
    expected: str = ""

    @property
    def code(self) -> str:
        return self.kind.value

    @property
    def layer(self) -> str:
        """Layer that produced the error: identity, cipher or bitfield."""
        return _LAYERS[self.kind.value.split("-", 1)[0]]

    def with_context(self, context: str) -> CodecError:
        """Return a copy with context prepended to message."""
        return replace(self, message=f"{context}: {self.message}")

    def to_dict(self) -> dict[str, str]:
        """Serialize with stable keys."""
        return {
            "code": self.code,
            "kind": self.kind.name,
            "layer": self.layer,
            "message": self.message,
            "source": self.source,
            "field": self.field,
            "actual": self.actual,
            "expected": self.expected,
        }

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"
