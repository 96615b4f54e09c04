"""XOR whitening with a fixed 64-bit key. Self-inverse; obfuscation only."""

from __future__ import annotations

from dataclasses import dataclass
from typing import final

from idcodec.core.errors import CodecError, ErrorKind
from idcodec.core.result import Err, Ok

BLOCK_MASK = 0xFFFF_FFFF_FFFF_FFFF


@final
@dataclass(frozen=True, slots=True)
class XorCipher:
    key: int

    def __post_init__(self) -> None:
        if not 0 <= self.key <= BLOCK_MASK:
            raise TypeError(f"XorCipher key must be an unsigned 64-bit int, got {self.key}")

    @staticmethod
    def create(key: int) -> Ok[XorCipher] | Err[CodecError]:
        """Accepts unsigned keys and signed 64-bit keys (as stored in BIGINT columns)."""
        if not isinstance(key, int) or isinstance(key, bool):
            return Err(CodecError(
                kind=ErrorKind.INVALID_KEY,
                message=f"XOR key must be an int, got {type(key).__name__}",
                source="XorCipher.create",
                field="key", actual=type(key).__name__, expected="int",
            ))
        if -(1 << 63) <= key < 0:
            key &= BLOCK_MASK
        if not 0 <= key <= BLOCK_MASK:
            return Err(CodecError(
                kind=ErrorKind.INVALID_KEY,
                message=f"XOR key must fit in 64 bits, got {key}",
                source="XorCipher.create",
                field="key", actual=str(key), expected="a 64-bit integer",
            ))
        return Ok(XorCipher(key=key))

    @property
    def name(self) -> str:
        return "xor64"

    def encrypt(self, plaintext: int) -> int:
        if not 0 <= plaintext <= BLOCK_MASK:
            raise ValueError(f"XOR block must be an unsigned 64-bit int, got {plaintext}")
        return plaintext ^ self.key

    def decrypt(self, ciphertext: int) -> int:
        return self.encrypt(ciphertext)

    def __repr__(self) -> str:
        return "XorCipher(key=<hidden>)"
