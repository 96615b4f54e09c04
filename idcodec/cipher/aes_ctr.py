"""AES-128 in CTR mode applied to the 8 big-endian bytes of a value.

The IV is fixed at zero, so the transform is a deterministic XOR with
the first keystream block: equal plaintexts give equal ciphertexts.
Suitable for compact, reversible tokens only.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import final

from cryptography.hazmat.primitives.ciphers import Cipher as _AesCipher
from cryptography.hazmat.primitives.ciphers import algorithms, modes

from idcodec.core.errors import CodecError, ErrorKind
from idcodec.core.result import Err, Ok

logger = logging.getLogger(__name__)

AES_KEY_BYTES = 16
BLOCK_BYTES = 8
BLOCK_MASK = 0xFFFF_FFFF_FFFF_FFFF
_ZERO_IV = bytes(16)


@final
@dataclass(frozen=True, slots=True)
class AesCtrCipher:
    key: bytes = field(repr=False)

    def __post_init__(self) -> None:
        if len(self.key) != AES_KEY_BYTES:
            raise TypeError(f"AesCtrCipher key must be {AES_KEY_BYTES} bytes, got {len(self.key)}")

    @staticmethod
    def create(key: bytes) -> Ok[AesCtrCipher] | Err[CodecError]:
        if not isinstance(key, (bytes, bytearray)):
            return Err(CodecError(
                kind=ErrorKind.INVALID_KEY,
                message=f"AES key must be bytes, got {type(key).__name__}",
                source="AesCtrCipher.create",
                field="key", actual=type(key).__name__, expected="bytes",
            ))
        if len(key) != AES_KEY_BYTES:
            return Err(CodecError(
                kind=ErrorKind.INVALID_KEY,
                message=f"AES key length must be {AES_KEY_BYTES} bytes, but got {len(key)} bytes",
                source="AesCtrCipher.create",
                field="key", actual=str(len(key)), expected=str(AES_KEY_BYTES),
            ))
        logger.debug("AES-128/CTR cipher configured")
        return Ok(AesCtrCipher(key=bytes(key)))

    @property
    def name(self) -> str:
        return "aes128-ctr"

    def _apply(self, value: int) -> int:
        if not 0 <= value <= BLOCK_MASK:
            raise ValueError(f"AES-CTR block must be an unsigned 64-bit int, got {value}")
        ctx = _AesCipher(algorithms.AES(self.key), modes.CTR(_ZERO_IV)).encryptor()
        out = ctx.update(value.to_bytes(BLOCK_BYTES, "big")) + ctx.finalize()
        return int.from_bytes(out, "big")

    def encrypt(self, plaintext: int) -> int:
        return self._apply(plaintext)

    def decrypt(self, ciphertext: int) -> int:
        # CTR decryption is the same keystream XOR.
        return self._apply(ciphertext)
