"""IdentityCodec: parse -> bit-field pack -> optional cipher, and back.

encode() returns the (optionally encrypted) 64-bit value; decode()
accepts it as unsigned or as a signed 64-bit int (a BIGINT column).
Errors from the identity and bit-field layers pass through unchanged.
Failures raised inside a cipher come back as ENC-001 / ENC-002 errors.

Factories:
    plain_codec()                       no cipher
    speck64_codec(key, params=STANDARD) SPECK64, int-word or byte key
    xor_codec(key)                      64-bit XOR whitening
    aes_ctr_codec(key)                  AES-128/CTR, 16-byte key
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import final

from idcodec.cipher.aes_ctr import AesCtrCipher
from idcodec.cipher.speck import Speck64Cipher
from idcodec.cipher.xor import XorCipher
from idcodec.codec.bitfield import (
    INT64_MIN,
    UINT64_MASK,
    pack,
    to_unsigned_int64,
    unpack,
)
from idcodec.core.errors import CodecError, ErrorKind
from idcodec.core.identity import IdentityNumber, mask_raw
from idcodec.core.result import Err, Ok
from idcodec.infra.config import STANDARD, SpeckParams
from idcodec.infra.protocols import Cipher

logger = logging.getLogger(__name__)


def _cipher_error(kind: ErrorKind, cipher: Cipher, detail: str, source: str) -> Err[CodecError]:
    verb = "encryption" if kind is ErrorKind.ENCRYPTION_ERROR else "decryption"
    return Err(CodecError(
        kind=kind,
        message=f"{cipher.name} {verb} failed: {detail}",
        source=source,
        field="cipher", actual=cipher.name,
    ))


@final
@dataclass(frozen=True, slots=True)
class IdentityCodec:
    """Stateless composition of the identity, bit-field and cipher layers."""

    cipher: Cipher | None = None

    @property
    def name(self) -> str:
        return "plain" if self.cipher is None else self.cipher.name

    def encode(self, identity: str | IdentityNumber) -> Ok[int] | Err[CodecError]:
        """Encode a raw string or a parsed IdentityNumber to a 64-bit value."""
        if isinstance(identity, IdentityNumber):
            parsed: Ok[IdentityNumber] | Err[CodecError] = Ok(identity)
        else:
            parsed = IdentityNumber.parse(identity)
        result = parsed.bind(pack).bind(self._encrypt)
        if isinstance(result, Err):
            shown = identity.masked() if isinstance(identity, IdentityNumber) else mask_raw(identity)
            logger.debug("encode rejected %s: %s", shown, result.error)
        return result

    def decode(self, value: int) -> Ok[IdentityNumber] | Err[CodecError]:
        """Decode an encoded value back to its IdentityNumber."""
        if INT64_MIN <= value < 0:
            value = to_unsigned_int64(value)
        if not 0 <= value <= UINT64_MASK:
            return Err(CodecError(
                kind=ErrorKind.INVALID_BIT_FIELD,
                message=f"encoded value does not fit in 64 bits: {value}",
                source="IdentityCodec.decode",
                field="value", actual=str(value), expected="a 64-bit integer",
            ))
        result = self._decrypt(value).bind(unpack)
        if isinstance(result, Err):
            logger.debug("decode rejected value via %s: %s", self.name, result.error)
        return result

    def decode_str(self, value: int) -> Ok[str] | Err[CodecError]:
        """Decode to the canonical 18-character string."""
        return self.decode(value).map(lambda identity: identity.number)

    def _encrypt(self, packed: int) -> Ok[int] | Err[CodecError]:
        if self.cipher is None:
            return Ok(packed)
        source = "IdentityCodec.encode"
        try:
            out = self.cipher.encrypt(packed)
        except Exception as exc:  # noqa: BLE001
            detail = f"{type(exc).__name__}: {exc}"
            return _cipher_error(ErrorKind.ENCRYPTION_ERROR, self.cipher, detail, source)
        if not 0 <= out <= UINT64_MASK:
            return _cipher_error(
                ErrorKind.ENCRYPTION_ERROR, self.cipher, f"output {out} outside 64 bits", source,
            )
        return Ok(out)

    def _decrypt(self, value: int) -> Ok[int] | Err[CodecError]:
        if self.cipher is None:
            return Ok(value)
        source = "IdentityCodec.decode"
        try:
            out = self.cipher.decrypt(value)
        except Exception as exc:  # noqa: BLE001
            detail = f"{type(exc).__name__}: {exc}"
            return _cipher_error(ErrorKind.DECRYPTION_ERROR, self.cipher, detail, source)
        if not 0 <= out <= UINT64_MASK:
            return _cipher_error(
                ErrorKind.DECRYPTION_ERROR, self.cipher, f"output {out} outside 64 bits", source,
            )
        return Ok(out)


# ---------------------------------------------------------------------------
# Factories
# ---------------------------------------------------------------------------


def _with_cipher(cipher: Cipher) -> IdentityCodec:
    logger.debug("identity codec configured with %s", cipher.name)
    return IdentityCodec(cipher=cipher)


def plain_codec() -> IdentityCodec:
    """Bit-field encoding only, no encryption."""
    return IdentityCodec()


def speck64_codec(
    key: bytes | Sequence[int], params: SpeckParams = STANDARD,
) -> Ok[IdentityCodec] | Err[CodecError]:
    """SPECK64-encrypted codec. Standard key: 4 words or 16 little-endian bytes."""
    return Speck64Cipher.create(key, params).map(_with_cipher)


def xor_codec(key: int) -> Ok[IdentityCodec] | Err[CodecError]:
    return XorCipher.create(key).map(_with_cipher)


def aes_ctr_codec(key: bytes) -> Ok[IdentityCodec] | Err[CodecError]:
    return AesCtrCipher.create(key).map(_with_cipher)
