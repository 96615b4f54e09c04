"""SPECK64 block cipher over a 64-bit integer.

The block is split into two 32-bit words, high = v >> 32 and
low = v & 0xFFFFFFFF. All word arithmetic wraps modulo 2**32.

Key words are ordered (l0, l1, ..., k0): every word but the last seeds
the rotating schedule buffer, the last is the first round key. With
STANDARD parameters and four words this is SPECK64/128.

Lightweight and unauthenticated. Ciphertext is malleable; pair it with
a MAC where tampering matters.
"""

from __future__ import annotations

import logging
import struct
from collections.abc import Sequence
from dataclasses import dataclass
from typing import final

from idcodec.core.errors import CodecError, ErrorKind
from idcodec.core.result import Err, Ok
from idcodec.infra.config import STANDARD, SpeckParams

logger = logging.getLogger(__name__)

WORD_MASK = 0xFFFFFFFF
BLOCK_MASK = 0xFFFF_FFFF_FFFF_FFFF

MIN_KEY_WORDS = 2
MIN_KEY_BYTES = 8


def _rol(value: int, bits: int) -> int:
    return ((value << bits) | (value >> (32 - bits))) & WORD_MASK


def _ror(value: int, bits: int) -> int:
    return ((value >> bits) | (value << (32 - bits))) & WORD_MASK


def expand_key(key: Sequence[int], params: SpeckParams) -> tuple[int, ...]:
    """Derive params.rounds round keys from at least two 32-bit key words."""
    schedule = list(key[:-1])
    round_keys = [key[-1]]
    for i in range(params.rounds - 1):
        j = i % len(schedule)
        schedule[j] = ((_ror(schedule[j], params.alpha) + round_keys[i]) & WORD_MASK) ^ i
        round_keys.append(_rol(round_keys[i], params.beta) ^ schedule[j])
    return tuple(round_keys)


def key_words_from_bytes(key: bytes) -> Ok[tuple[int, ...]] | Err[CodecError]:
    """Read a byte key as little-endian 32-bit words."""
    if len(key) < MIN_KEY_BYTES or len(key) % 4 != 0:
        return Err(CodecError(
            kind=ErrorKind.INVALID_KEY,
            message=(
                f"SPECK64 byte key must be at least {MIN_KEY_BYTES} bytes "
                f"and a multiple of 4, got {len(key)}"
            ),
            source="speck.key_words_from_bytes",
            field="key", actual=str(len(key)), expected=f">= {MIN_KEY_BYTES}, multiple of 4",
        ))
    return Ok(struct.unpack(f"<{len(key) // 4}I", key))


def _check_block(value: int) -> None:
    if not 0 <= value <= BLOCK_MASK:
        raise ValueError(f"SPECK64 block must be an unsigned 64-bit int, got {value}")


@final
@dataclass(frozen=True, slots=True)
class Speck64Cipher:
    """SPECK64 with a precomputed, immutable round-key schedule."""

    round_keys: tuple[int, ...]
    alpha: int
    beta: int

    def __post_init__(self) -> None:
        if not self.round_keys:
            raise TypeError("Speck64Cipher requires at least one round key")
        if any(not 0 <= k <= WORD_MASK for k in self.round_keys):
            raise TypeError("Speck64Cipher round keys must be 32-bit unsigned words")

    @staticmethod
    def create(
        key: bytes | Sequence[int], params: SpeckParams = STANDARD,
    ) -> Ok[Speck64Cipher] | Err[CodecError]:
        """Build the key schedule from 32-bit words or from little-endian key bytes.

        A 16-byte key and the four words it encodes produce identical ciphers.
        """
        if isinstance(key, (bytes, bytearray)):
            match key_words_from_bytes(bytes(key)):
                case Err() as e:
                    return e
                case Ok(w):
                    words: Sequence[int] = w
        else:
            words = key
        if len(words) < MIN_KEY_WORDS:
            return Err(CodecError(
                kind=ErrorKind.INVALID_KEY,
                message=f"SPECK64 key must contain at least {MIN_KEY_WORDS} words, got {len(words)}",
                source="Speck64Cipher.create",
                field="key", actual=str(len(words)), expected=f">= {MIN_KEY_WORDS}",
            ))
        for i, word in enumerate(words):
            if not isinstance(word, int) or not 0 <= word <= WORD_MASK:
                return Err(CodecError(
                    kind=ErrorKind.INVALID_KEY,
                    message=f"SPECK64 key word {i} is not a 32-bit unsigned value",
                    source="Speck64Cipher.create",
                    field=f"key[{i}]", actual=str(word), expected=f"[0, {WORD_MASK}]",
                ))
        logger.debug(
            "SPECK64 key schedule built: %d key words, rounds=%d alpha=%d beta=%d",
            len(words), params.rounds, params.alpha, params.beta,
        )
        return Ok(Speck64Cipher(
            round_keys=expand_key(words, params), alpha=params.alpha, beta=params.beta,
        ))

    @property
    def name(self) -> str:
        return "speck64"

    @property
    def rounds(self) -> int:
        return len(self.round_keys)

    def encrypt(self, plaintext: int) -> int:
        _check_block(plaintext)
        high = plaintext >> 32
        low = plaintext & WORD_MASK
        for k in self.round_keys:
            high = ((_ror(high, self.alpha) + low) & WORD_MASK) ^ k
            low = _rol(low, self.beta) ^ high
        return (high << 32) | low

    def decrypt(self, ciphertext: int) -> int:
        _check_block(ciphertext)
        high = ciphertext >> 32
        low = ciphertext & WORD_MASK
        for k in reversed(self.round_keys):
            low = _ror(low ^ high, self.beta)
            high = _rol(((high ^ k) - low) & WORD_MASK, self.alpha)
        return (high << 32) | low

    def __repr__(self) -> str:
        # Round keys are key material.
        return f"Speck64Cipher(rounds={self.rounds}, alpha={self.alpha}, beta={self.beta})"
