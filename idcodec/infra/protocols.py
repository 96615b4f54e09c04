"""Cipher strategy consumed by the codec composer.

The composer depends on this abstraction only; SPECK64, XOR and AES-CTR
implement it. Implementations are deterministic permutations of the
unsigned 64-bit range and hold no mutable state, so one instance may be
shared freely across threads.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Cipher(Protocol):
    """64-bit block transform.

    Invariants:
      - decrypt(encrypt(x)) == x and encrypt(decrypt(x)) == x
        for every x in [0, 2**64).
      - Values outside [0, 2**64) raise ValueError.
    """

    @property
    def name(self) -> str: ...

    def encrypt(self, plaintext: int) -> int: ...

    def decrypt(self, ciphertext: int) -> int: ...
