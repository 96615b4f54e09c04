"""Tests for idcodec.cipher.speck — SPECK64 key schedule and block transform."""

from __future__ import annotations

import dataclasses
from concurrent.futures import ThreadPoolExecutor

import pytest
from hypothesis import given

from idcodec.cipher.speck import Speck64Cipher, expand_key, key_words_from_bytes
from idcodec.core.errors import ErrorKind
from idcodec.core.result import Err, unwrap
from idcodec.infra.config import HIGH_PERFORMANCE, HIGH_SECURITY, STANDARD, SpeckParams
from idcodec.infra.protocols import Cipher

from tests.conftest import (
    ALT_KEY_1,
    ALT_KEY_2,
    DEFAULT_KEY_BYTES,
    DEFAULT_KEY_WORDS,
    key_words,
    uint64s,
)

# SPECK64/128 reference vector, key words ordered (l0, l1, l2, k0).
REF_KEY = (0x0B0A0908, 0x13121110, 0x1B1A1918, 0x03020100)
REF_KEY_BYTES = bytes.fromhex("08090a0b" "10111213" "18191a1b" "00010203")
REF_PLAINTEXT = 0x3B7265747475432D
REF_CIPHERTEXT = 0x8C6FA548454E028B

BOUNDARY_VALUES = (
    0,
    1,
    (1 << 64) - 1,
    (1 << 63) - 1,
    1 << 63,
    0x5555555555555555,
    0xAAAAAAAAAAAAAAAA,
)


def _speck(
    key: bytes | tuple[int, ...] | list[int], params: SpeckParams = STANDARD,
) -> Speck64Cipher:
    return unwrap(Speck64Cipher.create(key, params))


# ---------------------------------------------------------------------------
# Known answers
# ---------------------------------------------------------------------------


class TestReferenceVector:
    def test_encrypt(self) -> None:
        assert _speck(REF_KEY).encrypt(REF_PLAINTEXT) == REF_CIPHERTEXT

    def test_decrypt(self) -> None:
        assert _speck(REF_KEY).decrypt(REF_CIPHERTEXT) == REF_PLAINTEXT

    def test_byte_key(self) -> None:
        assert _speck(REF_KEY_BYTES).encrypt(REF_PLAINTEXT) == REF_CIPHERTEXT

    def test_default_key(self) -> None:
        assert _speck(DEFAULT_KEY_WORDS).encrypt(0x123456789ABCDEF0) == 0xF73D5E693654F220


# ---------------------------------------------------------------------------
# Key schedule and key ingestion
# ---------------------------------------------------------------------------


class TestKeySchedule:
    def test_round_count(self) -> None:
        assert _speck(DEFAULT_KEY_WORDS).rounds == 27
        assert _speck(DEFAULT_KEY_WORDS, HIGH_PERFORMANCE).rounds == 16
        assert _speck(DEFAULT_KEY_WORDS, HIGH_SECURITY).rounds == 32

    def test_first_round_key_is_last_word(self) -> None:
        assert expand_key(REF_KEY, STANDARD)[0] == 0x03020100

    def test_single_round(self) -> None:
        assert expand_key((7, 9), SpeckParams(rounds=1, alpha=8, beta=3)) == (9,)

    def test_byte_and_word_keys_identical(self) -> None:
        from_bytes = _speck(DEFAULT_KEY_BYTES)
        from_words = _speck(DEFAULT_KEY_WORDS)
        assert from_bytes == from_words
        assert from_bytes.encrypt(0x123456789ABCDEF0) == from_words.encrypt(0x123456789ABCDEF0)

    def test_little_endian_words(self) -> None:
        assert unwrap(key_words_from_bytes(DEFAULT_KEY_BYTES)) == DEFAULT_KEY_WORDS

    def test_bytearray_key(self) -> None:
        assert _speck(bytearray(DEFAULT_KEY_BYTES)) == _speck(DEFAULT_KEY_WORDS)

    def test_two_word_key(self) -> None:
        cipher = _speck((1, 2))
        assert cipher.decrypt(cipher.encrypt(42)) == 42

    def test_eight_byte_key(self) -> None:
        assert _speck(bytes(8)).rounds == 27

    @pytest.mark.parametrize("key", [(), (0x01234567,)])
    def test_too_few_words(self, key: tuple[int, ...]) -> None:
        result = Speck64Cipher.create(key)
        assert isinstance(result, Err)
        assert result.error.kind is ErrorKind.INVALID_KEY
        assert result.error.layer == "cipher"

    @pytest.mark.parametrize("size", [0, 4, 7, 18])
    def test_bad_byte_lengths(self, size: int) -> None:
        result = Speck64Cipher.create(bytes(size))
        assert isinstance(result, Err)
        assert result.error.kind is ErrorKind.INVALID_KEY

    @pytest.mark.parametrize("word", [-1, 1 << 32])
    def test_word_out_of_range(self, word: int) -> None:
        result = Speck64Cipher.create((1, 2, 3, word))
        assert isinstance(result, Err)
        assert result.error.kind is ErrorKind.INVALID_KEY
        assert result.error.field == "key[3]"

    def test_schedule_immutable(self) -> None:
        cipher = _speck(DEFAULT_KEY_WORDS)
        with pytest.raises(dataclasses.FrozenInstanceError):
            cipher.round_keys = ()  # type: ignore[misc]

    def test_repr_hides_round_keys(self) -> None:
        cipher = _speck(DEFAULT_KEY_WORDS)
        assert str(cipher.round_keys[1]) not in repr(cipher)

    def test_implements_cipher_protocol(self) -> None:
        assert isinstance(_speck(DEFAULT_KEY_WORDS), Cipher)


# ---------------------------------------------------------------------------
# Encrypt / decrypt properties
# ---------------------------------------------------------------------------


class TestSpeckRoundTrip:
    @pytest.mark.parametrize("value", BOUNDARY_VALUES)
    def test_boundary_values(self, value: int) -> None:
        cipher = _speck(DEFAULT_KEY_WORDS)
        assert cipher.decrypt(cipher.encrypt(value)) == value
        assert cipher.encrypt(cipher.decrypt(value)) == value

    @given(uint64s(), key_words())
    def test_decrypt_inverts_encrypt(self, value: int, key: list[int]) -> None:
        cipher = _speck(key)
        assert cipher.decrypt(cipher.encrypt(value)) == value

    @given(uint64s(), key_words())
    def test_encrypt_inverts_decrypt(self, value: int, key: list[int]) -> None:
        cipher = _speck(key)
        assert cipher.encrypt(cipher.decrypt(value)) == value

    @given(uint64s())
    def test_alternate_params_round_trip(self, value: int) -> None:
        for params in (HIGH_PERFORMANCE, HIGH_SECURITY):
            cipher = _speck(DEFAULT_KEY_WORDS, params)
            assert cipher.decrypt(cipher.encrypt(value)) == value

    @given(uint64s())
    def test_output_stays_64_bit(self, value: int) -> None:
        assert 0 <= _speck(DEFAULT_KEY_WORDS).encrypt(value) < 1 << 64

    def test_deterministic(self) -> None:
        assert _speck(DEFAULT_KEY_WORDS).encrypt(99) == _speck(DEFAULT_KEY_WORDS).encrypt(99)

    def test_different_keys_differ(self) -> None:
        data = 0x123456789ABCDEF0
        assert _speck(ALT_KEY_1).encrypt(data) != _speck(ALT_KEY_2).encrypt(data)

    def test_one_bit_change_spreads(self) -> None:
        cipher = _speck(DEFAULT_KEY_WORDS)
        diff = cipher.encrypt(0x1101011990010112) ^ cipher.encrypt(0x1101011990010113)
        assert diff.bit_count() > 8

    @pytest.mark.parametrize("value", [-1, 1 << 64])
    def test_rejects_out_of_range(self, value: int) -> None:
        cipher = _speck(DEFAULT_KEY_WORDS)
        with pytest.raises(ValueError):
            cipher.encrypt(value)
        with pytest.raises(ValueError):
            cipher.decrypt(value)

    def test_shared_across_threads(self) -> None:
        cipher = _speck(DEFAULT_KEY_WORDS)
        values = list(range(0, 1 << 40, (1 << 40) // 200))
        expected = [cipher.encrypt(v) for v in values]
        with ThreadPoolExecutor(max_workers=8) as pool:
            assert list(pool.map(cipher.encrypt, values)) == expected
