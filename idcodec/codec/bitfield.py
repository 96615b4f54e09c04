"""Bit-field packing of an IdentityNumber into one unsigned 64-bit integer.

Layout, most significant bit first:

    [63-56]  reserved        8 bits, always 0
    [55-36]  region code    20 bits
    [35-14]  day offset     22 bits, days since 0000-01-01
    [13- 4]  sequence       10 bits
    [ 3- 0]  format version  4 bits, FORMAT_VERSION

The check code is not stored; unpack() recomputes it from the other
fields. This layout is the interchange format and must stay stable.
"""

from __future__ import annotations

from idcodec.core.calendar import date_from_days, days_since_epoch
from idcodec.core.checksum import check_code_of
from idcodec.core.errors import CodecError, ErrorKind
from idcodec.core.identity import IdentityNumber
from idcodec.core.result import Err, Ok

FORMAT_VERSION = 1

RESERVED_SHIFT = 56
RESERVED_MASK = 0xFF
REGION_SHIFT = 36
REGION_MASK = 0xFFFFF
DAYS_SHIFT = 14
DAYS_MASK = 0x3FFFFF
SEQUENCE_SHIFT = 4
SEQUENCE_MASK = 0x3FF
VERSION_MASK = 0xF

UINT64_MASK = 0xFFFF_FFFF_FFFF_FFFF
INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1


def to_signed_int64(value: int) -> int:
    """Reinterpret an unsigned 64-bit value as two's-complement signed."""
    if not 0 <= value <= UINT64_MASK:
        raise ValueError(f"value out of unsigned 64-bit range: {value}")
    return value - (1 << 64) if value > INT64_MAX else value


def to_unsigned_int64(value: int) -> int:
    """Reinterpret a signed 64-bit value (e.g. a BIGINT column) as unsigned."""
    if not INT64_MIN <= value <= INT64_MAX:
        raise ValueError(f"value out of signed 64-bit range: {value}")
    return value & UINT64_MASK


def pack(identity: IdentityNumber) -> Ok[int] | Err[CodecError]:
    """Pack region code, birth date offset and sequence into 64 bits."""
    offset = days_since_epoch(identity.year, identity.month, identity.day)
    if not 0 <= offset <= DAYS_MASK:
        return Err(CodecError(
            kind=ErrorKind.INVALID_BIT_FIELD,
            message=f"day offset {offset} does not fit in 22 bits",
            source="bitfield.pack",
            field="day_offset", actual=str(offset), expected=f"[0, {DAYS_MASK}]",
        ))
    return Ok(
        (identity.region_code & REGION_MASK) << REGION_SHIFT
        | (offset & DAYS_MASK) << DAYS_SHIFT
        | (identity.sequence & SEQUENCE_MASK) << SEQUENCE_SHIFT
        | FORMAT_VERSION
    )


def _field_error(name: str, value: int, expected: str, message: str) -> Err[CodecError]:
    return Err(CodecError(
        kind=ErrorKind.INVALID_BIT_FIELD,
        message=message,
        source="bitfield.unpack",
        field=name, actual=str(value), expected=expected,
    ))


def unpack(value: int) -> Ok[IdentityNumber] | Err[CodecError]:
    """Rebuild the IdentityNumber packed in an unsigned 64-bit value."""
    if not 0 <= value <= UINT64_MASK:
        return _field_error(
            "value", value, f"[0, {UINT64_MASK}]",
            f"value out of unsigned 64-bit range: {value}",
        )

    version = value & VERSION_MASK
    if version != FORMAT_VERSION:
        return Err(CodecError(
            kind=ErrorKind.UNSUPPORTED_VERSION,
            message=f"Unsupported format version: {version}",
            source="bitfield.unpack",
            field="version", actual=str(version), expected=str(FORMAT_VERSION),
        ))

    reserved = (value >> RESERVED_SHIFT) & RESERVED_MASK
    if reserved != 0:
        return Err(CodecError(
            kind=ErrorKind.RESERVED_BITS_NOT_ZERO,
            message=f"Reserved bits must be zero, got {reserved:#04x}",
            source="bitfield.unpack",
            field="reserved", actual=str(reserved), expected="0",
        ))

    region_code = (value >> REGION_SHIFT) & REGION_MASK
    offset = (value >> DAYS_SHIFT) & DAYS_MASK
    sequence = (value >> SEQUENCE_SHIFT) & SEQUENCE_MASK

    birth = date_from_days(offset)
    if birth is None:
        return _field_error(
            "day_offset", offset, "a date in years 0000-9999",
            f"Birth year out of range for day offset {offset}",
        )
    if region_code > 999999:
        return _field_error(
            "region_code", region_code, "[0, 999999]",
            f"region code {region_code} exceeds 6 digits",
        )
    if sequence > 999:
        return _field_error(
            "sequence", sequence, "[0, 999]",
            f"sequence {sequence} exceeds 3 digits",
        )

    year, month, day = birth
    body = f"{region_code:06d}{year:04d}{month:02d}{day:02d}{sequence:03d}"
    return IdentityNumber.parse(body + check_code_of(body)).map_err(
        lambda e: CodecError(
            kind=ErrorKind.INVALID_BIT_FIELD,
            message=f"decoded fields do not form a valid identity number: {e.message}",
            source="bitfield.unpack",
            field=e.field, actual=e.actual, expected=e.expected,
        )
    )
