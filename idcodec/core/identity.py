"""IdentityNumber: a validated 18-character resident identity number.

Layout (0-indexed character positions):

    0-5    region code (administrative division)
    6-13   birth date, YYYYMMDD
    14-16  sequence number
    17     check code, 0-9 or X

Built only through parse() or format(); both return Ok | Err. Equality
and hashing use the canonical upper-case string. str() and repr() show
the masked form; the full number is available through .number.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import final

from idcodec.core.calendar import MAX_YEAR, MIN_YEAR, date_violation
from idcodec.core.checksum import (
    BODY_LENGTH,
    DIGITS,
    NUMBER_LENGTH,
    check_code_of,
    first_non_digit,
)
from idcodec.core.errors import CodecError, ErrorKind
from idcodec.core.result import Err, Ok
from idcodec.infra.config import MASK_CHAR, MASK_PREFIX, MASK_SUFFIX

# (name, start, end, min, max) of each numeric field in the 17-digit body.
_FIELDS: tuple[tuple[str, int, int, int, int], ...] = (
    ("region_code", 0, 6, 0, 999999),
    ("year", 6, 10, MIN_YEAR, MAX_YEAR),
    ("month", 10, 12, 1, 12),
    ("day", 12, 14, 1, 31),
    ("sequence", 14, 17, 0, 999),
)


def _date_error(year: int, month: int, day: int, source: str) -> Err[CodecError] | None:
    violation = date_violation(year, month, day)
    if violation is None:
        return None
    return Err(CodecError(
        kind=ErrorKind.INVALID_DATE,
        message=f"Invalid birth date: {violation}",
        source=source,
        field="birth_date",
        actual=f"{year:04d}-{month:02d}-{day:02d}",
        expected="a valid proleptic Gregorian date",
    ))


@final
@dataclass(frozen=True, slots=True, repr=False)
class IdentityNumber:
    """Validated identity number. Field accessors never re-parse."""

    number: str
    region_code: int = field(compare=False)
    year: int = field(compare=False)
    month: int = field(compare=False)
    day: int = field(compare=False)
    sequence: int = field(compare=False)

    def __post_init__(self) -> None:
        body = self.number[:BODY_LENGTH]
        if (
            len(self.number) != NUMBER_LENGTH
            or first_non_digit(body) is not None
            or self.number[BODY_LENGTH] != check_code_of(body)
            or body != _body(self.region_code, self.year, self.month, self.day, self.sequence)
        ):
            raise TypeError(
                "IdentityNumber fields are inconsistent; use IdentityNumber.parse() or .format()"
            )

    # --- construction ---

    @staticmethod
    def parse(raw: str) -> Ok[IdentityNumber] | Err[CodecError]:
        """Validate an 18-character string. A trailing lower-case x is accepted."""
        source = "IdentityNumber.parse"
        if len(raw) != NUMBER_LENGTH:
            return Err(CodecError(
                kind=ErrorKind.INVALID_LENGTH,
                message=f"Invalid identity number length: {len(raw)}",
                source=source,
                field="number", actual=str(len(raw)), expected=str(NUMBER_LENGTH),
            ))
        number = raw.upper()
        body = number[:BODY_LENGTH]
        pos = first_non_digit(body)
        if pos is not None:
            return Err(CodecError(
                kind=ErrorKind.INVALID_CHARACTER,
                message=f"Invalid character at position {pos}: {body[pos]!r}",
                source=source,
                field=f"position {pos}", actual=body[pos], expected="0-9",
            ))
        actual = number[BODY_LENGTH]
        if actual not in DIGITS and actual != "X":
            return Err(CodecError(
                kind=ErrorKind.INVALID_CHARACTER,
                message=f"Invalid check code character: {actual!r}",
                source=source,
                field="check_code", actual=actual, expected="0-9 or X",
            ))
        expected = check_code_of(body)
        if actual != expected:
            return Err(CodecError(
                kind=ErrorKind.INVALID_CHECK_CODE,
                message=f"Invalid check code: expected '{expected}', but got '{actual}'",
                source=source,
                field="check_code", actual=actual, expected=expected,
            ))
        region_code, year, month, day, sequence = (
            int(body[start:end]) for _, start, end, _, _ in _FIELDS
        )
        date_err = _date_error(year, month, day, source)
        if date_err is not None:
            return date_err
        return Ok(IdentityNumber(
            number=number, region_code=region_code,
            year=year, month=month, day=day, sequence=sequence,
        ))

    @staticmethod
    def format(
        region_code: int, year: int, month: int, day: int, sequence: int,
    ) -> Ok[IdentityNumber] | Err[CodecError]:
        """Assemble an identity number from its fields, computing the check code."""
        source = "IdentityNumber.format"
        values = (region_code, year, month, day, sequence)
        for (name, _, _, lo, hi), value in zip(_FIELDS, values, strict=True):
            if not lo <= value <= hi:
                return Err(CodecError(
                    kind=ErrorKind.FIELD_OUT_OF_RANGE,
                    message=f"Invalid {name}: {value} not in [{lo}, {hi}]",
                    source=source,
                    field=name, actual=str(value), expected=f"[{lo}, {hi}]",
                ))
        body = _body(*values)
        number = body + check_code_of(body)
        date_err = _date_error(year, month, day, source)
        if date_err is not None:
            return date_err
        return Ok(IdentityNumber(
            number=number, region_code=region_code,
            year=year, month=month, day=day, sequence=sequence,
        ))

    # --- accessors ---

    @property
    def check_code(self) -> str:
        return self.number[BODY_LENGTH]

    @property
    def birth_date_tuple(self) -> tuple[int, int, int]:
        return (self.year, self.month, self.day)

    def masked(self) -> str:
        """First 4 and last 4 characters, the middle 10 masked."""
        hidden = NUMBER_LENGTH - MASK_PREFIX - MASK_SUFFIX
        return self.number[:MASK_PREFIX] + MASK_CHAR * hidden + self.number[-MASK_SUFFIX:]

    def __str__(self) -> str:
        return self.masked()

    def __repr__(self) -> str:
        return f"IdentityNumber({self.masked()!r})"


def _body(region_code: int, year: int, month: int, day: int, sequence: int) -> str:
    return f"{region_code:06d}{year:04d}{month:02d}{day:02d}{sequence:03d}"


def is_valid_identity_number(raw: str) -> bool:
    """True if raw parses as an identity number."""
    return isinstance(IdentityNumber.parse(raw), Ok)


def mask_raw(raw: str) -> str:
    """Mask an arbitrary (possibly invalid) input for log output."""
    if len(raw) <= MASK_PREFIX + MASK_SUFFIX:
        return MASK_CHAR * len(raw)
    hidden = len(raw) - MASK_PREFIX - MASK_SUFFIX
    return raw[:MASK_PREFIX] + MASK_CHAR * hidden + raw[-MASK_SUFFIX:]
