"""Check code of an 18-character identity number (GB 11643-1999).

The 18th character is derived from the first 17 digits: weighted sum,
modulo 11, mapped through a fixed table.
"""

from __future__ import annotations

from idcodec.core.errors import CodecError, ErrorKind
from idcodec.core.result import Err, Ok

WEIGHTS: tuple[int, ...] = (7, 9, 10, 5, 8, 4, 2, 1, 6, 3, 7, 9, 10, 5, 8, 4, 2)

# Indexed by (weighted sum % 11).
CHECK_CODES: tuple[str, ...] = ("1", "0", "X", "9", "8", "7", "6", "5", "4", "3", "2")

DIGITS = "0123456789"
BODY_LENGTH = 17
NUMBER_LENGTH = 18


def check_code_of(body: str) -> str:
    """Check code for 17 characters already known to be ASCII digits."""
    total = sum(int(c) * w for c, w in zip(body, WEIGHTS, strict=True))
    return CHECK_CODES[total % 11]


def first_non_digit(text: str) -> int | None:
    """Index of the first character that is not an ASCII digit."""
    for i, c in enumerate(text):
        if c not in DIGITS:
            return i
    return None


def compute_check_code(body: str) -> Ok[str] | Err[CodecError]:
    """Compute the check code for exactly 17 ASCII digits."""
    if len(body) != BODY_LENGTH:
        return Err(CodecError(
            kind=ErrorKind.INVALID_LENGTH,
            message=f"check code input must be {BODY_LENGTH} digits, got {len(body)}",
            source="checksum.compute_check_code",
            field="body", actual=str(len(body)), expected=str(BODY_LENGTH),
        ))
    pos = first_non_digit(body)
    if pos is not None:
        return Err(CodecError(
            kind=ErrorKind.INVALID_CHARACTER,
            message=f"non-numeric character at position {pos}: {body[pos]!r}",
            source="checksum.compute_check_code",
            field=f"position {pos}", actual=body[pos], expected="0-9",
        ))
    return Ok(check_code_of(body))


def validate_check_code(number: str) -> Ok[None] | Err[CodecError]:
    """Verify the 18th character of number against the first 17.

    The trailing character is compared upper-cased, so 'x' matches 'X'.
    """
    if len(number) != NUMBER_LENGTH:
        return Err(CodecError(
            kind=ErrorKind.INVALID_LENGTH,
            message=f"identity number must be {NUMBER_LENGTH} characters, got {len(number)}",
            source="checksum.validate_check_code",
            field="number", actual=str(len(number)), expected=str(NUMBER_LENGTH),
        ))
    match compute_check_code(number[:BODY_LENGTH]):
        case Err() as e:
            return e
        case Ok(expected):
            actual = number[BODY_LENGTH].upper()
            if actual != expected:
                return Err(CodecError(
                    kind=ErrorKind.INVALID_CHECK_CODE,
                    message=f"expected check code '{expected}', actual '{actual}'",
                    source="checksum.validate_check_code",
                    field="check_code", actual=actual, expected=expected,
                ))
            return Ok(None)


def append_check_code(body: str) -> Ok[str] | Err[CodecError]:
    """Complete a 17-digit body into an 18-character identity number."""
    return compute_check_code(body).map(lambda code: body + code)
