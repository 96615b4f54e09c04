"""Hypothesis strategies and shared constants for the identity codec tests.

Strategies build valid identity numbers field by field, so the check
code is always computed by the code under test.
"""

from __future__ import annotations

from hypothesis import HealthCheck, settings
from hypothesis import strategies as st

from idcodec.core.calendar import days_in_month
from idcodec.core.identity import IdentityNumber
from idcodec.core.result import unwrap

# ---------------------------------------------------------------------------
# Hypothesis global settings
# ---------------------------------------------------------------------------

settings.register_profile(
    "ci",
    max_examples=500,
    suppress_health_check=[HealthCheck.too_slow],
    deadline=None,
)
settings.register_profile(
    "dev",
    max_examples=100,
    suppress_health_check=[HealthCheck.too_slow],
    deadline=None,
)
settings.load_profile("dev")


# ===================================================================
# KNOWN VALUES
# ===================================================================

VALID_WITH_X = "11010519491231002X"
VALID_NUMERIC = "110101199001011237"
SHANGHAI = "310101198506152345"
GUANGZHOU = "440101198012123455"
CHENGDU = "510101197503214566"
YEAR_1900 = "110101190001011236"
EPOCH_DATE = "110101000001011236"        # 0000-01-01
EPOCH_PLUS_ONE_YEAR = "110101000101021239"  # 0001-01-02
MAX_DATE = "110101999912311236"          # 9999-12-31
LEAP_DAY_2000 = "110105200002290021"
LEAP_DAY_2024 = "110105202402291233"
ALL_NINES = "999999999912319992"

VALID_NUMBERS = (
    VALID_WITH_X, VALID_NUMERIC, SHANGHAI, GUANGZHOU, CHENGDU,
    YEAR_1900, EPOCH_DATE, EPOCH_PLUS_ONE_YEAR, MAX_DATE,
    LEAP_DAY_2000, LEAP_DAY_2024, ALL_NINES,
)

# Bodies with a correct check code but an impossible date.
FEB_29_1999 = "110101199902290026"
FEB_29_1900 = "11010119000229002X"
APRIL_31 = "110105199004310027"
MONTH_13 = "110105199013010026"

DEFAULT_KEY_WORDS = (0x01234567, 0x89ABCDEF, 0xFEDCBA98, 0x76543210)
DEFAULT_KEY_BYTES = bytes([
    0x67, 0x45, 0x23, 0x01,
    0xEF, 0xCD, 0xAB, 0x89,
    0x98, 0xBA, 0xDC, 0xFE,
    0x10, 0x32, 0x54, 0x76,
])
ALT_KEY_1 = (0x11111111, 0x22222222, 0x33333333, 0x44444444)
ALT_KEY_2 = (0xFFFFFFFF, 0xEEEEEEEE, 0xDDDDDDDD, 0xCCCCCCCC)


# ===================================================================
# STRATEGIES
# ===================================================================


def uint64s() -> st.SearchStrategy[int]:
    return st.integers(min_value=0, max_value=(1 << 64) - 1)


def uint32s() -> st.SearchStrategy[int]:
    return st.integers(min_value=0, max_value=(1 << 32) - 1)


def key_words(min_size: int = 2, max_size: int = 8) -> st.SearchStrategy[list[int]]:
    return st.lists(uint32s(), min_size=min_size, max_size=max_size)


@st.composite
def calendar_dates(draw: st.DrawFn) -> tuple[int, int, int]:
    """(year, month, day) across the full 0000-9999 range."""
    year = draw(st.integers(min_value=0, max_value=9999))
    month = draw(st.integers(min_value=1, max_value=12))
    day = draw(st.integers(min_value=1, max_value=days_in_month(year, month)))
    return (year, month, day)


@st.composite
def identity_numbers(draw: st.DrawFn) -> IdentityNumber:
    """Valid IdentityNumber values built via IdentityNumber.format."""
    region = draw(st.integers(min_value=0, max_value=999999))
    year, month, day = draw(calendar_dates())
    sequence = draw(st.integers(min_value=0, max_value=999))
    return unwrap(IdentityNumber.format(region, year, month, day, sequence))


@st.composite
def identity_strings(draw: st.DrawFn) -> str:
    """Canonical 18-character identity number strings."""
    return draw(identity_numbers()).number
