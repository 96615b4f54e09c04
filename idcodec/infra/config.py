"""Static configuration: cipher parameter presets and display masking.

Pure configuration data. Nothing here reads files or the environment.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import final

# ---------------------------------------------------------------------------
# Masked display of identity numbers
# ---------------------------------------------------------------------------

MASK_CHAR: str = "*"
MASK_PREFIX: int = 4   # leading characters left visible
MASK_SUFFIX: int = 4   # trailing characters left visible


# ---------------------------------------------------------------------------
# SPECK64 parameters
# ---------------------------------------------------------------------------

SPECK_WORD_BITS: int = 32


@final
@dataclass(frozen=True, slots=True)
class SpeckParams:
    """Round count and rotation amounts of a SPECK64 instance.

    rounds: 27 is standard; fewer is faster and weaker.
    alpha:  right rotation of the high word (diffusion), standard 8.
    beta:   left rotation of the low word, standard 3.
    """

    rounds: int
    alpha: int
    beta: int

    def __post_init__(self) -> None:
        if self.rounds < 1:
            raise ValueError(f"SpeckParams.rounds must be >= 1, got {self.rounds}")
        for name, bits in (("alpha", self.alpha), ("beta", self.beta)):
            if not 1 <= bits < SPECK_WORD_BITS:
                raise ValueError(
                    f"SpeckParams.{name} must be in [1, {SPECK_WORD_BITS - 1}], got {bits}"
                )


STANDARD = SpeckParams(rounds=27, alpha=8, beta=3)
HIGH_PERFORMANCE = SpeckParams(rounds=16, alpha=4, beta=2)
HIGH_SECURITY = SpeckParams(rounds=32, alpha=8, beta=3)


def speck_presets() -> dict[str, SpeckParams]:
    """Named parameter presets, standard first."""
    return {
        "standard": STANDARD,
        "high_performance": HIGH_PERFORMANCE,
        "high_security": HIGH_SECURITY,
    }
