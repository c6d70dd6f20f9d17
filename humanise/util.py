"""Time unit constants and the unit table for humanise.

Unit sizes are expressed in seconds, the base unit of every Duration.
Years and months use fixed approximate lengths (a Julian year of 365.25 days
and a twelfth of that), so decomposition never consults a calendar.
"""

from fractions import Fraction
from typing import Literal, TypeAlias

# Time unit constants (all values in seconds)
MILLISECOND = Fraction(1, 1000)
SECOND = 1
MINUTE = 60
HOUR = 3600
DAY = 86400
YEAR = 31557600
MONTH = 2629800

TimeUnit: TypeAlias = Literal[
    "year", "month", "day", "hour", "minute", "second", "millisecond"
]

# Largest unit first; decomposition walks this order
UNITS: tuple[TimeUnit, ...] = (
    "year",
    "month",
    "day",
    "hour",
    "minute",
    "second",
    "millisecond",
)

UNIT_SIZES: dict[TimeUnit, Fraction] = {
    "year": Fraction(YEAR),
    "month": Fraction(MONTH),
    "day": Fraction(DAY),
    "hour": Fraction(HOUR),
    "minute": Fraction(MINUTE),
    "second": Fraction(SECOND),
    "millisecond": MILLISECOND,
}

# Shortened labels used when verbose=False; None means the label never takes a plural
SHORT_LABELS: dict[TimeUnit, tuple[str, str | None]] = {
    "minute": ("min", "mins"),
    "second": ("sec", "secs"),
    "millisecond": ("ms", None),
}


def check_unit(unit: str, name: str = "unit") -> TimeUnit:
    """Return ``unit`` if it names a known TimeUnit, else raise ValueError."""
    if unit not in UNIT_SIZES:
        valid = ", ".join(UNITS)
        raise ValueError(f"Invalid {name}: {unit!r}\nValid units: {valid}\n")
    return unit  # type: ignore[return-value]
