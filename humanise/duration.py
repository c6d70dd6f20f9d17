"""The Duration value type and input coercion."""

import math
from dataclasses import dataclass
from datetime import timedelta
from decimal import Decimal
from fractions import Fraction
from numbers import Integral, Rational, Real
from typing import Any

from typing_extensions import override

from humanise.util import UNIT_SIZES, TimeUnit, check_unit


class InvalidDuration(ValueError):
    """Raised for magnitudes that cannot describe elapsed time.

    Negative, NaN and infinite inputs all end up here. The rejected input is
    kept on ``value``.
    """

    def __init__(self, value: Any, reason: str, hint: str | None = None):
        self.value: Any = value
        message = f"Invalid duration: {reason}\nGot: {value!r}"
        if hint:
            message += f"\nHint: {hint}"
        super().__init__(message)


def _magnitude(value: Any) -> Fraction:
    """Convert a plain number to an exact Fraction.

    Floats go through their shortest repr, so ``0.3`` is three tenths rather
    than the binary value just below it.
    """
    if isinstance(value, bool):
        raise TypeError(
            f"Duration must be a number, timedelta, or Duration, not bool.\n"
            f"Got: {value!r}"
        )
    if isinstance(value, Decimal):
        if not value.is_finite():
            raise InvalidDuration(value, "value is not finite")
        return Fraction(value)
    if isinstance(value, Integral):
        return Fraction(int(value))
    if isinstance(value, Rational):
        return Fraction(value.numerator, value.denominator)
    if isinstance(value, Real):
        as_float = float(value)
        if not math.isfinite(as_float):
            raise InvalidDuration(value, "value is not finite")
        return Fraction(repr(as_float))
    raise TypeError(
        f"Duration must be int, float, Decimal, Fraction, timedelta, or Duration.\n"
        f"Got {type(value).__name__!r}: {value!r}\n"
        f"Examples:\n"
        f"  humanise(90)                      # seconds\n"
        f"  humanise(timedelta(minutes=90))   # timedelta\n"
        f"  humanise_ms(1500)                 # milliseconds"
    )


@dataclass(frozen=True, kw_only=True)
class Duration:
    """A non-negative amount of elapsed time, held as exact seconds."""

    seconds: Fraction

    def __post_init__(self) -> None:
        if not isinstance(self.seconds, Fraction):
            object.__setattr__(self, "seconds", _magnitude(self.seconds))
        if self.seconds < 0:
            raise InvalidDuration(
                self.seconds,
                "value is negative",
                "durations are magnitudes; pass abs(value) for spans in the past",
            )

    @classmethod
    def of(cls, value: Any, unit: TimeUnit = "second") -> "Duration":
        """Build a Duration from a number counted in ``unit``.

        timedelta and Duration inputs carry their own scale, so ``unit`` is
        ignored for them.
        """
        if isinstance(value, Duration):
            return value
        if isinstance(value, timedelta):
            return cls.from_timedelta(value)
        size = UNIT_SIZES[check_unit(unit)]
        return cls(seconds=_magnitude(value) * size)

    @classmethod
    def from_timedelta(cls, delta: timedelta) -> "Duration":
        # Avoid total_seconds(): it rounds microseconds through a float
        whole = delta.days * 86400 + delta.seconds
        try:
            return cls(seconds=Fraction(whole) + Fraction(delta.microseconds, 10**6))
        except InvalidDuration as e:
            raise InvalidDuration(
                delta,
                "timedelta is negative",
                "durations are magnitudes; pass abs(delta) for spans in the past",
            ) from e

    def total_seconds(self) -> float:
        return float(self.seconds)

    def in_units(self, unit: TimeUnit) -> Fraction:
        """Return the exact number of ``unit`` in this duration."""
        return self.seconds / UNIT_SIZES[check_unit(unit)]

    @override
    def __str__(self) -> str:
        return f"Duration({self.total_seconds():g}s)"
