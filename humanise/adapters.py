"""python-dateutil integration for humanise.

Install with the ``dateutil`` extra. The core package never imports this
module, so it works without python-dateutil installed.

Example:
    >>> from dateutil.relativedelta import relativedelta
    >>> from humanise.adapters import humanise_relativedelta
    >>> humanise_relativedelta(relativedelta(months=2, days=3))
    '2 months, 3 days'
"""

from fractions import Fraction
from typing import Any

from dateutil.relativedelta import relativedelta

from humanise.config import Config
from humanise.duration import Duration, InvalidDuration
from humanise.durations import humanise
from humanise.util import DAY, HOUR, MINUTE, MONTH, YEAR

# Fields that pin a calendar position rather than measure a span
_ABSOLUTE_FIELDS = (
    "year",
    "month",
    "day",
    "weekday",
    "hour",
    "minute",
    "second",
    "microsecond",
)


def from_relativedelta(delta: relativedelta) -> Duration:
    """Convert a relative delta into a Duration.

    Years and months use the same fixed approximate lengths as the unit
    table, so ``relativedelta(months=1)`` is 2 629 800 seconds.

    Raises:
        ValueError: If ``delta`` sets absolute fields or leap days, which
            have no fixed length
        InvalidDuration: If the delta sums to a negative span
    """
    absolute = [name for name in _ABSOLUTE_FIELDS if getattr(delta, name) is not None]
    if absolute or delta.leapdays:
        fixed = ", ".join(absolute or ["leapdays"])
        raise ValueError(
            f"relativedelta with absolute fields cannot be measured: {fixed}\n"
            f"Got: {delta!r}\n"
            f"Hint: only relative fields (years=, months=, days=, ...) are supported"
        )

    seconds = (
        Fraction(delta.years) * YEAR
        + Fraction(delta.months) * MONTH
        + Fraction(delta.days) * DAY
        + Fraction(delta.hours) * HOUR
        + Fraction(delta.minutes) * MINUTE
        + Fraction(delta.seconds)
        + Fraction(delta.microseconds, 10**6)
    )
    if seconds < 0:
        raise InvalidDuration(
            delta,
            "relativedelta is negative",
            "durations are magnitudes; pass abs(delta) for spans in the past",
        )
    return Duration(seconds=seconds)


def humanise_relativedelta(
    delta: relativedelta, config: Config | None = None, **options: Any
) -> str:
    """Convert ``delta`` with from_relativedelta(), then humanise it."""
    return humanise(from_relativedelta(delta), config, **options)
