"""Duration humanisation.

Turns an elapsed-time magnitude into a phrase such as "3 days, 4 hours".
Decomposition is greedy from the largest unit down, and whatever is left
below the smallest reported unit is truncated, never rounded: with
``smallest_unit="minute"``, 3630 seconds reads "1 hour".
"""

import logging
from dataclasses import dataclass, replace
from typing import Any

from typing_extensions import override

from humanise.config import DEFAULT_CONFIG, OPTION_NAMES, Config
from humanise.duration import Duration
from humanise.util import SHORT_LABELS, UNIT_SIZES, TimeUnit
from humanise.words import humanise_list, plural_suffix

logger = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class Segment:
    """One "<count> <unit>" fragment of a humanised duration."""

    count: int
    unit: TimeUnit

    def label(self, verbose: bool = True) -> str:
        if not verbose and self.unit in SHORT_LABELS:
            singular, plural = SHORT_LABELS[self.unit]
            if plural is None or self.count == 1:
                return singular
            return plural
        return plural_suffix(self.count, self.unit)

    def render(self, verbose: bool = True) -> str:
        return f"{self.count} {self.label(verbose)}"

    @override
    def __str__(self) -> str:
        return self.render()


def _resolve(config: Config | None, options: dict[str, Any]) -> Config:
    base = DEFAULT_CONFIG if config is None else config
    if not options:
        return base
    unknown = sorted(set(options) - OPTION_NAMES)
    if unknown:
        valid = ", ".join(sorted(OPTION_NAMES))
        raise TypeError(
            f"Unknown humanise option(s): {', '.join(unknown)}\n"
            f"Valid options: {valid}"
        )
    return replace(base, **options)


def _decompose(duration: Duration, config: Config) -> list[Segment]:
    remaining = duration.seconds
    segments: list[Segment] = []
    for unit in config.units:
        if config.max_units is not None and len(segments) >= config.max_units:
            logger.debug(
                "Stopped at %d segment(s), dropping %s s", len(segments), remaining
            )
            return segments
        size = UNIT_SIZES[unit]
        count = remaining // size
        remaining -= count * size
        if count > 0:
            segments.append(Segment(count=int(count), unit=unit))
    if remaining:
        logger.debug(
            "Truncated %s s below %s granularity", remaining, config.smallest_unit
        )
    return segments


def decompose(
    duration: Any, config: Config | None = None, **options: Any
) -> list[Segment]:
    """Split a duration into non-zero segments, most significant first.

    Args:
        duration: Seconds as int/float/Decimal/Fraction, a timedelta, or a Duration
        config: Rendering options (defaults to DEFAULT_CONFIG)
        **options: Individual Config fields overriding ``config``

    Returns:
        At most ``max_units`` segments; empty if the duration truncates to zero

    Raises:
        InvalidDuration: If the duration is negative or not finite
        TypeError: If the duration type or an option name is not supported
    """
    resolved = _resolve(config, options)
    return _decompose(Duration.of(duration), resolved)


def _render(segments: list[Segment], config: Config) -> str:
    if not segments:
        return config.zero_text
    parts = [segment.render(config.verbose) for segment in segments]
    return humanise_list(parts, config.conjunction, config.separator)


def humanise(duration: Any, config: Config | None = None, **options: Any) -> str:
    """Describe an elapsed time in words.

    Args:
        duration: Seconds as int/float/Decimal/Fraction, a timedelta, or a Duration
        config: Rendering options (defaults to DEFAULT_CONFIG)
        **options: Individual Config fields overriding ``config``

    Returns:
        e.g. "1 hour, 1 minute", or the zero value when nothing is left after
        truncating to ``smallest_unit``

    Raises:
        InvalidDuration: If the duration is negative or not finite
        TypeError: If the duration type or an option name is not supported

    Examples:
        >>> humanise(3661)
        '1 hour, 1 minute'
        >>> humanise(3661, max_units=3)
        '1 hour, 1 minute, 1 second'
        >>> humanise(62.345, smallest_unit="millisecond", max_units=None, conjunction="and")
        '1 minute, 2 seconds, and 345 milliseconds'
    """
    resolved = _resolve(config, options)
    return _render(_decompose(Duration.of(duration), resolved), resolved)


def humanise_ms(
    milliseconds: Any, config: Config | None = None, **options: Any
) -> str:
    """Describe a duration given in milliseconds.

    Without an explicit config or ``smallest_unit`` option, milliseconds are
    reported too.

    Examples:
        >>> humanise_ms(1234)
        '1 second, 234 milliseconds'
        >>> humanise_ms(1234, verbose=False)
        '1 sec, 234 ms'
    """
    if config is None and "smallest_unit" not in options:
        options["smallest_unit"] = "millisecond"
    resolved = _resolve(config, options)
    duration = Duration.of(milliseconds, "millisecond")
    return _render(_decompose(duration, resolved), resolved)
