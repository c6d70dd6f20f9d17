"""Options controlling how durations are rendered."""

from dataclasses import dataclass, fields

from humanise.util import UNITS, TimeUnit, check_unit


@dataclass(frozen=True, kw_only=True)
class Config:
    """Rendering options for humanise().

    Attributes:
        max_units: Most non-zero segments to emit (None for no limit)
        smallest_unit: Finest unit reported; anything below it is truncated
        largest_unit: Coarsest unit used for decomposition
        separator: Text placed between segments
        conjunction: Word placed before the last segment ("and"), or None
        verbose: False shortens minute/second/millisecond labels
        zero_value: Output when nothing survives truncation
            (None means "0 seconds", or "0 secs" when not verbose)
    """

    max_units: int | None = 2
    smallest_unit: TimeUnit = "second"
    largest_unit: TimeUnit = "year"
    separator: str = ", "
    conjunction: str | None = None
    verbose: bool = True
    zero_value: str | None = None

    def __post_init__(self) -> None:
        check_unit(self.smallest_unit, "smallest_unit")
        check_unit(self.largest_unit, "largest_unit")
        if UNITS.index(self.largest_unit) > UNITS.index(self.smallest_unit):
            raise ValueError(
                f"largest_unit ({self.largest_unit!r}) must not be smaller than "
                f"smallest_unit ({self.smallest_unit!r})"
            )
        if self.max_units is not None and (
            isinstance(self.max_units, bool)
            or not isinstance(self.max_units, int)
            or self.max_units < 1
        ):
            raise ValueError(
                f"max_units must be a positive integer or None, got {self.max_units!r}"
            )

    @property
    def units(self) -> tuple[TimeUnit, ...]:
        """Units in play, largest first."""
        first = UNITS.index(self.largest_unit)
        last = UNITS.index(self.smallest_unit)
        return UNITS[first : last + 1]

    @property
    def zero_text(self) -> str:
        if self.zero_value is not None:
            return self.zero_value
        return "0 seconds" if self.verbose else "0 secs"


DEFAULT_CONFIG = Config()

OPTION_NAMES = frozenset(f.name for f in fields(Config))
