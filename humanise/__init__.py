from .config import DEFAULT_CONFIG, Config
from .duration import Duration, InvalidDuration
from .durations import Segment, decompose, humanise, humanise_ms
from .util import DAY, HOUR, MILLISECOND, MINUTE, MONTH, SECOND, YEAR, TimeUnit
from .words import humanise_list, plural_suffix

__all__ = [
    "Config",
    "DEFAULT_CONFIG",
    "Duration",
    "InvalidDuration",
    "Segment",
    "TimeUnit",
    "decompose",
    "humanise",
    "humanise_ms",
    "humanise_list",
    "plural_suffix",
    "MILLISECOND",
    "SECOND",
    "MINUTE",
    "HOUR",
    "DAY",
    "MONTH",
    "YEAR",
]
