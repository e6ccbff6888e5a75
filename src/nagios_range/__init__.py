"""Parse and evaluate Nagios threshold range expressions.

>>> from nagios_range import Range
>>> r = Range.parse("@10:20")
>>> r.alerts(15)
True
"""

from importlib import metadata

from .arguments import range_type, setup_argparser, thresholds_from_args
from .bound import End, Start
from .error import (
    EmptyRange,
    ParseEndPoint,
    ParseStartPoint,
    RangeError,
    StartGreaterThanEnd,
)
from .parser import parse
from .range import Polarity, Range, RangeSpec
from .threshold import State, Thresholds, worst

__version__: str = metadata.version("nagios-range")

__all__ = [
    "EmptyRange",
    "End",
    "ParseEndPoint",
    "ParseStartPoint",
    "Polarity",
    "Range",
    "RangeError",
    "RangeSpec",
    "Start",
    "StartGreaterThanEnd",
    "State",
    "Thresholds",
    "parse",
    "range_type",
    "setup_argparser",
    "thresholds_from_args",
    "worst",
]
