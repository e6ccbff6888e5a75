"""Exceptions raised while building a :class:`~nagios_range.Range`.

All of them derive from :class:`RangeError`, which is a
:class:`ValueError`, so callers that only care about "bad threshold"
can catch the built-in exception.
"""

from typing import Optional


class RangeError(ValueError):
    """Base class for all range construction failures."""

    pass


class EmptyRange(RangeError):
    """The range string has zero length."""

    def __init__(self) -> None:
        super().__init__("the range string must not be empty")


class StartGreaterThanEnd(RangeError):
    """Both end points are finite and the start lies above the end."""

    start: float

    end: float

    def __init__(self, start: float, end: float) -> None:
        super().__init__(
            "the start point must be lesser than the end point "
            "({0} > {1})".format(start, end)
        )
        self.start = start
        self.end = end


class _EndPointError(RangeError):
    side: str = ""

    text: str

    cause: Optional[Exception]

    def __init__(self, text: str, cause: Optional[Exception] = None) -> None:
        super().__init__(
            "the {0} point could not be parsed as float: {1}".format(
                self.side, cause if cause is not None else repr(text)
            )
        )
        self.text = text
        self.cause = cause


class ParseStartPoint(_EndPointError):
    """The text left of the separator is not a valid numeral.

    :attr:`cause` holds the underlying numeral failure, which is also
    chained as ``__cause__``.
    """

    side = "start"


class ParseEndPoint(_EndPointError):
    """The text right of the separator (or the whole token) is not a valid
    numeral."""

    side = "end"
