from __future__ import annotations

import enum
import math
from typing import Any, Optional, Union

from typing_extensions import Self

from .bound import End, EndLike, Start, StartLike
from .error import StartGreaterThanEnd


class Polarity(enum.Enum):
    """When a range alerts.

    :attr:`OUTSIDE` alerts for samples outside the interval and is the
    default. :attr:`INSIDE` is selected with the leading ``@``.
    """

    INSIDE = "inside"
    OUTSIDE = "outside"

    def __str__(self) -> str:
        return self.value


RangeSpec = Union[str, int, float, "Range"]


class Range:
    """Represents a threshold range.

    The general format is "[@][start:][end]". "start:" may be omitted if
    start==0. "~:" means that start is negative infinity. If `end` is
    omitted, infinity is assumed. To invert the match condition, prefix
    the range expression with "@".

    See
    https://github.com/monitoring-plugins/monitoring-plugin-guidelines/blob/main/definitions/01.range_expressions.md
    for details.

    Ranges are immutable values. Use :meth:`replace` to derive a
    modified copy.
    """

    _start: Start

    _end: End

    _polarity: Polarity

    __slots__ = ("_start", "_end", "_polarity")

    def __init__(
        self,
        start: StartLike = 0,
        end: EndLike = math.inf,
        polarity: Polarity = Polarity.OUTSIDE,
    ) -> None:
        """Creates a Range from explicit end points.

        :param start: :class:`~nagios_range.Start` or number
        :param end: :class:`~nagios_range.End` or number
        :param polarity: :attr:`Polarity.OUTSIDE` (default) or
            :attr:`Polarity.INSIDE`
        :raise StartGreaterThanEnd: if both end points are finite and
            start > end
        """
        if not isinstance(start, Start):
            start = Start(start)
        if not isinstance(end, End):
            end = End(end)
        if not isinstance(polarity, Polarity):
            raise TypeError("polarity must be a Polarity", polarity)
        Range._verify(start, end)
        object.__setattr__(self, "_start", start)
        object.__setattr__(self, "_end", end)
        object.__setattr__(self, "_polarity", polarity)

    @classmethod
    def parse(cls, spec: str) -> Self:
        """Creates a Range from its text representation.

        :raise RangeError: see :func:`nagios_range.parser.parse`
        """
        from .parser import parse

        result = parse(spec)
        return cls(result.start, result.end, result.polarity)

    @classmethod
    def coerce(cls, spec: RangeSpec) -> Range:
        """Creates a Range according to `spec`.

        :param spec: may be either a string, a number, or another Range
            object. A number `n` means "0:n".
        """
        if isinstance(spec, Range):
            return spec
        if isinstance(spec, bool):
            raise TypeError("cannot create a range from a boolean", spec)
        if isinstance(spec, (int, float)):
            return cls(0, spec)
        if isinstance(spec, str):
            return cls.parse(spec)
        raise TypeError("cannot create a range from type {0}".format(type(spec)), spec)

    @staticmethod
    def _verify(start: Start, end: End) -> None:
        lower = start.inner()
        upper = end.inner()
        if lower is not None and upper is not None and lower > upper:
            raise StartGreaterThanEnd(lower, upper)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("Range is immutable, use replace()")

    @property
    def start(self) -> Start:
        return self._start

    @property
    def end(self) -> End:
        return self._end

    @property
    def polarity(self) -> Polarity:
        return self._polarity

    @property
    def invert(self) -> bool:
        """`True` if the range alerts for samples inside the interval."""
        return self._polarity is Polarity.INSIDE

    @property
    def start_is_unbounded(self) -> bool:
        return self._start.is_neg_inf()

    @property
    def end_is_unbounded(self) -> bool:
        return self._end.is_pos_inf()

    def is_inside(self) -> bool:
        return self._polarity is Polarity.INSIDE

    def is_outside(self) -> bool:
        return self._polarity is Polarity.OUTSIDE

    def contains(self, value: float) -> bool:
        """Decides if `value` lies within the interval, end points
        included. The polarity is not taken into account.

        Also available as `in` operator. NaN is never contained.
        """
        # NaN is the only value unequal to itself, ints too large for a
        # float still compare against the bounds
        if value != value:
            return False
        return self._start.as_float() <= value <= self._end.as_float()

    def __contains__(self, value: float) -> bool:
        return self.contains(value)

    def alerts(self, value: float) -> bool:
        """Decides if `value` violates the threshold.

        :returns: :meth:`contains` for inside ranges, its negation for
            outside ranges
        """
        if self.invert:
            return self.contains(value)
        return not self.contains(value)

    def replace(
        self,
        start: Optional[StartLike] = None,
        end: Optional[EndLike] = None,
        polarity: Optional[Polarity] = None,
    ) -> Self:
        """Creates new instance with updated end points or polarity.

        `None` keeps the current value. To open a bound, pass
        :class:`~nagios_range.Start` or :class:`~nagios_range.End`
        without a value, or the matching IEEE infinity.
        """
        return self.__class__(
            self._start if start is None else start,
            self._end if end is None else end,
            self._polarity if polarity is None else polarity,
        )

    def to_text(self) -> str:
        """Canonical range specification.

        The separator is always written, so an implicit start of 0 shows
        up as ``0:``.
        """
        return "{0}{1}:{2}".format(
            "@" if self.invert else "", self._start, self._end
        )

    def __str__(self) -> str:
        return self.to_text()

    def __repr__(self) -> str:
        """Parseable range specification."""
        return "Range(%r)" % self.to_text()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Range):
            return NotImplemented
        return (
            self._polarity is other._polarity
            and self._start == other._start
            and self._end == other._end
        )

    def __hash__(self) -> int:
        return hash((self._polarity, self._start, self._end))

    @property
    def violation(self) -> str:
        """Human-readable description why a value alerts."""
        return "{0} range {1}".format(self._polarity, self.to_text())
