"""End points of a threshold range.

A bound is either a finite number or open-ended. :class:`Start` can only
be open towards negative infinity and :class:`End` only towards positive
infinity, so an open bound is always on the correct side of the other
one.

Finite values are stored as floats. Integral values render without a
fractional part, so ``Start(10)`` prints as ``10``.
"""

from __future__ import annotations

import math
from typing import Any, Optional, Union


def format_number(value: float) -> str:
    """Shortest text that parses back to `value`."""
    if value.is_integer():
        return "%d" % value
    return repr(value)


class _Bound:
    infinity: float

    marker: str

    _value: Optional[float]

    __slots__ = ("_value",)

    def __init__(self, value: Optional[float] = None) -> None:
        """Creates a bound.

        :param value: finite number, or `None` (or the matching IEEE
            infinity) for an open bound
        :raise ValueError: if `value` is NaN or the infinity of the
            wrong sign
        """
        if value is not None:
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise TypeError(
                    "{0} must be a number, not {1}".format(
                        self.__class__.__name__, type(value).__name__
                    )
                )
            try:
                value = float(value)
            except OverflowError as exc:
                raise ValueError(
                    "{0} is out of float range".format(self.__class__.__name__)
                ) from exc
            if math.isnan(value):
                raise ValueError("a bound must not be NaN")
            if math.isinf(value):
                if value != self.infinity:
                    raise ValueError(
                        "{0} cannot be {1}".format(self.__class__.__name__, value)
                    )
                value = None
        object.__setattr__(self, "_value", value)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("{0} is immutable".format(self.__class__.__name__))

    def is_unbounded(self) -> bool:
        return self._value is None

    def inner(self) -> Optional[float]:
        """The finite value, or `None` for an open bound."""
        return self._value

    def as_float(self) -> float:
        """The value as IEEE float, open bounds included."""
        if self._value is None:
            return self.infinity
        return self._value

    def __str__(self) -> str:
        if self._value is None:
            return self.marker
        return format_number(self._value)

    def __repr__(self) -> str:
        if self._value is None:
            return "{0}()".format(self.__class__.__name__)
        return "{0}({1})".format(self.__class__.__name__, format_number(self._value))

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._value == other._value  # type: ignore

    def __hash__(self) -> int:
        return hash((self.__class__.__name__, self._value))


class Start(_Bound):
    """Lower end point, finite or negative infinity (``~``)."""

    infinity = -math.inf

    marker = "~"

    __slots__ = ()

    def is_neg_inf(self) -> bool:
        return self.is_unbounded()


class End(_Bound):
    """Upper end point, finite or positive infinity.

    An open end has no spelling of its own in the range grammar: it is
    the empty text right of the separator.
    """

    infinity = math.inf

    marker = ""

    __slots__ = ()

    def is_pos_inf(self) -> bool:
        return self.is_unbounded()


StartLike = Union[Start, int, float]

EndLike = Union[End, int, float]
