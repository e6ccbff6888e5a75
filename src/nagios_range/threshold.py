"""Warning and critical thresholds.

This module contains :class:`Thresholds`, the usual way a check plugin
consumes ranges: a sample is compared to an optional critical and an
optional warning range, and the outcome is one of the :class:`State`
values defined by the :term:`Nagios plugin API`.
"""

from __future__ import annotations

import enum
import functools
import logging
from typing import Any, Iterable, Optional

from .range import Range, RangeSpec

_log = logging.getLogger(__name__)


class State(enum.IntEnum):
    """Check outcomes. The integer value is the plugin's exit code."""

    OK = 0
    WARNING = 1
    CRITICAL = 2
    UNKNOWN = 3

    def __str__(self) -> str:
        """Plugin-API compliant text representation."""
        return self.name.lower()


def worst(states: Iterable[State]) -> State:
    """Reduce *states* to the most significant state."""
    return functools.reduce(lambda a, b: a if a > b else b, states, State.OK)


class Thresholds:
    _warning: Optional[Range]

    _critical: Optional[Range]

    __slots__ = ("_warning", "_critical")

    def __init__(
        self,
        warning: Optional[RangeSpec] = None,
        critical: Optional[RangeSpec] = None,
    ) -> None:
        """Creates a warning/critical pair.

        :param warning: Warning threshold as :class:`~nagios_range.Range`
            object, range string or number. `None` never alerts.
        :param critical: Critical threshold, same types as `warning`.
        """
        object.__setattr__(
            self, "_warning", None if warning is None else Range.coerce(warning)
        )
        object.__setattr__(
            self, "_critical", None if critical is None else Range.coerce(critical)
        )

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("Thresholds are immutable")

    @property
    def warning(self) -> Optional[Range]:
        return self._warning

    @property
    def critical(self) -> Optional[Range]:
        return self._critical

    def _deciding(self, value: float) -> tuple[State, Optional[Range]]:
        if self.critical is not None and self.critical.alerts(value):
            return State.CRITICAL, self.critical
        if self.warning is not None and self.warning.alerts(value):
            return State.WARNING, self.warning
        return State.OK, None

    def evaluate(self, value: float) -> State:
        """Compares `value` with the critical range first, then with the
        warning range.
        """
        state, range_ = self._deciding(value)
        if range_ is not None:
            _log.debug("%s is %s: %s", value, state, range_.violation)
        return state

    def evaluate_all(self, values: Iterable[float]) -> State:
        return worst(self.evaluate(value) for value in values)

    def hint(self, value: float) -> Optional[str]:
        """Violation text of the range that decides the state of `value`,
        or `None` if it is ok."""
        range_ = self._deciding(value)[1]
        if range_ is None:
            return None
        return range_.violation

    def __repr__(self) -> str:
        return "Thresholds(warning={0!r}, critical={1!r})".format(
            self.warning, self.critical
        )
