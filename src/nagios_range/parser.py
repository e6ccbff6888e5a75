"""Parser for the range expression grammar.

::

    range := ["@"] spec
    spec  := [bound] ":" [bound] | bound
    bound := "~" | number

A missing start means 0, a missing end means positive infinity and
``~`` as start means negative infinity. Tokens are taken literally,
surrounding whitespace is not stripped.
"""

import logging
import math
import re

from .bound import End, Start
from .error import EmptyRange, ParseEndPoint, ParseStartPoint
from .range import Polarity, Range

INVERT_MARKER = "@"

SEPARATOR = ":"

INFINITY_MARKER = "~"

_NUMBER = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")

_log = logging.getLogger(__name__)


def parse_number(text: str) -> float:
    """Converts a signed decimal numeral to a finite float.

    Unlike :func:`float` this accepts neither ``inf`` nor ``nan``, nor
    whitespace, digit group underscores or non-ASCII digits.

    :raise ValueError: if `text` is no numeral or overflows
    """
    if not _NUMBER.fullmatch(text):
        raise ValueError("invalid numeral {0!r}".format(text))
    value = float(text)
    if math.isinf(value):
        raise ValueError("numeral {0!r} is out of range".format(text))
    return value


def _parse_start(text: str) -> Start:
    if text == "":
        return Start(0)
    if text == INFINITY_MARKER:
        return Start()
    try:
        return Start(parse_number(text))
    except ValueError as exc:
        raise ParseStartPoint(text, exc) from exc


def _parse_end(text: str) -> End:
    try:
        return End(parse_number(text))
    except ValueError as exc:
        raise ParseEndPoint(text, exc) from exc


def parse(spec: str) -> Range:
    """Creates a Range from a range expression such as ``@10:20``.

    :raise EmptyRange: if `spec` is the empty string
    :raise ParseStartPoint: if the text left of ``:`` is neither empty,
        ``~`` nor a numeral
    :raise ParseEndPoint: if the text right of ``:`` (or the whole
        expression without ``:``) is not a numeral
    :raise StartGreaterThanEnd: if both end points are finite and the
        start is greater than the end
    """
    if not isinstance(spec, str):
        raise TypeError("range expression must be a string", spec)
    if spec == "":
        raise EmptyRange()

    polarity = Polarity.OUTSIDE
    text = spec
    if text.startswith(INVERT_MARKER):
        polarity = Polarity.INSIDE
        text = text[len(INVERT_MARKER) :]

    start_str, separator, end_str = text.partition(SEPARATOR)
    if not separator:
        start, end = Start(0), _parse_end(start_str)
    else:
        start = _parse_start(start_str)
        end = End() if end_str == "" else _parse_end(end_str)

    # both sides parsed, Range() checks the ordering
    result = Range(start, end, polarity)
    _log.debug("parsed range %r as %s", spec, result)
    return result
