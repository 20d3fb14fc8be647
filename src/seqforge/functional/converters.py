"""Conversion between lists and separator-joined strings.

Serialisation writes each element's canonical text. Parsing goes through an
explicit registry that maps each :class:`ElementKind` to a parser function,
so the caller names the kind it wants back instead of having it inferred.

Parsing is *best effort* by contract: a token that its parser rejects is
dropped from the result, and a kind with no registered parser gives an empty
list. :func:`convert_to_list` never raises for bad input. Callers that need to
know what was dropped can use :func:`parse_tokens`, which reports every token
with its outcome.

Examples:
    >>> convert_to_string([1, 2, 3])
    '1,2,3'
    >>> convert_to_list("1,x,3", ElementKind.INT)
    [1, 3]
    >>> convert_to_list("true,False", "bool")
    [True, False]
"""

import datetime as dt
import re
import typing as tp

from seqforge.core.config import settings
from seqforge.core.enums import ConsoleColor, ElementKind
from seqforge.logger.logger import get_logger

__all__ = [
    "ParsedToken",
    "Parser",
    "convert_to_string",
    "convert_to_list",
    "parse_tokens",
    "register_converter",
    "format_timespan",
]

logger = get_logger(__name__)

Parser = tp.Callable[[str], tp.Any]

_INT_PATTERN = re.compile(r"^\s*[+-]?\d+\s*$")
# [-][d.]hh:mm[:ss[.fffffff]]
_TIMESPAN_PATTERN = re.compile(
    r"^\s*(?P<sign>-)?"
    r"(?:(?P<days>\d+)\.)?"
    r"(?P<hours>\d{1,2}):(?P<minutes>\d{1,2})"
    r"(?::(?P<seconds>\d{1,2})(?:\.(?P<fraction>\d{1,7}))?)?\s*$"
)
_DAYS_PATTERN = re.compile(r"^\s*(?P<sign>-)?(?P<days>\d+)\s*$")


class ParsedToken(tp.NamedTuple):
    """Outcome of parsing one token."""

    token: str
    value: tp.Any
    ok: bool


def parse_int(token: str) -> int:
    if not _INT_PATTERN.match(token):
        raise ValueError(f"not an integer: {token!r}")
    return int(token)


def parse_char(token: str) -> str:
    if len(token) != 1:
        raise ValueError(f"not a single character: {token!r}")
    return token


def parse_bool(token: str) -> bool:
    text = token.strip().lower()
    if text == "true":
        return True
    if text == "false":
        return False
    raise ValueError(f"not a boolean: {token!r}")


def parse_string(token: str) -> str:
    return token


def parse_color(token: str) -> ConsoleColor:
    """Parse a palette colour by member name or by defined numeric value."""
    text = token.strip()
    if text in ConsoleColor.__members__:
        return ConsoleColor[text]
    if _INT_PATTERN.match(text):
        # Raises ValueError for numbers outside the palette
        return ConsoleColor(int(text))
    raise ValueError(f"not a console colour: {token!r}")


def parse_timespan(token: str) -> dt.timedelta:
    """Parse ``[-][d.]hh:mm[:ss[.fffffff]]`` or a bare day count.

    Values beyond the ``timedelta`` range raise ``ValueError`` like any other
    rejected token.
    """
    try:
        return _parse_timespan(token)
    except OverflowError as e:
        raise ValueError(f"time interval out of range: {token!r}") from e


def _parse_timespan(token: str) -> dt.timedelta:
    match = _DAYS_PATTERN.match(token)
    if match:
        days = int(match["days"])
        return dt.timedelta(days=-days if match["sign"] else days)

    match = _TIMESPAN_PATTERN.match(token)
    if not match:
        raise ValueError(f"not a time interval: {token!r}")

    hours, minutes = int(match["hours"]), int(match["minutes"])
    seconds = int(match["seconds"] or 0)
    if hours > 23 or minutes > 59 or seconds > 59:
        raise ValueError(f"time component out of range: {token!r}")

    fraction = match["fraction"] or ""
    # Fraction has up to 7 digits (100ns ticks); timedelta keeps microseconds
    microseconds = int(fraction.ljust(7, "0")[:6]) if fraction else 0
    value = dt.timedelta(
        days=int(match["days"] or 0),
        hours=hours,
        minutes=minutes,
        seconds=seconds,
        microseconds=microseconds,
    )
    return -value if match["sign"] else value


def format_timespan(value: dt.timedelta) -> str:
    """Render a timedelta as ``[-][d.]hh:mm:ss[.ffffff]``.

    Examples:
        >>> format_timespan(dt.timedelta(hours=1))
        '01:00:00'
        >>> format_timespan(dt.timedelta(days=1, seconds=30))
        '1.00:00:30'
    """
    sign = "-" if value < dt.timedelta(0) else ""
    value = abs(value)
    hours, remainder = divmod(value.seconds, 3600)
    minutes, seconds = divmod(remainder, 60)

    text = f"{hours:02d}:{minutes:02d}:{seconds:02d}"
    if value.days:
        text = f"{value.days}.{text}"
    if value.microseconds:
        text = f"{text}.{value.microseconds:06d}"
    return sign + text


_REGISTRY: tp.Dict[ElementKind, Parser] = {
    ElementKind.INT: parse_int,
    ElementKind.CHAR: parse_char,
    ElementKind.BOOL: parse_bool,
    ElementKind.STRING: parse_string,
    ElementKind.COLOR: parse_color,
    ElementKind.TIMESPAN: parse_timespan,
}


def register_converter(kind: ElementKind, parser: Parser) -> None:
    """Register (or replace) the parser used for ``kind``.

    A parser takes one token and returns the parsed value, raising
    ``ValueError`` for tokens it rejects.
    """
    _REGISTRY[kind] = parser


def _to_text(item: tp.Any) -> str:
    if isinstance(item, dt.timedelta):
        return format_timespan(item)
    return str(item)


def convert_to_string(
    items: tp.Optional[tp.Iterable[tp.Any]], separator: tp.Optional[str] = None
) -> tp.Optional[str]:
    """Join the text form of every item with ``separator``.

    Args:
        items: Items to serialise.
        separator: Defaults to ``settings.LIST_SEPARATOR``.

    Returns:
        The joined string, or None when ``items`` is None.

    Examples:
        >>> convert_to_string([True, False])
        'True,False'
        >>> convert_to_string([ConsoleColor.Black, ConsoleColor.Blue])
        'Black,Blue'
    """
    if items is None:
        return None
    separator = separator or settings.LIST_SEPARATOR
    return separator.join(_to_text(item) for item in items)


def parse_tokens(
    text: tp.Optional[str],
    kind: tp.Union[ElementKind, str],
    separator: tp.Optional[str] = None,
) -> tp.List[ParsedToken]:
    """Parse every token and report each outcome.

    Args:
        text: Separator-joined tokens.
        kind: The element kind to parse into.
        separator: Defaults to ``settings.LIST_SEPARATOR``.

    Returns:
        One ``ParsedToken`` per token. Empty when ``text`` is None or the
        kind is not supported.
    """
    member = ElementKind.lookup(kind)
    parser = _REGISTRY.get(member) if member is not None else None
    if text is None or parser is None:
        if parser is None:
            logger.debug(f"No converter registered for element kind {kind!r}")
        return []

    separator = separator or settings.LIST_SEPARATOR
    results = []
    for token in text.split(separator):
        try:
            results.append(ParsedToken(token, parser(token), True))
        except ValueError:
            results.append(ParsedToken(token, None, False))
    return results


def convert_to_list(
    text: tp.Optional[str],
    kind: tp.Union[ElementKind, str],
    separator: tp.Optional[str] = None,
) -> tp.List[tp.Any]:
    """Parse a separator-joined string into a list of ``kind`` values.

    Tokens that fail to parse are dropped. An unsupported ``kind`` or a None
    ``text`` gives ``[]``; this function does not raise on bad input.

    Args:
        text: Separator-joined tokens, e.g. ``"1,2,3"``.
        kind: An ``ElementKind`` or its string value (``"int"``, ``"bool"``...).
        separator: Defaults to ``settings.LIST_SEPARATOR``.

    Returns:
        The successfully parsed values in order.

    Examples:
        >>> convert_to_list("Black,Blue,Nope", ElementKind.COLOR)
        [<ConsoleColor.Black: 0>, <ConsoleColor.Blue: 9>]
        >>> convert_to_list("1:00:00,0:00:30", "timespan")
        [datetime.timedelta(seconds=3600), datetime.timedelta(seconds=30)]
    """
    return [
        parsed.value
        for parsed in parse_tokens(text, kind, separator)
        if parsed.ok
    ]
