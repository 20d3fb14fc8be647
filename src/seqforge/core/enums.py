"""Enumerations for convertible element kinds, the console palette and digit names."""

from enum import Enum
import typing as tp

__all__ = ["ElementKind", "ConsoleColor", "DigitName"]


class ElementKind(Enum):
    """Element kinds understood by the list/string converter."""

    INT = "int"
    CHAR = "char"
    BOOL = "bool"
    STRING = "string"
    COLOR = "color"
    TIMESPAN = "timespan"

    @classmethod
    def lookup(cls, kind: tp.Union["ElementKind", str]) -> tp.Optional["ElementKind"]:
        """Resolve a kind given either as a member or as its string value.

        Args:
            kind: An ``ElementKind`` member, or its value/name (case-insensitive).

        Returns:
            The matching member, or ``None`` when the kind is not supported.
        """
        if isinstance(kind, cls):
            return kind
        if not isinstance(kind, str):
            return None
        key = kind.strip().lower()
        for member in cls:
            if key in (member.value, member.name.lower()):
                return member
        return None


class ConsoleColor(Enum):
    """The fixed 16-colour console palette."""

    Black = 0
    DarkBlue = 1
    DarkGreen = 2
    DarkCyan = 3
    DarkRed = 4
    DarkMagenta = 5
    DarkYellow = 6
    Gray = 7
    DarkGray = 8
    Blue = 9
    Green = 10
    Cyan = 11
    Red = 12
    Magenta = 13
    Yellow = 14
    White = 15

    def __str__(self) -> str:
        return self.name


class DigitName(Enum):
    """English digit names mapped to their numeric rank."""

    zero = 0
    one = 1
    two = 2
    three = 3
    four = 4
    five = 5
    six = 6
    seven = 7
    eight = 8
    nine = 9

    @classmethod
    def rank(cls, token: str) -> int:
        """Numeric rank of a digit name.

        Args:
            token: One of ``"zero"`` .. ``"nine"``.

        Returns:
            The digit value.

        Raises:
            KeyError: If ``token`` is not a digit name.
        """
        return cls[token].value
