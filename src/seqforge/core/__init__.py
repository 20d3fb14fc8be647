"""Core building blocks: errors, enums, types, configuration and the singleton holder."""

from seqforge.core.enums import ConsoleColor, DigitName, ElementKind
from seqforge.core.exceptions import (
    IndexBoundsError,
    InvalidArgumentError,
    SeqForgeError,
    TransientOperationError,
)
from seqforge.core.singleton import SingletonHolder

__all__ = [
    "ConsoleColor",
    "DigitName",
    "ElementKind",
    "SeqForgeError",
    "InvalidArgumentError",
    "IndexBoundsError",
    "TransientOperationError",
    "SingletonHolder",
]
