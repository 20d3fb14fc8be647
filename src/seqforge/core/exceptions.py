"""Exception hierarchy shared by every seqforge module.

All errors derive from :class:`SeqForgeError` so callers can catch the whole
family at once. The argument and bounds errors also derive from the matching
builtin (``ValueError`` / ``IndexError``), so code written against the builtins
keeps working.
"""

__all__ = [
    "SeqForgeError",
    "InvalidArgumentError",
    "IndexBoundsError",
    "TransientOperationError",
]


class SeqForgeError(Exception):
    """Base exception for all seqforge errors."""

    def __init__(self, message: str = "", *, argument: str | None = None):
        super().__init__(message)
        self.message = message
        self.argument = argument

    def __str__(self) -> str:
        if self.argument and self.message:
            return f"{self.argument}: {self.message}"
        return self.message or self.argument or ""


class InvalidArgumentError(SeqForgeError, ValueError):
    """A required argument is absent or otherwise unusable."""


class IndexBoundsError(SeqForgeError, IndexError):
    """An index lies outside the valid range of a fixed-size collection."""

    def __init__(self, index: int, size: int, *, argument: str | None = None):
        super().__init__(
            f"index {index} is out of range for a collection of size {size}",
            argument=argument,
        )
        self.index = index
        self.size = size


class TransientOperationError(SeqForgeError):
    """A retryable failure (network hiccup, timeout, temporarily unavailable)."""
