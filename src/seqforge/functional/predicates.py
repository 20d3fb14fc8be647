"""Predicate combinators."""

import typing as tp

from seqforge.core.exceptions import InvalidArgumentError

__all__ = ["Predicate", "combine_predicates"]

T = tp.TypeVar("T")

Predicate = tp.Callable[[T], bool]


def combine_predicates(predicates: tp.Iterable[Predicate[T]]) -> Predicate[T]:
    """Combine predicates with logical AND.

    The combined predicate evaluates the inputs in order and stops at the
    first one that returns a falsy value. With no predicates it is always
    true.

    Args:
        predicates: Single-argument predicates over the same element type.

    Returns:
        A predicate equivalent to ``p1(x) and p2(x) and ...``.

    Raises:
        InvalidArgumentError: If ``predicates`` is None or holds a
            non-callable entry.

    Examples:
        >>> in_range = combine_predicates([lambda x: x > -10, lambda x: x < 10])
        >>> in_range(0), in_range(10)
        (True, False)
    """
    if predicates is None:
        raise InvalidArgumentError("must not be None", argument="predicates")

    # Snapshot so later changes to the caller's list do not leak in
    checks = tuple(predicates)
    for position, check in enumerate(checks):
        if not callable(check):
            raise InvalidArgumentError(
                f"entry {position} is not callable: {check!r}", argument="predicates"
            )

    def combined(value: T) -> bool:
        return all(check(value) for check in checks)

    return combined
