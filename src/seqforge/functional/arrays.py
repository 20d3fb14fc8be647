"""In-place operations on mutable fixed-size sequences."""

import operator
import typing as tp

from pydantic import ValidationError

from seqforge.core.exceptions import IndexBoundsError, InvalidArgumentError
from seqforge.core.types import TUPLE_ROW_WIDTH, TupleRow, tuple_rows_adapter

__all__ = [
    "swap_array_elements",
    "sort_tuple_array",
]

T = tp.TypeVar("T")


def _check_index(index: int, size: int, argument: str) -> int:
    try:
        index = operator.index(index)
    except TypeError as e:
        raise InvalidArgumentError(
            f"must be an integer, got {type(index).__name__}", argument=argument
        ) from e
    if not 0 <= index < size:
        raise IndexBoundsError(index, size, argument=argument)
    return index


def swap_array_elements(array: tp.MutableSequence[T], index1: int, index2: int) -> None:
    """Swap two elements of ``array`` in place.

    Both indices are checked the same way: each must satisfy
    ``0 <= index < len(array)``. Negative indices are rejected rather than
    counted from the end.

    Args:
        array: A list, numpy array or other mutable sequence.
        index1: First position.
        index2: Second position.

    Raises:
        InvalidArgumentError: If ``array`` is None or an index is not an
            integer.
        IndexBoundsError: If either index is out of range.
    """
    if array is None:
        raise InvalidArgumentError("must not be None", argument="array")

    size = len(array)
    index1 = _check_index(index1, size, "index1")
    index2 = _check_index(index2, size, "index2")
    if index1 == index2:
        return

    array[index1], array[index2] = array[index2], array[index1]


def sort_tuple_array(
    array: tp.List[TupleRow], sorted_column: int, ascending: bool = True
) -> None:
    """Sort 3-column rows in place by one column.

    The sort is stable in both directions: rows with equal keys keep their
    original relative order.

    Args:
        array: Rows of three mutually comparable columns.
        sorted_column: Column index, 0 to 2.
        ascending: False for descending order.

    Raises:
        IndexBoundsError: If ``sorted_column`` is not 0, 1 or 2.
        InvalidArgumentError: If ``array`` is not a list, ``sorted_column`` is
            not an integer, or a row is not 3 columns wide.

    Examples:
        >>> rows = [(1, "a", False), (3, "b", False), (2, "c", True)]
        >>> sort_tuple_array(rows, 1, ascending=False)
        >>> rows
        [(2, 'c', True), (3, 'b', False), (1, 'a', False)]
    """
    sorted_column = _check_index(sorted_column, TUPLE_ROW_WIDTH, "sorted_column")
    if not isinstance(array, list):
        raise InvalidArgumentError(
            f"must be a list, got {type(array).__name__}", argument="array"
        )

    try:
        tuple_rows_adapter.validate_python(array)
    except ValidationError as e:
        raise InvalidArgumentError(str(e), argument="array") from e

    array.sort(key=operator.itemgetter(sorted_column), reverse=not ascending)
