"""Sequence transformations modelled on functional query operators.

Every function here is independent and side-effect free: inputs are read,
never modified, and results are returned as new lists or scalars.

String sequences may contain both ``""`` and ``None``. The two are distinct
values and both are tolerated unless a function documents that it rejects
absent input, in which case it raises :class:`InvalidArgumentError`.

The catalogue groups into:
    - **Element-wise maps**: uppercase, lengths, squares, running sums
    - **Filters and selections**: prefix filter, every n-th item, top items,
      first negative run, type subsets of heterogeneous sequences
    - **Aggregates**: counts, totals, quarterly sums, averages
    - **Set-like queries**: used, common and missing characters
    - **Ordering**: length/alphabet sort, digit-name sort
    - **Pairing**: zipped labels, cartesian pairs, vector arithmetic

Examples:
    >>> from seqforge.functional.sequences import get_top_items, get_quarter_sales
    >>> get_top_items([1, 2, 3, 4, 5, 6, 7, 8, 9, 10])
    [10, 9, 8]
    >>> import datetime as dt
    >>> get_quarter_sales([(dt.date(2010, 1, 1), 10), (dt.date(2010, 4, 4), 10)])
    [10, 10, 0, 0]
"""

import collections.abc
import inspect
import itertools
import types
import typing as tp
from collections import Counter

import numpy as np
import pandas as pd

from seqforge.core.enums import DigitName
from seqforge.core.exceptions import InvalidArgumentError
from seqforge.core.types import SaleRecord

__all__ = [
    "get_uppercase_strings",
    "get_strings_length",
    "get_square_sequence",
    "get_moving_sum_sequence",
    "get_prefix_items",
    "get_every_nth_item",
    "get_even_items",
    "propagate_items_by_position",
    "get_used_chars",
    "get_string_of_sequence",
    "get_top_items",
    "get_count_greater_than",
    "get_first_containing",
    "get_count_of_unique_strings_with_length",
    "get_count_of_strings",
    "get_count_of_strings_with_max_length",
    "get_digit_chars_count",
    "get_iterable_type_names",
    "get_quarter_sales",
    "sort_strings_by_length_and_alphabet",
    "get_missing_digits",
    "sort_digit_names_by_numeric_order",
    "combine_numbers_and_fruits",
    "get_common_chars",
    "get_sum_of_all_ints",
    "get_strings_only",
    "get_total_strings_length",
    "is_sequence_has_nulls",
    "is_all_strings_are_uppercase",
    "get_first_negative_subsequence",
    "are_numeric_lists_equal",
    "get_next_version_from_list",
    "get_sum_of_vectors",
    "get_product_of_vectors",
    "get_all_pairs",
    "get_average_of_double_values",
]

T = tp.TypeVar("T")

DIGITS = "0123456789"
QUARTERS = (1, 2, 3, 4)


def _require(value: tp.Any, argument: str) -> None:
    if value is None:
        raise InvalidArgumentError("must not be None", argument=argument)


# ---------------------------------------------------------------------------
# Element-wise maps
# ---------------------------------------------------------------------------


def get_uppercase_strings(
    data: tp.Iterable[tp.Optional[str]],
) -> tp.List[tp.Optional[str]]:
    """Transform every string to uppercase.

    ``""`` and ``None`` are kept in place, so the result always has the same
    length as the input.

    Args:
        data: Source strings.

    Returns:
        The strings in uppercase.

    Examples:
        >>> get_uppercase_strings(["a", "A", "", None])
        ['A', 'A', '', None]
    """
    return [item.upper() if item else item for item in data]


def get_strings_length(data: tp.Iterable[tp.Optional[str]]) -> tp.List[int]:
    """Map each string to its length, counting ``None`` as 0."""
    return [len(item) if item is not None else 0 for item in data]


def get_square_sequence(data: tp.Optional[tp.Iterable[int]]) -> tp.List[int]:
    """Square every element: ``f(x) = x * x``."""
    if data is None:
        return []
    return [item * item for item in data]


def get_moving_sum_sequence(data: tp.Optional[tp.Iterable[int]]) -> tp.List[int]:
    """Running totals, ``f[n] = x[0] + ... + x[n]``.

    Args:
        data: Source numbers.

    Returns:
        A list as long as the input whose last element is the total sum.

    Examples:
        >>> get_moving_sum_sequence([1, -1, 1, -1, -1])
        [1, 0, 1, 0, -1]
    """
    if data is None:
        return []
    return list(itertools.accumulate(data))


# ---------------------------------------------------------------------------
# Filters and selections
# ---------------------------------------------------------------------------


def get_prefix_items(
    data: tp.Iterable[tp.Optional[str]], prefix: str
) -> tp.List[str]:
    """Filter strings by a case-insensitive prefix.

    Leading and trailing whitespace of each element is ignored for the match,
    but matching elements are returned unchanged. ``None`` elements never
    match. An empty prefix therefore returns every non-null element.

    Args:
        data: Source strings.
        prefix: Required prefix.

    Returns:
        Matching elements in source order.

    Raises:
        InvalidArgumentError: If ``data`` or ``prefix`` is None.
    """
    _require(data, "data")
    _require(prefix, "prefix")

    needle = prefix.casefold()
    return [
        item
        for item in data
        if item is not None and item.strip().casefold().startswith(needle)
    ]


def get_every_nth_item(data: tp.Iterable[T], n: int = 2) -> tp.List[T]:
    """Select the items at 1-based positions ``n, 2n, 3n, ...``.

    Args:
        data: Source sequence.
        n: Step between selected positions. Must be at least 1.

    Returns:
        The selected items.

    Raises:
        InvalidArgumentError: If ``data`` is None or ``n`` is less than 1.
    """
    _require(data, "data")
    if n < 1:
        raise InvalidArgumentError(f"must be at least 1, got {n}", argument="n")
    return list(itertools.islice(data, n - 1, None, n))


def get_even_items(data: tp.Iterable[T]) -> tp.List[T]:
    """Every second item: ``[1, 2, 3, 4] -> [2, 4]``."""
    return get_every_nth_item(data, 2)


def propagate_items_by_position(data: tp.Iterable[T]) -> tp.List[T]:
    """Repeat each item as many times as its 1-based position.

    Examples:
        >>> propagate_items_by_position(["a", "b", "c"])
        ['a', 'b', 'b', 'c', 'c', 'c']
    """
    return [
        item
        for position, item in enumerate(data, start=1)
        for _ in range(position)
    ]


def get_top_items(data: tp.Iterable[T], count: int = 3) -> tp.List[T]:
    """The ``count`` largest items in descending order.

    Equal values are all kept, so ``[10, 10, 10, 10]`` gives ``[10, 10, 10]``.

    Args:
        data: Source comparable values.
        count: How many items to return.

    Returns:
        At most ``count`` items, largest first.
    """
    if count < 0:
        raise InvalidArgumentError(f"must not be negative, got {count}", argument="count")
    return sorted(data, reverse=True)[:count]


def get_first_negative_subsequence(data: tp.Iterable[int]) -> tp.List[int]:
    """The first run of consecutive negative numbers.

    Examples:
        >>> get_first_negative_subsequence([1, 1, -1, -1, 0, -2])
        [-1, -1]
    """
    remaining = itertools.dropwhile(lambda x: x >= 0, data)
    return list(itertools.takewhile(lambda x: x < 0, remaining))


def get_strings_only(data: tp.Optional[tp.Iterable[tp.Any]]) -> tp.List[str]:
    """The ``str`` elements of a heterogeneous sequence, in order."""
    if data is None:
        return []
    return [item for item in data if isinstance(item, str)]


def get_next_version_from_list(
    versions: tp.Iterable[str], current_version: str
) -> tp.Optional[str]:
    """The version listed right after ``current_version``.

    The list is taken to be sorted already; no version parsing is done.

    Args:
        versions: Versions in release order.
        current_version: The version to look up.

    Returns:
        The next version, or None if ``current_version`` is last or absent.
    """
    versions = list(versions)
    try:
        position = versions.index(current_version)
    except ValueError:
        return None
    if position == len(versions) - 1:
        return None
    return versions[position + 1]


# ---------------------------------------------------------------------------
# Aggregates
# ---------------------------------------------------------------------------


def get_string_of_sequence(data: tp.Optional[tp.Iterable[tp.Any]]) -> str:
    """Comma-joined text of a sequence, writing ``None`` as ``"null"``.

    Examples:
        >>> get_string_of_sequence(["a", "b", None, ""])
        'a,b,null,'
    """
    if data is None:
        return ""
    return ",".join("null" if item is None else str(item) for item in data)


def get_count_greater_than(data: tp.Iterable[int], threshold: int = 10) -> int:
    """Count the items strictly greater than ``threshold``."""
    return sum(1 for item in data if item > threshold)


def get_first_containing(
    data: tp.Optional[tp.Iterable[tp.Optional[str]]], needle: str = "first"
) -> tp.Optional[str]:
    """First string that contains ``needle``, ignoring case; else None.

    Examples:
        >>> get_first_containing(["a", "IT IS FIRST", "first item"])
        'IT IS FIRST'
    """
    if data is None:
        return None
    target = needle.casefold()
    return next(
        (item for item in data if item is not None and target in item.casefold()),
        None,
    )


def get_count_of_unique_strings_with_length(
    data: tp.Optional[tp.Iterable[tp.Optional[str]]], length: int = 3
) -> int:
    """Number of distinct non-null strings of exactly ``length`` characters."""
    if data is None:
        return 0
    return len({item for item in data if item is not None and len(item) == length})


def get_count_of_strings(
    data: tp.Iterable[tp.Optional[str]],
) -> tp.List[tp.Tuple[tp.Optional[str], int]]:
    """Occurrence count of each distinct string.

    Pairs come out in the order each value first appears; ``None`` is counted
    as a value of its own.

    Examples:
        >>> get_count_of_strings(["a", "a", None, "", "ccc", ""])
        [('a', 2), (None, 1), ('', 2), ('ccc', 1)]
    """
    return list(Counter(data).items())


def get_count_of_strings_with_max_length(
    data: tp.Iterable[tp.Optional[str]],
) -> int:
    """Number of strings sharing the maximum length (``None`` has length 0)."""
    lengths = get_strings_length(data)
    if not lengths:
        return 0
    longest = max(lengths)
    return lengths.count(longest)


def get_digit_chars_count(text: str) -> int:
    """Count the decimal digit characters in ``text``.

    Raises:
        InvalidArgumentError: If ``text`` is None.
    """
    _require(text, "text")
    return sum(1 for char in text if char.isdecimal())


def get_quarter_sales(sales: tp.Iterable[SaleRecord]) -> tp.List[tp.Union[int, float]]:
    """Sum sales amounts into the four calendar quarters.

    Only the month of each date matters; sales from different years land in
    the same bucket.

    Args:
        sales: ``(date, amount)`` pairs. Dates may be ``date``, ``datetime``
            or ``pandas.Timestamp`` values.

    Returns:
        ``[Q1, Q2, Q3, Q4]`` totals. Quarters without sales are 0.

    Examples:
        >>> import datetime as dt
        >>> get_quarter_sales([(dt.date(2010, 1, 1), 10), (dt.date(2010, 10, 10), 10)])
        [10, 0, 0, 10]
    """
    frame = pd.DataFrame(list(sales), columns=["date", "amount"])
    if frame.empty:
        return [0] * len(QUARTERS)

    # Read the month directly; datetime64 conversion only covers years 1677-2262
    quarter = frame["date"].map(lambda date: (date.month - 1) // 3 + 1)
    totals = frame["amount"].groupby(quarter).sum()
    return totals.reindex(list(QUARTERS), fill_value=0).tolist()


def get_sum_of_all_ints(data: tp.Optional[tp.Iterable[tp.Any]]) -> int:
    """Sum of the ``int`` elements of a heterogeneous sequence.

    Booleans are not counted even though ``bool`` subclasses ``int``.

    Examples:
        >>> get_sum_of_all_ints([1, True, "a", "b", False, 1])
        2
    """
    if data is None:
        return 0
    return sum(
        item for item in data if isinstance(item, int) and not isinstance(item, bool)
    )


def get_total_strings_length(
    data: tp.Optional[tp.Iterable[tp.Optional[str]]],
) -> int:
    """Total number of characters across all non-null strings."""
    if data is None:
        return 0
    return sum(len(item) for item in data if item is not None)


def is_sequence_has_nulls(data: tp.Iterable[tp.Any]) -> bool:
    """True if any element is None."""
    return any(item is None for item in data)


def is_all_strings_are_uppercase(data: tp.Iterable[tp.Optional[str]]) -> bool:
    """True if every character of every string is uppercase.

    An empty sequence, or one holding ``""`` or ``None``, is not uppercase.
    """
    data = list(data)
    if not data or any(not item for item in data):
        return False
    return all(char.isupper() for item in data for char in item)


def get_average_of_double_values(data: tp.Iterable[tp.Any]) -> float:
    """Mean of the ``float`` elements of a heterogeneous sequence.

    Integers, booleans, strings and None are ignored.

    Returns:
        The mean, or 0.0 when there are no float elements.

    Examples:
        >>> get_average_of_double_values([1.0, 2.0, None, "a"])
        1.5
    """
    values = [item for item in data if isinstance(item, float)]
    if not values:
        return 0.0
    return float(np.mean(values))


# ---------------------------------------------------------------------------
# Set-like character queries
# ---------------------------------------------------------------------------


def get_used_chars(data: tp.Optional[tp.Iterable[tp.Optional[str]]]) -> tp.List[str]:
    """Distinct characters used across all strings, in first-seen order."""
    if data is None:
        return []
    return list(dict.fromkeys(char for item in data if item for char in item))


def get_common_chars(data: tp.Optional[tp.Iterable[tp.Optional[str]]]) -> tp.List[str]:
    """Characters that occur in every string, sorted.

    Examples:
        >>> get_common_chars(["ab", "ba", "aabb", "baba"])
        ['a', 'b']
    """
    if data is None:
        return []
    data = list(data)
    if not data or any(not item for item in data):
        return []

    common = set(data[0])
    for item in data[1:]:
        common &= set(item)
    return sorted(common)


def get_missing_digits(data: tp.Iterable[tp.Optional[str]]) -> tp.List[str]:
    """Digits ``0``..``9`` that appear in none of the strings, ascending."""
    used = set(get_used_chars(data))
    return [digit for digit in DIGITS if digit not in used]


# ---------------------------------------------------------------------------
# Ordering
# ---------------------------------------------------------------------------


def sort_strings_by_length_and_alphabet(
    data: tp.Optional[tp.Iterable[tp.Optional[str]]],
) -> tp.List[tp.Optional[str]]:
    """Sort by length, then alphabetically. ``None`` sorts before ``""``."""
    if data is None:
        return []
    return sorted(
        data,
        key=lambda item: (0, 0, "") if item is None else (len(item), 1, item),
    )


def sort_digit_names_by_numeric_order(
    data: tp.Optional[tp.Iterable[str]],
) -> tp.List[str]:
    """Sort digit names (``"zero"`` .. ``"nine"``) by the digit they name.

    Args:
        data: Digit names.

    Returns:
        The names ordered by value; equal names keep their relative order.

    Raises:
        InvalidArgumentError: If a token is not a digit name.

    Examples:
        >>> sort_digit_names_by_numeric_order(["nine", "eight", "nine", "eight"])
        ['eight', 'eight', 'nine', 'nine']
    """
    if data is None:
        return []
    data = list(data)
    unknown = [token for token in data if token not in DigitName.__members__]
    if unknown:
        raise InvalidArgumentError(
            f"unknown digit names: {unknown!r}", argument="data"
        )
    return sorted(data, key=DigitName.rank)


# ---------------------------------------------------------------------------
# Pairing and vector arithmetic
# ---------------------------------------------------------------------------


def combine_numbers_and_fruits(
    numbers: tp.Optional[tp.Iterable[str]],
    fruits: tp.Optional[tp.Iterable[str]],
) -> tp.List[str]:
    """Join zipped pairs as ``"<number> <fruit>"``, stopping at the shorter input.

    Examples:
        >>> combine_numbers_and_fruits(["one", "two", "three"], ["apple", "bananas"])
        ['one apple', 'two bananas']
    """
    if numbers is None or fruits is None:
        return []
    return [f"{number} {fruit}" for number, fruit in zip(numbers, fruits)]


def get_all_pairs(
    left: tp.Iterable[str], right: tp.Iterable[str], separator: str = "+"
) -> tp.List[str]:
    """Every ``left+right`` label, row-major over ``left``.

    Examples:
        >>> get_all_pairs(["John", "Josh"], ["Ann", "Alice"])
        ['John+Ann', 'John+Alice', 'Josh+Ann', 'Josh+Alice']
    """
    return [f"{a}{separator}{b}" for a, b in itertools.product(left, right)]


def are_numeric_lists_equal(
    integers: tp.Iterable[int], doubles: tp.Iterable[float]
) -> bool:
    """True if both sequences hold the same values in the same order.

    Sequences of different lengths are never equal.
    """
    sentinel = object()
    return all(
        a is not sentinel and b is not sentinel and float(a) == float(b)
        for a, b in itertools.zip_longest(integers, doubles, fillvalue=sentinel)
    )


def _as_vectors(
    vector1: tp.Iterable[float], vector2: tp.Iterable[float]
) -> tp.Tuple[np.ndarray, np.ndarray]:
    a = np.asarray(list(vector1))
    b = np.asarray(list(vector2))
    if a.ndim != 1 or b.ndim != 1:
        raise InvalidArgumentError("vectors must be one-dimensional", argument="vector")
    if a.shape != b.shape:
        raise InvalidArgumentError(
            f"length mismatch: {a.shape[0]} != {b.shape[0]}", argument="vector2"
        )
    return a, b


def get_sum_of_vectors(
    vector1: tp.Iterable[float], vector2: tp.Iterable[float]
) -> tp.List[float]:
    """Element-wise sum ``(x1+y1, ..., xn+yn)``.

    Raises:
        InvalidArgumentError: If the vectors differ in length.
    """
    a, b = _as_vectors(vector1, vector2)
    return (a + b).tolist()


def get_product_of_vectors(
    vector1: tp.Iterable[float], vector2: tp.Iterable[float]
) -> tp.Union[int, float]:
    """Dot product ``x1*y1 + ... + xn*yn``.

    Raises:
        InvalidArgumentError: If the vectors differ in length.
    """
    a, b = _as_vectors(vector1, vector2)
    if a.size == 0:
        return 0
    return np.dot(a, b).item()


# ---------------------------------------------------------------------------
# Introspection
# ---------------------------------------------------------------------------


def get_iterable_type_names(module: types.ModuleType) -> tp.List[str]:
    """Names of the public classes a module exports that are iterable.

    The exported names are ``module.__all__`` when defined, otherwise every
    attribute not starting with an underscore.

    Args:
        module: The module to inspect.

    Returns:
        Sorted class names implementing ``collections.abc.Iterable``.

    Raises:
        InvalidArgumentError: If ``module`` is None.
    """
    _require(module, "module")

    exported = getattr(module, "__all__", None)
    if exported is None:
        exported = [name for name in vars(module) if not name.startswith("_")]

    names = set()
    for name in exported:
        obj = getattr(module, name, None)
        if inspect.isclass(obj) and issubclass(obj, collections.abc.Iterable):
            names.add(obj.__name__)
    return sorted(names)
