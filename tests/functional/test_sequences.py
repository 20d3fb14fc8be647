import collections
import datetime as dt
import types

import pandas as pd
import pytest

from seqforge.core.exceptions import InvalidArgumentError
from seqforge.functional.sequences import (
    are_numeric_lists_equal,
    combine_numbers_and_fruits,
    get_all_pairs,
    get_average_of_double_values,
    get_common_chars,
    get_count_greater_than,
    get_count_of_strings,
    get_count_of_strings_with_max_length,
    get_count_of_unique_strings_with_length,
    get_digit_chars_count,
    get_even_items,
    get_every_nth_item,
    get_first_containing,
    get_first_negative_subsequence,
    get_iterable_type_names,
    get_missing_digits,
    get_moving_sum_sequence,
    get_next_version_from_list,
    get_prefix_items,
    get_product_of_vectors,
    get_quarter_sales,
    get_square_sequence,
    get_string_of_sequence,
    get_strings_length,
    get_strings_only,
    get_sum_of_all_ints,
    get_sum_of_vectors,
    get_top_items,
    get_total_strings_length,
    get_uppercase_strings,
    get_used_chars,
    is_all_strings_are_uppercase,
    is_sequence_has_nulls,
    propagate_items_by_position,
    sort_digit_names_by_numeric_order,
    sort_strings_by_length_and_alphabet,
)


@pytest.fixture
def versions():
    return ["1.1", "1.2", "1.5", "2.0"]


def test_uppercase_keeps_empty_and_none_in_place():
    data = ["a", "A", "", None]
    result = get_uppercase_strings(data)

    assert result == ["A", "A", "", None]
    assert len(result) == len(data)
    # Source is untouched
    assert data == ["a", "A", "", None]


def test_uppercase_is_locale_invariant():
    assert get_uppercase_strings(["istanbul", "straße"]) == ["ISTANBUL", "STRASSE"]


def test_strings_length():
    assert get_strings_length([]) == []
    assert get_strings_length(["aa", "bb", "cc", "", "  ", None]) == [2, 2, 2, 0, 2, 0]


def test_square_sequence():
    assert get_square_sequence([-1, -2, -3, -4, -5]) == [1, 4, 9, 16, 25]
    assert get_square_sequence(None) == []
    # No overflow for large values
    assert get_square_sequence([2**31]) == [2**62]


def test_moving_sum_length_and_last_element():
    data = [1, 2, 3, 4, 5, 6, 7, 8, 9, 10]
    result = get_moving_sum_sequence(data)

    assert result == [1, 3, 6, 10, 15, 21, 28, 36, 45, 55]
    assert len(result) == len(data)
    assert result[-1] == sum(data)


def test_moving_sum_alternating_and_empty():
    assert get_moving_sum_sequence([1, -1, 1, -1, -1]) == [1, 0, 1, 0, -1]
    assert get_moving_sum_sequence([]) == []
    assert get_moving_sum_sequence(None) == []


def test_prefix_items_is_case_insensitive():
    data = ["aaa", "bbbb", "ccc", None]
    assert get_prefix_items(data, "b") == ["bbbb"]
    assert get_prefix_items(data, "B") == ["bbbb"]
    assert get_prefix_items(["a", "b", "c"], "D") == []


def test_prefix_items_empty_prefix_returns_non_null_items_in_order():
    assert get_prefix_items(["c", "a", None, "b", ""], "") == ["c", "a", "b", ""]


def test_prefix_items_rejects_none_prefix_and_data():
    with pytest.raises(InvalidArgumentError, match="prefix"):
        get_prefix_items(["a", "b", "c"], None)
    with pytest.raises(InvalidArgumentError, match="data"):
        get_prefix_items(None, "a")


def test_prefix_error_is_also_value_error():
    with pytest.raises(ValueError):
        get_prefix_items(["a"], None)


def test_every_nth_item():
    assert get_even_items([1, 2, 3, 4, 5, 6, 7, 8, 9, 10]) == [2, 4, 6, 8, 10]
    assert get_even_items(["a", "b", "c", None]) == ["b", None]
    assert get_even_items(["a"]) == []
    assert get_every_nth_item(range(1, 10), 3) == [3, 6, 9]
    assert get_every_nth_item([1, 2], 1) == [1, 2]


def test_every_nth_item_rejects_bad_arguments():
    with pytest.raises(InvalidArgumentError):
        get_every_nth_item([1, 2, 3], 0)
    with pytest.raises(InvalidArgumentError):
        get_even_items(None)


def test_propagate_items_by_position():
    assert propagate_items_by_position([]) == []
    assert propagate_items_by_position([1]) == [1]
    assert propagate_items_by_position(["a", "b", "c", None]) == [
        "a", "b", "b", "c", "c", "c", None, None, None, None,
    ]


def test_used_chars():
    assert sorted(get_used_chars(["aaa", "bbb", "cccc", "abc"])) == ["a", "b", "c"]
    assert get_used_chars([" ", None, "   ", ""]) == [" "]
    assert get_used_chars(["", None]) == []
    assert get_used_chars([]) == []


def test_string_of_sequence():
    assert get_string_of_sequence([]) == ""
    assert get_string_of_sequence([1, 2, 3]) == "1,2,3"
    assert get_string_of_sequence(["a", "b", "c", None, ""]) == "a,b,c,null,"
    assert get_string_of_sequence(["", ""]) == ","
    assert get_string_of_sequence(None) == ""


def test_top_items():
    assert get_top_items([]) == []
    assert get_top_items([1, 2]) == [2, 1]
    assert get_top_items([10, 9, 8, 7, 6, 5, 4, 3, 2, 1]) == [10, 9, 8]
    assert get_top_items([1, 2, 3, 4, 5, 6, 7, 8, 9, 10]) == [10, 9, 8]
    assert get_top_items([10, 10, 10, 10]) == [10, 10, 10]
    assert get_top_items([5, 1, 7], count=1) == [7]


def test_count_greater_than():
    assert get_count_greater_than([]) == 0
    assert get_count_greater_than([1, 2, 10]) == 0
    assert get_count_greater_than([1, 20, 30, 40]) == 3
    assert get_count_greater_than([1, 2, 3], threshold=1) == 2


def test_first_containing():
    assert get_first_containing(["a", "b", None]) is None
    assert (
        get_first_containing(["a", "IT IS FIRST", "first item", "I am really first!"])
        == "IT IS FIRST"
    )
    assert get_first_containing([]) is None
    assert get_first_containing(None) is None


def test_count_of_unique_strings_with_length():
    assert get_count_of_unique_strings_with_length(["a", "b", None, "aaa"]) == 1
    assert get_count_of_unique_strings_with_length(["a", "bbb", None, "", "ccc"]) == 2
    assert get_count_of_unique_strings_with_length(["aaa", "aaa", "aaa", "bbb"]) == 2
    assert get_count_of_unique_strings_with_length([]) == 0


def test_count_of_strings_keeps_first_occurrence_order():
    assert get_count_of_strings(["a", "b", "a", "aa", "b"]) == [
        ("a", 2), ("b", 2), ("aa", 1),
    ]
    assert get_count_of_strings(["a", "a", None, "", "ccc", ""]) == [
        ("a", 2), (None, 1), ("", 2), ("ccc", 1),
    ]
    assert get_count_of_strings([]) == []


def test_count_of_strings_with_max_length():
    assert get_count_of_strings_with_max_length(["a", "b", "a", "aa", "b"]) == 1
    assert get_count_of_strings_with_max_length(["a", "aaa", None, "", "ccc", ""]) == 2
    assert get_count_of_strings_with_max_length(["", None, "", None]) == 4
    assert get_count_of_strings_with_max_length([]) == 0


def test_digit_chars_count():
    assert get_digit_chars_count("aaaa") == 0
    assert get_digit_chars_count("1234") == 4
    assert get_digit_chars_count("A1*B2") == 2
    assert get_digit_chars_count("") == 0
    with pytest.raises(InvalidArgumentError):
        get_digit_chars_count(None)


def test_iterable_type_names_uses_exported_names():
    module = types.ModuleType("fake")
    module.Bag = type("Bag", (list,), {})
    module.Plain = type("Plain", (), {})
    module.Stream = type("Stream", (), {"__iter__": lambda self: iter(())})
    module._Hidden = type("_Hidden", (dict,), {})
    module.value = [1, 2, 3]

    assert get_iterable_type_names(module) == ["Bag", "Stream"]

    module.__all__ = ["Stream", "Plain"]
    assert get_iterable_type_names(module) == ["Stream"]


def test_iterable_type_names_on_real_module():
    names = get_iterable_type_names(collections)
    assert "deque" in names
    assert "Counter" in names
    assert names == sorted(names)


def test_iterable_type_names_rejects_none():
    with pytest.raises(InvalidArgumentError, match="module"):
        get_iterable_type_names(None)


def test_quarter_sales():
    assert get_quarter_sales([]) == [0, 0, 0, 0]
    assert get_quarter_sales(
        [(dt.date(2010, 1, 1), 10), (dt.date(2010, 2, 2), 10), (dt.date(2010, 3, 3), 10)]
    ) == [30, 0, 0, 0]
    assert get_quarter_sales(
        [(dt.date(2010, 1, 1), 10), (dt.date(2010, 4, 4), 10), (dt.date(2010, 10, 10), 10)]
    ) == [10, 10, 0, 10]


def test_quarter_sales_ignores_year_and_accepts_timestamps():
    sales = [
        (dt.datetime(1999, 7, 31, 23, 59), 5),
        (pd.Timestamp("2031-09-01"), 7),
        (dt.date(2020, 12, 31), 1),
    ]
    assert get_quarter_sales(sales) == [0, 0, 12, 1]


def test_quarter_sales_accepts_dates_outside_the_timestamp_range():
    sales = [(dt.date(1500, 1, 1), 10), (dt.date(3000, 4, 4), 10), (dt.date(2010, 10, 10), 10)]
    assert get_quarter_sales(sales) == [10, 10, 0, 10]


def test_quarter_sales_with_float_amounts():
    assert get_quarter_sales([(dt.date(2010, 5, 1), 1.5), (dt.date(2010, 6, 1), 2.0)]) == [
        0, 3.5, 0, 0,
    ]


def test_sort_strings_by_length_and_alphabet():
    assert sort_strings_by_length_and_alphabet([]) == []
    assert sort_strings_by_length_and_alphabet(["c", "b", "a"]) == ["a", "b", "c"]
    assert sort_strings_by_length_and_alphabet(["c", "cc", "b", "bb", "a", "aa"]) == [
        "a", "b", "c", "aa", "bb", "cc",
    ]
    assert sort_strings_by_length_and_alphabet(["b", "", None]) == [None, "", "b"]


def test_missing_digits():
    assert get_missing_digits([]) == list("0123456789")
    assert get_missing_digits(["aaa", "a1", "b", "c2", "d", "e3", "f01234"]) == list("56789")
    assert get_missing_digits(["a", "b", "c", "9876543210"]) == []


def test_sort_digit_names():
    assert sort_digit_names_by_numeric_order([]) == []
    assert sort_digit_names_by_numeric_order(["nine", "one"]) == ["one", "nine"]
    assert sort_digit_names_by_numeric_order(["one", "two", "three"]) == ["one", "two", "three"]
    assert sort_digit_names_by_numeric_order(["nine", "eight", "nine", "eight"]) == [
        "eight", "eight", "nine", "nine",
    ]
    assert sort_digit_names_by_numeric_order(["one", "one", "one", "zero"]) == [
        "zero", "one", "one", "one",
    ]


def test_sort_digit_names_rejects_unknown_tokens():
    with pytest.raises(InvalidArgumentError, match="ten"):
        sort_digit_names_by_numeric_order(["one", "ten"])


def test_combine_numbers_and_fruits():
    fruits = ["apple", "bananas", "pineapples"]
    assert combine_numbers_and_fruits(["one", "two", "three"], fruits) == [
        "one apple", "two bananas", "three pineapples",
    ]
    assert combine_numbers_and_fruits(["one"], fruits) == ["one apple"]
    assert combine_numbers_and_fruits(["one", "two", "three"], []) == []
    assert combine_numbers_and_fruits(None, fruits) == []


def test_common_chars():
    assert get_common_chars(["ab", "ac", "ad"]) == ["a"]
    assert get_common_chars(["a", "b", "c"]) == []
    assert get_common_chars(["a", "aa", "aaa"]) == ["a"]
    assert get_common_chars(["ab", "ba", "aabb", "baba"]) == ["a", "b"]
    assert get_common_chars([]) == []
    assert get_common_chars(["ab", ""]) == []
    assert get_common_chars(["ab", None]) == []


def test_common_chars_is_order_independent():
    words = ["dcba", "abxd", "xbda"]
    assert set(get_common_chars(words)) == set(get_common_chars(list(reversed(words))))


def test_sum_of_all_ints_skips_bools():
    assert get_sum_of_all_ints([1, True, "a", "b", False, 1]) == 2
    assert get_sum_of_all_ints([True, False]) == 0
    assert get_sum_of_all_ints([10, "ten", 10]) == 20
    assert get_sum_of_all_ints([]) == 0


def test_strings_only():
    assert get_strings_only(["a", 1, 2, None, "b", True, 4.5, "c"]) == ["a", "b", "c"]
    assert get_strings_only([1, 2, 3, True, False]) == []
    assert get_strings_only(None) == []


def test_total_strings_length():
    assert get_total_strings_length(["a", "aa", "aaa"]) == 6
    assert get_total_strings_length(["1234567890"]) == 10
    assert get_total_strings_length([None, "", "a"]) == 1
    assert get_total_strings_length([None]) == 0
    assert get_total_strings_length([]) == 0


def test_sequence_has_nulls():
    assert not is_sequence_has_nulls(["a", "b", "c"])
    assert is_sequence_has_nulls(["a", "aa", "aaa", None])
    assert not is_sequence_has_nulls([""])
    assert not is_sequence_has_nulls([])


def test_all_strings_are_uppercase():
    assert is_all_strings_are_uppercase(["A", "B", "C", "D", "E", "F"])
    assert not is_all_strings_are_uppercase(["AA", "AA", "AAA", "AAAa"])
    assert not is_all_strings_are_uppercase([""])
    assert not is_all_strings_are_uppercase([])
    assert not is_all_strings_are_uppercase(["A", None])


def test_first_negative_subsequence():
    assert get_first_negative_subsequence([-2, -1, 0, 1, 2]) == [-2, -1]
    assert get_first_negative_subsequence([2, 1, 0, -1, -2]) == [-1, -2]
    assert get_first_negative_subsequence([1, 1, 1, -1, -1, -1, 0, 0, 0, -2, -2, -2]) == [
        -1, -1, -1,
    ]
    assert get_first_negative_subsequence([-1, 0, -2]) == [-1]
    assert get_first_negative_subsequence([1, 2, 3]) == []
    assert get_first_negative_subsequence([]) == []


def test_numeric_lists_equal():
    assert are_numeric_lists_equal([1, 2, 3], [1.0, 2.0, 3.0])
    assert not are_numeric_lists_equal([0, 0, 0], [1.0, 2.0, 3.0])
    assert not are_numeric_lists_equal([3, 2, 1], [1.0, 2.0, 3.0])
    assert are_numeric_lists_equal([-10], [-10.0])
    assert are_numeric_lists_equal([], [])


def test_numeric_lists_of_different_length_are_not_equal():
    assert not are_numeric_lists_equal([1, 2], [1.0, 2.0, 3.0])
    assert not are_numeric_lists_equal([1, 2, 3], [1.0])


def test_next_version(versions):
    assert get_next_version_from_list(versions, "1.1") == "1.2"
    assert get_next_version_from_list(versions, "1.2") == "1.5"
    assert get_next_version_from_list(versions, "1.4") is None
    assert get_next_version_from_list(versions, "2.0") is None
    assert get_next_version_from_list([], "1.0") is None


def test_sum_of_vectors():
    assert get_sum_of_vectors([1, 2, 3], [10, 20, 30]) == [11, 22, 33]
    assert get_sum_of_vectors([1, 1, 1], [-1, -1, -1]) == [0, 0, 0]
    assert get_sum_of_vectors([], []) == []


def test_product_of_vectors():
    assert get_product_of_vectors([1, 2, 3], [1, 2, 3]) == 14
    assert get_product_of_vectors([1, 1, 1], [-1, -1, -1]) == -3
    assert get_product_of_vectors([1, 1, 1], [0, 0, 0]) == 0
    assert get_product_of_vectors([0.5, 2.0], [2.0, 0.25]) == pytest.approx(1.5)
    assert isinstance(get_product_of_vectors([1, 2], [3, 4]), int)


def test_vector_length_mismatch_is_rejected():
    with pytest.raises(InvalidArgumentError, match="length mismatch"):
        get_sum_of_vectors([1, 2, 3], [1, 2])
    with pytest.raises(InvalidArgumentError, match="length mismatch"):
        get_product_of_vectors([1], [1, 2])


def test_all_pairs_is_row_major():
    assert get_all_pairs(["John", "Josh", "Jacob"], ["Ann", "Alice"]) == [
        "John+Ann", "John+Alice", "Josh+Ann", "Josh+Alice", "Jacob+Ann", "Jacob+Alice",
    ]
    assert get_all_pairs(["John"], ["Alice"]) == ["John+Alice"]
    assert get_all_pairs(["John"], []) == []
    assert get_all_pairs([], ["Alice"]) == []


def test_average_of_double_values():
    assert get_average_of_double_values([1.0, 2.0, None, "a"]) == 1.5
    assert get_average_of_double_values(["1.0", "2.0", "3.0"]) == 0.0
    assert get_average_of_double_values([None, 1.0, True]) == 1.0
    assert get_average_of_double_values([]) == 0.0
    # Integers are not doubles
    assert get_average_of_double_values([1, 3, 2.0]) == 2.0
