"""Reusable type definitions for the seqforge package.

Type Aliases:
    TupleRow: A fixed 3-column row of comparable values.
    TupleRowList: A list of ``TupleRow`` validated for column count.
    SaleRecord: A ``(date, amount)`` pair used by the quarterly aggregation.

The annotated aliases carry pydantic validators so they can be checked with a
``TypeAdapter`` wherever a function needs to validate its input up front.
"""

import datetime as dt
from collections.abc import Sequence
from typing import Annotated, Any, List, Tuple, Union

import pandas as pd
from pydantic import TypeAdapter
from pydantic.functional_validators import BeforeValidator

__all__ = [
    "TUPLE_ROW_WIDTH",
    "TupleRow",
    "TupleRowList",
    "SaleRecord",
    "tuple_rows_adapter",
]

TUPLE_ROW_WIDTH = 3

TupleRow = Tuple[Any, Any, Any]

SaleRecord = Tuple[Union[dt.date, dt.datetime, pd.Timestamp], Union[int, float]]


def validate_tuple_rows(rows: Any) -> Any:
    """Validator to ensure every row has exactly three columns.

    Args:
        rows: The candidate list of rows.

    Returns:
        The original rows if validation passes.

    Raises:
        ValueError: If a row is not a sequence or has the wrong column count.
    """
    if not isinstance(rows, (list, tuple)):
        return rows  # Let the list validator report the type error

    for position, row in enumerate(rows):
        if not isinstance(row, Sequence) or isinstance(row, str):
            raise ValueError(f"Row {position} is not a sequence: {row!r}")
        if len(row) != TUPLE_ROW_WIDTH:
            raise ValueError(
                f"Row {position} has {len(row)} columns; expected {TUPLE_ROW_WIDTH}."
            )
    return rows


# A list of 3-column rows, each checked for arity before element validation
TupleRowList = Annotated[List[TupleRow], BeforeValidator(validate_tuple_rows)]

tuple_rows_adapter = TypeAdapter(TupleRowList)
