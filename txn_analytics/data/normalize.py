"""
Record → DataFrame conversion and derived issue flags.
"""
from __future__ import annotations

from typing import Sequence

import pandas as pd

from txn_analytics.config import COLUMN_MAP
from txn_analytics.data.schemas import Transaction

# Attribute names of the fields carried into the frame
_ATTRS = {
    name for name, field in Transaction.model_fields.items()
    if (field.alias or name) in COLUMN_MAP
}


def to_frame(transactions: Sequence[Transaction]) -> pd.DataFrame:
    """Build the aggregation frame. Row index = position in *transactions*."""
    rows = [t.model_dump(by_alias=True, include=_ATTRS) for t in transactions]
    df = pd.DataFrame.from_records(rows, columns=list(COLUMN_MAP))
    # Built straight from the records so ids never round-trip through float/NaN
    df["issueId"] = pd.array([t.issue_id for t in transactions], dtype="Int64")
    df = normalize_columns(df)
    return add_issue_flags(df)


def normalize_columns(df: pd.DataFrame) -> pd.DataFrame:
    """Rename JSON fields to frame columns and fix dtypes."""
    df = df.rename(columns=COLUMN_MAP)
    df.index = pd.RangeIndex(len(df))

    df["id"] = df["id"].astype("int64")
    df["amount"] = df["amount"].astype("float64")
    # Nullable integer keeps "no issue" distinct from issue id 0
    df["issue_id"] = df["issue_id"].astype("Int64")
    df["issue_solved"] = df["issue_solved"].astype(bool)
    return df


def add_issue_flags(df: pd.DataFrame) -> pd.DataFrame:
    """Derive has_issue / open_issue / solved_issue boolean columns."""
    df["has_issue"] = df["issue_id"].notna().astype(bool)
    df["open_issue"] = df["has_issue"] & ~df["issue_solved"]
    df["solved_issue"] = df["has_issue"] & df["issue_solved"]
    return df
