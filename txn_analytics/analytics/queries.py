"""
Query engine — aggregation and lookup queries over a DataStore snapshot.

Every function is pure: it reads the store, recomputes from the base frame,
and returns a fresh value. Client names match exactly (case-sensitive).
Names that match nothing give 0 / False / empty, never an error.
"""
from __future__ import annotations

from typing import Optional

import pandas as pd

from txn_analytics.config import DEFAULT_TOP_N
from txn_analytics.data.schemas import Transaction
from txn_analytics.data.store import DataStore


# ---------------------------------------------------------------------------
# Amounts
# ---------------------------------------------------------------------------

def total_amount(store: DataStore) -> float:
    """Sum of all transaction amounts (0.0 for an empty store)."""
    return float(store.df["amount"].sum())


def total_amount_sent_by(store: DataStore, sender: str) -> float:
    """Sum of amounts sent by *sender*."""
    df = store.df
    return float(df.loc[df["sender"] == sender, "amount"].sum())


def max_amount(store: DataStore) -> float:
    """Largest single amount (0.0 for an empty store)."""
    df = store.df
    if df.empty:
        return 0.0
    return float(df["amount"].max())


def sender_totals(store: DataStore) -> dict[str, float]:
    """Total sent per sender, keyed in first-encounter order."""
    totals = store.df.groupby("sender", sort=False)["amount"].sum()
    return {str(name): float(amount) for name, amount in totals.items()}


# ---------------------------------------------------------------------------
# Clients
# ---------------------------------------------------------------------------

def unique_client_count(store: DataStore) -> int:
    """Distinct names appearing as sender or beneficiary."""
    df = store.df
    return int(pd.concat([df["sender"], df["beneficiary"]], ignore_index=True).nunique())


def has_open_compliance_issue(store: DataStore, client: str) -> bool:
    """True if *client* is party to any transaction with an unsolved issue."""
    df = store.df
    involved = (df["sender"] == client) | (df["beneficiary"] == client)
    return bool((involved & df["open_issue"]).any())


def top_sender(store: DataStore) -> Optional[str]:
    """Sender with the highest total sent; None for an empty store.

    Ties go to the tied sender that appears first in the records.
    """
    df = store.df
    if df.empty:
        return None
    totals = df.groupby("sender", sort=False)["amount"].sum()
    # idxmax returns the first label among equal maxima; with sort=False
    # group order is first-encounter order.
    return str(totals.idxmax())


# ---------------------------------------------------------------------------
# Grouping
# ---------------------------------------------------------------------------

def transactions_by_beneficiary(store: DataStore) -> dict[str, list[Transaction]]:
    """Records grouped by beneficiary name.

    Keys in first-encounter order; records within a group in record order.
    """
    return {
        str(name): store.records(group.index)
        for name, group in store.df.groupby("beneficiary", sort=False)
    }


# ---------------------------------------------------------------------------
# Compliance issues
# ---------------------------------------------------------------------------

def unsolved_issue_ids(store: DataStore) -> set[int]:
    """Ids of issues that are present and not solved."""
    df = store.df
    return {int(i) for i in df.loc[df["open_issue"], "issue_id"]}


def solved_issue_messages(store: DataStore) -> list[Optional[str]]:
    """Messages of solved issues, in record order, duplicates kept."""
    df = store.df
    return [t.issue_message for t in store.records(df.index[df["solved_issue"]])]


# ---------------------------------------------------------------------------
# Rankings
# ---------------------------------------------------------------------------

def top_n_by_amount(store: DataStore, n: int = DEFAULT_TOP_N) -> list[Transaction]:
    """The *n* largest transactions by amount, descending.

    Stable: equal amounts keep their original relative order.
    """
    if n <= 0:
        return []
    ranked = store.df.sort_values("amount", ascending=False, kind="stable")
    return store.records(ranked.index[:n])


def top3_by_amount(store: DataStore) -> list[Transaction]:
    """The three largest transactions by amount (see top_n_by_amount)."""
    return top_n_by_amount(store, 3)
