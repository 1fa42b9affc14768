"""
DataStore — Immutable in-memory snapshot of transaction records.

Loaded once, queried many times. The pandas frame is built at construction
as part of the snapshot; nothing derived from queries is ever stored here.
Reloading means building a new DataStore and swapping the reference.
"""
from __future__ import annotations

from pathlib import Path
from typing import Iterable, Iterator, Optional

import pandas as pd

from txn_analytics.config import TRANSACTIONS_FILE
from txn_analytics.data.loader import load_transactions
from txn_analytics.data.normalize import to_frame
from txn_analytics.data.schemas import Transaction


class DataStore:
    """Ordered, read-only transaction records with a pandas view for aggregation."""

    def __init__(self, transactions: Iterable[Transaction] = (), source: Optional[Path] = None) -> None:
        self._transactions: tuple[Transaction, ...] = tuple(transactions)
        self._df: pd.DataFrame = to_frame(self._transactions)
        self._source = source

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    @classmethod
    def load(cls, path: Path = TRANSACTIONS_FILE) -> "DataStore":
        """Load and validate a transactions file. Raises LoadError."""
        path = Path(path)
        store = cls(load_transactions(path), source=path)
        print(f"  Loaded {store.row_count():,} transactions")
        return store

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def transactions(self) -> tuple[Transaction, ...]:
        return self._transactions

    @property
    def df(self) -> pd.DataFrame:
        """Aggregation frame, index = record position.

        Returns a copy; the snapshot's own frame is never handed out.
        """
        return self._df.copy()

    @property
    def source(self) -> Optional[Path]:
        return self._source

    @property
    def is_empty(self) -> bool:
        return not self._transactions

    def records(self, positions: Iterable[int]) -> list[Transaction]:
        """Records at the given positions, in the order given."""
        return [self._transactions[int(p)] for p in positions]

    def __len__(self) -> int:
        return len(self._transactions)

    def __iter__(self) -> Iterator[Transaction]:
        return iter(self._transactions)

    # ------------------------------------------------------------------
    # Metadata queries
    # ------------------------------------------------------------------

    def row_count(self) -> int:
        return len(self._transactions)

    def senders(self) -> list[str]:
        """Distinct sender names, first-encounter order."""
        return self._df["sender"].drop_duplicates().tolist()

    def beneficiaries(self) -> list[str]:
        """Distinct beneficiary names, first-encounter order."""
        return self._df["beneficiary"].drop_duplicates().tolist()

    def clients(self) -> list[str]:
        """Distinct names seen in either role, first-encounter order."""
        seen: dict[str, None] = {}
        for t in self._transactions:
            seen.setdefault(t.sender_full_name)
            seen.setdefault(t.beneficiary_full_name)
        return list(seen)

    def __repr__(self) -> str:
        return f"DataStore({len(self)} transactions, source={self._source})"
