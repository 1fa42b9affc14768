"""Shared fixtures: the reference dataset and a record factory."""

from pathlib import Path

import pytest

from txn_analytics.data.schemas import Transaction
from txn_analytics.data.store import DataStore

DATA_DIR = Path(__file__).parent / "data"


@pytest.fixture()
def sample_file() -> Path:
    return DATA_DIR / "transactions.json"


@pytest.fixture()
def store(sample_file) -> DataStore:
    return DataStore.load(sample_file)


@pytest.fixture()
def empty_store() -> DataStore:
    return DataStore()


@pytest.fixture()
def make_txn():
    """Build a Transaction with sensible defaults; override any attribute."""
    counter = iter(range(1, 10_000))

    def _make(sender="Alice", beneficiary="Bob", amount=10.0, **overrides) -> Transaction:
        fields = {
            "id": next(counter),
            "amount": amount,
            "sender_full_name": sender,
            "sender_age": 30,
            "beneficiary_full_name": beneficiary,
            "beneficiary_age": 40,
        }
        fields.update(overrides)
        return Transaction(**fields)

    return _make
