"""
FastAPI dependencies — DataStore reference, swapped atomically on reload.
"""
from __future__ import annotations

from fastapi import HTTPException

from txn_analytics.data.store import DataStore

# ---------------------------------------------------------------------------
# Current snapshot (set during startup, replaced whole on reload)
# ---------------------------------------------------------------------------
_store: DataStore | None = None


def set_store(store: DataStore | None) -> None:
    global _store
    _store = store


def get_store() -> DataStore:
    # Single read of the reference: a request sees one snapshot throughout
    store = _store
    if store is None:
        raise HTTPException(503, "Data not loaded yet")
    return store
