"""
Meta endpoints: health, reload.
"""
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from txn_analytics.config import TRANSACTIONS_FILE
from txn_analytics.data.loader import LoadError
from txn_analytics.data.store import DataStore
from txn_analytics.api.dependencies import get_store, set_store
from txn_analytics.api.response_models import HealthResponse, ReloadResponse

router = APIRouter(prefix="/api", tags=["meta"])


@router.get("/health", response_model=HealthResponse)
def health(store: DataStore = Depends(get_store)):
    return HealthResponse(
        status="ok",
        transactions=store.row_count(),
        clients=len(store.clients()),
        source=str(store.source) if store.source else None,
    )


@router.post("/reload", response_model=ReloadResponse)
def reload_data(store: DataStore = Depends(get_store)):
    """Re-read the source file into a new snapshot and swap it in.

    On failure the current snapshot stays active.
    """
    source = store.source or TRANSACTIONS_FILE
    try:
        fresh = DataStore.load(source)
    except LoadError as exc:
        raise HTTPException(422, str(exc))

    set_store(fresh)
    print(f"  Reload complete — {fresh.row_count():,} transactions")
    return ReloadResponse(status="reloaded", transactions=fresh.row_count(), source=str(source))
