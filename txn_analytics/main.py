"""
Transaction Analytics — FastAPI app factory with startup data loading.
"""
from __future__ import annotations

from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from txn_analytics.config import API_TITLE, API_VERSION, TRANSACTIONS_FILE
from txn_analytics.data.store import DataStore
from txn_analytics.api.dependencies import set_store
from txn_analytics.api.router_meta import router as meta_router
from txn_analytics.api.router_queries import router as queries_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Install the snapshot at startup. A LoadError aborts startup."""
    store = app.state.initial_store
    if store is None:
        source = app.state.source or TRANSACTIONS_FILE
        print(f"  TRANSACTIONS_FILE = {source}")
        store = DataStore.load(source)
    set_store(store)

    print(f"\n{API_TITLE} ready — {store.row_count():,} transactions, "
          f"{len(store.clients())} clients\n")
    yield


def create_app(store: Optional[DataStore] = None, source: Optional[Path] = None) -> FastAPI:
    app = FastAPI(
        title=API_TITLE,
        description="Read-only aggregation queries over a transaction snapshot",
        version=API_VERSION,
        lifespan=lifespan,
    )
    app.state.initial_store = store
    app.state.source = source

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(meta_router)
    app.include_router(queries_router)
    return app


app = create_app()
