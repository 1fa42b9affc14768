"""
Query endpoints: amounts, rankings, clients, compliance issues, overview.
"""
from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from txn_analytics.config import DEFAULT_TOP_N
from txn_analytics.data.schemas import Transaction
from txn_analytics.data.store import DataStore
from txn_analytics.api.dependencies import get_store
from txn_analytics.api.response_models import (
    ClientCountResponse,
    ClientProfileResponse,
    IssueIdsResponse,
    IssueMessagesResponse,
    MaxAmountResponse,
    OpenIssueResponse,
    SenderTotalResponse,
    TopSenderResponse,
    TotalAmountResponse,
)
from txn_analytics.analytics import queries
from txn_analytics.analytics.summary import client_profile, overview

router = APIRouter(prefix="/api", tags=["queries"])


# ---------------------------------------------------------------------------
# Transactions
# ---------------------------------------------------------------------------

@router.get("/transactions/total", response_model=TotalAmountResponse)
def total(store: DataStore = Depends(get_store)):
    return TotalAmountResponse(total_amount=queries.total_amount(store))


@router.get("/transactions/total/sent-by", response_model=SenderTotalResponse)
def total_sent_by(
    sender: str = Query(..., description="Sender full name (exact match)"),
    store: DataStore = Depends(get_store),
):
    return SenderTotalResponse(sender=sender, total_amount=queries.total_amount_sent_by(store, sender))


@router.get("/transactions/max", response_model=MaxAmountResponse)
def max_amount(store: DataStore = Depends(get_store)):
    return MaxAmountResponse(max_amount=queries.max_amount(store))


@router.get("/transactions/top", response_model=list[Transaction])
def top_transactions(
    n: int = Query(DEFAULT_TOP_N, ge=1, le=1000, description="Number of transactions"),
    store: DataStore = Depends(get_store),
):
    """Largest transactions by amount, ties in original order."""
    return queries.top_n_by_amount(store, n)


@router.get("/transactions/by-beneficiary", response_model=dict[str, list[Transaction]])
def by_beneficiary(store: DataStore = Depends(get_store)):
    return queries.transactions_by_beneficiary(store)


# ---------------------------------------------------------------------------
# Clients (fixed paths before /clients/{name})
# ---------------------------------------------------------------------------

@router.get("/clients/count", response_model=ClientCountResponse)
def client_count(store: DataStore = Depends(get_store)):
    return ClientCountResponse(unique_clients=queries.unique_client_count(store))


@router.get("/clients/top-sender", response_model=TopSenderResponse)
def top_sender(store: DataStore = Depends(get_store)):
    return TopSenderResponse(sender=queries.top_sender(store))


@router.get("/clients/{name}/open-issues", response_model=OpenIssueResponse)
def open_issues(name: str, store: DataStore = Depends(get_store)):
    return OpenIssueResponse(client=name, has_open_issue=queries.has_open_compliance_issue(store, name))


@router.get("/clients/{name}", response_model=ClientProfileResponse)
def profile(name: str, store: DataStore = Depends(get_store)):
    return ClientProfileResponse(**client_profile(store, name))


# ---------------------------------------------------------------------------
# Compliance issues
# ---------------------------------------------------------------------------

@router.get("/issues/unsolved", response_model=IssueIdsResponse)
def unsolved(store: DataStore = Depends(get_store)):
    return IssueIdsResponse(issue_ids=sorted(queries.unsolved_issue_ids(store)))


@router.get("/issues/solved/messages", response_model=IssueMessagesResponse)
def solved_messages(store: DataStore = Depends(get_store)):
    return IssueMessagesResponse(messages=queries.solved_issue_messages(store))


# ---------------------------------------------------------------------------
# Overview
# ---------------------------------------------------------------------------

@router.get("/overview")
def dataset_overview(store: DataStore = Depends(get_store)):
    """All store-wide aggregates in one payload."""
    return overview(store)
