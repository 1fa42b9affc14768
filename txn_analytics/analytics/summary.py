"""
Summary reports — dataset overview and per-client profile.
"""
from __future__ import annotations

from txn_analytics.data.store import DataStore
from txn_analytics.analytics.common import pct_of_total, sanitize_for_json
from txn_analytics.analytics.queries import (
    has_open_compliance_issue,
    max_amount,
    solved_issue_messages,
    top3_by_amount,
    top_sender,
    total_amount,
    transactions_by_beneficiary,
    unique_client_count,
    unsolved_issue_ids,
)


def overview(store: DataStore) -> dict:
    """Every store-wide query in one JSON-safe dict."""
    by_beneficiary = transactions_by_beneficiary(store)
    return sanitize_for_json({
        "transactions": store.row_count(),
        "total_amount": total_amount(store),
        "max_amount": max_amount(store),
        "unique_clients": unique_client_count(store),
        "top_sender": top_sender(store),
        "unsolved_issue_ids": unsolved_issue_ids(store),
        "solved_issue_messages": solved_issue_messages(store),
        "top_transactions": top3_by_amount(store),
        "beneficiaries": {name: len(txns) for name, txns in by_beneficiary.items()},
    })


def client_profile(store: DataStore, client: str) -> dict:
    """Sent/received volume and open issues for one client name."""
    df = store.df
    sent = df[df["sender"] == client]
    received = df[df["beneficiary"] == client]
    involved = df[(df["sender"] == client) | (df["beneficiary"] == client)]
    open_ids = involved.loc[involved["open_issue"], "issue_id"]

    sent_total = float(sent["amount"].sum())
    return sanitize_for_json({
        "client": client,
        "sent_total": sent_total,
        "received_total": float(received["amount"].sum()),
        "sent_count": len(sent),
        "received_count": len(received),
        "share_of_total": round(pct_of_total(sent_total, total_amount(store)), 2),
        "has_open_issue": has_open_compliance_issue(store, client),
        "open_issue_ids": {int(i) for i in open_ids},
    })
