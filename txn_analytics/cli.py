#!/usr/bin/env python3
"""
Transaction Analytics CLI — query a transactions file or start the API server.

USAGE:
  python -m txn_analytics.cli summary                           # All store-wide aggregates
  python -m txn_analytics.cli --file data.json summary          # Explicit transactions file
  python -m txn_analytics.cli sender "Tom Shelby"               # Total sent by a client
  python -m txn_analytics.cli client "Tom Shelby"               # Client profile + open issues
  python -m txn_analytics.cli top --n 5                         # Largest transactions
  python -m txn_analytics.cli beneficiaries                     # Transactions per beneficiary
  python -m txn_analytics.cli issues                            # Unsolved ids + solved messages

  python -m txn_analytics.cli serve                             # Start API server
  python -m txn_analytics.cli serve --port 8000 --reload
"""
from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

from txn_analytics.config import DEFAULT_PORT, DEFAULT_TOP_N, TRANSACTIONS_FILE
from txn_analytics.data.loader import LoadError
from txn_analytics.data.schemas import Transaction
from txn_analytics.data.store import DataStore
from txn_analytics.analytics import queries
from txn_analytics.analytics.summary import client_profile, overview


def _banner(title: str) -> None:
    print("\n" + "=" * 70)
    print(f"  TRANSACTION ANALYTICS — {title}")
    print("=" * 70)


def _load(args) -> DataStore:
    """Load the snapshot or exit with status 1."""
    try:
        return DataStore.load(args.file)
    except LoadError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1)


def _txn_line(i: int, t: Transaction) -> str:
    issue = ""
    if t.has_issue:
        issue = f"  issue #{t.issue_id} ({'solved' if t.issue_solved else 'OPEN'})"
    return (f"{i:<4}{t.sender_full_name[:22]:<24}→ {t.beneficiary_full_name[:22]:<24}"
            f"${t.amount:>12,.2f}{issue}")


def cmd_summary(args):
    """Print every store-wide aggregate."""
    _banner("SUMMARY")
    data = overview(_load(args))
    print(f"\n  Transactions:     {data['transactions']:,}")
    print(f"  Total amount:     ${data['total_amount']:,.2f}")
    print(f"  Max amount:       ${data['max_amount']:,.2f}")
    print(f"  Unique clients:   {data['unique_clients']}")
    print(f"  Top sender:       {data['top_sender'] or 'N/A'}")
    ids = ", ".join(str(i) for i in data["unsolved_issue_ids"]) or "none"
    print(f"  Unsolved issues:  {ids}")
    print(f"  Solved issues:    {len(data['solved_issue_messages'])}")
    print("=" * 70 + "\n")


def cmd_sender(args):
    """Total amount sent by one client."""
    store = _load(args)
    total = queries.total_amount_sent_by(store, args.name)
    print(f"{args.name}: ${total:,.2f}")


def cmd_client(args):
    """Profile of one client."""
    _banner("CLIENT")
    p = client_profile(_load(args), args.name)
    print(f"\n  {p['client']}")
    print(f"  Sent:      ${p['sent_total']:,.2f} ({p['sent_count']} txns, {p['share_of_total']:.1f}% of total)")
    print(f"  Received:  ${p['received_total']:,.2f} ({p['received_count']} txns)")
    if p["has_open_issue"]:
        print(f"  OPEN compliance issues: {', '.join(str(i) for i in p['open_issue_ids'])}")
    else:
        print("  No open compliance issues")
    print()


def cmd_top(args):
    """Largest transactions by amount."""
    _banner(f"TOP {args.n} BY AMOUNT")
    top = queries.top_n_by_amount(_load(args), args.n)
    print()
    for i, t in enumerate(top, 1):
        print(_txn_line(i, t))
    print()


def cmd_beneficiaries(args):
    """Transactions grouped by beneficiary."""
    _banner("BY BENEFICIARY")
    groups = queries.transactions_by_beneficiary(_load(args))
    print(f"\nBENEFICIARIES ({len(groups)}):\n")
    for name, txns in groups.items():
        total = sum(t.amount for t in txns)
        print(f"  {name[:40]:<42}{len(txns):>4} txns  ${total:>12,.2f}")
    print()


def cmd_issues(args):
    """Unsolved issue ids and solved issue messages."""
    _banner("COMPLIANCE ISSUES")
    store = _load(args)
    unsolved = sorted(queries.unsolved_issue_ids(store))
    print(f"\n  Unsolved ({len(unsolved)}): {', '.join(str(i) for i in unsolved) or 'none'}")
    messages = queries.solved_issue_messages(store)
    print(f"  Solved ({len(messages)}):")
    for msg in messages:
        print(f"    - {msg or '(no message)'}")
    print()


def cmd_serve(args):
    """Start the API server."""
    import uvicorn
    from txn_analytics.main import create_app

    print(f"\nStarting Transaction Analytics API on port {args.port}...")
    if args.reload:
        # Reloader re-imports txn_analytics.main in a child process; pass the file via env
        os.environ["TXN_ANALYTICS_FILE"] = str(args.file)
        uvicorn.run("txn_analytics.main:app", host="0.0.0.0", port=args.port, reload=True)
    else:
        uvicorn.run(create_app(source=args.file), host="0.0.0.0", port=args.port)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="txn-analytics",
        description="Transaction Analytics — read-only queries over a transactions file",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--file", type=Path, default=TRANSACTIONS_FILE,
                        help=f"Transactions JSON file (default: {TRANSACTIONS_FILE})")
    subparsers = parser.add_subparsers(dest="command", help="Command")

    summary_parser = subparsers.add_parser("summary", help="Store-wide aggregates")
    summary_parser.set_defaults(func=cmd_summary)

    sender_parser = subparsers.add_parser("sender", help="Total amount sent by a client")
    sender_parser.add_argument("name", help="Sender full name (exact match)")
    sender_parser.set_defaults(func=cmd_sender)

    client_parser = subparsers.add_parser("client", help="Client profile")
    client_parser.add_argument("name", help="Client full name (exact match)")
    client_parser.set_defaults(func=cmd_client)

    top_parser = subparsers.add_parser("top", help="Largest transactions")
    top_parser.add_argument("--n", type=int, default=DEFAULT_TOP_N, help=f"How many (default {DEFAULT_TOP_N})")
    top_parser.set_defaults(func=cmd_top)

    bene_parser = subparsers.add_parser("beneficiaries", help="Transactions per beneficiary")
    bene_parser.set_defaults(func=cmd_beneficiaries)

    issues_parser = subparsers.add_parser("issues", help="Compliance issue ids and messages")
    issues_parser.set_defaults(func=cmd_issues)

    serve_parser = subparsers.add_parser("serve", help="Start API server")
    serve_parser.add_argument("--port", type=int, default=DEFAULT_PORT, help=f"Port (default {DEFAULT_PORT})")
    serve_parser.add_argument("--reload", action="store_true", help="Enable auto-reload")
    serve_parser.set_defaults(func=cmd_serve)

    return parser


def main(argv: list[str] | None = None):
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.command:
        parser.print_help()
        return

    args.func(args)


if __name__ == "__main__":
    main()
