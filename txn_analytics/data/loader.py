"""
Transactions file reading and validation.
"""
from __future__ import annotations

from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from txn_analytics.config import TRANSACTIONS_FILE
from txn_analytics.data.schemas import Transaction

_TRANSACTION_LIST = TypeAdapter(list[Transaction])

# Cap on validation problems quoted in a LoadError message
_MAX_REPORTED_ERRORS = 5


class LoadError(Exception):
    """The transactions source is missing, unreadable, or structurally invalid."""

    def __init__(self, message: str, source: str = "<memory>", errors: list[dict] | None = None) -> None:
        super().__init__(message)
        self.source = source
        self.errors = errors or []


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------

def _format_loc(loc: tuple) -> str:
    """(3, "amount") → "record 3, amount"."""
    if not loc:
        return "document"
    parts = []
    for item in loc:
        if isinstance(item, int) and not parts:
            parts.append(f"record {item}")
        else:
            parts.append(str(item))
    return ", ".join(parts)


def _summarize(exc: ValidationError) -> list[dict]:
    return [
        {"loc": _format_loc(tuple(err.get("loc", ()))), "msg": err.get("msg", "")}
        for err in exc.errors(include_url=False)
    ]


def parse_transactions(raw: bytes | str, source: str = "<memory>") -> tuple[Transaction, ...]:
    """Validate a JSON array of transaction objects.

    All-or-nothing: any invalid record fails the whole document.
    """
    try:
        records = _TRANSACTION_LIST.validate_json(raw)
    except ValidationError as exc:
        errors = _summarize(exc)
        shown = "; ".join(f"{e['loc']}: {e['msg']}" for e in errors[:_MAX_REPORTED_ERRORS])
        more = len(errors) - _MAX_REPORTED_ERRORS
        if more > 0:
            shown += f" (+{more} more)"
        raise LoadError(f"Invalid transactions in {source}: {shown}", source=source, errors=errors) from exc
    return tuple(records)


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------

def load_transactions(path: Path = TRANSACTIONS_FILE) -> tuple[Transaction, ...]:
    """Read and validate a transactions JSON file."""
    path = Path(path)
    print(f"Loading transactions from {path}...")
    try:
        raw = path.read_bytes()
    except OSError as exc:
        raise LoadError(f"Cannot read transactions file {path}: {exc}", source=str(path)) from exc

    return parse_transactions(raw, source=str(path))
