"""
Transaction Analytics — Configuration: paths, column mapping, defaults.
"""
import os
from pathlib import Path

# ---------------------------------------------------------------------------
# Paths — override with TXN_ANALYTICS_DATA_DIR / TXN_ANALYTICS_FILE env vars
# ---------------------------------------------------------------------------
_data_dir = Path(os.environ.get("TXN_ANALYTICS_DATA_DIR", str(Path.cwd())))
TRANSACTIONS_FILE = Path(os.environ.get("TXN_ANALYTICS_FILE", str(_data_dir / "transactions.json")))

# ---------------------------------------------------------------------------
# Column mapping from raw JSON fields → internal frame columns
# Only fields used by aggregations are carried into the frame.
# ---------------------------------------------------------------------------
COLUMN_MAP = {
    "id": "id",
    "amount": "amount",
    "senderFullName": "sender",
    "beneficiaryFullName": "beneficiary",
    "issueId": "issue_id",
    "issueSolved": "issue_solved",
}

# ---------------------------------------------------------------------------
# Query defaults
# ---------------------------------------------------------------------------
DEFAULT_TOP_N = 3

# ---------------------------------------------------------------------------
# API / server
# ---------------------------------------------------------------------------
API_TITLE = "Transaction Analytics API"
API_VERSION = "1.0.0"
DEFAULT_PORT = int(os.environ.get("PORT", "8000"))
