"""Transaction loading, normalization, and the in-memory record store."""
from .loader import LoadError, load_transactions, parse_transactions
from .schemas import Transaction
from .store import DataStore
from .normalize import to_frame
