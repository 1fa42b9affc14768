"""Transaction Analytics — read-only aggregation queries over a transaction snapshot."""
from .data import DataStore, LoadError, Transaction

__version__ = "1.0.0"
__all__ = ["DataStore", "LoadError", "Transaction"]
