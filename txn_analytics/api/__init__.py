"""HTTP API over the transaction query engine."""
