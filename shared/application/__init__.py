"""Application-level helpers (transactions)."""
