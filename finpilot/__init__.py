"""Financial core for small-business ledger, reporting and billing."""

__version__ = "0.3.0"
