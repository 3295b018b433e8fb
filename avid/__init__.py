"""Member persistence: domain model, SQL repository and database helpers."""

__version__ = "0.1.0"
