"""
Adapters - concrete implementations of ports.

Follows hexagonal architecture pattern (ports & adapters).
Current implementations use lean stack (SQLAlchemy over SQLite).
"""
from chefs.adapters.repositories_sqlite import SQLiteFormsRepo, SQLiteSubmissionsRepo, SQLitePermissionsRepo

__all__ = ["SQLiteFormsRepo", "SQLiteSubmissionsRepo", "SQLitePermissionsRepo"]
