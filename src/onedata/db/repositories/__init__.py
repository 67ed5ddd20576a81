"""
onedata.db.repositories

Repository package.

Responsibilities:
- Group per-table data-access repositories for the persistence layer.
"""

# Package marker; repositories are imported directly from submodules.


# --- Module Notes -----------------------------------------------------------
# Repositories never commit; the ObjectStore owns the session and transaction boundary.
