"""
onedata.db

Persistence package (SQLAlchemy async).

Responsibilities:
- Provide ORM models, engine/session setup, repositories and the ObjectStore facade.
"""

# Package marker.
