"""
onedata.services

Service layer.

Responsibilities:
- Graph reads, routine conversion and deployment status updates on top of the ObjectStore.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Services raise `onedata.errors` types; the API layer maps them to HTTP responses.
