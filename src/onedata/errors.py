"""
onedata.errors

Domain error taxonomy shared by the store, services and API layers.

Responsibilities:
- Name the failure kinds callers can observe.
- Carry the HTTP status each kind maps to at the API boundary.
"""

from __future__ import annotations

from starlette.status import (
    HTTP_400_BAD_REQUEST,
    HTTP_404_NOT_FOUND,
    HTTP_500_INTERNAL_SERVER_ERROR,
)


class OnedataError(Exception):
    status_code: int = HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidInput(OnedataError):
    # Missing required field, duplicate id, malformed request body.
    status_code = HTTP_400_BAD_REQUEST


class NotFound(OnedataError):
    status_code = HTTP_404_NOT_FOUND


class ConversionFailed(OnedataError):
    """
    The generation call errored, timed out or returned nothing usable,
    or the follow-up store write failed.
    """


class StoreError(OnedataError):
    pass


# --- Module Notes -----------------------------------------------------------
# Handlers registered in `onedata.api.app` render every OnedataError as {"error": message}.
