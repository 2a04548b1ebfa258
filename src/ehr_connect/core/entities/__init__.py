"""Core entities."""

from .backend_response import (
    SUCCESS_SENTINEL,
    BackendError,
    BackendResponse,
    Success,
    is_success_sentinel,
)
from .session_record import SessionRecord
from .transport_response import TransportResponse

__all__ = [
    "SessionRecord",
    "TransportResponse",
    "Success",
    "BackendError",
    "BackendResponse",
    "SUCCESS_SENTINEL",
    "is_success_sentinel",
]
