"""Base exceptions for ehr-connect.

All exceptions inherit from EhrConnectError and carry an error code and a
details mapping so callers can log them in a structured way.
"""

from typing import Any, ClassVar, Dict, Optional


class EhrConnectError(Exception):
    """Base exception for all ehr-connect errors."""

    # Whether RequestClient may answer this error with a forced refresh + retry
    retryable: ClassVar[bool] = False

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the error for structured logging."""
        return {
            "code": self.error_code,
            "message": self.message,
            "details": self.details,
            "type": self.__class__.__name__,
        }
