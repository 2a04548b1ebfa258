"""Classified backend responses.

Every HTTP exchange is reduced to either ``Success`` or ``BackendError`` by
``classify_response`` before RequestClient decides whether to retry.
"""

from dataclasses import dataclass
from typing import Any, Optional, Union

from ..exceptions import ApplicationFailure, EhrConnectError, TransportFailure


@dataclass(frozen=True)
class Success:
    """Parsed payload of an accepted response."""

    payload: Any


@dataclass(frozen=True)
class BackendError:
    """A rejected response.

    ``transport_level`` separates HTTP/network failures from 2xx responses
    whose body reports an error.
    """

    code: Optional[Any]
    message: str
    transport_level: bool = False
    url: Optional[str] = None

    def to_exception(self) -> EhrConnectError:
        if self.transport_level:
            status = self.code if isinstance(self.code, int) else None
            return TransportFailure(self.message, status_code=status, url=self.url)
        return ApplicationFailure(self.message, code=self.code, url=self.url)


BackendResponse = Union[Success, BackendError]


SUCCESS_SENTINEL = "200"


def is_success_sentinel(value: Any) -> bool:
    """The backend reports success as either the number 200 or the string "200"."""
    return value is not None and str(value).strip() == SUCCESS_SENTINEL
