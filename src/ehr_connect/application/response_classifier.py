"""Single classification point for backend responses."""

from typing import Any, Optional

from ..core.entities import BackendError, BackendResponse, Success, TransportResponse, is_success_sentinel


def classify_response(response: TransportResponse, requires_payload_sentinel: bool) -> BackendResponse:
    """Reduce a transport response to Success or BackendError.

    Args:
        response: Raw transport response
        requires_payload_sentinel: Whether a ``meta.status`` block must equal
            the "200" sentinel (connect-token backends report expired sessions
            inside 200 responses)

    Returns:
        Success with the parsed JSON payload, or BackendError
    """
    if not response.is_success:
        return BackendError(
            code=response.status_code,
            message=f"HTTP {response.status_code} from backend",
            transport_level=True,
            url=response.url,
        )

    try:
        payload = response.json()
    except ValueError as e:
        # An expired session is typically answered with an HTML login page
        return BackendError(code=None, message=str(e), url=response.url)

    if requires_payload_sentinel:
        error = _payload_error(payload)
        if error is not None:
            return BackendError(code=error[0], message=error[1], url=response.url)

    return Success(payload)


def _payload_error(payload: Any) -> Optional[tuple]:
    if payload is None:
        return None, "Empty payload"
    if not isinstance(payload, dict):
        return None
    meta = payload.get("meta")
    if isinstance(meta, dict) and not is_success_sentinel(meta.get("status")):
        return meta.get("status"), meta.get("message") or "API request failed"
    return None
