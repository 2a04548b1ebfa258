"""Transport-neutral HTTP response."""

import json
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional


@dataclass(frozen=True)
class TransportResponse:
    """HTTP response as seen by the core.

    Header names are stored lower-cased so lookups are case-insensitive.
    """

    status_code: int
    text: str = ""
    headers: Dict[str, str] = field(default_factory=dict)
    url: Optional[str] = None

    @classmethod
    def build(
        cls,
        status_code: int,
        text: str = "",
        headers: Optional[Mapping[str, str]] = None,
        url: Optional[str] = None,
    ) -> "TransportResponse":
        normalized = {name.lower(): value for name, value in (headers or {}).items()}
        return cls(status_code=status_code, text=text, headers=normalized, url=url)

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300

    def header(self, name: str) -> Optional[str]:
        return self.headers.get(name.lower())

    def json(self) -> Any:
        """Decode the body as JSON.

        Raises:
            ValueError: If the body is empty or not valid JSON
        """
        if not self.text.strip():
            raise ValueError("Empty response body")
        try:
            return json.loads(self.text)
        except json.JSONDecodeError as e:
            raise ValueError(f"Response body is not valid JSON: {e.msg}") from e
