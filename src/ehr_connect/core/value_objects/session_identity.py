"""Session identity value object."""

from dataclasses import dataclass

from ...utils.masking import mask_principal


@dataclass(frozen=True)
class SessionIdentity:
    """Backend + principal pair that scopes a cached session.

    The principal is the login username for cookie backends and the user id
    for connect-token backends.
    """

    base_url: str
    principal_id: str

    def __post_init__(self) -> None:
        if not self.base_url:
            raise ValueError("Base URL cannot be empty")
        if not self.principal_id:
            raise ValueError("Principal id cannot be empty")

    @property
    def key(self) -> str:
        """Cache key, a plain concatenation of base URL and principal."""
        return f"{self.base_url}_{self.principal_id}"

    def __str__(self) -> str:
        return f"{self.base_url} ({mask_principal(self.principal_id)})"
