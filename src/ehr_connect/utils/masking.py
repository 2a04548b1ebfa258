"""Masking helpers for identifiers and credentials that end up in logs."""

from typing import Optional


def mask_principal(principal_id: Optional[str]) -> Optional[str]:
    """Show first 2 and last 2 characters of a username or user id."""
    if principal_id is None:
        return None
    if len(principal_id) <= 4:
        return "***"
    return f"{principal_id[:2]}...{principal_id[-2:]}"


def mask_secret(secret: Optional[str], visible: int = 4) -> str:
    """Mask a credential, keeping only a short prefix.

    Cookie credentials look like ``name=value``; the cookie name is kept
    readable so logs still tell which database a session belongs to.
    """
    if not secret:
        return "<none>"
    name, sep, value = secret.partition("=")
    if sep:
        return f"{name}={value[:visible]}***"
    return f"{secret[:visible]}***"
