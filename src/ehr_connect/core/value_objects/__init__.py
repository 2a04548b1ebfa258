"""Immutable value objects."""

from .session_identity import SessionIdentity

__all__ = ["SessionIdentity"]
