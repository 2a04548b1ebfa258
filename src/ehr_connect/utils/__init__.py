"""Shared utilities."""

from .datetime import utc_now
from .masking import mask_principal, mask_secret

__all__ = ["utc_now", "mask_principal", "mask_secret"]
