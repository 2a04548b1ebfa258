"""Backend authentication strategies."""

from .base import BaseAuthStrategy, encode_params, encode_segment
from .connect_token import ConnectTokenStrategy
from .cookie_login import CookieLoginStrategy

__all__ = [
    "BaseAuthStrategy",
    "CookieLoginStrategy",
    "ConnectTokenStrategy",
    "encode_params",
    "encode_segment",
]
