"""Factories."""

from .client_factory import ClientFactory, create_request_client

__all__ = ["ClientFactory", "create_request_client"]
