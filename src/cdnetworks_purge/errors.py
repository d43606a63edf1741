"""Purge errors."""
from __future__ import annotations


class PurgeError(Exception):
    """Base class for all failures of a purge run."""


class ValidationError(PurgeError):
    """Missing or invalid input."""


class RemoteError(PurgeError):
    def __init__(self, status_code: int, body: str):
        """Non-success HTTP status returned by the purge API."""
        super().__init__(f"HTTP {status_code}: {body}")
        self.status_code = status_code
        self.body = body


class ProtocolError(PurgeError):
    """Response body is not a purge response."""


class TransportError(PurgeError):
    """The request never got a response."""
