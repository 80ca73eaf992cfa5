"""GraphQL client for the access control API."""

from netaccess.client.client import NetAccessClient
from netaccess.client.errors import (
    ClientError,
    DecodeError,
    NotFoundError,
    OperationError,
    TransportError,
    ValidationError,
    is_empty_result,
)

__all__ = [
    "ClientError",
    "DecodeError",
    "NetAccessClient",
    "NotFoundError",
    "OperationError",
    "TransportError",
    "ValidationError",
    "is_empty_result",
]
