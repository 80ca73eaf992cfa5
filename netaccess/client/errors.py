"""Error taxonomy for GraphQL client operations."""

from __future__ import annotations

EMPTY_RESULT = "query result is empty"


def operation_message(operation: str, entity: str, reason: object, entity_id: str | None = None) -> str:
    """Build ``failed to <operation> <entity>[ with id <id>]: <reason>``."""
    if entity_id:
        return f"failed to {operation} {entity} with id {entity_id}: {reason}"
    return f"failed to {operation} {entity}: {reason}"


class ClientError(Exception):
    """Base error for client operations."""

    code = "CLIENT_ERROR"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def wrap(self, operation: str, entity: str, entity_id: str | None = None) -> ClientError:
        """Return an error of the same kind, prefixed with the failing operation."""
        return type(self)(operation_message(operation, entity, self.message, entity_id))


class ValidationError(ClientError):
    """A required identifier or argument was empty; raised before any request."""

    code = "VALIDATION_ERROR"


class OperationError(ClientError):
    """The API answered but reported a failure."""

    code = "OPERATION_ERROR"


class TransportError(OperationError):
    """The request never produced a response."""

    code = "TRANSPORT_ERROR"


class NotFoundError(ClientError):
    """The expected entity was absent from an otherwise well-formed response."""

    code = "NOT_FOUND"


class DecodeError(ClientError):
    """The response body could not be decoded."""

    code = "DECODE_ERROR"


def is_empty_result(exc: BaseException) -> bool:
    return isinstance(exc, NotFoundError)
