"""Decoding of raw GraphQL response bodies."""

from __future__ import annotations

import json
import logging
from typing import Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as SchemaValidationError

from netaccess.client.errors import DecodeError, OperationError
from netaccess.schemas.graphql import Connection, Envelope

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)
EnvelopeT = TypeVar("EnvelopeT", bound=Envelope)


def decode_body(raw: bytes) -> dict[str, Any]:
    """Parse the response body; anything but a JSON object is a DecodeError."""
    try:
        body = json.loads(raw)
    except ValueError as exc:
        raise DecodeError(f"invalid JSON response: {exc}") from exc
    if not isinstance(body, dict):
        raise DecodeError(f"invalid JSON response: expected an object, got {type(body).__name__}")
    return body


def extract_field(body: dict[str, Any], field: str) -> Any | None:
    """Return ``data.<field>``, or None when it is absent or null.

    GraphQL ``errors`` only fail the call when they left no usable field;
    partial results alongside errors are returned as-is.
    """
    data = body.get("data")
    payload = data.get(field) if isinstance(data, dict) else None

    errors = body.get("errors")
    if payload is None and errors:
        raise OperationError(_error_messages(errors))
    if errors:
        logger.debug("GraphQL field %s returned with errors: %s", field, _error_messages(errors))
    return payload


def _error_messages(errors: Any) -> str:
    if not isinstance(errors, list):
        return str(errors)
    return "; ".join(
        str(item.get("message", item)) if isinstance(item, dict) else str(item) for item in errors
    )


def decode_envelope(raw: bytes, field: str, envelope_type: type[EnvelopeT]) -> EnvelopeT | None:
    payload = extract_field(decode_body(raw), field)
    if payload is None:
        return None
    try:
        return envelope_type.model_validate(payload)
    except SchemaValidationError as exc:
        raise DecodeError(f"unexpected {field} payload: {_summarize(exc)}") from exc


def decode_entity(raw: bytes, field: str, model: type[ModelT]) -> ModelT | None:
    payload = extract_field(decode_body(raw), field)
    if payload is None:
        return None
    try:
        return model.model_validate(payload)
    except SchemaValidationError as exc:
        raise DecodeError(f"unexpected {field} payload: {_summarize(exc)}") from exc


def decode_edges(raw: bytes, field: str, model: type[ModelT]) -> list[ModelT]:
    """Flatten ``{edges: [{node}]}`` in server order; absent or malformed pages are empty."""
    payload = extract_field(decode_body(raw), field)
    if payload is None:
        logger.debug("GraphQL field %s is empty", field)
        return []
    try:
        connection = Connection[model].model_validate(payload)
    except SchemaValidationError as exc:
        logger.debug("GraphQL field %s is malformed: %s", field, _summarize(exc))
        return []
    return connection.nodes()


def _summarize(exc: SchemaValidationError) -> str:
    first = exc.errors()[0]
    location = ".".join(str(part) for part in first["loc"]) or "<root>"
    return f"{location}: {first['msg']}"
