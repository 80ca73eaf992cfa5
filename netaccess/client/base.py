"""Request/decode plumbing shared by every entity family."""

from __future__ import annotations

from typing import Any, ClassVar, TypeVar

from pydantic import BaseModel

from netaccess.client.decoder import decode_edges, decode_entity, decode_envelope
from netaccess.client.errors import (
    EMPTY_RESULT,
    ClientError,
    NotFoundError,
    OperationError,
    ValidationError,
    operation_message,
)
from netaccess.client.transport import GraphQLTransport
from netaccess.schemas.graphql import Envelope, StatusEnvelope

ModelT = TypeVar("ModelT", bound=BaseModel)
EnvelopeT = TypeVar("EnvelopeT", bound=Envelope)


class EntityAPI:
    """Base for per-entity operations.

    Every public operation issues at most one request. Failures are raised as
    ``ClientError`` subclasses whose message names the operation, the entity
    and, when known, its id.
    """

    entity: ClassVar[str]
    entity_plural: ClassVar[str]

    def __init__(self, transport: GraphQLTransport) -> None:
        self._transport = transport

    def _require(self, value: str, operation: str, reason: str) -> None:
        if not value:
            raise ValidationError(operation_message(operation, self.entity, reason))

    async def _mutate(
        self,
        operation: str,
        query: str,
        variables: dict[str, Any],
        *,
        field: str,
        envelope_type: type[EnvelopeT] = StatusEnvelope,  # type: ignore[assignment]
        entity_id: str | None = None,
        require_entity: bool = False,
    ) -> EnvelopeT:
        try:
            raw = await self._transport.execute(query, variables)
            envelope = decode_envelope(raw, field, envelope_type)
        except ClientError as exc:
            raise exc.wrap(operation, self.entity, entity_id) from exc

        if envelope is None:
            raise NotFoundError(operation_message(operation, self.entity, EMPTY_RESULT, entity_id))
        if not envelope.ok:
            reason = envelope.error or "unknown error"
            raise OperationError(operation_message(operation, self.entity, reason, entity_id))
        if require_entity and envelope.entity is None:
            raise NotFoundError(operation_message(operation, self.entity, EMPTY_RESULT, entity_id))
        return envelope

    async def _fetch(
        self,
        query: str,
        variables: dict[str, Any],
        *,
        field: str,
        model: type[ModelT],
        entity_id: str | None = None,
    ) -> ModelT:
        try:
            raw = await self._transport.execute(query, variables)
            entity = decode_entity(raw, field, model)
        except ClientError as exc:
            raise exc.wrap("read", self.entity, entity_id) from exc

        if entity is None:
            raise NotFoundError(operation_message("read", self.entity, EMPTY_RESULT, entity_id))
        return entity

    async def _fetch_all(
        self,
        query: str,
        variables: dict[str, Any] | None = None,
        *,
        field: str,
        model: type[ModelT],
    ) -> list[ModelT]:
        try:
            raw = await self._transport.execute(query, variables)
            return decode_edges(raw, field, model)
        except ClientError as exc:
            raise exc.wrap("read", self.entity_plural) from exc
