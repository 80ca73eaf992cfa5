"""Service key operations."""

from __future__ import annotations

from pydantic import Field

from netaccess.client import queries
from netaccess.client.base import EntityAPI
from netaccess.schemas.graphql import Envelope
from netaccess.schemas.identity import ServiceKey


class ServiceKeyCreateEnvelope(Envelope[ServiceKey]):
    """``serviceAccountKeyCreate`` also returns the one-time token."""

    token: str = Field(default="", description="Secret token, never returned again")


class ServiceKeysAPI(EntityAPI):
    entity = "service account key"
    entity_plural = "service account keys"

    async def create(self, key: ServiceKey) -> ServiceKey:
        self._require(key.service, "create", "service account id is empty")
        envelope = await self._mutate(
            "create",
            queries.CREATE_SERVICE_KEY,
            {
                "serviceAccountId": key.service,
                "name": key.name,
                "expirationTime": key.expiration_time,
            },
            field="serviceAccountKeyCreate",
            envelope_type=ServiceKeyCreateEnvelope,
            require_entity=True,
        )
        return envelope.entity.model_copy(
            update={"token": envelope.token, "expiration_time": key.expiration_time},
        )

    async def read(self, key_id: str) -> ServiceKey:
        self._require(key_id, "read", "id is empty")
        return await self._fetch(
            queries.READ_SERVICE_KEY,
            {"id": key_id},
            field="serviceAccountKey",
            model=ServiceKey,
            entity_id=key_id,
        )

    async def update(self, key: ServiceKey) -> ServiceKey:
        """Rename a key; nothing else about a key is mutable."""
        self._require(key.id, "update", "id is empty")
        envelope = await self._mutate(
            "update",
            queries.UPDATE_SERVICE_KEY,
            {"id": key.id, "name": key.name},
            field="serviceAccountKeyUpdate",
            envelope_type=Envelope[ServiceKey],
            entity_id=key.id,
            require_entity=True,
        )
        return envelope.entity

    async def revoke(self, key_id: str) -> None:
        self._require(key_id, "revoke", "id is empty")
        await self._mutate(
            "revoke",
            queries.REVOKE_SERVICE_KEY,
            {"id": key_id},
            field="serviceAccountKeyRevoke",
            entity_id=key_id,
        )

    async def delete(self, key_id: str) -> None:
        self._require(key_id, "delete", "id is empty")
        await self._mutate(
            "delete",
            queries.DELETE_SERVICE_KEY,
            {"id": key_id},
            field="serviceAccountKeyDelete",
            entity_id=key_id,
        )

    async def list(self) -> list[ServiceKey]:
        return await self._fetch_all(queries.READ_SERVICE_KEYS, field="serviceAccountKeys", model=ServiceKey)
