"""Group operations."""

from __future__ import annotations

from netaccess.client import queries
from netaccess.client.base import EntityAPI
from netaccess.schemas.graphql import Envelope
from netaccess.schemas.network import Group


class GroupsAPI(EntityAPI):
    entity = "group"
    entity_plural = "groups"

    async def create(self, name: str) -> Group:
        self._require(name, "create", "name is empty")
        envelope = await self._mutate(
            "create",
            queries.CREATE_GROUP,
            {"name": name},
            field="groupCreate",
            envelope_type=Envelope[Group],
            require_entity=True,
        )
        return envelope.entity

    async def read(self, group_id: str) -> Group:
        self._require(group_id, "read", "id is empty")
        return await self._fetch(
            queries.READ_GROUP,
            {"id": group_id},
            field="group",
            model=Group,
            entity_id=group_id,
        )

    async def update(self, group_id: str, name: str) -> Group:
        self._require(group_id, "update", "id is empty")
        envelope = await self._mutate(
            "update",
            queries.UPDATE_GROUP,
            {"id": group_id, "name": name},
            field="groupUpdate",
            envelope_type=Envelope[Group],
            entity_id=group_id,
            require_entity=True,
        )
        return envelope.entity

    async def delete(self, group_id: str) -> None:
        self._require(group_id, "delete", "id is empty")
        await self._mutate(
            "delete",
            queries.DELETE_GROUP,
            {"id": group_id},
            field="groupDelete",
            entity_id=group_id,
        )

    async def list(self) -> list[Group]:
        return await self._fetch_all(queries.READ_GROUPS, field="groups", model=Group)
