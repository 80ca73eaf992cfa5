"""Resource operations."""

from __future__ import annotations

from netaccess.client import queries
from netaccess.client.base import EntityAPI
from netaccess.schemas.graphql import Envelope
from netaccess.schemas.network import Resource


class ResourcesAPI(EntityAPI):
    entity = "resource"
    entity_plural = "resources"

    async def create(self, resource: Resource) -> Resource:
        self._require(resource.remote_network_id, "create", "network id is empty")
        variables = resource.to_variables()
        variables.pop("id", None)
        envelope = await self._mutate(
            "create",
            queries.CREATE_RESOURCE,
            variables,
            field="resourceCreate",
            envelope_type=Envelope[Resource],
            require_entity=True,
        )
        return envelope.entity

    async def read(self, resource_id: str) -> Resource:
        self._require(resource_id, "read", "id is empty")
        return await self._fetch(
            queries.READ_RESOURCE,
            {"id": resource_id},
            field="resource",
            model=Resource,
            entity_id=resource_id,
        )

    async def read_by_name(self, name: str) -> list[Resource]:
        """All resources whose name matches exactly; empty when none do."""
        self._require(name, "read", "name is empty")
        return await self._fetch_all(
            queries.READ_RESOURCES_BY_NAME,
            {"name": name},
            field="resources",
            model=Resource,
        )

    async def update(self, resource: Resource) -> Resource:
        self._require(resource.id, "update", "id is empty")
        envelope = await self._mutate(
            "update",
            queries.UPDATE_RESOURCE,
            resource.to_variables(),
            field="resourceUpdate",
            envelope_type=Envelope[Resource],
            entity_id=resource.id,
            require_entity=True,
        )
        return envelope.entity

    async def delete(self, resource_id: str) -> None:
        self._require(resource_id, "delete", "id is empty")
        await self._mutate(
            "delete",
            queries.DELETE_RESOURCE,
            {"id": resource_id},
            field="resourceDelete",
            entity_id=resource_id,
        )

    async def list(self) -> list[Resource]:
        return await self._fetch_all(queries.READ_RESOURCES, field="resources", model=Resource)
