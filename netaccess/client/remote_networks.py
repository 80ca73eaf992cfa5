"""Remote network operations."""

from __future__ import annotations

from netaccess.client import queries
from netaccess.client.base import EntityAPI
from netaccess.client.errors import EMPTY_RESULT, NotFoundError
from netaccess.schemas.graphql import Envelope
from netaccess.schemas.network import Location, RemoteNetwork


class RemoteNetworksAPI(EntityAPI):
    entity = "remote network"
    entity_plural = "remote networks"

    async def create(self, name: str, location: Location = "OTHER") -> RemoteNetwork:
        self._require(name, "create", "name is empty")
        envelope = await self._mutate(
            "create",
            queries.CREATE_REMOTE_NETWORK,
            {"name": name, "location": location},
            field="remoteNetworkCreate",
            envelope_type=Envelope[RemoteNetwork],
            require_entity=True,
        )
        return envelope.entity

    async def read(self, network_id: str) -> RemoteNetwork:
        self._require(network_id, "read", "id is empty")
        return await self._fetch(
            queries.READ_REMOTE_NETWORK,
            {"id": network_id},
            field="remoteNetwork",
            model=RemoteNetwork,
            entity_id=network_id,
        )

    async def read_by_name(self, name: str) -> RemoteNetwork:
        """Return the first remote network with this exact name."""
        self._require(name, "read", "name is empty")
        networks = await self._fetch_all(
            queries.READ_REMOTE_NETWORK_BY_NAME,
            {"name": name},
            field="remoteNetworks",
            model=RemoteNetwork,
        )
        if not networks:
            raise self._not_found_by_name(name)
        return networks[0]

    async def update(self, network_id: str, name: str, location: Location = "OTHER") -> RemoteNetwork:
        self._require(network_id, "update", "id is empty")
        envelope = await self._mutate(
            "update",
            queries.UPDATE_REMOTE_NETWORK,
            {"id": network_id, "name": name, "location": location},
            field="remoteNetworkUpdate",
            envelope_type=Envelope[RemoteNetwork],
            entity_id=network_id,
            require_entity=True,
        )
        return envelope.entity

    async def delete(self, network_id: str) -> None:
        self._require(network_id, "delete", "id is empty")
        await self._mutate(
            "delete",
            queries.DELETE_REMOTE_NETWORK,
            {"id": network_id},
            field="remoteNetworkDelete",
            entity_id=network_id,
        )

    async def list(self) -> list[RemoteNetwork]:
        return await self._fetch_all(queries.READ_REMOTE_NETWORKS, field="remoteNetworks", model=RemoteNetwork)

    def _not_found_by_name(self, name: str) -> NotFoundError:
        return NotFoundError(f"failed to read {self.entity} with name {name}: {EMPTY_RESULT}")
