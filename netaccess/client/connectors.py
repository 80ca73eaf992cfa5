"""Connector operations."""

from __future__ import annotations

from netaccess.client import queries
from netaccess.client.base import EntityAPI
from netaccess.schemas.graphql import Envelope
from netaccess.schemas.network import Connector


class ConnectorsAPI(EntityAPI):
    """Create, read, rename, delete and list connectors."""

    entity = "connector"
    entity_plural = "connectors"

    async def create(self, remote_network_id: str) -> Connector:
        """Create a connector in a remote network.

        mutation connectorCreate
        The server assigns both the id and the name.
        """
        self._require(remote_network_id, "create", "network id is empty")
        envelope = await self._mutate(
            "create",
            queries.CREATE_CONNECTOR,
            {"remoteNetworkId": remote_network_id},
            field="connectorCreate",
            envelope_type=Envelope[Connector],
            require_entity=True,
        )
        return envelope.entity

    async def read(self, connector_id: str) -> Connector:
        """Read a connector by id.

        query connector
        Raises NotFoundError when the connector no longer exists.
        """
        self._require(connector_id, "read", "id is empty")
        return await self._fetch(
            queries.READ_CONNECTOR,
            {"id": connector_id},
            field="connector",
            model=Connector,
            entity_id=connector_id,
        )

    async def update(self, connector_id: str, name: str) -> None:
        """Rename a connector.

        mutation connectorUpdate
        Nothing is returned; callers re-read to observe the new state.
        """
        self._require(connector_id, "update", "connector id is empty")
        await self._mutate(
            "update",
            queries.UPDATE_CONNECTOR,
            {"id": connector_id, "name": name},
            field="connectorUpdate",
            entity_id=connector_id,
        )

    async def delete(self, connector_id: str) -> None:
        """Delete a connector.

        mutation connectorDelete
        """
        self._require(connector_id, "delete", "id is empty")
        await self._mutate(
            "delete",
            queries.DELETE_CONNECTOR,
            {"id": connector_id},
            field="connectorDelete",
            entity_id=connector_id,
        )

    async def list(self) -> list[Connector]:
        """List all connectors in server order.

        query connectors
        An empty or malformed page yields an empty list.
        """
        return await self._fetch_all(queries.READ_CONNECTORS, field="connectors", model=Connector)
