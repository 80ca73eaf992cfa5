"""Connector resource."""

from __future__ import annotations

import logging

from netaccess.client.client import NetAccessClient
from netaccess.client.errors import ClientError
from netaccess.observability import log_lifecycle_event
from netaccess.provider.configs import ConnectorConfig
from netaccess.provider.diagnostics import Diagnostics, from_error
from netaccess.provider.lifecycle import handle_read_error, set_attributes
from netaccess.provider.resource_data import ResourceData
from netaccess.provider.schema import Attribute, ResourceSchema

logger = logging.getLogger(__name__)

RESOURCE_TYPE = "netaccess_connector"


async def connector_create(client: NetAccessClient, data: ResourceData) -> Diagnostics:
    try:
        config = ConnectorConfig.from_resource_data(data)
        connector = await client.connectors.create(config.remote_network_id)
        data.set_id(connector.id)
        if config.name and config.name != connector.name:
            await client.connectors.update(connector.id, config.name)
    except ClientError as exc:
        return from_error(exc)

    log_lifecycle_event(
        logger,
        level=logging.INFO,
        message=f"Created connector {connector.name}",
        component="lifecycle",
        operation="create",
        resource_type=RESOURCE_TYPE,
        resource_id=connector.id,
    )
    return await connector_read(client, data)


async def connector_read(client: NetAccessClient, data: ResourceData) -> Diagnostics:
    try:
        connector = await client.connectors.read(data.id)
    except ClientError as exc:
        return handle_read_error(data, exc, resource_type=RESOURCE_TYPE)

    set_attributes(
        data,
        {
            "name": connector.name,
            "remote_network_id": connector.remote_network_id,
            "status_updates_enabled": connector.status_updates_enabled,
        },
    )
    return []


async def connector_update(client: NetAccessClient, data: ResourceData) -> Diagnostics:
    if data.has_change("name"):
        try:
            config = ConnectorConfig.from_resource_data(data)
            await client.connectors.update(data.id, config.name)
        except ClientError as exc:
            return from_error(exc)

        log_lifecycle_event(
            logger,
            level=logging.INFO,
            message=f"Renamed connector to {config.name}",
            component="lifecycle",
            operation="update",
            resource_type=RESOURCE_TYPE,
            resource_id=data.id,
        )
    return await connector_read(client, data)


async def connector_delete(client: NetAccessClient, data: ResourceData) -> Diagnostics:
    try:
        await client.connectors.delete(data.id)
    except ClientError as exc:
        return from_error(exc)

    log_lifecycle_event(
        logger,
        level=logging.INFO,
        message=f"Destroyed connector id {data.id}",
        component="lifecycle",
        operation="delete",
        resource_type=RESOURCE_TYPE,
        resource_id=data.id,
    )
    return []


CONNECTOR = ResourceSchema(
    description="Connectors provide connectivity to Remote Networks.",
    attributes={
        "remote_network_id": Attribute(
            "string",
            "The ID of the Remote Network the Connector is attached to",
            required=True,
            force_new=True,
        ),
        "name": Attribute("string", "Name of the Connector, autogenerated when not set", optional=True, computed=True),
        "status_updates_enabled": Attribute(
            "bool",
            "Determines whether status notifications are enabled for the Connector",
            computed=True,
        ),
        "id": Attribute("string", "Autogenerated ID of the Connector, encoded in base64", computed=True),
    },
    create=connector_create,
    read=connector_read,
    update=connector_update,
    delete=connector_delete,
)
