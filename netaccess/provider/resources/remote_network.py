"""Remote network resource."""

from __future__ import annotations

import logging
from typing import get_args

from netaccess.client.client import NetAccessClient
from netaccess.client.errors import ClientError
from netaccess.observability import log_lifecycle_event
from netaccess.provider.attrs import doc_list
from netaccess.provider.configs import RemoteNetworkConfig
from netaccess.provider.converters import remote_network_to_terraform
from netaccess.provider.diagnostics import Diagnostics, from_error
from netaccess.provider.lifecycle import handle_read_error, set_attributes
from netaccess.provider.resource_data import ResourceData
from netaccess.provider.schema import Attribute, ResourceSchema
from netaccess.schemas.network import Location, RemoteNetwork

logger = logging.getLogger(__name__)

RESOURCE_TYPE = "netaccess_remote_network"
LOCATIONS: tuple[str, ...] = get_args(Location)


def _apply(data: ResourceData, network: RemoteNetwork) -> Diagnostics:
    attributes = remote_network_to_terraform(network)
    data.set_id(attributes.pop("id"))
    set_attributes(data, attributes)
    return []


async def remote_network_create(client: NetAccessClient, data: ResourceData) -> Diagnostics:
    try:
        config = RemoteNetworkConfig.from_resource_data(data)
        network = await client.remote_networks.create(config.name, config.location)
    except ClientError as exc:
        return from_error(exc)

    log_lifecycle_event(
        logger,
        level=logging.INFO,
        message=f"Created remote network {network.name}",
        component="lifecycle",
        operation="create",
        resource_type=RESOURCE_TYPE,
        resource_id=network.id,
    )
    return _apply(data, network)


async def remote_network_read(client: NetAccessClient, data: ResourceData) -> Diagnostics:
    try:
        network = await client.remote_networks.read(data.id)
    except ClientError as exc:
        return handle_read_error(data, exc, resource_type=RESOURCE_TYPE)
    return _apply(data, network)


async def remote_network_update(client: NetAccessClient, data: ResourceData) -> Diagnostics:
    try:
        config = RemoteNetworkConfig.from_resource_data(data)
        network = await client.remote_networks.update(data.id, config.name, config.location)
    except ClientError as exc:
        return from_error(exc)

    log_lifecycle_event(
        logger,
        level=logging.INFO,
        message=f"Updated remote network id {network.id}",
        component="lifecycle",
        operation="update",
        resource_type=RESOURCE_TYPE,
        resource_id=network.id,
    )
    return _apply(data, network)


async def remote_network_delete(client: NetAccessClient, data: ResourceData) -> Diagnostics:
    try:
        await client.remote_networks.delete(data.id)
    except ClientError as exc:
        return from_error(exc)

    log_lifecycle_event(
        logger,
        level=logging.INFO,
        message=f"Deleted remote network id {data.id}",
        component="lifecycle",
        operation="delete",
        resource_type=RESOURCE_TYPE,
        resource_id=data.id,
    )
    return []


REMOTE_NETWORK = ResourceSchema(
    description="Remote Networks are the logical containers that group Resources together.",
    attributes={
        "name": Attribute("string", "The name of the Remote Network", required=True),
        "location": Attribute(
            "string",
            f"The location of the Remote Network. Must be one of {doc_list(LOCATIONS)}.",
            optional=True,
            computed=True,
            allowed=LOCATIONS,
        ),
        "id": Attribute("string", "Autogenerated ID of the Remote Network, encoded in base64", computed=True),
    },
    create=remote_network_create,
    read=remote_network_read,
    update=remote_network_update,
    delete=remote_network_delete,
)
