"""Resource (private network destination) resource."""

from __future__ import annotations

import logging
from typing import get_args

from netaccess.client.client import NetAccessClient
from netaccess.client.errors import ClientError
from netaccess.observability import log_lifecycle_event
from netaccess.provider.attrs import doc_list
from netaccess.provider.configs import NetworkResourceConfig
from netaccess.provider.converters import resource_to_terraform
from netaccess.provider.diagnostics import Diagnostics, from_error
from netaccess.provider.lifecycle import handle_read_error, set_attributes
from netaccess.provider.resource_data import ResourceData
from netaccess.provider.schema import Attribute, ResourceSchema
from netaccess.schemas.network import Policy, Resource

logger = logging.getLogger(__name__)

RESOURCE_TYPE = "netaccess_resource"
POLICIES: tuple[str, ...] = get_args(Policy)


def _apply(data: ResourceData, resource: Resource) -> Diagnostics:
    attributes = resource_to_terraform(resource)
    data.set_id(attributes.pop("id"))
    set_attributes(data, attributes)
    data.set("group_ids", list(resource.group_ids))
    return []


async def resource_create(client: NetAccessClient, data: ResourceData) -> Diagnostics:
    try:
        config = NetworkResourceConfig.from_resource_data(data)
        resource = await client.resources.create(config.to_resource())
    except ClientError as exc:
        return from_error(exc)

    log_lifecycle_event(
        logger,
        level=logging.INFO,
        message=f"Created resource {resource.name}",
        component="lifecycle",
        operation="create",
        resource_type=RESOURCE_TYPE,
        resource_id=resource.id,
    )
    return _apply(data, resource)


async def resource_read(client: NetAccessClient, data: ResourceData) -> Diagnostics:
    try:
        resource = await client.resources.read(data.id)
    except ClientError as exc:
        return handle_read_error(data, exc, resource_type=RESOURCE_TYPE)
    return _apply(data, resource)


async def resource_update(client: NetAccessClient, data: ResourceData) -> Diagnostics:
    try:
        config = NetworkResourceConfig.from_resource_data(data)
        resource = await client.resources.update(config.to_resource(data.id))
    except ClientError as exc:
        return from_error(exc)

    log_lifecycle_event(
        logger,
        level=logging.INFO,
        message=f"Updated resource id {resource.id}",
        component="lifecycle",
        operation="update",
        resource_type=RESOURCE_TYPE,
        resource_id=resource.id,
    )
    return _apply(data, resource)


async def resource_delete(client: NetAccessClient, data: ResourceData) -> Diagnostics:
    try:
        await client.resources.delete(data.id)
    except ClientError as exc:
        return from_error(exc)

    log_lifecycle_event(
        logger,
        level=logging.INFO,
        message=f"Deleted resource id {data.id}",
        component="lifecycle",
        operation="delete",
        resource_type=RESOURCE_TYPE,
        resource_id=data.id,
    )
    return []


PORT_RULE = {
    "policy": Attribute(
        "string",
        f"Whether to allow or deny all ports, or restrict access to listed ranges: {doc_list(POLICIES)}",
        optional=True,
        allowed=POLICIES,
    ),
    "ports": Attribute(
        "list",
        "Port ranges between 1 and 65535 inclusive, `100-200` for a range or `8080` for a single port",
        optional=True,
    ),
}

RESOURCE = ResourceSchema(
    description="Resources represent servers on the private network that clients can connect to.",
    attributes={
        "name": Attribute("string", "The name of the Resource", required=True),
        "address": Attribute("string", "The Resource's IP/CIDR or FQDN/DNS zone", required=True),
        "remote_network_id": Attribute("string", "Remote Network ID where the Resource lives", required=True),
        "group_ids": Attribute("list", "List of Group IDs that have permission to access the Resource", optional=True),
        "protocols": Attribute(
            "map",
            "Restrict access to certain protocols and ports. All traffic is allowed when not set.",
            optional=True,
            computed=True,
            elem={
                "allow_icmp": Attribute("bool", "Whether to allow ICMP (ping) traffic", optional=True),
                "tcp": Attribute("map", "TCP port policy", optional=True, elem=PORT_RULE),
                "udp": Attribute("map", "UDP port policy", optional=True, elem=PORT_RULE),
            },
        ),
        "id": Attribute("string", "Autogenerated ID of the Resource, encoded in base64", computed=True),
    },
    create=resource_create,
    read=resource_read,
    update=resource_update,
    delete=resource_delete,
)
