"""Group resource."""

from __future__ import annotations

import logging

from netaccess.client.client import NetAccessClient
from netaccess.client.errors import ClientError
from netaccess.observability import log_lifecycle_event
from netaccess.provider.configs import GroupConfig
from netaccess.provider.converters import group_to_terraform
from netaccess.provider.diagnostics import Diagnostics, from_error
from netaccess.provider.lifecycle import handle_read_error, set_attributes
from netaccess.provider.resource_data import ResourceData
from netaccess.provider.schema import Attribute, ResourceSchema
from netaccess.schemas.network import Group

logger = logging.getLogger(__name__)

RESOURCE_TYPE = "netaccess_group"


def _apply(data: ResourceData, group: Group) -> Diagnostics:
    attributes = group_to_terraform(group)
    data.set_id(attributes.pop("id"))
    set_attributes(data, attributes)
    return []


async def group_create(client: NetAccessClient, data: ResourceData) -> Diagnostics:
    try:
        config = GroupConfig.from_resource_data(data)
        group = await client.groups.create(config.name)
    except ClientError as exc:
        return from_error(exc)

    log_lifecycle_event(
        logger,
        level=logging.INFO,
        message=f"Created group {group.name}",
        component="lifecycle",
        operation="create",
        resource_type=RESOURCE_TYPE,
        resource_id=group.id,
    )
    return _apply(data, group)


async def group_read(client: NetAccessClient, data: ResourceData) -> Diagnostics:
    try:
        group = await client.groups.read(data.id)
    except ClientError as exc:
        return handle_read_error(data, exc, resource_type=RESOURCE_TYPE)
    return _apply(data, group)


async def group_update(client: NetAccessClient, data: ResourceData) -> Diagnostics:
    try:
        config = GroupConfig.from_resource_data(data)
        group = await client.groups.update(data.id, config.name)
    except ClientError as exc:
        return from_error(exc)
    return _apply(data, group)


async def group_delete(client: NetAccessClient, data: ResourceData) -> Diagnostics:
    try:
        await client.groups.delete(data.id)
    except ClientError as exc:
        return from_error(exc)

    log_lifecycle_event(
        logger,
        level=logging.INFO,
        message=f"Deleted group id {data.id}",
        component="lifecycle",
        operation="delete",
        resource_type=RESOURCE_TYPE,
        resource_id=data.id,
    )
    return []


GROUP = ResourceSchema(
    description="Groups are how users are authorized to access Resources.",
    attributes={
        "name": Attribute("string", "The name of the Group", required=True),
        "type": Attribute("string", "The type of the Group", computed=True),
        "is_active": Attribute("bool", "Indicates if the Group is active", computed=True),
        "id": Attribute("string", "Autogenerated ID of the Group, encoded in base64", computed=True),
    },
    create=group_create,
    read=group_read,
    update=group_update,
    delete=group_delete,
)
