"""Service key resource.

A key's token is only returned when the key is created, so it is stored in
state at creation and never refreshed. Keys that are found revoked or expired
on read are replaced by a new key (new id and token). Deleting a key that is
still active revokes it first.
"""

from __future__ import annotations

import logging

from netaccess.client.client import NetAccessClient
from netaccess.client.errors import ClientError, is_empty_result
from netaccess.observability import log_lifecycle_event
from netaccess.provider.configs import ServiceKeyConfig
from netaccess.provider.diagnostics import Diagnostics, from_error
from netaccess.provider.lifecycle import handle_read_error, set_attributes
from netaccess.provider.resource_data import ResourceData
from netaccess.provider.schema import Attribute, ResourceSchema
from netaccess.schemas.identity import ServiceKey

logger = logging.getLogger(__name__)

RESOURCE_TYPE = "netaccess_service_account_key"


async def service_key_create(client: NetAccessClient, data: ResourceData) -> Diagnostics:
    try:
        config = ServiceKeyConfig.from_resource_data(data)
        key = await client.service_keys.create(config.to_service_key())
    except ClientError as exc:
        return from_error(exc)

    log_lifecycle_event(
        logger,
        level=logging.INFO,
        message=f"Service key {key.name} created with id {key.id}",
        component="lifecycle",
        operation="create",
        resource_type=RESOURCE_TYPE,
        resource_id=key.id,
    )
    data.set("token", key.token)
    return await _apply(client, data, key, recreate_inactive=False)


async def service_key_read(client: NetAccessClient, data: ResourceData) -> Diagnostics:
    try:
        key = await client.service_keys.read(data.id)
    except ClientError as exc:
        return handle_read_error(data, exc, resource_type=RESOURCE_TYPE)
    return await _apply(client, data, key)


async def service_key_update(client: NetAccessClient, data: ResourceData) -> Diagnostics:
    try:
        config = ServiceKeyConfig.from_resource_data(data)
        key = await client.service_keys.update(config.to_service_key(data.id))
    except ClientError as exc:
        return from_error(exc)

    log_lifecycle_event(
        logger,
        level=logging.INFO,
        message=f"Updated service key id {key.id}",
        component="lifecycle",
        operation="update",
        resource_type=RESOURCE_TYPE,
        resource_id=key.id,
    )
    return await _apply(client, data, key)


async def service_key_delete(client: NetAccessClient, data: ResourceData) -> Diagnostics:
    try:
        key = await client.service_keys.read(data.id)
        if key.is_active:
            await client.service_keys.revoke(data.id)
        await client.service_keys.delete(data.id)
    except ClientError as exc:
        if is_empty_result(exc):
            data.set_id("")
            return []
        return from_error(exc)

    log_lifecycle_event(
        logger,
        level=logging.INFO,
        message=f"Deleted service key id {data.id}",
        component="lifecycle",
        operation="delete",
        resource_type=RESOURCE_TYPE,
        resource_id=data.id,
    )
    return []


async def _apply(
    client: NetAccessClient,
    data: ResourceData,
    key: ServiceKey,
    *,
    recreate_inactive: bool = True,
) -> Diagnostics:
    if not key.is_active and recreate_inactive:
        return await _recreate(client, data, key)

    set_attributes(data, {"name": key.name, "service_account_id": key.service})
    data.set_id(key.id)
    return []


async def _recreate(client: NetAccessClient, data: ResourceData, key: ServiceKey) -> Diagnostics:
    # not atomic: a failure after delete leaves the key absent until the next apply
    log_lifecycle_event(
        logger,
        level=logging.INFO,
        message=f"Service key id {key.id} is {key.status}, recreating it",
        component="lifecycle",
        operation="recreate",
        resource_type=RESOURCE_TYPE,
        resource_id=key.id,
        status=key.status,
    )
    try:
        await client.service_keys.delete(key.id)
    except ClientError as exc:
        return from_error(exc)
    return await service_key_create(client, data)


SERVICE_KEY = ResourceSchema(
    description="A Service Key authorizes access to all Resources assigned to a Service Account.",
    attributes={
        "service_account_id": Attribute("string", "The id of the Service Account", required=True),
        "name": Attribute("string", "The name of the Service Key", optional=True, computed=True),
        "expiration_time": Attribute(
            "int",
            "Days until the key expires, between 0 and 365. 0 means the key never expires.",
            optional=True,
            force_new=True,
        ),
        "id": Attribute("string", "Autogenerated ID of the Service Key", computed=True),
        "token": Attribute("string", "Autogenerated Token of the Service Key", computed=True, sensitive=True),
    },
    create=service_key_create,
    read=service_key_read,
    update=service_key_update,
    delete=service_key_delete,
)
