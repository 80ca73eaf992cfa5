"""User resource.

Only users of type MANUAL are managed here; users provisioned any other way
(for example synced from an identity provider) can be read but not changed.
"""

from __future__ import annotations

import logging
from typing import get_args

from netaccess.client.client import NetAccessClient
from netaccess.client.errors import ClientError, ValidationError
from netaccess.observability import log_lifecycle_event
from netaccess.provider.attrs import doc_list
from netaccess.provider.configs import UserConfig, user_update_from_resource_data
from netaccess.provider.converters import user_to_terraform
from netaccess.provider.diagnostics import Diagnostics, from_error
from netaccess.provider.lifecycle import handle_read_error, set_attributes
from netaccess.provider.resource_data import ResourceData
from netaccess.provider.schema import Attribute, ResourceSchema
from netaccess.schemas.identity import USER_TYPE_MANUAL, User, UserRole, UserType, UserUpdate

logger = logging.getLogger(__name__)

RESOURCE_TYPE = "netaccess_user"
USER_ROLES: tuple[str, ...] = get_args(UserRole)
USER_TYPES: tuple[str, ...] = get_args(UserType)


class AllowedToChangeOnlyManualUsersError(ValidationError):
    def __init__(self) -> None:
        super().__init__(f"only users of type {USER_TYPE_MANUAL} may be modified")


def ensure_manual_user(data: ResourceData) -> None:
    if data.get("type") != USER_TYPE_MANUAL:
        raise AllowedToChangeOnlyManualUsersError()


def _apply(data: ResourceData, user: User) -> Diagnostics:
    attributes = user_to_terraform(user)
    data.set_id(attributes.pop("id"))
    set_attributes(data, attributes)
    return []


async def user_create(client: NetAccessClient, data: ResourceData) -> Diagnostics:
    try:
        config = UserConfig.from_resource_data(data)
        user = await client.users.create(config.to_user())
    except ClientError as exc:
        return from_error(exc)

    log_lifecycle_event(
        logger,
        level=logging.INFO,
        message=f"User {user.email} created with id {user.id}",
        component="lifecycle",
        operation="create",
        resource_type=RESOURCE_TYPE,
        resource_id=user.id,
    )
    data.set("send_invite", config.send_invite)
    _apply(data, user)

    if not config.is_active:
        # the user exists from here on; a failed deactivation keeps it in state
        try:
            user = await client.users.update(UserUpdate(id=user.id, is_active=False))
        except ClientError as exc:
            return from_error(exc)
        _apply(data, user)
    return []


async def user_read(client: NetAccessClient, data: ResourceData) -> Diagnostics:
    try:
        user = await client.users.read(data.id)
    except ClientError as exc:
        return handle_read_error(data, exc, resource_type=RESOURCE_TYPE)
    return _apply(data, user)


async def user_update(client: NetAccessClient, data: ResourceData) -> Diagnostics:
    try:
        ensure_manual_user(data)
        user = await client.users.update(user_update_from_resource_data(data))
    except ClientError as exc:
        return from_error(exc)

    log_lifecycle_event(
        logger,
        level=logging.INFO,
        message=f"Updated user id {user.id}",
        component="lifecycle",
        operation="update",
        resource_type=RESOURCE_TYPE,
        resource_id=user.id,
    )
    return _apply(data, user)


async def user_delete(client: NetAccessClient, data: ResourceData) -> Diagnostics:
    try:
        ensure_manual_user(data)
        await client.users.delete(data.id)
    except ClientError as exc:
        return from_error(exc)

    log_lifecycle_event(
        logger,
        level=logging.INFO,
        message=f"Deleted user id {data.id}",
        component="lifecycle",
        operation="delete",
        resource_type=RESOURCE_TYPE,
        resource_id=data.id,
    )
    return []


USER = ResourceSchema(
    description="Users provide different levels of write capabilities across the Admin Console.",
    attributes={
        "email": Attribute("string", "The User's email address", required=True, force_new=True),
        "first_name": Attribute("string", "The User's first name", optional=True, computed=True),
        "last_name": Attribute("string", "The User's last name", optional=True, computed=True),
        "send_invite": Attribute(
            "bool",
            "Determines whether to send an email invitation to the User. True by default.",
            optional=True,
            computed=True,
        ),
        "is_active": Attribute(
            "bool",
            "Determines whether the User is active or not. Inactive users will be not able to sign in.",
            optional=True,
            computed=True,
        ),
        "role": Attribute(
            "string",
            f"Determines the User's role. Either {doc_list(USER_ROLES)}.",
            optional=True,
            computed=True,
            allowed=USER_ROLES,
        ),
        "type": Attribute("string", f"Indicates the User's type. Either {doc_list(USER_TYPES)}.", computed=True),
        "id": Attribute("string", "Autogenerated ID of the User, encoded in base64.", computed=True),
    },
    create=user_create,
    read=user_read,
    update=user_update,
    delete=user_delete,
)
