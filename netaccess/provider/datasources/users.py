"""Users data source."""

from __future__ import annotations

from netaccess.client.client import NetAccessClient
from netaccess.client.errors import ClientError
from netaccess.provider.converters import to_terraform_list, user_to_terraform
from netaccess.provider.diagnostics import Diagnostics, from_error
from netaccess.provider.resource_data import ResourceData
from netaccess.provider.schema import Attribute, DataSourceSchema


async def users_read(client: NetAccessClient, data: ResourceData) -> Diagnostics:
    try:
        users = await client.users.list()
    except ClientError as exc:
        return from_error(exc)

    data.set("users", to_terraform_list(users, user_to_terraform))
    data.set_id("all-users")
    return []


USERS = DataSourceSchema(
    description="Users in the Admin Console.",
    read=users_read,
    attributes={
        "users": Attribute(
            "list",
            "List of Users",
            computed=True,
            elem={
                "id": Attribute("string", "The ID of the User", computed=True),
                "email": Attribute("string", "The email address of the User", computed=True),
                "first_name": Attribute("string", "The first name of the User", computed=True),
                "last_name": Attribute("string", "The last name of the User", computed=True),
                "role": Attribute("string", "The role of the User", computed=True),
                "type": Attribute("string", "The type of the User", computed=True),
                "is_active": Attribute("bool", "Whether the User is active", computed=True),
            },
        ),
    },
)
