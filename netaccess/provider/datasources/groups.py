"""Groups data source."""

from __future__ import annotations

from netaccess.client.client import NetAccessClient
from netaccess.client.errors import ClientError
from netaccess.provider.converters import group_to_terraform, to_terraform_list
from netaccess.provider.diagnostics import Diagnostics, from_error
from netaccess.provider.resource_data import ResourceData
from netaccess.provider.schema import Attribute, DataSourceSchema


async def groups_read(client: NetAccessClient, data: ResourceData) -> Diagnostics:
    try:
        groups = await client.groups.list()
    except ClientError as exc:
        return from_error(exc)

    data.set("groups", to_terraform_list(groups, group_to_terraform))
    data.set_id("all-groups")
    return []


GROUPS = DataSourceSchema(
    description="Groups are how users are authorized to access Resources.",
    read=groups_read,
    attributes={
        "groups": Attribute(
            "list",
            "List of Groups",
            computed=True,
            elem={
                "id": Attribute("string", "The ID of the Group", computed=True),
                "name": Attribute("string", "The name of the Group", computed=True),
                "type": Attribute("string", "The type of the Group", computed=True),
                "is_active": Attribute("bool", "Indicates if the Group is active", computed=True),
            },
        ),
    },
)
