"""Service accounts data source."""

from __future__ import annotations

from netaccess.client.client import NetAccessClient
from netaccess.client.errors import ClientError
from netaccess.provider.converters import service_account_to_terraform, to_terraform_list
from netaccess.provider.diagnostics import Diagnostics, from_error
from netaccess.provider.resource_data import ResourceData
from netaccess.provider.schema import Attribute, DataSourceSchema


async def services_read(client: NetAccessClient, data: ResourceData) -> Diagnostics:
    name = data.get("name") or ""
    try:
        accounts = await client.service_accounts.list(name)
    except ClientError as exc:
        return from_error(exc)

    data.set("services", to_terraform_list(accounts, service_account_to_terraform))
    data.set_id(f"query services by name: {name}" if name else "all-services")
    return []


SERVICES = DataSourceSchema(
    description="Service Accounts offer a way to provide programmatic, centrally-controlled, and consistent access.",
    read=services_read,
    attributes={
        "name": Attribute("string", "Return only Service Accounts with this exact name", optional=True),
        "services": Attribute(
            "list",
            "List of Service Accounts",
            computed=True,
            elem={
                "id": Attribute("string", "ID of the Service Account", computed=True),
                "name": Attribute("string", "Name of the Service Account", computed=True),
                "resource_ids": Attribute("list", "List of Resource IDs the Service Account can access", computed=True),
                "key_ids": Attribute("list", "List of Service Key IDs issued for the Service Account", computed=True),
            },
        ),
    },
)
