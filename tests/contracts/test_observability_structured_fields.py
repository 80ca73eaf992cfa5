"""Contract tests for structured lifecycle log fields."""

from __future__ import annotations

import asyncio
import logging

import pytest

from netaccess.client.client import NetAccessClient
from netaccess.observability import lifecycle_log_fields
from netaccess.provider.resource_data import InMemoryResourceData
from netaccess.provider.resources.connector import connector_delete
from netaccess.provider.resources.group import group_read


def test_lifecycle_log_fields_drop_empty_details() -> None:
    fields = lifecycle_log_fields(
        component="lifecycle",
        operation="read",
        resource_type="netaccess_group",
        resource_id=None,
        status=None,
        attempt=2,
    )

    assert fields == {
        "component": "lifecycle",
        "operation": "read",
        "resourceType": "netaccess_group",
        "attempt": 2,
    }


def test_delete_logs_structured_fields(
    client: NetAccessClient, stub, caplog: pytest.LogCaptureFixture
) -> None:
    stub.respond_envelope("connectorDelete")
    data = InMemoryResourceData(resource_id="connector-1")

    with caplog.at_level(logging.INFO, logger="netaccess"):
        asyncio.run(connector_delete(client, data))

    records = [record for record in caplog.records if getattr(record, "operation", None) == "delete"]
    assert len(records) == 1
    assert records[0].resourceType == "netaccess_connector"
    assert records[0].resourceId == "connector-1"
    assert records[0].component == "lifecycle"


def test_vanished_entity_is_logged_as_warning(
    client: NetAccessClient, stub, caplog: pytest.LogCaptureFixture
) -> None:
    stub.respond_entity("group", None)
    data = InMemoryResourceData({"name": "eng"}, resource_id="group-1")

    with caplog.at_level(logging.WARNING, logger="netaccess"):
        asyncio.run(group_read(client, data))

    warnings = [record for record in caplog.records if record.levelno == logging.WARNING]
    assert warnings[0].resourceId == "group-1"
    assert "no longer exists" in warnings[0].getMessage()
