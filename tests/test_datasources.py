"""Data source reads."""

from __future__ import annotations

import asyncio

from netaccess.client.client import NetAccessClient
from netaccess.provider.datasources.connectors import connectors_read
from netaccess.provider.datasources.groups import groups_read
from netaccess.provider.datasources.remote_networks import remote_networks_read
from netaccess.provider.datasources.resources import resources_read
from netaccess.provider.datasources.security_policies import security_policies_read
from netaccess.provider.datasources.services import services_read
from netaccess.provider.datasources.users import users_read
from netaccess.provider.resource_data import InMemoryResourceData


def test_connectors_data_source_with_no_connectors(client: NetAccessClient, stub) -> None:
    stub.respond({})
    data = InMemoryResourceData()

    assert asyncio.run(connectors_read(client, data)) == []
    assert data.id == "all-connectors"
    assert data.get("connectors") == []


def test_connectors_data_source_lists_in_server_order(client: NetAccessClient, stub) -> None:
    stub.respond_edges(
        "connectors",
        [
            {"id": "connector2", "name": "b", "remoteNetwork": {"id": "network-1"}},
            {"id": "connector1", "name": "a", "hasStatusNotificationsEnabled": False},
        ],
    )
    data = InMemoryResourceData()

    asyncio.run(connectors_read(client, data))

    assert data.get("connectors") == [
        {"id": "connector2", "name": "b", "remote_network_id": "network-1", "status_updates_enabled": True},
        {"id": "connector1", "name": "a", "remote_network_id": "", "status_updates_enabled": False},
    ]


def test_groups_and_remote_networks_data_sources(client: NetAccessClient, stub) -> None:
    stub.respond_edges("groups", [{"id": "group-1", "name": "eng", "type": "SYSTEM", "isActive": True}])
    stub.respond_edges("remoteNetworks", [{"id": "network-1", "name": "office", "location": "ON_PREMISE"}])
    groups = InMemoryResourceData()
    networks = InMemoryResourceData()

    async def _run() -> None:
        assert await groups_read(client, groups) == []
        assert await remote_networks_read(client, networks) == []

    asyncio.run(_run())

    assert groups.id == "all-groups"
    assert groups.get("groups") == [{"id": "group-1", "name": "eng", "type": "SYSTEM", "is_active": True}]
    assert networks.id == "all-remote-networks"
    assert networks.get("remote_networks") == [{"id": "network-1", "name": "office", "location": "ON_PREMISE"}]


def test_resources_data_source_filters_by_name(client: NetAccessClient, stub) -> None:
    stub.respond_edges(
        "resources",
        [{"id": "resource-1", "name": "db", "address": {"value": "10.0.0.1"}, "remoteNetwork": {"id": "network-1"}}],
    )
    data = InMemoryResourceData({"name": "db"})

    assert asyncio.run(resources_read(client, data)) == []

    assert data.id == "query resources by name: db"
    assert stub.requests[0]["variables"] == {"name": "db"}
    assert data.get("resources") == [
        {"id": "resource-1", "name": "db", "address": "10.0.0.1", "remote_network_id": "network-1", "protocols": None}
    ]


def test_users_data_source_failure_is_a_diagnostic(client: NetAccessClient, stub) -> None:
    stub.fail("connection reset")
    data = InMemoryResourceData()

    diagnostics = asyncio.run(users_read(client, data))

    assert len(diagnostics) == 1
    assert diagnostics[0].summary.startswith('failed to read users: Post "')
    assert data.id == ""
    assert data.get("users") is None


def test_services_data_source_lists_all_or_by_name(client: NetAccessClient, stub) -> None:
    account = {"id": "account-1", "name": "ci", "keys": {"edges": [{"node": {"id": "key-1"}}]}}
    stub.respond_edges("serviceAccounts", [account])
    stub.respond_edges("serviceAccounts", [account])
    everything = InMemoryResourceData()
    named = InMemoryResourceData({"name": "ci"})

    async def _run() -> None:
        assert await services_read(client, everything) == []
        assert await services_read(client, named) == []

    asyncio.run(_run())

    assert everything.id == "all-services"
    assert named.id == "query services by name: ci"
    assert named.get("services") == [{"id": "account-1", "name": "ci", "resource_ids": [], "key_ids": ["key-1"]}]
    assert stub.operations() == ["ReadServiceAccounts", "ReadServiceAccountsByName"]


def test_security_policies_data_source(client: NetAccessClient, stub) -> None:
    stub.respond({})
    data = InMemoryResourceData()

    assert asyncio.run(security_policies_read(client, data)) == []
    assert data.id == "all-security-policies"
    assert data.get("security_policies") == []
