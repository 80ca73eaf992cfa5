"""Per-entity client behavior: request variables and decoded results."""

from __future__ import annotations

import asyncio

import pytest

from netaccess.client.client import NetAccessClient
from netaccess.client.errors import NotFoundError, OperationError
from netaccess.schemas.identity import ServiceKey, User, UserUpdate
from netaccess.schemas.network import PortRange, ProtocolRule, Protocols, Resource

RESOURCE_NODE = {
    "id": "resource-1",
    "name": "db",
    "address": {"value": "10.0.0.5"},
    "remoteNetwork": {"id": "network-1"},
    "groups": {"edges": [{"node": {"id": "group-1"}}, {"node": {"id": "group-2"}}]},
    "protocols": {
        "allowIcmp": False,
        "tcp": {"policy": "RESTRICTED", "ports": [{"start": 80, "end": 80}, {"start": 8000, "end": 8080}]},
        "udp": {"policy": "DENY_ALL", "ports": []},
    },
}


def test_remote_network_create_sends_name_and_location(client: NetAccessClient, stub) -> None:
    stub.respond_envelope("remoteNetworkCreate", {"id": "network-1", "name": "aws-east", "location": "AWS"})

    network = asyncio.run(client.remote_networks.create("aws-east", "AWS"))

    assert network.id == "network-1"
    assert network.location == "AWS"
    assert stub.requests[0]["variables"] == {"name": "aws-east", "location": "AWS"}


def test_remote_network_read_by_name_returns_first_match(client: NetAccessClient, stub) -> None:
    stub.respond_edges(
        "remoteNetworks",
        [{"id": "network-1", "name": "office"}, {"id": "network-2", "name": "office"}],
    )

    network = asyncio.run(client.remote_networks.read_by_name("office"))

    assert network.id == "network-1"
    assert network.location == "OTHER"
    assert stub.requests[0]["variables"] == {"name": "office"}


def test_remote_network_read_by_name_without_match_is_not_found(client: NetAccessClient, stub) -> None:
    stub.respond_edges("remoteNetworks", [])

    with pytest.raises(NotFoundError) as exc_info:
        asyncio.run(client.remote_networks.read_by_name("office"))
    assert str(exc_info.value) == "failed to read remote network with name office: query result is empty"


def test_resource_read_flattens_address_network_and_groups(client: NetAccessClient, stub) -> None:
    stub.respond_entity("resource", RESOURCE_NODE)

    resource = asyncio.run(client.resources.read("resource-1"))

    assert resource.address == "10.0.0.5"
    assert resource.remote_network_id == "network-1"
    assert resource.group_ids == ["group-1", "group-2"]
    assert resource.protocols is not None
    assert resource.protocols.allow_icmp is False
    assert [str(port) for port in resource.protocols.tcp.ports] == ["80", "8000-8080"]
    assert resource.protocols.udp.policy == "DENY_ALL"


def test_resource_create_omits_id_and_serializes_protocols(client: NetAccessClient, stub) -> None:
    stub.respond_envelope("resourceCreate", RESOURCE_NODE)
    resource = Resource(
        name="db",
        address="10.0.0.5",
        remote_network_id="network-1",
        group_ids=["group-1"],
        protocols=Protocols(
            allow_icmp=False,
            tcp=ProtocolRule(policy="RESTRICTED", ports=[PortRange(start=80, end=80)]),
        ),
    )

    created = asyncio.run(client.resources.create(resource))

    assert created.id == "resource-1"
    variables = stub.requests[0]["variables"]
    assert "id" not in variables
    assert variables["remoteNetworkId"] == "network-1"
    assert variables["groupIds"] == ["group-1"]
    assert variables["protocols"] == {
        "allowIcmp": False,
        "tcp": {"policy": "RESTRICTED", "ports": [{"start": 80, "end": 80}]},
        "udp": {"policy": "ALLOW_ALL", "ports": []},
    }


def test_resource_read_by_name_returns_every_match(client: NetAccessClient, stub) -> None:
    stub.respond_edges("resources", [RESOURCE_NODE, {**RESOURCE_NODE, "id": "resource-2"}])

    resources = asyncio.run(client.resources.read_by_name("db"))

    assert [resource.id for resource in resources] == ["resource-1", "resource-2"]
    assert stub.operations() == ["ReadResourcesByName"]


def test_group_update_returns_renamed_group(client: NetAccessClient, stub) -> None:
    stub.respond_envelope("groupUpdate", {"id": "group-1", "name": "ops", "type": "MANUAL", "isActive": True})

    group = asyncio.run(client.groups.update("group-1", "ops"))

    assert group.name == "ops"
    assert group.is_active is True
    assert stub.requests[0]["variables"] == {"id": "group-1", "name": "ops"}


def test_user_create_sends_invite_flag_and_keeps_it_on_result(client: NetAccessClient, stub) -> None:
    stub.respond_envelope(
        "userCreate",
        {
            "id": "user-1",
            "email": "ada@example.com",
            "firstName": "Ada",
            "lastName": "Lovelace",
            "role": "DEVOPS",
            "type": "MANUAL",
            "state": "PENDING",
        },
    )
    user = User(email="ada@example.com", first_name="Ada", last_name="Lovelace", role="DEVOPS", send_invite=False)

    created = asyncio.run(client.users.create(user))

    assert created.id == "user-1"
    assert created.send_invite is False
    assert created.is_active is True
    assert stub.requests[0]["variables"] == {
        "email": "ada@example.com",
        "firstName": "Ada",
        "lastName": "Lovelace",
        "role": "DEVOPS",
        "shouldSendInvite": False,
    }


def test_user_update_sends_only_set_fields(client: NetAccessClient, stub) -> None:
    stub.respond_envelope("userUpdate", {"id": "user-1", "email": "ada@example.com", "state": "DISABLED"})

    updated = asyncio.run(client.users.update(UserUpdate(id="user-1", is_active=False)))

    assert updated.is_active is False
    assert stub.requests[0]["variables"] == {"id": "user-1", "state": "DISABLED"}


def test_service_key_create_returns_token_once(client: NetAccessClient, stub) -> None:
    stub.respond_envelope(
        "serviceAccountKeyCreate",
        {"id": "key-1", "name": "ci", "status": "ACTIVE", "serviceAccount": {"id": "account-1"}},
        token="secret-token",
    )

    key = asyncio.run(client.service_keys.create(ServiceKey(service="account-1", name="ci", expiration_time=30)))

    assert key.id == "key-1"
    assert key.service == "account-1"
    assert key.token == "secret-token"
    assert key.expiration_time == 30
    assert stub.requests[0]["variables"] == {"serviceAccountId": "account-1", "name": "ci", "expirationTime": 30}


def test_service_key_revoke_and_read_status(client: NetAccessClient, stub) -> None:
    stub.respond_envelope("serviceAccountKeyRevoke")
    stub.respond_entity("serviceAccountKey", {"id": "key-1", "name": "ci", "status": "REVOKED"})

    async def _run() -> None:
        await client.service_keys.revoke("key-1")
        key = await client.service_keys.read("key-1")
        assert key.is_active is False
        assert key.token == ""

    asyncio.run(_run())
    assert stub.operations() == ["RevokeServiceKey", "ReadServiceKey"]


def test_service_key_list_uses_top_level_query(client: NetAccessClient, stub) -> None:
    stub.respond_edges("serviceAccountKeys", [{"id": "key-1", "status": "EXPIRED"}])

    keys = asyncio.run(client.service_keys.list())

    assert [key.status for key in keys] == ["EXPIRED"]


def test_service_accounts_flatten_resource_and_key_edges(client: NetAccessClient, stub) -> None:
    stub.respond_edges(
        "serviceAccounts",
        [
            {
                "id": "account-1",
                "name": "ci",
                "resources": {"edges": [{"node": {"id": "resource-1"}}]},
                "keys": {"edges": [{"node": {"id": "key-1"}}, {"node": {"id": "key-2"}}]},
            },
            {"id": "account-2", "name": "deploy"},
        ],
    )

    accounts = asyncio.run(client.service_accounts.list())

    assert accounts[0].resource_ids == ["resource-1"]
    assert accounts[0].key_ids == ["key-1", "key-2"]
    assert accounts[1].key_ids == []
    assert stub.operations() == ["ReadServiceAccounts"]


def test_service_accounts_filter_by_name(client: NetAccessClient, stub) -> None:
    stub.respond_edges("serviceAccounts", [{"id": "account-1", "name": "ci"}])

    accounts = asyncio.run(client.service_accounts.list("ci"))

    assert [account.id for account in accounts] == ["account-1"]
    assert stub.operations() == ["ReadServiceAccountsByName"]
    assert stub.requests[0]["variables"] == {"name": "ci"}


def test_security_policies_list(client: NetAccessClient, stub) -> None:
    stub.respond_edges("securityPolicies", [{"id": "policy-1", "name": "Default Policy"}])

    policies = asyncio.run(client.security_policies.list())

    assert [(policy.id, policy.name) for policy in policies] == [("policy-1", "Default Policy")]


def test_security_policies_failure_names_the_collection(client: NetAccessClient, stub) -> None:
    stub.fail("error_1")

    with pytest.raises(OperationError) as exc_info:
        asyncio.run(client.security_policies.list())
    assert str(exc_info.value).startswith('failed to read security policies: Post "')
