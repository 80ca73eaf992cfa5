"""Contract tests for connector operations against a stubbed GraphQL endpoint."""

from __future__ import annotations

import asyncio

import pytest

from netaccess.client.client import NetAccessClient
from netaccess.client.errors import (
    DecodeError,
    NotFoundError,
    OperationError,
    TransportError,
    ValidationError,
)
from netaccess.schemas.network import Connector

GRAPHQL_URL = "https://test.netaccess.io/api/graphql/"


def test_create_connector_returns_server_assigned_identity(client: NetAccessClient, stub) -> None:
    stub.respond_envelope("connectorCreate", {"id": "test-id", "name": "test-name"})

    async def _run() -> None:
        connector = await client.connectors.create("test")
        assert connector == Connector(id="test-id", name="test-name")

    asyncio.run(_run())

    assert stub.operations() == ["CreateConnector"]
    assert stub.requests[0]["variables"] == {"remoteNetworkId": "test"}
    assert stub.headers[0]["X-API-KEY"] == "test-token"


def test_update_connector_returns_nothing_on_success(client: NetAccessClient, stub) -> None:
    stub.respond_envelope("connectorUpdate")

    async def _run() -> None:
        assert await client.connectors.update("test-id", "new-name") is None

    asyncio.run(_run())
    assert stub.requests[0]["variables"] == {"id": "test-id", "name": "new-name"}


def test_delete_connector_succeeds_on_ok_envelope(client: NetAccessClient, stub) -> None:
    stub.respond_envelope("connectorDelete")

    asyncio.run(client.connectors.delete("test"))
    assert stub.operations() == ["DeleteConnector"]


def test_create_connector_maps_not_ok_envelope_to_operation_error(client: NetAccessClient, stub) -> None:
    stub.respond_envelope("connectorCreate", ok=False, error="error_1")

    async def _run() -> None:
        try:
            await client.connectors.create("test")
            raise AssertionError("Expected not-ok envelope to raise OperationError.")
        except OperationError as exc:
            assert str(exc) == "failed to create connector: error_1"
            assert exc.code == "OPERATION_ERROR"

    asyncio.run(_run())


def test_update_connector_error_names_the_connector(client: NetAccessClient, stub) -> None:
    stub.respond_envelope("connectorUpdate", ok=False, error="error_1")

    with pytest.raises(OperationError) as exc_info:
        asyncio.run(client.connectors.update("test-id", "new-name"))
    assert str(exc_info.value) == "failed to update connector with id test-id: error_1"


def test_delete_connector_error_names_the_connector(client: NetAccessClient, stub) -> None:
    stub.respond_envelope("connectorDelete", ok=False, error="error_1")

    with pytest.raises(OperationError) as exc_info:
        asyncio.run(client.connectors.delete("test"))
    assert str(exc_info.value) == "failed to delete connector with id test: error_1"


def test_update_connector_with_empty_id_sends_no_request(client: NetAccessClient, stub) -> None:
    with pytest.raises(ValidationError) as exc_info:
        asyncio.run(client.connectors.update("", "new-name"))

    assert str(exc_info.value) == "failed to update connector: connector id is empty"
    assert stub.calls == 0


def test_create_connector_with_empty_network_sends_no_request(client: NetAccessClient, stub) -> None:
    with pytest.raises(ValidationError) as exc_info:
        asyncio.run(client.connectors.create(""))

    assert str(exc_info.value) == "failed to create connector: network id is empty"
    assert stub.calls == 0


def test_read_connector_with_empty_id_sends_no_request(client: NetAccessClient, stub) -> None:
    with pytest.raises(ValidationError) as exc_info:
        asyncio.run(client.connectors.read(""))

    assert str(exc_info.value) == "failed to read connector: id is empty"
    assert stub.calls == 0


def test_delete_connector_with_empty_id_sends_no_request(client: NetAccessClient, stub) -> None:
    with pytest.raises(ValidationError) as exc_info:
        asyncio.run(client.connectors.delete(""))

    assert str(exc_info.value) == "failed to delete connector: id is empty"
    assert stub.calls == 0


def test_read_connector_maps_null_field_to_not_found(client: NetAccessClient, stub) -> None:
    stub.respond_entity("connector", None)

    with pytest.raises(NotFoundError) as exc_info:
        asyncio.run(client.connectors.read("test"))
    assert str(exc_info.value) == "failed to read connector with id test: query result is empty"


def test_read_connector_decodes_nested_fields(client: NetAccessClient, stub) -> None:
    stub.respond_entity(
        "connector",
        {
            "id": "test",
            "name": "quiet-owl",
            "remoteNetwork": {"id": "network-1"},
            "hasStatusNotificationsEnabled": False,
        },
    )

    connector = asyncio.run(client.connectors.read("test"))

    assert connector.remote_network_id == "network-1"
    assert connector.status_updates_enabled is False


def test_create_connector_without_entity_is_not_found(client: NetAccessClient, stub) -> None:
    stub.respond_envelope("connectorCreate")

    with pytest.raises(NotFoundError) as exc_info:
        asyncio.run(client.connectors.create("test"))
    assert str(exc_info.value) == "failed to create connector: query result is empty"


def test_list_connectors_with_empty_payload_returns_empty_list(client: NetAccessClient, stub) -> None:
    stub.respond({})

    assert asyncio.run(client.connectors.list()) == []


def test_list_connectors_preserves_server_order(client: NetAccessClient, stub) -> None:
    stub.respond_edges(
        "connectors",
        [
            {"id": "connector1", "name": "tf-acc-connector1"},
            {"id": "connector2", "name": "tf-acc-connector2"},
            {"id": "connector3", "name": "tf-acc-connector3"},
        ],
    )

    connectors = asyncio.run(client.connectors.list())

    assert [connector.id for connector in connectors] == ["connector1", "connector2", "connector3"]
    assert connectors[2].name == "tf-acc-connector3"
    assert stub.operations() == ["ReadConnectors"]


@pytest.mark.parametrize(
    ("call", "expected_prefix"),
    [
        (lambda client: client.connectors.create("test"), "failed to create connector"),
        (lambda client: client.connectors.read("test"), "failed to read connector with id test"),
        (lambda client: client.connectors.update("test", "name"), "failed to update connector with id test"),
        (lambda client: client.connectors.delete("test"), "failed to delete connector with id test"),
        (lambda client: client.connectors.list(), "failed to read connectors"),
    ],
)
def test_request_failures_surface_as_transport_errors(
    client: NetAccessClient, stub, call, expected_prefix: str
) -> None:
    stub.fail("error_1")

    with pytest.raises(TransportError) as exc_info:
        asyncio.run(call(client))

    assert str(exc_info.value) == f'{expected_prefix}: Post "{GRAPHQL_URL}": error_1'
    assert isinstance(exc_info.value, OperationError)
    assert exc_info.value.code == "TRANSPORT_ERROR"


def test_read_connector_with_invalid_json_raises_decode_error(client: NetAccessClient, stub) -> None:
    stub.respond("<html>not-json</html>")

    with pytest.raises(DecodeError) as exc_info:
        asyncio.run(client.connectors.read("test"))
    assert str(exc_info.value).startswith("failed to read connector with id test: invalid JSON response")


def test_list_connectors_keeps_partial_data_reported_with_errors(client: NetAccessClient, stub) -> None:
    stub.respond(
        {
            "errors": [{"message": "partial"}],
            "data": {"connectors": {"edges": [{"node": {"id": "c1", "name": "n"}}]}},
        }
    )

    connectors = asyncio.run(client.connectors.list())

    assert [connector.id for connector in connectors] == ["c1"]
