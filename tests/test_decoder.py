"""Response body decoding."""

from __future__ import annotations

import json

import pytest

from netaccess.client.decoder import decode_body, decode_edges, decode_entity, decode_envelope, extract_field
from netaccess.client.errors import DecodeError, OperationError
from netaccess.schemas.graphql import Envelope, StatusEnvelope
from netaccess.schemas.network import Connector, Group


def _raw(body: object) -> bytes:
    return json.dumps(body).encode()


def test_decode_body_rejects_invalid_json() -> None:
    with pytest.raises(DecodeError, match="invalid JSON response"):
        decode_body(b"{not json")


def test_decode_body_rejects_non_object_payload() -> None:
    with pytest.raises(DecodeError) as exc_info:
        decode_body(b"[1, 2]")
    assert str(exc_info.value) == "invalid JSON response: expected an object, got list"


def test_extract_field_returns_none_when_data_is_missing_or_null() -> None:
    assert extract_field({}, "connector") is None
    assert extract_field({"data": None}, "connector") is None
    assert extract_field({"data": {"connector": None}}, "connector") is None
    assert extract_field({"data": {"other": {}}}, "connector") is None


def test_extract_field_raises_on_graphql_errors() -> None:
    body = {"data": None, "errors": [{"message": "field not found"}, "bare failure"]}

    with pytest.raises(OperationError) as exc_info:
        extract_field(body, "connector")
    assert str(exc_info.value) == "field not found; bare failure"


def test_empty_errors_array_is_ignored() -> None:
    assert extract_field({"errors": [], "data": {"group": {"id": "g"}}}, "group") == {"id": "g"}


def test_decode_envelope_defaults_missing_ok_to_false() -> None:
    envelope = decode_envelope(_raw({"data": {"groupDelete": {}}}), "groupDelete", StatusEnvelope)

    assert envelope is not None
    assert envelope.ok is False
    assert envelope.error is None


def test_decode_envelope_with_mistyped_entity_raises_decode_error() -> None:
    raw = _raw({"data": {"groupCreate": {"ok": True, "entity": {"id": "g"}}}})

    with pytest.raises(DecodeError, match="unexpected groupCreate payload: entity.name"):
        decode_envelope(raw, "groupCreate", Envelope[Group])


def test_decode_entity_with_missing_required_field_raises_decode_error() -> None:
    with pytest.raises(DecodeError, match="unexpected connector payload"):
        decode_entity(_raw({"data": {"connector": {"name": "no-id"}}}), "connector", Connector)


def test_decode_edges_skips_malformed_pages() -> None:
    raw = _raw({"data": {"connectors": {"edges": [{"node": {"name": "no-id"}}]}}})

    assert decode_edges(raw, "connectors", Connector) == []


def test_decode_edges_preserves_order() -> None:
    nodes = [{"id": f"connector{index}"} for index in range(5)]
    raw = _raw({"data": {"connectors": {"edges": [{"node": node} for node in nodes]}}})

    assert [connector.id for connector in decode_edges(raw, "connectors", Connector)] == [
        "connector0",
        "connector1",
        "connector2",
        "connector3",
        "connector4",
    ]


def test_errors_alongside_usable_field_are_not_fatal() -> None:
    body = {
        "errors": [{"message": "partial"}],
        "data": {"connectors": {"edges": [{"node": {"id": "c1", "name": "n"}}]}},
    }

    assert [connector.id for connector in decode_edges(_raw(body), "connectors", Connector)] == ["c1"]


def test_errors_with_null_field_raise() -> None:
    with pytest.raises(OperationError, match="^not authorized$"):
        extract_field({"errors": [{"message": "not authorized"}], "data": {"connector": None}}, "connector")


def test_non_list_errors_are_reported_whole() -> None:
    with pytest.raises(OperationError) as exc_info:
        extract_field({"errors": "upstream unavailable"}, "connector")
    assert str(exc_info.value) == "upstream unavailable"
