"""GraphQL response envelopes."""

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field

EntityT = TypeVar("EntityT")


class Envelope(BaseModel, Generic[EntityT]):
    """Mutation result: ``{ok, error, entity}``."""

    ok: bool = Field(default=False, description="Whether the mutation succeeded")
    error: str | None = Field(default=None, description="Server-provided failure reason")
    entity: EntityT | None = Field(default=None, description="Entity returned by the mutation")


class Edge(BaseModel, Generic[EntityT]):
    node: EntityT


class Connection(BaseModel, Generic[EntityT]):
    """Paginated collection: ``{edges: [{node: T}]}``."""

    edges: list[Edge[EntityT]] = Field(default_factory=list)

    def nodes(self) -> list[EntityT]:
        return [edge.node for edge in self.edges]


StatusEnvelope = Envelope[Any]


def edge_ids(value: Any) -> list[str] | Any:
    """Flatten ``{edges: [{node: {id}}]}`` into ids; other shapes pass through."""
    if not isinstance(value, dict):
        return value
    edges = value.get("edges") or []
    return [edge["node"]["id"] for edge in edges if edge and edge.get("node")]
