"""Host-side resource state boundary."""

from __future__ import annotations

import copy
from typing import Any, Protocol

from netaccess.provider.attrs import ATTRIBUTE_NAMES, AttributeName


class ResourceData(Protocol):
    """Per-resource state owned by the host framework."""

    @property
    def id(self) -> str:
        ...

    def set_id(self, value: str) -> None:
        ...

    def get(self, key: AttributeName) -> Any:
        ...

    def set(self, key: AttributeName, value: Any) -> None:
        ...

    def has_change(self, key: AttributeName) -> bool:
        ...


class InMemoryResourceData:
    """ResourceData baseline kept in a dict.

    ``prior`` holds the previously applied state; without it every configured
    attribute counts as changed, which is what a fresh create looks like.
    """

    def __init__(
        self,
        attributes: dict[str, Any] | None = None,
        *,
        resource_id: str = "",
        prior: dict[str, Any] | None = None,
    ) -> None:
        self._id = resource_id
        self._attributes: dict[str, Any] = {}
        for key, value in (attributes or {}).items():
            self._attributes[_checked(key)] = copy.deepcopy(value)
        self._prior = copy.deepcopy(prior) if prior is not None else None

    @property
    def id(self) -> str:
        return self._id

    def set_id(self, value: str) -> None:
        self._id = value

    def get(self, key: AttributeName) -> Any:
        return self._attributes.get(_checked(key))

    def set(self, key: AttributeName, value: Any) -> None:
        self._attributes[_checked(key)] = copy.deepcopy(value)

    def has_change(self, key: AttributeName) -> bool:
        key = _checked(key)
        if self._prior is None:
            return self._attributes.get(key) is not None
        return self._prior.get(key) != self._attributes.get(key)

    def state(self) -> dict[str, Any]:
        """Snapshot as the host would persist it; empty once the id is cleared."""
        if not self._id:
            return {}
        return {"id": self._id, **copy.deepcopy(self._attributes)}


def _checked(key: str) -> str:
    if key not in ATTRIBUTE_NAMES:
        raise KeyError(f"unknown attribute {key!r}")
    return key
