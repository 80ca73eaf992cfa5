"""Helpers shared by resource lifecycle callbacks."""

from __future__ import annotations

import logging
from typing import Any

from netaccess.client.errors import ClientError, is_empty_result
from netaccess.observability import log_lifecycle_event
from netaccess.provider.attrs import AttributeName
from netaccess.provider.diagnostics import Diagnostics, from_error
from netaccess.provider.resource_data import ResourceData

logger = logging.getLogger(__name__)


def handle_read_error(data: ResourceData, exc: ClientError, *, resource_type: str) -> Diagnostics:
    """An empty read result means the entity is gone: clear state instead of failing."""
    if is_empty_result(exc):
        log_lifecycle_event(
            logger,
            level=logging.WARNING,
            message=f"{resource_type} {data.id} no longer exists, removing from state",
            component="lifecycle",
            operation="read",
            resource_type=resource_type,
            resource_id=data.id,
        )
        data.set_id("")
        return []
    return from_error(exc)


def set_attributes(data: ResourceData, values: dict[AttributeName, Any]) -> None:
    for key, value in values.items():
        data.set(key, value)
