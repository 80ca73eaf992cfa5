"""Diagnostics returned to the host framework."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

Severity = Literal["error", "warning"]


@dataclass(frozen=True)
class Diagnostic:
    severity: Severity
    summary: str
    detail: str = ""


Diagnostics = list[Diagnostic]


def from_error(exc: BaseException) -> Diagnostics:
    return [Diagnostic(severity="error", summary=str(exc))]


def has_error(diagnostics: Diagnostics) -> bool:
    return any(item.severity == "error" for item in diagnostics)
