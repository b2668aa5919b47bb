"""Parsed bootconfig entry."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ConfigEntry:
    key: str
    value: str  # fields joined with ","
    fields: tuple[str, ...] = ()

    def __str__(self) -> str:
        return f"{self.key}={self.value}"
