"""helix_bench exception hierarchy.

Library code raises these; only the CLI catches them.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from helix_bench.core.enums import DatabaseTarget


class HelixBenchError(Exception):
    """Base exception for all helix_bench errors."""


# --- Resolution ---


class IncompatibleTargetError(HelixBenchError):
    """Raised when an accessor is requested for a target of the wrong family."""

    def __init__(self, target: DatabaseTarget, accessor: str) -> None:
        self.target = target
        self.accessor = accessor
        super().__init__(f"{target.name} does not use a {accessor}")


# --- Configuration ---


class ConfigError(HelixBenchError):
    """Raised when benchmark configuration cannot be loaded or validated."""

    def __init__(self, detail: str, source: str | None = None) -> None:
        self.detail = detail
        self.source = source
        prefix = f"Invalid benchmark config '{source}'" if source else "Invalid benchmark config"
        super().__init__(f"{prefix}: {detail}")


class UnknownTargetError(ConfigError):
    """Raised when a target name does not match any DatabaseTarget member."""

    def __init__(self, name: str, source: str | None = None) -> None:
        self.name = name
        super().__init__(f"unknown database target '{name}'", source)
