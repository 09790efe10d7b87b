"""Enumeration of benchmark run configurations (target x schema model)."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from helix_bench.core.enums import DatabaseTarget, SchemaModel, configuration_id

# Duality views are built over the relational tables.
_RELATIONAL_SCHEMA_TARGETS = frozenset(
    {
        DatabaseTarget.ORACLE_RELATIONAL,
        DatabaseTarget.ORACLE_DUALITY_VIEW,
        DatabaseTarget.ORACLE_MONGO_API_DV,
    }
)


@dataclass(frozen=True)
class RunConfiguration:
    """One (target, schema model) pair executed by the benchmark runner."""

    target: DatabaseTarget
    model: SchemaModel
    id: str = field(default="")

    def __post_init__(self) -> None:
        if not self.id:
            object.__setattr__(self, "id", configuration_id(self.target, self.model))


def all_configurations() -> list[RunConfiguration]:
    """Every target paired with every schema model, target-major."""
    return [RunConfiguration(target, model) for target in DatabaseTarget for model in SchemaModel]


def active_configurations(active_targets: Iterable[DatabaseTarget]) -> list[RunConfiguration]:
    """Run configurations for the given targets, in declaration order."""
    active = set(active_targets)
    return [c for c in all_configurations() if c.target in active]


def needs_relational_schema(active_targets: Iterable[DatabaseTarget]) -> bool:
    """Whether any active target reads from the relational tables."""
    return not _RELATIONAL_SCHEMA_TARGETS.isdisjoint(active_targets)
