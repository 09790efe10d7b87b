"""Benchmark target and schema model enumerations."""

from __future__ import annotations

from enum import Enum

from helix_bench.core.exceptions import UnknownTargetError


class TargetFamily(Enum):
    """Class of connection parameters a target needs."""

    DOCUMENT = "document"
    RELATIONAL = "relational"


class DatabaseTarget(Enum):
    """Database backend / access-mode combinations under benchmark."""

    MONGO_NATIVE = "mongo_native"
    ORACLE_JDBC = "oracle_jdbc"
    ORACLE_MONGO_API = "oracle_mongo_api"
    ORACLE_RELATIONAL = "oracle_relational"
    ORACLE_DUALITY_VIEW = "oracle_duality_view"
    ORACLE_MONGO_API_DV = "oracle_mongo_api_dv"

    @classmethod
    def from_name(cls, name: str) -> DatabaseTarget:
        """Parse a member name such as ``"ORACLE_JDBC"`` (case-insensitive)."""
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise UnknownTargetError(name) from None

    @property
    def family(self) -> TargetFamily:
        return _FAMILIES[self]

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    @property
    def uses_mongo_driver(self) -> bool:
        return self.family is TargetFamily.DOCUMENT

    @property
    def uses_jdbc(self) -> bool:
        return self.family is TargetFamily.RELATIONAL


_FAMILIES: dict[DatabaseTarget, TargetFamily] = {
    DatabaseTarget.MONGO_NATIVE: TargetFamily.DOCUMENT,
    DatabaseTarget.ORACLE_JDBC: TargetFamily.RELATIONAL,
    DatabaseTarget.ORACLE_MONGO_API: TargetFamily.DOCUMENT,
    DatabaseTarget.ORACLE_RELATIONAL: TargetFamily.RELATIONAL,
    DatabaseTarget.ORACLE_DUALITY_VIEW: TargetFamily.RELATIONAL,
    DatabaseTarget.ORACLE_MONGO_API_DV: TargetFamily.DOCUMENT,
}

_DISPLAY_NAMES: dict[DatabaseTarget, str] = {
    DatabaseTarget.MONGO_NATIVE: "Native MongoDB 8.2",
    DatabaseTarget.ORACLE_JDBC: "Oracle 26ai JDBC",
    DatabaseTarget.ORACLE_MONGO_API: "Oracle 26ai MongoDB API",
    DatabaseTarget.ORACLE_RELATIONAL: "Oracle 26ai Relational",
    DatabaseTarget.ORACLE_DUALITY_VIEW: "Oracle 26ai Duality View",
    DatabaseTarget.ORACLE_MONGO_API_DV: "Oracle 26ai MongoDB API (DV)",
}


def ensure_total(table: dict[DatabaseTarget, object], table_name: str) -> None:
    """Fail fast when a per-target table does not cover every member."""
    missing = [t.name for t in DatabaseTarget if t not in table]
    if missing:
        raise RuntimeError(f"{table_name} has no entry for {missing}")


ensure_total(_FAMILIES, "_FAMILIES")
ensure_total(_DISPLAY_NAMES, "_DISPLAY_NAMES")


class SchemaModel(Enum):
    """Document schema layouts loaded into each target."""

    EMBEDDED = "embedded"

    @property
    def display_name(self) -> str:
        return _SCHEMA_DISPLAY_NAMES[self]

    @property
    def collection_names(self) -> tuple[str, ...]:
        return _SCHEMA_COLLECTIONS[self]

    @property
    def collection_count(self) -> int:
        return len(self.collection_names)


_SCHEMA_DISPLAY_NAMES: dict[SchemaModel, str] = {
    SchemaModel.EMBEDDED: "Embedded (4 collections)",
}

_SCHEMA_COLLECTIONS: dict[SchemaModel, tuple[str, ...]] = {
    SchemaModel.EMBEDDED: ("account", "advisor", "bookRoleGroup", "bookRoleInvestor"),
}


def configuration_id(target: DatabaseTarget, model: SchemaModel) -> str:
    """Run identifier, e.g. ``"MONGO_NATIVE_EMBEDDED"``."""
    return f"{target.name}_{model.name}"
