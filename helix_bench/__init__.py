"""helix_bench - connection resolution for the Helix database benchmark."""

from __future__ import annotations

from helix_bench.core.config import (
    BenchmarkConfig,
    BenchmarkSettings,
    ConnectionConfig,
    DataGenerationSettings,
    DocumentEndpoint,
    JdbcEndpoint,
    OracleMongoApiEndpoint,
    load_config,
)
from helix_bench.core.connection import ConnectionResolver
from helix_bench.core.enums import DatabaseTarget, SchemaModel, TargetFamily
from helix_bench.core.exceptions import (
    ConfigError,
    HelixBenchError,
    IncompatibleTargetError,
    UnknownTargetError,
)
from helix_bench.core.runs import (
    RunConfiguration,
    active_configurations,
    all_configurations,
    needs_relational_schema,
)

__all__ = [
    # Config
    "BenchmarkConfig",
    "BenchmarkSettings",
    "DataGenerationSettings",
    "ConnectionConfig",
    "DocumentEndpoint",
    "OracleMongoApiEndpoint",
    "JdbcEndpoint",
    "load_config",
    # Resolver
    "ConnectionResolver",
    # Enums
    "DatabaseTarget",
    "TargetFamily",
    "SchemaModel",
    # Runs
    "RunConfiguration",
    "all_configurations",
    "active_configurations",
    "needs_relational_schema",
    # Exceptions
    "HelixBenchError",
    "IncompatibleTargetError",
    "ConfigError",
    "UnknownTargetError",
]
