"""Benchmark configuration store.

BenchmarkConfig and ConnectionConfig are frozen Pydantic models loaded once
from YAML (camelCase keys) and read-only for the lifetime of a run.
"""

from __future__ import annotations

import logging
from importlib import resources
from pathlib import Path
from typing import IO, Any

import yaml
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    SecretStr,
    ValidationError,
    field_validator,
    model_validator,
)
from pydantic.alias_generators import to_camel

from helix_bench.core.enums import DatabaseTarget, SchemaModel, configuration_id
from helix_bench.core.exceptions import ConfigError, UnknownTargetError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_NAME = "benchmark-config.yaml"


class _ConfigModel(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        coerce_numbers_to_str=True,
        extra="ignore",
    )

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        # An empty YAML section ("connections:") parses as None
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data


# --- Connections ---


class DocumentEndpoint(_ConfigModel):
    """MongoDB-protocol endpoint: URI plus database name."""

    uri: str = ""
    database: str = ""


class OracleMongoApiEndpoint(DocumentEndpoint):
    database: str = "helix"


class JdbcEndpoint(_ConfigModel):
    """Relational endpoint: JDBC URL, credentials and pool size."""

    url: str = ""
    username: str = ""
    password: SecretStr = SecretStr("")
    max_pool_size: int = Field(10, ge=1)

    @field_validator("password", mode="before")
    @classmethod
    def _password_as_text(cls, value: Any) -> Any:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value


class ConnectionConfig(_ConfigModel):
    """Connection settings for every target family."""

    mongo_native: DocumentEndpoint = DocumentEndpoint()
    oracle_mongo_api: OracleMongoApiEndpoint = OracleMongoApiEndpoint()
    oracle_jdbc: JdbcEndpoint = JdbcEndpoint()

    @property
    def mongo_native_uri(self) -> str:
        return self.mongo_native.uri

    @property
    def mongo_native_database(self) -> str:
        return self.mongo_native.database

    @property
    def oracle_mongo_api_uri(self) -> str:
        return self.oracle_mongo_api.uri

    @property
    def oracle_mongo_api_database(self) -> str:
        return self.oracle_mongo_api.database

    @property
    def oracle_jdbc_url(self) -> str:
        return self.oracle_jdbc.url

    @property
    def oracle_jdbc_username(self) -> str:
        return self.oracle_jdbc.username

    @property
    def oracle_jdbc_password(self) -> str:
        return self.oracle_jdbc.password.get_secret_value()

    @property
    def oracle_jdbc_max_pool_size(self) -> int:
        return self.oracle_jdbc.max_pool_size


# --- Benchmark run settings ---


class BenchmarkSettings(_ConfigModel):
    warm_up_iterations: int = Field(50, ge=0)
    measurement_iterations: int = Field(200, ge=1)
    batch_size: int = Field(1000, ge=1)
    jdbc_batch_size: int = Field(500, ge=1)


class DataGenerationSettings(_ConfigModel):
    advisor_count: int = Field(1000, ge=0)
    account_count: int = Field(100_000, ge=0)
    book_role_group_count: int = Field(30_000, ge=0)
    book_role_investor_count: int = Field(150_000, ge=0)
    advisory_context_pool_size: int = Field(5000, ge=1)
    party_role_id_pool_size: int = Field(10_000, ge=1)
    fin_inst_id_pool_size: int = Field(50, ge=1)
    target_size_gb: float = Field(1.5, gt=0)


class BenchmarkConfig(_ConfigModel):
    """Top-level benchmark configuration.

    Build with :meth:`from_yaml`, :meth:`from_file` or :func:`load_config`;
    pydantic and YAML failures surface as :class:`ConfigError`.
    """

    benchmark: BenchmarkSettings = BenchmarkSettings()
    data_generation: DataGenerationSettings = DataGenerationSettings()
    connections: ConnectionConfig = ConnectionConfig()
    active_targets: tuple[DatabaseTarget, ...] = tuple(DatabaseTarget)

    @field_validator("active_targets", mode="before")
    @classmethod
    def _parse_targets(cls, value: Any) -> tuple[DatabaseTarget, ...]:
        if isinstance(value, (str, DatabaseTarget)):
            value = [value]
        if not isinstance(value, (list, tuple, set)):
            raise ValueError("activeTargets must be a list of target names")
        requested = {
            v if isinstance(v, DatabaseTarget) else DatabaseTarget.from_name(str(v))
            for v in value
        }
        if not requested:
            return tuple(DatabaseTarget)
        return tuple(t for t in DatabaseTarget if t in requested)

    @classmethod
    def from_yaml(cls, stream: str | IO[str], source: str | None = None) -> BenchmarkConfig:
        """Parse and validate a YAML document."""
        try:
            data = yaml.safe_load(stream)
        except yaml.YAMLError as e:
            raise ConfigError(f"malformed YAML: {e}", source) from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError(
                f"top-level document must be a mapping, got {type(data).__name__}", source
            )

        try:
            config = cls.model_validate(data)
        except ValidationError as e:
            raise ConfigError(str(e), source) from e
        except UnknownTargetError as e:
            if e.source is not None or source is None:
                raise
            raise UnknownTargetError(e.name, source) from e

        logger.debug("Active targets: %s", [t.name for t in config.active_targets])
        return config

    @classmethod
    def from_file(cls, path: Path | str) -> BenchmarkConfig:
        """Load a YAML config file."""
        path = Path(path)
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigError(f"cannot read file: {e}", str(path)) from e
        return cls.from_yaml(text, source=str(path))

    @staticmethod
    def configuration_id(target: DatabaseTarget, model: SchemaModel) -> str:
        return configuration_id(target, model)


def load_config(path: Path | str | None = None) -> BenchmarkConfig:
    """Load benchmark config from an explicit path or the usual fallbacks.

    Order: ``path`` if given, ``./benchmark-config.yaml`` if present, then
    the defaults packaged with helix_bench.
    """
    if path is not None:
        logger.info("Loading benchmark config from %s", path)
        return BenchmarkConfig.from_file(path)

    local = Path.cwd() / DEFAULT_CONFIG_NAME
    if local.is_file():
        logger.info("Loading benchmark config from %s", local)
        return BenchmarkConfig.from_file(local)

    logger.info("Loading packaged default benchmark config")
    text = resources.files("helix_bench.resources").joinpath(DEFAULT_CONFIG_NAME).read_text(
        encoding="utf-8"
    )
    return BenchmarkConfig.from_yaml(text, source=f"helix_bench.resources/{DEFAULT_CONFIG_NAME}")
