"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from helix_bench.core.config import ConnectionConfig
from helix_bench.core.connection import ConnectionResolver

NATIVE_URI = "mongodb://localhost:27017/?replicaSet=rs0&w=1&journal=true"
ORACLE_MONGO_URI = "mongodb://localhost:27018"
JDBC_URL = "jdbc:oracle:thin:@localhost:1521/helix"

TEST_CONFIG_YAML = f"""
benchmark:
  warmUpIterations: 10
  measurementIterations: 50
  batchSize: 500
  jdbcBatchSize: 250

dataGeneration:
  advisorCount: 100
  accountCount: 1000
  bookRoleGroupCount: 300
  bookRoleInvestorCount: 1500

connections:
  mongoNative:
    uri: "{NATIVE_URI}"
    database: helix
  oracleMongoApi:
    uri: "{ORACLE_MONGO_URI}"
    database: helix
  oracleJdbc:
    url: "{JDBC_URL}"
    username: ADMIN
    password: "Welcome_12345!"
    maxPoolSize: 5
"""


@pytest.fixture
def connection_config() -> ConnectionConfig:
    """Connection settings matching the test config file."""
    return ConnectionConfig.model_validate(
        {
            "mongoNative": {"uri": NATIVE_URI, "database": "helix"},
            "oracleMongoApi": {"uri": ORACLE_MONGO_URI, "database": "helix"},
            "oracleJdbc": {
                "url": JDBC_URL,
                "username": "ADMIN",
                "password": "Welcome_12345!",
                "maxPoolSize": 5,
            },
        }
    )


@pytest.fixture
def resolver(connection_config: ConnectionConfig) -> ConnectionResolver:
    return ConnectionResolver(connection_config)


@pytest.fixture
def write_config(tmp_path: Path):
    """Helper to write a YAML config file into the temp directory.

    Usage:
        write_config("activeTargets: [ORACLE_JDBC]")
    """

    def _write(content: str = TEST_CONFIG_YAML, name: str = "config.yaml") -> Path:
        file_path = tmp_path / name
        file_path.write_text(content, encoding="utf-8")
        return file_path

    return _write
