"""Target-to-connection-parameter resolution.

ConnectionResolver maps a DatabaseTarget to the configured connection value
it needs. Document-store accessors are gated by target family; relational
accessors are not.
"""

from __future__ import annotations

from collections.abc import Callable

from helix_bench.core.config import ConnectionConfig, DocumentEndpoint
from helix_bench.core.enums import DatabaseTarget, ensure_total
from helix_bench.core.exceptions import IncompatibleTargetError

_EndpointSelector = Callable[[ConnectionConfig], DocumentEndpoint]

# None marks a relational-family target: no document endpoint.
_DOCUMENT_ENDPOINTS: dict[DatabaseTarget, _EndpointSelector | None] = {
    DatabaseTarget.MONGO_NATIVE: lambda c: c.mongo_native,
    DatabaseTarget.ORACLE_JDBC: None,
    DatabaseTarget.ORACLE_MONGO_API: lambda c: c.oracle_mongo_api,
    DatabaseTarget.ORACLE_RELATIONAL: None,
    DatabaseTarget.ORACLE_DUALITY_VIEW: None,
    DatabaseTarget.ORACLE_MONGO_API_DV: lambda c: c.oracle_mongo_api,
}

ensure_total(_DOCUMENT_ENDPOINTS, "_DOCUMENT_ENDPOINTS")


class ConnectionResolver:
    """Resolves connection parameters for benchmark targets.

    Stateless apart from the (immutable) config it is given, so one
    instance can be shared across concurrently running targets.

    Args:
        config: Connection settings for every target family.
    """

    def __init__(self, config: ConnectionConfig) -> None:
        self._config = config

    @property
    def config(self) -> ConnectionConfig:
        return self._config

    def _document_endpoint(self, target: DatabaseTarget, accessor: str) -> DocumentEndpoint:
        select = _DOCUMENT_ENDPOINTS[target]
        if select is None:
            raise IncompatibleTargetError(target, accessor)
        return select(self._config)

    def resolve_document_connection_string(self, target: DatabaseTarget) -> str:
        """Return the MongoDB-protocol URI for a document-family target.

        Raises:
            IncompatibleTargetError: If ``target`` is relational.
        """
        return self._document_endpoint(target, "document-store connection string").uri

    def resolve_document_database_name(self, target: DatabaseTarget) -> str:
        """Return the database name for a document-family target.

        Raises:
            IncompatibleTargetError: If ``target`` is relational.
        """
        return self._document_endpoint(target, "document-store database name").database

    def resolve_relational_url(self) -> str:
        return self._config.oracle_jdbc_url

    def resolve_relational_username(self) -> str:
        return self._config.oracle_jdbc_username

    def resolve_relational_password(self) -> str:
        return self._config.oracle_jdbc_password

    def resolve_relational_max_pool_size(self) -> int:
        return self._config.oracle_jdbc_max_pool_size
