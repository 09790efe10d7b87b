"""helix-bench command line: load a config and print the resolved run plan."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from helix_bench.core.config import BenchmarkConfig, load_config
from helix_bench.core.connection import ConnectionResolver
from helix_bench.core.enums import DatabaseTarget
from helix_bench.core.exceptions import ConfigError
from helix_bench.core.runs import RunConfiguration, active_configurations, needs_relational_schema
from helix_bench.log_config import setup_logger

logger = logging.getLogger("helix_bench.cli")

EXIT_OK = 0
EXIT_CONFIG_ERROR = 2

_MASK = "********"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="helix-bench",
        description="Resolve benchmark configuration into per-target connection parameters.",
    )
    parser.add_argument(
        "config",
        nargs="?",
        type=Path,
        default=None,
        help=(
            "Path to a benchmark YAML config. Defaults to ./benchmark-config.yaml, "
            "then the packaged defaults."
        ),
    )
    parser.add_argument(
        "--target",
        dest="targets",
        action="append",
        metavar="NAME",
        help="Restrict the plan to this target (repeatable), e.g. --target ORACLE_JDBC.",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    parser.add_argument("--log-file", type=Path, default=None)
    return parser


def describe_run(resolver: ConnectionResolver, run: RunConfiguration) -> str:
    """One plan line: run id, target display name and its connection values."""
    target = run.target
    if target.uses_mongo_driver:
        detail = (
            f"uri={resolver.resolve_document_connection_string(target)} "
            f"database={resolver.resolve_document_database_name(target)}"
        )
    else:
        detail = (
            f"url={resolver.resolve_relational_url()} "
            f"username={resolver.resolve_relational_username()} "
            f"password={_MASK if resolver.resolve_relational_password() else ''} "
            f"maxPoolSize={resolver.resolve_relational_max_pool_size()}"
        )
    return f"{run.id:<32} {target.display_name:<30} {detail}"


def _select_targets(
    config: BenchmarkConfig, names: Sequence[str] | None
) -> tuple[DatabaseTarget, ...]:
    if not names:
        return config.active_targets
    requested = {DatabaseTarget.from_name(n) for n in names}
    return tuple(t for t in DatabaseTarget if t in requested)


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logger(level=args.log_level, log_file=args.log_file)

    try:
        config = load_config(args.config)
        targets = _select_targets(config, args.targets)
    except ConfigError as e:
        logger.error("%s", e)
        return EXIT_CONFIG_ERROR

    runs = active_configurations(targets)
    logger.info("Active targets: %s", ", ".join(t.name for t in targets))
    logger.info(
        "Configurations: %d (%d warm-up / %d measured iterations)",
        len(runs),
        config.benchmark.warm_up_iterations,
        config.benchmark.measurement_iterations,
    )
    if needs_relational_schema(targets):
        logger.info("Relational schema required by active targets")

    resolver = ConnectionResolver(config.connections)
    for run in runs:
        print(describe_run(resolver, run))
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
