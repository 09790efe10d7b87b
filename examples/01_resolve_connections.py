"""
Example 01: Resolving Connection Parameters

This example loads the packaged default config and resolves the connection
values for every benchmark target.
"""

from helix_bench import ConnectionResolver, DatabaseTarget, IncompatibleTargetError, load_config


def main():
    config = load_config()
    resolver = ConnectionResolver(config.connections)

    print("=== Document targets ===")
    for target in DatabaseTarget:
        if not target.uses_mongo_driver:
            continue
        uri = resolver.resolve_document_connection_string(target)
        database = resolver.resolve_document_database_name(target)
        print(f"{target.display_name}: {uri} (database: {database})")

    print("\n=== Relational settings ===")
    print(f"URL: {resolver.resolve_relational_url()}")
    print(f"Username: {resolver.resolve_relational_username()}")
    print(f"Max pool size: {resolver.resolve_relational_max_pool_size()}")

    # Asking a relational target for a MongoDB URI is a programming error
    try:
        resolver.resolve_document_connection_string(DatabaseTarget.ORACLE_RELATIONAL)
    except IncompatibleTargetError as e:
        print(f"\nRejected: {e}")


if __name__ == "__main__":
    main()
