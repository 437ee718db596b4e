"""CLI adapter creating the kakeibo tables.

This adapter is meant for local operations: it instantiates the concrete
database adapter, checks the connection and creates missing tables.
"""

from kakeibo.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from kakeibo.infrastructure.logging.logger import get_app_logger
from kakeibo.infrastructure.schema import ensure_schema


def main() -> None:
    """Create the schema on the configured database."""
    logger = get_app_logger()
    adapter = SqlAlchemyDatabaseEngineAdapter()

    engine = adapter.get_engine()
    logger.info(f"Kakeibo DB: {engine.url}")
    with engine.connect() as conn:
        conn.exec_driver_sql("SELECT 1")

    count = ensure_schema(adapter)
    print(f"Schema ready ({count} tables checked).")


if __name__ == "__main__":  # pragma: no cover
    main()
