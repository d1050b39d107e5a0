#!/usr/bin/env python3
"""Create the database tables with Logfire error tracking."""

import asyncio
import sys

import logfire

from bookclub.config import Settings
from bookclub.persistence.database import create_engine
from bookclub.persistence.tables import metadata
from bookclub.util.observability import configure_logfire


async def create_schema(settings: Settings) -> None:
    """Create every table and index that does not exist yet."""
    engine = create_engine(settings)
    try:
        async with engine.begin() as conn:
            await conn.run_sync(metadata.create_all)
    finally:
        await engine.dispose()


def main() -> int:
    """Create the schema and log any errors to Logfire."""
    settings = Settings()

    configure_logfire(settings)

    try:
        logfire.info("Creating database schema", tables=sorted(metadata.tables))
        asyncio.run(create_schema(settings))
        logfire.info("Database schema ready")
        return 0

    except Exception as e:
        logfire.error(
            "Schema creation failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # Re-raise so the container fails and doesn't start without tables
        raise


if __name__ == "__main__":
    sys.exit(main())
