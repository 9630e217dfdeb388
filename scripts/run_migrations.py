#!/usr/bin/env python3
"""Apply Alembic migrations for the comments and payment_transactions tables.

Usage:
    python scripts/run_migrations.py            # upgrade to head
    python scripts/run_migrations.py <revision> # upgrade to a revision
    python scripts/run_migrations.py -1         # downgrade one step ("base" for all)
"""

import sys
from pathlib import Path

import logfire
from alembic import command
from alembic.config import Config

from inkwell.config import Settings
from inkwell.util.observability import configure_logfire

ALEMBIC_INI = Path(__file__).resolve().parent.parent / "alembic.ini"


def main(argv: list[str]) -> int:
    """Migrate the configured database to the requested revision."""
    settings = Settings()
    configure_logfire(settings)

    target = argv[1] if len(argv) > 1 else "head"
    # env.py takes the URL from Settings; the ini only locates the scripts
    alembic_cfg = Config(str(ALEMBIC_INI))

    with logfire.span(
        "migrations.apply", target=target, environment=settings.environment
    ):
        try:
            if target == "base" or target.startswith("-"):
                command.downgrade(alembic_cfg, target)
            else:
                command.upgrade(alembic_cfg, target)
        except Exception:
            # Fail the deploy step so the API never starts on a stale schema
            logfire.exception("Migration failed", target=target)
            raise

    logfire.info("Schema at target revision", target=target)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
