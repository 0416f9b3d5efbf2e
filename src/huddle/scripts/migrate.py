# src/huddle/scripts/migrate.py
"""Apply or roll back database migrations for the configured database."""
from __future__ import annotations

import argparse
import os

from alembic import command
from alembic.config import Config

from huddle.core.settings import settings

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "..", ".."))


def build_config(url: str | None = None) -> Config:
    """Return an Alembic config pointing at the project's migrations folder."""
    cfg = Config(os.path.join(PROJECT_ROOT, "alembic.ini"))
    cfg.set_main_option("script_location", os.path.join(PROJECT_ROOT, "migrations"))
    cfg.set_main_option("sqlalchemy.url", url or settings.effective_database_url)
    return cfg


def main() -> None:
    parser = argparse.ArgumentParser(description="Migrate the configured database")
    parser.add_argument(
        "--revision",
        default="head",
        help="Target revision (default: head)",
    )
    parser.add_argument(
        "--downgrade",
        action="store_true",
        help="Downgrade to the target revision instead of upgrading.",
    )
    parser.add_argument(
        "--url",
        default=None,
        help="Override database URL (defaults to effective settings URL)",
    )
    args = parser.parse_args()

    cfg = build_config(args.url)
    if args.downgrade:
        command.downgrade(cfg, args.revision)
    else:
        command.upgrade(cfg, args.revision)


if __name__ == "__main__":
    main()
