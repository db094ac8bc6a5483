"""Pizzeria database management CLI.

Creates or drops the pizza_type, order, customer and line_item tables for the
provider selected by PROTEAN_ENV. The memory provider needs neither.

Usage:
    PROTEAN_ENV=production python src/manage.py setup-db
    PROTEAN_ENV=production python src/manage.py drop-db
"""

import argparse
import sys


def setup_database():
    from pizzeria.domain import pizzeria
    from pizzeria.utils.db import setup_db

    print("Initializing pizzeria domain...")
    pizzeria.init()
    print("Creating pizzeria database schema...")
    setup_db(pizzeria)
    print("Done.")


def drop_database():
    from pizzeria.domain import pizzeria
    from pizzeria.utils.db import drop_db

    print("Initializing pizzeria domain...")
    pizzeria.init()
    print("Dropping pizzeria database schema...")
    drop_db(pizzeria)
    print("Done.")


def main(argv=None):
    parser = argparse.ArgumentParser(description="Pizzeria database management")
    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser("setup-db", help="Create all database tables")
    subparsers.add_parser("drop-db", help="Drop all database tables")

    args = parser.parse_args(argv)

    if args.command == "setup-db":
        setup_database()
    elif args.command == "drop-db":
        drop_database()


if __name__ == "__main__":
    sys.exit(main())
