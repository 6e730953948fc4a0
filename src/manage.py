"""Travel guide database management CLI.

Usage:
    python src/manage.py setup-db                 # Create all tables
    python src/manage.py drop-db --domain atlas   # Drop the atlas tables
    python src/manage.py seed data/countries.json # Load countries and sights
"""

import argparse
import sys

from shared.db import drop_db, setup_db


def _domains(names=None):
    from atlas.domain import atlas
    from identity.domain import identity

    all_domains = {"atlas": atlas, "identity": identity}
    return {name: all_domains[name] for name in names} if names else all_domains


def setup_databases(names=None):
    for name, domain in _domains(names).items():
        domain.init()
        setup_db(domain)
        print(f"  {name} schema ready.")


def drop_databases(names=None):
    for name, domain in _domains(names).items():
        domain.init()
        drop_db(domain)
        print(f"  {name} schema dropped.")


def seed(path, force=False):
    from atlas.domain import atlas
    from atlas.seed import seed_from_file, seed_if_empty

    atlas.init()
    with atlas.domain_context():
        country_ids = seed_from_file(path) if force else seed_if_empty(path)
    print(f"  {len(country_ids)} countries added.")


def main(argv=None):
    parser = argparse.ArgumentParser(description="Travel guide database management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    for command, help_text in (("setup-db", "Create all database tables"), ("drop-db", "Drop all database tables")):
        sub = subparsers.add_parser(command, help=help_text)
        sub.add_argument(
            "--domain",
            choices=["atlas", "identity"],
            nargs="*",
            help="Specific domain(s) to act on (default: all)",
        )

    seed_parser = subparsers.add_parser("seed", help="Load countries from a JSON file")
    seed_parser.add_argument("path")
    seed_parser.add_argument("--force", action="store_true", help="Seed even when countries already exist")

    args = parser.parse_args(argv)

    if args.command == "setup-db":
        setup_databases(args.domain)
    elif args.command == "drop-db":
        drop_databases(args.domain)
    elif args.command == "seed":
        seed(args.path, force=args.force)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
