"""Command line entry point for administrative tasks."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from sqlalchemy.exc import SQLAlchemyError

from halluapp.application.use_cases.roles import seed_roles_and_permissions
from halluapp.application.use_cases.users import PromotionStatus, make_admin
from halluapp.config import get_settings
from halluapp.domain.exceptions import NotFoundError
from halluapp.infrastructure.database import SessionLocal, initialize_database
from halluapp.infrastructure.log_config import configure_logging


def build_parser() -> argparse.ArgumentParser:
    """Return the parser for the ``halluapp`` command."""

    parser = argparse.ArgumentParser(
        prog="halluapp",
        description="Administrative commands for the Halluapp backend.",
    )
    subcommands = parser.add_subparsers(dest="command", required=True)

    make_admin_parser = subcommands.add_parser(
        "user:make-admin",
        help="Make a user an admin by their email",
    )
    make_admin_parser.add_argument("email", help="Email of an existing user")

    subcommands.add_parser(
        "roles:seed",
        help="Create the default roles and permissions if they are missing",
    )
    return parser


def _make_admin(email: str) -> int:
    session = SessionLocal()
    try:
        outcome = make_admin(session, email)
    except NotFoundError as exc:
        print(str(exc), file=sys.stderr)
        return 1
    except SQLAlchemyError as exc:
        session.rollback()
        print(f"Database error while updating {email}: {exc}", file=sys.stderr)
        return 1
    finally:
        session.close()

    if outcome is PromotionStatus.ALREADY_ADMIN:
        print(f"User {email} is already an admin.")
    else:
        print(f"Successfully made {email} an admin.")
    return 0


def _seed_roles() -> int:
    session = SessionLocal()
    try:
        result = seed_roles_and_permissions(session)
    except SQLAlchemyError as exc:
        session.rollback()
        print(f"Database error while seeding roles: {exc}", file=sys.stderr)
        return 1
    finally:
        session.close()

    print(
        "Roles and permissions seeded "
        f"({result.roles_created} roles, {result.permissions_created} permissions, "
        f"{result.grants_created} grants created)."
    )
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the requested command and return its exit code."""

    args = build_parser().parse_args(argv)
    configure_logging(get_settings().log_level)
    initialize_database()

    if args.command == "user:make-admin":
        return _make_admin(args.email)
    return _seed_roles()


def run() -> None:
    raise SystemExit(main())


if __name__ == "__main__":
    run()
