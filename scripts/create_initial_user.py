"""Utility script to create an initial user in the database."""

from __future__ import annotations

import argparse
from getpass import getpass

from sqlalchemy.exc import SQLAlchemyError

from bravo_api.application.use_cases.users.create_user import ALLOWED_ROLES, create_user
from bravo_api.infrastructure.database import SessionLocal, initialize_database


def parse_args() -> argparse.Namespace:
    """Parse command line arguments for user creation."""

    parser = argparse.ArgumentParser(
        description="Create an initial user for the Bravo API application.",
    )
    parser.add_argument(
        "--name",
        default="Sales Manager",
        help="Full name of the user (default: Sales Manager)",
    )
    parser.add_argument(
        "--username",
        default="manager",
        help="Login name shown in activity reports (default: manager)",
    )
    parser.add_argument(
        "--email",
        default="manager@example.com",
        help="Email address of the user (default: manager@example.com)",
    )
    parser.add_argument(
        "--role",
        default="manager",
        choices=sorted(ALLOWED_ROLES),
        help="Role assigned to the user (default: manager)",
    )
    parser.add_argument(
        "--password",
        default=None,
        help="Password of the user. Prompted interactively when omitted.",
    )
    return parser.parse_args()


def main() -> None:
    """Create a user using the provided command line arguments."""

    args = parse_args()

    password = args.password or getpass("Password for the new user: ")
    if not password:
        raise SystemExit("No valid password was provided.")

    initialize_database()

    session = SessionLocal()
    try:
        user = create_user(
            session,
            name=args.name,
            username=args.username,
            email=args.email,
            password=password,
            role_alias=args.role,
        )
    except ValueError as exc:
        session.rollback()
        raise SystemExit(f"Could not create the user: {exc}") from exc
    except SQLAlchemyError as exc:
        session.rollback()
        raise SystemExit(f"Could not store the user in the database: {exc}") from exc
    else:
        print(
            "User created:\n"
            f"  ID: {user.id}\n"
            f"  Name: {user.name}\n"
            f"  Username: {user.username}\n"
            f"  Role: {user.role.alias}"
        )
    finally:
        session.close()


if __name__ == "__main__":
    main()
