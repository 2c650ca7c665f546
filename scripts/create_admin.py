#!/usr/bin/env python3
# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Create the first admin account, or promote an existing user to admin."""

from __future__ import annotations

import argparse
import getpass
import sys

from pydantic import ValidationError

from linkhub.database import SessionLocal
from linkhub.models.enums import UserRole, UserStatus
from linkhub.schemas.user import UserCreate, UserUpdate
from linkhub.services import user_service


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("email", help="Email address of the admin")
    parser.add_argument("--name", default="Admin", help="Display name for new accounts")
    parser.add_argument(
        "--password",
        help="Password (prompted for when omitted)",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    db = SessionLocal()
    try:
        user = user_service.get_user_by_email(db, args.email)
        if user:
            try:
                data = UserUpdate(
                    id=user.id,
                    role=UserRole.ADMIN,
                    status=UserStatus.ACTIVE,
                    password=args.password,
                )
            except ValidationError as e:
                print(f"Invalid admin details:\n{e}", file=sys.stderr)
                return 1
            user_service.update_user(db, user, data)
            print(f"Promoted {user.email} to active admin")
            return 0

        password = args.password or getpass.getpass("Password: ")
        try:
            data = UserCreate(
                name=args.name,
                email=args.email,
                password=password,
                role=UserRole.ADMIN,
                status=UserStatus.ACTIVE,
            )
        except ValidationError as e:
            print(f"Invalid admin details:\n{e}", file=sys.stderr)
            return 1

        user = user_service.create_user(db, data)
        print(f"Created admin {user.email} (id {user.id})")
        return 0
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
