"""
Create a user row. Run from project root:
  python -m app.scripts.create_user LOGIN PASS [PHONE]
Example:
  python -m app.scripts.create_user alice secret 5550100
"""
import argparse
import logging
import sys

from app.core.config import get_settings
from app.core.database import SessionLocal
from app.services.users import UserConflictError, UserValidationError, create_user


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a user account (login, pass, phone).")
    parser.add_argument("login", help="Login (at most 8 chars)")
    parser.add_argument("password", metavar="pass", help="Password (at most 8 chars)")
    parser.add_argument("phone", nargs="?", default="", help="Phone (at most 8 chars)")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=get_settings().LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%SZ",
    )

    db = SessionLocal()
    try:
        user = create_user(db, args.login.strip(), args.phone.strip(), args.password)
    except (UserValidationError, UserConflictError) as e:
        print(str(e), file=sys.stderr)
        return 1
    finally:
        db.close()
    print(f"Created user '{user.login}' with id {user.id}.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
