"""
Create a user without going through the HTTP API. Run from project root:
  python -m app.scripts.create_user USERNAME EMAIL PASSWORD
Example:
  python -m app.scripts.create_user alice alice@example.com your-secure-password
"""
import argparse
import sys

from app.core.config import get_settings
from app.core.database import SessionLocal
from app.core.errors import AppError
from app.core.logging import configure_logging
from app.repositories.users import UserRepository
from app.services import identity


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a Marquee user.")
    parser.add_argument("username", help="Username (3-255 chars)")
    parser.add_argument("email", help="Email address")
    parser.add_argument("password", help="Password (6-128 chars)")
    args = parser.parse_args(argv)

    settings = get_settings()
    configure_logging(settings.LOG_LEVEL)
    db = SessionLocal()
    try:
        result = identity.register(
            UserRepository(db),
            settings,
            username=args.username,
            email=args.email,
            password=args.password,
            confirm_password=args.password,
        )
    except AppError as e:
        details = "; ".join(err["message"] for err in e.errors)
        print(f"{e.message}: {details}" if details else e.message, file=sys.stderr)
        return 1
    finally:
        db.close()
    print(f"Created user '{result.user.username}' with id {result.user.id}.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
