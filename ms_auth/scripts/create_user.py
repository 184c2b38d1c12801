"""
Create a user from the command line. Run from project root:
  python -m ms_auth.scripts.create_user USERNAME PASSWORD [role]
Example:
  python -m ms_auth.scripts.create_user admin your-secure-password admin
"""
import argparse
import logging
import sys

from dotenv import load_dotenv

from ms_auth.core.config import get_settings
from ms_auth.core.database import create_db_engine, create_session_factory
from ms_auth.core.exceptions import AuthError
from ms_auth.services.auth import AuthService

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Register a user without going through HTTP.")
    parser.add_argument("username", help="Username (1-255 chars, case-sensitive)")
    parser.add_argument("password", help="Password")
    parser.add_argument("role", nargs="?", default="user", help="Role claim (default: user)")
    args = parser.parse_args(argv)

    load_dotenv()
    settings = get_settings()
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    engine = create_db_engine(settings)
    try:
        service = AuthService.from_settings(settings, create_session_factory(engine))
        user = service.register(args.username, args.password, args.role)
    except AuthError as e:
        print(f"Could not create user: {e.message}", file=sys.stderr)
        return 1
    finally:
        engine.dispose()
    print(f"Created user '{user.username}' (id={user.id}) with role '{user.role}'.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
