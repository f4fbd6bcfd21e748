"""Promote an existing user to member or admin from the command line.

Usage: python scripts/make_admin.py USERNAME [member|admin]
"""
import logging
import os
import sys

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app import create_app  # noqa: E402
from app.config import Config  # noqa: E402
from app.errors import AuthorizationError  # noqa: E402
from app.services.credentials import credentials  # noqa: E402


def main(argv, config_class=Config):
    if len(argv) not in (2, 3) or (len(argv) == 3 and argv[2] not in ('member', 'admin')):
        print(__doc__)
        return 2

    username = argv[1]
    role = argv[2] if len(argv) == 3 else 'admin'

    app = create_app(config_class)
    with app.app_context():
        try:
            changed = credentials.promote(username, role)
        except AuthorizationError as e:
            print(f'Could not promote {username}: {e.message}')
            return 1

    if changed:
        print(f'{username} promoted to {role}')
    else:
        print(f'{username} is already {role}')
    return 0


if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO)
    sys.exit(main(sys.argv))
