"""
Development token issuer

Mints a bearer token signed with the configured JWT_SECRET so the
catalog API can be exercised locally.

    python scripts/tools/issue_token.py alice LIBRARIAN
    python scripts/tools/issue_token.py bob USER --hours 8
"""
import argparse
import os
import sys
from datetime import timedelta

# Ensure package modules can be imported when run from a checkout
sys.path.append(os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from library_catalog.core.security import create_access_token


def main(argv=None):
    parser = argparse.ArgumentParser(description="Issue a signed JWT for the catalog API")
    parser.add_argument("subject", help="Token subject (sub claim)")
    parser.add_argument("roles", nargs="+", help="Roles, e.g. LIBRARIAN USER")
    parser.add_argument("--hours", type=float, default=1.0, help="Lifetime in hours (0 = no expiry)")
    args = parser.parse_args(argv)

    expires_in = timedelta(hours=args.hours) if args.hours > 0 else None
    print(create_access_token(args.subject, args.roles, expires_in=expires_in))
    return 0


if __name__ == "__main__":
    sys.exit(main())
