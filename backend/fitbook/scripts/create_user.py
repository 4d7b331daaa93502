"""
Create a user from the command line, e.g. the first admin:

  python -m fitbook.scripts.create_user admin s3cret --role admin
"""
import argparse
import sys

from fitbook.core.credentials import add_user
from fitbook.core.db import SessionLocal, init_db
from fitbook.core.errors import UserExistsError


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Create a FitBook user")
    parser.add_argument("name")
    parser.add_argument("password")
    parser.add_argument("--phone", default=None)
    parser.add_argument("--role", choices=["user", "admin"], default="user")
    args = parser.parse_args(argv)

    init_db()
    db = SessionLocal()
    try:
        user_id = add_user(db, args.name, args.password, args.phone, role=args.role)
    except UserExistsError as e:
        print(f"⚠️ {e}")
        return 1
    finally:
        db.close()

    print(f"✅ Created {args.role} '{args.name}' ({user_id})")
    return 0


if __name__ == "__main__":
    sys.exit(main())
