import argparse
import os
import sys

# Add parent dir to path
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from garage_api.infrastructure.database import SessionLocal
from garage_api.domain.models.user import User
from garage_api.infrastructure.repositories.user_repository import SQLAlchemyUserRepository
from garage_api.application.services.employee_service import find_orphaned_users, reconcile_orphans


def reconcile(delete: bool, grace_minutes: int) -> int:
    db = SessionLocal()
    try:
        repo = SQLAlchemyUserRepository(db, User)
        if not delete:
            orphans = find_orphaned_users(repo, grace_minutes)
            for user in orphans:
                print(f"{user.user_uid}\t{user.login_id}\t{user.created_at}")
            print(f"{len(orphans)} orphaned user(s) found.")
            return 0

        summary = reconcile_orphans(repo, delete=True, grace_minutes=grace_minutes)
        print(f"Found {summary['found']}, deleted {len(summary['deleted'])}, failed {len(summary['failed'])}.")
        return 1 if summary["failed"] else 0
    finally:
        db.close()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="List users that have no garage_auth row.")
    parser.add_argument("--delete", action="store_true", help="delete the orphaned users")
    parser.add_argument("--grace-minutes", type=int, default=5, help="skip users younger than this")
    args = parser.parse_args()
    sys.exit(reconcile(args.delete, args.grace_minutes))
