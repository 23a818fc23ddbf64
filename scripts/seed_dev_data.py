#!/usr/bin/env python3
"""
Script to seed a development database with a super admin and one workspace.

Usage:
    # Seed with the default development password
    python scripts/seed_dev_data.py

    # Seed with a custom admin password
    python scripts/seed_dev_data.py --password <password>

Existing rows are left untouched, so the script can be re-run safely.

Environment variables required:
    - DATABASE_URL: PostgreSQL connection string
"""

import argparse
import asyncio
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Load environment variables
from dotenv import load_dotenv
load_dotenv(project_root / ".env")

from src.auth.passwords import hash_password
from src.database import close_db_pool, ensure_schema, get_db_pool

ADMIN_ID = "admin1"
ADMIN_EMAIL = "superadmin@croneri.co.uk"
WORKSPACE_ID = "workspace1"
WORKSPACE_NAME = "workspace1"
DEFAULT_PASSWORD = "12345678"


async def seed(password: str):
    pool = await get_db_pool()
    try:
        await ensure_schema(pool)

        status = await pool.execute(
            """
            INSERT INTO users (user_id, email, password, role)
            VALUES ($1, $2, $3, 'admin')
            ON CONFLICT DO NOTHING
            """,
            ADMIN_ID, ADMIN_EMAIL, hash_password(password),
        )
        print(f"users: {status}")

        status = await pool.execute(
            """
            INSERT INTO workspaces (workspace_id, name, admin_id, guest_ids, test_ids)
            VALUES ($1, $2, $3, '{}', '{}')
            ON CONFLICT DO NOTHING
            """,
            WORKSPACE_ID, WORKSPACE_NAME, ADMIN_ID,
        )
        print(f"workspaces: {status}")
    finally:
        await close_db_pool()


def main():
    parser = argparse.ArgumentParser(description="Seed development data")
    parser.add_argument("--password", default=DEFAULT_PASSWORD, help="Password for the super admin")
    args = parser.parse_args()

    asyncio.run(seed(args.password))
    print(f"Seeded {ADMIN_EMAIL} and workspace '{WORKSPACE_NAME}'")


if __name__ == "__main__":
    main()
