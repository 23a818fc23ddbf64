"""
Database connection management and schema bootstrap.
"""
import asyncpg
import logging
from typing import Optional
from src.config import DATABASE_URL

logger = logging.getLogger(__name__)

# Global connection pool
_db_pool: Optional[asyncpg.Pool] = None


async def get_db_pool() -> asyncpg.Pool:
    """Get or create the database connection pool.

    The setup callback validates connections on acquire so stale
    connections are never handed to a repository.
    """
    global _db_pool
    if _db_pool is None:
        # Convert SQLAlchemy URL to asyncpg format
        raw_url = DATABASE_URL.replace("postgresql+asyncpg://", "postgresql://")

        async def setup_connection(conn):
            """Validate connection on acquire - equivalent to pool_pre_ping."""
            await conn.execute("SELECT 1")

        _db_pool = await asyncpg.create_pool(
            raw_url,
            min_size=1,
            max_size=10,
            command_timeout=60,
            max_inactive_connection_lifetime=300.0,
            setup=setup_connection,
        )
        logger.info("Database connection pool created (min=1, max=10, idle_lifetime=300s)")
    return _db_pool


async def close_db_pool():
    """Close the database connection pool."""
    global _db_pool
    if _db_pool is not None:
        await _db_pool.close()
        _db_pool = None
        logger.info("Database connection pool closed")


# Tables are listed in creation order. Each business id and the two
# uniqueness rules (user email, workspace name) are backed by a unique index.
SCHEMA_STATEMENTS = [
    """
    CREATE TABLE IF NOT EXISTS users (
        id          SERIAL PRIMARY KEY,
        user_id     VARCHAR(255) NOT NULL,
        email       VARCHAR(255) NOT NULL,
        password    VARCHAR(255) NOT NULL,
        role        VARCHAR(255) NOT NULL,
        created_at  TIMESTAMPTZ NOT NULL DEFAULT NOW(),
        updated_at  TIMESTAMPTZ NOT NULL DEFAULT NOW()
    );
    CREATE UNIQUE INDEX IF NOT EXISTS uq_users_user_id ON users(user_id);
    CREATE UNIQUE INDEX IF NOT EXISTS uq_users_email ON users(email);
    """,
    """
    CREATE TABLE IF NOT EXISTS workspaces (
        id           SERIAL PRIMARY KEY,
        workspace_id VARCHAR(255) NOT NULL,
        name         VARCHAR(255) NOT NULL,
        admin_id     VARCHAR(255) NOT NULL,
        guest_ids    TEXT[] NOT NULL DEFAULT '{}',
        test_ids     TEXT[] NOT NULL DEFAULT '{}',
        created_at   TIMESTAMPTZ NOT NULL DEFAULT NOW(),
        updated_at   TIMESTAMPTZ NOT NULL DEFAULT NOW()
    );
    CREATE UNIQUE INDEX IF NOT EXISTS uq_workspaces_workspace_id ON workspaces(workspace_id);
    CREATE UNIQUE INDEX IF NOT EXISTS uq_workspaces_name ON workspaces(name);
    CREATE INDEX IF NOT EXISTS idx_workspaces_admin ON workspaces(admin_id);
    """,
    """
    CREATE TABLE IF NOT EXISTS tests (
        id           SERIAL PRIMARY KEY,
        test_id      VARCHAR(255) NOT NULL,
        admin_id     VARCHAR(255) NOT NULL,
        workspace_id VARCHAR(255) NOT NULL,
        subjects     TEXT[] NOT NULL DEFAULT '{}',
        created_at   TIMESTAMPTZ NOT NULL DEFAULT NOW(),
        updated_at   TIMESTAMPTZ NOT NULL DEFAULT NOW()
    );
    CREATE UNIQUE INDEX IF NOT EXISTS uq_tests_test_id ON tests(test_id);
    CREATE INDEX IF NOT EXISTS idx_tests_admin ON tests(admin_id);
    CREATE INDEX IF NOT EXISTS idx_tests_workspace ON tests(workspace_id);
    """,
    """
    CREATE TABLE IF NOT EXISTS invitations (
        id            SERIAL PRIMARY KEY,
        invitation_id VARCHAR(255) NOT NULL,
        item_id       VARCHAR(255) NOT NULL,
        admin_id      VARCHAR(255) NOT NULL,
        guest_id      VARCHAR(255) NOT NULL,
        type          VARCHAR(255) NOT NULL,
        status        VARCHAR(255) NOT NULL,
        created_at    TIMESTAMPTZ NOT NULL DEFAULT NOW(),
        updated_at    TIMESTAMPTZ NOT NULL DEFAULT NOW()
    );
    CREATE UNIQUE INDEX IF NOT EXISTS uq_invitations_invitation_id ON invitations(invitation_id);
    CREATE INDEX IF NOT EXISTS idx_invitations_guest ON invitations(guest_id);
    CREATE INDEX IF NOT EXISTS idx_invitations_item ON invitations(item_id);
    """,
    """
    CREATE TABLE IF NOT EXISTS colors (
        id           SERIAL PRIMARY KEY,
        color_id     VARCHAR(255) NOT NULL,
        workspace_id VARCHAR(255) NOT NULL,
        guest_id     VARCHAR(255) NOT NULL,
        hex          VARCHAR(32) NOT NULL,
        created_at   TIMESTAMPTZ NOT NULL DEFAULT NOW(),
        updated_at   TIMESTAMPTZ NOT NULL DEFAULT NOW()
    );
    CREATE UNIQUE INDEX IF NOT EXISTS uq_colors_color_id ON colors(color_id);
    CREATE INDEX IF NOT EXISTS idx_colors_workspace ON colors(workspace_id);
    """,
]


async def ensure_schema(pool: asyncpg.Pool):
    """Create the application tables and indexes if they don't exist yet."""
    for statement in SCHEMA_STATEMENTS:
        await pool.execute(statement)
    logger.info("Database schema ensured (users, workspaces, tests, invitations, colors)")
