import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.config import CORS_ORIGINS, ENVIRONMENT, PORT
from src.auth.config import ACCESS_JWT_TOKEN, ACCESS_TOKEN_EXPIRY, JWT_ALGORITHM
from src.auth.token_handler import TokenHandler
from src.database import close_db_pool, ensure_schema, get_db_pool
from src.dependencies import set_token_handler
from src.exceptions import register_exception_handlers
from src.routers import (
    health_router,
    users_router,
    workspaces_router,
    tests_router,
    invitations_router,
    colors_router,
)

logger = logging.getLogger(__name__)


def create_token_handler() -> TokenHandler:
    """Build the token handler from configuration. The signing secret is mandatory."""
    if not ACCESS_JWT_TOKEN:
        raise RuntimeError("ACCESS_JWT_TOKEN environment variable is required")
    return TokenHandler(ACCESS_JWT_TOKEN, ACCESS_TOKEN_EXPIRY, JWT_ALGORITHM)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifecycle - database pool, schema and token handler."""
    set_token_handler(create_token_handler())
    pool = await get_db_pool()
    await ensure_schema(pool)
    logger.info(f"Matrix backend started ({ENVIRONMENT})")
    yield
    # Cleanup on shutdown
    await close_db_pool()
    set_token_handler(None)


app = FastAPI(title="Matrix Backend", lifespan=lifespan)

# CORS middleware for the web client
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["*"],
    allow_credentials=True,
)

register_exception_handlers(app)

# ============================================================================
# Routers
# ============================================================================

app.include_router(health_router)
app.include_router(users_router)
app.include_router(workspaces_router)
app.include_router(tests_router)
app.include_router(invitations_router)
app.include_router(colors_router)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=PORT)
