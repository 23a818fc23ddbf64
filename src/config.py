"""
Configuration module for Matrix Backend.
Centralizes environment variables, logging setup, and constants.
"""
import os
import logging
from dotenv import load_dotenv

# Load .env file for local development
load_dotenv()

# ============================================================================
# Environment Configuration
# ============================================================================

# Environment identifier (production, staging, development, etc.)
ENVIRONMENT = os.environ.get("ENVIRONMENT", "production")

# Port used when running app.py directly
PORT = int(os.environ.get("PORT", "8080"))

# Origins allowed by the CORS middleware (comma separated)
CORS_ORIGINS = [
    origin.strip()
    for origin in os.environ.get("CORS_ORIGINS", "http://localhost:5173").split(",")
    if origin.strip()
]

# ============================================================================
# Database Configuration
# ============================================================================

DATABASE_URL = os.environ.get("DATABASE_URL")
if not DATABASE_URL:
    raise RuntimeError("DATABASE_URL environment variable is required")

# ============================================================================
# Logging Configuration
# ============================================================================

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

# ============================================================================
# Application Constants
# ============================================================================

# Sign-ups are only accepted for emails containing this marker
ORGANISATION_EMAIL_MARKER = os.environ.get("ORGANISATION_EMAIL_MARKER", "croner")

# Only ids containing this marker may create workspaces
ADMIN_ROLE_MARKER = "admin"

# Cost factor for bcrypt password hashing
BCRYPT_ROUNDS = int(os.environ.get("BCRYPT_ROUNDS", "10"))
