"""
Authentication configuration.

Centralizes JWT settings. Values are read once at import time.
"""
import os
from dotenv import load_dotenv

load_dotenv()

# =============================================================================
# Token Configuration
# =============================================================================

# Secret used to sign and verify access tokens (HS256)
ACCESS_JWT_TOKEN = os.environ.get("ACCESS_JWT_TOKEN", "")

# Signing algorithm for access tokens
JWT_ALGORITHM = "HS256"

# Access token expiry (in seconds)
ACCESS_TOKEN_EXPIRY = int(os.environ.get("ACCESS_TOKEN_EXPIRY", "3600"))
