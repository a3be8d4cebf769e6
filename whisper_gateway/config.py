"""Configuration constants and .env loading.

WHY: Centralizes all configurable values so they are easy to find, update,
and override. Credentials for Workers AI must never live in source code.

HOW: python-dotenv loads the .env file on import. Defaults are module-level
constants read from the environment. The load_*() functions give a clear
error when a required credential is missing.

RULES:
- Credentials are loaded from .env via python-dotenv, never hardcoded
- All defaults can be overridden via environment variables
- Missing credentials raise ValueError at client construction, not import
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

# Load .env from the project root (where the server is started from)
load_dotenv()

# ---------------------------------------------------------------------------
# Workers AI defaults
# ---------------------------------------------------------------------------

WORKERS_AI_BASE_URL = os.getenv(
    "WORKERS_AI_BASE_URL", "https://api.cloudflare.com/client/v4"
)
WORKERS_AI_TIMEOUT_S = float(os.getenv("WORKERS_AI_TIMEOUT_S", "120"))

# ---------------------------------------------------------------------------
# HTTP server defaults
# ---------------------------------------------------------------------------

API_HOST = os.getenv("API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("API_PORT", "8000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


def load_api_token() -> str:
    """Load the Cloudflare API token from the environment.

    RULES:
    - Raises ValueError if CLOUDFLARE_API_TOKEN is missing or empty
    - Never returns a default/placeholder value
    """
    token = os.getenv("CLOUDFLARE_API_TOKEN", "").strip()
    if not token:
        raise ValueError(
            "Cloudflare API token not configured. "
            "Add CLOUDFLARE_API_TOKEN to the .env file."
        )
    return token


def load_account_id() -> str:
    """Load the Cloudflare account ID that owns the Workers AI models."""
    account_id = os.getenv("CLOUDFLARE_ACCOUNT_ID", "").strip()
    if not account_id:
        raise ValueError(
            "Cloudflare account ID not configured. "
            "Add CLOUDFLARE_ACCOUNT_ID to the .env file."
        )
    return account_id
