"""
Configuration management for Recipe Ideas.

This module centralizes environment variable loading from .env file at project root.
It should be imported early in both backend (api/main.py) and frontend (streamlit_app/app.py)
to ensure .env is loaded before any other code accesses environment variables.

On production hosts, .env will not exist, but load_dotenv() is safe to call and will no-op.
Environment variables from the host dashboard will be used instead.

Environment Variables:
- MEALDB_BASE_URL, MEALDB_TIMEOUT_SECONDS: Optional, read by recipe_ideas.connectors.mealdb_connector
- RECIPE_MAX_RESULTS: Optional, number of listings enriched per search (default: 30)
- RECIPE_MAX_WORKERS: Optional, parallel detail lookups (default: 8)
- BACKEND_URL: Optional, backend URL (defaults to http://localhost:8000 for local dev)
"""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_MAX_RESULTS = 30
DEFAULT_MAX_WORKERS = 8


def load_env_file() -> None:
    """
    Load environment variables from .env file at project root.

    Safe to call multiple times. Existing environment variables take precedence.
    """
    # api/config.py -> api/ -> project root
    project_root = Path(__file__).resolve().parent.parent
    load_dotenv(project_root / ".env", override=False)


# Load .env file on module import
load_env_file()


def _get_number(name: str, default, cast):
    """Read a numeric env var, falling back to the default if missing or malformed."""
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = cast(raw)
    except ValueError:
        logger.warning("Invalid value for %s: %r, using default %r", name, raw, default)
        return default
    if value <= 0:
        logger.warning("Non-positive value for %s: %r, using default %r", name, raw, default)
        return default
    return value


class SearchConfig:
    """Configuration for the search and enrichment pipeline."""

    @staticmethod
    def get_max_results() -> int:
        """Maximum number of listings enriched per search (default: 30)."""
        return _get_number("RECIPE_MAX_RESULTS", DEFAULT_MAX_RESULTS, int)

    @staticmethod
    def get_max_workers() -> int:
        """Maximum number of concurrent detail lookups (default: 8)."""
        return _get_number("RECIPE_MAX_WORKERS", DEFAULT_MAX_WORKERS, int)


def get_backend_url() -> str:
    """
    Get the backend API base URL used by the Streamlit frontend.

    Returns:
        Backend URL with trailing slash removed. Defaults to http://localhost:8000.
    """
    return os.getenv("BACKEND_URL", "http://localhost:8000").rstrip("/")
