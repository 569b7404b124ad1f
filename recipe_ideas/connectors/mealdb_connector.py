"""
TheMealDB connector using the public v1 JSON API.

This connector interfaces with TheMealDB (https://www.themealdb.com) to list recipes
by ingredient, category or name, enumerate categories, and look up full recipe
details by id. The v1 API with the shared test key "1" needs no authentication.

The connector:
- Calls filter.php, search.php, list.php and lookup.php with requests
- Treats {"meals": null} or an empty list as "no results"
- Validates each listing into RawListing, skipping malformed entries
- Wraps transport, HTTP status and JSON parse errors into MealDBError

Base URL and timeout are read from MEALDB_BASE_URL and MEALDB_TIMEOUT_SECONDS
(loaded from .env by api.config for local dev) unless passed explicitly.
"""

import logging
import os
from typing import Any, Dict, List, Optional

import requests
from pydantic import ValidationError

from recipe_ideas.models import DetailRecord, RawListing

from .base import BaseConnector

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://www.themealdb.com/api/json/v1/1"
DEFAULT_TIMEOUT_SECONDS = 15.0
MEAL_PAGE_URL = "https://www.themealdb.com/meal/{meal_id}"


def _timeout_from_env() -> float:
    raw = os.getenv("MEALDB_TIMEOUT_SECONDS")
    if raw is None or not raw.strip():
        return DEFAULT_TIMEOUT_SECONDS
    try:
        timeout = float(raw)
    except ValueError:
        timeout = 0
    if timeout <= 0:
        logger.warning("Invalid MEALDB_TIMEOUT_SECONDS %r, using %s", raw, DEFAULT_TIMEOUT_SECONDS)
        return DEFAULT_TIMEOUT_SECONDS
    return timeout


class MealDBError(RuntimeError):
    """
    Exception raised when a TheMealDB call fails.

    Covers timeouts, connection errors, non-2xx responses and bodies that are
    not the expected JSON. Callers do not distinguish between these.
    """
    pass


class MealDBConnector(BaseConnector):
    """
    Connector for TheMealDB.

    Each call is an independent GET, so one instance can be shared across
    the threads of the enrichment pool.
    """
    source = "mealdb"

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> None:
        """
        Initialize the connector.

        Args:
            base_url: API base URL (optional, reads MEALDB_BASE_URL or uses the public v1 URL)
            timeout: Per-request timeout in seconds (optional, reads MEALDB_TIMEOUT_SECONDS or 15)
        """
        self.base_url = (base_url or os.getenv("MEALDB_BASE_URL", DEFAULT_BASE_URL)).rstrip("/")
        self.timeout = timeout or _timeout_from_env()

    def _get(self, endpoint: str, params: Dict[str, str]) -> Dict[str, Any]:
        """
        GET an endpoint and return the decoded JSON object.

        Raises:
            MealDBError: On any transport, HTTP status or parse failure
        """
        url = f"{self.base_url}/{endpoint}"
        logger.debug("GET %s params=%r", url, params)
        try:
            response = requests.get(url, params=params, timeout=self.timeout)
            response.raise_for_status()
            data = response.json()
        except requests.exceptions.RequestException as e:
            raise MealDBError(f"Request to {endpoint} failed: {e}") from e
        except ValueError as e:
            raise MealDBError(f"Invalid JSON from {endpoint}: {e}") from e

        if not isinstance(data, dict):
            raise MealDBError(f"Unexpected response format from {endpoint}: {type(data).__name__}")
        return data

    def _meals(self, endpoint: str, params: Dict[str, str]) -> List[Dict[str, Any]]:
        """Return the "meals" array of a response, or [] if it is null/missing."""
        meals = self._get(endpoint, params).get("meals")
        if not meals:
            return []
        if not isinstance(meals, list):
            raise MealDBError(f"Unexpected 'meals' value from {endpoint}: {type(meals).__name__}")
        return meals

    def _listings(self, endpoint: str, params: Dict[str, str]) -> List[RawListing]:
        listings: List[RawListing] = []
        skipped = 0
        for item in self._meals(endpoint, params):
            try:
                listings.append(RawListing.model_validate(item))
            except ValidationError as e:
                logger.warning("Skipping malformed listing from %s: %s. Item: %s",
                               endpoint, e.errors()[0].get("msg"), str(item)[:200])
                skipped += 1
        logger.info("%s %r returned %d listings (%d skipped)", endpoint, params, len(listings), skipped)
        return listings

    def filter_by_ingredient(self, ingredient: str) -> List[RawListing]:
        """
        List recipes using a main ingredient (filter.php?i=...).

        Note that filter.php results carry only idMeal, strMeal and strMealThumb.
        """
        return self._listings("filter.php", {"i": ingredient})

    def filter_by_category(self, category: str) -> List[RawListing]:
        """List recipes in a category (filter.php?c=...)."""
        return self._listings("filter.php", {"c": category})

    def search_by_name(self, name: str = "") -> List[RawListing]:
        """
        Search recipes by name (search.php?s=...).

        An empty name returns TheMealDB's default selection of recipes.
        """
        return self._listings("search.php", {"s": name})

    def list_categories(self) -> List[str]:
        """Enumerate category names (list.php?c=list)."""
        meals = self._meals("list.php", {"c": "list"})
        return [m["strCategory"] for m in meals if isinstance(m, dict) and m.get("strCategory")]

    def lookup(self, meal_id: str) -> Optional[DetailRecord]:
        """
        Look up a full recipe by id (lookup.php?i=...).

        Returns:
            DetailRecord for the first meal in the response, or None if TheMealDB
            returned no meal for this id

        Raises:
            MealDBError: On transport or parse failure
        """
        meals = self._meals("lookup.php", {"i": str(meal_id)})
        if not meals:
            return None
        try:
            return DetailRecord.model_validate(meals[0])
        except ValidationError as e:
            raise MealDBError(f"Malformed detail record for meal {meal_id}: {e}") from e

    def fallback_url(self, meal_id: str) -> str:
        """TheMealDB page for the recipe."""
        return MEAL_PAGE_URL.format(meal_id=meal_id)
