"""
Shared fixtures for recipe tests.

FakeConnector is an in-memory BaseConnector so pipeline tests never touch the network.
"""

import threading
import time
from typing import Dict, List, Optional

import pytest

from recipe_ideas.connectors.base import BaseConnector
from recipe_ideas.models import DetailRecord, RawListing


class FakeConnector(BaseConnector):
    """
    In-memory connector.

    Args:
        listings: Returned by every listing call
        details: meal id -> detail dict (missing id -> lookup returns None)
        failing_ids: meal ids whose lookup raises RuntimeError
        delays: meal id -> seconds to sleep before answering a lookup
        listing_error: If set, every listing call raises it
    """
    source = "fake"

    def __init__(
        self,
        listings: Optional[List[dict]] = None,
        details: Optional[Dict[str, dict]] = None,
        failing_ids=(),
        delays: Optional[Dict[str, float]] = None,
        listing_error: Optional[Exception] = None,
        categories: Optional[List[str]] = None,
    ):
        self.listings = [RawListing.model_validate(item) for item in (listings or [])]
        self.details = details or {}
        self.failing_ids = set(failing_ids)
        self.delays = delays or {}
        self.listing_error = listing_error
        self.categories = categories or []
        self.calls: List[tuple] = []
        self.lookups: List[str] = []
        self._lock = threading.Lock()

    def _listing(self, name, arg):
        self.calls.append((name, arg))
        if self.listing_error:
            raise self.listing_error
        return list(self.listings)

    def filter_by_ingredient(self, ingredient):
        return self._listing("ingredient", ingredient)

    def filter_by_category(self, category):
        return self._listing("category", category)

    def search_by_name(self, name=""):
        return self._listing("search", name)

    def list_categories(self):
        if self.listing_error:
            raise self.listing_error
        return list(self.categories)

    def lookup(self, meal_id):
        with self._lock:
            self.lookups.append(meal_id)
        time.sleep(self.delays.get(meal_id, 0))
        if meal_id in self.failing_ids:
            raise RuntimeError(f"lookup failed for {meal_id}")
        detail = self.details.get(meal_id)
        return DetailRecord.model_validate(detail) if detail is not None else None

    def fallback_url(self, meal_id):
        return f"https://www.themealdb.com/meal/{meal_id}"


def make_listing(meal_id: str, name: str = "", category: Optional[str] = None) -> dict:
    return {
        "idMeal": meal_id,
        "strMeal": name or f"Meal {meal_id}",
        "strMealThumb": f"https://img.example/{meal_id}.jpg",
        "strCategory": category,
    }


@pytest.fixture
def fake_connector():
    """Factory for FakeConnector instances."""
    return FakeConnector


@pytest.fixture
def listing():
    """Factory for raw listing dicts."""
    return make_listing
