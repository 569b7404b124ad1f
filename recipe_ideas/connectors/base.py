"""
Base connector abstract class for recipe data providers.

This module defines the abstract base class that recipe connectors must implement.
It keeps the search pipeline independent of a particular provider's API, and lets
tests substitute an in-memory connector.

All connectors must:
- Implement the source attribute (e.g., "mealdb")
- Return listings as RawListing and details as DetailRecord
- Return an empty list (not raise) when the provider reports no results
- Raise on transport or parse failures so callers can tell "nothing found"
  apart from "could not ask"
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from recipe_ideas.models import DetailRecord, RawListing


class BaseConnector(ABC):
    """
    Abstract base class for recipe data connectors.

    Attributes:
        source: String identifier for the provider (e.g., "mealdb")
    """
    source: str

    @abstractmethod
    def filter_by_ingredient(self, ingredient: str) -> List[RawListing]:
        """List recipes that use the given main ingredient."""

    @abstractmethod
    def filter_by_category(self, category: str) -> List[RawListing]:
        """List recipes in the given category."""

    @abstractmethod
    def search_by_name(self, name: str = "") -> List[RawListing]:
        """List recipes whose name matches; an empty name returns a generic selection."""

    @abstractmethod
    def list_categories(self) -> List[str]:
        """Enumerate category names."""

    @abstractmethod
    def lookup(self, meal_id: str) -> Optional[DetailRecord]:
        """
        Fetch the full record for one recipe.

        Returns:
            DetailRecord, or None if the provider has no record for this id
        """

    @abstractmethod
    def fallback_url(self, meal_id: str) -> str:
        """URL used as a recipe's source when the provider gives none."""
