"""
Recipe search across TheMealDB.

This module provides the core search functionality that:
- Picks the listing endpoint for a query (ingredient, category, or generic search)
- Reports "no results" separately from "could not fetch"
- Caps the listings and hands them to the enrichment pipeline

Search flow: Streamlit -> GET /recipes/search -> search_recipes() -> connector listing call
-> enrich_listings() -> SearchOutcome

Each call is a fresh attempt: Idle -> Fetching -> Succeeded | Failed. A Succeeded
outcome may still contain degraded recipes whose detail lookup failed.
"""

import logging
from typing import List, Optional

from recipe_ideas.connectors.base import BaseConnector
from recipe_ideas.connectors.mealdb_connector import MealDBConnector
from recipe_ideas.enrichment import DEFAULT_MAX_WORKERS, MAX_ENRICHED_RESULTS, enrich_listings
from recipe_ideas.models import (
    RawListing,
    RecipeQuery,
    SearchOutcome,
    STATUS_FAILED,
    STATUS_NO_RESULTS,
    STATUS_SUCCEEDED,
)

logger = logging.getLogger(__name__)

NO_RESULTS_MESSAGE = "No recipes found."
FAILURE_MESSAGE = "Failed to fetch recipes. Try again later."


def _fetch_listings(query: RecipeQuery, connector: BaseConnector) -> List[RawListing]:
    """
    Run the listing call that matches the query.

    - ingredient given: filter by ingredient (category is then left to client-side filters)
    - only category given: filter by category
    - neither: generic search with an empty name
    """
    if query.ingredient:
        logger.debug("Listing by ingredient %r", query.ingredient)
        return connector.filter_by_ingredient(query.ingredient)
    if query.category:
        logger.debug("Listing by category %r", query.category)
        return connector.filter_by_category(query.category)
    logger.debug("Listing via generic search")
    return connector.search_by_name("")


def search_recipes(
    query: RecipeQuery,
    connector: Optional[BaseConnector] = None,
    max_results: int = MAX_ENRICHED_RESULTS,
    max_workers: int = DEFAULT_MAX_WORKERS,
) -> SearchOutcome:
    """
    Search for recipes and enrich the results.

    Args:
        query: Query descriptor (ingredient and/or category)
        connector: Data connector (default: a new MealDBConnector)
        max_results: Number of listings to enrich (default: 30)
        max_workers: Parallel detail lookups (default: 8)

    Returns:
        SearchOutcome with status:
        - "succeeded": recipes holds up to max_results enriched recipes in listing order
        - "no_results": the listing call returned nothing; recipes is empty
        - "failed": the listing call raised; recipes is empty and error holds a generic message

    Examples:
        >>> outcome = search_recipes(RecipeQuery(ingredient="chicken"))
        >>> outcome.status in ("succeeded", "no_results", "failed")
        True
    """
    logger.info("Recipe search: ingredient=%r category=%r", query.ingredient, query.category)

    if connector is None:
        connector = MealDBConnector()

    try:
        listings = _fetch_listings(query, connector)
    except Exception as e:
        logger.error("Listing fetch failed for ingredient=%r category=%r: %s",
                     query.ingredient, query.category, e, exc_info=True)
        return SearchOutcome(status=STATUS_FAILED, error=FAILURE_MESSAGE)

    if not listings:
        logger.info("No recipes found for ingredient=%r category=%r", query.ingredient, query.category)
        return SearchOutcome(status=STATUS_NO_RESULTS, error=NO_RESULTS_MESSAGE)

    recipes, degraded_count = enrich_listings(
        listings,
        connector,
        max_items=max_results,
        max_workers=max_workers,
    )

    logger.info("Recipe search response: %d listings, %d enriched, %d degraded",
                len(listings), len(recipes), degraded_count)

    return SearchOutcome(
        status=STATUS_SUCCEEDED,
        recipes=recipes,
        degraded_count=degraded_count,
    )


def list_categories(connector: Optional[BaseConnector] = None) -> List[str]:
    """
    Enumerate recipe categories for the category selector.

    Returns:
        Category names, or [] if the call fails (the failure is logged)
    """
    if connector is None:
        connector = MealDBConnector()
    try:
        return connector.list_categories()
    except Exception as e:
        logger.warning("Failed to load categories: %s", e)
        return []
