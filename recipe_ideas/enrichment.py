"""
Result enrichment pipeline.

Listing endpoints return only an id, title and thumbnail per recipe. This module
fetches the full record for each listing in parallel, applies the cooking-time and
mood classifiers, and merges everything into EnrichedRecipe view models.

Enrichment flow: listings -> cap -> parallel lookup() per listing -> build_recipe() -> EnrichedRecipe

Rules:
- Output order always matches input order, whatever order lookups finish in
- A failed lookup degrades that one recipe to listing-only fields; siblings are unaffected
- Failed lookups are never retried
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional, Sequence, Tuple

from recipe_ideas.connectors.base import BaseConnector
from recipe_ideas.cook_time import estimate_cook_time
from recipe_ideas.models import COOK_TIME_UNKNOWN, DetailRecord, EnrichedRecipe, RawListing
from recipe_ideas.moods import GENERAL_MOOD, classify_moods

logger = logging.getLogger(__name__)

# Keeps the number of outbound lookups per search bounded
MAX_ENRICHED_RESULTS = 30
DEFAULT_MAX_WORKERS = 8

UNKNOWN_CATEGORY = "Unknown"


def parse_tags(raw_tags: Optional[str]) -> List[str]:
    """
    Split TheMealDB's comma-separated strTags into a clean list.

    Examples:
        >>> parse_tags("Curry, Spicy,,  ")
        ['Curry', 'Spicy']
        >>> parse_tags(None)
        []
    """
    return [tag.strip() for tag in (raw_tags or "").split(",") if tag.strip()]


def build_recipe(listing: RawListing, detail: Optional[DetailRecord], fallback_url: str) -> EnrichedRecipe:
    """
    Merge a listing with its detail record and classify it.

    A missing detail (lookup returned no meal) is handled like a detail with
    every field empty.

    Args:
        listing: Summary record from a filter/search call
        detail: Full record from lookup, or None
        fallback_url: Source URL to use when the detail has neither strSource nor strYoutube

    Returns:
        EnrichedRecipe with cook_time and moods populated
    """
    detail = detail or DetailRecord()

    instructions = detail.strInstructions or ""
    category = detail.strCategory or listing.strCategory or UNKNOWN_CATEGORY
    tags = parse_tags(detail.strTags)

    return EnrichedRecipe(
        id=listing.idMeal,
        title=listing.strMeal,
        thumb=listing.strMealThumb,
        category=category,
        area=detail.strArea or "",
        instructions=instructions,
        tags=tags,
        cook_time=estimate_cook_time(instructions),
        moods=classify_moods(category, tags, detail.strMeal or listing.strMeal),
        source=detail.strSource or detail.strYoutube or fallback_url,
    )


def build_degraded_recipe(listing: RawListing, fallback_url: str) -> EnrichedRecipe:
    """Minimal recipe from listing fields only, used when the detail lookup failed."""
    return EnrichedRecipe(
        id=listing.idMeal,
        title=listing.strMeal,
        thumb=listing.strMealThumb,
        category=listing.strCategory or UNKNOWN_CATEGORY,
        area="",
        instructions="",
        tags=[],
        cook_time=COOK_TIME_UNKNOWN,
        moods=[GENERAL_MOOD],
        source=fallback_url,
    )


def _enrich_one(connector: BaseConnector, listing: RawListing) -> Tuple[EnrichedRecipe, bool]:
    """
    Enrich a single listing.

    Returns:
        (recipe, degraded) where degraded is True if the lookup failed
    """
    fallback_url = connector.fallback_url(listing.idMeal)
    try:
        detail = connector.lookup(listing.idMeal)
        return build_recipe(listing, detail, fallback_url), False
    except Exception as e:
        logger.warning("Detail lookup failed for meal %s (%r), using listing only: %s",
                       listing.idMeal, listing.strMeal, e)
        return build_degraded_recipe(listing, fallback_url), True


def enrich_listings(
    listings: Sequence[RawListing],
    connector: BaseConnector,
    max_items: int = MAX_ENRICHED_RESULTS,
    max_workers: int = DEFAULT_MAX_WORKERS,
) -> Tuple[List[EnrichedRecipe], int]:
    """
    Fetch details for listings in parallel and build enriched recipes.

    Lookups are submitted to a thread pool and the call returns once all of
    them have settled. Each result is stored at its listing's position.

    Args:
        listings: Listings in display order
        connector: Connector providing lookup() and fallback_url()
        max_items: Only the first max_items listings are enriched (default: 30)
        max_workers: Thread pool size (default: 8)

    Returns:
        Tuple of (enriched recipes in input order, number of degraded recipes)
    """
    limited = list(listings[:max_items])
    if not limited:
        return [], 0

    logger.debug("Enriching %d of %d listings with %d workers", len(limited), len(listings), max_workers)

    with ThreadPoolExecutor(max_workers=min(len(limited), max_workers)) as executor:
        # executor.map yields in submission order, so slot i belongs to limited[i]
        results = list(executor.map(lambda listing: _enrich_one(connector, listing), limited))

    recipes = [recipe for recipe, _ in results]
    degraded_count = sum(1 for _, degraded in results if degraded)

    if degraded_count:
        logger.info("Enrichment finished: %d recipes, %d degraded", len(recipes), degraded_count)
    return recipes, degraded_count
