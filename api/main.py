"""
FastAPI application for the Recipe Ideas API.

This module defines the REST API endpoints for the recipe lookup backend:
- GET /recipes/search: Search TheMealDB, enrich results, apply selector filters
- GET /categories: List recipe categories for the category selector
- GET /moods: List mood labels and cooking-time buckets
- GET /health: Health check

Run the API with:
    uvicorn api.main:app --reload

Access API documentation at:
    http://localhost:8000/docs (Swagger UI)
    http://localhost:8000/redoc (ReDoc)
"""

# Import config early to load .env file before any other code accesses environment variables
import api.config  # noqa: F401

import logging
import time
from typing import Optional

from fastapi import FastAPI, Query, HTTPException, status

from api.config import SearchConfig
from api.schemas import CategoriesResponse, MoodsResponse, RecipeSearchResponse
from recipe_ideas.cook_time import COOK_TIME_LABELS
from recipe_ideas.filters import apply_filters, validate_selectors
from recipe_ideas.models import ALL, COOK_TIMES, RecipeQuery
from recipe_ideas.moods import ALL_MOODS
from recipe_ideas.search import list_categories, search_recipes

logger = logging.getLogger(__name__)

# Track app start time for uptime calculation
_APP_START_TIME = time.time()

API_NAME = "Recipe Ideas API"
API_VERSION = "1.0.0"
API_DESCRIPTION = "Recipe lookup over TheMealDB with cooking-time and mood filters"

app = FastAPI(
    title=API_NAME,
    description=API_DESCRIPTION,
    version=API_VERSION,
    tags_metadata=[
        {
            "name": "recipes",
            "description": "Search recipes by ingredient or category and filter by time and mood.",
        },
        {
            "name": "health",
            "description": "Health check and monitoring endpoints.",
        },
    ],
)


@app.get(
    "/recipes/search",
    response_model=RecipeSearchResponse,
    tags=["recipes"],
    summary="Search and enrich recipes",
    description="Lists recipes by ingredient (or by category, or a generic search when neither is given), "
                "enriches up to RECIPE_MAX_RESULTS of them with details, and filters by category, "
                "cooking time and mood.",
)
def search(
    ingredient: Optional[str] = Query(None, description="Main ingredient (e.g., 'chicken')"),
    category: str = Query(ALL, description="Category name, or 'All'"),
    cook_time: str = Query(ALL, description="quick, medium, long, unknown, or 'All'"),
    mood: str = Query(ALL, description="Mood label (e.g., 'Comfort'), or 'All'"),
    unfiltered: bool = Query(False, description="Return every enriched recipe and leave filtering to the caller"),
) -> RecipeSearchResponse:
    """
    Search for recipes.

    The category is used twice: to choose the listing endpoint when no
    ingredient is given, and as a filter on the enriched results. With
    unfiltered=true the selectors are validated but not applied, and results
    holds the whole enriched set; the Streamlit page uses this so it can
    re-filter locally.

    Returns:
        RecipeSearchResponse. no_results and failed searches return HTTP 200
        with status and error set.

    Raises:
        HTTPException 400: If cook_time or mood is not a known value
        HTTPException 500: If the search fails unexpectedly

    Example:
        ```bash
        GET /recipes/search?ingredient=chicken&cook_time=quick&mood=Comfort
        GET /recipes/search?category=Beef&unfiltered=true
        ```
    """
    try:
        validate_selectors(cook_time, mood)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e

    query = RecipeQuery(ingredient=ingredient, category=category)

    try:
        outcome = search_recipes(
            query,
            max_results=SearchConfig.get_max_results(),
            max_workers=SearchConfig.get_max_workers(),
        )
        if unfiltered:
            filtered = list(outcome.recipes)
        else:
            filtered = apply_filters(outcome.recipes, category=category, cook_time=cook_time, mood=mood)
    except Exception as e:
        logger.error("Unexpected error in recipe search: %s", e, exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Error performing search: {str(e)}"
        ) from e

    return RecipeSearchResponse(
        status=outcome.status,
        results=filtered,
        total=len(outcome.recipes),
        filtered_total=len(filtered),
        degraded_count=outcome.degraded_count,
        error=outcome.error,
    )


@app.get("/categories", response_model=CategoriesResponse, tags=["recipes"])
def categories() -> CategoriesResponse:
    """List recipe categories. Returns an empty list if TheMealDB is unreachable."""
    return CategoriesResponse(categories=list_categories())


@app.get("/moods", response_model=MoodsResponse, tags=["recipes"])
def moods() -> MoodsResponse:
    """List mood labels and cooking-time buckets for the selectors."""
    return MoodsResponse(moods=ALL_MOODS, cook_times=COOK_TIMES, cook_time_labels=COOK_TIME_LABELS)


@app.get("/health", tags=["health"])
def health():
    """
    Health check endpoint for monitoring and status checks.

    Returns:
        Dictionary with status, API metadata and uptime information.
        Always returns 200 OK if the endpoint is reachable.
    """
    return {
        "status": "ok",
        "name": API_NAME,
        "version": API_VERSION,
        "description": API_DESCRIPTION,
        "uptime_seconds": int(time.time() - _APP_START_TIME),
    }


@app.get("/")
def root():
    """
    Root endpoint providing API information.

    Returns:
        Dictionary with API name and version
    """
    return {
        "name": API_NAME,
        "version": API_VERSION,
        "description": API_DESCRIPTION,
        "docs": "/docs",
    }
