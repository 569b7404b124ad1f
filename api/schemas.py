"""
Pydantic schemas for FastAPI request and response models.

This module defines the Pydantic models used for API response serialization.
These schemas ensure type safety and automatic API documentation generation.

The schemas include:
- RecipeSearchResponse: Search status plus the enriched, filtered recipes
- CategoriesResponse: Category names for the category selector
- MoodsResponse: Mood labels and cooking-time buckets for the other selectors

# NOTE: Recipes are serialized with recipe_ideas.models.EnrichedRecipe directly,
    so the API contract follows the view model.
"""

from typing import List, Optional

from pydantic import BaseModel, Field, ConfigDict

from recipe_ideas.models import EnrichedRecipe


class RecipeSearchResponse(BaseModel):
    """
    Response model for the recipe search endpoint.

    no_results and failed are reported through status with HTTP 200, so the
    frontend can show the message without treating it as a crash.
    """
    status: str = Field(..., description="'succeeded', 'no_results' or 'failed'")
    results: List[EnrichedRecipe] = Field(default_factory=list, description="Recipes after client-side filters")
    total: int = Field(0, ge=0, description="Number of enriched recipes before filtering")
    filtered_total: int = Field(0, ge=0, description="Number of recipes after filtering")
    degraded_count: int = Field(0, ge=0, description="Recipes whose detail lookup failed")
    error: Optional[str] = Field(None, description="User-visible message for no_results/failed")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "status": "succeeded",
                "results": [
                    {
                        "id": "52772",
                        "title": "Teriyaki Chicken Casserole",
                        "thumb": "https://www.themealdb.com/images/media/meals/wvpsxx1468256321.jpg",
                        "category": "Chicken",
                        "area": "Japanese",
                        "instructions": "Preheat oven to 350° F...",
                        "tags": ["Meat", "Casserole"],
                        "cook_time": "medium",
                        "moods": ["Comfort"],
                        "source": "https://www.themealdb.com/meal/52772",
                    }
                ],
                "total": 1,
                "filtered_total": 1,
                "degraded_count": 0,
                "error": None,
            }
        }
    )


class CategoriesResponse(BaseModel):
    """Category names from TheMealDB (empty if the provider is unreachable)."""
    categories: List[str] = Field(..., description="Category names (e.g., 'Beef', 'Seafood')")


class MoodsResponse(BaseModel):
    """Selector options for mood and cooking time."""
    moods: List[str] = Field(..., description="Mood labels, including 'General'")
    cook_times: List[str] = Field(..., description="Cooking-time buckets: quick, medium, long, unknown")
    cook_time_labels: dict = Field(default_factory=dict, description="Display label per cooking-time bucket")
