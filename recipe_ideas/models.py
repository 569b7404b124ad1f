"""
Recipe models for the recipe lookup system.

This module defines the schemas used throughout the search pipeline:
- RawListing: summary record returned by TheMealDB filter/search endpoints
- DetailRecord: full record returned by the lookup endpoint
- EnrichedRecipe: the merged, classified view model handed to the display layer
- RecipeQuery: immutable query descriptor built from the UI inputs
- SearchOutcome: result-state object returned by a search

# NOTE: RawListing and DetailRecord keep TheMealDB's field names (idMeal, strMeal, ...)
    so raw JSON can be validated directly. EnrichedRecipe uses our own field names.
"""

from typing import List, Optional

from pydantic import BaseModel, Field, ConfigDict, field_validator

# Duration buckets produced by the cooking-time classifier
COOK_TIME_QUICK = "quick"
COOK_TIME_MEDIUM = "medium"
COOK_TIME_LONG = "long"
COOK_TIME_UNKNOWN = "unknown"
COOK_TIMES = [COOK_TIME_QUICK, COOK_TIME_MEDIUM, COOK_TIME_LONG, COOK_TIME_UNKNOWN]

# Search outcome statuses
STATUS_SUCCEEDED = "succeeded"
STATUS_NO_RESULTS = "no_results"
STATUS_FAILED = "failed"

# Selector value meaning "no filter"
ALL = "All"


class RawListing(BaseModel):
    """Summary record from filter.php / search.php."""
    idMeal: str = Field(..., description="TheMealDB meal identifier")
    strMeal: str = Field("", description="Display name")
    strMealThumb: Optional[str] = Field(None, description="Thumbnail URL")
    strCategory: Optional[str] = Field(None, description="Category (absent on filter.php results)")

    model_config = ConfigDict(extra="ignore", frozen=True)

    @field_validator("idMeal", mode="before")
    @classmethod
    def _coerce_id(cls, value):
        return str(value) if value is not None else value

    @field_validator("strMeal", mode="before")
    @classmethod
    def _null_name(cls, value):
        return value or ""


class DetailRecord(BaseModel):
    """Full record from lookup.php. Every field may be missing or null."""
    strMeal: Optional[str] = None
    strInstructions: Optional[str] = None
    strCategory: Optional[str] = None
    strArea: Optional[str] = None
    strTags: Optional[str] = None
    strSource: Optional[str] = None
    strYoutube: Optional[str] = None

    model_config = ConfigDict(extra="ignore", frozen=True)


class EnrichedRecipe(BaseModel):
    """
    Recipe view model produced by the enrichment pipeline.

    Immutable once constructed. Always carries exactly one cook_time bucket
    and at least one mood label.
    """
    id: str = Field(..., description="TheMealDB meal identifier")
    title: str = Field("", description="Recipe title")
    thumb: Optional[str] = Field(None, description="Thumbnail URL")
    category: str = Field("Unknown", description="Category name")
    area: str = Field("", description="Cuisine area (e.g., 'Italian')")
    instructions: str = Field("", description="Free-text cooking instructions")
    tags: List[str] = Field(default_factory=list, description="Tags parsed from strTags")
    cook_time: str = Field(COOK_TIME_UNKNOWN, description="Duration bucket: quick, medium, long or unknown")
    moods: List[str] = Field(default_factory=lambda: ["General"], min_length=1, description="Mood labels")
    source: str = Field(..., description="Source URL (recipe site, video, or TheMealDB page)")

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
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
        },
    )

    @field_validator("cook_time")
    @classmethod
    def _check_cook_time(cls, value: str) -> str:
        if value not in COOK_TIMES:
            raise ValueError(f"cook_time must be one of {COOK_TIMES}, got {value!r}")
        return value


class RecipeQuery(BaseModel):
    """
    Immutable query descriptor for a recipe search.

    An empty or whitespace-only ingredient is treated as absent, as is a
    category of "All".
    """
    ingredient: Optional[str] = Field(None, description="Ingredient to filter by (e.g., 'chicken')")
    category: Optional[str] = Field(None, description="Category to filter by (e.g., 'Seafood')")

    model_config = ConfigDict(frozen=True)

    @field_validator("ingredient", "category", mode="before")
    @classmethod
    def _normalize(cls, value):
        if value is None:
            return None
        value = str(value).strip()
        if not value or value == ALL:
            return None
        return value


class SearchOutcome(BaseModel):
    """Result state of one search invocation."""
    status: str = Field(..., description="succeeded, no_results or failed")
    recipes: List[EnrichedRecipe] = Field(default_factory=list)
    error: Optional[str] = Field(None, description="User-visible message for no_results/failed")
    degraded_count: int = Field(0, ge=0, description="Items whose detail lookup failed")
    generation: Optional[int] = Field(None, description="Request generation that produced this outcome")

    model_config = ConfigDict(frozen=True)

    @property
    def succeeded(self) -> bool:
        return self.status == STATUS_SUCCEEDED
