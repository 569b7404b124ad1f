"""
Client-side filtering of enriched recipes.

Filters run over an already-enriched result set, so changing a selector never
triggers new API calls. Each selector accepts "All" to disable it.

Key functions:
- apply_filters: Keep recipes matching category, cooking time and mood
- validate_selectors: Reject unknown cooking-time or mood values
"""

from typing import List, Optional

from recipe_ideas.models import ALL, COOK_TIMES, EnrichedRecipe
from recipe_ideas.moods import ALL_MOODS


def _is_all(value: Optional[str]) -> bool:
    return not value or value == ALL


def validate_selectors(cook_time: Optional[str] = ALL, mood: Optional[str] = ALL) -> None:
    """
    Check selector values against the known buckets and moods.

    Raises:
        ValueError: If cook_time or mood is not "All" and not a known value
    """
    if not _is_all(cook_time) and cook_time not in COOK_TIMES:
        raise ValueError(
            f"Invalid cook_time: '{cook_time}'. Valid options: {', '.join([ALL] + COOK_TIMES)}"
        )
    if not _is_all(mood) and mood not in ALL_MOODS:
        raise ValueError(
            f"Invalid mood: '{mood}'. Valid options: {', '.join([ALL] + ALL_MOODS)}"
        )


def apply_filters(
    recipes: List[EnrichedRecipe],
    category: Optional[str] = ALL,
    cook_time: Optional[str] = ALL,
    mood: Optional[str] = ALL,
) -> List[EnrichedRecipe]:
    """
    Filter recipes by category, cooking time and mood.

    Category and cook_time must match exactly; mood must be one of the recipe's
    moods. Input order is preserved and the input list is not mutated.

    Raises:
        ValueError: If cook_time or mood is unknown (see validate_selectors)
    """
    validate_selectors(cook_time, mood)

    filtered = []
    for recipe in recipes:
        if not _is_all(category) and recipe.category != category:
            continue
        if not _is_all(cook_time) and recipe.cook_time != cook_time:
            continue
        if not _is_all(mood) and mood not in recipe.moods:
            continue
        filtered.append(recipe)
    return filtered
