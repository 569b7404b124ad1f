"""
Cooking-time estimation for recipes.

TheMealDB has no preparation-time field, so we approximate it from the length
of the instructions text:
- 0 words: "unknown"
- fewer than 100 words: "quick" (roughly under 30 minutes)
- fewer than 300 words: "medium" (roughly 30-60 minutes)
- otherwise: "long" (over an hour)
"""

from typing import Optional

from recipe_ideas.models import (
    COOK_TIME_QUICK,
    COOK_TIME_MEDIUM,
    COOK_TIME_LONG,
    COOK_TIME_UNKNOWN,
)

QUICK_MAX_WORDS = 100
MEDIUM_MAX_WORDS = 300

# Human-readable labels for selectors and pills
COOK_TIME_LABELS = {
    COOK_TIME_QUICK: "Quick (<30 mins)",
    COOK_TIME_MEDIUM: "Medium (30-60 mins)",
    COOK_TIME_LONG: "Long (>60 mins)",
    COOK_TIME_UNKNOWN: "Unknown",
}


def estimate_cook_time(instructions: Optional[str]) -> str:
    """
    Map instruction text to a coarse duration bucket.

    Args:
        instructions: Free-text instructions (None is treated as empty)

    Returns:
        "unknown", "quick", "medium" or "long"

    Examples:
        >>> estimate_cook_time("")
        'unknown'
        >>> estimate_cook_time("Boil the pasta. Add sauce.")
        'quick'
    """
    words = len((instructions or "").split())
    if words == 0:
        return COOK_TIME_UNKNOWN
    if words < QUICK_MAX_WORDS:
        return COOK_TIME_QUICK
    if words < MEDIUM_MAX_WORDS:
        return COOK_TIME_MEDIUM
    return COOK_TIME_LONG
