"""
Mood tagging helper for recipes.

This module provides a simple keyword-based mood classifier that labels a recipe
with zero or more moods ("Comfort", "Party", ...) based on its category, tags and
title. Recipes matching no mood are labelled "General".

The tagging logic:
- Joins category, tags and title into one lowercase text blob
- A mood matches if any of its keywords (lowercased) appears as a substring
- Matching is not tokenized, so partial words count ("Thailand" matches "Thai")

This is a heuristic suitable for browsing, not a taxonomy.
"""

from typing import Dict, Iterable, List, Optional

GENERAL_MOOD = "General"

# Mood -> category keywords considered matching
MOOD_MAP: Dict[str, List[str]] = {
    "Comfort": ["Beef", "Pasta", "Stew", "Chicken"],
    "Party": ["Dessert", "Snack", "Side"],
    "Healthy": ["Vegetarian", "Seafood", "Vegan"],
    "Light": ["Salad", "Vegetarian", "Seafood"],
    "Spicy": ["Curry", "Mexican", "Indian", "Thai"],
}

# Every label the classifier can produce, in selector order
ALL_MOODS: List[str] = list(MOOD_MAP) + [GENERAL_MOOD]


def classify_moods(
    category: Optional[str],
    tags: Optional[Iterable[str]] = None,
    title: Optional[str] = None,
) -> List[str]:
    """
    Label a recipe with moods from MOOD_MAP.

    Args:
        category: Category name (e.g., "Beef")
        tags: Tag strings (e.g., ["Curry", "Spicy"])
        title: Recipe title

    Returns:
        Matched mood labels in MOOD_MAP order, or ["General"] if none matched.
        Never empty.

    Examples:
        >>> classify_moods("Beef", ["Stew"], "Beef stew")
        ['Comfort']
        >>> classify_moods("Breakfast", [], "Pancakes")
        ['General']
    """
    hints = " ".join([category or "", *(tags or []), title or ""]).lower()

    matched = [
        mood for mood, keywords in MOOD_MAP.items()
        if any(keyword.lower() in hints for keyword in keywords)
    ]
    return matched or [GENERAL_MOOD]
