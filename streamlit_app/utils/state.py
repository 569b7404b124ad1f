"""
Search State Management Module.

This module wraps Streamlit's session_state to provide a clean API for the recipe
page's state:
- Selector values (ingredient, category, cooking time, mood)
- The SearchSession holding the latest accepted search outcome

Backend responses are converted back into SearchOutcome so that the page can run
recipe_ideas.filters over them locally; changing a selector never re-fetches.

# NOTE: This module uses session_state, so state persists only for the current
    Streamlit session. Refreshing the page starts over.
"""

from typing import Any, Dict, Optional

import streamlit as st

from recipe_ideas.models import ALL, EnrichedRecipe, SearchOutcome, STATUS_FAILED
from recipe_ideas.search import FAILURE_MESSAGE
from recipe_ideas.session import SearchSession

SESSION_KEY = "search_session"

# Widget keys, also used by reset_state()
INGREDIENT_KEY = "ingredient"
CATEGORY_KEY = "category"
COOK_TIME_KEY = "cook_time"
MOOD_KEY = "mood"

SELECTOR_DEFAULTS = {
    INGREDIENT_KEY: "",
    CATEGORY_KEY: ALL,
    COOK_TIME_KEY: ALL,
    MOOD_KEY: ALL,
}


def init_state() -> None:
    """Ensure all keys exist in session state. Call at the top of the page."""
    if SESSION_KEY not in st.session_state:
        st.session_state[SESSION_KEY] = SearchSession()
    for key, default in SELECTOR_DEFAULTS.items():
        if key not in st.session_state:
            st.session_state[key] = default


def get_search_session() -> SearchSession:
    init_state()
    return st.session_state[SESSION_KEY]


def response_to_outcome(response: Optional[Dict[str, Any]]) -> SearchOutcome:
    """
    Convert a backend search response into a SearchOutcome.

    Args:
        response: RecipeSearchResponse as a dict, or None if the backend was unreachable

    Returns:
        SearchOutcome; an unreachable backend counts as a failed search
    """
    if response is None:
        return SearchOutcome(status=STATUS_FAILED, error=FAILURE_MESSAGE)
    return SearchOutcome(
        status=response.get("status", STATUS_FAILED),
        recipes=[EnrichedRecipe.model_validate(r) for r in response.get("results", [])],
        error=response.get("error"),
        degraded_count=response.get("degraded_count", 0),
    )


def store_response(generation: int, response: Optional[Dict[str, Any]]) -> bool:
    """
    Store a backend response if its search is still the latest.

    Args:
        generation: Value returned by SearchSession.begin() for this search
        response: Backend response dict, or None if the backend was unreachable

    Returns:
        True if stored, False if a newer search or a reset superseded it
    """
    return get_search_session().complete(generation, response_to_outcome(response))


def get_outcome() -> Optional[SearchOutcome]:
    """Latest accepted search outcome, or None if nothing is loaded."""
    return get_search_session().outcome


def reset_state() -> None:
    """Reset selectors and discard results. Used as the Reset button callback."""
    get_search_session().reset()
    for key, default in SELECTOR_DEFAULTS.items():
        st.session_state[key] = default
