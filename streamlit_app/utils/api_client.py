"""
Backend API Client Module.

This module is the **single source of truth** for all backend API communication.
All HTTP calls to the FastAPI backend should go through functions in this module.

Key principles:
- Centralized error handling for network issues
- Consistent timeouts
- Graceful degradation when backend is unavailable
- Never let exceptions bubble up to crash the Streamlit app
"""

from typing import Any, Dict, List, Optional

import requests
import streamlit as st

from api.config import get_backend_url


@st.cache_data(ttl=600)  # Categories rarely change
def get_categories() -> List[str]:
    """
    Fetch category names for the category selector.

    Returns:
        List of category names, or [] if the backend is unreachable.
    """
    try:
        response = requests.get(f"{get_backend_url()}/categories", timeout=20)
        response.raise_for_status()
        return response.json().get("categories", [])
    except (requests.exceptions.RequestException, ValueError):
        return []


@st.cache_data(ttl=600)
def get_selector_options() -> Dict[str, Any]:
    """
    Fetch mood labels and cooking-time buckets.

    Returns:
        Dictionary with "moods", "cook_times" and "cook_time_labels", or {} on error.
    """
    try:
        response = requests.get(f"{get_backend_url()}/moods", timeout=5)
        response.raise_for_status()
        return response.json()
    except (requests.exceptions.RequestException, ValueError):
        return {}


def search_recipes(ingredient: Optional[str], category: str = "All") -> Optional[Dict[str, Any]]:
    """
    Search for recipes using the backend API.

    The full enriched set is requested (unfiltered=true); the category only
    picks the listing endpoint. Selector filters are applied by the page.

    Args:
        ingredient: Main ingredient (None or empty for no ingredient)
        category: Category name or "All"

    Returns:
        Dictionary matching RecipeSearchResponse ("status", "results", "error", ...),
        or None if the backend could not be reached (an error is shown to the user).
    """
    params: Dict[str, Any] = {"category": category, "unfiltered": "true"}
    if ingredient:
        params["ingredient"] = ingredient

    try:
        # Enrichment makes up to 30 lookups, so allow more than the per-call provider timeout
        response = requests.get(f"{get_backend_url()}/recipes/search", params=params, timeout=90)
        response.raise_for_status()
        return response.json()
    except requests.exceptions.Timeout:
        st.error("Request timed out. The backend may be slow or unreachable.")
        return None
    except requests.exceptions.ConnectionError:
        st.error("Could not connect to backend. Please check that the backend is running.")
        return None
    except requests.exceptions.HTTPError as e:
        st.error(f"Backend returned an error: {e.response.status_code} - {e.response.text}")
        return None
    except requests.exceptions.RequestException as e:
        st.error(f"An error occurred while searching: {str(e)}")
        return None
