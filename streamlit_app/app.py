"""
Recipe Ideas - Streamlit Frontend Main Entry Point.

This is the Streamlit application entry point. It renders the whole recipe page:
- Ingredient search (press Enter or click Search)
- Category, cooking time and mood selectors
- Reset button
- Recipe grid with source links and instructions

Searching calls the backend (GET /recipes/search). Selector changes only filter the
loaded results locally with recipe_ideas.filters, so they never trigger new API calls.

Run with:
    streamlit run streamlit_app/app.py
"""

import sys
from pathlib import Path

# Ensure the streamlit_app directory is in the Python path
# This allows imports to work regardless of how the app is run
streamlit_app_dir = Path(__file__).parent
if str(streamlit_app_dir) not in sys.path:
    sys.path.insert(0, str(streamlit_app_dir))

# Add project root to path so we can import api.config and recipe_ideas
project_root = streamlit_app_dir.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

# Import config early to load .env file before any other code accesses environment variables
import api.config  # noqa: F401

import streamlit as st

from recipe_ideas.cook_time import COOK_TIME_LABELS
from recipe_ideas.filters import apply_filters
from recipe_ideas.models import ALL, COOK_TIMES
from recipe_ideas.moods import ALL_MOODS
from utils.api_client import get_categories, get_selector_options, search_recipes
from utils.state import (
    CATEGORY_KEY,
    COOK_TIME_KEY,
    INGREDIENT_KEY,
    MOOD_KEY,
    get_outcome,
    get_search_session,
    init_state,
    reset_state,
    store_response,
)
from ui.feedback import show_empty_state, show_error, working_spinner
from ui.style import inject_global_css, render_footer, render_recipe_card

GRID_COLUMNS = 3

# Page configuration - must be called before any other Streamlit commands
st.set_page_config(
    page_title="Recipe Ideas",
    page_icon="🍳",
    layout="wide",
)

inject_global_css()
init_state()

st.title("🍳 Recipe Ideas")
st.markdown(
    '<p class="ri-sub">Use what you have and filter by time, category and mood.</p>',
    unsafe_allow_html=True,
)

# Search row - a form so that Enter in the text input submits
with st.form("search_form", border=False):
    input_col, button_col = st.columns([5, 1], vertical_alignment="bottom")
    with input_col:
        st.text_input(
            "Ingredient",
            key=INGREDIENT_KEY,
            placeholder="Enter ingredient (e.g., chicken)",
        )
    with button_col:
        search_clicked = st.form_submit_button("Search", type="primary", use_container_width=True)

# Filters row - options come from /moods, with the local tables if the backend is down
selector_options = get_selector_options()
cook_time_options = selector_options.get("cook_times") or COOK_TIMES
cook_time_labels = selector_options.get("cook_time_labels") or COOK_TIME_LABELS
mood_options = selector_options.get("moods") or ALL_MOODS

category_col, time_col, mood_col, reset_col = st.columns(4, vertical_alignment="bottom")
with category_col:
    st.selectbox("Category", options=[ALL] + get_categories(), key=CATEGORY_KEY)
with time_col:
    st.selectbox(
        "Cooking time",
        options=[ALL] + cook_time_options,
        key=COOK_TIME_KEY,
        format_func=lambda v: cook_time_labels.get(v, v),
    )
with mood_col:
    st.selectbox("Mood", options=[ALL] + mood_options, key=MOOD_KEY)
with reset_col:
    st.button("Reset", on_click=reset_state, use_container_width=True)

if search_clicked:
    session = get_search_session()
    generation = session.begin()
    with working_spinner("Loading recipes…"):
        response = search_recipes(
            ingredient=st.session_state[INGREDIENT_KEY].strip() or None,
            category=st.session_state[CATEGORY_KEY],
        )
    store_response(generation, response)

st.divider()

outcome = get_outcome()

if outcome is None or (outcome.succeeded and not outcome.recipes):
    show_empty_state(
        "No recipes loaded",
        "Try searching by ingredient or selecting a category.",
    )
elif outcome.error:
    show_error(outcome.error)
else:
    filtered = apply_filters(
        outcome.recipes,
        category=st.session_state[CATEGORY_KEY],
        cook_time=st.session_state[COOK_TIME_KEY],
        mood=st.session_state[MOOD_KEY],
    )

    st.caption(f"Showing {len(filtered)} of {len(outcome.recipes)} recipes")
    if outcome.degraded_count:
        st.caption(f"{outcome.degraded_count} recipe(s) could not be fully loaded; details may be missing.")

    if not filtered:
        show_empty_state("No recipes match these filters", "Try another category, cooking time or mood.")

    for row_start in range(0, len(filtered), GRID_COLUMNS):
        columns = st.columns(GRID_COLUMNS, gap="medium")
        for column, recipe in zip(columns, filtered[row_start:row_start + GRID_COLUMNS]):
            with column:
                render_recipe_card(recipe)

render_footer()
