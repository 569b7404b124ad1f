"""
Global CSS Styling and UI Helper Functions.

This module injects custom CSS for the recipe grid and provides helper functions
for pills, recipe cards and the footer.
"""

import html

import streamlit as st

from recipe_ideas.cook_time import COOK_TIME_LABELS
from recipe_ideas.models import EnrichedRecipe


def inject_global_css() -> None:
    """
    Inject global CSS styles for the Recipe Ideas app.

    Sets card, pill and mood-chip styles used by render_recipe_card().
    """
    css = """
    <style>
        h1, h2, h3, h4 {
            font-weight: 600 !important;
            letter-spacing: 0.02em !important;
        }

        .ri-sub {
            color: #6b7280;
            margin-top: -0.5rem;
        }

        .ri-card-title {
            font-size: 1.05rem;
            font-weight: 700;
            margin: 0.4rem 0 0.3rem 0;
        }

        .pill-tag {
            display: inline-block;
            padding: 0.1rem 0.55rem;
            margin: 0 0.25rem 0.25rem 0;
            border-radius: 999px;
            background: #f3f4f6;
            color: #374151;
            font-size: 0.78rem;
        }

        .mood-tag {
            display: inline-block;
            padding: 0.1rem 0.55rem;
            margin: 0 0.25rem 0.25rem 0;
            border-radius: 999px;
            background: #fff4e5;
            color: #b45309;
            font-size: 0.78rem;
            font-weight: 600;
        }

        .ri-footer {
            margin-top: 2rem;
            color: #9ca3af;
            font-size: 0.85rem;
            text-align: center;
        }
    </style>
    """
    st.markdown(css, unsafe_allow_html=True)


def pill_tag(text: str) -> str:
    """
    Create HTML for a small rounded pill tag (e.g., category, area).

    Args:
        text: Text to display in the tag

    Returns:
        HTML string for the pill tag
    """
    return f'<span class="pill-tag">{html.escape(text)}</span>'


def mood_tag(mood: str) -> str:
    """HTML for a mood chip."""
    return f'<span class="mood-tag">{html.escape(mood)}</span>'


def render_recipe_card(recipe: EnrichedRecipe) -> None:
    """
    Render one recipe card: thumbnail, title, meta pills, moods, source link
    and an expander with the instructions.

    Args:
        recipe: Enriched recipe to display
    """
    with st.container(border=True):
        if recipe.thumb:
            st.image(recipe.thumb, use_container_width=True)
        st.markdown(f'<div class="ri-card-title">{html.escape(recipe.title)}</div>', unsafe_allow_html=True)

        pills = [pill_tag(recipe.category)]
        if recipe.area:
            pills.append(pill_tag(recipe.area))
        pills.append(pill_tag(f"Time: {recipe.cook_time}"))
        st.markdown("".join(pills), unsafe_allow_html=True)
        st.markdown("".join(mood_tag(m) for m in recipe.moods), unsafe_allow_html=True)

        st.link_button("View source", recipe.source, use_container_width=True)

        with st.expander("Show instructions"):
            st.caption(
                f"Category: {recipe.category} • Mood: {', '.join(recipe.moods)} • "
                f"{COOK_TIME_LABELS.get(recipe.cook_time, recipe.cook_time)}"
            )
            if recipe.instructions:
                for line in recipe.instructions.split("\n"):
                    if line.strip():
                        st.write(line)
            else:
                st.write("No instructions available.")


def render_footer() -> None:
    """Render the page footer."""
    st.markdown(
        '<div class="ri-footer">Uses TheMealDB (no API key required)</div>',
        unsafe_allow_html=True,
    )
