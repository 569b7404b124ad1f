"""
UI Styling and Components Module.

This module provides global CSS styling and reusable UI components
for the Recipe Ideas Streamlit app.
"""

from .style import inject_global_css, pill_tag, mood_tag, render_recipe_card, render_footer

__all__ = [
    "inject_global_css",
    "pill_tag",
    "mood_tag",
    "render_recipe_card",
    "render_footer",
]
