"""
Feedback helpers for the recipe page: search errors, empty result states and
the loading spinner shown while a search runs.
"""

from contextlib import contextmanager
import streamlit as st


def show_error(message: str) -> None:
    """Display a search failure or no-results message."""
    st.error(f"⚠️ {message}")


def show_empty_state(title: str, suggestion: str) -> None:
    """
    Display an empty grid: nothing searched yet, or every recipe filtered out.

    Args:
        title: Bold headline
        suggestion: What the user can change to see recipes
    """
    st.info(f"📭 **{title}**")
    st.caption(suggestion)


@contextmanager
def working_spinner(label: str = "Loading recipes…"):
    """Show a spinner while a search is in flight."""
    with st.spinner(label):
        yield
