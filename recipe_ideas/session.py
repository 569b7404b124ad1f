"""
Search session with request generations.

When a user starts a second search before the first one finishes, both will
eventually complete. SearchSession numbers each search with a generation and only
keeps the outcome of the latest one, so a slow, superseded search can never
overwrite newer results.

Usage:
    session = SearchSession()
    generation = session.begin()
    outcome = search_recipes(query)
    session.complete(generation, outcome)  # False if a newer search has started
"""

import logging
import threading
from typing import Optional

from recipe_ideas.models import SearchOutcome

logger = logging.getLogger(__name__)


class SearchSession:
    """Tracks the latest search generation and its accepted outcome."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._generation = 0
        self._outcome: Optional[SearchOutcome] = None
        self._in_flight = False

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def outcome(self) -> Optional[SearchOutcome]:
        """Outcome of the latest completed, non-stale search (None if none yet)."""
        return self._outcome

    @property
    def loading(self) -> bool:
        """True while the latest search has not completed."""
        return self._in_flight

    def begin(self) -> int:
        """
        Start a new search, superseding any in-flight one.

        Results are discarded wholesale at the start of each search.

        Returns:
            The new generation number
        """
        with self._lock:
            self._generation += 1
            self._outcome = None
            self._in_flight = True
            return self._generation

    def complete(self, generation: int, outcome: SearchOutcome) -> bool:
        """
        Record a finished search if it is still the latest.

        Args:
            generation: Value returned by begin() for this search
            outcome: The search outcome

        Returns:
            True if the outcome was stored, False if it was stale and discarded
        """
        with self._lock:
            if generation != self._generation:
                logger.debug("Discarding stale search outcome: generation %d, current %d",
                             generation, self._generation)
                return False
            self._outcome = outcome.model_copy(update={"generation": generation})
            self._in_flight = False
            return True

    def reset(self) -> None:
        """Clear results and invalidate any in-flight search."""
        with self._lock:
            self._generation += 1
            self._outcome = None
            self._in_flight = False
