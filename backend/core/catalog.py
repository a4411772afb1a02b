"""
Exercise catalog search.

The catalog is small, so every query change re-filters the whole list.
"""

from typing import Iterable, List, Optional

from domain.models import Exercise

NO_RESULTS_MESSAGE = "No exercises found matching your search"


def filter_exercises(catalog: Iterable[Exercise], query: str) -> List[Exercise]:
    """
    Filter catalog entries by free-text query.

    An entry matches when the lowercase query is a substring of its lowercase
    name or muscle group. The empty query matches every entry. The query is
    not stripped or otherwise normalized.

    Args:
        catalog: Catalog entries in display order
        query: Search text as typed

    Returns:
        Matching entries, original relative order preserved
    """
    return [exercise for exercise in catalog if exercise.matches(query or "")]


def find_exercise(catalog: Iterable[Exercise], exercise_id: str) -> Optional[Exercise]:
    """Return the catalog entry with the given id, or None."""
    return next((e for e in catalog if e.id == exercise_id), None)
