"""
Exercises Repository Interface (Port).

This module defines the abstract interface for reading the exercise catalog.
The catalog is reference data; the workouts page never writes to it.
"""
from typing import List, Optional, Protocol

from domain.models import Exercise


class ExercisesRepository(Protocol):
    """Read-only access to the exercise catalog."""

    def get_all(self) -> List[Exercise]:
        """
        Get every catalog entry.

        Returns:
            Catalog entries in display order
        """
        ...

    def get_by_id(self, exercise_id: str) -> Optional[Exercise]:
        """
        Get a catalog entry by id.

        Args:
            exercise_id: Catalog identifier

        Returns:
            Exercise or None if not found
        """
        ...
