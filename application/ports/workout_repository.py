"""
Workout Repository Interface (Port).

This module defines the abstract interface for workout persistence operations.
Implementations may keep workouts in memory, in a file, or behind a network
service.
"""
from typing import List, Protocol

from domain.models import Workout


class WorkoutRepository(Protocol):
    """
    Abstract interface for the workout store.

    The view loads everything once at mount time and then issues single-record
    writes keyed by workout id. Write failures are reported by raising
    application.exceptions.PersistenceError.
    """

    def get_list(self) -> List[Workout]:
        """
        Load all workouts.

        Returns:
            Workouts in display order (most recent first by convention)
        """
        ...

    def create(self, workout: Workout) -> Workout:
        """
        Persist a new workout.

        Args:
            workout: Complete workout produced by the entry form

        Returns:
            The stored workout

        Raises:
            PersistenceError: If the write failed
        """
        ...

    def update(self, workout: Workout) -> Workout:
        """
        Replace the stored workout with the same id.

        Args:
            workout: Edited workout

        Returns:
            The stored workout

        Raises:
            PersistenceError: If the write failed or the id is unknown
        """
        ...

    def delete(self, workout_id: str) -> bool:
        """
        Delete a workout.

        Args:
            workout_id: Workout identifier

        Returns:
            True if deleted, False if it did not exist

        Raises:
            PersistenceError: If the write failed
        """
        ...
