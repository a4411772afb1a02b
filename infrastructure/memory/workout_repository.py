"""
In-memory implementation of WorkoutRepository.

Keeps workouts in a list so the seeded display order survives; writes are
applied immediately and never fail except on id conflicts.
"""
import logging
from typing import Iterable, List, Optional

from application.exceptions import PersistenceError
from domain.models import Workout

logger = logging.getLogger(__name__)


class InMemoryWorkoutRepository:
    """
    In-memory WorkoutRepository.

    Stored workouts are copied on the way in and out so callers cannot mutate
    the store through a returned model.
    """

    def __init__(self, workouts: Optional[Iterable[Workout]] = None):
        self._workouts: List[Workout] = [
            w.model_copy(deep=True) for w in (workouts or [])
        ]

    def _index_of(self, workout_id: str) -> Optional[int]:
        for i, workout in enumerate(self._workouts):
            if workout.id == workout_id:
                return i
        return None

    def get_list(self) -> List[Workout]:
        return [w.model_copy(deep=True) for w in self._workouts]

    def create(self, workout: Workout) -> Workout:
        if self._index_of(workout.id) is not None:
            raise PersistenceError(
                f"Workout '{workout.id}' already exists", workout_id=workout.id
            )
        self._workouts.append(workout.model_copy(deep=True))
        logger.debug(f"Stored workout {workout.id}")
        return workout.model_copy(deep=True)

    def update(self, workout: Workout) -> Workout:
        index = self._index_of(workout.id)
        if index is None:
            raise PersistenceError(
                f"Workout '{workout.id}' not found", workout_id=workout.id
            )
        self._workouts[index] = workout.model_copy(deep=True)
        return workout.model_copy(deep=True)

    def delete(self, workout_id: str) -> bool:
        index = self._index_of(workout_id)
        if index is None:
            return False
        del self._workouts[index]
        logger.debug(f"Removed workout {workout_id}")
        return True
