"""
In-memory implementation of ExercisesRepository.
"""
from typing import Dict, Iterable, List, Optional

from domain.models import Exercise


class InMemoryExercisesRepository:
    """Read-only catalog held in memory, in seed order."""

    def __init__(self, exercises: Iterable[Exercise]):
        self._exercises: List[Exercise] = list(exercises)
        self._by_id: Dict[str, Exercise] = {e.id: e for e in self._exercises}

    def get_all(self) -> List[Exercise]:
        # Exercise is frozen, sharing instances is safe
        return list(self._exercises)

    def get_by_id(self, exercise_id: str) -> Optional[Exercise]:
        return self._by_id.get(exercise_id)
