"""
Workout aggregate root - one logged exercise session.
"""

import datetime
from typing import Any, List, Optional, Tuple

from pydantic import BaseModel, Field, computed_field, field_validator

from domain.models.exercise import PerformedExercise


class Workout(BaseModel):
    """
    A logged workout session on a given calendar date.

    The relative `display_date` label ("Today", "3 days ago") is supplied by
    whoever creates the record; it is never derived from `date` here.

    Examples:
        >>> from datetime import date
        >>> workout = Workout(
        ...     id="1",
        ...     name="Chest Day",
        ...     date=date(2023, 4, 10),
        ...     display_date="Today",
        ...     exercises=[
        ...         PerformedExercise(
        ...             id="e1", name="Bench Press", sets=3, reps=10, weight="80kg"
        ...         ),
        ...     ],
        ...     xp_gained=100,
        ... )
        >>> workout.heading
        'Chest Day • Today'
        >>> workout.subtitle
        '1 exercises • +100 XP'
    """

    # Identity
    id: str = Field(..., min_length=1, description="Unique workout identifier")
    name: str = Field(..., min_length=1, max_length=200, description="Workout name")

    # When
    date: datetime.date = Field(..., description="Calendar date the workout took place")
    display_date: str = Field(
        default="",
        description="Human-readable relative label supplied by the caller",
    )

    # What
    exercises: List[PerformedExercise] = Field(
        default_factory=list,
        description="Exercises performed, in logged order",
    )
    notes: Optional[str] = Field(
        default=None, max_length=2000, description="Free-text notes"
    )

    # Reward
    xp_gained: int = Field(default=0, ge=0, description="Experience points earned")

    @field_validator("date", mode="before")
    @classmethod
    def drop_time_of_day(cls, v: Any) -> Any:
        """Reduce datetimes to their calendar date."""
        if isinstance(v, datetime.datetime):
            return v.date()
        return v

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------

    @property
    def month_key(self) -> Tuple[int, int]:
        """(year, month) pair of the workout date."""
        return self.date.year, self.date.month

    @computed_field
    @property
    def exercise_count(self) -> int:
        return len(self.exercises)

    @computed_field
    @property
    def has_notes(self) -> bool:
        return bool(self.notes and self.notes.strip())

    @computed_field
    @property
    def heading(self) -> str:
        """Card title: name plus relative date when one was supplied."""
        if not self.display_date:
            return self.name
        return f"{self.name} • {self.display_date}"

    @computed_field
    @property
    def subtitle(self) -> str:
        """Card subtitle: exercise count and XP reward."""
        return f"{self.exercise_count} exercises • +{self.xp_gained} XP"
