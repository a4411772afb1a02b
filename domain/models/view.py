"""
View-level value objects for the workouts page.

These types describe what the page is currently showing. None of them are
persisted.
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field, computed_field, model_validator

from domain.models.exercise import Exercise
from domain.models.workout import Workout


class ViewTab(str, Enum):
    """Tabs of the workouts page."""

    HISTORY = "history"
    CATALOG = "exercises"


class NotificationKind(str, Enum):
    """Severity of a user-visible notification."""

    SUCCESS = "success"
    ERROR = "error"


class FormMode(str, Enum):
    """Mode the workout entry form is opened in."""

    CREATE = "create"
    EDIT = "edit"


class MonthBucket(BaseModel):
    """Workouts sharing a calendar month and year, in source order."""

    label: str = Field(..., description="Month label, e.g. 'April 2023'")
    workouts: List[Workout] = Field(default_factory=list)

    @computed_field
    @property
    def total_xp(self) -> int:
        return sum(w.xp_gained for w in self.workouts)


class EmptyState(BaseModel):
    """Message rendered in place of an empty list."""

    title: str
    description: Optional[str] = None


class FormContext(BaseModel):
    """
    What the entry form is opened with.

    `exercise` is set when the dialog was opened from a catalog entry so the
    form can pre-fill it. `workout` is set in edit mode.
    """

    mode: FormMode = FormMode.CREATE
    exercise: Optional[Exercise] = None
    workout: Optional[Workout] = None

    @model_validator(mode="after")
    def validate_edit_target(self) -> "FormContext":
        if self.mode == FormMode.EDIT and self.workout is None:
            raise ValueError("Edit mode requires the workout being edited")
        return self


class FormOutcome(BaseModel):
    """
    Completion value reported by the entry form.

    Either the user cancelled, or the form produced a complete workout.

    Examples:
        >>> FormOutcome.cancel().cancelled
        True
    """

    cancelled: bool = False
    workout: Optional[Workout] = None

    @model_validator(mode="after")
    def validate_outcome(self) -> "FormOutcome":
        if self.cancelled and self.workout is not None:
            raise ValueError("A cancelled form cannot carry a workout")
        if not self.cancelled and self.workout is None:
            raise ValueError("A submitted form must carry a workout")
        return self

    @classmethod
    def cancel(cls) -> "FormOutcome":
        return cls(cancelled=True)

    @classmethod
    def submit(cls, workout: Workout) -> "FormOutcome":
        return cls(workout=workout)
