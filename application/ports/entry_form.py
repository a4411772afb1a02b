"""
Workout Entry Form Interface (Port).

The entry form owns its own fields and validation. The workouts page only
opens it and receives a completion value.
"""
from typing import Callable, Protocol

from domain.models import FormContext, FormOutcome

FormCompletionCallback = Callable[[FormOutcome], None]


class WorkoutEntryForm(Protocol):
    """Form component that produces a complete Workout or a cancellation."""

    def open(self, context: FormContext, on_complete: FormCompletionCallback) -> None:
        """
        Show the form.

        Args:
            context: Mode plus optional pre-selected exercise or edited workout
            on_complete: Called exactly once with the outcome
        """
        ...
