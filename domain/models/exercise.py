"""
Exercise value objects.

Two distinct concepts share the word "exercise":
- Exercise: a catalog entry (reference definition, name + muscle group)
- PerformedExercise: one exercise's sets/reps/weight inside a logged Workout

A PerformedExercise carries a denormalized copy of the exercise name rather
than a reference to the catalog.
"""

from pydantic import BaseModel, ConfigDict, Field, computed_field


class Exercise(BaseModel):
    """
    Catalog entry describing an exercise independent of any session.

    Catalog entries are immutable reference data owned by the exercises
    repository.

    Examples:
        >>> entry = Exercise(id="2", name="Deadlift", muscle_group="Back")
        >>> entry.matches("back")
        True
        >>> entry.matches("legs")
        False
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1, description="Unique catalog identifier")
    name: str = Field(..., min_length=1, description="Exercise display name")
    muscle_group: str = Field(..., description="Muscle group label (e.g., 'Back')")

    def matches(self, query: str) -> bool:
        """
        Check whether a free-text query hits this entry.

        The query matches when its lowercase form is a substring of the
        lowercase name or the lowercase muscle group. Whitespace and
        punctuation are compared as-is.

        Args:
            query: Search text as typed by the user

        Returns:
            True if the entry matches (always True for an empty query)
        """
        needle = query.lower()
        return needle in self.name.lower() or needle in self.muscle_group.lower()


class PerformedExercise(BaseModel):
    """
    An exercise as performed within a specific workout.

    `weight` is free-form on purpose ("80kg", "BW" for bodyweight).

    Examples:
        >>> performed = PerformedExercise(
        ...     id="e1", name="Bench Press", sets=3, reps=10, weight="80kg"
        ... )
        >>> performed.summary
        '3 sets × 10 reps • 80kg'
    """

    id: str = Field(..., min_length=1, description="Unique identifier within the log")
    name: str = Field(..., min_length=1, description="Exercise name (denormalized)")
    sets: int = Field(..., ge=1, description="Number of sets")
    reps: int = Field(..., ge=1, description="Reps per set")
    weight: str = Field(default="BW", description="Load as entered, e.g. '80kg' or 'BW'")

    @computed_field
    @property
    def total_reps(self) -> int:
        """Total reps across all sets."""
        return self.sets * self.reps

    @computed_field
    @property
    def summary(self) -> str:
        """One-line prescription shown under the exercise name."""
        return f"{self.sets} sets × {self.reps} reps • {self.weight}"
