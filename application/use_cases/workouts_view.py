"""
WorkoutsView use case - state behind the workouts page.

Holds the page's UI state (active tab, search query, dialog visibility) and
the authoritative workout collection, and mediates user actions against the
month grouping and catalog search.

Writes are two-phase: the local collection changes first, then the durable
write is issued through the WorkoutRepository. If that write fails the local
change is reversed and the user gets an error notification, so local and
stored state never silently diverge.

The controller is shared by every request, so all reads and transitions
run under one re-entrant lock; a write and its rollback are never
interleaved with another transition.
"""

import logging
from dataclasses import dataclass, field
from threading import RLock
from typing import Dict, List, Optional, Tuple, Union

from pydantic import BaseModel, Field

from application.ports import (
    ExercisesRepository,
    Notifier,
    WorkoutEntryForm,
    WorkoutRepository,
)
from backend.core.catalog import NO_RESULTS_MESSAGE, filter_exercises, find_exercise
from backend.core.grouping import MONTH_LABEL_FORMAT, group_by_month, to_month_buckets
from domain.models import (
    EmptyState,
    Exercise,
    FormContext,
    FormMode,
    FormOutcome,
    MonthBucket,
    NotificationKind,
    ViewTab,
    Workout,
)

logger = logging.getLogger(__name__)

HISTORY_EMPTY_STATE = EmptyState(
    title="No workouts yet",
    description=(
        'Click the "Log Workout" button to add your first workout '
        "and start earning XP!"
    ),
)
CATALOG_EMPTY_STATE = EmptyState(title=NO_RESULTS_MESSAGE)


@dataclass
class DeleteWorkoutResult:
    """Result of deleting a workout from the view."""

    success: bool
    workout_id: str
    removed: bool = False
    rolled_back: bool = False
    error: Optional[str] = None


@dataclass
class SaveWorkoutResult:
    """Result of adding or updating a workout from the entry form."""

    success: bool
    workout: Optional[Workout] = None
    is_update: bool = False
    rolled_back: bool = False
    error: Optional[str] = None
    validation_errors: List[str] = field(default_factory=list)


class WorkoutsViewSnapshot(BaseModel):
    """Everything the page renders, computed from the current state."""

    active_tab: ViewTab
    search_query: str
    dialog_open: bool
    form_context: Optional[FormContext] = None
    month_buckets: List[MonthBucket] = Field(default_factory=list)
    history_empty_state: Optional[EmptyState] = None
    exercises: List[Exercise] = Field(default_factory=list)
    catalog_empty_state: Optional[EmptyState] = None
    workout_count: int = 0


class WorkoutsViewController:
    """
    State machine for the workouts page.

    State is orthogonal: the active tab, the search query, dialog visibility
    and the workout collection change independently. Month buckets and the
    filtered catalog are recomputed from scratch whenever they are read.

    Dependencies are injected via constructor for testability.

    Usage:
        >>> view = WorkoutsViewController(
        ...     workout_repo=workout_repo,
        ...     exercises_repo=exercises_repo,
        ...     notifier=notifier,
        ... )
        >>> view.set_search_query("back")
        >>> [e.name for e in view.filtered_exercises]
        ['Deadlift', 'Pull-ups', 'Barbell Row']
        >>> result = view.delete_workout("2")
        >>> result.removed
        True
    """

    def __init__(
        self,
        workout_repo: WorkoutRepository,
        exercises_repo: ExercisesRepository,
        notifier: Notifier,
        entry_form: Optional[WorkoutEntryForm] = None,
        *,
        month_label_format: str = MONTH_LABEL_FORMAT,
    ) -> None:
        """
        Mount the view: load the catalog and the workout collection.

        Args:
            workout_repo: Store the workout collection is loaded from and written to
            exercises_repo: Read-only exercise catalog
            notifier: Sink for success/error notifications
            entry_form: Optional form collaborator opened with the dialog
            month_label_format: strftime format for month bucket labels
        """
        self._workout_repo = workout_repo
        self._notifier = notifier
        self._entry_form = entry_form
        self._month_label_format = month_label_format
        # Re-entrant: public operations call each other, and the entry form
        # may complete synchronously from inside open()
        self._lock = RLock()

        self._catalog: List[Exercise] = list(exercises_repo.get_all())
        self._workouts: List[Workout] = list(workout_repo.get_list())

        self._active_tab = ViewTab.HISTORY
        self._search_query = ""
        self._dialog_open = False
        self._form_context: Optional[FormContext] = None

        logger.info(
            "Workouts view mounted with %d workouts and %d catalog entries",
            len(self._workouts),
            len(self._catalog),
        )

    # -------------------------------------------------------------------------
    # State
    # -------------------------------------------------------------------------

    @property
    def active_tab(self) -> ViewTab:
        with self._lock:
            return self._active_tab

    @property
    def search_query(self) -> str:
        with self._lock:
            return self._search_query

    @property
    def dialog_open(self) -> bool:
        with self._lock:
            return self._dialog_open

    @property
    def form_context(self) -> Optional[FormContext]:
        """Context the entry form was last opened with, None when closed."""
        with self._lock:
            return self._form_context

    @property
    def workouts(self) -> Tuple[Workout, ...]:
        """Current workout collection in order (read-only copy)."""
        with self._lock:
            return tuple(self._workouts)

    @property
    def catalog(self) -> Tuple[Exercise, ...]:
        return tuple(self._catalog)

    # -------------------------------------------------------------------------
    # Derived views
    # -------------------------------------------------------------------------

    @property
    def month_buckets(self) -> Dict[str, List[Workout]]:
        """Workouts grouped by month, recomputed from the current collection."""
        with self._lock:
            return group_by_month(self._workouts, self._month_label_format)

    @property
    def filtered_exercises(self) -> List[Exercise]:
        """Catalog entries matching the current search query."""
        with self._lock:
            return filter_exercises(self._catalog, self._search_query)

    @property
    def history_empty_state(self) -> Optional[EmptyState]:
        with self._lock:
            return HISTORY_EMPTY_STATE if not self._workouts else None

    @property
    def catalog_empty_state(self) -> Optional[EmptyState]:
        return CATALOG_EMPTY_STATE if not self.filtered_exercises else None

    def snapshot(self) -> WorkoutsViewSnapshot:
        """Build the full render model for the current state."""
        with self._lock:
            exercises = self.filtered_exercises
            return WorkoutsViewSnapshot(
                active_tab=self._active_tab,
                search_query=self._search_query,
                dialog_open=self._dialog_open,
                form_context=self._form_context,
                month_buckets=to_month_buckets(self.month_buckets),
                history_empty_state=self.history_empty_state,
                exercises=exercises,
                catalog_empty_state=None if exercises else CATALOG_EMPTY_STATE,
                workout_count=len(self._workouts),
            )

    # -------------------------------------------------------------------------
    # Tab and search
    # -------------------------------------------------------------------------

    def select_tab(self, tab: Union[ViewTab, str]) -> ViewTab:
        """
        Switch the visible tab. Does not touch any data.

        Raises:
            ValueError: If tab is not a known tab value
        """
        selected = ViewTab(tab)
        with self._lock:
            self._active_tab = selected
            return selected

    def set_search_query(self, query: str) -> List[Exercise]:
        """
        Update the catalog search text and return the new filtered catalog.

        Called on every keystroke; no debounce.
        """
        with self._lock:
            self._search_query = query
            return self.filtered_exercises

    # -------------------------------------------------------------------------
    # Dialog
    # -------------------------------------------------------------------------

    def open_add_dialog(self, exercise: Optional[Exercise] = None) -> FormContext:
        """
        Open the "Log Workout" dialog.

        Args:
            exercise: Catalog entry to pre-fill, when opened from the catalog

        Returns:
            The context the entry form was opened with
        """
        return self._open_form(FormContext(mode=FormMode.CREATE, exercise=exercise))

    def close_add_dialog(self) -> None:
        with self._lock:
            self._dialog_open = False
            self._form_context = None

    def select_exercise(self, exercise_id: str) -> FormContext:
        """
        Open the add dialog from a catalog entry.

        The selected entry is handed to the form so it can pre-fill the new
        workout. An unknown id still opens a plain add dialog.
        """
        exercise = find_exercise(self._catalog, exercise_id)
        if exercise is None:
            logger.warning(f"Selected exercise not in catalog: {exercise_id}")
        return self.open_add_dialog(exercise)

    def edit_workout(self, workout_id: str) -> Optional[FormContext]:
        """
        Open the entry form in edit mode for an existing workout.

        Editing itself is the form's job; the result comes back through
        complete_form(). Unknown ids are a no-op.
        """
        with self._lock:
            index = self._index_of(workout_id)
            if index is None:
                logger.debug(f"Edit requested for missing workout: {workout_id}")
                return None
            return self._open_form(
                FormContext(mode=FormMode.EDIT, workout=self._workouts[index])
            )

    def complete_form(self, outcome: FormOutcome) -> Optional[SaveWorkoutResult]:
        """
        Completion callback handed to the entry form.

        A form opened for editing may only submit the workout it was opened
        with; a submission carrying another id is rejected without touching
        the collection.

        Args:
            outcome: Cancellation or the submitted workout

        Returns:
            SaveWorkoutResult for a submission, None for a cancellation
        """
        with self._lock:
            if outcome.cancelled:
                logger.info("Entry form cancelled")
                self.close_add_dialog()
                return None

            context = self._form_context
            if context is None or context.mode != FormMode.EDIT:
                return self.on_workout_added(outcome.workout)

            expected_id = context.workout.id
            if outcome.workout.id != expected_id:
                logger.warning(
                    f"Edit form for {expected_id} submitted workout {outcome.workout.id}"
                )
                self.close_add_dialog()
                self._notifier.notify(NotificationKind.ERROR, "Failed to update workout")
                return SaveWorkoutResult(
                    success=False,
                    workout=outcome.workout,
                    is_update=True,
                    error=(
                        f"Submitted workout '{outcome.workout.id}' does not match "
                        f"edited workout '{expected_id}'"
                    ),
                    validation_errors=["Workout id changed during edit"],
                )
            return self.on_workout_updated(outcome.workout)

    def _open_form(self, context: FormContext) -> FormContext:
        with self._lock:
            self._dialog_open = True
            self._form_context = context
            logger.info(f"Entry form opened ({context.mode.value})")
            if self._entry_form is not None:
                self._entry_form.open(context, self.complete_form)
            return context

    # -------------------------------------------------------------------------
    # Collection writes
    # -------------------------------------------------------------------------

    def on_workout_added(self, workout: Workout) -> SaveWorkoutResult:
        """
        Append a workout produced by the entry form.

        The workout is appended locally and the dialog closes, then the store
        is asked to create it. A store failure removes it again.

        Args:
            workout: Complete workout from the form

        Returns:
            SaveWorkoutResult with success status
        """
        with self._lock:
            if self._index_of(workout.id) is not None:
                logger.warning(f"Rejecting duplicate workout id: {workout.id}")
                self._notifier.notify(
                    NotificationKind.ERROR, "A workout with this id already exists"
                )
                return SaveWorkoutResult(
                    success=False,
                    workout=workout,
                    error=f"Workout '{workout.id}' already exists",
                    validation_errors=["Duplicate workout id"],
                )

            self._workouts.append(workout)
            self.close_add_dialog()

            try:
                stored = self._workout_repo.create(workout)
            except Exception as e:
                logger.exception(f"Creating workout {workout.id} failed: {e}")
                index = self._index_of(workout.id)
                if index is not None:
                    del self._workouts[index]
                self._notifier.notify(NotificationKind.ERROR, "Failed to log workout")
                return SaveWorkoutResult(
                    success=False,
                    workout=workout,
                    rolled_back=True,
                    error=str(e),
                )

            self._replace(stored)
            logger.info(f"Workout logged: {stored.id} ({stored.name})")
            self._notifier.notify(NotificationKind.SUCCESS, "Workout logged successfully")
            return SaveWorkoutResult(success=True, workout=stored)

    def on_workout_updated(self, workout: Workout) -> SaveWorkoutResult:
        """
        Replace an existing workout, in place, with its edited version.

        Args:
            workout: Edited workout; its id selects the record to replace

        Returns:
            SaveWorkoutResult with success status
        """
        with self._lock:
            index = self._index_of(workout.id)
            self.close_add_dialog()
            if index is None:
                logger.warning(f"Update for missing workout: {workout.id}")
                self._notifier.notify(NotificationKind.ERROR, "Workout no longer exists")
                return SaveWorkoutResult(
                    success=False,
                    workout=workout,
                    is_update=True,
                    error=f"Workout '{workout.id}' not found",
                )

            previous = self._workouts[index]
            self._workouts[index] = workout

            try:
                stored = self._workout_repo.update(workout)
            except Exception as e:
                logger.exception(f"Updating workout {workout.id} failed: {e}")
                self._replace(previous)
                self._notifier.notify(NotificationKind.ERROR, "Failed to update workout")
                return SaveWorkoutResult(
                    success=False,
                    workout=previous,
                    is_update=True,
                    rolled_back=True,
                    error=str(e),
                )

            self._replace(stored)
            logger.info(f"Workout updated: {stored.id}")
            self._notifier.notify(NotificationKind.SUCCESS, "Workout updated successfully")
            return SaveWorkoutResult(success=True, workout=stored, is_update=True)

    def delete_workout(self, workout_id: str) -> DeleteWorkoutResult:
        """
        Remove a workout by id.

        An id that is not in the collection is a benign no-op (the record may
        already be gone): nothing changes and nobody is notified.

        The store call happens while the lock is held, so the remembered
        index is still valid if the workout has to be put back.

        Args:
            workout_id: Identifier of the workout to delete

        Returns:
            DeleteWorkoutResult; rolled_back is True when the store failed and
            the workout was put back in its original position
        """
        with self._lock:
            index = self._index_of(workout_id)
            if index is None:
                logger.debug(f"Delete ignored, workout not in view: {workout_id}")
                return DeleteWorkoutResult(success=True, workout_id=workout_id)

            removed = self._workouts.pop(index)

            try:
                existed = self._workout_repo.delete(workout_id)
            except Exception as e:
                logger.exception(f"Deleting workout {workout_id} failed: {e}")
                self._workouts.insert(index, removed)
                self._notifier.notify(NotificationKind.ERROR, "Failed to delete workout")
                return DeleteWorkoutResult(
                    success=False,
                    workout_id=workout_id,
                    rolled_back=True,
                    error=str(e),
                )

            if not existed:
                logger.info(f"Workout {workout_id} was already absent from the store")

            logger.info(f"Workout deleted: {workout_id}")
            self._notifier.notify(NotificationKind.SUCCESS, "Workout deleted successfully")
            return DeleteWorkoutResult(success=True, workout_id=workout_id, removed=True)

    # -------------------------------------------------------------------------
    # Helpers (callers hold the lock)
    # -------------------------------------------------------------------------

    def _index_of(self, workout_id: str) -> Optional[int]:
        for i, workout in enumerate(self._workouts):
            if workout.id == workout_id:
                return i
        return None

    def _replace(self, workout: Workout) -> None:
        index = self._index_of(workout.id)
        if index is not None:
            self._workouts[index] = workout
