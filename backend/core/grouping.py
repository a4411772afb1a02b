"""
Month grouping for the workout history.

Workouts are bucketed by a "Month Year" label in a single left-to-right pass.
Bucket order is the order in which each month first appears in the input and
every bucket keeps the input's relative order, so no sorting happens here.
"""

import datetime
from typing import Dict, Iterable, List, Union

from domain.models import MonthBucket, Workout

# Locale-dependent full month name and four-digit year, e.g. "April 2023"
MONTH_LABEL_FORMAT = "%B %Y"


def month_label(
    value: Union[datetime.date, datetime.datetime],
    fmt: str = MONTH_LABEL_FORMAT,
) -> str:
    """
    Format a date as its month bucket label.

    Two dates produce the same label exactly when they fall in the same
    calendar month of the same year; day and time of day are ignored.

    Args:
        value: Date (or datetime) to label
        fmt: strftime format, must only reference month and year fields

    Returns:
        Month label such as "April 2023"
    """
    if isinstance(value, datetime.datetime):
        value = value.date()
    return value.replace(day=1).strftime(fmt)


def group_by_month(
    workouts: Iterable[Workout],
    fmt: str = MONTH_LABEL_FORMAT,
) -> Dict[str, List[Workout]]:
    """
    Partition workouts into month buckets.

    Args:
        workouts: Ordered workouts, possibly empty
        fmt: Month label format

    Returns:
        Mapping of month label to workouts in source order. Iteration order
        is first-occurrence order of each month. Empty input gives an empty
        mapping, never a bucket without workouts.
    """
    groups: Dict[str, List[Workout]] = {}
    for workout in workouts:
        groups.setdefault(month_label(workout.date, fmt), []).append(workout)
    return groups


def to_month_buckets(groups: Dict[str, List[Workout]]) -> List[MonthBucket]:
    """Convert a grouping into ordered MonthBucket models for rendering."""
    return [
        MonthBucket(label=label, workouts=list(workouts))
        for label, workouts in groups.items()
    ]
