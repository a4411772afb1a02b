"""
YAML seed loading for the in-memory stores.

Seed files are lists of mappings whose keys match the domain model fields.
"""
import logging
import pathlib
from typing import Any, List, Union

import yaml

from domain.models import Exercise, Workout

logger = logging.getLogger(__name__)

PathLike = Union[str, pathlib.Path]


def _load_list(path: PathLike) -> List[Any]:
    data = yaml.safe_load(pathlib.Path(path).read_text(encoding="utf-8"))
    if data is None:
        return []
    if not isinstance(data, list):
        raise ValueError(f"Seed file {path} must contain a list, got {type(data).__name__}")
    return data


def load_seed_exercises(path: PathLike) -> List[Exercise]:
    """Load catalog entries from a YAML file."""
    exercises = [Exercise.model_validate(item) for item in _load_list(path)]
    logger.info(f"Loaded {len(exercises)} catalog entries from {path}")
    return exercises


def load_seed_workouts(path: PathLike) -> List[Workout]:
    """Load workouts from a YAML file, in file order."""
    workouts = [Workout.model_validate(item) for item in _load_list(path)]
    logger.info(f"Loaded {len(workouts)} workouts from {path}")
    return workouts
