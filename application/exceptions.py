"""
Application-layer exceptions.

These exceptions are used across application and infrastructure layers.
"""
from typing import Optional


class PersistenceError(Exception):
    """Raised by store adapters when a create, update or delete fails."""

    def __init__(self, message: str, workout_id: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.workout_id = workout_id
