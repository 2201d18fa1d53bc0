"""Collection and request schemas."""

from schemas.exercise import Exercise, ExerciseCreate
from schemas.user import UserCreate, UserSummary, User, UserLog

__all__ = [
    "Exercise",
    "ExerciseCreate",
    "UserCreate",
    "UserSummary",
    "User",
    "UserLog",
]
