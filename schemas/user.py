"""User collection schema."""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import List
from .exercise import Exercise


class UserCreate(BaseModel):
    """Body of POST /api/exercise/new-user."""
    username: str = Field(..., description="Unique username")

    @field_validator("username")
    @classmethod
    def check_username(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Path `username` is required.")
        return value


class UserSummary(BaseModel):
    """User identifier and name, without the log."""
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., alias="_id", description="Short user identifier")
    username: str = Field(..., description="Unique username")


class User(UserSummary):
    """User collection model."""
    log: List[Exercise] = Field(default_factory=list, description="Exercise log in insertion order")


class UserLog(UserSummary):
    """User with a filtered exercise log."""
    count: int = Field(..., description="Number of entries in the returned log")
    log: List[Exercise] = Field(default_factory=list, description="Filtered log, earliest first")
