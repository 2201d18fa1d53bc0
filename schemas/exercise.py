"""Exercise sub-document schema."""

from datetime import datetime
from typing import Optional, Union
from pydantic import BaseModel, ConfigDict, Field, FiniteFloat, field_validator
from utils.helpers import parse_date, to_utc_naive


def _required(field: str, value: str) -> str:
    value = value.strip()
    if not value:
        raise ValueError(f"Path `{field}` is required.")
    return value


class Exercise(BaseModel):
    """Exercise entry as stored in a user's log."""
    description: str = Field(..., description="What was done")
    duration: Union[int, float] = Field(..., description="Duration in minutes")
    date: datetime = Field(..., description="When the exercise happened (UTC)")


class ExerciseCreate(BaseModel):
    """Body of POST /api/exercise/add."""
    model_config = ConfigDict(populate_by_name=True)

    user_id: str = Field(..., alias="userId", description="Owner of the log")
    description: str = Field(..., description="What was done")
    duration: Union[int, FiniteFloat] = Field(..., description="Duration in minutes")
    date: Optional[datetime] = Field(None, description="Defaults to now when omitted or blank")

    @field_validator("user_id")
    @classmethod
    def check_user_id(cls, value: str) -> str:
        return _required("userId", value)

    @field_validator("description")
    @classmethod
    def check_description(cls, value: str) -> str:
        return _required("description", value)

    @field_validator("date", mode="before")
    @classmethod
    def parse_date_string(cls, value):
        # An empty form field means "use the current time"
        if isinstance(value, str):
            try:
                return parse_date(value)
            except ValueError:
                raise ValueError(f"Invalid date: {value}")
        return value

    @field_validator("date")
    @classmethod
    def normalize_date(cls, value: Optional[datetime]) -> Optional[datetime]:
        return to_utc_naive(value) if value is not None else None
