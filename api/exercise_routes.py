"""Exercise tracker routes."""

from typing import Any, Dict, List, Optional
from fastapi import APIRouter, Depends, Query
from motor.motor_asyncio import AsyncIOMotorCollection
from api.payload import read_body
from models.database import get_users_collection
from schemas.exercise import ExerciseCreate
from schemas.user import User, UserCreate, UserLog, UserSummary
from services.exercise_service import add_exercise, get_log
from services.user_service import create_user, list_users
from utils.logger import setup_logger

logger = setup_logger(__name__)

router = APIRouter(prefix="/api/exercise", tags=["exercise"])


@router.post("/new-user", response_model=UserSummary)
async def new_user(
    body: Dict[str, Any] = Depends(read_body),
    users: AsyncIOMotorCollection = Depends(get_users_collection),
):
    """Register a username and return its generated id."""
    payload = UserCreate.model_validate(body)
    return await create_user(users, payload.username)


@router.get("/users", response_model=List[UserSummary])
async def get_users(users: AsyncIOMotorCollection = Depends(get_users_collection)):
    """List every registered user."""
    return await list_users(users)


@router.post("/add", response_model=User)
async def add(
    body: Dict[str, Any] = Depends(read_body),
    users: AsyncIOMotorCollection = Depends(get_users_collection),
):
    """
    Append an exercise to a user's log.

    ``date`` is optional; when it is missing or blank the current time is used.
    """
    payload = ExerciseCreate.model_validate(body)
    return await add_exercise(users, payload)


@router.get("/log", response_model=UserLog)
async def log(
    user_id: str = Query(..., alias="userId", description="User identifier"),
    date_from: Optional[str] = Query(None, alias="from", description="Inclusive lower bound"),
    date_to: Optional[str] = Query(None, alias="to", description="Exclusive upper bound"),
    limit: Optional[str] = Query(None, description="Maximum number of entries"),
    users: AsyncIOMotorCollection = Depends(get_users_collection),
):
    """Return a user's log sorted by date, sliced to [from, to) and capped at limit."""
    return await get_log(users, user_id, date_from, date_to, limit)
