"""Exercise logging and log queries."""

from typing import Any, Dict, Optional
from motor.motor_asyncio import AsyncIOMotorCollection
from schemas.exercise import ExerciseCreate
from services.errors import InvalidQueryError, UserNotFoundError
from utils.helpers import filter_log, parse_date, parse_limit, utc_now
from utils.logger import setup_logger

logger = setup_logger(__name__)


async def add_exercise(users: AsyncIOMotorCollection, payload: ExerciseCreate) -> Dict[str, Any]:
    """Append an exercise to the user's log and return the updated user."""
    exercise = {
        "description": payload.description,
        "duration": payload.duration,
        "date": payload.date or utc_now(),
    }

    result = await users.update_one({"_id": payload.user_id}, {"$push": {"log": exercise}})
    if result.matched_count == 0:
        raise UserNotFoundError(payload.user_id)

    user = await users.find_one({"_id": payload.user_id})
    if user is None:
        raise UserNotFoundError(payload.user_id)

    logger.info(f"Added exercise for user {payload.user_id}: {payload.description}")
    return user


async def get_log(
    users: AsyncIOMotorCollection,
    user_id: str,
    date_from: Optional[str] = None,
    date_to: Optional[str] = None,
    limit: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Return the user with the log sliced to ``[from, to)`` and capped at ``limit``.

    Raw query strings are interpreted here: a bad date is an error, a bad
    limit is ignored.
    """
    try:
        start = parse_date(date_from)
        end = parse_date(date_to)
    except ValueError:
        raise InvalidQueryError("Invalid date, expected YYYY-MM-DD")

    user = await users.find_one({"_id": user_id})
    if user is None:
        raise UserNotFoundError(user_id)

    log = filter_log(user.get("log", []), start, end, parse_limit(limit))
    return {
        "_id": user["_id"],
        "username": user["username"],
        "count": len(log),
        "log": log,
    }
