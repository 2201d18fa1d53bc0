"""User registration and listing."""

from typing import Any, Dict, List
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo.errors import DuplicateKeyError
from services.errors import ServiceError, UsernameTakenError
from utils.helpers import generate_short_id
from utils.logger import setup_logger

logger = setup_logger(__name__)

# Fresh ids tried before giving up on an _id collision
MAX_ID_ATTEMPTS = 5


def _is_id_collision(error: DuplicateKeyError) -> bool:
    details = error.details or {}
    if "_id" in (details.get("keyValue") or {}):
        return True
    return "_id_ " in details.get("errmsg", str(error))


async def create_user(users: AsyncIOMotorCollection, username: str) -> Dict[str, Any]:
    """
    Persist a new user with an empty log.

    Uniqueness is enforced by the index on ``username``; a duplicate insert
    becomes ``UsernameTakenError``. A clash on the generated ``_id`` is
    retried with a new id.
    """
    for _ in range(MAX_ID_ATTEMPTS):
        document = {"_id": generate_short_id(), "username": username, "log": []}
        try:
            await users.insert_one(document)
        except DuplicateKeyError as exc:
            if not _is_id_collision(exc):
                raise UsernameTakenError(username)
            logger.warning(f"Generated id {document['_id']} already in use, retrying")
            continue
        logger.info(f"Created user {username} with id {document['_id']}")
        return {"_id": document["_id"], "username": username}

    raise ServiceError("Could not allocate a user id")
