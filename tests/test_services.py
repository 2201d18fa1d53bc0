"""Service-level tests run directly against the fake collection."""
import asyncio

import pytest

from models.database import get_database
from services.errors import InvalidQueryError, ServiceError, UserNotFoundError, UsernameTakenError
from services.exercise_service import get_log
from services.user_service import create_user, list_users


def test_create_user_duplicate_raises(users):
    asyncio.run(create_user(users, "alice"))
    with pytest.raises(UsernameTakenError) as exc_info:
        asyncio.run(create_user(users, "alice"))
    assert exc_info.value.status_code == 403


def test_list_users_projects_out_log(users):
    users.seed([{"_id": "abc", "username": "alice", "log": [{"description": "x"}]}])
    assert asyncio.run(list_users(users)) == [{"_id": "abc", "username": "alice"}]


def test_get_log_unknown_user(users):
    with pytest.raises(UserNotFoundError):
        asyncio.run(get_log(users, "missing"))


def test_get_log_bad_date(users):
    users.seed([{"_id": "abc", "username": "alice", "log": []}])
    with pytest.raises(InvalidQueryError):
        asyncio.run(get_log(users, "abc", date_to="soon"))


def test_get_database_requires_connection():
    with pytest.raises(RuntimeError):
        get_database()


def test_create_user_retries_on_id_collision(users, monkeypatch):
    users.seed([{"_id": "taken", "username": "bob", "log": []}])
    ids = iter(["taken", "fresh"])
    monkeypatch.setattr("services.user_service.generate_short_id", lambda: next(ids))

    created = asyncio.run(create_user(users, "alice"))

    assert created == {"_id": "fresh", "username": "alice"}
    assert users.documents["taken"]["username"] == "bob"


def test_create_user_gives_up_on_repeated_id_collisions(users, monkeypatch):
    users.seed([{"_id": "taken", "username": "bob", "log": []}])
    monkeypatch.setattr("services.user_service.generate_short_id", lambda: "taken")

    with pytest.raises(ServiceError) as exc_info:
        asyncio.run(create_user(users, "alice"))
    assert not isinstance(exc_info.value, UsernameTakenError)
    assert exc_info.value.status_code == 500
