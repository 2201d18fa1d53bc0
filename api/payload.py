"""Request body parsing shared by the exercise routes."""

from typing import Any, Dict
from fastapi import Request
from services.errors import ServiceError


async def read_body(request: Request) -> Dict[str, Any]:
    """
    Read a request body sent either as JSON or as an HTML form.

    Form submissions arrive as ``application/x-www-form-urlencoded``; anything
    declared as JSON is decoded as JSON and must be an object.
    """
    content_type = request.headers.get("content-type", "")
    if "application/json" in content_type:
        try:
            data = await request.json()
        except ValueError:
            raise ServiceError("Malformed JSON body", status_code=400)
        if not isinstance(data, dict):
            raise ServiceError("Request body must be an object", status_code=400)
        return data

    form = await request.form()
    return {key: value for key, value in form.items()}
