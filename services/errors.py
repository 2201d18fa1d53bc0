"""Service-level errors mapped to HTTP responses by the API layer."""


class ServiceError(Exception):
    """Base error carrying the HTTP status the API should answer with."""

    status_code = 500

    def __init__(self, message: str, status_code: int = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class UserNotFoundError(ServiceError):
    """Raised when a userId does not match any stored user."""

    status_code = 404

    def __init__(self, user_id: str):
        super().__init__("unknown userId")
        self.user_id = user_id


class InvalidQueryError(ServiceError):
    """Raised when a query parameter cannot be interpreted."""

    status_code = 400


class UsernameTakenError(ServiceError):
    """Raised when registering a username that already exists."""

    status_code = 403

    def __init__(self, username: str):
        super().__init__(f"User {username} already exists")
        self.username = username
