from typing import Any


class APIError(Exception):
    """A failure the client caused; the message is safe to send back as is."""

    status_code = 400

    def __init__(self, message: Any, status_code: int | None = None, headers: dict[str, str] | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        self.headers = headers or {}


class BadRequestError(APIError):
    status_code = 400


class NotFoundError(APIError):
    status_code = 404

    def __init__(self, message: str = "the requested resource could not be found"):
        super().__init__(message)


class FailedValidationError(APIError):
    status_code = 422

    def __init__(self, errors: dict[str, str]):
        super().__init__(dict(errors))
        self.errors = dict(errors)


class JSONEncodeError(Exception):
    """A response payload could not be serialized. Always a server side fault."""


class InvalidDecodeTargetError(TypeError):
    """read_json() was handed something it cannot decode into.

    Raised for a bug in the calling handler, so it is not an APIError and never
    becomes a 4xx response.
    """

    def __init__(self, target: Any):
        super().__init__(f"json: cannot decode into {target!r}, expected a pydantic model class")
        self.target = target
