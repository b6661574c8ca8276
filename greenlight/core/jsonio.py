import json
import re
from collections.abc import Mapping
from typing import TypeVar

from pydantic import BaseModel, ValidationError
from pydantic_core import PydanticSerializationError
from starlette.responses import Response

from greenlight.core.errors import BadRequestError, InvalidDecodeTargetError, JSONEncodeError
from greenlight.models.envelope import Envelope

ModelT = TypeVar("ModelT", bound=BaseModel)

_WHITESPACE = re.compile(r"[ \t\n\r]*")


def write_json(status: int, data: Envelope, headers: Mapping[str, str] | None = None) -> Response:
    """Serialize an envelope model into a JSON response.

    The body is tab indented and ends with a newline. ``headers`` may be None.
    Content-Type is always ``application/json``, whatever the caller passed.
    """
    if not isinstance(data, BaseModel):
        raise JSONEncodeError(f"cannot encode {type(data).__name__}, expected an envelope model")
    try:
        payload = data.model_dump(mode="json")
        body = json.dumps(payload, indent="\t", ensure_ascii=False, allow_nan=False) + "\n"
    except (PydanticSerializationError, TypeError, ValueError) as exc:
        raise JSONEncodeError(str(exc)) from exc

    merged = {key: value for key, value in (headers or {}).items() if key.lower() != "content-type"}
    return Response(content=body.encode("utf-8"), status_code=status, headers=merged, media_type="application/json")


def _reject_constant(name: str) -> None:
    # NaN and Infinity are accepted by the json module but are not JSON
    raise BadRequestError("body contains badly-formed JSON")


_decoder = json.JSONDecoder(parse_constant=_reject_constant)


def _byte_offset(text: str, index: int) -> int:
    return len(text[:index].encode("utf-8"))


def _is_truncated(exc: json.JSONDecodeError) -> bool:
    return exc.pos >= len(exc.doc) or exc.msg.startswith("Unterminated string")


def _type_error(exc: ValidationError, value_offset: int) -> BadRequestError:
    errors = exc.errors()
    for error in errors:
        if error["type"] == "invalid_runtime_format":
            return BadRequestError(error["msg"])

    field = ".".join(part for part in errors[0]["loc"] if isinstance(part, str))
    if field:
        return BadRequestError(f'body contains incorrect JSON type for field "{field}"')
    return BadRequestError(f"body contains incorrect JSON type (at character {value_offset})")


def read_json(body: bytes | str, dst: type[ModelT]) -> ModelT:
    """Decode exactly one JSON value from ``body`` into a new ``dst`` instance.

    Client mistakes raise BadRequestError with a message that can be returned
    verbatim. A ``dst`` that is not a pydantic model class raises
    InvalidDecodeTargetError instead.
    """
    if not (isinstance(dst, type) and issubclass(dst, BaseModel)):
        raise InvalidDecodeTargetError(dst)

    text = body.decode("utf-8", errors="replace") if isinstance(body, bytes) else body
    start = _WHITESPACE.match(text).end()
    if start == len(text):
        raise BadRequestError("body must not be empty")

    try:
        value, end = _decoder.raw_decode(text, start)
    except json.JSONDecodeError as exc:
        if _is_truncated(exc):
            raise BadRequestError("body contains badly-formed JSON") from None
        offset = _byte_offset(text, exc.pos) + 1
        raise BadRequestError(f"body contains badly-formed JSON (at character {offset})") from None
    except (ValueError, RecursionError):
        # integer literals beyond the interpreter's digit limit, or nesting deeper than the recursion limit
        raise BadRequestError("body contains badly-formed JSON") from None

    if _WHITESPACE.match(text, end).end() != len(text):
        raise BadRequestError("body must only contain a single JSON value")

    try:
        return dst.model_validate(value)
    except ValidationError as exc:
        raise _type_error(exc, _byte_offset(text, start) + 1) from None
