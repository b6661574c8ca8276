import json
import re
from typing import Any

from pydantic import GetCoreSchemaHandler
from pydantic_core import PydanticCustomError, core_schema

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

_MINUTES_RE = re.compile(r"-?[0-9]+")


class InvalidRuntimeFormat(ValueError):
    def __init__(self) -> None:
        super().__init__("invalid runtime format")


class Runtime(int):
    """Whole minutes, written on the wire as the JSON string ``"<N> mins"``.

    The type only bounds the value to 32 bits; positivity is a validation rule
    of the movie, not of the codec.
    """

    def __new__(cls, minutes: int = 0) -> "Runtime":
        if not INT32_MIN <= minutes <= INT32_MAX:
            raise OverflowError(f"runtime {minutes} does not fit in 32 bits")
        return super().__new__(cls, minutes)

    def __repr__(self) -> str:
        return f"Runtime({int(self)})"

    def marshal_json(self) -> str:
        return json.dumps(f"{int(self)} mins")

    @classmethod
    def parse(cls, text: str) -> "Runtime":
        parts = text.split(" ")
        if len(parts) != 2 or parts[1] != "mins":
            raise InvalidRuntimeFormat()
        if not _MINUTES_RE.fullmatch(parts[0]):
            raise InvalidRuntimeFormat()
        minutes = int(parts[0])
        if not INT32_MIN <= minutes <= INT32_MAX:
            raise InvalidRuntimeFormat()
        return cls(minutes)

    @classmethod
    def unmarshal_json(cls, raw: str | bytes) -> "Runtime":
        try:
            value = json.loads(raw)
        except ValueError:
            raise InvalidRuntimeFormat() from None
        if not isinstance(value, str):
            raise InvalidRuntimeFormat()
        return cls.parse(value)

    @classmethod
    def _validate(cls, value: Any) -> "Runtime":
        if isinstance(value, Runtime):
            return value
        if not isinstance(value, str):
            # a bare number is the wrong JSON type, not a badly formatted runtime
            raise PydanticCustomError("runtime_type", "Input should be a string like '<N> mins'")
        try:
            return cls.parse(value)
        except InvalidRuntimeFormat:
            raise PydanticCustomError("invalid_runtime_format", "invalid runtime format") from None

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: GetCoreSchemaHandler) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda value: f"{int(value)} mins",
                when_used="json",
            ),
        )
