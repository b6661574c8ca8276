import pytest
from pydantic import BaseModel, ValidationError

from greenlight.models.runtime import INT32_MAX, InvalidRuntimeFormat, Runtime


class _Holder(BaseModel):
    runtime: Runtime


def test_marshal_json_wraps_minutes_in_quoted_string() -> None:
    assert Runtime(102).marshal_json() == '"102 mins"'
    assert Runtime(0).marshal_json() == '"0 mins"'
    assert Runtime(-5).marshal_json() == '"-5 mins"'


@pytest.mark.parametrize("minutes", [0, 1, 102, INT32_MAX])
def test_marshal_then_unmarshal_returns_same_minutes(minutes: int) -> None:
    assert Runtime.unmarshal_json(Runtime(minutes).marshal_json()) == minutes


def test_unmarshal_accepts_bytes() -> None:
    runtime = Runtime.unmarshal_json(b'"95 mins"')
    assert isinstance(runtime, Runtime)
    assert runtime == 95


@pytest.mark.parametrize(
    "raw",
    [
        '"10  mins"',
        '"+10 mins"',
        '"10 minutes"',
        '"ten mins"',
        '"10mins"',
        '"10 mins extra"',
        '"1_000 mins"',
        '"4294967296 mins"',
        '""',
        "102",
        "102 mins",
        "null",
    ],
)
def test_unmarshal_rejects_bad_formats(raw: str) -> None:
    with pytest.raises(InvalidRuntimeFormat) as exc:
        Runtime.unmarshal_json(raw)

    assert str(exc.value) == "invalid runtime format"


def test_runtime_outside_int32_cannot_be_built() -> None:
    with pytest.raises(OverflowError):
        Runtime(INT32_MAX + 1)


def test_model_field_serializes_as_mins_string() -> None:
    holder = _Holder(runtime="45 mins")

    assert holder.runtime == 45
    assert holder.model_dump(mode="json") == {"runtime": "45 mins"}
    assert holder.model_dump_json() == '{"runtime":"45 mins"}'


def test_model_field_reports_bad_format() -> None:
    with pytest.raises(ValidationError) as exc:
        _Holder(runtime="45 min")

    assert exc.value.errors()[0]["type"] == "invalid_runtime_format"


def test_model_field_reports_bare_number_as_type_error() -> None:
    with pytest.raises(ValidationError) as exc:
        _Holder(runtime=45)

    assert exc.value.errors()[0]["type"] == "runtime_type"
