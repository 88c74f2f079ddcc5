import uuid
from datetime import datetime, timezone
from typing import List

import pytest
from pydantic import TypeAdapter, ValidationError

from planner.schemas.common import (
    ApiError,
    ApiResponse,
    DateStr,
    DateTimeStr,
    GoalType,
    Pagination,
    PositiveMinutes,
    Priority,
    Rank,
    ReviewType,
    TaskStatus,
    UUIDStr,
    constrained_text,
    parse_timestamp,
)


def error_message(adapter: TypeAdapter, value) -> str:
    with pytest.raises(ValidationError) as exc_info:
        adapter.validate_python(value)
    return exc_info.value.errors()[0]["msg"]


def test_enumerations_are_closed():
    assert [p.value for p in Priority] == ["A", "B", "C"]
    assert [g.value for g in GoalType] == ["LIFE", "THREE_YEAR", "ANNUAL", "QUARTERLY"]
    assert [s.value for s in TaskStatus] == ["PENDING", "IN_PROGRESS", "COMPLETED", "CANCELLED"]
    assert [r.value for r in ReviewType] == ["WEEKLY", "MONTHLY"]

    adapter = TypeAdapter(Priority)
    assert adapter.validate_python("B") is Priority.B
    with pytest.raises(ValidationError):
        adapter.validate_python("D")


@pytest.mark.parametrize("value", [
    "123e4567-e89b-12d3-a456-426614174000",
    "123E4567-E89B-12D3-A456-426614174000",
])
def test_uuid_accepts_canonical_form(value):
    assert TypeAdapter(UUIDStr).validate_python(value) == value


@pytest.mark.parametrize("value", [
    "not-a-uuid",
    "123e4567e89b12d3a456426614174000",
    "123e4567-e89b-12d3-a456-42661417400",
    "{123e4567-e89b-12d3-a456-426614174000}",
])
def test_uuid_rejects_other_strings(value):
    assert error_message(TypeAdapter(UUIDStr), value) == "Invalid uuid"


def test_uuid_object_becomes_string():
    value = uuid.uuid4()
    assert TypeAdapter(UUIDStr).validate_python(value) == str(value)


@pytest.mark.parametrize("value", [
    "2024-01-01T10:00:00Z",
    "2024-01-01T10:00:00.123Z",
    "2024-01-01T10:00:00.5Z",
    "2024-01-01T10:00:00+02:00",
])
def test_datetime_accepts_iso_timestamps(value):
    assert TypeAdapter(DateTimeStr).validate_python(value) == value


@pytest.mark.parametrize("value", [
    "2024-01-01",
    "2024-01-01 10:00:00",
    "2024-01-01T10:00",
    "yesterday",
    "2024-13-45T25:61:00Z",
    "2024-02-30T10:00:00Z",
    "2024-01-01T24:00:00+02:00",
])
def test_datetime_rejects_other_strings(value):
    assert error_message(TypeAdapter(DateTimeStr), value) == "Invalid datetime"


def test_naive_datetime_is_read_as_utc():
    value = TypeAdapter(DateTimeStr).validate_python(datetime(2024, 1, 1, 10, 0, 0))
    assert value == "2024-01-01T10:00:00+00:00"
    assert parse_timestamp(value) == datetime(2024, 1, 1, 10, tzinfo=timezone.utc)


def test_date_pattern_checks_ranges_not_calendar():
    adapter = TypeAdapter(DateStr)
    assert adapter.validate_python("2024-02-29") == "2024-02-29"
    # pattern match only: an impossible day inside the 01-31 range passes
    assert adapter.validate_python("2024-02-30") == "2024-02-30"
    assert error_message(adapter, "2024-13-01") == "Invalid date format"
    assert error_message(adapter, "24-01-01") == "Invalid date format"


def test_pagination_defaults_and_bounds():
    page = Pagination()
    assert (page.page, page.limit, page.offset) == (1, 20, 0)
    assert Pagination(page=3, limit=100).offset == 200

    for bad in ({"page": 0}, {"limit": 0}, {"limit": 101}):
        with pytest.raises(ValidationError):
            Pagination.model_validate(bad)


def test_api_response_wraps_any_payload():
    response = ApiResponse[List[str]](data=["a", "b"], success=True)
    assert response.to_json() == {"data": ["a", "b"], "success": True}

    with pytest.raises(ValidationError):
        ApiResponse[List[str]](data=[1], success=True)


def test_api_error_uses_camel_case_status():
    error = ApiError.model_validate({"error": "not_found", "message": "Goal not found", "statusCode": 404})
    assert error.status_code == 404
    assert error.to_json() == {"error": "not_found", "message": "Goal not found", "statusCode": 404}


def test_constrained_text_reports_custom_messages():
    adapter = TypeAdapter(constrained_text(2, 4, min_message="too short", max_message="too long"))
    assert adapter.validate_python("abc") == "abc"
    assert error_message(adapter, "a") == "too short"
    assert error_message(adapter, "abcde") == "too long"


def test_fractional_seconds_of_any_length_parse():
    assert parse_timestamp("2024-01-01T10:00:00.5Z") == datetime(2024, 1, 1, 10, 0, 0, 500000, tzinfo=timezone.utc)
    assert parse_timestamp("2024-01-01T10:00:00.1234567+00:00").microsecond == 123456


@pytest.mark.parametrize("value", ["3", 3.0, True])
def test_rank_rejects_other_primitive_types(value):
    with pytest.raises(ValidationError):
        TypeAdapter(Rank).validate_python(value)


@pytest.mark.parametrize("value", ["45", 45.5])
def test_minutes_reject_other_primitive_types(value):
    with pytest.raises(ValidationError):
        TypeAdapter(PositiveMinutes).validate_python(value)


@pytest.mark.parametrize("bad", [{"page": "2"}, {"limit": "50"}, {"page": True}])
def test_pagination_rejects_numeric_strings(bad):
    with pytest.raises(ValidationError):
        Pagination.model_validate(bad)
