import re
import uuid
from datetime import date, datetime, timezone
from enum import Enum
from typing import Annotated, Any, Generic, Literal, Optional, TypeVar

from pydantic import (
    AfterValidator, AnyUrl, BeforeValidator, Field, StrictFloat, StrictInt, TypeAdapter,
    ValidationError,
)
from pydantic_core import PydanticCustomError

from planner.schemas.base import BaseSchema

DEFAULT_TIMEZONE = "America/New_York"

class Priority(str, Enum):
    A = "A"
    B = "B"
    C = "C"

class GoalType(str, Enum):
    LIFE = "LIFE"
    THREE_YEAR = "THREE_YEAR"
    ANNUAL = "ANNUAL"
    QUARTERLY = "QUARTERLY"

class TaskStatus(str, Enum):
    PENDING = "PENDING"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"

class ReviewType(str, Enum):
    WEEKLY = "WEEKLY"
    MONTHLY = "MONTHLY"

SortDirection = Literal["asc", "desc"]


UUID_PATTERN = re.compile(
    r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}$"
)
# Seconds are required; UTC "Z" or an explicit offset
DATETIME_PATTERN = re.compile(
    r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(\.\d+)?(Z|[+-]\d{2}:\d{2})$"
)
# Month and day ranges only, so 2024-02-30 still passes
DATE_PATTERN = re.compile(r"^\d{4}-(0[1-9]|1[0-2])-(0[1-9]|[12]\d|3[01])$")

_url_adapter = TypeAdapter(AnyUrl)


_FRACTION = re.compile(r"\.(\d+)")


def parse_timestamp(value: str) -> datetime:
    value = value.replace("Z", "+00:00")
    # fromisoformat wants exactly 3 or 6 fractional digits on older interpreters
    match = _FRACTION.search(value)
    if match:
        digits = match.group(1)[:6].ljust(6, "0")
        value = value[:match.start(1)] + digits + value[match.end(1):]
    return datetime.fromisoformat(value)


def parse_date(value: str) -> date:
    """Calendar date for a pattern-checked string; raises ValueError for e.g. 2024-02-30."""
    return date.fromisoformat(value)


def _isoformat(value: Any) -> Any:
    # Rows read back from storage carry driver types, the schemas carry strings
    if isinstance(value, uuid.UUID):
        return str(value)
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.isoformat()
    if isinstance(value, date):
        return value.isoformat()
    return value


def _check_uuid(value: str) -> str:
    if not UUID_PATTERN.match(value):
        raise PydanticCustomError("uuid", "Invalid uuid")
    return value


def _check_datetime(value: str) -> str:
    if not DATETIME_PATTERN.match(value):
        raise PydanticCustomError("datetime", "Invalid datetime")
    # the pattern only checks digit shape, e.g. month 13 or hour 25 still match
    try:
        parse_timestamp(value)
    except ValueError:
        raise PydanticCustomError("datetime", "Invalid datetime")
    return value


def _check_date(value: str) -> str:
    if not DATE_PATTERN.match(value):
        raise PydanticCustomError("date", "Invalid date format")
    return value


def _check_url(value: str) -> str:
    try:
        _url_adapter.validate_python(value)
    except ValidationError:
        raise PydanticCustomError("url", "Invalid url")
    # keep the caller's spelling, AnyUrl would normalize it
    return value


UUIDStr = Annotated[str, BeforeValidator(_isoformat), AfterValidator(_check_uuid)]
DateTimeStr = Annotated[str, BeforeValidator(_isoformat), AfterValidator(_check_datetime)]
OptionalDateTimeStr = Optional[DateTimeStr]
DateStr = Annotated[str, BeforeValidator(_isoformat), AfterValidator(_check_date)]
UrlStr = Annotated[str, AfterValidator(_check_url)]


def constrained_text(
    min_length: int = 0,
    max_length: Optional[int] = None,
    min_message: Optional[str] = None,
    max_message: Optional[str] = None,
):
    """A ``str`` type with length limits that report user-facing messages."""

    def _check(value: str) -> str:
        if len(value) < min_length:
            raise PydanticCustomError(
                "string_too_short",
                min_message or f"String must contain at least {min_length} character(s)",
            )
        if max_length is not None and len(value) > max_length:
            raise PydanticCustomError(
                "string_too_long",
                max_message or f"String must contain at most {max_length} character(s)",
            )
        return value

    return Annotated[str, AfterValidator(_check)]


# Shared user-input field types
NonEmptyStr = constrained_text(1)
Title = constrained_text(
    1, 200,
    min_message="Title is required",
    max_message="Title must be less than 200 characters",
)
Description = constrained_text(
    max_length=1000,
    max_message="Description must be less than 1000 characters",
)
# Strict: "3" or True are type errors, not coerced
Rank = Annotated[StrictInt, Field(ge=1, le=5)]
PositiveMinutes = Annotated[StrictInt, Field(gt=0)]
Percentage = Annotated[StrictFloat, Field(ge=0, le=100)]


class Pagination(BaseSchema):
    page: StrictInt = Field(1, ge=1)
    limit: StrictInt = Field(20, ge=1, le=100)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


DataT = TypeVar("DataT")

class ApiResponse(BaseSchema, Generic[DataT]):
    data: DataT
    success: bool
    message: Optional[str] = None

class ApiError(BaseSchema):
    error: str
    message: str
    status_code: int = Field(..., alias="statusCode")
