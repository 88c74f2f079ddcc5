import logging
from typing import Any, List, Type

from pydantic import BaseModel, ValidationError

from planner.schemas.base import BaseSchema
from planner.schemas.common import ApiError

logger = logging.getLogger(__name__)


class FieldIssue(BaseSchema):
    path: str      # dotted location, e.g. "tasks.3" or "confirmPassword"
    message: str
    type: str

    @classmethod
    def from_error(cls, error: dict) -> "FieldIssue":
        return cls(
            path=".".join(str(part) for part in error["loc"]),
            message=error["msg"],
            type=error["type"],
        )


class ValidationResult(BaseSchema):
    success: bool
    data: Any = None
    errors: List[FieldIssue] = []

    def messages_for(self, path: str) -> List[str]:
        return [issue.message for issue in self.errors if issue.path == path]

    def to_error(self, status_code: int = 422) -> ApiError:
        summary = "; ".join(
            f"{issue.path}: {issue.message}" if issue.path else issue.message
            for issue in self.errors
        )
        return ApiError(error="validation_error", message=summary, status_code=status_code)


def validate(schema: Type[BaseModel], data: Any) -> ValidationResult:
    """
    Validate ``data`` against ``schema`` without raising.

    Returns a successful result holding the parsed model (defaults applied),
    or a failed one listing every violated constraint.
    """
    try:
        value = schema.model_validate(data)
    except ValidationError as exc:
        issues = [FieldIssue.from_error(error) for error in exc.errors()]
        logger.debug("%s rejected input with %d issue(s)", schema.__name__, len(issues))
        return ValidationResult(success=False, errors=issues)
    return ValidationResult(success=True, data=value)
