from pydantic import AfterValidator, EmailStr, Field, TypeAdapter, ValidationError
from pydantic_core import PydanticCustomError
from typing import Annotated, Any, Dict, Optional
from planner.schemas.base import BaseSchema, refine
from planner.schemas.common import DEFAULT_TIMEZONE, UrlStr, constrained_text

_email_adapter = TypeAdapter(EmailStr)


def _check_email(value: str) -> str:
    try:
        _email_adapter.validate_python(value)
    except ValidationError:
        raise PydanticCustomError("email", "Please enter a valid email address")
    return value


Email = Annotated[str, AfterValidator(_check_email)]
Password = constrained_text(8, min_message="Password must be at least 8 characters")
FirstName = constrained_text(1, min_message="First name is required")
LastName = constrained_text(1, min_message="Last name is required")


def passwords_match(data) -> bool:
    return data["password"] == data["confirm_password"]


class _SignUpFields(BaseSchema):
    email: Email
    password: Password
    confirm_password: str = Field(..., alias="confirmPassword")
    first_name: FirstName = Field(..., alias="firstName")
    last_name: LastName = Field(..., alias="lastName")

SignUp = refine(
    _SignUpFields, passwords_match, "Passwords don't match",
    path="confirm_password", reads=("password",), name="SignUp",
)

class SignIn(BaseSchema):
    email: Email
    password: constrained_text(1, min_message="Password is required")

class ResetPassword(BaseSchema):
    email: Email

class _UpdatePasswordFields(BaseSchema):
    password: Password
    confirm_password: str = Field(..., alias="confirmPassword")

UpdatePassword = refine(
    _UpdatePasswordFields, passwords_match, "Passwords don't match",
    path="confirm_password", reads=("password",), name="UpdatePassword",
)

class ProfileForm(BaseSchema):
    """Settings form for the signed-in user's profile."""
    first_name: FirstName = Field(..., alias="firstName")
    last_name: LastName = Field(..., alias="lastName")
    timezone: str = DEFAULT_TIMEZONE
    avatar_url: Optional[UrlStr] = None


# Shapes handed back by the hosted auth service
class AuthUser(BaseSchema):
    id: str
    email: str
    email_confirmed_at: Optional[str] = None
    phone: Optional[str] = None
    created_at: str
    updated_at: str
    last_sign_in_at: Optional[str] = None
    app_metadata: Dict[str, Any] = {}
    user_metadata: Dict[str, Any] = {}

class AuthSession(BaseSchema):
    access_token: str
    refresh_token: str
    expires_in: int
    expires_at: Optional[int] = None
    token_type: str
    user: AuthUser
