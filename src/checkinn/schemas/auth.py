from pydantic import EmailStr, Field, field_validator
from zxcvbn import zxcvbn

from src.checkinn.schemas.base import CamelModel
from src.checkinn.schemas.user import UserRead

# Minimum zxcvbn score (0-4 scale): 3 = "safely unguessable"
MIN_PASSWORD_SCORE = 3


def validate_password_strength(password: str) -> str:
    """Reject passwords zxcvbn scores below MIN_PASSWORD_SCORE."""
    result = zxcvbn(password)
    if result["score"] >= MIN_PASSWORD_SCORE:
        return password

    feedback = result.get("feedback", {})
    warning = feedback.get("warning", "")
    suggestions = feedback.get("suggestions", [])
    if warning:
        raise ValueError(f"Weak password: {warning}")
    if suggestions:
        raise ValueError(f"Weak password: {suggestions[0]}")
    raise ValueError("Password is too weak. Use a longer password with a mix of characters.")


class LoginRequest(CamelModel):
    email: EmailStr
    password: str = Field(min_length=1)


class TokenPair(CamelModel):
    access_token: str
    refresh_token: str
    token_type: str = "bearer"


class AuthData(CamelModel):
    """Returned by login and registration: the account plus its first token pair."""

    user: UserRead
    tokens: TokenPair


class RefreshRequest(CamelModel):
    refresh_token: str


class RegisterRequest(CamelModel):
    """Customer self-registration."""

    name: str = Field(min_length=1, max_length=100)
    email: EmailStr
    password: str = Field(min_length=8, max_length=100)
    phone: str | None = Field(default=None, max_length=30)

    @field_validator("password")
    @classmethod
    def check_password_strength(cls, v: str) -> str:
        return validate_password_strength(v)


class ProfileUpdate(CamelModel):
    """Self-service profile edit. Only name and phone are applied."""

    name: str | None = Field(default=None, min_length=1, max_length=100)
    phone: str | None = Field(default=None, max_length=30)
    # Accepted only so a misdirected password change gets a clear 400
    password: str | None = None
    password_confirm: str | None = None


class PasswordUpdateRequest(CamelModel):
    password_current: str = Field(min_length=1)
    password: str = Field(min_length=8, max_length=100)

    @field_validator("password")
    @classmethod
    def check_password_strength(cls, v: str) -> str:
        return validate_password_strength(v)
