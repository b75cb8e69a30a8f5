import re
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator
from pydantic.alias_generators import to_camel

_PASSWORD_CLASSES = (
    re.compile(r"[a-z]"),
    re.compile(r"[A-Z]"),
    re.compile(r"\d"),
    re.compile(r"[@$!%*?&]"),
)
# first character must come from the allowed alphabet
_PASSWORD_FIRST = re.compile(r"[A-Za-z\d@$!%*?&]")


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class _RequestModel(_CamelModel):
    model_config = ConfigDict(extra="forbid")


class RegisterRequest(_RequestModel):
    email: EmailStr
    password: str = Field(min_length=10)
    confirm_password: str = Field(min_length=10)

    @field_validator("password")
    @classmethod
    def _password_strength(cls, v: str) -> str:
        if not _PASSWORD_FIRST.match(v) or not all(p.search(v) for p in _PASSWORD_CLASSES):
            raise ValueError(
                "Password must contain at least one uppercase letter, one lowercase "
                "letter, one number, and one special character"
            )
        return v


class LoginRequest(_RequestModel):
    email: EmailStr
    password: str
    remember_me: Optional[bool] = False

    @field_validator("remember_me")
    @classmethod
    def _remember_me_default(cls, v: Optional[bool]) -> bool:
        return bool(v)


class UserSummary(_CamelModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str


class AuthResponse(_CamelModel):
    access_token: str
    user: UserSummary
