"""User Schemas — registration/login payloads and the public user shape.

Invariants:
    - The password never appears in any response schema
    - bcrypt only reads the first 72 bytes, so longer passwords are rejected up front
"""

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class UserCreate(BaseModel):
    """Registration payload."""
    username: str = Field(min_length=3, max_length=50)
    email: EmailStr
    password: str = Field(min_length=6, max_length=72)
    user_class: str = Field(alias="class", min_length=1, max_length=50)


class LoginRequest(BaseModel):
    email: EmailStr
    password: str = Field(min_length=1, max_length=72)


class UserResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    username: str
    email: str
    user_class: str = Field(alias="class")

    @classmethod
    def from_record(cls, user) -> "UserResponse":
        return cls(
            id=user.id, username=user.username, email=user.email,
            user_class=user.user_class,
        )


class AuthResponse(BaseModel):
    """Returned by registration and login."""
    user: UserResponse
    token: str
