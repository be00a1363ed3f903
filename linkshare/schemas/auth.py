"""Authentication schemas."""

from pydantic import BaseModel, ConfigDict, Field

# Fields are optional here; emptiness is checked by the credential service so
# missing and blank values produce the same validation error.


class SignupRequest(BaseModel):
    """User signup request."""

    name: str | None = Field(None, max_length=255)
    email: str | None = Field(None, max_length=255)
    password: str | None = Field(None, max_length=128)
    role: str | None = Field(None, max_length=50)


class LoginRequest(BaseModel):
    """User login request."""

    email: str | None = Field(None, max_length=255)
    password: str | None = Field(None, max_length=128)


class MessageResponse(BaseModel):
    """Plain confirmation message."""

    message: str


class UserResponse(BaseModel):
    """User information response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    role: str


class LoginResponse(BaseModel):
    """Login response with user info."""

    message: str
    user: UserResponse
