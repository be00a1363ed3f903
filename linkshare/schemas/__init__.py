"""Pydantic schemas for API requests and responses."""

from linkshare.schemas.auth import (
    LoginRequest,
    LoginResponse,
    MessageResponse,
    SignupRequest,
    UserResponse,
)
from linkshare.schemas.shared_file import (
    FileListResponse,
    PublishRequest,
    PublishResponse,
    SharedFileResponse,
)

__all__ = [
    "SignupRequest",
    "LoginRequest",
    "MessageResponse",
    "UserResponse",
    "LoginResponse",
    "PublishRequest",
    "PublishResponse",
    "SharedFileResponse",
    "FileListResponse",
]
