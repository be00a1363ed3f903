"""Shared file schemas."""

from pydantic import BaseModel, ConfigDict, Field


class PublishRequest(BaseModel):
    """Senior dashboard publish request.

    ``password`` must be supplied but is never stored alongside the links.
    """

    model_config = ConfigDict(populate_by_name=True)

    username: str | None = Field(None, max_length=255)
    password: str | None = Field(None, max_length=128)
    subject: str | None = Field(None, max_length=255)
    drive_link: str | None = Field(None, alias="driveLink")
    other_link: str | None = Field(None, alias="OtherLink")


class PublishResponse(BaseModel):
    """Confirmation with the link that was just added."""

    model_config = ConfigDict(populate_by_name=True)

    message: str
    drive_link: str = Field(..., alias="driveLink")


class SharedFileResponse(BaseModel):
    """A stored (owner, subject) record."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    subject: str
    file_paths: list[str]
    links: str


class FileListResponse(BaseModel):
    """Search results."""

    files: list[SharedFileResponse]
