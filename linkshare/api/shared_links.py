"""Senior publish and junior search endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from linkshare.api.dependencies import get_shared_link_service
from linkshare.api.errors import APIError
from linkshare.schemas.shared_file import (
    FileListResponse,
    PublishRequest,
    PublishResponse,
    SharedFileResponse,
)
from linkshare.services.errors import (
    InternalError,
    QueryTimeoutError,
    ValidationError,
    require_fields,
)
from linkshare.services.shared_links import SharedLinkService

router = APIRouter(tags=["files"])


def _file_list(records) -> FileListResponse:
    if not records:
        raise APIError(status.HTTP_404_NOT_FOUND, "not_found", "No files found")
    return FileListResponse(files=[SharedFileResponse.model_validate(r) for r in records])


@router.post("/SrDashboard", response_model=PublishResponse)
def publish_link(
    payload: PublishRequest,
    service: Annotated[SharedLinkService, Depends(get_shared_link_service)],
):
    """Publish a drive link under the senior's subject.

    The password must be present but is not stored with the record.
    """
    try:
        require_fields("All fields are required", payload.password)
        service.publish(payload.username, payload.subject, payload.drive_link, payload.other_link)
    except ValidationError as e:
        raise APIError.from_service_error(status.HTTP_400_BAD_REQUEST, e) from None
    except InternalError as e:
        raise APIError.from_service_error(status.HTTP_500_INTERNAL_SERVER_ERROR, e) from None
    except QueryTimeoutError as e:
        raise APIError.from_service_error(status.HTTP_504_GATEWAY_TIMEOUT, e) from None

    return PublishResponse(message="File link added successfully", drive_link=payload.drive_link)


@router.get("/Jrdashboard", response_model=FileListResponse)
def search_links(
    service: Annotated[SharedLinkService, Depends(get_shared_link_service)],
    seniorname: str | None = None,
    subjectname: str | None = None,
):
    """Search shared links by senior name and/or subject (at least one)."""
    try:
        records = service.search(owner=seniorname, subject=subjectname, require_filter=True)
    except ValidationError as e:
        raise APIError.from_service_error(status.HTTP_400_BAD_REQUEST, e) from None
    except InternalError as e:
        raise APIError.from_service_error(status.HTTP_500_INTERNAL_SERVER_ERROR, e) from None
    except QueryTimeoutError as e:
        raise APIError.from_service_error(status.HTTP_504_GATEWAY_TIMEOUT, e) from None

    return _file_list(records)


@router.get("/explore", response_model=FileListResponse)
def explore(
    service: Annotated[SharedLinkService, Depends(get_shared_link_service)],
    subjectname: str | None = None,
):
    """Browse every shared link, optionally narrowed to one subject."""
    try:
        records = service.search(subject=subjectname)
    except InternalError as e:
        raise APIError.from_service_error(status.HTTP_500_INTERNAL_SERVER_ERROR, e) from None
    except QueryTimeoutError as e:
        raise APIError.from_service_error(status.HTTP_504_GATEWAY_TIMEOUT, e) from None

    return _file_list(records)
