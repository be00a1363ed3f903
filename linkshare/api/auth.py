"""Signup and login endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from linkshare.api.dependencies import get_credential_service
from linkshare.api.errors import APIError
from linkshare.schemas.auth import (
    LoginRequest,
    LoginResponse,
    MessageResponse,
    SignupRequest,
    UserResponse,
)
from linkshare.services.auth import CredentialService
from linkshare.services.errors import (
    DuplicateEmailError,
    InternalError,
    InvalidCredentialsError,
    NotFoundError,
    QueryTimeoutError,
    ValidationError,
)

router = APIRouter(tags=["auth"])


@router.post("/signup", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
def signup(
    payload: SignupRequest,
    service: Annotated[CredentialService, Depends(get_credential_service)],
):
    """Register a new user."""
    try:
        service.register(payload.name, payload.email, payload.password, payload.role)
    except (ValidationError, DuplicateEmailError) as e:
        raise APIError.from_service_error(status.HTTP_400_BAD_REQUEST, e) from None
    except InternalError as e:
        raise APIError.from_service_error(status.HTTP_500_INTERNAL_SERVER_ERROR, e) from None
    except QueryTimeoutError as e:
        raise APIError.from_service_error(status.HTTP_504_GATEWAY_TIMEOUT, e) from None

    return MessageResponse(message="User registered successfully!")


@router.post("/login", response_model=LoginResponse)
def login(
    credentials: LoginRequest,
    service: Annotated[CredentialService, Depends(get_credential_service)],
):
    """Login with email and password.

    Unknown email is a 400, a wrong password a 401.
    """
    try:
        user = service.authenticate(credentials.email, credentials.password)
    except (ValidationError, NotFoundError) as e:
        raise APIError.from_service_error(status.HTTP_400_BAD_REQUEST, e) from None
    except InvalidCredentialsError as e:
        raise APIError.from_service_error(status.HTTP_401_UNAUTHORIZED, e) from None
    except InternalError as e:
        raise APIError.from_service_error(status.HTTP_500_INTERNAL_SERVER_ERROR, e) from None
    except QueryTimeoutError as e:
        raise APIError.from_service_error(status.HTTP_504_GATEWAY_TIMEOUT, e) from None

    return LoginResponse(message="Login successful!", user=UserResponse.model_validate(user))
