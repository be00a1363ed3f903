"""FastAPI dependencies for services and database."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.orm import Session

from linkshare.database import get_db
from linkshare.services.auth import CredentialService
from linkshare.services.shared_links import SharedLinkService


def get_credential_service(
    db: Annotated[Session, Depends(get_db)],
) -> CredentialService:
    """Get credential service bound to the request session."""
    return CredentialService(db)


def get_shared_link_service(
    db: Annotated[Session, Depends(get_db)],
) -> SharedLinkService:
    """Get shared-link service bound to the request session."""
    return SharedLinkService(db)
