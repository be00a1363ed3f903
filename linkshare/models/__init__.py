"""SQLAlchemy models."""

from linkshare.models.shared_file import SharedFile
from linkshare.models.user import UserAccount

__all__ = [
    "UserAccount",
    "SharedFile",
]
