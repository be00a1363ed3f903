"""User account model."""

from sqlalchemy import Column, Integer, String

from linkshare.database import Base
from linkshare.models.mixins import TimestampMixin


class UserAccount(Base, TimestampMixin):
    """Registered user; role is a free-form string such as "senior" or "junior"."""

    __tablename__ = "users_auth"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    role = Column(String(50), nullable=False)
