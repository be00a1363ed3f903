"""Shared file model: drive links a senior publishes under a subject."""

from sqlalchemy import JSON, Column, Integer, String, Text, UniqueConstraint
from sqlalchemy.dialects.postgresql import JSONB

from linkshare.database import Base
from linkshare.models.mixins import TimestampMixin

# jsonb on PostgreSQL so links can be appended with ||
LinkList = JSON().with_variant(JSONB(), "postgresql")


class SharedFile(Base, TimestampMixin):
    """Links published by one owner for one subject."""

    __tablename__ = "files"
    __table_args__ = (UniqueConstraint("username", "subject", name="uq_files_username_subject"),)

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(255), nullable=False, index=True)  # Raw owner name, not a user id
    subject = Column(String(255), nullable=False, index=True)
    file_paths = Column(LinkList, nullable=False, default=list)  # Ordered drive links
    links = Column(Text, nullable=False)  # The "other link", replaced on every publish
