"""Shared-link store: publish drive links per (owner, subject) and search them."""

import logging
from collections.abc import Callable
from typing import Any

from sqlalchemy import and_, func, true
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Query, Session

from linkshare.models.shared_file import SharedFile
from linkshare.services.errors import ValidationError, from_database_error, require_fields

logger = logging.getLogger(__name__)

# (column, value) pairs; values of None or "" mean "no filter"
Filter = tuple[Any, str]

CONFLICT_KEY = ["username", "subject"]


def build_filters(owner: str | None = None, subject: str | None = None) -> list[Filter]:
    """Collect the search predicates that were actually supplied."""
    candidates = [(SharedFile.username, owner), (SharedFile.subject, subject)]
    return [(column, value) for column, value in candidates if value and value.strip()]


def where_clause(filters: list[Filter]):
    """Fold filters into one AND clause with bound parameters."""
    if not filters:
        return true()
    return and_(*(column == value for column, value in filters))


def _postgres_upsert(owner: str, subject: str, drive_link: str, other_link: str):
    stmt = pg_insert(SharedFile).values(
        username=owner, subject=subject, file_paths=[drive_link], links=other_link
    )
    return stmt.on_conflict_do_update(
        index_elements=CONFLICT_KEY,
        set_={
            "file_paths": SharedFile.file_paths.op("||")(stmt.excluded.file_paths),
            "links": stmt.excluded.links,
            "updated_at": func.now(),
        },
    )


def _sqlite_upsert(owner: str, subject: str, drive_link: str, other_link: str):
    stmt = sqlite_insert(SharedFile).values(
        username=owner, subject=subject, file_paths=[drive_link], links=other_link
    )
    return stmt.on_conflict_do_update(
        index_elements=CONFLICT_KEY,
        set_={
            "file_paths": func.json_insert(SharedFile.file_paths, "$[#]", drive_link),
            "links": stmt.excluded.links,
            "updated_at": func.now(),
        },
    )


UPSERT_BUILDERS: dict[str, Callable[..., Any]] = {
    "postgresql": _postgres_upsert,
    "sqlite": _sqlite_upsert,
}


class SharedLinkService:
    """Service for publishing and searching shared drive links."""

    def __init__(self, db: Session):
        self.db = db

    def _by_key(self, owner: str, subject: str) -> Query:
        return self.db.query(SharedFile).filter(
            SharedFile.username == owner,
            SharedFile.subject == subject,
        )

    def publish(
        self,
        owner: str | None,
        subject: str | None,
        drive_link: str | None,
        other_link: str | None,
    ) -> SharedFile:
        """Add a drive link to the owner's record for a subject.

        Creates the record with a single link when the pair is new. Otherwise
        appends the link (duplicates are kept) and replaces the other link.
        The write is one atomic statement, so concurrent publishes to the
        same pair never lose a link.
        """
        require_fields("All fields are required", owner, subject, drive_link, other_link)

        try:
            build_upsert = UPSERT_BUILDERS.get(self.db.get_bind().dialect.name)
            if build_upsert is not None:
                stmt = build_upsert(owner, subject, drive_link, other_link).returning(SharedFile)
                record = self.db.scalars(stmt, execution_options={"populate_existing": True}).one()
            else:
                record = self._locked_publish(owner, subject, drive_link, other_link)
            link_count = len(record.file_paths)
            # Commit last so a failed or timed-out publish leaves nothing written
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.exception(f"Publish failed for '{owner}' / '{subject}'")
            raise from_database_error(e) from e

        logger.info(f"Published link for '{owner}' / '{subject}' ({link_count} links stored)")
        return record

    def _locked_publish(
        self,
        owner: str,
        subject: str,
        drive_link: str,
        other_link: str,
        retry: bool = True,
    ) -> SharedFile:
        """Read-modify-write under a row lock for dialects without upsert support.

        Leaves the transaction open; the caller commits.
        """
        record = self._by_key(owner, subject).with_for_update().first()
        if record is not None:
            record.file_paths = [*record.file_paths, drive_link]
            record.links = other_link
            self.db.flush()
            return record

        record = SharedFile(
            username=owner, subject=subject, file_paths=[drive_link], links=other_link
        )
        self.db.add(record)
        try:
            self.db.flush()
        except IntegrityError:
            # A concurrent publish created the row first; append to it instead
            self.db.rollback()
            if not retry:
                raise
            return self._locked_publish(owner, subject, drive_link, other_link, retry=False)
        return record

    def search(
        self,
        owner: str | None = None,
        subject: str | None = None,
        require_filter: bool = False,
    ) -> list[SharedFile]:
        """Return records matching every supplied filter, ordered by id.

        An empty list means nothing matched. With ``require_filter`` at least
        one of owner or subject must be given.
        """
        filters = build_filters(owner=owner, subject=subject)
        if require_filter and not filters:
            raise ValidationError("Provide seniorname or subjectname")

        try:
            return (
                self.db.query(SharedFile)
                .filter(where_clause(filters))
                .order_by(SharedFile.id)
                .all()
            )
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.exception("Shared file search failed")
            raise from_database_error(e) from e
