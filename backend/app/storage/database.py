import logging
from contextlib import contextmanager
from datetime import datetime, timezone

from sqlalchemy.exc import SQLAlchemyError

from app.core.constants import MAX_TARGET_COUNT
from app.core.errors import NotFound, StorageError
from app.core.progress import apply_progress, empty_week
from app.db import Base, make_engine, make_session_factory
from app.models.announcement import Announcement
from app.models.person import Person
from app.schemas.announcement import AnnouncementCreate, AnnouncementRead
from app.schemas.person import PersonCreate, PersonRead, PersonUpdate, ProgressUpdate

logger = logging.getLogger(__name__)


class DatabaseStorage:
    """Store backed by the `people` and `announcements` tables."""

    def __init__(self, database_url: str, create_tables: bool = True):
        self.engine = make_engine(database_url)
        self._sessions = make_session_factory(self.engine)
        if create_tables:
            # Create DB tables on startup; Alembic tracks the same schema
            Base.metadata.create_all(bind=self.engine)

    @contextmanager
    def _session(self):
        db = self._sessions()
        try:
            yield db
        except SQLAlchemyError as e:
            db.rollback()
            raise StorageError(str(e)) from e
        finally:
            db.close()

    # People

    def list_people(self) -> list[PersonRead]:
        with self._session() as db:
            rows = db.query(Person).order_by(Person.id).all()
            return [PersonRead.model_validate(r) for r in rows]

    def create_person(self, payload: PersonCreate) -> PersonRead:
        now = datetime.now(timezone.utc)
        person = Person(
            name=payload.name,
            goal=payload.goal,
            emoji=payload.emoji,
            target_type=payload.target_type,
            target_days=list(payload.target_days),
            target_count=payload.target_count or MAX_TARGET_COUNT,
            weekly_progress=empty_week(),
            current_streak=0,
            created_at=now,
            updated_at=now,
        )
        with self._session() as db:
            db.add(person)
            db.commit()
            db.refresh(person)
            logger.info("Created person %s (%s)", person.id, person.name)
            return PersonRead.model_validate(person)

    def update_progress(self, update: ProgressUpdate) -> PersonRead:
        with self._session() as db:
            person = self._get_person(db, update.person_id)
            progress, streak = apply_progress(
                person.weekly_progress, update.day, update.completed
            )
            # Assign a new dict so the JSON column is flagged dirty
            person.weekly_progress = progress
            person.current_streak = streak
            person.updated_at = datetime.now(timezone.utc)
            db.commit()
            db.refresh(person)
            logger.info(
                "Person %s marked %s as %s (streak %s)",
                person.id, update.day, update.completed, streak,
            )
            return PersonRead.model_validate(person)

    def update_person(self, person_id: int, changes: PersonUpdate) -> PersonRead:
        with self._session() as db:
            person = self._get_person(db, person_id)
            for field, value in changes.changes().items():
                setattr(person, field, value)
            person.updated_at = datetime.now(timezone.utc)
            db.commit()
            db.refresh(person)
            return PersonRead.model_validate(person)

    def delete_person(self, person_id: int) -> None:
        with self._session() as db:
            deleted = db.query(Person).filter(Person.id == person_id).delete()
            db.commit()
        if deleted == 0:
            raise NotFound("Person", person_id)
        logger.info("Deleted person %s", person_id)

    @staticmethod
    def _get_person(db, person_id: int) -> Person:
        person = db.get(Person, person_id)
        if person is None:
            raise NotFound("Person", person_id)
        return person

    # Announcements

    def list_announcements(self) -> list[AnnouncementRead]:
        with self._session() as db:
            rows = (
                db.query(Announcement)
                .order_by(Announcement.created_at.desc(), Announcement.id.desc())
                .all()
            )
            return [AnnouncementRead.model_validate(r) for r in rows]

    def create_announcement(self, payload: AnnouncementCreate) -> AnnouncementRead:
        now = datetime.now(timezone.utc)
        row = Announcement(
            title=payload.title,
            content=payload.content,
            author=payload.author,
            is_important=payload.is_important,
            created_at=now,
            updated_at=now,
        )
        with self._session() as db:
            db.add(row)
            db.commit()
            db.refresh(row)
            logger.info("Created announcement %s", row.id)
            return AnnouncementRead.model_validate(row)

    def delete_announcement(self, announcement_id: int) -> None:
        with self._session() as db:
            deleted = (
                db.query(Announcement)
                .filter(Announcement.id == announcement_id)
                .delete()
            )
            db.commit()
        if deleted == 0:
            raise NotFound("Announcement", announcement_id)
        logger.info("Deleted announcement %s", announcement_id)
