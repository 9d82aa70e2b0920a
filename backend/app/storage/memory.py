import logging
from datetime import datetime, timezone

from app.core.constants import MAX_TARGET_COUNT
from app.core.errors import NotFound
from app.core.progress import apply_progress, empty_week
from app.schemas.announcement import AnnouncementCreate, AnnouncementRead
from app.schemas.person import PersonCreate, PersonRead, PersonUpdate, ProgressUpdate

logger = logging.getLogger(__name__)


class MemoryStorage:
    """In-process store for local runs and tests. Data is lost on restart."""

    def __init__(self):
        self._people: dict[int, PersonRead] = {}
        self._announcements: dict[int, AnnouncementRead] = {}
        self._next_person_id = 1
        self._next_announcement_id = 1

    # People

    def list_people(self) -> list[PersonRead]:
        return [self._people[k] for k in sorted(self._people)]

    def create_person(self, payload: PersonCreate) -> PersonRead:
        person_id = self._next_person_id
        self._next_person_id += 1
        now = datetime.now(timezone.utc)
        person = PersonRead(
            id=person_id,
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
        self._people[person_id] = person
        logger.info("Created person %s (%s)", person_id, person.name)
        return person

    def update_progress(self, update: ProgressUpdate) -> PersonRead:
        person = self._get_person(update.person_id)
        progress, streak = apply_progress(
            person.weekly_progress, update.day, update.completed
        )
        updated = person.model_copy(
            update={
                "weekly_progress": progress,
                "current_streak": streak,
                "updated_at": datetime.now(timezone.utc),
            }
        )
        self._people[person.id] = updated
        logger.info(
            "Person %s marked %s as %s (streak %s)",
            person.id, update.day, update.completed, streak,
        )
        return updated

    def update_person(self, person_id: int, changes: PersonUpdate) -> PersonRead:
        person = self._get_person(person_id)
        fields = changes.changes()
        fields["updated_at"] = datetime.now(timezone.utc)
        updated = person.model_copy(update=fields)
        self._people[person_id] = updated
        return updated

    def delete_person(self, person_id: int) -> None:
        if person_id not in self._people:
            raise NotFound("Person", person_id)
        del self._people[person_id]
        logger.info("Deleted person %s", person_id)

    def _get_person(self, person_id: int) -> PersonRead:
        person = self._people.get(person_id)
        if person is None:
            raise NotFound("Person", person_id)
        return person

    # Announcements

    def list_announcements(self) -> list[AnnouncementRead]:
        # Newest first; ids break ties between identical timestamps
        return sorted(
            self._announcements.values(),
            key=lambda a: (a.created_at, a.id),
            reverse=True,
        )

    def create_announcement(self, payload: AnnouncementCreate) -> AnnouncementRead:
        announcement_id = self._next_announcement_id
        self._next_announcement_id += 1
        now = datetime.now(timezone.utc)
        announcement = AnnouncementRead(
            id=announcement_id,
            title=payload.title,
            content=payload.content,
            author=payload.author,
            is_important=payload.is_important,
            created_at=now,
            updated_at=now,
        )
        self._announcements[announcement_id] = announcement
        logger.info("Created announcement %s", announcement_id)
        return announcement

    def delete_announcement(self, announcement_id: int) -> None:
        if announcement_id not in self._announcements:
            raise NotFound("Announcement", announcement_id)
        del self._announcements[announcement_id]
        logger.info("Deleted announcement %s", announcement_id)
