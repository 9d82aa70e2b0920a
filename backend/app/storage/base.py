from typing import Protocol

from app.schemas.announcement import AnnouncementCreate, AnnouncementRead
from app.schemas.person import PersonCreate, PersonRead, PersonUpdate, ProgressUpdate


class Storage(Protocol):
    """
    Operations every store offers to the HTTP layer.

    Lookups by id raise app.core.errors.NotFound when the row is absent;
    other failures surface as StorageError.
    """

    def list_people(self) -> list[PersonRead]: ...

    def create_person(self, payload: PersonCreate) -> PersonRead: ...

    def update_progress(self, update: ProgressUpdate) -> PersonRead: ...

    def update_person(self, person_id: int, changes: PersonUpdate) -> PersonRead: ...

    def delete_person(self, person_id: int) -> None: ...

    def list_announcements(self) -> list[AnnouncementRead]: ...

    def create_announcement(self, payload: AnnouncementCreate) -> AnnouncementRead: ...

    def delete_announcement(self, announcement_id: int) -> None: ...
