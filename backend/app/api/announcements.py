from fastapi import APIRouter, Depends, Path, Response

from app.api.deps import get_storage
from app.core.constants import MAX_ID
from app.schemas.announcement import AnnouncementCreate, AnnouncementRead
from app.storage.base import Storage


router = APIRouter(prefix="/api/announcements", tags=["announcements"])


@router.get("", response_model=list[AnnouncementRead])
def list_announcements(storage: Storage = Depends(get_storage)):
    # Most recent first
    return storage.list_announcements()


@router.post("", response_model=AnnouncementRead, status_code=201)
def create_announcement(
    payload: AnnouncementCreate, storage: Storage = Depends(get_storage)
):
    return storage.create_announcement(payload)


@router.delete("/{announcement_id}", status_code=204, response_class=Response)
def delete_announcement(
    announcement_id: int = Path(..., ge=1, le=MAX_ID),
    storage: Storage = Depends(get_storage),
):
    storage.delete_announcement(announcement_id)
    return Response(status_code=204)
