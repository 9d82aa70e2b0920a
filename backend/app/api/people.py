from typing import Optional

from fastapi import APIRouter, Depends, Path, Response

from app.api.deps import get_storage
from app.core.constants import MAX_ID
from app.schemas.person import PersonCreate, PersonRead, PersonUpdate, ProgressUpdate
from app.storage.base import Storage


router = APIRouter(prefix="/api/people", tags=["people"])


@router.get("", response_model=list[PersonRead])
def list_people(storage: Storage = Depends(get_storage)):
    """Everyone on the dashboard, oldest registration first."""
    return storage.list_people()


@router.post("", response_model=PersonRead, status_code=201)
def create_person(payload: PersonCreate, storage: Storage = Depends(get_storage)):
    return storage.create_person(payload)


# Must stay above /{person_id} so "progress" is not parsed as an id
@router.patch("/progress", response_model=PersonRead)
def update_progress(payload: ProgressUpdate, storage: Storage = Depends(get_storage)):
    """
    Toggle one weekday for a person and recompute their streak.

      PATCH /api/people/progress {"personId": 1, "day": "tuesday", "completed": true}
    """
    return storage.update_progress(payload)


@router.patch("/{person_id}", response_model=PersonRead)
def update_person(
    person_id: int = Path(..., ge=1, le=MAX_ID),
    payload: Optional[PersonUpdate] = None,
    storage: Storage = Depends(get_storage),
):
    return storage.update_person(person_id, payload or PersonUpdate())


@router.delete("/{person_id}", status_code=204, response_class=Response)
def delete_person(
    person_id: int = Path(..., ge=1, le=MAX_ID),
    storage: Storage = Depends(get_storage),
):
    storage.delete_person(person_id)
    return Response(status_code=204)
