from datetime import datetime

from pydantic import ConfigDict, Field

from app.schemas.common import CamelModel


class AnnouncementCreate(CamelModel):
    title: str = Field(..., min_length=1)
    content: str = Field(..., min_length=1)
    author: str = Field(..., min_length=1)
    is_important: bool = False


class AnnouncementRead(AnnouncementCreate):
    id: int
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
