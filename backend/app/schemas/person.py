from datetime import datetime
from typing import Literal, Optional

from pydantic import (
    ConfigDict,
    Field,
    StrictBool,
    StrictInt,
    computed_field,
    field_validator,
)

from app.core.constants import (
    DEFAULT_EMOJI,
    MAX_ID,
    MAX_TARGET_COUNT,
    MIN_TARGET_COUNT,
    WEEKDAYS,
)
from app.core.progress import completion, completion_rate, normalize_target_days
from app.schemas.common import CamelModel

Weekday = Literal["monday", "tuesday", "wednesday", "thursday", "friday", "saturday"]
TargetType = Literal["specific_days", "days_per_week"]


def default_emoji_if_blank(v):
    if v is None or (isinstance(v, str) and v.strip() == ""):
        return DEFAULT_EMOJI
    return v


class PersonCreate(CamelModel):
    """Payload for registering a new person."""

    name: str = Field(..., min_length=1)
    goal: str = Field(..., min_length=1)
    emoji: str = DEFAULT_EMOJI
    target_type: TargetType = "specific_days"
    target_days: list[str] = Field(default_factory=lambda: list(WEEKDAYS))
    target_count: Optional[int] = Field(
        None, ge=MIN_TARGET_COUNT, le=MAX_TARGET_COUNT
    )

    @field_validator("emoji", mode="before")
    @classmethod
    def _blank_emoji(cls, v):
        return default_emoji_if_blank(v)

    # Malformed day lists fall back to the whole week instead of failing
    @field_validator("target_days", mode="before")
    @classmethod
    def _clean_days(cls, v):
        return normalize_target_days(v)


class PersonUpdate(CamelModel):
    """Editable person fields; anything else a client sends is ignored."""

    name: Optional[str] = Field(None, min_length=1)
    goal: Optional[str] = Field(None, min_length=1)
    emoji: Optional[str] = None
    target_type: Optional[TargetType] = None
    target_days: Optional[list[str]] = None
    target_count: Optional[int] = Field(
        None, ge=MIN_TARGET_COUNT, le=MAX_TARGET_COUNT
    )

    model_config = ConfigDict(extra="ignore")

    @field_validator("emoji", mode="before")
    @classmethod
    def _blank_emoji(cls, v):
        # Omitted or null means "leave unchanged"
        if v is None:
            return None
        return default_emoji_if_blank(v)

    @field_validator("target_days", mode="before")
    @classmethod
    def _clean_days(cls, v):
        if v is None:
            return None
        return normalize_target_days(v)

    def changes(self) -> dict:
        """Only the fields the client actually supplied, nulls dropped."""
        return self.model_dump(exclude_unset=True, exclude_none=True)


class ProgressUpdate(CamelModel):
    person_id: StrictInt = Field(..., ge=1, le=MAX_ID)
    day: Weekday
    completed: StrictBool


class PersonRead(CamelModel):
    """Schema returned to the frontend when reading a person."""

    id: int
    name: str
    goal: str
    emoji: str
    target_type: TargetType
    target_days: list[str]
    target_count: Optional[int] = None
    weekly_progress: dict[str, bool]
    current_streak: int
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)

    @computed_field(alias="completedDays")
    @property
    def completed_days(self) -> int:
        return self._completion()[0]

    @computed_field(alias="targetTotal")
    @property
    def target_total(self) -> int:
        return self._completion()[1]

    @computed_field(alias="completionRate")
    @property
    def completion_rate(self) -> int:
        return completion_rate(*self._completion())

    def _completion(self) -> tuple[int, int]:
        return completion(
            self.target_type,
            self.target_days,
            self.target_count,
            self.weekly_progress,
        )
