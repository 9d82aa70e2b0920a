
from sqlalchemy import Column, DateTime, Integer, String, JSON
from sqlalchemy.dialects.postgresql import JSONB

from app.core.constants import DEFAULT_EMOJI, WEEKDAYS
from app.db import Base, utcnow

# JSONB on Postgres, plain JSON elsewhere (SQLite in tests)
JsonType = JSON().with_variant(JSONB(), "postgresql")


class Person(Base):
    __tablename__ = "people"

    id = Column(Integer, primary_key=True, index=True)

    name = Column(String, nullable=False)
    goal = Column(String, nullable=False)
    emoji = Column(String, nullable=False, default=DEFAULT_EMOJI)

    # specific_days or days_per_week
    target_type = Column(
        String(20),
        nullable=False,
        server_default="specific_days",
    )
    target_days = Column(JsonType, nullable=False, default=lambda: list(WEEKDAYS))
    target_count = Column(Integer, nullable=True, default=6)

    # {"monday": false, ..., "saturday": false}
    weekly_progress = Column(
        JsonType,
        nullable=False,
        default=lambda: {day: False for day in WEEKDAYS},
    )
    # Only ever written together with weekly_progress
    current_streak = Column(Integer, nullable=False, default=0)

    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
