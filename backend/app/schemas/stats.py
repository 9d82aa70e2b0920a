from app.schemas.common import CamelModel


class StatsRead(CamelModel):
    """Header figures for the dashboard, e.g. weekCompletion='67%'."""

    total_people: int
    active_goals: int
    week_completion: str
    streak_record: str
