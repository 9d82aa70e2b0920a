from fastapi import APIRouter, Depends

from app.api.deps import get_storage
from app.core.progress import dashboard_stats
from app.schemas.stats import StatsRead
from app.storage.base import Storage


router = APIRouter(prefix="/api/stats", tags=["stats"])


@router.get("", response_model=StatsRead)
def get_stats(storage: Storage = Depends(get_storage)):
    """Totals shown above the people grid."""
    return StatsRead(**dashboard_stats(storage.list_people()))
