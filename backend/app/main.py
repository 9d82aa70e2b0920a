import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.announcements import router as announcements_router
from app.api.errors import register_error_handlers
from app.api.people import router as people_router
from app.api.stats import router as stats_router
from app.core.config import Settings, settings
from app.storage.base import Storage
from app.storage.factory import build_storage


logger = logging.getLogger(__name__)


def create_app(
    storage: Optional[Storage] = None,
    app_settings: Optional[Settings] = None,
) -> FastAPI:
    """Build the API around an explicit store (built from settings if omitted)."""
    cfg = app_settings or settings
    logging.basicConfig(
        level=cfg.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = FastAPI(title="Habit Tracker API")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cfg.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # The process owns the store; routes reach it through app.state
    app.state.storage = storage if storage is not None else build_storage(cfg)
    logger.info("Using %s", type(app.state.storage).__name__)

    register_error_handlers(app)

    app.include_router(people_router)
    app.include_router(announcements_router)
    app.include_router(stats_router)

    @app.get("/")
    def root():
        return {"message": "Habit tracker backend is running"}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("app.main:app", host="0.0.0.0", port=8000)
