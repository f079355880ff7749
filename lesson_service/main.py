import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from sqlalchemy.exc import SQLAlchemyError

from lesson_service.api.inventory import router as inventory_router
from lesson_service.api.lessons import router as lessons_router
from lesson_service.api.orders import router as orders_router
from lesson_service.config import Settings, settings
from lesson_service.database import build_database
from lesson_service.exception_handlers import register_exception_handlers
from lesson_service.middleware.request_logging import log_requests

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.settings.static_dir.mkdir(parents=True, exist_ok=True)
    database = build_database(app.state.settings)
    try:
        await database.ping()
    except SQLAlchemyError:
        logger.error("Error connecting to the database", exc_info=True)
        await database.dispose()
        raise
    app.state.database = database
    logger.info("Connected to the database")
    yield
    await database.dispose()
    logger.info("Lesson service stopped.")


def create_app(app_settings: Settings = settings) -> FastAPI:
    app = FastAPI(
        title="Lesson Service",
        description="Lesson catalogue, orders and seat inventory",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = app_settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins,
        allow_methods=["GET", "POST", "PUT"],
        allow_headers=["*"],
    )
    app.middleware("http")(log_requests)
    register_exception_handlers(app)

    app.mount(
        app_settings.static_prefix,
        StaticFiles(directory=app_settings.static_dir, check_dir=False),
        name="images",
    )

    app.include_router(lessons_router)
    app.include_router(orders_router)
    app.include_router(inventory_router)

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    return app


app = create_app()


def run() -> None:
    uvicorn.run(app, host=settings.host, port=settings.port)
