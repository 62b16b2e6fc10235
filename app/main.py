import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.http.health import router as health_router
from app.api.http.posts import router as posts_router
from app.core.config import settings
from app.core.db import init_db
from app.core.logging_config import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.auto_create_tables:
        logger.info("Creating database tables")
        await init_db()
    yield


def create_app() -> FastAPI:
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(
        title=settings.project_name,
        description="CRUD API для постов с публикацией",
        version=settings.version,
        lifespan=lifespan
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Подключаем роутеры
    app.include_router(health_router)
    app.include_router(posts_router)

    @app.get("/")
    async def root():
        """Корневой эндпоинт"""
        return {
            "message": settings.project_name,
            "version": settings.version,
            "docs": "/docs",
            "health": "/health"
        }

    return app


app = create_app()
