"""
Pickup soccer signup API.

``create_app`` wires one engine and session factory per application and keeps
them on ``app.state``; request handlers reach them only through ``get_db``.
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from pickup.config import Settings, get_settings
from pickup.database import build_engine, build_session_factory, init_db
from pickup.logging_config import setup_logging
from pickup.routers import admin_router, game_router

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    engine = build_engine(settings.database_url, echo=settings.sql_echo)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("DB target: %s", engine.url.render_as_string(hide_password=True))
        try:
            init_db(engine)
        except Exception:
            logger.exception("init_db failed")
            raise
        logger.info("DB ready.")

        yield

        logger.info("Disposing DB engine…")
        engine.dispose()

    app = FastAPI(title="Pickup Soccer", lifespan=lifespan)
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)

    app.include_router(game_router.router)
    app.include_router(admin_router.router)

    @app.exception_handler(StarletteHTTPException)
    def handle_http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.info("invalid_request method=%s path=%s", request.method, request.url.path)
        return JSONResponse(
            status_code=422,
            content={"error": "Invalid request", "details": jsonable_encoder(exc.errors())},
        )

    @app.exception_handler(Exception)
    def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("unexpected_error method=%s path=%s", request.method, request.url.path)
        return JSONResponse(status_code=500, content={"error": "Internal server error"})

    @app.get("/health")
    def health():
        """Health Check Endpoint"""
        return {"status": "ok"}

    @app.get("/health/db")
    def health_db(request: Request):
        try:
            with request.app.state.session_factory() as db:
                db.execute(text("SELECT 1"))
            return {"status": "ok", "db": "up"}
        except SQLAlchemyError as exc:
            logger.warning("health_db_unavailable detail=%s", str(exc))
            return JSONResponse(status_code=503, content={"status": "error", "db": "down"})

    return app


settings = get_settings()
setup_logging(level=settings.log_level, access_log=settings.access_log)

app = create_app(settings)
