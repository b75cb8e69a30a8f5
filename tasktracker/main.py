# tasktracker/main.py
import logging
import os

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from tasktracker.core.config import Settings
from tasktracker.core.logging_config import setup_logging
from tasktracker.core.tokens import TokenIssuer
from tasktracker.db import base as _models  # noqa: F401
from tasktracker.db.session import build_engine, create_all_tables

# 라우터
from tasktracker.routers import auth, health, task, user

logger = logging.getLogger(__name__)


def validation_error_handler(request: Request, exc: RequestValidationError):
    """Request schema violations are client errors (400), not 422."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or Settings()
    setup_logging(settings.log_level.upper())

    app = FastAPI(
        title="Task Tracker Backend",
        version=os.getenv("APP_VERSION", "0.1.0"),
    )

    app.state.settings = settings
    app.state.engine = build_engine(settings)
    app.state.token_issuer = TokenIssuer.from_settings(settings)

    if settings.auto_create_tables:
        create_all_tables(app.state.engine)

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_origin_regex=settings.cors_allow_origin_regex or None,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RequestValidationError, validation_error_handler)

    # 라우터 등록
    app.include_router(health.router)
    app.include_router(auth.auth_router)
    app.include_router(user.user_router)
    app.include_router(task.router)

    logger.info("app created env=%s", settings.app_env)
    return app


def run() -> None:
    import uvicorn
    from dotenv import load_dotenv

    load_dotenv()
    settings = Settings()
    uvicorn.run(
        "tasktracker.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
    )


if __name__ == "__main__":
    run()
