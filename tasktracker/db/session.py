# tasktracker/db/session.py
import logging

from fastapi import Request
from sqlalchemy import event
from sqlalchemy.engine import Engine
from sqlalchemy.engine import url as sa_url
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from tasktracker.core.config import Settings

log = logging.getLogger(__name__)


def _mask(url: str) -> str:
    if "://" not in url:
        return url
    scheme, rest = url.split("://", 1)
    if "@" in rest and ":" in rest.split("@", 1)[0]:
        creds, tail = rest.split("@", 1)
        user = creds.split(":", 1)[0]
        return f"{scheme}://{user}:***@{tail}"
    return url


def _strip_outer_quotes(s: str) -> str:
    if not s:
        return s
    if (s[0] == s[-1]) and s[0] in ("'", '"', "`"):
        return s[1:-1].strip()
    return s


def build_db_url(raw: str) -> str:
    url = _strip_outer_quotes(raw.strip())

    if not url:
        raise RuntimeError("DATABASE_URL is required")

    if url.startswith("postgres://"):
        url = url.replace("postgres://", "postgresql+psycopg2://", 1)
    elif url.startswith("postgresql://"):
        url = url.replace("postgresql://", "postgresql+psycopg2://", 1)

    if any(dom in url for dom in ("render.com", "neon.tech")) and "sslmode=" not in url:
        sep = "&" if "?" in url else "?"
        url = f"{url}{sep}sslmode=require"

    try:
        sa_url.make_url(url)
    except Exception as exc:
        raise RuntimeError(f"Invalid DATABASE_URL: {repr(url)} ({exc})")

    return url


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_engine(settings: Settings) -> Engine:
    url = build_db_url(settings.database_url)
    log.info("DB URL: %s", _mask(url))

    parsed = sa_url.make_url(url)
    if parsed.get_backend_name() == "sqlite":
        kwargs = {"connect_args": {"check_same_thread": False}}
        if parsed.database in (None, "", ":memory:"):
            # in-memory DB lives in a single shared connection
            kwargs["poolclass"] = StaticPool
        engine = create_engine(url, **kwargs)
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
        return engine

    return create_engine(
        url,
        pool_pre_ping=True,
        pool_recycle=1800,
        pool_size=5,
        max_overflow=5,
    )


def create_all_tables(engine: Engine) -> None:
    # 모델 모듈 임포트(테이블 등록 보장용)
    from tasktracker.db import base as _base  # noqa: F401

    SQLModel.metadata.create_all(engine)


def get_session(request: Request):
    """FastAPI Depends(get_session) generator, one Session per request."""
    with Session(request.app.state.engine) as s:
        yield s
