# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import DeclarativeBase, Session, scoped_session, sessionmaker

from authgate.shared.config import load_config
from authgate.shared.logging import logger

_config = load_config()


class Base(DeclarativeBase):
    pass


engine_kwargs: dict[str, object] = {}
if _config.database.url.startswith("sqlite"):
    engine_kwargs["connect_args"] = {
        "check_same_thread": False,
        "timeout": int(_config.database.pool_timeout),
    }
else:
    engine_kwargs.update(
        pool_size=_config.database.pool_size,
        max_overflow=_config.database.max_overflow,
        pool_timeout=_config.database.pool_timeout,
    )

ENGINE: Engine = create_engine(
    _config.database.url,
    echo=False,
    pool_pre_ping=True,
    **engine_kwargs,
)


SessionLocal = scoped_session(
    sessionmaker(bind=ENGINE, autoflush=False, autocommit=False, expire_on_commit=False)
)


@contextmanager
def session_scope() -> Iterator[Session]:
    session = SessionLocal()
    logger.debug("db.session: opened scoped session")
    try:
        yield session
        session.commit()
        logger.debug("db.session: committed scoped session")
    except Exception:
        logger.debug("db.session: error, rolling back")
        session.rollback()
        raise
    finally:
        session.close()
        SessionLocal.remove()
        logger.debug("db.session: closed scoped session")


def init_db() -> bool:
    """Create missing tables. Connection failures are logged, not raised."""
    try:
        Base.metadata.create_all(bind=ENGINE)
    except SQLAlchemyError as exc:
        logger.error(f"Database schema setup failed: {type(exc).__name__}: {exc}")
        return False
    logger.info("Database schema ensured")
    return True
