import logging
from typing import Generator

from fastapi import Request
from sqlalchemy import create_engine, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from errors import DatabaseUnavailable

logger = logging.getLogger(__name__)


class Database:
    """Shared engine (and its connection pool) plus the session factory built on it."""

    def __init__(self, url, **engine_kwargs):
        self.engine = create_engine(url, pool_pre_ping=True, **engine_kwargs)
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

    def ping(self):
        try:
            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
        except SQLAlchemyError as e:
            logger.error(f"[DB] Error connecting to database: {e}")
            raise DatabaseUnavailable(str(e)) from e
        logger.info("[DB] Connected to database")

    def create_tables(self, metadata):
        metadata.create_all(bind=self.engine)

    def dispose(self):
        self.engine.dispose()


# Dependency
def get_db(request: Request) -> Generator[Session, None, None]:
    db = request.app.state.database.SessionLocal()
    try:
        yield db
    finally:
        db.close()
