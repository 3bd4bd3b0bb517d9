from collections.abc import Iterator
from contextlib import contextmanager
from urllib.parse import urlparse

import structlog
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from .exceptions import StorageInitError

logger = structlog.get_logger(__name__)

Base = declarative_base()


class StorageEngine:
    """Owns the database engine and the workouts/exercises schema.

    The engine is built explicitly and handed to every component that needs
    storage. Nothing touches the database until ``initialize()`` succeeds.
    """

    def __init__(self, database_url: str, *, echo: bool = False):
        self.database_url = database_url
        self.echo = echo
        self._engine: Engine | None = None
        self._session_factory: sessionmaker[Session] | None = None

    @property
    def is_initialized(self) -> bool:
        return self._session_factory is not None

    @property
    def engine(self) -> Engine:
        if self._engine is None:
            raise StorageInitError("Storage engine has not been initialized")
        return self._engine

    def initialize(self) -> None:
        """Open the database and create missing tables. Safe to call repeatedly."""
        if self.is_initialized:
            return

        from . import models  # noqa: F401

        parsed = urlparse(self.database_url)
        logger.info("storage_initializing", scheme=parsed.scheme)

        connect_args = {}
        if parsed.scheme.startswith("sqlite"):
            connect_args["check_same_thread"] = False

        try:
            engine = create_engine(self.database_url, echo=self.echo, connect_args=connect_args)
            Base.metadata.create_all(bind=engine)
        except SQLAlchemyError as exc:
            logger.error("storage_init_failed", scheme=parsed.scheme, error=str(exc))
            raise StorageInitError(f"Could not open storage or create schema: {exc}") from exc

        self._engine = engine
        self._session_factory = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)
        logger.info("storage_initialized", tables=sorted(Base.metadata.tables))

    @contextmanager
    def session(self) -> Iterator[Session]:
        if self._session_factory is None:
            raise StorageInitError("Storage engine has not been initialized")
        session = self._session_factory()
        try:
            yield session
        finally:
            session.close()

    def dispose(self) -> None:
        if self._engine is not None:
            self._engine.dispose()
        self._engine = None
        self._session_factory = None
