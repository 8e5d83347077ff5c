import logging
import threading
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker, declarative_base
from sqlalchemy.pool import StaticPool
from hotdesk.core.config import settings

logger = logging.getLogger(__name__)

Base = declarative_base()


def make_engine(database_url: str):
    """Build an engine; in-memory SQLite shares one connection across threads."""
    if database_url.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
        if database_url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
        return create_engine(database_url, **kwargs)
    return create_engine(database_url, pool_pre_ping=True)


class SeatStore:
    """
    Owner of the catalog, reservation store, leave ledger and calendar config.

    Lifecycle is init (create tables, load defaults) -> serve (guarded
    transactions) -> reset (admin-triggered reinitialise). Every transaction
    holds the store mutex from the first read to the commit, so validation
    and mutation of a seat selection happen as one check-and-set step.
    """

    def __init__(self, database_url: str):
        self.database_url = database_url
        self.engine = make_engine(database_url)
        self.SessionLocal = sessionmaker(
            autocommit=False, autoflush=False, expire_on_commit=False, bind=self.engine
        )
        self._mutex = threading.Lock()

    def init(self) -> None:
        from hotdesk.db import base  # noqa: F401  registers every model on Base
        from hotdesk.db.init_db import seed_defaults

        Base.metadata.create_all(bind=self.engine)
        with self.transaction() as db:
            seed_defaults(db)

    def reset(self) -> None:
        from hotdesk.db.init_db import reset_defaults

        with self.transaction() as db:
            reset_defaults(db)

    @contextmanager
    def transaction(self) -> Iterator[Session]:
        with self._mutex:
            db = self.SessionLocal()
            try:
                yield db
                db.commit()
            except Exception:
                db.rollback()
                raise
            finally:
                db.close()

    def dispose(self) -> None:
        self.engine.dispose()


store = SeatStore(settings.DATABASE_URL)


def get_store() -> SeatStore:
    return store
