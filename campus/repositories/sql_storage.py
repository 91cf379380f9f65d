"""SQL backend: the same document contract stored in three tables.

Each record is one row (``record_id``, ``position``, ``data``). Inside
``locked()`` the load and the save share one transaction that starts by
bumping the ``store_lock`` row, so writers in other processes wait for it to
commit instead of overwriting it.
"""
from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from typing import Iterator, Optional

from sqlalchemy import delete, func, select, update
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from campus.db.models import TABLES, StoreLock
from campus.db.session import Base, make_engine, make_sessionmaker
from campus.repositories.base import DocumentStore, db_defaults, empty_document

logger = logging.getLogger(__name__)

LOCK_ROW_ID = 1


class SQLDocumentStore(DocumentStore):
    def __init__(self, url: str | None = None, *, engine: Optional[Engine] = None) -> None:
        super().__init__()
        self.engine = engine or make_engine(url)
        self._sessionmaker = make_sessionmaker(self.engine)
        self._local = threading.local()
        Base.metadata.create_all(bind=self.engine)
        with self._sessionmaker() as session:
            if session.get(StoreLock, LOCK_ROW_ID) is None:
                session.add(StoreLock(id=LOCK_ROW_ID, version=0))
                session.commit()

    @property
    def _active(self) -> Optional[Session]:
        return getattr(self._local, "session", None)

    @_active.setter
    def _active(self, session: Optional[Session]) -> None:
        self._local.session = session

    def session(self) -> Session:
        return self._sessionmaker()

    @contextmanager
    def locked(self) -> Iterator[None]:
        with self._lock:
            if self._active is not None:
                yield
                return
            session = self._sessionmaker()
            self._active = session
            try:
                session.execute(
                    update(StoreLock).where(StoreLock.id == LOCK_ROW_ID).values(version=StoreLock.version + 1)
                )
                yield
                session.commit()
            except BaseException:
                session.rollback()
                raise
            finally:
                self._active = None
                session.close()

    @contextmanager
    def _session_scope(self) -> Iterator[Session]:
        """The write transaction when inside ``locked()``, otherwise a short-lived session."""
        if self._active is not None:
            yield self._active
            return
        with self._sessionmaker() as session:
            yield session

    def exists(self) -> bool:
        # Errors propagate: guessing "empty" here would let seeding overwrite real data.
        with self._session_scope() as session:
            for model in TABLES.values():
                if session.execute(select(func.count()).select_from(model)).scalar_one():
                    return True
        return False

    def load(self) -> dict:
        db = empty_document()
        try:
            with self._session_scope() as session:
                for name, model in TABLES.items():
                    rows = session.execute(select(model).order_by(model.position)).scalars().all()
                    db[name] = [dict(row.data or {}) for row in rows]
        except SQLAlchemyError as exc:
            logger.warning("Could not read SQL store, falling back to an empty document: %s", exc)
            return empty_document()
        return db

    def save(self, db: dict) -> bool:
        db = db_defaults(db)
        in_transaction = self._active is not None
        try:
            with self._session_scope() as session:
                for name, model in TABLES.items():
                    session.execute(delete(model))
                    for position, record in enumerate(db[name]):
                        record_id = record.get("id")
                        session.add(
                            model(
                                record_id=None if record_id is None else str(record_id),
                                position=position,
                                data=record,
                            )
                        )
                if in_transaction:
                    session.flush()
                else:
                    session.commit()
            return True
        except SQLAlchemyError as exc:
            logger.error("Failed to write SQL store: %s", exc)
            if in_transaction:
                self._active.rollback()
            return False

    def dispose(self) -> None:
        self.engine.dispose()
