"""SQLAlchemy models mirroring the JSON document collections.

Record ids are not unique in older documents (a request body could override
the generated id), so rows are keyed by a surrogate ``pk`` and ``record_id``
is only indexed.
"""
from __future__ import annotations

from sqlalchemy import Column, Float, Integer, String, JSON

from .session import Base


class UserRow(Base):
    __tablename__ = "users"

    pk = Column(Integer, primary_key=True, autoincrement=True)
    record_id = Column(String(64), index=True, nullable=True)
    position = Column(Integer, nullable=False, default=0)
    data = Column(JSON, nullable=False, default=dict)


class ResourceRow(Base):
    __tablename__ = "resources"

    pk = Column(Integer, primary_key=True, autoincrement=True)
    record_id = Column(String(64), index=True, nullable=True)
    position = Column(Integer, nullable=False, default=0)
    data = Column(JSON, nullable=False, default=dict)


class BookingRow(Base):
    __tablename__ = "bookings"

    pk = Column(Integer, primary_key=True, autoincrement=True)
    record_id = Column(String(64), index=True, nullable=True)
    position = Column(Integer, nullable=False, default=0)
    data = Column(JSON, nullable=False, default=dict)


class StoreLock(Base):
    """Single row bumped at the start of every write transaction.

    The UPDATE takes a row lock (PostgreSQL/MySQL) or the database write lock
    (SQLite), so writers in different processes run one after the other.
    """

    __tablename__ = "store_lock"

    id = Column(Integer, primary_key=True)
    version = Column(Integer, nullable=False, default=0)


class UserSession(Base):
    __tablename__ = "sessions"

    token = Column(String(128), primary_key=True)
    user_id = Column(String(64), nullable=False, index=True)
    expires_at = Column(Float, nullable=False, index=True)  # epoch seconds


TABLES = {
    "users": UserRow,
    "resources": ResourceRow,
    "bookings": BookingRow,
}
