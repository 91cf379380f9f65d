"""Session helpers (issue tokens, cookies, validation)."""
from __future__ import annotations

import secrets
import threading
import time
from typing import Callable, Dict, Optional, Tuple

from fastapi import Request, Response
from sqlalchemy import delete

from campus.db.models import UserSession
from campus.repositories.base import DocumentStore
from campus.repositories.sql_storage import SQLDocumentStore

SESSION_COOKIE_NAME = "session"


class SessionRegistry:
    """In-process map of session token -> user id, with expiry.

    Expired entries are dropped whenever a new session is issued.
    """

    def __init__(self, ttl_seconds: int, *, clock: Callable[[], float] = time.time) -> None:
        self.ttl_seconds = max(60, int(ttl_seconds or 0))
        self._clock = clock
        self._sessions: Dict[str, Tuple[str, float]] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._sessions)

    def issue(self, user_id) -> str:
        token = secrets.token_urlsafe(32)
        now = self._clock()
        with self._lock:
            expired = [t for t, (_, expires_at) in self._sessions.items() if expires_at < now]
            for stale in expired:
                del self._sessions[stale]
            self._sessions[token] = (str(user_id), now + self.ttl_seconds)
        return token

    def resolve(self, token: Optional[str]) -> Optional[str]:
        if not token:
            return None
        with self._lock:
            entry = self._sessions.get(token)
            if not entry:
                return None
            user_id, expires_at = entry
            if expires_at < self._clock():
                del self._sessions[token]
                return None
            return user_id

    def revoke(self, token: Optional[str]) -> None:
        if not token:
            return
        with self._lock:
            self._sessions.pop(token, None)


class SQLSessionRegistry:
    """Sessions persisted in the ``sessions`` table, shared by every worker process."""

    def __init__(self, store: SQLDocumentStore, ttl_seconds: int, *, clock: Callable[[], float] = time.time) -> None:
        self.store = store
        self.ttl_seconds = max(60, int(ttl_seconds or 0))
        self._clock = clock

    def issue(self, user_id) -> str:
        token = secrets.token_urlsafe(32)
        now = self._clock()
        with self.store.session() as session:
            session.execute(delete(UserSession).where(UserSession.expires_at < now))
            session.add(UserSession(token=token, user_id=str(user_id), expires_at=now + self.ttl_seconds))
            session.commit()
        return token

    def resolve(self, token: Optional[str]) -> Optional[str]:
        if not token:
            return None
        with self.store.session() as session:
            entity = session.get(UserSession, token)
            if not entity:
                return None
            if entity.expires_at < self._clock():
                session.delete(entity)
                session.commit()
                return None
            return entity.user_id

    def revoke(self, token: Optional[str]) -> None:
        if not token:
            return
        with self.store.session() as session:
            session.execute(delete(UserSession).where(UserSession.token == token))
            session.commit()


def build_session_registry(store: DocumentStore, ttl_seconds: int):
    """Sessions live next to the data: in SQL for the SQL store, in memory otherwise."""
    if isinstance(store, SQLDocumentStore):
        return SQLSessionRegistry(store, ttl_seconds)
    return SessionRegistry(ttl_seconds)


def session_token(request: Request) -> Optional[str]:
    return request.cookies.get(SESSION_COOKIE_NAME)


def set_session_cookie(response: Response, token: str, *, secure: bool, max_age: int) -> None:
    response.set_cookie(
        SESSION_COOKIE_NAME,
        token,
        httponly=True,
        secure=secure,
        samesite="strict",
        max_age=max_age,
        path="/",
    )


def clear_session_cookie(response: Response) -> None:
    response.delete_cookie(SESSION_COOKIE_NAME, path="/")
