"""SQL backend: declarative base, row models and engine/session factories."""

from .session import Base, make_engine, make_sessionmaker

__all__ = ["Base", "make_engine", "make_sessionmaker"]
