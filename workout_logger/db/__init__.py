"""Database package: engine, session, base."""

from workout_logger.db.session import build_engine, build_session_maker, session_scope

__all__ = ["build_engine", "build_session_maker", "session_scope"]
