"""Database session management for Keranjang."""
from contextlib import contextmanager
from typing import Generator, Optional
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.engine import Engine

from keranjang.config.settings import get_settings
from keranjang.models import Base


def make_engine(db_url: Optional[str] = None, echo: Optional[bool] = None) -> Engine:
    """Create an engine and make sure the schema exists."""
    settings = get_settings()
    engine = create_engine(
        db_url or settings.DB_URL,
        echo=settings.DB_ECHO if echo is None else echo,
    )
    Base.metadata.create_all(engine)
    return engine


def make_session_factory(engine: Engine) -> sessionmaker:
    """Create a session factory bound to the engine."""
    return sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=engine,
    )


class TransactionManager:
    """Manages database transactions with error handling."""

    def __init__(self, session_factory: sessionmaker):
        self.session_factory = session_factory

    @contextmanager
    def transaction(self, *, auto_commit: bool = True) -> Generator[Session, None, None]:
        """
        Context manager for database transactions.

        Args:
            auto_commit: Whether to automatically commit on success

        Yields:
            Session: A fresh database session

        Raises:
            Exception: Any exception that occurs during the transaction
        """
        session = self.session_factory()
        try:
            yield session
            if auto_commit:
                session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()
