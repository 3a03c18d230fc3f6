# src/facet/db/client.py
"""Database engine and session handling."""

from contextlib import contextmanager
from typing import Any, Dict, Iterator, Optional

from pydantic import BaseModel, Field
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from facet.core.logging import log


class DbConfig(BaseModel):
    """Connection settings for `DbClient`."""

    url: str = "sqlite:///./facet.db"
    echo: bool = False
    engine_options: Dict[str, Any] = Field(default_factory=dict)


class DbClient:
    """Owns the engine and hands out sessions."""

    def __init__(self, config: DbConfig, engine: Optional[Engine] = None):
        self.config = config
        self.engine = engine or create_engine(
            config.url, echo=config.echo, **config.engine_options
        )
        # Entities outlive their session: they are serialized after the service returns.
        self.SessionLocal = sessionmaker(
            bind=self.engine, autoflush=False, expire_on_commit=False
        )

    @contextmanager
    def session(self) -> Iterator[Session]:
        """Session scoped to one unit of work; rolled back on error."""
        db = self.SessionLocal()
        try:
            yield db
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    def test_connection(self) -> None:
        with self.engine.connect() as connection:
            connection.execute(text("SELECT 1"))
        log.success(f"Database connection verified ({self.engine.url.get_backend_name()})")
