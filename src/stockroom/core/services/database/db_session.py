"""Database engine and session factory used across the application."""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from loguru import logger
from sqlalchemy import StaticPool, text
from sqlalchemy.engine import make_url
from sqlmodel import Session, SQLModel, create_engine

from stockroom.runtime.config.config_data import DatabaseConfig
from stockroom.runtime.context import get_config


class DbSessionService:
    def __init__(self, db_config: DatabaseConfig | None = None):
        """Initialize the database engine from ``db_config`` or the active config."""
        main_config = get_config()
        self._config = db_config or main_config.database
        self._environment = main_config.app.environment

        logger.debug("Initializing database engine for {}", self._redacted_url())
        self._engine = create_engine(self._config.url, **self._engine_kwargs())

    def _redacted_url(self) -> str:
        return make_url(self._config.url).render_as_string(hide_password=True)

    def _engine_kwargs(self) -> dict[str, Any]:
        db_config = self._config
        engine_kwargs: dict[str, Any] = {
            "echo": db_config.echo,
            "connect_args": self._get_connect_args(),
        }

        if db_config.is_in_memory:
            # One shared connection, otherwise every session sees an empty database
            engine_kwargs["poolclass"] = StaticPool
        elif not db_config.is_sqlite:
            engine_kwargs.update(
                {
                    "pool_size": db_config.pool_size,
                    "max_overflow": db_config.max_overflow,
                    "pool_timeout": db_config.pool_timeout,
                    "pool_recycle": db_config.pool_recycle,
                    "pool_pre_ping": True,
                }
            )
        return engine_kwargs

    def _get_connect_args(self) -> dict[str, Any]:
        """Get database-specific connection arguments."""
        connect_args: dict[str, Any] = {}

        if self._config.is_sqlite:
            connect_args.update(
                {
                    "check_same_thread": False,  # FastAPI runs sync handlers in a threadpool
                    "timeout": 20,
                }
            )
            if self._environment == "production":
                logger.warning(
                    "SQLite is not recommended for production use. "
                    "Consider PostgreSQL for better reliability."
                )
        elif self._config.url.startswith("postgresql"):
            connect_args.update(
                {
                    "application_name": f"stockroom_{self._environment}",
                    "connect_timeout": 30,
                }
            )

        return connect_args

    def create_all(self) -> None:
        """Create all database tables that do not exist yet."""
        from stockroom.entities.service.product import ProductTable  # noqa: F401

        SQLModel.metadata.create_all(self._engine)
        logger.debug("Database tables ensured")

    def get_session(self) -> Session:
        """Return a new SQLModel session bound to the shared engine."""
        return Session(
            self._engine,
            expire_on_commit=False,
            autoflush=True,
        )

    @contextmanager
    def session_scope(self) -> Iterator[Session]:
        """Yield a session that commits on success and rolls back on error."""
        db = self.get_session()
        try:
            yield db
            db.commit()
        except Exception as e:
            db.rollback()
            logger.bind(error_type=type(e).__name__).debug(
                "Transaction rolled back: {}", e
            )
            raise
        finally:
            db.close()

    def health_check(self) -> bool:
        """Perform a health check on the database connection."""
        try:
            with self._engine.connect() as connection:
                connection.execute(text("SELECT 1"))
                return True
        except Exception as e:
            logger.error(
                "Database health check failed: {}",
                e,
            )
            return False

    def dispose(self) -> None:
        """Close every pooled connection."""
        self._engine.dispose()
