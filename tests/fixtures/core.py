from __future__ import annotations

from collections.abc import Generator
from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session

from stockroom.core.services import DbSessionService, ProductService
from stockroom.entities.service.product import ProductRepository
from stockroom.runtime.config.config_data import DatabaseConfig
from stockroom.runtime.context import with_context

__all__ = [
    "cli_database",
    "client",
    "db_service",
    "repository",
    "service",
    "session",
]


@pytest.fixture
def db_service() -> Generator[DbSessionService]:
    """A database service backed by a fresh in-memory SQLite database."""
    database_service = DbSessionService(DatabaseConfig(url="sqlite://"))
    database_service.create_all()
    try:
        yield database_service
    finally:
        database_service.dispose()


@pytest.fixture
def session(db_service: DbSessionService) -> Generator[Session]:
    """Create a fresh database session for testing."""
    session = db_service.get_session()
    try:
        yield session
    finally:
        session.rollback()
        session.close()


@pytest.fixture
def repository(session: Session) -> ProductRepository:
    return ProductRepository(session)


@pytest.fixture
def service(repository: ProductRepository) -> ProductService:
    return ProductService(repository)


@pytest.fixture
def client(db_service: DbSessionService) -> Generator[TestClient]:
    """HTTP client wired to the in-memory database, without running startup."""
    from stockroom.api.http.app import app
    from stockroom.api.http.app_data import ApplicationDependencies

    app.state.app_dependencies = ApplicationDependencies(database_service=db_service)
    try:
        yield TestClient(app)
    finally:
        del app.state.app_dependencies


@pytest.fixture
def cli_database(tmp_path: Path) -> Generator[str]:
    """Point the active configuration at a throwaway SQLite file."""
    url = f"sqlite:///{tmp_path / 'stockroom-cli.db'}"
    with with_context(database={"url": url}):
        yield url
