"""FastAPI dependency implementations."""

from __future__ import annotations

from collections.abc import Iterator

from fastapi import Depends, Request
from sqlmodel import Session

from stockroom.api.http.app_data import ApplicationDependencies
from stockroom.core.services import DbSessionService, ProductService


def get_database_service(request: Request) -> DbSessionService:
    """Get the database service created at startup."""
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    return app_deps.database_service


def get_db_session(
    database_service: DbSessionService = Depends(get_database_service),
) -> Iterator[Session]:
    """Open a session for one request; handlers commit explicitly."""
    session = database_service.get_session()
    try:
        yield session
    finally:
        session.close()


def get_product_service(db: Session = Depends(get_db_session)) -> ProductService:
    return ProductService.from_session(db)
