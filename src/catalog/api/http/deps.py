"""FastAPI dependency implementations."""

from __future__ import annotations

from collections.abc import Iterator

from fastapi import Depends, Request
from sqlmodel import Session

from src.catalog.api.http.app_data import ApplicationDependencies
from src.catalog.api.http.controllers.book import BookCatalogController
from src.catalog.entities.book import BookRepository, SqlBookRepository


def get_db_session(request: Request) -> Iterator[Session]:
    """Open a database session for the duration of a request."""
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    with app_deps.database_service.get_session() as session:
        yield session


def get_book_repository(session: Session = Depends(get_db_session)) -> BookRepository:
    """Get the book repository bound to the request's session."""
    return SqlBookRepository(session)


def get_book_controller(
    repository: BookRepository = Depends(get_book_repository),
) -> BookCatalogController:
    """Get a book controller wired to the repository."""
    return BookCatalogController(repository)
