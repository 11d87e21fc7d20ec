"""Book API router with CRUD operations."""

from fastapi import APIRouter, Depends, Request
from starlette.responses import JSONResponse

from src.catalog.api.http.controllers.book import BookCatalogController
from src.catalog.api.http.deps import get_book_controller

router = APIRouter(prefix="/books", tags=["books"])


@router.get("")
async def list_books(
    request: Request,
    controller: BookCatalogController = Depends(get_book_controller),
) -> JSONResponse:
    """List all books."""
    return await controller.list_all(request)


@router.post("")
async def create_book(
    request: Request,
    controller: BookCatalogController = Depends(get_book_controller),
) -> JSONResponse:
    """Create a new book from the JSON body."""
    return await controller.create(request)


@router.delete("/{bookId}")
async def delete_book(
    request: Request,
    controller: BookCatalogController = Depends(get_book_controller),
) -> JSONResponse:
    """Delete the book identified by the path."""
    return await controller.delete(request)


@router.put("/{bookId}")
async def update_book(
    request: Request,
    controller: BookCatalogController = Depends(get_book_controller),
) -> JSONResponse:
    """Replace the fields of the book identified by the path."""
    return await controller.update(request)
