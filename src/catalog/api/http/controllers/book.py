"""Request handling for the book resource.

Each handler parses the request, makes exactly one repository call and maps
the outcome to a response:

- truthy result: 200 with a success message (or the listing itself)
- falsy result: 400 with an operation-specific error message
- any exception: logged, then 400 with a more generic message

Nothing raised inside a handler escapes it, so every request gets exactly one
response. Missing books are reported by the repository as a falsy result and
therefore answered with 400, never 404.
"""

from fastapi.encoders import jsonable_encoder
from loguru import logger
from starlette.concurrency import run_in_threadpool
from starlette.requests import Request
from starlette.responses import JSONResponse

from src.catalog.api.utils.params import parse_int
from src.catalog.entities.book import Book, BookRecord, BookRepository

LIST_FAILED = "Could not access the book listing"

CREATED = "Book created successfully!"
CREATE_REJECTED = "Error creating the book. Contact the system administrator."
CREATE_FAILED = "Could not create the book. Contact the system administrator."

REMOVED = "The book was removed successfully!"
REMOVE_REJECTED = "Error removing the book. Contact the system administrator."
REMOVE_FAILED = "Could not remove the book. Contact the system administrator."

UPDATED = "The Book was updated successfully!"
UPDATE_REJECTED = "Error updating the Book. Contact the system administrator"
UPDATE_FAILED = "Could not update the book. Contact the system administrator"

BOOK_ID_PARAM = "bookId"


def _message(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message})


async def _read_record(request: Request) -> BookRecord:
    return BookRecord.model_validate(await request.json())


class BookCatalogController:
    """Maps HTTP requests for books onto a :class:`BookRepository`."""

    def __init__(self, repository: BookRepository) -> None:
        self._repository = repository

    async def list_all(self, request: Request) -> JSONResponse:
        try:
            books = await run_in_threadpool(self._repository.list_all)
            return JSONResponse(status_code=200, content=jsonable_encoder(books))
        except Exception:
            logger.exception("Error accessing the book listing")
            return _message(400, LIST_FAILED)

    async def create(self, request: Request) -> JSONResponse:
        try:
            book = Book.from_record(await _read_record(request))

            created = await run_in_threadpool(self._repository.create, book)
            if created:
                return _message(200, CREATED)
            return _message(400, CREATE_REJECTED)
        except Exception as exc:
            logger.exception(f"Error creating a book. {exc}")
            return _message(400, CREATE_FAILED)

    async def delete(self, request: Request) -> JSONResponse:
        try:
            book_id = parse_int(request.path_params.get(BOOK_ID_PARAM))

            removed = await run_in_threadpool(self._repository.delete, book_id)
            if removed:
                return _message(200, REMOVED)
            return _message(400, REMOVE_REJECTED)
        except Exception as exc:
            logger.exception(f"Error removing a book. {exc}")
            return _message(400, REMOVE_FAILED)

    async def update(self, request: Request) -> JSONResponse:
        try:
            book = Book.from_record(await _read_record(request))
            # The path always decides which book is updated
            book.id = parse_int(request.path_params.get(BOOK_ID_PARAM))

            updated = await run_in_threadpool(self._repository.update, book)
            if updated:
                return _message(200, UPDATED)
            return _message(400, UPDATE_REJECTED)
        except Exception as exc:
            logger.exception(f"Error updating a book. {exc}")
            return _message(400, UPDATE_FAILED)
