"""Entity package: Book.

- BookRecord: request payload describing a book, without identifier
- Book: domain entity handed to the repository
- BookTable: database persistence model
- BookRepository / SqlBookRepository: data access layer
"""

from .entity import Book, BookId, BookRecord
from .repository import BookRepository, SqlBookRepository
from .table import BookTable

__all__ = [
    "Book",
    "BookId",
    "BookRecord",
    "BookRepository",
    "BookTable",
    "SqlBookRepository",
]
