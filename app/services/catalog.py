import logging
from typing import List, Optional

from app.schemas.author import Author, AuthorCreate, AuthorUpdate
from app.schemas.book import AuthorView, Book, BookCreate, BookUpdate
from app.services.authors import AuthorClient, author_from_book
from app.services.result import NotFound, Ok, Result, UpstreamError
from app.services.storage import BookStore

logger = logging.getLogger(__name__)


class Catalog:
    """Superficie de operaciones Query/Mutation.

    Cada operación delega en un solo paso al ``BookStore`` o al
    ``AuthorClient``. ``NotFound`` y ``UpstreamError`` se devuelven al
    cliente como ``None``; la diferencia solo queda en los logs.
    """

    def __init__(self, store: BookStore, authors: AuthorClient):
        self.store = store
        self.authors = authors

    # --- books ---

    def get_books(self) -> List[Book]:
        return self.store.list_all()

    def get_books_count(self) -> int:
        return self.store.count()

    def get_book(self, book_id: str) -> Optional[Book]:
        return self.store.get_by_id(book_id)

    def add_book(self, fields: BookCreate) -> Book:
        return self.store.create(fields)

    def update_book(self, book_id: str, fields: BookUpdate) -> Optional[Book]:
        return self.store.update(book_id, fields)

    def delete_book(self, book_id: str) -> Optional[Book]:
        return self.store.delete(book_id)

    def book_author(self, book: Book) -> AuthorView:
        return author_from_book(book)

    # --- authors (servicio externo) ---

    def _unwrap(self, operation: str, result: Result):
        if isinstance(result, Ok):
            return result.value
        if isinstance(result, NotFound):
            logger.debug("%s: %s %s no encontrado", operation, result.resource, result.identifier)
        elif isinstance(result, UpstreamError):
            logger.warning(
                "%s: servicio de autores no disponible (status=%s): %s",
                operation,
                result.status_code,
                result.detail,
            )
        return None

    async def get_authors(self) -> List[Author]:
        authors = self._unwrap("getAuthors", await self.authors.list())
        return authors if authors is not None else []

    async def get_author(self, author_id: str) -> Optional[Author]:
        return self._unwrap("getAuthor", await self.authors.get(author_id))

    async def add_author(self, fields: AuthorCreate) -> Optional[Author]:
        return self._unwrap("addAuthor", await self.authors.create(fields))

    async def update_author(self, author_id: str, fields: AuthorUpdate) -> Optional[Author]:
        return self._unwrap("updateAuthor", await self.authors.update(author_id, fields))

    async def delete_author(self, author_id: str) -> Optional[Author]:
        return self._unwrap("deleteAuthor", await self.authors.delete(author_id))
