import logging
import uuid
from typing import Iterable, List, Optional

from app.schemas.book import Book, BookCreate, BookUpdate
from app.schemas.genres import Genre

logger = logging.getLogger(__name__)

MERGE_TRUTHY = "truthy"
MERGE_PRESENCE = "presence"

SAMPLE_BOOKS = [
    Book(
        id="d26fd654-f4d4-4b98-91e5-6d8c9569aed6",
        title="The Awakening",
        description="The Awakening es una novela de la escritora estadounidense Kate Chopin.",
        genre=Genre.NONE,
        publishYear=1899,
        authorName="Kate Chopin",
    ),
    Book(
        id="35b19ead-3aa9-415e-a46d-6621e1604119",
        title="City of Glass",
        description=(
            "Ciudad de cristal es el tercer libro de la saga Cazadores de Sombras, "
            "escrita por Cassandra Clare. Fue publicada originalmente en Estados Unidos."
        ),
        isbn="978-0140097313",
        genre=Genre.FANTASY,
        publishYear=2009,
        authorName="Paul Auster",
        authorNationality="Estadounidense",
    ),
]


class BookStore:
    """Colección en memoria de libros, en orden de inserción.

    Una sola instancia por proceso; la crea ``create_app`` y la usa el
    ``Catalog``. Todas las operaciones son síncronas, así que dentro del
    event loop se ejecutan sin intercalarse.
    """

    def __init__(self, merge_policy: str = MERGE_TRUTHY):
        if merge_policy not in (MERGE_TRUTHY, MERGE_PRESENCE):
            raise ValueError(f"merge_policy desconocida: {merge_policy}")
        self.merge_policy = merge_policy
        self._books: List[Book] = []

    @classmethod
    def with_sample_books(cls, merge_policy: str = MERGE_TRUTHY) -> "BookStore":
        store = cls(merge_policy=merge_policy)
        store.seed(SAMPLE_BOOKS)
        return store

    def seed(self, books: Iterable[Book]) -> None:
        for book in books:
            self._books.append(book.model_copy())
        logger.info("Store inicializado con %d libros", len(self._books))

    def list_all(self) -> List[Book]:
        return list(self._books)

    def count(self) -> int:
        return len(self._books)

    def _index_of(self, book_id: str) -> int:
        for i, book in enumerate(self._books):
            if book.id == book_id:
                return i
        return -1

    def get_by_id(self, book_id: str) -> Optional[Book]:
        i = self._index_of(book_id)
        if i == -1:
            logger.debug("Libro %s no encontrado", book_id)
            return None
        return self._books[i]

    def create(self, fields: BookCreate) -> Book:
        book = Book(id=str(uuid.uuid4()), **fields.model_dump())
        self._books.append(book)
        logger.info("Libro creado: id=%s title=%r", book.id, book.title)
        return book

    def update(self, book_id: str, fields: BookUpdate) -> Optional[Book]:
        i = self._index_of(book_id)
        if i == -1:
            logger.debug("update: libro %s no encontrado", book_id)
            return None

        changes = {}
        for name in fields.model_fields_set:
            value = getattr(fields, name)
            if self.merge_policy == MERGE_TRUTHY:
                # "" / 0 / None no sobreescriben el valor guardado
                if value:
                    changes[name] = value
            elif value is not None:
                changes[name] = value

        updated = self._books[i].model_copy(update=changes)
        self._books[i] = updated
        logger.info("Libro actualizado: id=%s campos=%s", book_id, sorted(changes))
        return updated

    def delete(self, book_id: str) -> Optional[Book]:
        i = self._index_of(book_id)
        if i == -1:
            logger.debug("delete: libro %s no encontrado", book_id)
            return None
        book = self._books.pop(i)
        logger.info("Libro eliminado: id=%s", book_id)
        return book
