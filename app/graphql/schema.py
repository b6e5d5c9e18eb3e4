"""
Esquema GraphQL (strawberry) del catálogo de libros y autores.

Los nombres de operaciones y argumentos se exponen en camelCase
(``getBooks``, ``publishYear``, ``authorNacionality``...) para mantener
compatibilidad con los clientes existentes.
"""
from typing import List, Optional

import strawberry
from fastapi import Request
from strawberry.types import Info

from app.schemas.author import Author, AuthorCreate, AuthorUpdate
from app.schemas.book import Book, BookCreate, BookUpdate
from app.schemas.genres import Genre
from app.services.catalog import Catalog

strawberry.enum(Genre, name="Genre")


def _catalog(info: Info) -> Catalog:
    return info.context["catalog"]


@strawberry.type(name="Author")
class AuthorType:
    name: str
    nationality: Optional[str] = None


@strawberry.type(name="Book")
class BookType:
    id: str
    title: str
    description: Optional[str]
    isbn: Optional[str]
    genre: Genre
    publish_year: Optional[int]
    record: strawberry.Private[Book]

    @strawberry.field
    def author(self, info: Info) -> AuthorType:
        view = _catalog(info).book_author(self.record)
        return AuthorType(name=view.name, nationality=view.nationality)

    @classmethod
    def from_record(cls, book: Optional[Book]) -> Optional["BookType"]:
        if book is None:
            return None
        return cls(
            id=book.id,
            title=book.title,
            description=book.description,
            isbn=book.isbn,
            genre=book.genre,
            publish_year=book.publishYear,
            record=book,
        )


@strawberry.type(name="ExternalAuthor")
class ExternalAuthorType:
    id: strawberry.ID
    name: str
    nationality: Optional[str] = None

    @classmethod
    def from_author(cls, author: Optional[Author]) -> Optional["ExternalAuthorType"]:
        if author is None:
            return None
        return cls(id=strawberry.ID(author.id), name=author.name, nationality=author.nationality)


@strawberry.type
class Query:
    @strawberry.field
    def get_books(self, info: Info) -> List[BookType]:
        return [BookType.from_record(b) for b in _catalog(info).get_books()]

    @strawberry.field
    def get_books_count(self, info: Info) -> int:
        return _catalog(info).get_books_count()

    @strawberry.field
    def get_book(self, info: Info, id: Optional[str] = None) -> Optional[BookType]:
        if id is None:
            return None
        return BookType.from_record(_catalog(info).get_book(id))

    @strawberry.field
    async def get_authors(self, info: Info) -> List[ExternalAuthorType]:
        authors = await _catalog(info).get_authors()
        return [ExternalAuthorType.from_author(a) for a in authors]

    @strawberry.field
    async def get_author(self, info: Info, id: strawberry.ID) -> Optional[ExternalAuthorType]:
        return ExternalAuthorType.from_author(await _catalog(info).get_author(str(id)))


@strawberry.type
class Mutation:
    @strawberry.mutation
    def add_book(
        self,
        info: Info,
        title: str,
        genre: Genre,
        author_name: str,
        description: Optional[str] = None,
        isbn: Optional[str] = None,
        publish_year: Optional[int] = None,
        author_nacionality: Optional[str] = None,
    ) -> Optional[BookType]:
        fields = BookCreate(
            title=title,
            description=description,
            isbn=isbn,
            genre=genre,
            publishYear=publish_year,
            authorName=author_name,
            authorNationality=author_nacionality,
        )
        return BookType.from_record(_catalog(info).add_book(fields))

    @strawberry.mutation
    def update_book(
        self,
        info: Info,
        id: str,
        title: Optional[str] = strawberry.UNSET,
        description: Optional[str] = strawberry.UNSET,
        isbn: Optional[str] = strawberry.UNSET,
        genre: Optional[Genre] = strawberry.UNSET,
        publish_year: Optional[int] = strawberry.UNSET,
        author_name: Optional[str] = strawberry.UNSET,
        author_nacionality: Optional[str] = strawberry.UNSET,
    ) -> Optional[BookType]:
        provided = {
            "title": title,
            "description": description,
            "isbn": isbn,
            "genre": genre,
            "publishYear": publish_year,
            "authorName": author_name,
            "authorNationality": author_nacionality,
        }
        fields = BookUpdate(**{k: v for k, v in provided.items() if v is not strawberry.UNSET})
        return BookType.from_record(_catalog(info).update_book(id, fields))

    @strawberry.mutation
    def delete_book(self, info: Info, id: str) -> Optional[BookType]:
        return BookType.from_record(_catalog(info).delete_book(id))

    @strawberry.mutation
    async def add_author(
        self, info: Info, name: str, nationality: Optional[str] = None
    ) -> Optional[ExternalAuthorType]:
        author = await _catalog(info).add_author(AuthorCreate(name=name, nationality=nationality))
        return ExternalAuthorType.from_author(author)

    @strawberry.mutation
    async def update_author(
        self,
        info: Info,
        id: strawberry.ID,
        name: Optional[str] = None,
        nationality: Optional[str] = None,
    ) -> Optional[ExternalAuthorType]:
        author = await _catalog(info).update_author(
            str(id), AuthorUpdate(name=name, nationality=nationality)
        )
        return ExternalAuthorType.from_author(author)

    @strawberry.mutation
    async def delete_author(self, info: Info, id: strawberry.ID) -> Optional[ExternalAuthorType]:
        return ExternalAuthorType.from_author(await _catalog(info).delete_author(str(id)))


schema = strawberry.Schema(query=Query, mutation=Mutation)


async def get_context(request: Request) -> dict:
    return {"catalog": request.app.state.catalog}
