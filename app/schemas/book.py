from pydantic import BaseModel
from typing import Optional

from app.schemas.genres import Genre


class BookCreate(BaseModel):
    title: str
    description: Optional[str] = None
    isbn: Optional[str] = None
    genre: Genre
    publishYear: Optional[int] = None
    authorName: str
    authorNationality: Optional[str] = None


class Book(BookCreate):
    id: str


class BookUpdate(BaseModel):
    """Campos opcionales para updateBook.

    Los campos omitidos no aparecen en ``model_fields_set``; así el store
    distingue "no enviado" de "enviado vacío".
    """

    title: Optional[str] = None
    description: Optional[str] = None
    isbn: Optional[str] = None
    genre: Optional[Genre] = None
    publishYear: Optional[int] = None
    authorName: Optional[str] = None
    authorNationality: Optional[str] = None


class AuthorView(BaseModel):
    """Vista del autor embebida en un Book, nunca se persiste."""

    name: str
    nationality: Optional[str] = None
