from pydantic import BaseModel, field_validator
from typing import Optional


class AuthorCreate(BaseModel):
    name: str
    nationality: Optional[str] = None


class AuthorUpdate(BaseModel):
    name: Optional[str] = None
    nationality: Optional[str] = None


class Author(AuthorCreate):
    """Autor tal como lo devuelve el servicio externo."""

    id: str

    @field_validator("id", mode="before")
    @classmethod
    def id_as_str(cls, v):
        # json-server y similares devuelven ids numéricos
        if isinstance(v, int):
            return str(v)
        return v
