import logging
from urllib.parse import quote, unquote
from typing import Any, List, Optional

import httpx

from app.schemas.author import Author, AuthorCreate, AuthorUpdate
from app.schemas.book import AuthorView, Book
from app.services.result import NotFound, Ok, Result, UpstreamError

logger = logging.getLogger(__name__)


def author_from_book(book: Book) -> AuthorView:
    """Autor embebido de un libro, derivado de authorName/authorNationality."""
    return AuthorView(name=book.authorName, nationality=book.authorNationality)


class AuthorClient:
    """Proxy async hacia el servicio REST de autores ({API_URL}/authors).

    Ningún método lanza excepciones: los fallos de red o del servidor se
    registran y se devuelven como ``UpstreamError``; un 404 como ``NotFound``.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport

    async def _request(self, method: str, path: str, json: Any = None) -> Result[Any]:
        try:
            async with httpx.AsyncClient(
                base_url=self.base_url, timeout=self.timeout, transport=self.transport
            ) as client:
                res = await client.request(method, path, json=json)
        except httpx.HTTPError as e:
            logger.exception("Error consultando servicio de autores (%s %s): %s", method, path, e)
            return UpstreamError(detail=f"{type(e).__name__}: {e}")

        if res.status_code == 404:
            return NotFound(resource="author", identifier=unquote(path.rsplit("/", 1)[-1]))
        if not res.is_success:
            logger.warning("%s %s respondió %s", method, path, res.status_code)
            return UpstreamError(detail=res.text, status_code=res.status_code)
        if not res.content:
            return Ok(None)
        try:
            return Ok(res.json())
        except ValueError:
            logger.warning("%s %s devolvió un cuerpo que no es JSON", method, path)
            return UpstreamError(detail="invalid JSON body", status_code=res.status_code)

    @staticmethod
    def _author_path(author_id: str) -> str:
        # el id es un único segmento: "/" y "." no pueden salir de /authors/
        segment = quote(author_id, safe="")
        if segment in (".", ".."):
            segment = segment.replace(".", "%2E")
        return f"/authors/{segment}"

    @staticmethod
    def _to_author(data: Any) -> Result[Author]:
        try:
            return Ok(Author.model_validate(data))
        except ValueError as e:
            logger.warning("Autor con formato inesperado: %r (%s)", data, e)
            return UpstreamError(detail="unexpected author payload")

    async def list(self) -> Result[List[Author]]:
        result = await self._request("GET", "/authors")
        if not isinstance(result, Ok):
            return result
        if not isinstance(result.value, list):
            return UpstreamError(detail="expected a list of authors")
        authors = []
        for item in result.value:
            parsed = self._to_author(item)
            if not isinstance(parsed, Ok):
                return parsed
            authors.append(parsed.value)
        return Ok(authors)

    async def get(self, author_id: str) -> Result[Author]:
        result = await self._request("GET", self._author_path(author_id))
        if not isinstance(result, Ok):
            return result
        return self._to_author(result.value)

    async def create(self, fields: AuthorCreate) -> Result[Author]:
        result = await self._request("POST", "/authors", json=fields.model_dump())
        if not isinstance(result, Ok):
            return result
        if result.value is None:
            # creado pero sin cuerpo: sin id no se puede construir el Author
            logger.warning("POST /authors respondió sin cuerpo; no se conoce el id creado")
            return UpstreamError(detail="author created without response body")
        return self._to_author(result.value)

    async def update(self, author_id: str, fields: AuthorUpdate) -> Result[Author]:
        # El merge se hace aquí antes del PATCH; no es atómico frente a
        # modificaciones concurrentes en el servicio externo.
        current = await self.get(author_id)
        if not isinstance(current, Ok):
            return current
        author = current.value
        payload = {
            "name": fields.name if fields.name else author.name,
            "nationality": fields.nationality if fields.nationality else author.nationality,
        }
        result = await self._request("PATCH", self._author_path(author_id), json=payload)
        if not isinstance(result, Ok):
            return result
        if result.value is None:
            return Ok(author.model_copy(update=payload))
        return self._to_author(result.value)

    async def delete(self, author_id: str) -> Result[Author]:
        current = await self.get(author_id)
        if not isinstance(current, Ok):
            return current
        result = await self._request("DELETE", self._author_path(author_id))
        if not isinstance(result, Ok):
            return result
        return current
