import json

import httpx
import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.main import create_app
from app.services.authors import AuthorClient
from app.services.storage import BookStore

API_URL = "http://authors.test"


class FakeAuthorService:
    """Servicio REST de autores en memoria, estilo json-server."""

    def __init__(self):
        self.authors = {
            "1": {"id": 1, "name": "Kate Chopin", "nationality": None},
            "2": {"id": 2, "name": "Paul Auster", "nationality": "Estadounidense"},
        }
        self.requests = []
        self._next_id = 3

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        parts = request.url.path.strip("/").split("/")
        if parts[0] != "authors":
            return httpx.Response(404)
        if len(parts) == 1:
            if request.method == "GET":
                return httpx.Response(200, json=list(self.authors.values()))
            if request.method == "POST":
                body = json.loads(request.content)
                body["id"] = self._next_id
                self.authors[str(self._next_id)] = body
                self._next_id += 1
                return httpx.Response(201, json=body)
            return httpx.Response(405)

        author = self.authors.get(parts[1])
        if author is None:
            return httpx.Response(404, json={})
        if request.method == "GET":
            return httpx.Response(200, json=author)
        if request.method == "PATCH":
            author.update(json.loads(request.content))
            return httpx.Response(200, json=author)
        if request.method == "DELETE":
            del self.authors[parts[1]]
            return httpx.Response(200, json={})
        return httpx.Response(405)


def unreachable(request: httpx.Request) -> httpx.Response:
    raise httpx.ConnectError("connection refused", request=request)


@pytest.fixture
def store():
    return BookStore.with_sample_books()


@pytest.fixture
def author_service():
    return FakeAuthorService()


@pytest.fixture
def author_client(author_service):
    return AuthorClient(API_URL, transport=httpx.MockTransport(author_service))


@pytest.fixture
def down_author_client():
    return AuthorClient(API_URL, transport=httpx.MockTransport(unreachable))


@pytest.fixture
def client(store, author_client):
    app = create_app(Settings(api_url=API_URL), book_store=store, author_client=author_client)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def gql(client):
    def run(query, variables=None):
        res = client.post("/graphql", json={"query": query, "variables": variables or {}})
        return res.json()

    return run
