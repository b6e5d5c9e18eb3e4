import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from strawberry.fastapi import GraphQLRouter

from app.api.v1.routers import router as api_router
from app.core.config import Settings, settings as default_settings
from app.core.logging import setup_logging
from app.graphql.schema import get_context, schema
from app.services.authors import AuthorClient
from app.services.catalog import Catalog
from app.services.storage import BookStore

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    book_store: Optional[BookStore] = None,
    author_client: Optional[AuthorClient] = None,
) -> FastAPI:
    settings = settings or default_settings
    setup_logging(settings.log_level)

    app = FastAPI(title=settings.app_name, version="0.1.0", debug=settings.debug)

    if book_store is None:
        if settings.seed_sample_books:
            book_store = BookStore.with_sample_books(merge_policy=settings.book_update_merge)
        else:
            book_store = BookStore(merge_policy=settings.book_update_merge)
    if author_client is None:
        author_client = AuthorClient(settings.api_url, timeout=settings.author_service_timeout)

    # Una sola instancia del store por aplicación, compartida vía app.state
    app.state.book_store = book_store
    app.state.catalog = Catalog(book_store, author_client)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router, prefix="/api/v1")
    app.include_router(GraphQLRouter(schema, context_getter=get_context), prefix="/graphql")

    logger.info("Servicio de autores en: %s", settings.api_url)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    logger.info(
        "Server corriendo en: http://%s:%s/graphql", default_settings.host, default_settings.port
    )
    uvicorn.run("app.main:app", host=default_settings.host, port=default_settings.port)
