from typing import List, Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_name: str = "Books GraphQL"
    debug: bool = False
    log_level: str = "INFO"

    host: str = "0.0.0.0"
    port: int = 4000

    # Base URL del servicio externo de autores, p.ej. http://localhost:3000
    api_url: str = "http://localhost:3000"
    author_service_timeout: float = 10.0

    seed_sample_books: bool = True
    # "truthy": solo valores no vacíos sobreescriben; "presence": cualquier valor enviado
    book_update_merge: Literal["truthy", "presence"] = "truthy"

    cors_origins: List[str] = [
        "http://localhost",
        "http://localhost:3000",
        "http://127.0.0.1:3000",
        "http://localhost:5173",
        "http://127.0.0.1:5173",
    ]


settings = Settings()
