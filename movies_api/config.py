"""
This module loads the runtime configuration of the API.
Values come from a .env file or the process environment and are
collected into an immutable Settings record used by the app factory.
movies_api.config.py
"""
import os
from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    mongo_uri: str = "mongodb://localhost:27017"
    db_name: str = "movies"
    movies_collection: str = "movies"
    genres_collection: str = "genres"
    store_backend: str = "mongo"  # "mongo" or "memory"
    log_level: str = "INFO"
    host: str = "localhost"
    port: int = 3000


def load_settings() -> Settings:
    load_dotenv()
    defaults = Settings()
    return Settings(
        mongo_uri=os.getenv("MONGO_URI", defaults.mongo_uri),
        db_name=os.getenv("DB_NAME", defaults.db_name),
        movies_collection=os.getenv("MOVIES_COLLECTION_NAME", defaults.movies_collection),
        genres_collection=os.getenv("GENRES_COLLECTION_NAME", defaults.genres_collection),
        store_backend=os.getenv("STORE_BACKEND", defaults.store_backend).lower(),
        log_level=os.getenv("LOG_LEVEL", defaults.log_level),
        host=os.getenv("HOST", defaults.host),
        port=int(os.getenv("PORT", defaults.port)),
    )
