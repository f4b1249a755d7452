from functools import lru_cache
from typing import List, Literal
import os
from pydantic_settings import BaseSettings, SettingsConfigDict

EnvName = Literal["development", "production"]

def _env_file_for(app_env: EnvName) -> str:
    return ".env.development" if app_env == "development" else ".env.production"

class Settings(BaseSettings):

    # Core
    APP_ENV: EnvName = "development"
    APP_NAME: str = "Storefront"
    DEBUG: bool = False
    LOG_LEVEL: str = ""                          # overrides DEBUG when set (e.g. "WARNING")
    GIT_SHA: str = "unknown"

    # Mongo (empty URI = no catalog backend, listing answers 503)
    MONGO_URI: str = ""
    MONGO_DB: str = "storefront"
    products_collection: str = "products"

    # Redis (optional snapshot cache)
    REDIS_URL: str = ""

    # Snapshot cache config
    snapshot_cache_ttl: int = 60                 # seconds; catalog changes rarely
    snapshot_cache_prefix: str = "catalog"       # redis key namespace

    # Facet vocabularies rendered by the sidebar
    catalog_categories: List[str] = ["Electronics", "Home & Kitchen", "Fashion", "Groceries"]
    catalog_brands: List[str] = [
        "Xiaomi", "Samsung", "OnePlus", "boAt", "Prestige", "Fabindia", "Tata", "Amul", "Nike",
    ]
    price_slider_max: int = 50000
    price_slider_step: int = 1000

    # pydantic-settings config will be set dynamically in the factory below
    model_config = SettingsConfigDict(env_file=None, case_sensitive=True)

@lru_cache
def get_settings() -> Settings:
    """
    Factory that chooses the right .env file based on APP_ENV.
    Cache makes it cheap to inject via FastAPI dependencies.
    """
    app_env: EnvName = os.getenv("APP_ENV", "development")  # earliest switch
    env_file = _env_file_for(app_env)
    return Settings(
                _env_file=env_file,  # load .env.development or .env.production
                _env_file_encoding="utf-8"
    )
