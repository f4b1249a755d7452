from fastapi import FastAPI
from storefront.core.config import get_settings
from storefront.core.lifespan import lifespan
from storefront.api.v1.routers.health import router as health_router
from storefront.api.v1.routers.listing import router as listing_router
from storefront.core.logging import configure_logging

from fastapi.middleware.cors import CORSMiddleware
import os

settings = get_settings()
configure_logging(settings)

app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)

# ------- CORS -------
# ALLOWED_ORIGINS is a CSV, e.g. "https://shop.example.com,https://www.shop.example.com"
allowed_origins_env = os.getenv("ALLOWED_ORIGINS", "")
allowed_origins = [o.strip() for o in allowed_origins_env.split(",") if o.strip()]

app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins if allowed_origins else ["http://localhost:5173", "http://localhost:8080"],
    allow_credentials=False,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
    max_age=86400,
)

# ------- Routes -------
app.include_router(health_router)
app.include_router(listing_router)            # listing, edits, facets
