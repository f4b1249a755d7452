# storefront/core/lifespan.py
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from storefront.db import mongo, redis as r
from storefront.core.config import get_settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()

    # --- Startup ---
    if settings.MONGO_URI:
        await mongo.connect()
    else:
        logger.warning("No MONGO_URI provided, catalog listing will answer 503")

    # Redis is optional (snapshot cache only)
    if settings.REDIS_URL:
        await r.connect()
    else:
        logger.info("No REDIS_URL provided, snapshot cache disabled")

    yield

    # --- Shutdown ---
    try:
        await r.disconnect()
    except Exception as e:
        logger.warning("Redis disconnect failed: %s", e)

    await mongo.disconnect()
    logger.info("Shutdown complete")
