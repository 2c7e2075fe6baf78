import logging

import motor.motor_asyncio
from fastapi import Request

from core.config import Settings
from database.recipe_accessor import RecipeAccessor

logger = logging.getLogger(__name__)


def create_client(settings: Settings) -> motor.motor_asyncio.AsyncIOMotorClient:
    return motor.motor_asyncio.AsyncIOMotorClient(
        settings.mongo_uri,
        tz_aware=True,
        serverSelectionTimeoutMS=settings.request_timeout_ms,
        connectTimeoutMS=settings.request_timeout_ms,
        socketTimeoutMS=settings.request_timeout_ms,
    )


async def connect(settings: Settings):
    """
    Open the client, make sure the server answers, and return (client, recipes collection)
    """
    client = create_client(settings)
    try:
        await client.admin.command("ping")
    except Exception:
        client.close()
        logger.error(f"Error connecting to MongoDB at {settings.mongo_uri}")
        raise
    host, port = client.address or ("unknown", 0)
    logger.info(f"MongoDB connected: {host}:{port}")
    collection = client[settings.database_name][settings.recipes_collection]
    return client, collection


def get_recipe_accessor(request: Request) -> RecipeAccessor:
    state = request.app.state
    return RecipeAccessor(state.recipe_collection, timeout=state.settings.request_timeout_seconds)
