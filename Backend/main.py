import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from core.config import Settings, get_settings
from core.errors import register_exception_handlers
from database.mongo import connect
from routes import recipe_route

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, collection=None) -> FastAPI:
    """
    Build the API. Passing ``collection`` skips the MongoDB connection
    (used by the tests with an in-memory collection).
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        client = None
        if collection is None:
            client, app.state.recipe_collection = await connect(settings)
        try:
            yield
        finally:
            if client is not None:
                client.close()
                logger.info("MongoDB connection closed")

    app = FastAPI(title="Recipe API", lifespan=lifespan)
    app.state.settings = settings
    app.state.recipe_collection = collection

    register_exception_handlers(app)

    # Add routers
    app.include_router(recipe_route.router, prefix="/recipes", tags=["Recipes"])

    @app.get("/")
    def root():
        return {"message": "Welcome to Recipe API"}

    # Enable CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    return app


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


configure_logging(get_settings())
app = create_app()


if __name__ == "__main__":
    settings = get_settings()
    uvicorn.run("main:app", host=settings.host, port=settings.port)
