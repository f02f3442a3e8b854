"""Main module for the token feed service."""
import logging
import os
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from token_feed.container import Container, init_container
from token_feed.errors import register_error_handlers
from token_feed.routers import posts_router, tokens_router, users_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(fastapi_app: FastAPI):
    """Create tables at startup; close providers and the store on shutdown."""
    container: Container = fastapi_app.state.container
    store = container.store()
    store.init_db()

    yield

    # Close provider resources (httpx clients)
    for provider in (container.jupiter_provider(), container.vybe_provider()):
        try:
            await provider.close()
        except Exception as exc:  # pylint: disable=broad-except
            logger.warning("Error closing provider %s: %s", type(provider).__name__, exc)
    store.dispose()


def create_app(container: Container | None = None) -> FastAPI:
    """Build the application around ``container`` (a fresh one by default)."""
    fastapi_app = FastAPI(
        title="Token Feed",
        description="Social feed of token positions, with Jupiter and Vybe token data",
        version="0.1.0",
        lifespan=lifespan,
    )
    fastapi_app.state.container = container or init_container()
    register_error_handlers(fastapi_app)

    fastapi_app.include_router(users_router)
    fastapi_app.include_router(posts_router)
    fastapi_app.include_router(tokens_router)

    @fastapi_app.get("/")
    def health():
        """Return health check status."""
        return {"status": "ok"}

    return fastapi_app


app = create_app()


def run():
    """Run the server (uvicorn). Use for the `start` script."""
    uvicorn.run(
        "token_feed.main:app",
        host=os.getenv("HOST", "127.0.0.1"),
        port=int(os.getenv("PORT", "3000")),
    )
