"""
Main entrypoint for the World Cup Winners API.

This module assembles the FastAPI application, sets up logging and
includes the routers.  The ``create_app`` function builds and
configures the app, which is then instantiated at module import time
as ``app``.  Importing the app here makes it easy to run with uvicorn
or another ASGI server, e.g.::

    uvicorn world_cup_api.app.main:app --port 8000

The winners file is read when the application starts.  A missing or
malformed file aborts startup.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from .core.config import get_data_file_path, settings
from .core.logging_config import setup_logging
from .core.store import WinnersStore
from .api.endpoints.root import register_root_handler
from .api.router import router


logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load the winners file before serving the first request."""
    app.state.store.load()
    logger.info("%s started", settings.project_name)
    yield
    logger.info("%s shutting down", settings.project_name)


def create_app(store: Optional[WinnersStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : Optional[WinnersStore]
        Store to serve.  Defaults to a store bound to the configured
        data file.  The store is (re)loaded on startup either way.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    setup_logging(settings.log_level)

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        lifespan=lifespan,
    )
    if store is None:
        store = WinnersStore(get_data_file_path())
    app.state.store = store
    app.include_router(router)
    # Must stay last: the catch-all would shadow any route added after it.
    register_root_handler(app)
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
