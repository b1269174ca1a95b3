"""
Main entrypoint for the laundry services site.

This module assembles the FastAPI application: it sets up logging,
builds the route table and file service for the public directory and
includes the pages router.  The ``create_app`` function builds and
configures the app, which is then instantiated at module import time
as ``app``, e.g.::

    uvicorn laundry_site.app.main:app --port 3000
"""

import logging
from pathlib import Path
from typing import Optional, Union

from fastapi import FastAPI, Request, status

from .api.router import router
from .core.config import settings
from .core.logging_config import log_request, setup_logging
from .services.file_service import METHOD_NOT_ALLOWED_BODY, FileService, html_response
from .services.route_table import RouteTable


def create_app(public_dir: Optional[Union[str, Path]] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    public_dir : Optional[str | Path]
        Directory holding the pages and assets.  Defaults to
        ``settings.public_dir``.

    Returns
    -------
    FastAPI
        A configured FastAPI instance ready to be served.
    """
    setup_logging(settings.log_level, settings.log_file or None)
    logger = logging.getLogger(__name__)

    # Every path belongs to the pages router, so the interactive docs
    # routes are disabled.
    app = FastAPI(
        title=settings.project_name,
        version=settings.app_version,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    route_table = RouteTable(Path(public_dir) if public_dir is not None else settings.public_path)
    app.state.route_table = route_table
    app.state.file_service = FileService(route_table.not_found_path)

    @app.middleware("http")
    async def gate_requests(request: Request, call_next):
        # One record per request; only GET reaches the routes.
        log_request(request.method, request.url.path, request.url.query)
        if request.method != "GET":
            return html_response(METHOD_NOT_ALLOWED_BODY, status.HTTP_405_METHOD_NOT_ALLOWED)
        return await call_next(request)

    app.include_router(router)
    logger.debug("Serving pages from %s", route_table.public_dir)
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
