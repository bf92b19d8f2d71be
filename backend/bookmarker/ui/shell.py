"""
Bookmarker — UI Shell Application
=================================

What:  Serves the UI by rendering the component registered for the request path.
How:   create_ui_app() is the explicit bootstrap step: it builds the route
       table once, stores it on app.state and installs one catch-all GET
       handler that resolves paths through it.
Who:   Run by uvicorn (uvicorn bookmarker.ui.shell:app).

Unmatched paths raise NotFoundError, answered with the standard 404 error body.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse

from bookmarker import __version__
from bookmarker.exceptions import NotFoundError
from bookmarker.main import register_exception_handlers, setup_logging
from bookmarker.middleware.logging import RequestLoggingMiddleware
from bookmarker.middleware.request_id import RequestIDMiddleware
from bookmarker.ui.router import RouteTable, default_route_table

logger = logging.getLogger(__name__)

ROUTE_NAME_HEADER = "X-Route-Name"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    setup_logging()
    logger.info("Bookmarker UI shell serving routes: %s", app.state.route_table.names)
    yield
    logger.info("Bookmarker UI shell stopped.")


def create_ui_app(table: Optional[RouteTable] = None) -> FastAPI:
    """
    Create the UI shell application.

    Args:
        table: Navigation table to serve. Defaults to the application's
               table ('/' → Bookmarker).
    """
    app = FastAPI(
        title="Bookmarker",
        version=__version__,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        lifespan=lifespan,
    )
    app.state.route_table = table if table is not None else default_route_table()

    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    @app.get("/{full_path:path}", response_class=HTMLResponse, include_in_schema=False)
    async def render_route(request: Request, full_path: str) -> HTMLResponse:
        path = "/" + full_path
        entry = request.app.state.route_table.resolve(path)
        if entry is None:
            raise NotFoundError(resource="route", resource_id=path)
        return HTMLResponse(
            content=entry.component.render(),
            headers={ROUTE_NAME_HEADER: entry.name},
        )

    return app


app = create_ui_app()
