"""HTTP entrypoint of the weekly calendar feed.

Routes:
    GET /                      landing page
    GET /{token}/weekly.ics    iCalendar feed for the owner of token

Run with:
    python -m src.feed.app
    uvicorn src.feed.app:create_app --factory --port 4343
"""

import time
from collections.abc import AsyncGenerator, Callable
from contextlib import asynccontextmanager
from datetime import date
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse, PlainTextResponse, Response

from src.feed.config import FeedConfig, get_config
from src.feed.errors import (
    FeedError,
    InvalidTokenError,
    ProjectionError,
    UpstreamFailureError,
)
from src.feed.intra import IntraClient
from src.feed.logging import get_logger, setup_logging
from src.feed.projector import EventProjector
from src.feed.service import build_weekly_calendar

logger = get_logger(__name__)

CALENDAR_MEDIA_TYPE = "text/calendar; charset=utf-8"
INDEX_HTML = Path(__file__).parent / "static" / "index.html"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Create the intranet client on startup unless one was injected."""
    config: FeedConfig = app.state.config
    owns_client = app.state.intra_client is None
    if owns_client:
        app.state.intra_client = IntraClient(
            base_url=config.intra_url,
            timeout=config.upstream_timeout_seconds,
        )
    logger.info("app_starting", port=config.port, intra_url=config.intra_url)

    yield

    logger.info("app_shutting_down")
    if owns_client:
        app.state.intra_client.close()
        app.state.intra_client = None


def _feed_error_response(error: FeedError) -> Response:
    if isinstance(error, InvalidTokenError):
        return PlainTextResponse(error.reason, status_code=400)
    if isinstance(error, ProjectionError):
        logger.warning("event_projection_failed", field=error.field, error=str(error))
    elif isinstance(error, UpstreamFailureError):
        logger.warning("planning_fetch_failed", error=str(error))
    return PlainTextResponse(str(error), status_code=500)


def create_app(
    config: FeedConfig | None = None,
    client: IntraClient | None = None,
    today: Callable[[], date] = date.today,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        config: Settings; defaults to the environment-loaded singleton.
        client: Intranet client; created in the lifespan when omitted.
        today: Returns the local date the query window is anchored on.

    Returns:
        Configured FastAPI application.
    """
    config = config or get_config()
    app = FastAPI(
        title="epitech-ics",
        description="Weekly iCalendar feed of Epitech intranet activities",
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.config = config
    app.state.intra_client = client

    landing_page = INDEX_HTML.read_text(encoding="utf-8")

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        # Log the route template, never the raw path: it holds the token
        route = request.scope.get("route")
        logger.info(
            "request_completed",
            method=request.method,
            route=getattr(route, "path", "unmatched"),
            status=response.status_code,
            duration_ms=round((time.perf_counter() - started) * 1000, 2),
        )
        return response

    @app.get("/", response_class=HTMLResponse)
    async def root() -> HTMLResponse:
        return HTMLResponse(landing_page)

    @app.get("/weekly.ics")
    async def weekly_without_token() -> Response:
        return _feed_error_response(InvalidTokenError("no autologin provided"))

    @app.get("/{token}/weekly.ics")
    async def weekly(token: str, request: Request) -> Response:
        projector = EventProjector(config.intra_url)
        try:
            body = await build_weekly_calendar(
                token,
                client=request.app.state.intra_client,
                projector=projector,
                today=today(),
                window_days=config.window_days,
                product_id=config.product_id,
                timezone=config.display_timezone,
            )
        except FeedError as e:
            return _feed_error_response(e)

        if body is None:
            return Response(status_code=200)
        return Response(content=body, media_type=CALENDAR_MEDIA_TYPE)

    return app


def main() -> None:
    """Run the feed server with uvicorn."""
    import uvicorn

    config = get_config()
    setup_logging(json_output=config.log_json, log_level=config.log_level)
    uvicorn.run(
        create_app(config),
        host=config.host,
        port=config.port,
        log_config=None,
        access_log=False,
    )


if __name__ == "__main__":
    main()
