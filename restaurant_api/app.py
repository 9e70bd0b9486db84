from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends, FastAPI, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from .config import DEFAULT_APP_CONFIG, AppConfig
from .dataset.store import Dataset, load_dataset
from .search.engine import QueryEngine
from .search.errors import QueryError
from .search.models import ErrorResponse, HealthResponse, RestaurantPage
from .search.params import parse_coordinates, parse_max_distance, parse_positive_int

logger = logging.getLogger(__name__)

_ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    400: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


def get_engine(request: Request) -> QueryEngine:
    """Return the query engine bound to the running app."""
    return request.app.state.engine


def get_config(request: Request) -> AppConfig:
    return request.app.state.config


async def query_error_handler(request: Request, exc: QueryError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    else:
        logger.info("Rejected %s %s: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


# ── Public endpoints ─────────────────────────────────────────────────────

health_router = APIRouter()


@health_router.get("/health", response_model=HealthResponse)
def health(engine: QueryEngine = Depends(get_engine)) -> HealthResponse:
    return HealthResponse(status="ok", restaurants=len(engine.dataset))


# ── Query endpoints ──────────────────────────────────────────────────────

router = APIRouter(prefix="/api", responses=_ERROR_RESPONSES)


@router.get("/restaurants", response_model=RestaurantPage)
def list_restaurants(
    page: str | None = Query(None),
    per_page: str | None = Query(None, alias="perPage"),
    engine: QueryEngine = Depends(get_engine),
    config: AppConfig = Depends(get_config),
) -> RestaurantPage:
    return engine.paginate(
        page=parse_positive_int(page, 1),
        per_page=parse_positive_int(per_page, config.default_per_page),
    )


@router.get("/search")
def search_by_name(
    name: str | None = Query(None),
    engine: QueryEngine = Depends(get_engine),
) -> list[dict[str, Any]]:
    return engine.search_by_name(name)


@router.get("/location")
def search_by_location(
    lat: str | None = Query(None),
    lng: str | None = Query(None),
    max_distance: str | None = Query(None, alias="maxDistance"),
    engine: QueryEngine = Depends(get_engine),
    config: AppConfig = Depends(get_config),
) -> list[dict[str, Any]]:
    user_lat, user_lng = parse_coordinates(lat, lng)
    return engine.search_by_location(
        user_lat,
        user_lng,
        parse_max_distance(max_distance, config.default_max_distance_km),
    )


@router.get("/cuisine")
def search_by_cuisine(
    cuisine: str | None = Query(None),
    engine: QueryEngine = Depends(get_engine),
) -> list[dict[str, Any]]:
    return engine.search_by_cuisine(cuisine)


def create_app(
    config: AppConfig = DEFAULT_APP_CONFIG,
    dataset: Dataset | None = None,
) -> FastAPI:
    """
    Build the API around one dataset snapshot.

    When ``dataset`` is omitted it is loaded from ``config.data_path``.
    The static directory, if present, is served at ``/`` after the API
    routes.
    """
    if dataset is None:
        dataset = load_dataset(config.data_path)

    app = FastAPI(title="Restaurant Query API", version="1.0.0")
    app.state.config = config
    app.state.engine = QueryEngine(dataset, config)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(config.cors_origins),
        allow_methods=["GET"],
        allow_headers=["*"],
    )
    app.add_exception_handler(QueryError, query_error_handler)

    app.include_router(health_router)
    app.include_router(router)

    if config.static_dir.is_dir():
        app.mount("/", StaticFiles(directory=str(config.static_dir), html=True), name="static")
    else:
        logger.warning("Static directory %s not found, skipping", config.static_dir)

    return app


app = create_app()
