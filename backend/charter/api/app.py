"""
FastAPI application for the charter backend.

``create_app`` wires already-built services into a fresh application, which
keeps tests free of globals. ``build_app`` loads configuration, opens the
record store and the airport catalog, and is what ``charter serve`` runs.
"""

import logging
import os
from typing import Optional

from fastapi import FastAPI

from .. import __version__
from ..database import initialize_database
from ..services import CharterServices, build_services, load_airport_catalog
from ..services.airport_catalog import DEFAULT_SEARCH_LIMIT
from ..utils.config import CharterConfig, get_config
from .errors import register_error_handlers
from .routes import airports_router, pilots_router, planes_router, system_router, trips_router

logger = logging.getLogger(__name__)

API_PREFIX = "/api"


def create_app(
    services: CharterServices,
    debug: bool = False,
    search_limit: int = DEFAULT_SEARCH_LIMIT,
    root_path: str = "",
) -> FastAPI:
    app = FastAPI(
        title="Charter Flight Management API",
        version=__version__,
        debug=debug,
        root_path=root_path,
    )
    app.state.services = services
    app.state.search_limit = search_limit

    register_error_handlers(app)

    for router in (system_router, airports_router, planes_router, pilots_router, trips_router):
        app.include_router(router, prefix=API_PREFIX)

    return app


def build_app(config: Optional[CharterConfig] = None) -> FastAPI:
    """Build the production application from configuration."""
    config = config or get_config()

    db = initialize_database(config.database_url, echo=config.debug)
    catalog = load_airport_catalog(config.airports_file)
    services = build_services(db, catalog)

    logger.info(f"Charter API ready ({db.db_type} store, {len(catalog)} airports)")
    return create_app(
        services,
        debug=config.debug,
        search_limit=config.airport_search_limit,
        root_path=os.getenv("ROOT_PATH", ""),
    )
