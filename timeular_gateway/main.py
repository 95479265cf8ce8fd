#!/usr/bin/env python3
"""
Timeular gateway server.
Signs in once at startup and exposes /rest/v1/activities backed by the Timeular API.
"""

import asyncio
import logging
import sys

import uvicorn
from fastapi import FastAPI

from .config import Settings, settings
from .credentials import get_credentials
from .deps import AppState
from .errors import GatewayError, gateway_error_handler
from .routes import health_router, router as activities_router
from .timeular import TimeularClient, sign_in

logger = logging.getLogger(__name__)


def setup_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stderr
    )


def create_app(state: AppState) -> FastAPI:
    app = FastAPI(title="Timeular Gateway")
    app.state.gateway = state
    app.add_exception_handler(GatewayError, gateway_error_handler)

    app.include_router(activities_router, prefix="/rest/v1", tags=["activities"])
    app.include_router(health_router, tags=["health"])
    return app


def bootstrap(config: Settings = settings) -> AppState:
    """
    Resolve credentials and exchange them for a session token.
    Any failure here is fatal: the caller must not start serving.
    """
    api_key, api_secret = get_credentials(config)
    logger.info("Logging In...")
    sign_in_response = asyncio.run(
        sign_in(api_key, api_secret, base_url=config.TIMEULAR_API_BASE_URL)
    )
    jwt = sign_in_response.token
    return AppState(
        jwt=jwt,
        client=TimeularClient(jwt, base_url=config.TIMEULAR_API_BASE_URL),
        log=logging.getLogger("timeular_gateway"),
    )


def main() -> None:
    """Main entry point for the server."""
    setup_logging(settings.LOG_LEVEL)
    try:
        state = bootstrap(settings)
    except Exception as e:
        logger.error(f"Could not start: {e}")
        raise

    app = create_app(state)
    try:
        logger.info(f"Server Started on {settings.HOST}:{settings.PORT}")
        uvicorn.run(app, host=settings.HOST, port=settings.PORT)
        logger.info("Server Stopped!")
    except Exception as e:
        logger.error(f"Error running the server: {e}", exc_info=True)
        raise


if __name__ == "__main__":
    main()
