import logging
from dataclasses import dataclass

from fastapi import Request

from .timeular import TimeularClient


@dataclass(frozen=True)
class AppState:
    """Built once at startup and shared read-only by every request."""
    jwt: str
    client: TimeularClient
    log: logging.Logger


def get_state(request: Request) -> AppState:
    return request.app.state.gateway
