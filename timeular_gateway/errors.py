"""
Error kinds shared by the client and boundary layers.

The client layer only ever raises GatewayError; the FastAPI handler
registered in main.create_app turns its kind into a plain-text response.
"""

from enum import Enum

from fastapi import Request
from fastapi.responses import PlainTextResponse


class GatewayErrorKind(Enum):
    EXTERNAL_SERVICE_ERROR = (500, "external service error")
    ACTIVITY_NOT_FOUND = (404, "activity not found")

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body


class GatewayError(Exception):
    def __init__(self, kind: GatewayErrorKind, detail: str = ""):
        super().__init__(detail or kind.body)
        self.kind = kind
        self.detail = detail or kind.body


class StartupError(Exception):
    """Raised while bootstrapping; the process must not start serving."""


class CredentialsError(StartupError):
    pass


class SignInError(StartupError):
    pass


async def gateway_error_handler(request: Request, exc: GatewayError) -> PlainTextResponse:
    return PlainTextResponse(exc.kind.body, status_code=exc.kind.status_code)
