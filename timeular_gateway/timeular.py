"""
Client for the Timeular public API.
One outbound request per call, authenticated with the session token obtained at startup.
"""

from typing import Any, Dict, Optional
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from .config import settings
from .errors import GatewayError, GatewayErrorKind, SignInError
from .models import (
    ActivitiesResponse,
    Activity,
    ActivityRequest,
    DeleteActivityResponse,
    EditActivityRequest,
    SignInResponse,
)


async def sign_in(
    api_key: str,
    api_secret: str,
    base_url: Optional[str] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> SignInResponse:
    """Exchange the API key/secret pair for a session token."""
    base_url = base_url or settings.TIMEULAR_API_BASE_URL
    async with httpx.AsyncClient(transport=transport) as client:
        try:
            response = await client.post(
                f"{base_url}/developer/sign-in",
                json={"apiKey": api_key, "apiSecret": api_secret},
            )
            response.raise_for_status()
            return SignInResponse.model_validate(response.json())
        except (httpx.HTTPError, ValueError) as e:
            # ValidationError is a ValueError subclass
            raise SignInError(f"error logging in, reason: {e}") from e


class TimeularClient:
    def __init__(
        self,
        token: str,
        base_url: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = (base_url or settings.TIMEULAR_API_BASE_URL).rstrip("/")
        self._token = token
        self._transport = transport

    @property
    def token(self) -> str:
        return self._token

    async def _request(self, method: str, path: str, json: Optional[Dict[str, Any]] = None) -> Any:
        """
        Make a request to the Timeular API and return the decoded JSON body.
        Transport failures, non-2xx statuses and malformed JSON all raise
        GatewayError(EXTERNAL_SERVICE_ERROR); the handlers log the detail.
        """
        url = f"{self.base_url}{path}"
        headers = {"Authorization": f"Bearer {self._token}"}

        async with httpx.AsyncClient(transport=self._transport) as client:
            try:
                response = await client.request(method, url, headers=headers, json=json)
                response.raise_for_status()
                return response.json()
            except httpx.HTTPStatusError as e:
                raise GatewayError(
                    GatewayErrorKind.EXTERNAL_SERVICE_ERROR,
                    f"{method} {url} failed: {e.response.status_code}",
                ) from e
            except httpx.RequestError as e:
                raise GatewayError(
                    GatewayErrorKind.EXTERNAL_SERVICE_ERROR,
                    f"{method} {url} connection error: {e}",
                ) from e
            except ValueError as e:
                raise GatewayError(
                    GatewayErrorKind.EXTERNAL_SERVICE_ERROR,
                    f"{method} {url} returned invalid JSON: {e}",
                ) from e

    @staticmethod
    def _parse(model, data: Any):
        try:
            return model.model_validate(data)
        except ValidationError as e:
            raise GatewayError(
                GatewayErrorKind.EXTERNAL_SERVICE_ERROR,
                f"Unexpected {model.__name__} shape: {e}",
            ) from e

    async def get_activities(self) -> ActivitiesResponse:
        data = await self._request("GET", "/activities")
        return self._parse(ActivitiesResponse, data)

    async def get_activity(self, activity_id: str) -> Activity:
        """Timeular has no lookup-by-id endpoint, so list and scan."""
        activities = await self.get_activities()
        for activity in activities.activities:
            if activity.id == activity_id:
                return activity
        raise GatewayError(GatewayErrorKind.ACTIVITY_NOT_FOUND, f"No activity with id {activity_id}")

    async def create_activity(self, activity: ActivityRequest) -> Activity:
        body = {
            "name": activity.name,
            "color": activity.color,
            "integration": activity.integration,
        }
        data = await self._request("POST", "/activities", json=body)
        return self._parse(Activity, data)

    async def edit_activity(self, activity_id: str, activity: EditActivityRequest) -> Activity:
        body = {k: v for k, v in {
            "name": activity.name, "color": activity.color,
        }.items() if v is not None}
        data = await self._request("PATCH", f"/activities/{quote(activity_id, safe='')}", json=body)
        return self._parse(Activity, data)

    async def delete_activity(self, activity_id: str) -> DeleteActivityResponse:
        data = await self._request("DELETE", f"/activities/{quote(activity_id, safe='')}")
        return self._parse(DeleteActivityResponse, data)
