"""Async client for the career path REST API."""

import logging

from typing import Any

import httpx

from careerhub.config import settings
from careerhub.models import CareerPathData


logger = logging.getLogger(__name__)

JSON_HEADERS = {"Content-Type": "application/json"}


class CareerPathError(Exception):
    """Raised when a career path API call fails."""


def _payload(data: CareerPathData | dict[str, Any]) -> dict[str, Any]:
    if isinstance(data, CareerPathData):
        return data.model_dump(exclude_none=True)
    return data


def _raise_for_status(response: httpx.Response) -> None:
    """Raise with the server supplied error message on a non-2xx response."""
    if response.is_success:
        return
    try:
        message = response.json().get("error")
    except (ValueError, AttributeError):
        message = None
    raise CareerPathError(message or f"HTTP error! status: {response.status_code}")


class CareerPathClient:
    """Create, read, update and delete career path entries."""

    def __init__(self, base_url: str | None = None, client: httpx.AsyncClient | None = None) -> None:
        """
        Initialize the client.

        Args:
            base_url: API root, defaults to the API_URL setting
            client: Optional shared httpx client, one is created per request otherwise
        """
        self.base_url = (base_url or settings.api_url).rstrip("/")
        self._client = client

    def _url(self, user_id: str | None = None) -> str:
        if user_id is None:
            return f"{self.base_url}/career-path"
        return f"{self.base_url}/career-path/{user_id}"

    async def _request(
        self, verb: str, method: str, url: str, json: dict[str, Any] | None = None
    ) -> Any:
        try:
            if self._client is not None:
                response = await self._client.request(method, url, json=json, headers=JSON_HEADERS)
            else:
                async with httpx.AsyncClient() as client:
                    response = await client.request(method, url, json=json, headers=JSON_HEADERS)
            _raise_for_status(response)
            return response.json()
        except (httpx.HTTPError, ValueError, CareerPathError) as e:
            logger.error(f"Career path {verb} failed: {e}")
            raise CareerPathError(f"Failed to {verb} career path: {e}") from e

    async def create_career_path(self, career_data: CareerPathData | dict[str, Any]) -> Any:
        """
        Create a new career path entry.

        Args:
            career_data: user_id, field, desired_skills, confident_skills and suggestion

        Returns:
            Decoded JSON response

        Raises:
            CareerPathError: If the request fails or the API answers with an error
        """
        return await self._request("create", "POST", self._url(), json=_payload(career_data))

    async def get_career_path(self, user_id: str) -> Any:
        """Fetch the career path of a user."""
        if not user_id:
            logger.error("Career path fetch failed: User ID is required")
            raise CareerPathError("Failed to fetch career path: User ID is required")
        return await self._request("fetch", "GET", self._url(user_id))

    async def update_career_path(self, user_id: str, update_data: CareerPathData | dict[str, Any]) -> Any:
        return await self._request("update", "PUT", self._url(user_id), json=_payload(update_data))

    async def delete_career_path(self, user_id: str) -> Any:
        return await self._request("delete", "DELETE", self._url(user_id))
