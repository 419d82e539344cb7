"""Async HTTP client for the News Time REST API."""

import logging
from typing import Any

import httpx

from newstime_console.storage import TokenStore

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """A request failed or the server answered with an error status.

    Attributes:
        message: Server-supplied error message, or a generic one.
        status_code: HTTP status, None for network failures.
    """

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class NewsApiClient:
    """Client for the News Time API.

    Sends the stored admin token as a Bearer credential on every request.
    Use as an async context manager, or call ``aclose()`` when done.
    """

    def __init__(
        self,
        base_url: str,
        store: TokenStore,
        http: httpx.AsyncClient | None = None,
        timeout: float = 10.0,
    ):
        """Initialize the client.

        Args:
            base_url: API base URL (e.g. https://api.example.com).
            store: Token store read for the Authorization header.
            http: Optional pre-built httpx client; owned by the caller.
            timeout: Request timeout in seconds for the default client.
        """
        self.base_url = base_url.rstrip("/")
        self.store = store
        self._owns_http = http is None
        self._http = http or httpx.AsyncClient(timeout=timeout)

    async def __aenter__(self) -> "NewsApiClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._owns_http:
            await self._http.aclose()

    @property
    def _headers(self) -> dict:
        headers = {"Content-Type": "application/json"}
        token = self.store.get()
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    async def _request(
        self,
        method: str,
        endpoint: str,
        json: Any = None,
        params: dict | None = None,
    ) -> Any:
        """Send a request and decode the JSON answer.

        Args:
            method: HTTP method.
            endpoint: API path (e.g. '/api/posts').
            json: Optional JSON body.
            params: Optional query parameters; None values are dropped.

        Returns:
            Any: Decoded JSON body.

        Raises:
            ApiError: On network failure, error status or a non-JSON body.
        """
        if params:
            params = {k: v for k, v in params.items() if v is not None}

        try:
            response = await self._http.request(
                method,
                f"{self.base_url}{endpoint}",
                json=json,
                params=params or None,
                headers=self._headers,
            )
        except httpx.RequestError as e:
            logger.error(f"Request to {endpoint} failed: {e}")
            raise ApiError(f"Could not connect to {self.base_url}") from e

        if response.is_error:
            try:
                message = response.json().get("error") or "Request failed"
            except (ValueError, AttributeError):
                message = "Request failed"
            logger.debug(f"{method} {endpoint} -> {response.status_code}: {message}")
            raise ApiError(message, status_code=response.status_code)

        try:
            return response.json()
        except ValueError as e:
            raise ApiError("Invalid response from server", response.status_code) from e

    # Auth

    async def login(self, password: str) -> dict:
        """Exchange the admin password for a token.

        Returns:
            dict: ``{"success": True, "token": ..., "expiresIn": ...}``.
        """
        return await self._request("POST", "/api/auth/login", json={"password": password})

    async def verify(self) -> dict:
        """Check the stored token.

        Returns:
            dict: ``{"valid": True}``; an invalid token raises ApiError (401).
        """
        return await self._request("POST", "/api/auth/verify")

    # Posts

    async def list_posts(
        self,
        category: str | None = None,
        featured: bool = False,
        limit: int | None = None,
        search: str | None = None,
    ) -> list[dict]:
        params = {
            "category": category,
            "featured": "true" if featured else None,
            "limit": limit,
            "search": search,
        }
        return await self._request("GET", "/api/posts", params=params)

    async def trending_posts(self) -> list[dict]:
        return await self._request("GET", "/api/posts/trending")

    async def get_post(self, slug: str) -> dict:
        return await self._request("GET", f"/api/posts/{slug}")

    async def get_stats(self) -> dict:
        return await self._request("GET", "/api/posts/stats/overview")

    async def create_post(self, post: dict) -> dict:
        return await self._request("POST", "/api/posts", json=post)

    async def update_post(self, post_id: int, post: dict) -> dict:
        return await self._request("PUT", f"/api/posts/{post_id}", json=post)

    async def delete_post(self, post_id: int) -> dict:
        return await self._request("DELETE", f"/api/posts/{post_id}")

    # Categories

    async def list_categories(self) -> list[dict]:
        return await self._request("GET", "/api/categories")

    async def get_category(self, slug: str) -> dict:
        return await self._request("GET", f"/api/categories/{slug}")

    async def create_category(self, category: dict) -> dict:
        return await self._request("POST", "/api/categories", json=category)

    async def update_category(self, category_id: int, category: dict) -> dict:
        return await self._request("PUT", f"/api/categories/{category_id}", json=category)

    async def delete_category(self, category_id: int) -> dict:
        return await self._request("DELETE", f"/api/categories/{category_id}")

    # YouTube

    async def list_videos(self, category: str | None = None, limit: int | None = None) -> list[dict]:
        return await self._request(
            "GET", "/api/youtube", params={"category": category, "limit": limit}
        )

    async def create_video(self, video: dict) -> dict:
        return await self._request("POST", "/api/youtube", json=video)

    async def update_video(self, video_pk: int, video: dict) -> dict:
        return await self._request("PUT", f"/api/youtube/{video_pk}", json=video)

    async def delete_video(self, video_pk: int) -> dict:
        return await self._request("DELETE", f"/api/youtube/{video_pk}")

    # Live stream

    async def get_live_settings(self) -> dict:
        return await self._request("GET", "/api/live")

    async def update_live_settings(self, settings: dict) -> dict:
        return await self._request("PUT", "/api/live", json=settings)

    async def go_live(self, video_id: str, title: str | None = None) -> dict:
        return await self._request(
            "POST", "/api/live/go-live", json={"video_id": video_id, "title": title}
        )

    async def end_live(self) -> dict:
        return await self._request("POST", "/api/live/end-live")

    async def health(self) -> dict:
        return await self._request("GET", "/api/health")
