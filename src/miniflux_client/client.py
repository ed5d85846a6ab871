"""Miniflux REST API client."""

import json
import logging
from collections.abc import Mapping
from typing import Any
from urllib.parse import quote

import httpx

from .auth import Auth, resolve_auth
from .config import Config
from .models import (
    Category,
    CreatedFeed,
    Entry,
    EntryList,
    EntryStatus,
    Feed,
    FeedLink,
    Filter,
    Icon,
    User,
    UserSettings,
)

logger = logging.getLogger(__name__)


def _parse(model, data):
    """Build a record from a response body; a 204 yields None."""
    if data is None:
        return None
    return model.from_dict(data)


class MinifluxClient:
    """Async client for the Miniflux v1 API.

    Every endpoint method issues exactly one request. Responses are not
    cached and failed calls are not retried.
    """

    def __init__(
        self,
        base_url: str,
        credentials: Mapping[str, str | None] | Auth | None = None,
        timeout: float | None = None,
    ):
        try:
            url = httpx.URL(base_url)
        except (httpx.InvalidURL, TypeError) as e:
            raise ConfigurationError(f"Invalid server URL {base_url!r}: {e}") from e
        if url.scheme not in ("http", "https") or not url.host:
            raise ConfigurationError(f"Invalid server URL {base_url!r}: must be an absolute http(s) URL")

        self.url = url
        self._auth = resolve_auth(credentials)
        self._client = httpx.AsyncClient(
            base_url=url,
            timeout=timeout,
            follow_redirects=False,
        )

    @classmethod
    def from_config(cls, config: Config) -> "MinifluxClient":
        """Build a client from environment-backed configuration."""
        return cls(config.miniflux_url, config.credentials(), timeout=config.miniflux_timeout)

    @property
    def auth(self) -> Auth:
        return self._auth

    async def request(self, path: str, body: Any = None, method: str = "GET") -> Any:
        """Issue a single API call and interpret the response.

        Args:
            path: Absolute API path, including any query string
            body: None for an empty body, a str of pre-formatted JSON, or
                any JSON-serializable value
            method: HTTP verb

        Returns:
            Parsed JSON for JSON responses, text for other success
            responses, None for 204

        Raises:
            APIError: If the server answers with any other status
        """
        if body is None:
            content = ""
        elif isinstance(body, str):
            content = body
        else:
            content = json.dumps(body)

        headers = {"Content-Type": "application/json"}
        headers.update(self._auth.headers())

        logger.debug("%s %s", method, path)
        response = await self._client.request(method, path, content=content, headers=headers)

        if response.status_code == 204:
            return None
        # Miniflux answers 201 on creation; any 2xx carries the result.
        if response.is_success:
            if response.headers.get("content-type", "").lower().startswith("application/json"):
                return response.json()
            return response.text

        try:
            payload = response.json()
        except ValueError:
            payload = {"error_message": response.text}
        logger.warning("%s %s failed with status %d", method, path, response.status_code)
        raise APIError(response.status_code, payload)

    async def get(self, path: str) -> Any:
        return await self.request(path, None, "GET")

    async def post(self, path: str, body: Any) -> Any:
        return await self.request(path, body, "POST")

    async def put(self, path: str, body: Any = None) -> Any:
        return await self.request(path, body, "PUT")

    async def delete(self, path: str) -> Any:
        return await self.request(path, None, "DELETE")

    # --- Feeds ---

    async def discover(self, url: str) -> list[FeedLink]:
        """Find the feeds advertised by a website."""
        data = await self.post("/v1/discover", {"url": url})
        return [FeedLink.from_dict(link) for link in data or []]

    async def feeds(self) -> list[Feed]:
        """List all subscribed feeds."""
        data = await self.get("/v1/feeds")
        feeds = [Feed.from_dict(f) for f in data or []]
        logger.info("Retrieved %d feeds", len(feeds))
        return feeds

    async def get_feed(self, feed_id: int) -> Feed | None:
        return _parse(Feed, await self.get(f"/v1/feeds/{feed_id}"))

    async def get_feed_icon(self, feed_id: int) -> Icon | None:
        return _parse(Icon, await self.get(f"/v1/feeds/{feed_id}/icon"))

    async def create_feed(self, feed_url: str, category_id: int | None = None) -> CreatedFeed | None:
        """Subscribe to a feed.

        Args:
            feed_url: URL of the RSS/Atom document
            category_id: Category to file the feed under; omitted when None or 0
        """
        body: dict[str, Any] = {"feed_url": feed_url}
        if category_id:
            body["category_id"] = category_id
        return _parse(CreatedFeed, await self.post("/v1/feeds", body))

    async def update_feed(
        self,
        feed_id: int,
        title: str | None = None,
        category_id: int | None = None,
    ) -> Feed | None:
        """Rename a feed and/or move it to another category.

        Raises:
            InvalidRequestError: If neither title nor category_id is given
        """
        if title is None and category_id is None:
            raise InvalidRequestError("No title or category specified")

        body: dict[str, Any] = {}
        if title is not None:
            body["title"] = title
        if category_id is not None:
            body["category"] = {"id": category_id}
        return _parse(Feed, await self.put(f"/v1/feeds/{feed_id}", body))

    async def refresh_feed(self, feed_id: int) -> None:
        await self.put(f"/v1/feeds/{feed_id}/refresh")

    async def remove_feed(self, feed_id: int) -> None:
        await self.delete(f"/v1/feeds/{feed_id}")

    # --- Entries ---

    async def get_feed_entry(self, feed_id: int, entry_id: int) -> Entry | None:
        return _parse(Entry, await self.get(f"/v1/feeds/{feed_id}/entries/{entry_id}"))

    async def get_entry(self, entry_id: int) -> Entry | None:
        return _parse(Entry, await self.get(f"/v1/entries/{entry_id}"))

    async def get_feed_entries(self, feed_id: int, filter: Filter | None = None) -> EntryList:
        """List entries of one feed, optionally filtered and paginated."""
        return await self._list_entries(f"/v1/feeds/{feed_id}/entries", filter)

    async def get_entries(self, filter: Filter | None = None) -> EntryList:
        """List entries across all feeds, optionally filtered and paginated."""
        return await self._list_entries("/v1/entries", filter)

    async def _list_entries(self, path: str, filter: Filter | None) -> EntryList:
        if filter is not None:
            query = filter.to_query()
            if query:
                path = f"{path}?{query}"
        entries = EntryList.from_dict(await self.get(path) or {})
        logger.info("Retrieved %d of %d entries", len(entries.entries), entries.total)
        return entries

    async def update_entries(self, entry_ids: list[int], status: EntryStatus | str) -> None:
        """Set the status of several entries at once."""
        status = status.value if isinstance(status, EntryStatus) else status
        await self.put("/v1/entries", {"entry_ids": list(entry_ids), "status": status})

    async def toggle_bookmark(self, entry_id: int) -> None:
        await self.put(f"/v1/entries/{entry_id}/bookmark")

    # --- Categories ---

    async def categories(self) -> list[Category]:
        data = await self.get("/v1/categories")
        return [Category.from_dict(c) for c in data or []]

    async def create_category(self, title: str) -> Category | None:
        return _parse(Category, await self.post("/v1/categories", {"title": title}))

    async def update_category(self, category_id: int, title: str) -> Category | None:
        return _parse(Category, await self.put(f"/v1/categories/{category_id}", {"title": title}))

    async def delete_category(self, category_id: int) -> None:
        await self.delete(f"/v1/categories/{category_id}")

    # --- OPML ---

    async def ompl_export(self) -> str | None:
        """Export all subscriptions as an OPML document."""
        return await self.get("/v1/export")

    opml_export = ompl_export

    # --- Users ---

    async def create_user(self, username: str, password: str, is_admin: bool = False) -> User | None:
        body = {"username": username, "password": password, "is_admin": is_admin}
        return _parse(User, await self.post("/v1/users", body))

    async def update_user(self, user_id: int, settings: UserSettings | dict) -> User | None:
        """Change account settings. Only the fields that are set are sent."""
        body = settings.to_dict() if isinstance(settings, UserSettings) else settings
        return _parse(User, await self.put(f"/v1/users/{user_id}", body))

    async def users(self) -> list[User]:
        data = await self.get("/v1/users")
        return [User.from_dict(u) for u in data or []]

    async def get_user(self, user: int | str) -> User | None:
        """Fetch a user by numeric ID or by username."""
        return _parse(User, await self.get(f"/v1/users/{quote(str(user), safe='')}"))

    async def delete_user(self, user_id: int) -> None:
        await self.delete(f"/v1/users/{user_id}")

    # --- Lifecycle ---

    async def aclose(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()

    async def __aenter__(self) -> "MinifluxClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()


class MinifluxError(Exception):
    """Base class for errors raised by the client."""


class ConfigurationError(MinifluxError, ValueError):
    """Raised when the client is constructed with an unusable server URL."""


class InvalidRequestError(MinifluxError, ValueError):
    """Raised when a call is rejected locally before any request is sent."""


class APIError(MinifluxError):
    """Raised when the server answers with a non-success status.

    ``payload`` is the parsed error body, normally ``{"error_message": ...}``.
    """

    def __init__(self, status_code: int, payload: Any):
        self.status_code = status_code
        self.payload = payload
        if isinstance(payload, dict):
            self.error_message = payload.get("error_message", "")
        else:
            self.error_message = str(payload)
        super().__init__(f"{status_code}: {self.error_message}")
