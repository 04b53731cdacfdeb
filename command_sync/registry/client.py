"""
Registry Client
Talks to Discord's application-command REST API.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

import httpx

from command_sync.config.registry import DEFAULT_API_URL, get_auth_headers
from command_sync.errors import PartitionNotFound, RemoteCallFailure
from command_sync.registry.models import (
    GlobalTarget,
    PartitionHandle,
    PartitionTarget,
    RemoteEntry,
    Target,
    get_rows,
)
from command_sync.utils.logger import Logger


class RegistryClient(ABC):
    """Abstract remote command registry."""

    @abstractmethod
    async def fetch_all(self, target: Target) -> List[RemoteEntry]:
        """Fetch every command currently registered for a target."""
        pass

    @abstractmethod
    async def create(self, target: Target, payload: Dict[str, Any]) -> RemoteEntry:
        """Register a new command for a target."""
        pass

    @abstractmethod
    async def edit(self, entry: RemoteEntry, payload: Dict[str, Any]) -> RemoteEntry:
        """Overwrite an existing command, keyed by its remote id."""
        pass

    @abstractmethod
    async def resolve_partition(self, partition_id: str) -> PartitionHandle:
        """Resolve a guild id to a live guild, or raise PartitionNotFound."""
        pass

    async def aclose(self) -> None:
        """Release any open connections."""


class DiscordRegistryClient(RegistryClient):
    """
    httpx-backed client for Discord application commands.

    One AsyncClient is opened lazily and reused for the whole pass; close it
    with `aclose()` or use the client as an async context manager.
    """

    def __init__(
        self,
        token: str,
        api_url: str = DEFAULT_API_URL,
        application_id: Optional[str] = None,
        timeout: float = 15.0,
        logger: Optional[Logger] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._token = token
        self.api_url = api_url.rstrip("/")
        self._application_id = application_id
        self.timeout = timeout
        self.logger = logger or Logger("registry-client")
        self._transport = transport
        self._http: Optional[httpx.AsyncClient] = None

    @property
    def http(self) -> httpx.AsyncClient:
        """Lazily initialize the HTTP client."""
        if self._http is None:
            self._http = httpx.AsyncClient(
                base_url=self.api_url,
                headers=get_auth_headers(self._token),
                timeout=self.timeout,
                transport=self._transport,
            )
        return self._http

    async def aclose(self) -> None:
        if self._http is not None:
            await self._http.aclose()
            self._http = None

    async def __aenter__(self) -> "DiscordRegistryClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def _request(self, method: str, path: str, json: Optional[Dict[str, Any]] = None) -> Any:
        """Send a request, converting every failure into RemoteCallFailure."""
        try:
            response = await self.http.request(method, path, json=json)
        except httpx.TimeoutException as e:
            raise RemoteCallFailure(f"{method} {path} timed out", details=str(e)) from e
        except httpx.RequestError as e:
            raise RemoteCallFailure(f"Failed to connect to Discord: {e}", details=str(e)) from e

        if response.status_code >= 400:
            raise RemoteCallFailure(
                f"{method} {path} failed with status {response.status_code}",
                status_code=response.status_code,
                details=response.text,
            )

        if not response.content:
            return None
        return response.json()

    async def get_application_id(self) -> str:
        """Get the application id, fetching it once from the API if not configured."""
        if self._application_id is None:
            data = await self._request("GET", "/applications/@me")
            if not isinstance(data, dict) or not data.get("id"):
                raise RemoteCallFailure("GET /applications/@me returned no application id", details=repr(data))
            self._application_id = str(data["id"])
            self.logger.debug(f"Resolved application id {self._application_id}")
        return self._application_id

    async def _commands_path(self, target: Target) -> str:
        application_id = await self.get_application_id()
        if isinstance(target, PartitionTarget):
            return f"/applications/{application_id}/guilds/{target.id}/commands"
        return f"/applications/{application_id}/commands"

    async def fetch_all(self, target: Target) -> List[RemoteEntry]:
        path = await self._commands_path(target)
        data = await self._request("GET", path)

        entries = []
        for row in get_rows(data):
            entry = RemoteEntry.from_row(row)
            if entry.guild_id is None and isinstance(target, PartitionTarget):
                entry.guild_id = target.id
            entries.append(entry)
        return entries

    async def create(self, target: Target, payload: Dict[str, Any]) -> RemoteEntry:
        path = await self._commands_path(target)
        data = await self._request("POST", path, json=payload)
        return RemoteEntry.from_row(data or {})

    async def edit(self, entry: RemoteEntry, payload: Dict[str, Any]) -> RemoteEntry:
        target = PartitionTarget(entry.guild_id) if entry.guild_id else GlobalTarget()
        path = await self._commands_path(target)
        data = await self._request("PATCH", f"{path}/{entry.id}", json=payload)
        return RemoteEntry.from_row(data or {})

    async def resolve_partition(self, partition_id: str) -> PartitionHandle:
        try:
            data = await self._request("GET", f"/guilds/{partition_id}")
        except RemoteCallFailure as e:
            # Unknown guild, missing access, or unreachable all mean the same here
            raise PartitionNotFound(partition_id, details=e.message) from e
        data = data or {}
        return PartitionHandle(id=str(data.get("id", partition_id)), name=str(data.get("name", "")))
