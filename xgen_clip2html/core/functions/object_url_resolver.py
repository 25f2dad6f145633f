# xgen_clip2html/core/functions/object_url_resolver.py
"""
Object URL Resolver Module

Provides abstract base class and implementations for fetching the bytes
behind object URLs (blob:...) referenced by pasted HTML when no RTF payload
is available.

Resolvers:
- MappingObjectUrlResolver: Bytes supplied by the host (clipboard files)
- HttpObjectUrlResolver: Fetch http(s) object URLs with httpx

Usage Example:
    from xgen_clip2html.core.functions.object_url_resolver import (
        MappingObjectUrlResolver,
        create_object_url_resolver,
        ResolverType,
    )

    resolver = MappingObjectUrlResolver({"blob:https://app/1": png_bytes})
    data = await resolver.fetch("blob:https://app/1")

    resolver = create_object_url_resolver(ResolverType.HTTP, timeout=5.0)
"""
import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import Dict, Mapping, Optional

import httpx

logger = logging.getLogger("xgen_clip2html.resolver")


class ResolverType(Enum):
    """Object URL resolver types."""
    MAPPING = "mapping"
    HTTP = "http"


class BaseObjectUrlResolver(ABC):
    """
    Abstract base class for object URL resolvers.

    Subclasses must implement:
        - fetch(): Return the bytes behind a URL, or None
    """

    def __init__(self, resolver_type: ResolverType):
        self._resolver_type = resolver_type
        self._logger = logging.getLogger(
            f"xgen_clip2html.resolver.{self.__class__.__name__}"
        )

    @property
    def resolver_type(self) -> ResolverType:
        """Get resolver type."""
        return self._resolver_type

    @property
    def logger(self) -> logging.Logger:
        """Get logger."""
        return self._logger

    @abstractmethod
    async def fetch(self, url: str) -> Optional[bytes]:
        """
        Fetch the content behind an object URL.

        Args:
            url: Object URL

        Returns:
            Content bytes, or None if the URL cannot be resolved
        """
        pass

    async def aclose(self) -> None:
        """Release resources held by the resolver."""
        return None


class MappingObjectUrlResolver(BaseObjectUrlResolver):
    """
    Resolver backed by an in-memory mapping.

    The host registers the bytes of every object URL it created.
    """

    def __init__(self, objects: Optional[Mapping[str, bytes]] = None):
        super().__init__(ResolverType.MAPPING)
        self._objects: Dict[str, bytes] = dict(objects or {})

    def register(self, url: str, data: bytes) -> None:
        """Register bytes for an object URL."""
        self._objects[url] = data

    def revoke(self, url: str) -> bool:
        """Forget an object URL. Returns True if it was registered."""
        return self._objects.pop(url, None) is not None

    async def fetch(self, url: str) -> Optional[bytes]:
        data = self._objects.get(url)
        if data is None:
            self._logger.warning(f"Object URL not registered: {url}")
        return data


class HttpObjectUrlResolver(BaseObjectUrlResolver):
    """
    Resolver fetching object URLs over HTTP with httpx.

    A leading 'blob:' is stripped, so 'blob:https://host/id' is fetched
    from 'https://host/id'.

    Args:
        timeout: Request timeout in seconds
        client: Existing httpx.AsyncClient (not closed by aclose())
        headers: Extra request headers
    """

    def __init__(
        self,
        timeout: float = 10.0,
        client: Optional[httpx.AsyncClient] = None,
        headers: Optional[Dict[str, str]] = None,
    ):
        super().__init__(ResolverType.HTTP)
        self._timeout = timeout
        self._headers = headers or {}
        self._client = client
        self._owns_client = client is None

    @property
    def timeout(self) -> float:
        """Get request timeout."""
        return self._timeout

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                headers=self._headers,
                timeout=self._timeout,
                follow_redirects=True,
            )
        return self._client

    @staticmethod
    def to_fetch_url(url: str) -> str:
        """Strip the blob: scheme prefix."""
        if url[:5].lower() == "blob:":
            return url[5:]
        return url

    async def fetch(self, url: str) -> Optional[bytes]:
        fetch_url = self.to_fetch_url(url)
        try:
            response = await self._get_client().get(fetch_url)
            response.raise_for_status()
            return response.content
        except httpx.TimeoutException:
            self._logger.warning(f"Timeout fetching object URL: {url[:80]}")
        except httpx.HTTPStatusError as e:
            self._logger.warning(f"HTTP {e.response.status_code} fetching: {url[:80]}")
        except httpx.HTTPError as e:
            self._logger.warning(f"Failed to fetch object URL: {url[:80]} - {e}")
        return None

    async def aclose(self) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None


def create_object_url_resolver(
    resolver_type: ResolverType = ResolverType.MAPPING,
    **kwargs
) -> BaseObjectUrlResolver:
    """
    Factory function to create an object URL resolver.

    Args:
        resolver_type: Type of resolver
        **kwargs: Resolver-specific options

    Returns:
        BaseObjectUrlResolver instance
    """
    if isinstance(resolver_type, str):
        resolver_type = ResolverType(resolver_type.lower())

    if resolver_type == ResolverType.MAPPING:
        return MappingObjectUrlResolver(**kwargs)
    elif resolver_type == ResolverType.HTTP:
        return HttpObjectUrlResolver(**kwargs)
    else:
        raise ValueError(f"Unsupported resolver type: {resolver_type}")


__all__ = [
    "ResolverType",
    "BaseObjectUrlResolver",
    "MappingObjectUrlResolver",
    "HttpObjectUrlResolver",
    "create_object_url_resolver",
]
