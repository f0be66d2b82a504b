"""Uniform retrieval of registry documents and artifacts."""

import asyncio
import json
import logging
from typing import Any

import httpx

from codexskill.core.exceptions import FetchError, NotFoundError, ParseError
from codexskill.core.source import is_http, source_to_path

logger = logging.getLogger(__name__)


class ContentFetcher:
    """Fetch sources over HTTP(S) or from the local filesystem."""

    def __init__(self, timeout: float = 30.0):
        """Initialize the fetcher.

        Args:
            timeout: HTTP timeout in seconds
        """
        self.timeout = timeout

    async def load_json(self, source: str) -> Any:
        """Load and parse a JSON document.

        Args:
            source: HTTP(S) URL, file:// URL or filesystem path

        Returns:
            The parsed document

        Raises:
            FetchError: If a remote source is unreachable or answers non-2xx
            NotFoundError: If a local file doesn't exist
            ParseError: If the body is not valid JSON
        """
        raw = await self.load_binary(source)
        try:
            return json.loads(raw)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise ParseError(source, e) from e

    async def load_binary(self, source: str) -> bytes:
        """Load a source as raw bytes.

        Raises:
            FetchError: If a remote source is unreachable or answers non-2xx
            NotFoundError: If a local file doesn't exist
        """
        if is_http(source):
            return await self._get(source)
        return await self._read(source)

    async def _get(self, url: str) -> bytes:
        logger.debug(f"GET {url}")
        async with httpx.AsyncClient(follow_redirects=True) as client:
            try:
                response = await client.get(url, timeout=self.timeout)
            except (httpx.RequestError, httpx.InvalidURL) as e:
                raise FetchError(url, None, str(e)) from e

        if not response.is_success:
            raise FetchError(url, response.status_code)
        return response.content

    async def _read(self, source: str) -> bytes:
        path = source_to_path(source)
        logger.debug(f"Reading {path}")
        try:
            return await asyncio.to_thread(path.read_bytes)
        except FileNotFoundError as e:
            raise NotFoundError("file", str(path)) from e
