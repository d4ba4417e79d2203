"""
TfL API manager for fetching arrivals and line status.
Author: Oliver Ernster

This module handles all communication with the TfL Unified API. Each
fetch makes a single request; failures are logged and turned into a
null or degraded result so callers never see an exception.
"""

import asyncio
import aiohttp
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import Any, List, Optional

from version import get_user_agent
from ..core.services.line_status_service import summarize_line_status_response
from ..managers.tube_config import TubeConfig
from ..models.tube_data import LineStatusSummary, TubeStatus

logger = logging.getLogger(__name__)


class TflAPIException(Exception):
    """Base exception for TfL API-related errors."""

    pass


class TflNetworkException(TflAPIException):
    """Exception for network-related errors."""

    pass


class TflDataException(TflAPIException):
    """Exception for malformed or unexpected response data."""

    pass


class TflHTTPStatusException(TflAPIException):
    """Exception for non-2xx responses."""

    def __init__(self, status_code: int, message: str = ""):
        super().__init__(message or f"API returned status {status_code}")
        self.status_code = status_code


@dataclass
class TflAPIResponse:
    """Container for raw TfL API response data."""

    status_code: int
    data: Any
    timestamp: datetime
    url: str


class HTTPClient(ABC):
    """Abstract HTTP client interface for dependency injection."""

    @abstractmethod
    async def get(self, url: str) -> TflAPIResponse:
        """Make HTTP GET request."""
        pass

    @abstractmethod
    async def close(self) -> None:
        """Close HTTP client."""
        pass


class AioHttpClient(HTTPClient):
    """
    HTTP client implementation using aiohttp.

    No timeout is set unless one is given; aiohttp's default then applies.
    """

    def __init__(self, timeout_seconds: Optional[int] = None, user_agent: Optional[str] = None):
        """Initialize HTTP client with optional timeout."""
        self._timeout = (
            aiohttp.ClientTimeout(total=timeout_seconds) if timeout_seconds else None
        )
        self._user_agent = user_agent or get_user_agent()
        self._session: Optional[aiohttp.ClientSession] = None

    async def _ensure_session(self) -> aiohttp.ClientSession:
        """Ensure session is created."""
        if self._session is None or self._session.closed:
            kwargs = {"headers": {"User-Agent": self._user_agent}}
            if self._timeout is not None:
                kwargs["timeout"] = self._timeout
            self._session = aiohttp.ClientSession(**kwargs)
        return self._session

    async def get(self, url: str) -> TflAPIResponse:
        """
        Make HTTP GET request and decode the JSON body.

        Raises:
            TflHTTPStatusException: For non-2xx responses
            TflDataException: If the body is not valid JSON
            TflNetworkException: For transport failures
        """
        session = await self._ensure_session()

        try:
            async with session.get(url) as response:
                if not 200 <= response.status < 300:
                    raise TflHTTPStatusException(response.status)

                try:
                    data = await response.json(content_type=None)
                except ValueError as e:
                    raise TflDataException(f"Invalid JSON body: {e}")

                return TflAPIResponse(
                    status_code=response.status,
                    data=data,
                    timestamp=datetime.now(),
                    url=url,
                )
        except TflAPIException:
            raise
        except aiohttp.ClientError as e:
            raise TflNetworkException(f"Network error: {e}")
        except asyncio.TimeoutError:
            raise TflNetworkException("Network error: request timed out")
        except Exception as e:
            raise TflAPIException(f"HTTP request failed: {e}")

    async def close(self) -> None:
        """Close HTTP client."""
        if self._session and not self._session.closed:
            await self._session.close()
        self._session = None


class TflAPIManager:
    """
    Fetches arrivals and line status from the TfL API.

    Holds the per-session state: the last URL requested for each flow and
    the last known line status, used as the fallback when a fetch fails.
    """

    def __init__(self, http_client: HTTPClient):
        """
        Initialize TfL API manager.

        Args:
            http_client: HTTP client implementation
        """
        self._http_client = http_client
        self.last_arrivals_url: Optional[str] = None
        self.last_line_status_url: Optional[str] = None
        self.last_known_status: Optional[TubeStatus] = None

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()

    async def fetch_arrivals(self, url: str) -> Optional[List[Any]]:
        """
        Fetch arrival records for a stop point.

        Args:
            url: Arrivals endpoint URL

        Returns:
            The response array unchanged, or None if the fetch failed
        """
        self.last_arrivals_url = url

        try:
            response = await self._http_client.get(url)
            if not isinstance(response.data, list):
                raise TflDataException(
                    f"Expected a list of arrivals, got {type(response.data).__name__}"
                )

            logger.info(f"Fetched {len(response.data)} arrivals from {url}")
            return response.data

        except Exception as e:
            logger.error(f"Error fetching tube arrivals from {url}: {e}")
            return None

    async def fetch_line_status(self, url: str) -> LineStatusSummary:
        """
        Fetch and summarize the status of a line.

        Args:
            url: Line status endpoint URL

        Returns:
            LineStatusSummary: Summary of the first line in the response, or
            the last known status with no messages if the fetch failed
        """
        self.last_line_status_url = url

        try:
            response = await self._http_client.get(url)
            try:
                summary = summarize_line_status_response(response.data)
            except ValueError as e:
                raise TflDataException(f"Unexpected line status response: {e}")

        except Exception as e:
            fallback = self.last_known_status or TubeStatus.GOOD
            logger.error(f"Error fetching tube line status from {url}: {e}")
            return LineStatusSummary.default(fallback)

        self.last_known_status = summary.status
        logger.info(
            f"Line status {summary.status.value} with {len(summary.messages)} messages"
        )
        return summary

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self._http_client.close()
        logger.debug("TflAPIManager closed")


class TflAPIFactory:
    """Factory for creating TfL API managers."""

    @staticmethod
    def create_manager(config: TubeConfig) -> TflAPIManager:
        """Create a TfL API manager from configuration."""
        http_client = AioHttpClient(
            timeout_seconds=config.timeout_seconds,
            user_agent=config.user_agent,
        )
        return TflAPIManager(http_client)
