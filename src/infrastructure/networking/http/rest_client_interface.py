"""
REST Base Implementation

Shared base class for venue REST clients: aiohttp session management,
response parsing with msgspec, error mapping and latency tracking. Venue
specific URL building and signing live in the subclass.
"""

import asyncio
import time
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

import aiohttp
import msgspec

from config.structs import NetworkConfig
from infrastructure.exceptions.exchange import ExchangeConnectionRestError, ExchangeRestError
from infrastructure.logging import HFTLoggerInterface, get_logger
from infrastructure.networking.http.structs import HTTPMethod


class BaseRestClientInterface(ABC):
    """
    Abstract base class for venue REST clients.

    One aiohttp session is created lazily and reused until ``close``.
    """

    def __init__(self, network: Optional[NetworkConfig] = None,
                 logger: Optional[HFTLoggerInterface] = None):
        self.network = network or NetworkConfig()
        self.logger = logger or get_logger(f'rest.client.{self.exchange_name.lower()}')

        self._session: Optional[aiohttp.ClientSession] = None
        self._connector: Optional[aiohttp.TCPConnector] = None

        self._request_count = 0
        self._total_latency = 0.0

    @property
    @abstractmethod
    def exchange_name(self) -> str:
        """Venue name for logging and identification."""
        pass

    @abstractmethod
    def _build_url(self, endpoint: str) -> str:
        """Absolute URL for an endpoint path."""
        pass

    @abstractmethod
    def _handle_error(self, status: int, response_text: str) -> Exception:
        """
        Map an HTTP error response to an exception.

        Args:
            status: HTTP status code
            response_text: Response body text
        """
        pass

    def _parse_response(self, response_text: str) -> Any:
        """
        Parse response text to JSON using msgspec.

        Raises:
            ExchangeRestError: If response cannot be parsed
        """
        if not response_text:
            return None

        try:
            return msgspec.json.decode(response_text)
        except msgspec.DecodeError as e:
            raise ExchangeRestError(400, f"Invalid JSON response: {response_text[:100]}...") from e

    async def _ensure_session(self):
        """Ensure aiohttp session is created."""
        if self._session is None or self._session.closed:
            self._connector = aiohttp.TCPConnector(
                limit=100,
                limit_per_host=20,
                ttl_dns_cache=300,
                keepalive_timeout=30,
                force_close=False,
            )

            timeout = aiohttp.ClientTimeout(
                total=self.network.request_timeout,
                connect=self.network.connect_timeout,
            )

            default_headers = {
                'Accept': 'application/json',
                'Content-Type': 'application/json',
            }

            self._session = aiohttp.ClientSession(
                connector=self._connector,
                timeout=timeout,
                headers=default_headers,
            )

    async def _request(self, method: HTTPMethod, endpoint: str,
                       params: Optional[Dict[str, Any]] = None,
                       data: Optional[str] = None) -> Any:
        """
        Send one request and return the parsed JSON body.

        ``data`` is an already encoded JSON body, sent as is.

        Raises:
            ExchangeRestError: For API errors (subclass decides the exact type)
            ExchangeConnectionRestError: For transport failures and timeouts
        """
        await self._ensure_session()
        url = self._build_url(endpoint)

        try:
            async with self._session.request(method.value, url, params=params, data=data) as response:
                response_text = await response.text()

                if response.status >= 400:
                    raise self._handle_error(response.status, response_text)

                return self._parse_response(response_text)
        except (aiohttp.ClientConnectionError, asyncio.TimeoutError) as e:
            raise ExchangeConnectionRestError(0, f"{type(e).__name__}: {e}") from e

    async def request(self, method: HTTPMethod, endpoint: str,
                      params: Optional[Dict[str, Any]] = None,
                      data: Optional[str] = None) -> Any:
        """Request with latency tracking."""
        start_time = time.perf_counter()
        exchange = self.exchange_name.lower()

        try:
            result = await self._request(method, endpoint, params, data)
        except Exception as e:
            duration_ms = (time.perf_counter() - start_time) * 1000
            self.logger.metric(f"{exchange}_request_errors", 1,
                               endpoint=endpoint, method=method.value, error=type(e).__name__)
            self.logger.error(f"{self.exchange_name} request failed",
                              method=method.value,
                              endpoint=endpoint,
                              error_type=type(e).__name__,
                              error_message=str(e),
                              duration_ms=duration_ms)
            raise

        duration_ms = (time.perf_counter() - start_time) * 1000
        self._request_count += 1
        self._total_latency += duration_ms
        self.logger.latency(f"{exchange}_request", duration_ms, endpoint=endpoint, method=method.value)
        return result

    async def close(self):
        """Close the HTTP session."""
        if self._session and not self._session.closed:
            await self._session.close()

        if self._request_count > 0:
            self.logger.info(f"{self.exchange_name} REST client closed",
                             total_requests=self._request_count,
                             avg_latency_ms=self._total_latency / self._request_count)

    async def __aenter__(self):
        await self._ensure_session()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    def get_performance_stats(self) -> Dict[str, Any]:
        if self._request_count == 0:
            return {"requests": 0, "avg_latency_ms": 0.0}

        return {
            "requests": self._request_count,
            "avg_latency_ms": self._total_latency / self._request_count,
            "total_latency_ms": self._total_latency
        }
