"""
services/ip_service.py
----------------------
Looks up the bot host's public IP address.

Responsibilities:
    - Query the primary JSON service (field ``ip``).
    - Fall back to the secondary service (field ``origin``) when the
      primary request fails or returns a non-success status.
    - Fold every failure into a human-readable message. Never raises.
"""

from typing import Optional

import httpx

from config import (
    LOOKUP_USER_AGENT,
    PRIMARY_LOOKUP_URL,
    SECONDARY_LOOKUP_URL,
    get_lookup_timeout,
)
from models.lookup import LookupResult
from utils.logger import get_logger

logger = get_logger(__name__)

MSG_PRIMARY_PARSE_ERROR = "error processing response"
MSG_SECONDARY_PARSE_ERROR = "error processing alternate response"
MSG_SECONDARY_STATUS_ERROR = "error in alternate request"
MSG_SECONDARY_CONNECTION_ERROR = "connection error with alternate service"
MSG_NO_ADDRESS = "could not extract address from response"

MAX_REDIRECTS = 10


class IpLookupService:
    """
    Public address lookup with a single fallback.

    Args:
        transport: Optional httpx transport, used by tests to simulate endpoints.
        timeout: Request timeout in seconds. None keeps the httpx default.
    """

    def __init__(
        self,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        timeout: Optional[float] = None,
    ):
        self.transport = transport
        self.timeout = timeout

    def _client(self) -> httpx.AsyncClient:
        kwargs = {
            "headers": {"User-Agent": LOOKUP_USER_AGENT},
            "follow_redirects": True,
            "max_redirects": MAX_REDIRECTS,
        }
        if self.transport is not None:
            kwargs["transport"] = self.transport
        if self.timeout is not None:
            kwargs["timeout"] = self.timeout
        return httpx.AsyncClient(**kwargs)

    async def lookup(self) -> LookupResult:
        """Query the primary service, falling back to the secondary on failure."""
        async with self._client() as client:
            try:
                response = await client.get(PRIMARY_LOOKUP_URL)
            except httpx.HTTPError as e:
                logger.warning(f"Primary lookup failed: {e!r}, trying alternate service")
                return await self._lookup_alternate(client)

            if not response.is_success:
                logger.warning(
                    f"Primary lookup returned HTTP {response.status_code}, trying alternate service"
                )
                return await self._lookup_alternate(client)

            try:
                ip = response.json()["ip"]
            except (ValueError, KeyError, TypeError):
                logger.warning("Primary lookup returned an unexpected body")
                return LookupResult.degraded(MSG_PRIMARY_PARSE_ERROR)
            if not isinstance(ip, str):
                return LookupResult.degraded(MSG_PRIMARY_PARSE_ERROR)
            return LookupResult.success(ip)

    async def _lookup_alternate(self, client: httpx.AsyncClient) -> LookupResult:
        try:
            response = await client.get(SECONDARY_LOOKUP_URL)
        except httpx.HTTPError as e:
            logger.warning(f"Alternate lookup failed: {e!r}")
            return LookupResult.degraded(MSG_SECONDARY_CONNECTION_ERROR)

        if not response.is_success:
            logger.warning(f"Alternate lookup returned HTTP {response.status_code}")
            return LookupResult.degraded(MSG_SECONDARY_STATUS_ERROR)

        try:
            data = response.json()
        except ValueError:
            return LookupResult.degraded(MSG_SECONDARY_PARSE_ERROR)

        origin = data.get("origin") if isinstance(data, dict) else None
        if not isinstance(origin, str):
            return LookupResult.degraded(MSG_NO_ADDRESS)
        return LookupResult.success(origin)


async def lookup_public_address() -> str:
    """Return the public IP address, or a failure message."""
    result = await IpLookupService(timeout=get_lookup_timeout()).lookup()
    if result.ok:
        logger.info(f"Public address resolved: {result.address}")
    else:
        logger.warning(f"Public address lookup degraded: {result.reason}")
    return result.text
