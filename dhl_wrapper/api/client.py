# dhl_wrapper/api/client.py
# Author: dhl-wrapper

from typing import Any, Dict, Optional
from dataclasses import dataclass, field
from datetime import datetime, UTC
import asyncio
import logging

import aiohttp
import yarl

from ..core.config import Config
from ..core.exceptions import MissingCredentialsError, TransportError
from ..core.logger import Logger
from .request import ApiFamily, ApiMode, APIRequest
from .response_handler import ResponseHandler

logger = logging.getLogger(__name__)

API_KEY_HEADER = "DHL-API-Key"

@dataclass
class APIConfig:
    """Configuration for API client"""
    location_finder_api_key: Optional[str] = None
    shipment_tracking_api_key: Optional[str] = None
    mode: ApiMode = ApiMode.PRODUCTION
    timeout: float = 30.0
    verify_ssl: bool = True
    user_agent: str = "dhl-wrapper/0.1"

    def api_key_for(self, family: ApiFamily) -> Optional[str]:
        if family is ApiFamily.LOCATION_FINDER:
            return self.location_finder_api_key
        return self.shipment_tracking_api_key

@dataclass
class APIResponse:
    """Container for raw API response data"""
    status: int
    reason: Optional[str]
    body: bytes
    url: str
    headers: Dict[str, str] = field(default_factory=dict)
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))
    duration: float = 0.0

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")

class APIClient:
    """
    Sends typed requests to DHL's REST APIs.

    One aiohttp session is opened lazily and shared by all calls of a client,
    so concurrent `send` calls reuse pooled connections. The client holds no
    other mutable state. Each call is a single GET: there is no retry, caching
    or rate limiting.
    """

    def __init__(
        self,
        config: APIConfig,
        response_handler: Optional[ResponseHandler] = None
    ):
        self.config = config
        self.response_handler = response_handler or ResponseHandler()
        self._session: Optional[aiohttp.ClientSession] = None

    @classmethod
    def from_config(cls, config: Config) -> "APIClient":
        """Create a client, and set up logging, from a loaded Config"""
        Logger(config)
        return cls(APIConfig(
            location_finder_api_key=config.get("credentials.location_finder_api_key"),
            shipment_tracking_api_key=config.get("credentials.shipment_tracking_api_key"),
            mode=ApiMode(config.get("api.mode", ApiMode.PRODUCTION.value)),
            timeout=float(config.get("api.timeout", 30.0)),
            verify_ssl=config.get("api.verify_ssl", True),
            user_agent=config.get("api.user_agent", "dhl-wrapper/0.1")
        ))

    async def __aenter__(self) -> "APIClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    async def _get_session(self) -> aiohttp.ClientSession:
        """Get or create aiohttp session"""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self.config.timeout),
                headers={
                    "User-Agent": self.config.user_agent,
                    "Accept": "application/json"
                }
            )
        return self._session

    async def close(self) -> None:
        """Close the API client session"""
        if self._session and not self._session.closed:
            await self._session.close()

    def _api_key(self, request: APIRequest) -> str:
        api_key = self.config.api_key_for(request.family)
        if not api_key:
            raise MissingCredentialsError(
                f"No API key configured for {request.family.value}",
                details={"family": request.family.value}
            )
        return api_key

    async def fetch(self, url: str, api_key: str) -> APIResponse:
        """
        Perform the GET request

        Args:
            url: Fully encoded request URL
            api_key: Value of the DHL-API-Key header

        Returns:
            APIResponse with the unparsed body
        """
        session = await self._get_session()
        start_time = datetime.now(UTC)
        try:
            async with session.request(
                "GET",
                yarl.URL(url, encoded=True),
                headers={API_KEY_HEADER: api_key},
                ssl=self.config.verify_ssl
            ) as response:
                body = await response.read()
                return APIResponse(
                    status=response.status,
                    reason=response.reason,
                    body=body,
                    url=url,
                    headers=dict(response.headers),
                    timestamp=datetime.now(UTC),
                    duration=(datetime.now(UTC) - start_time).total_seconds()
                )
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.warning(
                f"API request failed: {e!r}",
                extra={"endpoint": url, "mode": self.config.mode.value}
            )
            raise TransportError(f"API request failed: {str(e) or type(e).__name__}", details={"url": url}) from e

    async def send(self, request: APIRequest) -> Any:
        """
        Send a request and parse its response

        Args:
            request: Any location finder or shipment tracking request

        Returns:
            Instance of request.response_model

        Raises:
            MissingCredentialsError: No API key for the request's family (no I/O happens)
            ResponseNotOkError: DHL reported a failure
            TransportError: The HTTP call failed
            SerializationError: The body could not be parsed
        """
        api_key = self._api_key(request)
        url = request.url(self.config.mode)
        extra = {"endpoint": request.endpoint, "mode": self.config.mode.value}

        logger.debug(f"GET {url}", extra=extra)
        response = await self.fetch(url, api_key)
        logger.debug(f"{response.status} in {response.duration:.3f}s", extra=extra)

        if not response.ok:
            logger.warning(f"API responded with status {response.status}", extra=extra)
        return self.response_handler.process_response(response, request.response_model)
