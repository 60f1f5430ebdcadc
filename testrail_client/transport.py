"""
HTTP transport shared by every TestRail resource client.

Owns the long-lived ``httpx.AsyncClient``, addresses requests at
``<host>/index.php?/api/v2/<endpoint>``, and routes every failure through
``classify_failure`` so callers only ever see TestRailError subclasses.
"""

import logging
from collections.abc import Mapping
from typing import Any, Optional
from urllib.parse import urlencode

import httpx

from .config import ClientConfig
from .exceptions import APIError
from .interceptor import classify_failure

JSON_HEADERS = {"Content-Type": "application/json"}
TEXT_HEADERS = {"Content-Type": "text/plain"}


def encode_query(params: Optional[Mapping[str, Any]]) -> str:
    """
    Serialize query parameters the way TestRail expects them.

    None values are dropped, booleans become 1/0 and lists become
    comma-separated values (``status_id=4,5``).
    """
    if not params:
        return ""

    pairs = []
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            value = ",".join(str(_scalar(item)) for item in value)
        else:
            value = _scalar(value)
        pairs.append((key, str(value)))
    return urlencode(pairs, safe=",")


def _scalar(value: Any) -> Any:
    if isinstance(value, bool):
        return int(value)
    return value


class Transport:
    """
    Thin async HTTP layer for the TestRail API.

    Features:
    - Long-lived httpx.AsyncClient with connection pooling, created lazily
    - Static basic-auth credentials from ClientConfig
    - TestRail's query-string routing (``index.php?/api/v2/...&param=value``)
    - Central failure classification into the library's exception hierarchy

    The transport never retries; one method call is one HTTP request.
    """

    def __init__(
        self,
        config: ClientConfig,
        http_transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.config = config
        self._http_transport = http_transport
        self._client: Optional[httpx.AsyncClient] = None
        self._closed = False

        # Setup logging
        self.logger = logging.getLogger(config.logging.logger_name)
        self.logger.setLevel(getattr(logging, config.logging.level.upper()))

    @property
    def closed(self) -> bool:
        return self._closed

    async def _ensure_initialized(self) -> httpx.AsyncClient:
        """Initialize the HTTP client if not already initialized."""
        if self._closed:
            raise RuntimeError("TestRail client has been closed")

        if self._client is None:
            self._client = httpx.AsyncClient(
                auth=self.config.basic_auth(),
                timeout=self.config.timeout.to_httpx_timeout(),
                follow_redirects=self.config.follow_redirects,
                verify=self.config.verify_ssl,
                headers=(
                    {"User-Agent": self.config.user_agent}
                    if self.config.user_agent
                    else None
                ),
                transport=self._http_transport,
            )
            self.logger.info(
                f"TestRail transport initialized for {self.config.api_url}"
            )

        return self._client

    async def close(self) -> None:
        """Close the HTTP client and release pooled connections."""
        if self._closed:
            return
        if self._client is not None:
            await self._client.aclose()
            self.logger.info("TestRail transport closed")
        self._closed = True

    def build_url(
        self, endpoint: str, params: Optional[Mapping[str, Any]] = None
    ) -> str:
        """
        Build the absolute URL for an API endpoint.

        TestRail routes on the query string, so extra parameters are joined
        with ``&`` rather than starting a new query.
        """
        url = f"{self.config.api_url}/{endpoint.lstrip('/')}"
        query = encode_query(params)
        return f"{url}&{query}" if query else url

    async def request(
        self,
        method: str,
        endpoint: str,
        *,
        params: Optional[Mapping[str, Any]] = None,
        json: Optional[Any] = None,
        content: Optional[Any] = None,
        files: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> httpx.Response:
        """
        Send one request to the TestRail API.

        Args:
            method: HTTP method
            endpoint: Endpoint path such as ``get_runs/1``
            params: Query parameters (see ``encode_query``)
            json: JSON body
            content: Raw body
            files: Multipart files
            headers: Extra request headers

        Returns:
            The successful HTTP response

        Raises:
            TestRailError: the classified failure, chained to the httpx error
        """
        client = await self._ensure_initialized()
        url = self.build_url(endpoint, params)
        self.logger.debug(f"Sending [{method} {endpoint}]")

        try:
            response = await client.request(
                method, url, json=json, content=content, files=files, headers=headers
            )
            response.raise_for_status()
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise classify_failure(exc) from exc

        self.logger.debug(f"Completed [{method} {endpoint}] -> {response.status_code}")
        return response

    def _decode_json(self, response: httpx.Response) -> Any:
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as exc:
            raise APIError(
                "TestRail returned a response that is not valid JSON",
                status_code=response.status_code,
                body=response.text,
                response=response,
                request=response.request,
            ) from exc

    async def get(
        self, endpoint: str, params: Optional[Mapping[str, Any]] = None
    ) -> Any:
        """GET an endpoint and return the decoded JSON body."""
        response = await self.request("GET", endpoint, params=params)
        return self._decode_json(response)

    async def post(self, endpoint: str, payload: Optional[Any] = None) -> Any:
        """POST a JSON payload and return the decoded JSON body (None if empty)."""
        if payload is None:
            # TestRail rejects POSTs that do not declare a JSON content type
            response = await self.request("POST", endpoint, headers=JSON_HEADERS)
        else:
            response = await self.request("POST", endpoint, json=payload)
        return self._decode_json(response)

    async def post_text(self, endpoint: str, text: str) -> Any:
        """POST a plain-text body and return the decoded JSON body."""
        response = await self.request(
            "POST", endpoint, content=text.encode("utf-8"), headers=TEXT_HEADERS
        )
        return self._decode_json(response)

    async def post_files(self, endpoint: str, files: Mapping[str, Any]) -> Any:
        """POST a multipart body and return the decoded JSON body."""
        response = await self.request("POST", endpoint, files=files)
        return self._decode_json(response)

    async def get_text(self, endpoint: str) -> str:
        response = await self.request("GET", endpoint)
        return response.text

    async def get_bytes(self, endpoint: str) -> bytes:
        response = await self.request("GET", endpoint)
        return response.content
