"""Base HTTP machinery shared by the REST clients."""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Iterable, Optional, Tuple

import httpx

from .config import RestClientConfig
from .rest_errors import (
    ErrorResponseError,
    HttpClientError,
    InvalidHeaderValueError,
    MissingRequestCredentialsError,
    RequestJsonSerializeError,
    ResponseDecodingError,
    ResponseJsonDeserializeError,
    SendFailedError,
    UnsupportedMethodError,
    UrlParseError,
)

__all__ = ["SignatureGenerator", "LnmRestBase"]

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


class SignatureGenerator(ABC):
    """Produces the request signature sent with authenticated requests."""

    @abstractmethod
    def generate(
        self, timestamp: datetime, method: str, url: httpx.URL, body: Optional[str]
    ) -> str:
        """Return the signature for a request."""


def _path_string(path: Any) -> str:
    to_path = getattr(path, "to_path_string", None)
    return to_path() if callable(to_path) else str(path)


def _header_value(value: str) -> str:
    if any((ord(ch) < 32 and ch != "\t") or ord(ch) == 127 for ch in value):
        raise InvalidHeaderValueError("failed to parse header value")
    return value


@dataclass(frozen=True)
class _Credentials:
    key: str
    passphrase: str
    signature_generator: SignatureGenerator

    def headers(self, method: str, url: httpx.URL, body: Optional[str]) -> Dict[str, str]:
        timestamp = datetime.now(timezone.utc)
        signature = self.signature_generator.generate(timestamp, method, url, body)
        millis = (timestamp - _EPOCH) // timedelta(milliseconds=1)
        return {
            "lnm-access-key": _header_value(self.key),
            "lnm-access-signature": _header_value(signature),
            "lnm-access-passphrase": _header_value(self.passphrase),
            "lnm-access-timestamp": _header_value(str(millis)),
        }


class LnmRestBase:
    """An HTTPS client for one API domain, optionally holding credentials."""

    def __init__(
        self,
        config: Optional[RestClientConfig],
        domain: str,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        config = config or RestClientConfig()
        try:
            self._client = httpx.AsyncClient(timeout=config.timeout, transport=transport)
        except (httpx.HTTPError, ValueError, TypeError) as exc:
            raise HttpClientError(exc) from exc
        self._domain = domain
        self._credentials: Optional[_Credentials] = None

    @classmethod
    def with_credentials(
        cls,
        config: Optional[RestClientConfig],
        domain: str,
        key: str,
        passphrase: str,
        signature_generator: SignatureGenerator,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> LnmRestBase:
        """A client that can make authenticated requests."""
        base = cls(config, domain, transport)
        base._credentials = _Credentials(key, passphrase, signature_generator)
        return base

    @property
    def has_credentials(self) -> bool:
        """Whether the client holds credentials."""
        return self._credentials is not None

    async def __aenter__(self) -> LnmRestBase:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()

    def _build_url(self, path: Any) -> httpx.URL:
        text = f"https://{self._domain}{_path_string(path)}"
        try:
            url = httpx.URL(text)
        except (httpx.InvalidURL, ValueError, TypeError) as exc:
            raise UrlParseError(str(exc)) from exc
        if not url.host:
            raise UrlParseError("empty host")
        return url

    async def _send(self, request: httpx.Request) -> str:
        try:
            response = await self._client.send(request)
        except httpx.HTTPError as exc:
            raise SendFailedError(exc) from exc
        try:
            text = response.text
        except (httpx.HTTPError, UnicodeDecodeError) as exc:
            raise ResponseDecodingError(exc) from exc
        if not response.is_success:
            raise ErrorResponseError(response.status_code, text)
        return text

    async def _make_request(
        self, method: str, url: httpx.URL, body: Optional[str], authenticated: bool
    ) -> Any:
        method = method.upper()
        if authenticated:
            if self._credentials is None:
                raise MissingRequestCredentialsError()
            headers = self._credentials.headers(method, url, body)
        else:
            headers = {}

        if method in ("POST", "PUT"):
            if body is not None:
                headers["content-type"] = "application/json"
        elif method in ("GET", "DELETE"):
            body = None
        else:
            raise UnsupportedMethodError(method)

        request = self._client.build_request(method, url, headers=headers, content=body)
        raw_response = await self._send(request)
        try:
            return json.loads(raw_response)
        except ValueError as exc:
            raise ResponseJsonDeserializeError(raw_response, exc) from exc

    async def make_request_with_body(
        self, method: str, path: Any, body: Any, authenticated: bool
    ) -> Any:
        """Send ``body`` as JSON and return the decoded JSON response."""
        url = self._build_url(path)
        try:
            payload = json.dumps(body, separators=(",", ":"), allow_nan=False)
        except (TypeError, ValueError) as exc:
            raise RequestJsonSerializeError(exc) from exc
        return await self._make_request(method, url, payload, authenticated)

    async def make_request_with_query_params(
        self,
        method: str,
        path: Any,
        query_params: Iterable[Tuple[str, str]],
        authenticated: bool,
    ) -> Any:
        """Append ``query_params`` to the URL and return the decoded JSON response."""
        url = self._build_url(path)
        pairs = [(str(k), str(v)) for k, v in query_params]
        if pairs:
            url = url.copy_merge_params(pairs)
        return await self._make_request(method, url, None, authenticated)

    async def make_request_without_params(
        self, method: str, path: Any, authenticated: bool
    ) -> Any:
        """Send a request without body or query and return the decoded JSON response."""
        url = self._build_url(path)
        return await self._make_request(method, url, None, authenticated)

    async def make_get_request_plain_text(self, path: Any) -> str:
        """Send an unauthenticated GET and return the response body as text."""
        url = self._build_url(path)
        request = self._client.build_request("GET", url)
        return await self._send(request)