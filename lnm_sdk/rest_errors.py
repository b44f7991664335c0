"""Errors raised by the REST clients."""

from __future__ import annotations

from http import HTTPStatus
from typing import Any

__all__ = [
    "RestApiError",
    "UrlParseError",
    "UnexpectedSchemaError",
    "InvalidHeaderValueError",
    "InvalidSecretHmacError",
    "HttpClientError",
    "ResponseDecodingError",
    "MissingRequestCredentialsError",
    "UnsupportedMethodError",
    "SendFailedError",
    "ErrorResponseError",
    "ResponseJsonDeserializeError",
    "RequestJsonSerializeError",
]


def _status_text(status: int) -> str:
    """Render a status code with its canonical reason, e.g. '404 Not Found'."""
    try:
        return f"{int(status)} {HTTPStatus(int(status)).phrase}"
    except ValueError:
        return str(status)


class RestApiError(Exception):
    """Base class of every REST client error."""


class UrlParseError(RestApiError):
    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"Url parse error: {message}")


class UnexpectedSchemaError(RestApiError):
    def __init__(self, source: Any) -> None:
        self.source = source
        super().__init__(f"Unexpected schema error: {source}")


class InvalidHeaderValueError(RestApiError):
    def __init__(self, source: Any) -> None:
        self.source = source
        super().__init__(f"Invalid header value error: {source}")


class InvalidSecretHmacError(RestApiError):
    def __init__(self, source: Any) -> None:
        self.source = source
        super().__init__(f"Invalid secret HMAC error: {source}")


class HttpClientError(RestApiError):
    def __init__(self, source: Any) -> None:
        self.source = source
        super().__init__(f"HTTP client error: {source}")


class ResponseDecodingError(RestApiError):
    def __init__(self, source: Any) -> None:
        self.source = source
        super().__init__(f"Response decoding error: {source}")


class MissingRequestCredentialsError(RestApiError):
    def __init__(self) -> None:
        super().__init__("Authentication required for request but no credentials provided")


class UnsupportedMethodError(RestApiError):
    def __init__(self, method: str) -> None:
        self.method = method
        super().__init__(f"Tried to make a request with unsupported method: {method}")


class SendFailedError(RestApiError):
    def __init__(self, source: Any) -> None:
        self.source = source
        super().__init__(f"Failed to send request error: {source}")


class ErrorResponseError(RestApiError):
    def __init__(self, status: int, text: str) -> None:
        self.status = status
        self.text = text
        super().__init__(
            f"Received error response. Status: {_status_text(status)}, text: {text}"
        )


class ResponseJsonDeserializeError(RestApiError):
    def __init__(self, raw_response: str, error: Any) -> None:
        self.raw_response = raw_response
        self.error = error
        super().__init__(
            "Response JSON deserialization failed. "
            f"Raw response: '{raw_response}', error: {error}"
        )


class RequestJsonSerializeError(RestApiError):
    def __init__(self, error: Any) -> None:
        self.error = error
        super().__init__(f"Request JSON serialization failed. Error: {error}")