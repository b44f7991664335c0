"""Client configuration objects."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass

DEFAULT_REST_TIMEOUT = 20.0
DEFAULT_WS_DISCONNECT_TIMEOUT = 6.0


@dataclass(frozen=True)
class RestClientConfig:
    """Configuration for REST API clients.

    ``timeout`` is the request timeout in seconds (default: 20).
    """

    timeout: float = DEFAULT_REST_TIMEOUT

    def with_timeout(self, timeout: float) -> RestClientConfig:
        """Return a copy of this configuration with a new request timeout."""
        return dataclasses.replace(self, timeout=timeout)


@dataclass(frozen=True)
class WebSocketClientConfig:
    """Configuration for WebSocket clients.

    ``disconnect_timeout`` is given in seconds (default: 6).
    """

    disconnect_timeout: float = DEFAULT_WS_DISCONNECT_TIMEOUT

    def with_disconnect_timeout(self, disconnect_timeout: float) -> WebSocketClientConfig:
        """Return a copy of this configuration with a new disconnect timeout."""
        return dataclasses.replace(self, disconnect_timeout=disconnect_timeout)