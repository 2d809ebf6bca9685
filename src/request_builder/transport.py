"""
Transport layer: the HTTP client that actually performs the exchange.

``HttpClient`` only depends on the ``Transport`` protocol, so tests can hand
it a ``Mock`` and applications can plug in their own session setup.
"""

import logging
from typing import Any, Optional, Protocol, Union

import requests


class Transport(Protocol):
    """Anything that can send one HTTP request and return its response."""

    def send(self, method: str, url: str, **kwargs: Any) -> requests.Response:
        ...


class RequestsTransport:
    """
    Transport backed by a ``requests.Session``.

    Responses are requested with ``stream=True`` so the body is read (and
    the connection released) by ``Response.from_requests``.
    """

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        timeout: Optional[Union[int, float]] = None,
    ) -> None:
        """
        Initialize the transport.

        Args:
            session: Session to send through; a new one is created if omitted
            timeout: Timeout in seconds passed to every request (None = no timeout)
        """
        self.session = session or requests.Session()
        self.timeout = timeout
        self._owns_session = session is None
        self.logger = logging.getLogger("request_builder")

    def send(self, method: str, url: str, **kwargs: Any) -> requests.Response:
        kwargs.setdefault("timeout", self.timeout)
        kwargs["stream"] = True
        self.logger.debug(f"Sending {method} request to {url} with timeout={kwargs['timeout']}")
        return self.session.request(method, url, **kwargs)

    def close(self) -> None:
        """Close the session if this transport created it."""
        if self._owns_session:
            self.session.close()

    def __enter__(self) -> "RequestsTransport":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
