"""
HTTP verb methods and the request builder.

This module provides:
- HttpClient: GET/POST/PUT/DELETE over a pluggable transport, returning a
  normalized Response
- HttpRequest: a builder that accumulates per-request settings through
  setters and sends them with one verb call
- Logging configuration for the package
"""

import logging
import sys
from pathlib import Path
from typing import Any, Mapping, Optional, Sequence

from requests.exceptions import RequestException

from .exceptions import BodyReadError, InvalidArgumentError
from .form import FileAttachment
from .options import RequestOptions
from .response import Response
from .transport import RequestsTransport, Transport

SUPPORTED_METHODS = ("GET", "POST", "PUT", "DELETE")
LOGGER_NAME = 'request_builder'
DEFAULT_LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def _attach(logger: logging.Logger, handler: logging.Handler, level: int,
            formatter: logging.Formatter) -> None:
    handler.setLevel(level)
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def _file_handler(path: str) -> logging.FileHandler:
    """Open a UTF-8 log file, creating its directory first."""
    Path(path).parent.mkdir(parents=True, exist_ok=True)
    return logging.FileHandler(path, encoding='utf-8')


def _setup_default_logging() -> logging.Logger:
    """Return the package logger, giving it a stdout handler on first use."""
    logger = logging.getLogger(LOGGER_NAME)

    # configure_logging() or the application may already have set handlers
    if not logger.handlers:
        logger.setLevel(logging.INFO)
        _attach(logger, logging.StreamHandler(sys.stdout), logging.INFO,
                logging.Formatter(DEFAULT_LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
        logger.propagate = False

    return logger


def configure_logging(
    log_level: str = "INFO",
    log_file: Optional[str] = None,
    error_file: Optional[str] = None,
    console_output: bool = True,
    log_format: Optional[str] = None
) -> None:
    """
    Replace the handlers of the request_builder logger.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: File receiving every record at ``log_level`` and above
        error_file: File receiving ERROR and CRITICAL records only
        console_output: Whether to also write to stdout
        log_format: Custom log format string

    Example:
        configure_logging(
            log_level='DEBUG',
            log_file='logs/requests.log',
            error_file='logs/error.log',
            console_output=False,
        )
    """
    logger = logging.getLogger(LOGGER_NAME)

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()

    level = getattr(logging, log_level.upper(), logging.INFO)
    logger.setLevel(level)
    formatter = logging.Formatter(log_format or DEFAULT_LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    targets = []
    if console_output:
        targets.append((logging.StreamHandler(sys.stdout), level))
    if log_file:
        targets.append((_file_handler(log_file), level))
    if error_file:
        targets.append((_file_handler(error_file), logging.ERROR))

    for handler, handler_level in targets:
        _attach(logger, handler, handler_level, formatter)

    # NullHandler keeps the default stdout handler from being reinstalled
    if not targets:
        logger.addHandler(logging.NullHandler())

    logger.propagate = False
    logger.info(f"Logging configured: level={log_level}, console={console_output}, "
                f"log_file={log_file}, error_file={error_file}")


class HttpClient:
    """
    Issues GET/POST/PUT/DELETE requests and normalizes their responses.

    Every call takes an immutable ``RequestOptions`` value. Transport errors
    from requests are re-raised unchanged and nothing is retried; 4xx and
    5xx responses are returned like any other.
    """

    def __init__(self, transport: Optional[Transport] = None) -> None:
        """
        Initialize the client.

        Args:
            transport: Transport used to send requests (default: a
                RequestsTransport with its own session)
        """
        self.transport = transport or RequestsTransport()
        self.logger = _setup_default_logging()

    def request(
        self,
        method: str,
        url: str,
        options: Optional[RequestOptions] = None,
    ) -> Response:
        """
        Send one request.

        Args:
            method: One of GET, POST, PUT, DELETE
            url: Target URL
            options: Per-request settings (default: none beyond User-Agent)

        Returns:
            Response with the body fully read

        Raises:
            InvalidArgumentError: On an unsupported method or empty URL
            BodyReadError: When the response body could not be read
            requests.RequestException: On transport failure
        """
        if not isinstance(method, str) or method.upper() not in SUPPORTED_METHODS:
            raise InvalidArgumentError(
                "method", method, f"one of {', '.join(SUPPORTED_METHODS)}"
            )

        if not isinstance(url, str) or not url.strip():
            raise InvalidArgumentError("url", url, "non-empty string")

        method = method.upper()
        options = options or RequestOptions()
        request_kwargs = options.to_request_kwargs(method)

        self.logger.debug(f"Making {method} request to {url} "
                          f"(options: {', '.join(sorted(request_kwargs))})")

        try:
            raw_response = self.transport.send(method, url, **request_kwargs)
        except RequestException as e:
            self.logger.error(f"{method} {url} failed: {type(e).__name__}: {e}")
            raise

        try:
            response = Response.from_requests(raw_response)
        except BodyReadError as e:
            self.logger.error(f"{method} {url} -> {raw_response.status_code}, {e}")
            raise

        self.logger.info(
            f"{method} {url} -> {response.status_code} ({len(response.content)} bytes)")
        return response

    def get(self, url: str, options: Optional[RequestOptions] = None) -> Response:
        """Make a GET request."""
        return self.request("GET", url, options)

    def post(self, url: str, options: Optional[RequestOptions] = None) -> Response:
        """Make a POST request with the JSON, form or multipart body in ``options``."""
        return self.request("POST", url, options)

    def put(self, url: str, options: Optional[RequestOptions] = None) -> Response:
        """Make a PUT request."""
        return self.request("PUT", url, options)

    def delete(self, url: str, options: Optional[RequestOptions] = None) -> Response:
        """Make a DELETE request."""
        return self.request("DELETE", url, options)

    def close(self) -> None:
        """Close the underlying transport."""
        close = getattr(self.transport, "close", None)
        if callable(close):
            close()
        self.logger.debug("HttpClient transport closed")

    def __enter__(self) -> 'HttpClient':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


class HttpRequest:
    """
    Builder that accumulates settings for a request, then sends it.

    Each setter replaces its field outright and returns the builder, so
    calls can be chained. The settings are snapshotted into a
    ``RequestOptions`` at every verb call and are not reset afterwards.
    A builder is not safe to share between threads; use one per request.

    Example:
        >>> response = (
        ...     HttpRequest()
        ...     .set_headers({'Accept': 'application/json'})
        ...     .set_params({'q': 'python'})
        ...     .get('https://api.example.com/search')
        ... )
    """

    def __init__(self, client: Optional[HttpClient] = None) -> None:
        self.client = client or HttpClient()
        self._user_agent: Optional[str] = None
        self._headers: Mapping[str, str] = {}
        self._params: Mapping[str, str] = {}
        self._cookies: Mapping[str, str] = {}
        self._json: Any = None
        self._data: Optional[Mapping[str, str]] = None
        self._files: Sequence[FileAttachment] = ()

    def set_user_agent(self, user_agent: str) -> 'HttpRequest':
        self._user_agent = user_agent
        return self

    def set_headers(self, headers: Mapping[str, str]) -> 'HttpRequest':
        self._headers = headers
        return self

    def set_params(self, params: Mapping[str, str]) -> 'HttpRequest':
        self._params = params
        return self

    def set_cookies(self, cookies: Mapping[str, str]) -> 'HttpRequest':
        self._cookies = cookies
        return self

    def set_json(self, json: Any) -> 'HttpRequest':
        self._json = json
        return self

    def set_data(self, data: Mapping[str, str]) -> 'HttpRequest':
        self._data = data
        return self

    def set_files(self, files: Sequence[FileAttachment]) -> 'HttpRequest':
        self._files = files
        return self

    @property
    def options(self) -> RequestOptions:
        """Snapshot of the current settings."""
        return RequestOptions(
            user_agent=self._user_agent,
            headers=dict(self._headers or {}),
            params=dict(self._params or {}),
            cookies=dict(self._cookies or {}),
            json=self._json,
            data=dict(self._data) if self._data is not None else None,
            files=tuple(self._files or ()),
        )

    def get(self, url: str) -> Response:
        return self.client.get(url, self.options)

    def post(self, url: str) -> Response:
        return self.client.post(url, self.options)

    def put(self, url: str) -> Response:
        return self.client.put(url, self.options)

    def delete(self, url: str) -> Response:
        return self.client.delete(url, self.options)
