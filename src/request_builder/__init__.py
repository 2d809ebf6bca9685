"""
request_builder - A small typed façade over requests.

This package provides:
- A builder for GET/POST/PUT/DELETE requests with user agent, headers,
  cookies, query parameters, JSON bodies, form data and multipart files
- An immutable RequestOptions value for callers who prefer one object
  per call over setters
- A normalized Response with multi-value headers and a fully read body

Main Classes:
    HttpRequest: Setter-style request builder
    HttpClient: Verb methods over a pluggable transport
    RequestOptions: Immutable per-call settings
    Response: Normalized response
    FileAttachment: One multipart file part

Exception Classes:
    RequestBuilderError: Base exception
    InvalidArgumentError: Raised for invalid arguments such as an empty URL
    BodyReadError: Raised when a response body cannot be read

Example:
    Builder usage:

    >>> from request_builder import HttpRequest
    >>> request = HttpRequest()
    >>> request.set_params({'page': '2'})
    >>> response = request.get('https://api.example.com/items')
    >>> print(response.status_code, response.status)

    File upload:

    >>> from request_builder import FileAttachment
    >>> with open('report.pdf', 'rb') as fh:
    ...     response = (
    ...         HttpRequest()
    ...         .set_data({'title': 'Q3'})
    ...         .set_files([FileAttachment('upload', 'report.pdf', fh)])
    ...         .post('https://api.example.com/reports')
    ...     )
"""

from .request_builder import HttpClient, HttpRequest, configure_logging
from .options import RequestOptions
from .response import HeaderCollection, Response
from .form import FileAttachment, FormFiles
from .transport import RequestsTransport, Transport
from .user_agent import (
    DEFAULT_USER_AGENT,
    get_default_user_agent,
    set_default_user_agent,
    reset_default_user_agent,
)
from .exceptions import (
    RequestBuilderError,
    InvalidArgumentError,
    BodyReadError,
)

__version__ = "0.1.0"

__all__ = [
    "HttpRequest",
    "HttpClient",
    "RequestOptions",
    "Response",
    "HeaderCollection",
    "FileAttachment",
    "FormFiles",
    "Transport",
    "RequestsTransport",
    "configure_logging",
    "DEFAULT_USER_AGENT",
    "get_default_user_agent",
    "set_default_user_agent",
    "reset_default_user_agent",
    "RequestBuilderError",
    "InvalidArgumentError",
    "BodyReadError",
]
