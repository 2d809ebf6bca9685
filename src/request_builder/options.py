"""
Immutable per-call request configuration.

A ``RequestOptions`` value is built once per call (by ``HttpRequest`` or by
the caller directly) and turned into the keyword arguments the transport
passes to ``requests``.
"""

import dataclasses
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Sequence

from .form import FileAttachment, to_multipart_fields
from .user_agent import get_default_user_agent

USER_AGENT_HEADER = "User-Agent"


@dataclass(frozen=True)
class RequestOptions:
    """
    Optional settings applied to a single request.

    Attributes:
        user_agent: User-Agent header; falls back to the process default
        headers: Extra request headers
        params: Query string parameters (GET, PUT and DELETE only)
        cookies: Cookies sent with the request
        json: JSON body for POST; takes precedence over ``data``
        data: Form fields for POST
        files: Multipart file attachments for POST
    """

    user_agent: Optional[str] = None
    headers: Mapping[str, str] = field(default_factory=dict)
    params: Mapping[str, str] = field(default_factory=dict)
    cookies: Mapping[str, str] = field(default_factory=dict)
    json: Any = None
    data: Optional[Mapping[str, str]] = None
    files: Sequence[FileAttachment] = field(default_factory=tuple)

    def replace(self, **changes: Any) -> "RequestOptions":
        """Return a copy with the given fields replaced."""
        return dataclasses.replace(self, **changes)

    def resolved_user_agent(self) -> str:
        if self.user_agent:
            return self.user_agent
        return get_default_user_agent()

    def build_headers(self) -> Dict[str, str]:
        """Copy the headers and inject the resolved User-Agent."""
        headers = {
            name: value
            for name, value in (self.headers or {}).items()
            if name.lower() != USER_AGENT_HEADER.lower()
        }
        headers[USER_AGENT_HEADER] = self.resolved_user_agent()
        return headers

    def to_request_kwargs(self, method: str) -> Dict[str, Any]:
        """
        Assemble keyword arguments for ``requests.Session.request``.

        Empty cookie and parameter mappings are left out rather than sent as
        empty sets. Bodies are only attached to POST. A set ``json`` wins:
        ``data`` and ``files`` are then left out so the body stays JSON.

        Args:
            method: HTTP method the options are applied to

        Returns:
            Dictionary of request keyword arguments
        """
        method = method.upper()
        request_kwargs: Dict[str, Any] = {"headers": self.build_headers()}

        if self.cookies:
            request_kwargs["cookies"] = dict(self.cookies)

        if method == "POST":
            if self.json is not None:
                request_kwargs["json"] = self.json
            else:
                if self.data is not None:
                    request_kwargs["data"] = dict(self.data)
                if self.files:
                    request_kwargs["files"] = to_multipart_fields(self.files)
        elif self.params:
            request_kwargs["params"] = dict(self.params)

        return request_kwargs
