"""
Normalized response returned by every verb call.

The adapter copies status, reason and headers off a ``requests.Response``,
reads the whole body into memory and closes the underlying stream.
"""

import json as json_lib
from dataclasses import dataclass, field
from typing import Any, Iterable, Iterator, List, Mapping, Optional, Tuple

import requests
from requests.exceptions import RequestException
from requests.structures import CaseInsensitiveDict
from requests.utils import _parse_content_type_header

from .exceptions import BodyReadError


class HeaderCollection(Mapping[str, List[str]]):
    """
    Case-insensitive, multi-value view of response headers.

    Each header name maps to the list of its values in the order they were
    received, so repeated fields such as ``Set-Cookie`` are never folded
    into one string. Iteration yields names with their original casing.
    """

    def __init__(self, pairs: Optional[Iterable[Tuple[str, str]]] = None) -> None:
        self._store: CaseInsensitiveDict = CaseInsensitiveDict()
        for name, value in pairs or ():
            self._add(name, value)

    def _add(self, name: str, value: str) -> None:
        if name in self._store:
            self._store[name].append(value)
        else:
            self._store[name] = [value]

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[str, str]]) -> "HeaderCollection":
        return cls(pairs)

    @classmethod
    def from_response(cls, response: requests.Response) -> "HeaderCollection":
        """
        Build the collection from a requests response.

        ``response.headers`` joins repeated fields with commas, so the raw
        urllib3 header lines are preferred when they are available.
        """
        raw_headers = getattr(response.raw, "headers", None)
        if raw_headers is not None and hasattr(raw_headers, "getlist"):
            return cls(
                (name, value)
                for name in raw_headers.keys()
                for value in raw_headers.getlist(name)
            )
        return cls(response.headers.items())

    def getlist(self, name: str) -> List[str]:
        """Return every value of ``name``, or an empty list."""
        return list(self._store.get(name, []))

    def get_first(self, name: str, default: Optional[str] = None) -> Optional[str]:
        values = self._store.get(name)
        return values[0] if values else default

    def __getitem__(self, name: str) -> List[str]:
        return list(self._store[name])

    def __iter__(self) -> Iterator[str]:
        return iter(self._store)

    def __len__(self) -> int:
        return len(self._store)

    def __repr__(self) -> str:
        return f"HeaderCollection({dict(self._store.items())!r})"


@dataclass(frozen=True)
class Response:
    """
    Result of a verb call.

    Attributes:
        status_code: HTTP status code
        status: Reason phrase, e.g. "Not Found"
        headers: All response headers, multi-valued
        content: The fully read response body
        url: Final URL of the response
    """

    status_code: int
    status: str
    headers: HeaderCollection = field(default_factory=HeaderCollection, hash=False)
    content: bytes = b""
    url: str = ""

    @classmethod
    def from_requests(cls, response: requests.Response) -> "Response":
        """
        Materialize a requests response and release its body stream.

        The stream is closed whether or not the read succeeds.

        Raises:
            BodyReadError: If the body could not be read
        """
        try:
            content = response.content
        except (RequestException, OSError) as e:
            raise BodyReadError(response.url or "", e) from e
        finally:
            response.close()

        return cls(
            status_code=response.status_code,
            status=response.reason or "",
            headers=HeaderCollection.from_response(response),
            content=content or b"",
            url=response.url or "",
        )

    @property
    def ok(self) -> bool:
        return self.status_code < 400

    @property
    def text(self) -> str:
        """Body decoded with the Content-Type charset (UTF-8 if absent)."""
        content_type = self.headers.get_first("Content-Type")
        encoding = None
        if content_type:
            _, params = _parse_content_type_header(content_type)
            charset = params.get("charset")
            # a bare "charset" parameter parses as True
            if isinstance(charset, str) and charset:
                encoding = charset
        try:
            return self.content.decode(encoding or "utf-8", errors="replace")
        except LookupError:
            # unknown charset label
            return self.content.decode("utf-8", errors="replace")

    def json(self, **kwargs: Any) -> Any:
        """Decode the body as JSON."""
        return json_lib.loads(self.content, **kwargs)
