"""Multipart file attachments for POST requests."""

from dataclasses import dataclass
from typing import BinaryIO, List, Sequence, Tuple

MultipartField = Tuple[str, Tuple[str, BinaryIO]]


@dataclass(frozen=True)
class FileAttachment:
    """
    One file part of a multipart POST body.

    The caller owns ``content``: it is read while the request is sent and
    is never closed here.
    """

    field_name: str
    file_name: str
    content: BinaryIO


FormFiles = List[FileAttachment]


def to_multipart_fields(files: Sequence[FileAttachment]) -> List[MultipartField]:
    """
    Convert attachments into the ``files=`` list accepted by requests.

    A list of tuples is used instead of a dict so repeated field names
    survive and parts keep the order they were supplied in.
    """
    return [(f.field_name, (f.file_name, f.content)) for f in files]
