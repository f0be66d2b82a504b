"""Source classification and relative reference resolution."""

import os
from enum import Enum
from pathlib import Path
from urllib.parse import quote, urljoin, urlparse
from urllib.request import url2pathname

FILE_URL_PREFIX = "file://"

# Characters kept as-is when percent-encoding a relative URL reference
_URL_SAFE = "/:?#[]@!$&'()*+,;=%~"


class SourceKind(str, Enum):
    """The three kinds of place a registry document can come from."""

    HTTP = "http"
    FILE_URL = "file_url"
    PATH = "path"


def is_http(value: str) -> bool:
    return value.startswith(("http://", "https://"))


def classify_source(value: str) -> SourceKind:
    """Classify a source string into exactly one SourceKind."""
    if is_http(value):
        return SourceKind.HTTP
    if value.startswith(FILE_URL_PREFIX):
        return SourceKind.FILE_URL
    return SourceKind.PATH


def source_to_path(source: str) -> Path:
    """
    Convert a local source (file:// URL or plain path) to a filesystem path.

    Raises:
        ValueError: If the source is an HTTP(S) URL
    """
    match classify_source(source):
        case SourceKind.FILE_URL:
            return Path(url2pathname(urlparse(source).path))
        case SourceKind.PATH:
            return Path(source)
        case _:
            raise ValueError(f"Not a local source: {source}")


def resolve_reference(base: str, ref: str) -> str:
    """
    Resolve a reference found inside a document loaded from ``base``.

    Absolute references (HTTP(S) or file:// URLs) win. Otherwise the kind of
    ``base`` decides: URL-relative resolution for HTTP bases, filesystem
    join against the base's parent directory for file:// URLs and paths.

    Args:
        base: Source the referring document was loaded from
        ref: Reference string found in that document

    Returns:
        The absolute source to fetch next
    """
    if classify_source(ref) in (SourceKind.HTTP, SourceKind.FILE_URL):
        return ref

    match classify_source(base):
        case SourceKind.HTTP:
            return urljoin(base, quote(ref, safe=_URL_SAFE))
        case SourceKind.FILE_URL | SourceKind.PATH:
            parent = os.path.dirname(source_to_path(base))
            return os.path.abspath(os.path.join(parent, ref))
