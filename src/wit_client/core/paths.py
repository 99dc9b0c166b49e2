from typing import Any, Optional, Sequence, Tuple
from urllib.parse import quote, quote_plus, urlencode


def escape_segment(segment: str) -> str:
    """
    Percent-encodes a single path segment, including "/" and "$".
    Example: escape_segment('wit$temperature') -> 'wit%24temperature'
    """
    return quote(str(segment), safe="")


def escape_expression(expression: str) -> str:
    """
    Encodes a free-text expression for use as a path segment.
    Spaces must come out as %20; the service routes a literal "+" as-is.
    Example: escape_expression('City of Light') -> 'City%20of%20Light'
    """
    return quote_plus(str(expression)).replace("+", "%20")


def build_path(*segments: str) -> str:
    """
    Joins already-escaped segments into a resource path.
    Example: build_path('entities', 'wit%24datetime') -> '/entities/wit%24datetime'
    """
    return "/" + "/".join(s.strip("/") for s in segments)


def with_version(path: str, version: str) -> str:
    """
    Appends the API version marker, respecting an existing query string.
    Example: with_version('/message?q=hi', '20151127') -> '/message?q=hi&version=20151127'
    """
    separator = "&" if "?" in path else "?"
    return f"{path}{separator}version={version}"


def with_query(path: str, params: Sequence[Tuple[str, Optional[Any]]]) -> str:
    """
    Appends ordered query parameters, skipping None values.
    Example: with_query('/message', [('q', 'hi there'), ('n', None)]) -> '/message?q=hi+there'
    """
    filtered = [(k, v) for k, v in params if v is not None]
    if not filtered:
        return path
    separator = "&" if "?" in path else "?"
    return f"{path}{separator}{urlencode(filtered)}"


__all__ = [
    "escape_segment",
    "escape_expression",
    "build_path",
    "with_version",
    "with_query",
]
