"""
Map Launcher Query Utilities
Percent-encoding and ordered query string assembly
"""

import re
import string
from typing import Optional
from urllib.parse import quote, urlsplit

from maplauncher.exceptions import MalformedURL


# Characters left as-is inside a query value; "&", "=" and "#" are always escaped.
QUERY_SAFE = "!$'()*+,;:@/?"

# Same as above, minus the characters that delimit path segments.
PATH_SEGMENT_SAFE = "!$'()*+;:@"

_URI_CHARACTERS = frozenset(
    string.ascii_letters + string.digits + "-._~:/?#[]@!$&'()*+,;=%"
)
_BROKEN_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def _percent_encode(value: str, safe: str) -> str:
    try:
        return quote(value, safe=safe)
    except UnicodeEncodeError as e:
        raise MalformedURL(f"Cannot percent-encode {value!r}: {e.reason}") from e


def encode_query_value(value: str) -> str:
    """
    Percent-encode a name or other free text for use in a query.

    Raises:
        MalformedURL: If the text is not valid Unicode (e.g. a lone surrogate)
    """
    return _percent_encode(value, QUERY_SAFE)


def encode_address(address: str) -> str:
    """Spaces become "+", then the result is query-encoded."""
    return encode_query_value(address.replace(" ", "+"))


def encode_path_segment(value: str) -> str:
    """Percent-encode free text embedded in a URL path segment."""
    return _percent_encode(value, PATH_SEGMENT_SAFE)


def is_well_formed_uri(uri: str) -> bool:
    """
    Check that a string parses as an absolute URI.

    Every character must be allowed by RFC 3986, every "%" must start a
    valid escape, and a scheme must be present.
    """
    if not uri or any(char not in _URI_CHARACTERS for char in uri):
        return False
    if _BROKEN_ESCAPE.search(uri):
        return False
    try:
        parts = urlsplit(uri)
    except ValueError:
        return False
    return bool(parts.scheme)


class QueryBuilder:
    """
    Ordered list of key/value pairs joined with "&".

    Values are expected to be encoded already. Empty or missing values are
    dropped unless the pair is added with keep_empty=True.
    """

    def __init__(self):
        self._pairs: list[tuple[str, str]] = []

    def add(
        self,
        key: Optional[str],
        value: Optional[str],
        *,
        when: bool = True,
        keep_empty: bool = False,
    ) -> "QueryBuilder":
        if not key or not when:
            return self
        if value is None or value == "":
            if not keep_empty:
                return self
            value = ""
        self._pairs.append((key, value))
        return self

    def build(self) -> str:
        return "&".join(f"{key}={value}" for key, value in self._pairs)

    def __bool__(self) -> bool:
        return bool(self._pairs)

    def __str__(self) -> str:
        return self.build()
