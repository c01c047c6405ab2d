"""
Map Launcher Platform Bridges
Host capabilities the launcher delegates to: reachability, opening, identity
"""

import logging
import webbrowser
from typing import Iterable, Optional, Protocol

logger = logging.getLogger(__name__)


class PlatformBridge(Protocol):
    """Capabilities supplied by the host platform."""

    def can_open_scheme(self, uri_prefix: str) -> bool:
        """Whether a URI with this scheme prefix can be opened."""
        ...

    def open_uri(self, uri: str) -> bool:
        """Hand a URI to the OS. True means it was accepted, not that navigation finished."""
        ...

    def host_application_identifier(self) -> str:
        ...


def _scheme_name(value: str) -> str:
    """Scheme name from "waze://", "waze:" or "WAZE"."""
    return value.strip().lower().split(":", 1)[0]


class StaticPlatform:
    """
    Platform answering reachability checks from a fixed set of scheme prefixes.
    Schemes may be given bare ("waze") or as prefixes ("waze://").

    Used when the device reports what it can open (e.g. over HTTP).
    A reachable_schemes of None means every scheme is reachable.
    Opened URIs are recorded rather than launched.
    """

    def __init__(
        self,
        reachable_schemes: Optional[Iterable[str]] = None,
        host_identifier: str = "",
    ):
        self.reachable_schemes = (
            None if reachable_schemes is None else {_scheme_name(s) for s in reachable_schemes}
        )
        self.host_identifier = host_identifier
        self.opened: list[str] = []

    def can_open_scheme(self, uri_prefix: str) -> bool:
        if self.reachable_schemes is None:
            return True
        return _scheme_name(uri_prefix) in self.reachable_schemes

    def open_uri(self, uri: str) -> bool:
        self.opened.append(uri)
        return True

    def host_application_identifier(self) -> str:
        return self.host_identifier


class WebBrowserPlatform:
    """Desktop platform: only http(s) links can be opened, via the default browser."""

    WEB_PREFIXES = ("http://", "https://")

    def __init__(self, host_identifier: str = ""):
        self.host_identifier = host_identifier

    def can_open_scheme(self, uri_prefix: str) -> bool:
        return uri_prefix.lower().startswith(self.WEB_PREFIXES)

    def open_uri(self, uri: str) -> bool:
        logger.info(f"Opening {uri} in web browser")
        return webbrowser.open(uri)

    def host_application_identifier(self) -> str:
        return self.host_identifier
