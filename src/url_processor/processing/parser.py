"""
URL decomposition and serialization.

Splits a raw URL into scheme, authority, path, query and fragment while
keeping every component exactly as written (hostname casing included), and
rejects strings that are not structurally valid URIs. The standard library
splitter is lenient, so the structural checks live here.

Serialization percent-encodes the path and fragment; existing escapes and
the query string are written back unchanged.
"""

import logging
import re
from dataclasses import dataclass
from dataclasses import replace as dataclass_replace
from typing import Optional
from urllib.parse import quote, urlsplit

from url_processor.errors import MalformedURLError

logger = logging.getLogger(__name__)

_CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f]")
_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")
_INVALID_HOST_CHARS = re.compile(r"[\s\\{}|^`]")
_PORT = re.compile(r"[0-9]*", re.ASCII)
# Escapes of ASCII bytes are not allowed in a host, except %25 (IPv6 zones)
_HOST_ASCII_ESCAPE = re.compile(r"%(?!25)[0-7][0-9A-Fa-f]")

_PATH_SAFE = "/:@!$&'()*+,;=-._~%[]"
_FRAGMENT_SAFE = _PATH_SAFE + "?"


@dataclass(frozen=True)
class URLParts:
    """
    Structural components of a URL.

    Attributes:
        scheme: Scheme, lowercased by parsing ('' for relative references)
        userinfo: Text before '@' in the authority, None if absent
        host: Hostname as written (IPv6 literals keep their brackets)
        port: Port digits, None if absent ('' for a bare trailing colon)
        path: Path as written
        query: Query string without the leading '?'
        fragment: Fragment without the leading '#'
        has_authority: Whether the URL carries a '//' authority section
        raw: Original raw URL
    """

    scheme: str
    userinfo: Optional[str]
    host: str
    port: Optional[str]
    path: str
    query: str
    fragment: str
    has_authority: bool = False
    raw: str = ""

    @property
    def netloc(self) -> str:
        """Authority section: [userinfo@]host[:port]."""
        netloc = self.host
        if self.userinfo is not None:
            netloc = f"{self.userinfo}@{netloc}"
        if self.port is not None:
            netloc = f"{netloc}:{self.port}"
        return netloc

    @property
    def is_opaque(self) -> bool:
        """True for non-hierarchical URLs such as 'mailto:user@example.com'."""
        return (
            bool(self.scheme)
            and not self.has_authority
            and not self.path.startswith("/")
        )

    def to_url(self) -> str:
        """Serialize components back into a URL string."""
        url = f"{self.scheme}:" if self.scheme else ""

        if self.is_opaque:
            url += self.path
        else:
            netloc = self.netloc
            path = quote(self.path, safe=_PATH_SAFE)
            if netloc or self.has_authority:
                url += f"//{netloc}"
                if path and not path.startswith("/"):
                    path = "/" + path
            url += path

        if self.query:
            url += f"?{self.query}"
        if self.fragment:
            url += f"#{quote(self.fragment, safe=_FRAGMENT_SAFE)}"
        return url

    def replace(self, **changes) -> "URLParts":
        """Return a copy with the given components replaced."""
        return dataclass_replace(self, **changes)


def parse_url(raw: str) -> URLParts:
    """
    Parse a URL into its components.

    Args:
        raw: URL string supplied by the caller

    Returns:
        URLParts with every component preserved as written

    Raises:
        MalformedURLError: If the string is not a structurally valid URI
    """
    if _CONTROL_CHARS.search(raw):
        raise MalformedURLError(raw, "invalid control character in URL")
    if raw[:1].isspace():
        raise MalformedURLError(raw, "leading whitespace in URL")

    try:
        parts = urlsplit(raw)
    except ValueError as e:
        raise MalformedURLError(raw, str(e)) from e

    if parts.scheme:
        rest = raw[len(parts.scheme) + 1 :]
    else:
        rest = raw
        _check_first_segment(raw)

    has_authority = rest.startswith("//")
    userinfo, host, port = _split_netloc(raw, parts.netloc)

    for component in (parts.netloc, parts.path, parts.fragment):
        if _BAD_ESCAPE.search(component):
            raise MalformedURLError(raw, f"invalid URL escape in {component!r}")

    return URLParts(
        scheme=parts.scheme,
        userinfo=userinfo,
        host=host,
        port=port,
        path=parts.path,
        query=parts.query,
        fragment=parts.fragment,
        has_authority=has_authority,
        raw=raw,
    )


def _check_first_segment(raw: str) -> None:
    """
    Reject scheme-less references whose first segment holds a colon.

    Such strings are ambiguous ('://host', '1http://host') and are refused
    rather than read as relative paths.
    """
    rest = raw.split("#", 1)[0].split("?", 1)[0]
    if rest.startswith("/"):
        return

    segment = rest.split("/", 1)[0]
    if segment.startswith(":"):
        raise MalformedURLError(raw, "missing protocol scheme")
    if ":" in segment:
        raise MalformedURLError(raw, "first path segment in URL cannot contain colon")


def _split_netloc(raw: str, netloc: str) -> tuple[Optional[str], str, Optional[str]]:
    """
    Split an authority into (userinfo, host, port) without altering case.

    Raises:
        MalformedURLError: If the host or port is invalid
    """
    userinfo: Optional[str] = None
    if "@" in netloc:
        userinfo, _, hostport = netloc.rpartition("@")
    else:
        hostport = netloc

    port: Optional[str] = None
    if hostport.startswith("["):
        end = hostport.find("]")
        if end == -1:
            raise MalformedURLError(raw, "missing ']' in host")
        host, tail = hostport[: end + 1], hostport[end + 1 :]
        if tail:
            if not tail.startswith(":"):
                raise MalformedURLError(raw, f"invalid port {tail!r} after host")
            port = tail[1:]
    elif ":" in hostport:
        host, _, port = hostport.rpartition(":")
    else:
        host = hostport

    if port is not None and not _PORT.fullmatch(port):
        raise MalformedURLError(raw, f"invalid port {port!r} after host")
    if _INVALID_HOST_CHARS.search(host):
        raise MalformedURLError(raw, f"invalid character in host name {host!r}")
    if _HOST_ASCII_ESCAPE.search(host):
        raise MalformedURLError(raw, f"invalid URL escape in host {host!r}")

    return userinfo, host, port
