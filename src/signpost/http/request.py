"""Immutable request context.

The router only needs a handful of request facts. They are derived once
from the transport (a WSGI/CGI ``environ`` here) and frozen for the rest
of the request.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from signpost.routing.compiler import normalize_path

_DEFAULT_PORTS = {"http": "80", "https": "443"}


@dataclass(frozen=True, slots=True)
class RequestContext:
    """What the dispatcher needs to know about one request.

    Build one directly in tests::

        RequestContext("GET", "/news/42")

    or from a WSGI environ in a front controller::

        RequestContext.from_environ(environ)
    """

    method: str
    path_info: str
    query_string: str = ""
    script_name: str = ""
    server_name: str = ""
    server_port: str = ""
    protocol: str = ""
    protocol_version: str = ""

    @classmethod
    def from_environ(cls, environ: Mapping[str, Any]) -> RequestContext:
        """Derive a context from a WSGI/CGI environ mapping.

        The path has trailing slashes trimmed. ``protocol`` is ``"http"`` or
        ``"https"`` (HTTPS detected from ``HTTPS=on`` or ``wsgi.url_scheme``),
        and empty when there is no ``SERVER_PROTOCOL``, as under a CLI.
        """
        protocol, version = _parse_protocol(environ)
        return cls(
            method=str(environ.get("REQUEST_METHOD", "GET")).upper(),
            path_info=str(environ.get("PATH_INFO", "")).rstrip("/"),
            query_string=str(environ.get("QUERY_STRING", "")),
            script_name=str(environ.get("SCRIPT_NAME", "")),
            server_name=_server_name(environ),
            server_port=str(environ.get("SERVER_PORT", "")),
            protocol=protocol,
            protocol_version=version,
        )

    # -- Computed properties --

    @property
    def normalized_path(self) -> str:
        """The path as routes see it (``"/"`` for the root)."""
        return normalize_path(self.path_info)

    @property
    def is_https(self) -> bool:
        return self.protocol == "https"

    @property
    def is_http(self) -> bool:
        return self.protocol == "http"

    @property
    def request_uri(self) -> str:
        """Script name + path, plus ``?query`` when there is one."""
        uri = self.script_name + self.path_info
        if self.query_string:
            uri += "?" + self.query_string
        return uri

    @property
    def request_url(self) -> str:
        """Absolute URL; the port is omitted when it is the protocol default."""
        url = self.server_name
        if self.protocol:
            url = f"{self.protocol}://{url}"
        default_port = _DEFAULT_PORTS.get(self.protocol)
        if default_port is not None and self.server_port and self.server_port != default_port:
            url += ":" + self.server_port
        return url + self.request_uri


def _parse_protocol(environ: Mapping[str, Any]) -> tuple[str, str]:
    raw = environ.get("SERVER_PROTOCOL")
    if not raw:
        return "", ""
    name, _, version = str(raw).partition("/")
    protocol = name.lower()
    https = str(environ.get("HTTPS", "")).lower() == "on"
    if https or environ.get("wsgi.url_scheme") == "https":
        protocol = "https"
    return protocol, version


def _server_name(environ: Mapping[str, Any]) -> str:
    """Host from ``HTTP_HOST`` without its port, else ``SERVER_NAME``."""
    host = environ.get("HTTP_HOST")
    if not host:
        return str(environ.get("SERVER_NAME", ""))
    if host.startswith("["):
        # IPv6 literal, e.g. "[::1]:8080"
        return host[: host.find("]") + 1] if "]" in host else host
    return host.partition(":")[0]
