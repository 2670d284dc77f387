"""Canonical forms for user-submitted profile values."""

import re
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

_SCHEME_RE = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.-]*://")
_TRACKING_PARAM_RE = re.compile(r"^utm_\w+", re.IGNORECASE)
_DEFAULT_PORTS = {80, 443}


def normalize_url(url: str) -> str:
    """Normalize a URL to a canonical HTTPS form.

    Bare domains get a scheme, ``http`` becomes ``https``, the host is
    lower-cased and loses a leading ``www.``, credentials and default ports
    are dropped, duplicate and trailing slashes are removed, ``utm_*``
    parameters are stripped and the rest sorted. Idempotent:
    ``normalize_url(normalize_url(u)) == normalize_url(u)``.

    >>> normalize_url("example.com")
    'https://example.com'
    >>> normalize_url("HTTP://www.Example.com:80/about/?b=2&a=1&utm_source=x")
    'https://example.com/about?a=1&b=2'
    """
    url = url.strip()
    if url.startswith("//"):
        url = f"https:{url}"
    elif not _SCHEME_RE.match(url):
        url = f"https://{url}"

    parts = urlsplit(url)
    scheme = parts.scheme.lower()
    if scheme == "http":
        scheme = "https"

    host = (parts.hostname or "").rstrip(".")
    if ":" in host:
        host = f"[{host}]"
    elif host.startswith("www.") and host.count(".") >= 2:
        host = host[len("www."):]

    netloc = host
    try:
        port = parts.port
    except ValueError:
        port = None
    if port is not None and port not in _DEFAULT_PORTS:
        netloc = f"{host}:{port}"

    path = re.sub(r"/{2,}", "/", parts.path).rstrip("/")

    params = [(k, v) for k, v in parse_qsl(parts.query, keep_blank_values=True)
              if not _TRACKING_PARAM_RE.match(k)]
    query = urlencode(sorted(params))

    return urlunsplit((scheme, netloc, path, query, parts.fragment))


def normalize_skills(skills: str | list[str]) -> list[str]:
    """Split a comma-delimited string (or clean a list) into trimmed skills.

    >>> normalize_skills(" Python, SQL ,,Go")
    ['Python', 'SQL', 'Go']
    """
    items = skills.split(",") if isinstance(skills, str) else skills
    return [item.strip() for item in items if item and item.strip()]
