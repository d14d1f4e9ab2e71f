import httpx

from trapfinder.web.exceptions import InvalidUrlError

_ALLOWED_SCHEMES = frozenset({"http", "https"})


def normalize_url(raw: str) -> str:
    """Trim user input and default to https when no scheme was typed.

    Raises:
        InvalidUrlError: if the result has a non-http(s) scheme or no host.
    """
    candidate = raw.strip()
    if not candidate:
        raise InvalidUrlError("URL is empty")
    lowered = candidate.lower()
    if not lowered.startswith(("http://", "https://")):
        if "://" in candidate:
            raise InvalidUrlError(f"Unsupported URL scheme: {candidate}")
        candidate = f"https://{candidate}"
    return validate_url(candidate)


def validate_url(url: str) -> str:
    """Accept only absolute http/https URLs that httpx can send as given."""
    if any(ch.isspace() for ch in url):
        raise InvalidUrlError(f"Malformed URL: {url}")
    try:
        parsed = httpx.URL(url)
    except httpx.InvalidURL as exc:
        raise InvalidUrlError(f"Malformed URL: {url} ({exc})") from exc
    if parsed.scheme not in _ALLOWED_SCHEMES:
        raise InvalidUrlError(f"Unsupported URL scheme: {parsed.scheme or '(none)'}")
    if not parsed.host:
        raise InvalidUrlError(f"Malformed URL: {url}")
    return url
