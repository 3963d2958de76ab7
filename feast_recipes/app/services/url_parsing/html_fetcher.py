"""HTML fetching and URL validation utilities."""

import ipaddress
import logging
from typing import Optional
from urllib.parse import urlparse

import httpx

from feast_recipes.app.core.config import get_settings
from feast_recipes.app.services.url_parsing.constants import (
    HTML_CONTENT_TYPES,
    HTTP_STATUS_MESSAGES,
)
from feast_recipes.app.services.url_parsing.errors import (
    ConnectionFailedError,
    FetchTimeoutError,
    HttpStatusError,
    InvalidContentTypeError,
    InvalidUrlError,
    InvalidUrlSchemeError,
    ResponseReadError,
    ResponseTooLargeError,
    TooManyRedirectsError,
)

logger = logging.getLogger(__name__)


def is_private_host(host: str) -> bool:
    """Check if a host is private/localhost."""
    hostname = host.split(":")[0]
    try:
        ip = ipaddress.ip_address(hostname)
        return ip.is_private or ip.is_loopback
    except ValueError:
        return hostname.lower() in {"localhost"}


def validate_url(url: str) -> str:
    """Reject anything that is not an absolute http(s) URL before touching the network."""
    try:
        parsed = urlparse(url)
    except ValueError as exc:
        raise InvalidUrlError(str(exc)) from exc

    if not parsed.scheme:
        raise InvalidUrlError("relative URL without a base")
    if parsed.scheme not in {"http", "https"}:
        raise InvalidUrlSchemeError(parsed.scheme)
    if not parsed.netloc or not parsed.hostname:
        raise InvalidUrlError("empty host")

    if get_settings().fetch_block_private_hosts and is_private_host(parsed.hostname):
        raise InvalidUrlError("URL points to a private or disallowed host")
    return url


def is_html_content_type(content_type: str) -> bool:
    """Check whether a Content-Type header names an HTML document."""
    lowered = content_type.lower()
    return any(allowed in lowered for allowed in HTML_CONTENT_TYPES)


def status_to_message(status_code: int) -> str:
    """Return a short human-readable reason for an HTTP status code."""
    if status_code in HTTP_STATUS_MESSAGES:
        return HTTP_STATUS_MESSAGES[status_code]
    try:
        return httpx.codes(status_code).phrase or "Unknown error"
    except ValueError:
        return "Unknown error"


def _declared_length(response: httpx.Response) -> Optional[int]:
    raw = response.headers.get("content-length")
    if raw is None:
        return None
    try:
        return int(raw)
    except ValueError:
        return None


def _decode_body(body: bytes, encoding: Optional[str]) -> str:
    try:
        return body.decode(encoding or "utf-8")
    except (UnicodeDecodeError, LookupError):
        logger.debug("Falling back to utf-8 for undecodable %s body", encoding)
        return body.decode("utf-8", errors="replace")


async def fetch_html(url: str) -> str:
    """Fetch a page's HTML under fixed timeout, redirect and size limits.

    Raises a ``FetchError`` subclass for every failure; partial content is
    never returned.
    """
    validate_url(url)

    settings = get_settings()
    max_bytes = settings.fetch_max_response_bytes
    headers = {
        "User-Agent": settings.fetch_user_agent,
        "Accept": "text/html,application/xhtml+xml;q=0.9,*/*;q=0.8",
    }
    timeout = httpx.Timeout(settings.fetch_timeout_seconds)

    try:
        async with httpx.AsyncClient(
            timeout=timeout,
            follow_redirects=True,
            max_redirects=settings.fetch_max_redirects,
            headers=headers,
        ) as client:
            async with client.stream("GET", url) as response:
                if not response.is_success:
                    raise HttpStatusError(
                        response.status_code, status_to_message(response.status_code)
                    )

                content_type = response.headers.get("content-type")
                if content_type is not None and not is_html_content_type(content_type):
                    raise InvalidContentTypeError(content_type)

                declared = _declared_length(response)
                if declared is not None and declared > max_bytes:
                    raise ResponseTooLargeError(max_bytes)

                body = bytearray()
                try:
                    async for chunk in response.aiter_bytes():
                        body.extend(chunk)
                        if len(body) > max_bytes:
                            raise ResponseTooLargeError(max_bytes)
                except (httpx.ReadError, httpx.DecodingError, httpx.StreamError) as exc:
                    raise ResponseReadError(str(exc)) from exc

                if len(body) > max_bytes:
                    raise ResponseTooLargeError(max_bytes)
                text = _decode_body(bytes(body), response.charset_encoding)
    except httpx.TimeoutException as exc:
        raise FetchTimeoutError(settings.fetch_timeout_seconds) from exc
    except httpx.TooManyRedirects as exc:
        raise TooManyRedirectsError(settings.fetch_max_redirects) from exc
    except httpx.InvalidURL as exc:
        raise InvalidUrlError(str(exc)) from exc
    except httpx.UnsupportedProtocol as exc:
        # A redirect pointed somewhere other than http(s)
        raise InvalidUrlSchemeError() from exc
    except httpx.RequestError as exc:
        raise ConnectionFailedError(str(exc)) from exc

    logger.info("Fetched %s (%d bytes)", url, len(text))
    return text
