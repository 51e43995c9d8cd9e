"""Bounded single-shot HTTP download of remote media."""

from __future__ import annotations

import logging

import aiohttp
from aiohttp import hdrs

from ..config import settings
from .errors import MediaDownloadError, SizeExceeded, TransportError
from .models import DownloadResult

logger = logging.getLogger(__name__)

_CHUNK_SIZE = 64 * 1024


def _declared_length(raw: str | None) -> int | None:
    if not raw:
        return None
    try:
        size = int(raw.strip())
    except ValueError:
        return None
    return size if size >= 0 else None


async def _read_capped(resp: aiohttp.ClientResponse, max_bytes: int) -> bytes:
    chunks: list[bytes] = []
    received = 0
    async for chunk in resp.content.iter_chunked(_CHUNK_SIZE):
        received += len(chunk)
        if received > max_bytes:
            raise SizeExceeded(received, max_bytes)
        chunks.append(chunk)
    return b"".join(chunks)


async def _download(
    session: aiohttp.ClientSession,
    url: str,
    max_bytes: int,
    timeout: float | None,
    user_agent: str,
) -> DownloadResult:
    kwargs: dict = {"headers": {hdrs.USER_AGENT: user_agent}}
    if timeout:
        kwargs["timeout"] = aiohttp.ClientTimeout(total=timeout)

    try:
        async with session.get(url, **kwargs) as resp:
            if not 200 <= resp.status < 300:
                raise TransportError(resp.status, resp.reason or "")

            declared = _declared_length(resp.headers.get(hdrs.CONTENT_LENGTH))
            if declared is not None and declared > max_bytes:
                raise SizeExceeded(declared, max_bytes)

            buffer = await _read_capped(resp, max_bytes)
            content_type = resp.headers.get(hdrs.CONTENT_TYPE) or None
    except (aiohttp.ClientError, TimeoutError) as exc:
        raise TransportError(None, str(exc) or type(exc).__name__) from exc

    logger.debug("Downloaded %d bytes from %s (%s)", len(buffer), url, content_type)
    return DownloadResult(buffer=buffer, content_type=content_type)


async def download_media_from_url(
    url: str,
    max_bytes: int,
    *,
    session: aiohttp.ClientSession | None = None,
    timeout: float | None = None,
    user_agent: str | None = None,
) -> DownloadResult:
    """Fetch *url* once, refusing bodies larger than *max_bytes*.

    A ``Content-Length`` above the budget is rejected before any of the
    body is read.  The body itself is counted as it arrives, so a missing
    or understated header cannot sneak an oversized payload through.

    No retries are made.  *timeout* bounds the whole request in seconds;
    without it the call waits as long as the host keeps the connection
    open.  Raises :class:`TransportError` or :class:`SizeExceeded`.
    """
    ua = user_agent or settings.cfg.media_user_agent
    if session is not None:
        return await _download(session, url, max_bytes, timeout, ua)
    async with aiohttp.ClientSession(timeout=aiohttp.ClientTimeout(total=None)) as own:
        return await _download(own, url, max_bytes, timeout, ua)


async def fetch_media(
    url: str,
    max_bytes: int,
    *,
    session: aiohttp.ClientSession | None = None,
    timeout: float | None = None,
    user_agent: str | None = None,
) -> DownloadResult | MediaDownloadError:
    """Like :func:`download_media_from_url` but returns the failure instead of raising it."""
    try:
        return await download_media_from_url(
            url, max_bytes, session=session, timeout=timeout, user_agent=user_agent,
        )
    except MediaDownloadError as exc:
        return exc
