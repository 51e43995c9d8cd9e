"""Resolve inbound message attachments into stored media."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

import aiohttp

from .capabilities import MediaCapabilities, default_capabilities
from .classify import MEDIA_MESSAGE_TYPES, placeholder_for
from .download import fetch_media
from .errors import MediaDownloadError
from .models import InboundMessage, MediaInfo

logger = logging.getLogger(__name__)

LogSink = Callable[[str], None]

INBOUND_DIRECTION = "inbound"


def _emit(log: LogSink | None, line: str) -> None:
    if log is None:
        return
    try:
        log(f"generic: {line}")
    except Exception:
        logger.debug("Media log sink raised", exc_info=True)


async def resolve_media_list(
    message: InboundMessage,
    max_bytes: int,
    capabilities: MediaCapabilities | None = None,
    *,
    log: LogSink | None = None,
    timeout: float | None = None,
    session: aiohttp.ClientSession | None = None,
) -> list[MediaInfo]:
    """Download, type and store the attachment referenced by *message*.

    Returns a single-element list on success.  Messages without a media
    URL, or whose type is not one of ``image``/``voice``/``audio``/``file``,
    yield ``[]`` without touching the network.  Every failure after that
    point (HTTP status, size budget, sniffing, storage) is reported to
    *log* and turned into ``[]``; nothing is raised to the caller.

    The content type handed to the persister is the first available of:
    the response ``Content-Type``, ``message.mime_type``, the detector's
    guess.  The persister's returned type is the one recorded.
    """
    if not message.media_url:
        return []
    if message.message_type not in MEDIA_MESSAGE_TYPES:
        return []
    if max_bytes <= 0:
        _emit(log, f"refusing media download with byte budget {max_bytes}")
        return []

    url = message.media_url
    try:
        _emit(log, f"downloading media from {url}")
        outcome = await fetch_media(url, max_bytes, session=session, timeout=timeout)
        if isinstance(outcome, MediaDownloadError):
            _emit(log, f"failed to download media: {outcome}")
            logger.warning("Media download from %s failed: %s", url, outcome)
            return []

        caps = capabilities or default_capabilities()
        content_type = outcome.content_type or message.mime_type
        if not content_type:
            content_type = await caps.mime_detector.detect_mime(outcome.buffer)

        _emit(
            log,
            f"detected content type: {content_type}, size: {len(outcome.buffer)} bytes",
        )

        saved = await caps.persister.save_media_buffer(
            outcome.buffer, content_type, INBOUND_DIRECTION, max_bytes,
        )
        _emit(log, f"saved media to {saved.path}")
    except Exception as exc:
        _emit(log, f"failed to download media: {exc!s}")
        logger.warning("Failed to resolve media from %s", url, exc_info=True)
        return []

    return [
        MediaInfo(
            path=saved.path,
            content_type=saved.content_type,
            placeholder=placeholder_for(message.message_type),
        )
    ]


def build_media_body(text: str, media_list: Sequence[MediaInfo]) -> str:
    """Return *text*, or the media placeholders when the message has no text."""
    if text.strip():
        return text
    return " ".join(m.placeholder for m in media_list)
