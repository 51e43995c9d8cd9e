"""Content sniffing backed by libmagic."""

from __future__ import annotations

import logging

from ..util.async_helpers import run_sync

logger = logging.getLogger(__name__)


class MagicMimeDetector:
    """Detect a MIME type from raw bytes with ``python-magic``.

    The import is deferred so hosts that inject their own detector do not
    need libmagic installed.
    """

    def __init__(self, sample_bytes: int = 8192) -> None:
        self._sample_bytes = sample_bytes

    def _detect_sync(self, buffer: bytes) -> str | None:
        import magic

        mime = magic.from_buffer(buffer[: self._sample_bytes], mime=True)
        return mime or None

    async def detect_mime(self, buffer: bytes) -> str | None:
        if not buffer:
            return None
        mime = await run_sync(self._detect_sync, buffer)
        logger.debug("Sniffed %s from %d bytes", mime, len(buffer))
        return mime
