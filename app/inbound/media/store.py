"""Local filesystem media store."""

from __future__ import annotations

import logging
import mimetypes
import uuid
from pathlib import Path

from ..config import settings
from ..config.settings import MEDIA_DIRECTIONS
from ..util.async_helpers import run_sync
from .classify import MIME_TO_EXTENSION
from .errors import MediaStoreError
from .models import SavedMedia

logger = logging.getLogger(__name__)

_FALLBACK_CONTENT_TYPE = "application/octet-stream"


def normalize_content_type(content_type: str | None) -> str:
    """Drop parameters and lower-case; absent types become octet-stream."""
    base = (content_type or "").split(";")[0].strip().lower()
    return base or _FALLBACK_CONTENT_TYPE


def extension_for(content_type: str) -> str:
    return (
        MIME_TO_EXTENSION.get(content_type)
        or mimetypes.guess_extension(content_type)
        or ".bin"
    )


class LocalMediaStore:
    """Persists media buffers as uniquely named files.

    Files land in ``<root>/<direction>/``; *root* defaults to
    ``cfg.media_dir`` resolved at save time.
    """

    def __init__(self, root: Path | None = None) -> None:
        self._root = root

    @property
    def root(self) -> Path:
        return self._root or settings.cfg.media_dir

    def _write(self, dest: Path, buffer: bytes) -> None:
        dest.parent.mkdir(parents=True, exist_ok=True)
        dest.write_bytes(buffer)

    async def save_media_buffer(
        self,
        buffer: bytes,
        content_type: str | None,
        direction: str,
        max_bytes: int,
    ) -> SavedMedia:
        if direction not in MEDIA_DIRECTIONS:
            raise MediaStoreError(f"Unknown media direction: {direction!r}")
        if len(buffer) > max_bytes:
            raise MediaStoreError(
                f"Media too large: {len(buffer)} bytes exceeds limit of {max_bytes} bytes"
            )

        normalized = normalize_content_type(content_type)
        dest = self.root / direction / f"{uuid.uuid4().hex}{extension_for(normalized)}"
        try:
            await run_sync(self._write, dest, buffer)
        except OSError as exc:
            raise MediaStoreError(f"Failed to write {dest}: {exc}") from exc

        logger.debug("Stored %d bytes at %s (%s)", len(buffer), dest, normalized)
        return SavedMedia(path=str(dest), content_type=normalized)
