"""Host capabilities the resolver depends on."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from .models import SavedMedia


class MimeDetector(Protocol):
    async def detect_mime(self, buffer: bytes) -> str | None: ...


class MediaPersister(Protocol):
    async def save_media_buffer(
        self,
        buffer: bytes,
        content_type: str | None,
        direction: str,
        max_bytes: int,
    ) -> SavedMedia: ...


@dataclass
class MediaCapabilities:
    mime_detector: MimeDetector
    persister: MediaPersister


def default_capabilities() -> MediaCapabilities:
    """Local defaults: libmagic sniffing and on-disk storage under ``cfg.media_dir``."""
    from .sniff import MagicMimeDetector
    from .store import LocalMediaStore

    return MediaCapabilities(mime_detector=MagicMimeDetector(), persister=LocalMediaStore())
