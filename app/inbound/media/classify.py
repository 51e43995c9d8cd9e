"""Media type classification and placeholder tokens."""

from __future__ import annotations

from typing import Literal

MediaKind = Literal["image", "voice", "audio", "file"]

# Message types that carry a downloadable attachment.
MEDIA_MESSAGE_TYPES: frozenset[str] = frozenset({"image", "voice", "audio", "file"})

_PLACEHOLDERS: dict[str, str] = {
    "image": "<media:image>",
    "voice": "<media:voice>",
    "audio": "<media:audio>",
    "file": "<media:document>",
}

DEFAULT_PLACEHOLDER = "<media:file>"

# Preferred file extensions; ``mimetypes`` picks odd ones for some of these.
MIME_TO_EXTENSION: dict[str, str] = {
    "image/jpeg": ".jpg",
    "image/png": ".png",
    "image/gif": ".gif",
    "image/webp": ".webp",
    "image/heic": ".heic",
    "audio/mpeg": ".mp3",
    "audio/ogg": ".ogg",
    "audio/opus": ".opus",
    "audio/wav": ".wav",
    "audio/x-wav": ".wav",
    "audio/mp4": ".m4a",
    "audio/aac": ".aac",
    "audio/amr": ".amr",
    "video/mp4": ".mp4",
    "application/pdf": ".pdf",
    "text/plain": ".txt",
    "application/zip": ".zip",
}


def classify(mime_type: str | None) -> MediaKind:
    """Map a MIME type to a coarse media kind.

    Audio is never reported as ``voice``: whether a clip is a voice note
    is only known from the message type the channel supplies.
    """
    mime = (mime_type or "").strip().lower()
    if mime.startswith("image/"):
        return "image"
    if mime.startswith("audio/"):
        return "audio"
    return "file"


def placeholder_for(message_type: str) -> str:
    return _PLACEHOLDERS.get(message_type, DEFAULT_PLACEHOLDER)
