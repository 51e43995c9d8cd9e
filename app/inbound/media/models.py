"""Data models for inbound media resolution."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypedDict


@dataclass(frozen=True)
class InboundMessage:
    """The slice of a channel message that references a media attachment."""

    message_type: str
    media_url: str | None = None
    mime_type: str | None = None  # declared by the sender, may be wrong


@dataclass
class DownloadResult:
    buffer: bytes
    content_type: str | None = None  # raw Content-Type header


@dataclass(frozen=True)
class SavedMedia:
    path: str
    content_type: str | None = None


@dataclass(frozen=True)
class MediaInfo:
    """A resolved and persisted attachment."""

    path: str
    placeholder: str
    content_type: str | None = None


class MediaPayload(TypedDict, total=False):
    """Flattened media fields consumed by context templates."""

    MediaPath: str
    MediaType: str
    MediaUrl: str
    MediaPaths: list[str]
    MediaUrls: list[str]
    MediaTypes: list[str]
