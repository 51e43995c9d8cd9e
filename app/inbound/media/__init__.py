"""Media handling -- bounded download, type resolution, storage, and payloads."""

from .capabilities import MediaCapabilities, MediaPersister, MimeDetector, default_capabilities
from .classify import MEDIA_MESSAGE_TYPES, MediaKind, classify, placeholder_for
from .download import download_media_from_url, fetch_media
from .errors import MediaDownloadError, MediaStoreError, SizeExceeded, TransportError
from .incoming import build_media_body, resolve_media_list
from .models import DownloadResult, InboundMessage, MediaInfo, MediaPayload, SavedMedia
from .payload import build_media_payload
from .sniff import MagicMimeDetector
from .store import LocalMediaStore

__all__ = [
    "DownloadResult",
    "InboundMessage",
    "LocalMediaStore",
    "MEDIA_MESSAGE_TYPES",
    "MagicMimeDetector",
    "MediaCapabilities",
    "MediaDownloadError",
    "MediaInfo",
    "MediaKind",
    "MediaPayload",
    "MediaPersister",
    "MediaStoreError",
    "MimeDetector",
    "SavedMedia",
    "SizeExceeded",
    "TransportError",
    "build_media_body",
    "build_media_payload",
    "classify",
    "default_capabilities",
    "download_media_from_url",
    "fetch_media",
    "placeholder_for",
    "resolve_media_list",
]
