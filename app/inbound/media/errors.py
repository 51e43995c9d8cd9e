"""Errors raised while downloading or storing media."""

from __future__ import annotations


class MediaDownloadError(Exception):
    """Base class for failures of a single media download."""


class TransportError(MediaDownloadError):
    """The remote host answered with a non-success status or was unreachable.

    ``status`` is ``None`` when no HTTP response was received at all
    (connection failure, DNS error, deadline expiry).
    """

    def __init__(self, status: int | None, reason: str = "") -> None:
        self.status = status
        self.reason = reason
        if status is None:
            msg = f"Failed to download media: {reason or 'no response'}"
        else:
            msg = f"Failed to download media: {status} {reason}".rstrip()
        super().__init__(msg)


class SizeExceeded(MediaDownloadError):
    """The declared or received size of a body is over the byte budget."""

    def __init__(self, size: int, max_bytes: int) -> None:
        self.size = size
        self.max_bytes = max_bytes
        super().__init__(
            f"Media too large: {size} bytes exceeds limit of {max_bytes} bytes"
        )


class MediaStoreError(Exception):
    """The local media store refused or failed to persist a buffer."""
