"""Flatten resolved media into template fields."""

from __future__ import annotations

from collections.abc import Sequence

from .models import MediaInfo, MediaPayload


def build_media_payload(media_list: Sequence[MediaInfo]) -> MediaPayload:
    """Project *media_list* onto the ``Media*`` context fields.

    Scalar fields describe the first item; plural fields cover all of
    them.  The local path doubles as the media URL.  Items without a
    content type are left out of ``MediaTypes`` and any field that would
    be empty is omitted.
    """
    if not media_list:
        return {}

    first = media_list[0]
    paths = [m.path for m in media_list]
    types = [m.content_type for m in media_list if m.content_type]

    payload: MediaPayload = {
        "MediaPath": first.path,
        "MediaUrl": first.path,
        "MediaPaths": paths,
        "MediaUrls": list(paths),
    }
    if first.content_type:
        payload["MediaType"] = first.content_type
    if types:
        payload["MediaTypes"] = types
    return payload
