"""Tests for the flattened media payload."""

from __future__ import annotations

from app.inbound.media.models import MediaInfo
from app.inbound.media.payload import build_media_payload


class TestBuildMediaPayload:
    def test_empty(self) -> None:
        assert build_media_payload([]) == {}

    def test_single_item(self) -> None:
        payload = build_media_payload(
            [MediaInfo(path="a.png", content_type="image/png", placeholder="<media:image>")]
        )
        assert payload["MediaPath"] == "a.png"
        assert payload["MediaType"] == "image/png"
        assert payload["MediaUrl"] == "a.png"
        assert payload["MediaPaths"] == ["a.png"]
        assert payload["MediaUrls"] == ["a.png"]
        assert payload["MediaTypes"] == ["image/png"]

    def test_scalars_come_from_first_item(self) -> None:
        payload = build_media_payload([
            MediaInfo(path="a.png", content_type="image/png", placeholder="<media:image>"),
            MediaInfo(path="b.mp3", content_type="audio/mpeg", placeholder="<media:audio>"),
        ])
        assert payload["MediaPath"] == "a.png"
        assert payload["MediaType"] == "image/png"
        assert payload["MediaPaths"] == ["a.png", "b.mp3"]
        assert payload["MediaTypes"] == ["image/png", "audio/mpeg"]

    def test_missing_types_are_skipped(self) -> None:
        payload = build_media_payload([
            MediaInfo(path="a.bin", content_type=None, placeholder="<media:document>"),
            MediaInfo(path="b.pdf", content_type="application/pdf", placeholder="<media:document>"),
        ])
        assert "MediaType" not in payload
        assert payload["MediaTypes"] == ["application/pdf"]
        assert payload["MediaPaths"] == ["a.bin", "b.pdf"]

    def test_no_types_at_all(self) -> None:
        payload = build_media_payload(
            [MediaInfo(path="a.bin", content_type=None, placeholder="<media:file>")]
        )
        assert "MediaTypes" not in payload
        assert "MediaType" not in payload
        assert payload["MediaPaths"] == ["a.bin"]
