"""Single-URL media resolution CLI.

Runs one attachment through the inbound media pipeline with the local
defaults (libmagic sniffing, on-disk storage) and prints the result.

Usage::

    inbound-media-fetch https://example.com/photo.png
    inbound-media-fetch --type voice --mime audio/ogg https://example.com/note.ogg
    inbound-media-fetch --max-mb 5 --timeout 30 --json https://example.com/report.pdf
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys

from rich.console import Console
from rich.table import Table

from app.inbound.config import settings
from app.inbound.media import (
    MEDIA_MESSAGE_TYPES,
    InboundMessage,
    MediaInfo,
    build_media_payload,
    resolve_media_list,
)

logger = logging.getLogger(__name__)
console = Console()
err_console = Console(stderr=True)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="inbound-media-fetch",
        description="Download, type and store a single media URL.",
    )
    parser.add_argument("url", help="The media URL to resolve.")
    parser.add_argument(
        "-t", "--type",
        dest="message_type",
        choices=sorted(MEDIA_MESSAGE_TYPES),
        default="file",
        help="Message type the attachment arrived as (default: file).",
    )
    parser.add_argument(
        "--mime",
        type=str,
        default=None,
        help="Content type declared by the sender, used if the server sends none.",
    )
    parser.add_argument(
        "--max-mb",
        type=float,
        default=None,
        help="Size budget in MiB (default: MEDIA_MAX_MB env / config).",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Deadline in seconds (default: MEDIA_FETCH_TIMEOUT env / none).",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        default=False,
        help="Print the result as JSON instead of a table.",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        default=False,
        help="Show pipeline progress and debug logging.",
    )
    return parser


def _max_bytes(args: argparse.Namespace) -> int:
    if args.max_mb is not None:
        return int(args.max_mb * 1024 * 1024)
    return settings.cfg.media_max_bytes


def _render(media: list[MediaInfo]) -> None:
    table = Table(title="Resolved media", show_header=False)
    table.add_column("field", style="bold")
    table.add_column("value")
    item = media[0]
    table.add_row("path", item.path)
    table.add_row("content type", item.content_type or "-")
    table.add_row("placeholder", item.placeholder)
    for key, value in build_media_payload(media).items():
        table.add_row(key, ", ".join(value) if isinstance(value, list) else value)
    console.print(table)


async def _run(args: argparse.Namespace) -> int:
    settings.cfg.ensure_dirs()

    message = InboundMessage(
        message_type=args.message_type,
        media_url=args.url,
        mime_type=args.mime,
    )
    timeout = args.timeout if args.timeout is not None else settings.cfg.media_fetch_timeout
    log = (lambda line: err_console.print(f"[dim]{line}[/dim]")) if args.verbose else None

    media = await resolve_media_list(message, _max_bytes(args), log=log, timeout=timeout)

    if args.json:
        print(json.dumps({
            "media": [
                {"path": m.path, "content_type": m.content_type, "placeholder": m.placeholder}
                for m in media
            ],
            "payload": build_media_payload(media),
        }, indent=2))
    elif media:
        _render(media)
    else:
        err_console.print(f"[red]Error:[/red] could not resolve media from {args.url}")

    return 0 if media else 1


def main() -> None:
    """CLI entry point for ``inbound-media-fetch``."""
    args = _build_parser().parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        code = asyncio.run(_run(args))
    except KeyboardInterrupt:
        code = 130

    sys.exit(code)


if __name__ == "__main__":
    main()
