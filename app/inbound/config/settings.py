"""Application settings -- reads from ``.env`` file and environment."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import ClassVar

from ..util.env_file import EnvFile
from ..util.singletons import register_singleton

logger = logging.getLogger(__name__)

DEFAULT_MAX_MB = 20
DEFAULT_USER_AGENT = "inbound-media/1.0"

MEDIA_DIRECTIONS: frozenset[str] = frozenset({"inbound", "outbound"})


class Settings:

    _DATA_DIR_ENV: ClassVar[str] = "INBOUND_MEDIA_DATA_DIR"

    def __init__(self) -> None:
        dotenv = os.getenv("DOTENV_PATH")
        if not dotenv:
            data_dir = os.getenv(self._DATA_DIR_ENV)
            if data_dir:
                dotenv = str(Path(data_dir) / ".env")
            else:
                dotenv = ".env"
        self.env = EnvFile(dotenv)
        self.reload()

    def reload(self) -> None:
        e = self._read

        self.media_max_mb: float = self._positive_number(
            "MEDIA_MAX_MB", e("MEDIA_MAX_MB"), DEFAULT_MAX_MB,
        )
        raw_timeout = e("MEDIA_FETCH_TIMEOUT")
        self.media_fetch_timeout: float | None = (
            self._positive_number("MEDIA_FETCH_TIMEOUT", raw_timeout, None)
            if raw_timeout else None
        )
        self.media_user_agent: str = e("MEDIA_USER_AGENT") or DEFAULT_USER_AGENT

    @property
    def media_max_bytes(self) -> int:
        return int(self.media_max_mb * 1024 * 1024)

    @property
    def data_dir(self) -> Path:
        return Path(os.getenv(self._DATA_DIR_ENV, str(Path.home() / ".inbound-media")))

    @property
    def media_dir(self) -> Path:
        return self.data_dir / "media"

    @property
    def media_incoming_dir(self) -> Path:
        return self.media_dir / "inbound"

    @property
    def media_outgoing_dir(self) -> Path:
        return self.media_dir / "outbound"

    def _read(self, key: str) -> str:
        return self.env.read(key) or os.getenv(key, "")

    @staticmethod
    def _positive_number(key: str, raw: str, default: float | None) -> float | None:
        if not raw:
            return default
        try:
            value = float(raw)
        except ValueError:
            logger.warning("Ignoring non-numeric %s=%r", key, raw)
            return default
        if value <= 0:
            logger.warning("Ignoring non-positive %s=%r", key, raw)
            return default
        return value

    def ensure_dirs(self) -> None:
        for d in (
            self.data_dir,
            self.media_dir,
            self.media_incoming_dir,
            self.media_outgoing_dir,
        ):
            d.mkdir(parents=True, exist_ok=True)


cfg = Settings()


def _reset_cfg() -> None:
    global cfg
    cfg = Settings()


register_singleton(_reset_cfg)
