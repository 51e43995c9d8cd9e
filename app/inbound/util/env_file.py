"""Read-only ``.env`` file access."""

from __future__ import annotations

from pathlib import Path


class EnvFile:
    """Parses a ``KEY=VALUE`` file on every lookup so edits apply on reload."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def read(self, key: str) -> str:
        """Return the value for *key*, or ``""`` if absent."""
        return self.read_all().get(key, "")

    def read_all(self) -> dict[str, str]:
        """Parse the env file into a ``{key: value}`` mapping.

        Blank lines, ``#`` comments and lines without ``=`` are skipped.
        A leading ``export`` is accepted so the file can also be sourced
        by a shell.
        """
        if not self.path.is_file():
            return {}
        result: dict[str, str] = {}
        for line in self.path.read_text().splitlines():
            line = line.strip()
            if not line or line.startswith("#") or "=" not in line:
                continue
            if line.startswith("export "):
                line = line[len("export "):]
            key, _, value = line.partition("=")
            result[key.strip()] = value.strip().strip('"').strip("'")
        return result
