"""File system access and the bundled static asset locator."""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger("deferable_css")

STATIC_DIR = Path(__file__).resolve().parent / "static"
PRELOAD_SCRIPT_NAME = "cssrelpreload.js"


def preload_script_path() -> Path:
    """Location of the packaged rel=preload shim."""
    return STATIC_DIR / PRELOAD_SCRIPT_NAME


class LocalFileSystem:
    """Thin wrapper around ``pathlib`` so callers can swap in their own."""

    def exists(self, path: Path) -> bool:
        return path.is_file()

    def is_dir(self, path: Path) -> bool:
        return path.is_dir()

    def size(self, path: Path) -> int:
        return path.stat().st_size

    def read_bytes(self, path: Path) -> bytes:
        with path.open("rb") as handle:
            return handle.read()

    def read_text(self, path: Path) -> str:
        # No newline translation: inlined content must match the file exactly.
        data = self.read_bytes(path)
        try:
            return data.decode("utf-8")
        except UnicodeDecodeError:
            logger.debug("%s is not UTF-8; decoding as Latin-1", path)
            return data.decode("latin-1")
