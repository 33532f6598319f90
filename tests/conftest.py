from __future__ import annotations

from pathlib import Path

import pytest

from deferable_css.filesystem import LocalFileSystem

RESET_CSS = "html, body, div { margin: 0; padding: 0; border: 0; }\n"
RESET_MIN_CSS = "html,body,div{margin:0;padding:0;border:0}"
TEST_CSS = "body { color: #333; }\r\n.note { font-style: italic; }\n"


@pytest.fixture
def css_root(tmp_path: Path) -> Path:
    root = tmp_path / "css"
    root.mkdir()
    (root / "reset.css").write_text(RESET_CSS, encoding="utf-8")
    (root / "reset.min.css").write_text(RESET_MIN_CSS, encoding="utf-8")
    (root / "test.css").write_bytes(TEST_CSS.encode("utf-8"))
    (root / "empty.css").write_bytes(b"")
    (root / "large.css").write_text("p { margin: 1em; }\n" * 200, encoding="utf-8")
    (root / "vendor").mkdir()
    (root / "vendor" / "theme.less").write_text("a { color: red; }", encoding="utf-8")
    return root


class CountingFileSystem(LocalFileSystem):
    """Records every path touched so tests can assert on filesystem access."""

    def __init__(self) -> None:
        self.calls = []

    def exists(self, path):
        self.calls.append(("exists", path))
        return super().exists(path)

    def size(self, path):
        self.calls.append(("size", path))
        return super().size(path)

    def read_bytes(self, path):
        self.calls.append(("read", path))
        return super().read_bytes(path)


@pytest.fixture
def counting_fs() -> CountingFileSystem:
    return CountingFileSystem()


@pytest.fixture
def log_calls():
    """A log sink that records ``(level, message)`` without raising."""
    calls = []

    def log(level, message):
        calls.append((level, message))

    log.calls = calls
    return log
