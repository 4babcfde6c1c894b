import os
from pathlib import Path

import pytest
from loguru import logger


@pytest.fixture
def clean_environment(monkeypatch):
    """Ensure tests run with a clean environment.

    Unsets ASSETHOUND_* variables and forces plain (non-Rich) output so CLI
    tests can assert on captured text.
    """
    to_clear = [k for k in os.environ.keys() if k.startswith("ASSETHOUND_")]
    for k in to_clear:
        monkeypatch.delenv(k, raising=False)
    monkeypatch.setenv("ASSETHOUND_NO_RICH", "1")
    yield


@pytest.fixture
def log_messages():
    """Capture loguru messages (level, text) emitted during a test."""
    records: list[tuple[str, str]] = []

    def sink(message):
        record = message.record
        records.append((record["level"].name, record["message"]))

    handler_id = logger.add(sink, level="DEBUG", format="{message}")
    yield records
    logger.remove(handler_id)


@pytest.fixture
def dist_tree(tmp_path: Path) -> Path:
    """Build output with an asset dir and a page referencing the assets.

    Layout::

        dist/
          index.html       -> references app.js and style.css
          x/app.js         -> "console.log('X');"
          x/style.css      -> references app.js
          x/logo.png       -> binary, not whitelisted
    """
    dist = tmp_path / "dist"
    assets = dist / "x"
    assets.mkdir(parents=True)

    (assets / "app.js").write_bytes(b"console.log('X');\n")
    (assets / "style.css").write_bytes(b"body { background: url(app.js); }\n")
    (assets / "logo.png").write_bytes(b"\x89PNG\r\n\x1a\n\x00\x00app.js\x00")
    (dist / "index.html").write_bytes(
        b'<script src="/x/app.js"></script>\n'
        b'<link rel="stylesheet" href="/x/style.css">\n'
    )
    return dist
