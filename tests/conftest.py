import io
import json
from pathlib import Path

import pytest
from rich.console import Console


@pytest.fixture(autouse=True)
def _plain_terminal(monkeypatch):
    # Rich must not emit ANSI codes and settings must come from defaults only.
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.setenv("NO_COLOR", "1")
    for key in ("MANIFEST_FILENAME", "COMMAND_MAX_WIDTH", "SEPARATOR_PADDING", "LOG_LEVEL"):
        monkeypatch.delenv(f"SCRIPT_LIST_{key}", raising=False)


@pytest.fixture
def write_manifest(tmp_path: Path):
    def _write(data, name: str = "package.json") -> Path:
        path = tmp_path / name
        text = data if isinstance(data, str) else json.dumps(data)
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def memory_console():
    buffer = io.StringIO()
    console = Console(file=buffer, width=200, color_system=None, highlight=False)
    return console, buffer
