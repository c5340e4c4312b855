"""Core test fixtures for TAS script tests."""

from pathlib import Path
from typing import Callable

import pytest


@pytest.fixture
def write_script(tmp_path) -> Callable[..., Path]:
    """Create a factory that writes script lines to a temporary .tas file."""

    def _write(*lines: str, name: str = "script.tas") -> Path:
        path = tmp_path / name
        path.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")
        return path

    return _write
