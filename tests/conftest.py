import json
from pathlib import Path
import sys

import pytest


@pytest.fixture
def stub_cmd():
    """A child command that optionally writes ``output`` and exits with ``code``."""

    def inner(code: int, output: str = "") -> list[str]:
        script = f"import sys; sys.stdout.write({output!r}); sys.exit({code})"
        return [sys.executable, "-c", script]

    return inner


@pytest.fixture
def write_config(tmp_path: Path):
    """Writes a cargoentry.toml with the given build/test commands."""

    def inner(build=None, test=None, verbose=False) -> Path:
        lines = ["[commands]"]
        if build is not None:
            lines.append(f"build = {json.dumps(build)}")
        if test is not None:
            lines.append(f"test = {json.dumps(test)}")
        lines += ["", "[cargoentry]", f"verbose = {str(verbose).lower()}"]
        config_file = tmp_path / "cargoentry.toml"
        config_file.write_text("\n".join(lines) + "\n")
        return config_file

    return inner
