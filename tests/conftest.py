import json
import logging
from pathlib import Path

import pytest


SAMPLE_SETS = [
    {"number": "3836", "name": "Garage", "theme": "Town", "pieces": 50, "tags": ["Car"]},
    {"number": "4002", "name": "Boat", "theme": "Sea", "pieces": 200, "tags": []},
]


@pytest.fixture()
def write_source(tmp_path):
    """Return a helper writing a JSON payload to a file under tmp_path."""

    def _write(payload, name: str = "sets.json") -> Path:
        path = tmp_path / name
        text = payload if isinstance(payload, str) else json.dumps(payload)
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture()
def sample_source(write_source):
    return write_source(SAMPLE_SETS)


@pytest.fixture(autouse=True)
def _restore_root_logging():
    # configure_logging replaces root handlers; put pytest's back afterwards
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for h in list(root.handlers):
        if h not in handlers:
            root.removeHandler(h)
    for h in handlers:
        if h not in root.handlers:
            root.addHandler(h)
    root.setLevel(level)
