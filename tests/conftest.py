import json
import shutil
from pathlib import Path

import pytest

from packages.common.config import get_settings

FIXTURES_DIR = Path(__file__).parent / "fixtures"

SETTINGS_ENV_VARS = (
    "ENVIRONMENT",
    "LOG_LEVEL",
    "LOG_FORMAT",
    "CATEGORIZER_INPUT_FILE",
    "CATEGORIZER_OUTPUT_FILE",
    "CATEGORIZER_OUTPUT_INDENT",
)


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Isolate tests from the caller's environment and the settings cache."""
    for name in SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """Empty working directory for file-based runs."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def sample_file(workdir):
    """The sample listings copied to data01.json in the working directory."""
    target = workdir / "data01.json"
    shutil.copy(FIXTURES_DIR / "data01.json", target)
    return target


@pytest.fixture
def write_json(workdir):
    def _write(name, payload):
        path = workdir / name
        path.write_text(json.dumps(payload, ensure_ascii=False), encoding="utf-8")
        return path
    return _write
