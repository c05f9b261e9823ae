import sys
from pathlib import Path

import pytest

# Ensure `import manifestcheck` works when running `pytest` without PYTHONPATH hacks.
BACKEND_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(BACKEND_ROOT))

from manifestcheck.config import get_settings  # noqa: E402
from manifestcheck.validators import BaseValidator, ManifestResult  # noqa: E402


class RecordingValidator(BaseValidator):
    """Returns canned results and counts how often it ran."""

    def __init__(self, name: str, results=None, exc: Exception = None):
        self._name = name
        self._results = list(results or [])
        self._exc = exc
        self.calls = 0

    @property
    def name(self) -> str:
        return self._name

    def validate(self) -> list[ManifestResult]:
        self.calls += 1
        if self._exc is not None:
            raise self._exc
        return list(self._results)


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch) -> None:
    for var in ("MANIFESTCHECK_VALIDATOR_FAILURE_POLICY", "MANIFESTCHECK_VALIDATOR_MAX_WORKERS"):
        monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def make_validator():
    return RecordingValidator
