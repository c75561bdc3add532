"""Global pytest fixtures for PATTERNS."""

import pytest

from patterns.config import PREFS_PATH_ENV, PROXY_PASSWORD_ENV
from patterns.creational.singleton import PrinterDriver


@pytest.fixture(autouse=True)
def clean_patterns_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Make sure settings come from defaults unless a test sets them."""
    for name in (PREFS_PATH_ENV, PROXY_PASSWORD_ENV):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def fresh_printer_driver(monkeypatch: pytest.MonkeyPatch) -> None:
    """Forget any printer driver created earlier, restoring it afterwards."""
    monkeypatch.setattr(PrinterDriver, "_instance", None)
