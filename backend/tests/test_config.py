from pathlib import Path

import pytest
from seating.config import Settings, get_settings


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("RESERVATIONS_PATH", "TOTAL_CAPACITY", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    settings = get_settings()

    assert settings == Settings()
    assert settings.total_capacity == 30
    assert settings.reservations_path == Path("./data/reservations.txt")


def test_reads_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("RESERVATIONS_PATH", str(tmp_path / "store.txt"))
    monkeypatch.setenv("TOTAL_CAPACITY", "12")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = get_settings()

    assert settings.reservations_path == tmp_path / "store.txt"
    assert settings.total_capacity == 12
    assert settings.log_level == "DEBUG"
