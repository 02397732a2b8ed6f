import pytest

from picross.utils.config import Settings, _env_flag, settings


@pytest.mark.parametrize("value, expected", [
    ("1", True), ("true", True), (" YES ", True), ("on", True),
    ("0", False), ("false", False), ("", False), ("nope", False),
])
def test_env_flag(monkeypatch: pytest.MonkeyPatch, value: str, expected: bool) -> None:
    monkeypatch.setenv("PICROSS_TEST_FLAG", value)
    assert _env_flag("PICROSS_TEST_FLAG") is expected


def test_env_flag_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("PICROSS_TEST_FLAG", raising=False)
    assert _env_flag("PICROSS_TEST_FLAG") is False
    assert _env_flag("PICROSS_TEST_FLAG", "1") is True


def test_settings_types() -> None:
    assert isinstance(settings, Settings)
    assert isinstance(settings.DEFAULT_ROWS, int)
    assert isinstance(settings.DEFAULT_COLS, int)
    assert isinstance(settings.GROUP_SIZE, int)
    assert isinstance(settings.PLAIN_OUTPUT, bool)
