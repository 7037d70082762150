import pydantic
import pytest

from async_flow.settings import Settings


def test_defaults():
    settings = Settings.from_env({})

    assert settings.delay_seconds == 1.0
    assert settings.log_level == "INFO"
    assert settings.fruits_to_get == ["apple", "grape", "pear"]


def test_from_env():
    settings = Settings.from_env(
        {
            "ASYNC_FLOW_DELAY_SECONDS": "0.25",
            "ASYNC_FLOW_LOG_LEVEL": "debug",
            "ASYNC_FLOW_FRUITS": "apple, kiwi,,",
            "UNRELATED": "ignored",
        }
    )

    assert settings.delay_seconds == 0.25
    assert settings.log_level == "DEBUG"
    assert settings.fruits_to_get == ["apple", "kiwi"]


def test_reads_process_environment(monkeypatch):
    monkeypatch.setenv("ASYNC_FLOW_DELAY_SECONDS", "0")

    assert Settings.from_env().delay_seconds == 0


@pytest.mark.parametrize(
    "environ",
    [
        {"ASYNC_FLOW_DELAY_SECONDS": "-1"},
        {"ASYNC_FLOW_DELAY_SECONDS": "soon"},
        {"ASYNC_FLOW_LOG_LEVEL": "LOUD"},
    ],
)
def test_invalid_values(environ):
    with pytest.raises(pydantic.ValidationError):
        Settings.from_env(environ)
