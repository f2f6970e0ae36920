import pytest

from state2circuit.config import Settings


def test_defaults():
    s = Settings.from_env({})
    assert s.synthesis_url == "https://state-to-circuit.onrender.com"
    assert s.synthesis_timeout == 60.0
    assert s.cors_origins == ["*"]
    assert s.log_level == "INFO"


def test_environment_overrides():
    s = Settings.from_env({
        "STATE2CIRCUIT_SYNTHESIS_URL": "http://localhost:8000/",
        "STATE2CIRCUIT_SYNTHESIS_TIMEOUT": "5",
        "STATE2CIRCUIT_CORS_ORIGINS": "http://a.test, http://b.test",
        "STATE2CIRCUIT_LOG_LEVEL": "debug",
    })
    assert s.synthesis_url == "http://localhost:8000"
    assert s.synthesis_timeout == 5.0
    assert s.cors_origins == ["http://a.test", "http://b.test"]
    assert s.log_level == "DEBUG"


@pytest.mark.parametrize("value", ["", "none", "None"])
def test_timeout_can_be_disabled(value):
    assert Settings.from_env({"STATE2CIRCUIT_SYNTHESIS_TIMEOUT": value}).synthesis_timeout is None


def test_reads_process_environment(monkeypatch):
    monkeypatch.setenv("STATE2CIRCUIT_SYNTHESIS_URL", "http://env.test")
    assert Settings.from_env().synthesis_url == "http://env.test"
