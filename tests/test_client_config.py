import pytest

from pjlink_client import PjLinkClientConfig, ConfigurationError, DEFAULT_PORT

def test_defaults():
    config = PjLinkClientConfig("projector.local")
    assert config.host == "projector.local"
    assert config.port == DEFAULT_PORT == 4352
    assert config.password == ""
    assert config.timeout_secs is None

def test_host_with_scheme_and_port():
    config = PjLinkClientConfig("tcp://10.0.0.5:4353", port=1234)
    assert config.host == "10.0.0.5"
    assert config.port == 4353

def test_unsupported_scheme():
    with pytest.raises(ConfigurationError):
        PjLinkClientConfig("udp://10.0.0.5")

def test_empty_host():
    with pytest.raises(ConfigurationError):
        PjLinkClientConfig()

@pytest.mark.parametrize("port", [0, -1, 65536])
def test_port_out_of_range(port):
    with pytest.raises(ConfigurationError):
        PjLinkClientConfig("projector", port=port)

def test_password_limits():
    assert PjLinkClientConfig("projector", "x" * 32).password == "x" * 32
    with pytest.raises(ConfigurationError):
        PjLinkClientConfig("projector", "x" * 33)
    with pytest.raises(ConfigurationError):
        PjLinkClientConfig("projector", "pässword")

@pytest.mark.parametrize("timeout_secs", [0, -2.5])
def test_timeout_must_be_positive(timeout_secs):
    with pytest.raises(ConfigurationError):
        PjLinkClientConfig("projector", timeout_secs=timeout_secs)

def test_environment(monkeypatch):
    monkeypatch.setenv("PJLINK_HOST", "env-projector")
    monkeypatch.setenv("PJLINK_PORT", "5000")
    monkeypatch.setenv("PJLINK_PASSWORD", "envpass")
    monkeypatch.setenv("PJLINK_TIMEOUT", "2.5")
    config = PjLinkClientConfig()
    assert config.host == "env-projector"
    assert config.port == 5000
    assert config.password == "envpass"
    assert config.timeout_secs == 2.5
    assert PjLinkClientConfig("other", port=6000).port == 6000

def test_invalid_environment(monkeypatch):
    monkeypatch.setenv("PJLINK_HOST", "env-projector")
    monkeypatch.setenv("PJLINK_PORT", "not-a-port")
    with pytest.raises(ConfigurationError):
        PjLinkClientConfig()

def test_base_config():
    base = PjLinkClientConfig("projector", "secret", port=4000, timeout_secs=3.0)
    config = PjLinkClientConfig(port=4001, base_config=base)
    assert config.host == "projector"
    assert config.password == "secret"
    assert config.port == 4001
    assert config.timeout_secs == 3.0

def test_jsonable():
    config = PjLinkClientConfig.from_jsonable(dict(host="projector", port=4000, password="pw", timeout_secs=5))
    assert config.port == 4000
    assert config.timeout_secs == 5.0
    data = config.to_jsonable()
    assert data == dict(host="projector", port=4000, timeout_secs=5.0)
    assert "password" not in data

@pytest.mark.parametrize("data", [
    dict(host=5),
    dict(host="projector", port="4352"),
    dict(host="projector", port=True),
    dict(host="projector", password=1234),
    dict(host="projector", timeout_secs="fast"),
  ])
def test_invalid_jsonable(data):
    with pytest.raises(ConfigurationError):
        PjLinkClientConfig.from_jsonable(data)
