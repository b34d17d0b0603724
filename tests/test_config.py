import pytest

from buho_vectors.config import CONFIG_FILE_PATH, Settings, build_settings, load_config


def test_packaged_config_loads():
    cfg = load_config(CONFIG_FILE_PATH)

    assert cfg["http"]["timeout_seconds"] == 30
    assert cfg["logging"]["level"] == "INFO"


def test_load_config_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError, match="Configuration file not found"):
        load_config(tmp_path / "nope.yaml")


def test_load_config_invalid_yaml(tmp_path):
    path = tmp_path / "broken.yaml"
    path.write_text("http: [unclosed", encoding="utf-8")

    with pytest.raises(ValueError, match="Error parsing YAML file"):
        load_config(path)


def test_load_config_empty_file(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")

    assert load_config(path) == {}


def test_build_settings_from_config(monkeypatch):
    monkeypatch.delenv("BUHO_HTTP_TIMEOUT", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)

    settings = build_settings({"http": {"timeout_seconds": 12}, "logging": {"level": "debug"}})

    assert settings == Settings(http_timeout=12.0, log_level="DEBUG")


def test_environment_overrides_config(monkeypatch):
    monkeypatch.setenv("BUHO_HTTP_TIMEOUT", "2.5")
    monkeypatch.setenv("LOG_LEVEL", "warning")

    settings = build_settings({"http": {"timeout_seconds": 12}})

    assert settings.http_timeout == 2.5
    assert settings.log_level == "WARNING"


def test_defaults_without_config(monkeypatch):
    monkeypatch.delenv("BUHO_HTTP_TIMEOUT", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)

    assert build_settings() == Settings()


def test_invalid_timeout(monkeypatch):
    monkeypatch.setenv("BUHO_HTTP_TIMEOUT", "soon")

    with pytest.raises(ValueError, match="Invalid HTTP timeout"):
        build_settings({})
