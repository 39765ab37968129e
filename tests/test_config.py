from download_outcome.config import Settings


def test_settings_defaults(monkeypatch):
    monkeypatch.delenv("ENV", raising=False)
    monkeypatch.delenv("LOG_VERBOSE", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)

    settings = Settings()

    assert settings.env == "production"
    assert settings.log_verbose is True
    assert settings.log_level == "INFO"


def test_settings_load_from_env(monkeypatch):
    monkeypatch.setenv("ENV", "development")
    monkeypatch.setenv("LOG_VERBOSE", "false")
    monkeypatch.setenv("LOG_LEVEL", "WARNING")

    settings = Settings()

    assert settings.env == "development"
    assert settings.log_verbose is False
    assert settings.log_level == "WARNING"
