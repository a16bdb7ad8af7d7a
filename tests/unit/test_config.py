"""Unit tests for Settings."""

from rolegate.config import Settings


def test_defaults() -> None:
    settings = Settings(_env_file=None)
    assert settings.environment == "development"
    assert not settings.is_production
    assert settings.public_path_list() == ["/", "/login", "/team/login", "/auth/callback"]


def test_from_environment(monkeypatch) -> None:
    monkeypatch.setenv("ENVIRONMENT", "production")
    monkeypatch.setenv("CORS_ORIGINS", "https://a.example, https://b.example,")
    monkeypatch.setenv("PUBLIC_PATHS", "/,/login")

    settings = Settings(_env_file=None)

    assert settings.is_production
    assert settings.cors_origin_list() == ["https://a.example", "https://b.example"]
    assert settings.public_path_list() == ["/", "/login"]
