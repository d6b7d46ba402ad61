import pytest
from braille_backend.config import Settings, get_settings


@pytest.fixture(autouse=True)
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestSettings:
    def test_defaults(self, monkeypatch):
        for name in (
            "BRAILLE_LOG_LEVEL",
            "BRAILLE_CORS_ORIGINS",
            "BRAILLE_MAX_TEXT_LENGTH",
            "BRAILLE_API_PREFIX",
        ):
            monkeypatch.delenv(name, raising=False)

        assert get_settings() == Settings()

    def test_from_environment(self, monkeypatch):
        monkeypatch.setenv("BRAILLE_LOG_LEVEL", "debug")
        monkeypatch.setenv("BRAILLE_CORS_ORIGINS", "http://localhost:3000, https://example.org")
        monkeypatch.setenv("BRAILLE_MAX_TEXT_LENGTH", "500")
        monkeypatch.setenv("BRAILLE_API_PREFIX", "/api/v2/")

        settings = get_settings()

        assert settings.log_level == "DEBUG"
        assert settings.cors_origins == ("http://localhost:3000", "https://example.org")
        assert settings.max_text_length == 500
        assert settings.api_prefix == "/api/v2"

    def test_invalid_max_text_length(self, monkeypatch):
        monkeypatch.setenv("BRAILLE_MAX_TEXT_LENGTH", "lots")

        with pytest.raises(ValueError, match="BRAILLE_MAX_TEXT_LENGTH must be an integer"):
            get_settings()

    def test_non_positive_max_text_length(self, monkeypatch):
        monkeypatch.setenv("BRAILLE_MAX_TEXT_LENGTH", "0")

        with pytest.raises(ValueError, match="must be positive"):
            get_settings()
