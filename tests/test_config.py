"""
Tests for settings loading.
"""

from merkle_commit.config import Settings, get_settings


class TestSettings:
    """Test environment-driven configuration."""

    def test_defaults(self):
        settings = Settings()

        assert settings.max_items == 100_000
        assert settings.sample_items[0] == "airdrophunter1@gmail.com"

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("MERKLE_MAX_ITEMS", "10")
        monkeypatch.setenv("MERKLE_SAMPLE_ITEMS", '["a", "b"]')

        settings = Settings()

        assert settings.max_items == 10
        assert settings.sample_items == ["a", "b"]

    def test_get_settings_cached(self):
        assert get_settings() is get_settings()
