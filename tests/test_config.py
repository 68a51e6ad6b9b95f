"""Tests for configuration module."""

from careerhub.config import Settings


class TestSettings:
    """Tests for Settings class."""

    def test_settings_from_env(self, monkeypatch):
        """Test that settings are read from environment variables."""
        monkeypatch.setenv("SUPABASE_URL", "https://project.supabase.co")
        monkeypatch.setenv("SUPABASE_ANON_KEY", "anon-key")
        monkeypatch.setenv("API_URL", "https://api.example.com")

        config = Settings(_env_file=None)

        assert config.supabase_url == "https://project.supabase.co"
        assert config.supabase_anon_key == "anon-key"
        assert config.api_url == "https://api.example.com"
        assert config.store_configured is True

    def test_settings_defaults(self, monkeypatch):
        """Test defaults when environment variables are missing."""
        for name in ("SUPABASE_URL", "SUPABASE_ANON_KEY", "API_URL", "SAFETY_LOGS_TABLE", "SAFETY_ADMIN_ID"):
            monkeypatch.delenv(name, raising=False)

        config = Settings(_env_file=None)

        assert config.supabase_url is None
        assert config.api_url == "http://localhost:1441"
        assert config.safety_logs_table == "safety_logs"
        assert config.safety_admin_id == "safety_system"
        assert config.store_configured is False

    def test_store_requires_both_credentials(self, monkeypatch):
        """Test that a URL without a key does not enable the store."""
        monkeypatch.setenv("SUPABASE_URL", "https://project.supabase.co")
        monkeypatch.delenv("SUPABASE_ANON_KEY", raising=False)

        assert Settings(_env_file=None).store_configured is False
