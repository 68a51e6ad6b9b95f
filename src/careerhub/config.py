from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    """Configuration for application"""
    supabase_url: str | None = None
    supabase_anon_key: str | None = None
    api_url: str = "http://localhost:1441"
    safety_logs_table: str = "safety_logs"
    safety_admin_id: str = "safety_system"

    model_config = SettingsConfigDict(env_file=".env")

    @property
    def store_configured(self) -> bool:
        """Whether Supabase credentials are available."""
        return bool(self.supabase_url and self.supabase_anon_key)


settings = Settings()
