import os


class Settings:
    def __init__(self):
        self.app_name = "Shuttle Planner"
        self.api_version = "1.0.0"
        self.environment = os.getenv("APP_ENV", "development")
        self.database_url = os.getenv("DATABASE_URL", "sqlite:///./shuttle.db")
        self.pool_size = int(os.getenv("DB_POOL_SIZE", "10"))
        self.pool_timeout = int(os.getenv("DB_POOL_TIMEOUT", "30"))
        self.log_level = os.getenv("LOG_LEVEL", "INFO")
        self.cors_origins = os.getenv("CORS_ORIGINS", "*")

    @property
    def origins_list(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")


_settings_instance = None


def get_settings():
    """Return a singleton Settings instance."""
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance
