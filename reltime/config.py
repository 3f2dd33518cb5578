from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="RELTIME_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Formatting
    default_locale: str = "en"
    rounding_tolerance: int = 50

    # Metrics
    metrics_enabled: bool = True

    # Logging
    log_level: str = "INFO"
    log_format: str = "text"


settings = Settings()
