"""Console configuration with environment variables."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Console settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="CRM_", extra="ignore")

    # Environment
    ENV: str = "dev"

    # Version (format: a.bc.de - major.feature.patch)
    VERSION: str = "0.01.00"

    # Logging
    LOG_LEVEL: str = "INFO"

    # Default clock time for a custom snooze when the picker sends no time
    DEFAULT_SNOOZE_TIME: str = "09:00"

    # Timezone assumed for naive "now" values (stats day boundaries)
    DEFAULT_TIMEZONE: str = "UTC"

    # Max characters of free-text search considered by the filter engines
    SEARCH_TERM_MAX_LENGTH: int = 200

    @property
    def is_dev(self) -> bool:
        """True when running in a local/dev environment."""
        return self.ENV == "dev"


settings = Settings()
