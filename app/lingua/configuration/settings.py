"""Lingua configuration settings - main aggregator."""

from pydantic_settings import BaseSettings, SettingsConfigDict

from lingua.configuration.lingua import LinguaSettings


class Settings(BaseSettings):
    """Application configuration settings - main aggregator.

    Environment Variables:
        PREFIX: Environment prefix, empty in production
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)
        SESSION_SECRET_KEY: Secret used to sign the session cookie

    Example:
        ```python
        from lingua.configuration import settings

        locales = settings.lingua.locales
        if settings.is_production:
            ...
        ```
    """

    PREFIX: str = ""
    LOG_LEVEL: str = "INFO"
    SESSION_SECRET_KEY: str | None = None

    lingua: LinguaSettings

    @property
    def is_production(self) -> bool:
        """Check if the application is running in production.

        Returns:
            True if PREFIX is empty (production), False otherwise.
        """
        return not bool(self.PREFIX)

    def __init__(self, **kwargs):
        """Initialize Settings with automatic subsettings instantiation.

        Args:
            **kwargs: Optional overrides for specific settings sections.
        """
        if "lingua" not in kwargs:
            kwargs["lingua"] = LinguaSettings()

        super().__init__(**kwargs)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


settings = Settings()
