"""Shared base classes and utilities for settings modules."""

from pydantic import BaseModel, ConfigDict
from pydantic_settings import BaseSettings, SettingsConfigDict


class ConfigSection(BaseModel):
    """Base class for nested configuration sections.

    Sections are plain configuration data. They are frozen so a resolved
    configuration cannot be mutated while a request is being processed.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")


class LinguaBaseSettings(BaseSettings):
    """Base class for lingua settings loaded from the environment.

    Nested sections are addressed with a double underscore, e.g.
    ``LINGUA_RESOLVERS__QUERY__ENABLED=true``.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="LINGUA_",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )
