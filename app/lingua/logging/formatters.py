"""Structlog processors used by lingua's logging pipeline.

Usage:
    from lingua.logging.formatters import add_app_info

Dependencies:
    - structlog processors
"""

from importlib import metadata
from typing import Any

APP_NAME = "lingua"


def package_version(distribution: str = APP_NAME) -> str:
    """Installed version of a distribution, or "unknown" when not installed."""
    try:
        return metadata.version(distribution)
    except metadata.PackageNotFoundError:
        return "unknown"


def add_app_info(app_name: str = APP_NAME, app_version: str = "unknown"):
    """Create a processor that adds application info to log entries.

    Args:
        app_name: Name of the application.
        app_version: Version string for the application.

    Returns:
        A structlog processor function.

    Example:
        configure_logging(
            extra_processors=[add_app_info("lingua", package_version())]
        )
    """

    def processor(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
        event_dict["app_name"] = app_name
        event_dict["app_version"] = app_version
        return event_dict

    return processor
