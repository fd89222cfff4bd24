"""
FastAPI dependency injection.

An endpoint declares `settings: Settings = Depends(get_settings)` and FastAPI
hands it the configuration. Tests swap it through app.dependency_overrides.
"""

from config.settings import Settings, settings


def get_settings() -> Settings:
    """Returns the process-wide settings singleton."""
    return settings
