"""Application configuration module.

Environment-based settings (Pydantic BaseSettings) live in **settings.py**:
database URL, SQL echo and the debug flag, loaded from a ``.env`` file via
pydantic-settings.
"""
from gymlog.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
