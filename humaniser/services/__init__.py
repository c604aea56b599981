# humaniser/services/__init__.py
"""Service layer for humaniser"""

from .config_service import ConfigService, default_config_path, load_config

__all__ = [
    "ConfigService",
    "default_config_path",
    "load_config",
]
