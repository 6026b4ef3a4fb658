"""Configuration"""
from src.infrastructure.config.settings import Settings, get_settings, validate_config

__all__ = ["Settings", "get_settings", "validate_config"]
