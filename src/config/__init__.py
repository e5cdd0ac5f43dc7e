"""Configuration module for the Topiary Park rates service."""

from .settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
