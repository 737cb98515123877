"""Singleton pattern example."""

from .app_settings import AppSettings

__all__ = ["AppSettings"]
