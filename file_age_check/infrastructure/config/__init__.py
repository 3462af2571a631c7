"""Configuration loading."""

from .settings import CheckSettings, build_parser, load_settings

__all__ = ["CheckSettings", "build_parser", "load_settings"]
