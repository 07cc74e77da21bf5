"""
Config package for tools_gallery.

Responsible for:
- the GlobalConfig model
- reading global.json plus environment overrides
"""

from .model import GlobalConfig
from .io import load_global_config

__all__ = ["GlobalConfig", "load_global_config"]
