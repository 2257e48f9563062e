"""
Config package for course_browser.

Responsible for:
- the global config model (GlobalConfig)
- config and catalog I/O (load_global_config / load_catalog)
"""

from .model import GlobalConfig
from .loader import load_catalog, load_global_config

__all__ = ["GlobalConfig", "load_catalog", "load_global_config"]
