# -*- coding: utf-8 -*-
"""
StartupFlo Application Core Module

MainWindow lives in app.main_window; it is not imported here because
services and ui modules import app.config.
"""

from .config import Config, Routes
from .styles import get_stylesheet

__all__ = ["Config", "Routes", "get_stylesheet"]
