# -*- coding: utf-8 -*-
"""
StartupFlo Utility Module
"""

from .logger import get_logger, setup_logger, mask_sensitive

__all__ = [
    "get_logger",
    "setup_logger",
    "mask_sensitive",
]
