# -*- coding: utf-8 -*-
"""
StartupFlo UI Components
"""

from .action_button import ActionButton

__all__ = [
    "ActionButton",
]
