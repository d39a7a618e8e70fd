# -*- coding: utf-8 -*-
"""
Action Button Component - Reusable button with consistent styling.

Used by the wizard footer and the invite list so every action button
shares one look:
- primary: solid blue (Continue, Create Account)
- secondary: white with grey border (Back)
- outline: white with blue border (Skip for now, Add)
- ghost: borderless text button (Remove, Dismiss)
"""

from PyQt5.QtWidgets import QPushButton
from PyQt5.QtCore import Qt

from app.config import Config

_STYLES = {
    "primary": f"""
        QPushButton {{
            background-color: {Config.PRIMARY_COLOR};
            color: white;
            border: none;
            padding: 8px 16px;
            border-radius: 6px;
            font-size: 13px;
        }}
        QPushButton:hover {{
            background-color: {Config.PRIMARY_DARK};
        }}
        QPushButton:disabled {{
            background-color: #93C5FD;
        }}
    """,
    "secondary": f"""
        QPushButton {{
            background-color: {Config.CARD_BACKGROUND};
            color: {Config.TEXT_COLOR};
            border: 1px solid {Config.BORDER_COLOR};
            padding: 8px 16px;
            border-radius: 6px;
            font-size: 13px;
        }}
        QPushButton:hover {{
            background-color: #F3F4F6;
        }}
        QPushButton:disabled {{
            color: {Config.PENDING_COLOR};
        }}
    """,
    "outline": f"""
        QPushButton {{
            background-color: {Config.CARD_BACKGROUND};
            color: {Config.PRIMARY_COLOR};
            border: 1px solid {Config.PRIMARY_COLOR};
            padding: 8px 16px;
            border-radius: 6px;
            font-size: 13px;
        }}
        QPushButton:hover {{
            background-color: #EFF6FF;
        }}
        QPushButton:disabled {{
            color: {Config.PENDING_COLOR};
            border-color: {Config.BORDER_COLOR};
        }}
    """,
    "ghost": f"""
        QPushButton {{
            background-color: transparent;
            color: {Config.TEXT_LIGHT};
            border: none;
            padding: 4px 8px;
            font-size: 12px;
        }}
        QPushButton:hover {{
            color: {Config.ERROR_COLOR};
        }}
    """,
}


class ActionButton(QPushButton):
    """
    Reusable action button with consistent styling.

    Usage:
        btn = ActionButton("Continue", variant="primary")
        btn = ActionButton("Back", variant="secondary", width=120)
    """

    def __init__(
        self,
        text: str,
        variant: str = "primary",
        width: int = None,
        height: int = 40,
        parent=None
    ):
        """
        Args:
            text: Button text
            variant: "primary", "secondary", "outline" or "ghost"
            width: Fixed width in pixels (None = size to text)
            height: Fixed height in pixels
            parent: Parent widget
        """
        super().__init__(text, parent)

        if variant not in _STYLES:
            raise ValueError(f"Invalid variant: {variant}. Must be one of {sorted(_STYLES)}")
        self.variant = variant

        if width:
            self.setFixedWidth(width)
        self.setFixedHeight(height)
        self.setCursor(Qt.PointingHandCursor)
        self.setStyleSheet(_STYLES[variant])
