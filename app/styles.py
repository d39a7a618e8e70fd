# -*- coding: utf-8 -*-
"""
StartupFlo application stylesheet for PyQt5.
"""

from .config import Config


def get_stylesheet() -> str:
    """Generate the main application stylesheet."""
    return f"""
    /* ===== Global Styles ===== */
    QWidget {{
        font-family: "{Config.FONT_FAMILY}", sans-serif;
        font-size: {Config.FONT_SIZE}pt;
        color: {Config.TEXT_COLOR};
    }}

    /* ===== Main Window ===== */
    QMainWindow {{
        background-color: {Config.BACKGROUND_COLOR};
    }}

    /* ===== Labels ===== */
    QLabel {{
        background: transparent;
    }}

    /* ===== Check Boxes ===== */
    QCheckBox::indicator:checked {{
        background-color: {Config.PRIMARY_COLOR};
        border: 1px solid {Config.PRIMARY_COLOR};
        border-radius: 3px;
    }}

    /* ===== Scroll Bars ===== */
    QScrollBar:vertical {{
        background: {Config.BACKGROUND_COLOR};
        width: 8px;
        margin: 0;
    }}

    QScrollBar::handle:vertical {{
        background: {Config.BORDER_COLOR};
        border-radius: 4px;
        min-height: 24px;
    }}

    QScrollBar::add-line:vertical, QScrollBar::sub-line:vertical {{
        height: 0;
    }}

    /* ===== Tool Tips ===== */
    QToolTip {{
        background-color: {Config.TEXT_COLOR};
        color: white;
        border: none;
        padding: 4px 8px;
    }}
    """
