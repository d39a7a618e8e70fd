# -*- coding: utf-8 -*-
"""Small widget builders shared by the signup steps."""

from typing import Iterable, Optional

from PyQt5.QtWidgets import QComboBox, QLabel, QLineEdit, QVBoxLayout, QWidget

from app.config import Config
from services.translation_manager import tr

INPUT_STYLE = f"""
    QLineEdit, QComboBox {{
        border: 1px solid {Config.BORDER_COLOR};
        border-radius: 6px;
        padding: 6px 10px;
        min-height: 24px;
        background-color: {Config.CARD_BACKGROUND};
        color: {Config.TEXT_COLOR};
    }}
    QLineEdit:focus, QComboBox:focus {{
        border: 1px solid {Config.PRIMARY_COLOR};
    }}
"""


def create_line_edit(placeholder: str = "", password: bool = False) -> QLineEdit:
    edit = QLineEdit()
    edit.setPlaceholderText(placeholder)
    edit.setStyleSheet(INPUT_STYLE)
    if password:
        edit.setEchoMode(QLineEdit.Password)
    return edit


def create_combo(options: Iterable[str], placeholder: Optional[str] = None) -> QComboBox:
    """Combo whose first item is an empty "Select..." entry (data "")."""
    combo = QComboBox()
    combo.setStyleSheet(INPUT_STYLE)
    combo.addItem(placeholder or tr("signup.company.select_placeholder"), "")
    for option in options:
        combo.addItem(option, option)
    return combo


def select_combo_value(combo: QComboBox, value: str):
    """Select the item holding value, or the empty entry when absent."""
    index = combo.findData(value or "")
    combo.setCurrentIndex(index if index >= 0 else 0)


def labeled(label_text: str, field: QWidget, hint: str = "") -> QWidget:
    """Stack a caption (and optional hint) above an input."""
    container = QWidget()
    layout = QVBoxLayout(container)
    layout.setContentsMargins(0, 0, 0, 0)
    layout.setSpacing(4)

    label = QLabel(label_text)
    label.setStyleSheet(f"color: {Config.TEXT_COLOR}; font-weight: 600;")
    layout.addWidget(label)
    layout.addWidget(field)

    if hint:
        hint_label = QLabel(hint)
        hint_label.setStyleSheet(f"color: {Config.TEXT_LIGHT}; font-size: 11px;")
        layout.addWidget(hint_label)
    return container
