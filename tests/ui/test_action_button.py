# -*- coding: utf-8 -*-
"""
Tests for ActionButton UI component.
"""

import pytest
from PyQt5.QtCore import Qt

from ui.components.action_button import ActionButton


@pytest.mark.parametrize("variant", ["primary", "secondary", "outline", "ghost"])
def test_button_variants(qtbot, variant):
    button = ActionButton("Continue", variant=variant)
    qtbot.addWidget(button)
    assert button.text() == "Continue"


def test_invalid_variant(qapp):
    with pytest.raises(ValueError):
        ActionButton("Continue", variant="neon")


def test_button_click(qtbot):
    button = ActionButton("Add", width=80)
    qtbot.addWidget(button)

    with qtbot.waitSignal(button.clicked):
        qtbot.mouseClick(button, Qt.LeftButton)
    assert button.width() == 80


def test_disabled_button_ignores_clicks(qtbot):
    button = ActionButton("Add")
    qtbot.addWidget(button)
    button.setEnabled(False)

    clicked = []
    button.clicked.connect(lambda: clicked.append(True))
    qtbot.mouseClick(button, Qt.LeftButton)
    assert clicked == []
