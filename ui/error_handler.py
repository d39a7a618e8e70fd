# -*- coding: utf-8 -*-
"""Modal dialogs for errors raised outside the wizard."""

from PyQt5.QtWidgets import QMessageBox, QWidget

from services.translation_manager import tr


class ErrorHandler:
    """Shows user-facing problems as message boxes."""

    @staticmethod
    def show_warning(parent: QWidget, message: str, title: str = None):
        """Show warning dialog with translated title."""
        QMessageBox.warning(parent, title or tr("dialog.warning"), message)
