# -*- coding: utf-8 -*-
"""
Main application window with QStackedWidget routing.

Routes:
    /signup  - Signup wizard (start page)
    /        - Home page for the signed-in user
"""

from typing import Optional

from PyQt5.QtWidgets import QLabel, QMainWindow, QStackedWidget, QVBoxLayout, QWidget
from PyQt5.QtCore import Qt, pyqtSignal
from PyQt5.QtGui import QFont

from .config import Config, Routes
from models.user import User
from services.api_auth_service import AccountService
from services.translation_manager import tr, get_layout_direction
from ui.error_handler import ErrorHandler
from ui.wizards.signup import SignupWizard
from utils.logger import get_logger

logger = get_logger(__name__)


class HomePage(QWidget):
    """Landing page shown after signup."""

    def __init__(self, parent=None):
        super().__init__(parent)
        layout = QVBoxLayout(self)
        layout.setAlignment(Qt.AlignCenter)
        layout.setSpacing(8)

        self.title_label = QLabel(tr("home.title"))
        title_font = QFont()
        title_font.setPointSize(18)
        title_font.setBold(True)
        self.title_label.setFont(title_font)
        self.title_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.title_label)

        self.user_label = QLabel()
        self.user_label.setAlignment(Qt.AlignCenter)
        self.user_label.setStyleSheet(f"color: {Config.TEXT_LIGHT};")
        layout.addWidget(self.user_label)

    def set_user(self, user: Optional[User]):
        if user is None:
            self.user_label.clear()
            return
        self.user_label.setText(tr("home.signed_in_as", name=user.display_name))


class MainWindow(QMainWindow):
    """Main application window with route-based navigation."""

    route_changed = pyqtSignal(str)

    def __init__(self, account_service: Optional[AccountService] = None, parent=None):
        super().__init__(parent)
        self.account_service = account_service
        self.current_user: Optional[User] = None
        self.current_route: Optional[str] = None
        self.signup_wizard: Optional[SignupWizard] = None

        self._setup_window()

        self.stack = QStackedWidget()
        self.setCentralWidget(self.stack)

        self.home_page = HomePage()
        self.stack.addWidget(self.home_page)

    def _setup_window(self):
        """Configure window properties."""
        self.setWindowTitle(Config.APP_TITLE)
        self.setMinimumSize(Config.WINDOW_MIN_WIDTH, Config.WINDOW_MIN_HEIGHT)
        self.setLayoutDirection(get_layout_direction())

    def navigate_to(self, route: str) -> bool:
        """
        Show the page for a route.

        Returns:
            False for an unknown route
        """
        if route == Routes.SIGNUP:
            self._show_signup()
        elif route == Routes.HOME:
            self._dispose_signup()
            self.home_page.set_user(self.current_user)
            self.stack.setCurrentWidget(self.home_page)
        else:
            logger.warning(f"Unknown route: {route}")
            ErrorHandler.show_warning(self, tr("error.unknown_route", route=route))
            return False

        logger.info(f"Navigated to {route}")
        self.current_route = route
        self.route_changed.emit(route)
        return True

    def _show_signup(self):
        """Open a fresh signup wizard."""
        self._dispose_signup()
        self.signup_wizard = SignupWizard(account_service=self.account_service)
        self.signup_wizard.account_created.connect(self._on_account_created)
        self.signup_wizard.navigation_requested.connect(self.navigate_to)
        self.stack.addWidget(self.signup_wizard)
        self.stack.setCurrentWidget(self.signup_wizard)

    def _dispose_signup(self):
        """Drop the wizard and the answers it holds."""
        if self.signup_wizard is None:
            return
        self.stack.removeWidget(self.signup_wizard)
        self.signup_wizard.deleteLater()
        self.signup_wizard = None

    def _on_account_created(self, user: User):
        self.current_user = user
