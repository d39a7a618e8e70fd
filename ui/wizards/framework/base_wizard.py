# -*- coding: utf-8 -*-
"""
Base Wizard - Abstract base class for all wizards.

Provides unified wizard UI with:
- Header with title, step markers and progress
- Step container (exactly one step visible)
- Navigation buttons (Back, Continue / Submit)
"""

from typing import List, Optional
from abc import abstractmethod

from PyQt5.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel,
    QFrame, QStackedWidget, QProgressBar
)
from PyQt5.QtGui import QFont

from .base_step import BaseStep, ABCQWidgetMeta
from .wizard_context import WizardContext
from .step_navigator import StepNavigator, StepState
from app.config import Config
from ui.components.action_button import ActionButton
from services.translation_manager import tr, get_layout_direction
from utils.logger import get_logger

logger = get_logger(__name__)

_MARKER_COLORS = {
    StepState.COMPLETE: Config.SUCCESS_COLOR,
    StepState.CURRENT: Config.PRIMARY_COLOR,
    StepState.PENDING: Config.PENDING_COLOR,
}

_MARKER_SYMBOLS = {
    StepState.COMPLETE: "✓",
    StepState.CURRENT: "●",
    StepState.PENDING: "○",
}


class BaseWizard(QWidget, metaclass=ABCQWidgetMeta):
    """
    Abstract base class for wizards.

    Subclasses must implement:
    - create_steps(): Create and return list of wizard steps
    - create_context(): Create and return wizard context
    - on_submit(): Handle final submission
    """

    def __init__(self, parent: Optional[QWidget] = None):
        """Initialize the wizard."""
        super().__init__(parent)
        self.setLayoutDirection(get_layout_direction())

        # Initialize context and steps
        self.context = self.create_context()
        self.steps = self.create_steps()

        # Create navigator
        self.navigator = StepNavigator(self.context, self.steps)
        self.navigator.step_changed.connect(self._on_step_changed)
        self.navigator.can_go_previous_changed.connect(self._update_navigation_buttons)

        # Setup UI
        self._setup_ui()

        # Show first step
        self.navigator.start()

    # =========================================================================
    # Abstract Methods - Must be implemented by subclasses
    # =========================================================================

    @abstractmethod
    def create_steps(self) -> List[BaseStep]:
        """
        Create and return list of wizard steps.

        Returns:
            List of BaseStep instances
        """
        pass

    @abstractmethod
    def create_context(self) -> WizardContext:
        """
        Create and return wizard context.

        Returns:
            WizardContext instance
        """
        pass

    @abstractmethod
    def on_submit(self):
        """
        Handle wizard submission.

        Called when the user presses the submit button on the last step
        and the last step validated.
        """
        pass

    # =========================================================================
    # Optional Methods - Can be overridden by subclasses
    # =========================================================================

    def get_wizard_title(self) -> str:
        return ""

    def get_wizard_subtitle(self) -> str:
        return ""

    def get_next_button_text(self) -> str:
        return tr("button.continue")

    def get_submit_button_text(self) -> str:
        return tr("button.continue")

    # =========================================================================
    # UI Setup
    # =========================================================================

    def _setup_ui(self):
        """Setup the wizard UI."""
        main_layout = QVBoxLayout(self)
        main_layout.setContentsMargins(0, 0, 0, 0)
        main_layout.setSpacing(0)

        main_layout.addWidget(self._create_header())

        separator = QFrame()
        separator.setFrameShape(QFrame.HLine)
        separator.setStyleSheet(f"background-color: {Config.BORDER_COLOR};")
        separator.setFixedHeight(1)
        main_layout.addWidget(separator)

        # Step container
        self.step_container = QStackedWidget()
        for step in self.steps:
            self.step_container.addWidget(step)
        main_layout.addWidget(self.step_container, 1)

        self.footer = self._create_footer()
        main_layout.addWidget(self.footer)

    def _create_header(self) -> QWidget:
        """Create wizard header with title, step markers and progress."""
        header = QWidget()
        header.setStyleSheet(f"background-color: {Config.CARD_BACKGROUND};")

        layout = QVBoxLayout(header)
        layout.setContentsMargins(24, 20, 24, 16)
        layout.setSpacing(10)

        # Title
        self.title_label = QLabel(self.get_wizard_title())
        title_font = QFont()
        title_font.setPointSize(16)
        title_font.setBold(True)
        self.title_label.setFont(title_font)
        layout.addWidget(self.title_label)

        self.subtitle_label = QLabel(self.get_wizard_subtitle())
        self.subtitle_label.setStyleSheet(f"color: {Config.TEXT_LIGHT};")
        self.subtitle_label.setVisible(bool(self.get_wizard_subtitle()))
        layout.addWidget(self.subtitle_label)

        # Current step title + "Step N of M"
        step_row = QHBoxLayout()
        self.step_title_label = QLabel()
        step_font = QFont()
        step_font.setPointSize(12)
        step_font.setBold(True)
        self.step_title_label.setFont(step_font)
        step_row.addWidget(self.step_title_label)
        step_row.addStretch()
        self.progress_label = QLabel()
        self.progress_label.setStyleSheet(f"color: {Config.TEXT_LIGHT};")
        step_row.addWidget(self.progress_label)
        layout.addLayout(step_row)

        self.step_description_label = QLabel()
        self.step_description_label.setStyleSheet(f"color: {Config.TEXT_LIGHT};")
        layout.addWidget(self.step_description_label)

        # Progress bar
        self.progress_bar = QProgressBar()
        self.progress_bar.setMaximum(100)
        self.progress_bar.setValue(0)
        self.progress_bar.setTextVisible(False)
        self.progress_bar.setFixedHeight(6)
        self.progress_bar.setStyleSheet(f"""
            QProgressBar {{
                border: none;
                background-color: {Config.BORDER_COLOR};
                border-radius: 3px;
            }}
            QProgressBar::chunk {{
                background-color: {Config.PRIMARY_COLOR};
                border-radius: 3px;
            }}
        """)
        layout.addWidget(self.progress_bar)

        # Step markers
        markers_row = QHBoxLayout()
        self.step_markers: List[QLabel] = []
        for step in self.steps:
            marker = QLabel(step.get_step_title())
            markers_row.addWidget(marker)
            self.step_markers.append(marker)
            markers_row.addStretch()
        layout.addLayout(markers_row)

        return header

    def _create_footer(self) -> QWidget:
        """Create wizard footer with navigation buttons."""
        footer = QWidget()
        footer.setStyleSheet(f"background-color: {Config.CARD_BACKGROUND};")

        self.footer_layout = QHBoxLayout(footer)
        self.footer_layout.setContentsMargins(24, 14, 24, 14)
        self.footer_layout.setSpacing(12)

        self.btn_previous = ActionButton(tr("button.back"), variant="secondary", width=110)
        self.btn_previous.clicked.connect(self._handle_previous)
        self.footer_layout.addWidget(self.btn_previous)

        self.footer_layout.addStretch()

        self.btn_next = ActionButton(self.get_next_button_text(), variant="primary")
        self.btn_next.setMinimumWidth(140)
        self.btn_next.clicked.connect(self._handle_next)
        self.footer_layout.addWidget(self.btn_next)

        return footer

    # =========================================================================
    # Navigation Handlers
    # =========================================================================

    def _handle_previous(self):
        """Handle back button click."""
        self.navigator.previous_step()

    def _handle_next(self):
        """Handle continue button click."""
        if self.navigator.is_last_step():
            self._handle_submit()
            return

        current_step = self.navigator.get_current_step()
        if current_step and current_step.attempt_continue():
            self.context.mark_step_completed(self.navigator.current_step)
            self.navigator.next_step()

    def _handle_submit(self):
        """Handle wizard submission."""
        current_step = self.navigator.get_current_step()
        if current_step:
            result = current_step.validate()
            current_step.set_errors(result.errors)
            if not result.is_valid:
                return
        self.on_submit()

    # =========================================================================
    # Event Handlers
    # =========================================================================

    def _on_step_changed(self, old_step: int, new_step: int):
        """Handle step change."""
        current = self.navigator.get_current_step()
        if current:
            self.step_container.setCurrentWidget(current)
        self._update_progress()
        self._update_navigation_buttons()

    def _update_progress(self):
        """Update progress indicator and step markers."""
        current = self.navigator.current_step
        total = self.navigator.get_step_count()
        step = self.navigator.get_current_step()

        self.progress_label.setText(tr("signup.progress", current=current, total=total))
        self.progress_bar.setValue(int(self.navigator.get_progress_percentage()))
        if step:
            self.step_title_label.setText(step.get_step_title())
            self.step_description_label.setText(step.get_step_description())

        for number, marker in enumerate(self.step_markers, start=1):
            state = self.navigator.get_step_state(number)
            title = self.steps[number - 1].get_step_title()
            marker.setText(f"{_MARKER_SYMBOLS[state]} {title}")
            marker.setStyleSheet(f"color: {_MARKER_COLORS[state]};")
            marker.setProperty("stepState", state.value)

    def _update_navigation_buttons(self, *args):
        """Update navigation button states."""
        self.btn_previous.setEnabled(self.navigator.can_go_previous())

        if self.navigator.is_last_step():
            self.btn_next.setText(self.get_submit_button_text())
        else:
            self.btn_next.setText(self.get_next_button_text())
