# -*- coding: utf-8 -*-
"""
Base Step - Abstract base class for wizard steps.

All wizard steps should inherit from this class and implement:
- setup_ui(): Create the step's UI
- validate(): Validate step data
- populate_data(): Populate UI with data from the context (optional)

Validation errors are step-local: they are shown in the step's own
error box and never written to the context.
"""

from typing import List, Dict, Any, Optional
from abc import ABCMeta, abstractmethod
from dataclasses import dataclass, field

from PyQt5.QtWidgets import QWidget, QVBoxLayout, QLabel, QFrame
from PyQt5.QtCore import pyqtSignal

from app.config import Config
from utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class StepValidationResult:
    """Result of step validation."""
    errors: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0


# Combine PyQt5 metaclass with ABC metaclass
class ABCQWidgetMeta(type(QWidget), ABCMeta):
    """Metaclass that combines PyQt5's metaclass with ABC."""
    pass


class BaseStep(QWidget, metaclass=ABCQWidgetMeta):
    """
    Abstract base class for wizard steps.

    Provides common functionality for:
    - UI setup and lifecycle
    - Data validation and the error box
    - Writing answers to the context
    """

    # Signals
    step_data_changed = pyqtSignal(dict)

    def __init__(self, context: 'WizardContext', parent: Optional[QWidget] = None):
        """
        Initialize the step.

        Args:
            context: The wizard context for data sharing
            parent: Parent widget
        """
        super().__init__(parent)
        self.context = context
        self._is_initialized = False
        self._populating = False
        self.errors: List[str] = []

        # Main layout
        self.main_layout = QVBoxLayout(self)
        self.main_layout.setContentsMargins(24, 20, 24, 20)
        self.main_layout.setSpacing(14)

        # Error box (hidden until a failed validation)
        self.error_box = QFrame()
        self.error_box.setObjectName("stepErrorBox")
        self.error_box.setStyleSheet(f"""
            QFrame#stepErrorBox {{
                background-color: {Config.ERROR_BACKGROUND};
                border: 1px solid {Config.ERROR_COLOR};
                border-radius: 6px;
            }}
        """)
        error_layout = QVBoxLayout(self.error_box)
        error_layout.setContentsMargins(12, 10, 12, 10)
        self.error_label = QLabel()
        self.error_label.setWordWrap(True)
        self.error_label.setStyleSheet(f"color: {Config.ERROR_COLOR}; border: none;")
        error_layout.addWidget(self.error_label)
        self.error_box.setVisible(False)
        self.main_layout.addWidget(self.error_box)

    def initialize(self):
        """
        Initialize the step (called once).

        This method is called the first time the step is shown.
        """
        if not self._is_initialized:
            self.setup_ui()
            self._is_initialized = True

    def on_show(self):
        """Called when the step becomes the active step."""
        if not self._is_initialized:
            self.initialize()
        self._populating = True
        try:
            self.populate_data()
        finally:
            self._populating = False

    def on_hide(self):
        """Called when the wizard moves to another step."""
        pass

    # =========================================================================
    # Abstract Methods - Must be implemented by subclasses
    # =========================================================================

    @abstractmethod
    def setup_ui(self):
        """
        Setup the step's UI.

        This method is called once during initialization.
        Create all widgets and layouts here.
        """
        pass

    @abstractmethod
    def validate(self) -> StepValidationResult:
        """
        Validate the step's data.

        Returns:
            StepValidationResult with the error messages
        """
        pass

    # =========================================================================
    # Optional Methods - Can be overridden by subclasses
    # =========================================================================

    def populate_data(self):
        """
        Populate the step's UI with data from context.

        Override this method to restore data when navigating back to the step.
        """
        pass

    def get_step_title(self) -> str:
        return self.__class__.__name__

    def get_step_description(self) -> str:
        return ""

    # =========================================================================
    # Validation
    # =========================================================================

    def attempt_continue(self) -> bool:
        """
        Validate on a continue attempt.

        Shows the errors when invalid.

        Returns:
            True if the wizard may advance
        """
        result = self.validate()
        self.set_errors(result.errors)
        if not result.is_valid:
            logger.debug(f"{self.get_step_title()} blocked: {result.errors}")
            return False

        return True

    def set_errors(self, errors: List[str]):
        """Show (or clear) the step's error list."""
        self.errors = list(errors)
        self.error_label.setText("\n".join(f"• {error}" for error in self.errors))
        self.error_box.setVisible(bool(self.errors))

    def clear_errors(self):
        self.set_errors([])

    # =========================================================================
    # Helper Methods
    # =========================================================================

    def save_to_context(self, partial: Dict[str, Any]):
        """Merge answers into the context (ignored while populating widgets)."""
        if self._populating:
            return
        self.context.update_data(partial)
        self.step_data_changed.emit(partial)

    def create_validation_result(self, errors: Optional[List[str]] = None) -> StepValidationResult:
        """Create a new validation result object."""
        return StepValidationResult(errors=list(errors or []))
