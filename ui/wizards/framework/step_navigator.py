# -*- coding: utf-8 -*-
"""
Step Navigator - Manages navigation between wizard steps.

Handles:
- Step progression (next/previous), clamped to the first and last step
- Progress tracking
- Step state projection (complete / current / pending)
- Step lifecycle (show/hide)

Steps are numbered from 1. Navigation never validates: a step validates
itself before asking the wizard to advance.
"""

from enum import Enum
from typing import List, Optional

from PyQt5.QtCore import QObject, pyqtSignal

from .base_step import BaseStep
from .wizard_context import WizardContext
from utils.logger import get_logger

logger = get_logger(__name__)


class StepState(Enum):
    COMPLETE = "complete"
    CURRENT = "current"
    PENDING = "pending"


class StepNavigator(QObject):
    """
    Manages navigation between wizard steps.

    Responsibilities:
    - Track current step (kept on the context)
    - Emit signals for UI updates
    - Manage step lifecycle (show/hide)
    """

    # Signals
    step_changed = pyqtSignal(int, int)  # old_step, new_step
    can_go_previous_changed = pyqtSignal(bool)

    def __init__(self, context: WizardContext, steps: List[BaseStep]):
        """
        Initialize the navigator.

        Args:
            context: Wizard context
            steps: List of wizard steps (step 1 first)
        """
        super().__init__()
        self.context = context
        self.steps = steps

    @property
    def current_step(self) -> int:
        return self.context.current_step

    def get_current_step(self) -> Optional[BaseStep]:
        """Get the active step widget, or None for an out-of-range position."""
        if 1 <= self.current_step <= len(self.steps):
            return self.steps[self.current_step - 1]
        return None

    def get_step_count(self) -> int:
        return len(self.steps)

    def is_last_step(self) -> bool:
        return self.current_step == len(self.steps)

    def can_go_next(self) -> bool:
        return self.current_step < len(self.steps)

    def can_go_previous(self) -> bool:
        return self.current_step > 1

    def start(self):
        """Show the current step (first show after the wizard is built)."""
        step = self.get_current_step()
        if step:
            step.on_show()
        self.step_changed.emit(self.current_step, self.current_step)
        self.can_go_previous_changed.emit(self.can_go_previous())

    def next_step(self) -> bool:
        """
        Move one step forward, never past the last step.

        Returns:
            True if the position changed
        """
        if not self.can_go_next():
            logger.debug(f"Cannot go next: already at last step ({self.current_step})")
        return self._navigate_to(min(self.current_step + 1, len(self.steps)))

    def previous_step(self) -> bool:
        """
        Move one step back, never before step 1. Entered data is kept.

        Returns:
            True if the position changed
        """
        if not self.can_go_previous():
            logger.debug(f"Cannot go previous: already at first step ({self.current_step})")
        return self._navigate_to(max(self.current_step - 1, 1))

    def goto_step(self, step: int) -> bool:
        """Jump to a step; out-of-range values are clamped."""
        return self._navigate_to(max(1, min(step, len(self.steps))))

    def _navigate_to(self, new_step: int) -> bool:
        old_step = self.current_step
        if new_step == old_step:
            return False

        logger.info(f"Navigating: Step {old_step} → {new_step}")

        current = self.get_current_step()
        if current:
            current.on_hide()

        self.context.current_step = new_step
        self.context.touch()

        new = self.get_current_step()
        if new:
            new.on_show()

        self.step_changed.emit(old_step, new_step)
        self.can_go_previous_changed.emit(self.can_go_previous())
        return True

    def get_progress_percentage(self) -> float:
        """
        Get current progress as percentage.

        Returns:
            current_step / step_count * 100 (0.0 when there are no steps)
        """
        if len(self.steps) == 0:
            return 0.0
        return (self.current_step / len(self.steps)) * 100.0

    def get_step_state(self, step: int) -> StepState:
        """State of a step marker, derived from the current position only."""
        if step < self.current_step:
            return StepState.COMPLETE
        if step == self.current_step:
            return StepState.CURRENT
        return StepState.PENDING
