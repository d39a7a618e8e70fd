# -*- coding: utf-8 -*-
"""
Wizard Context - Base class for managing wizard state and data.

Provides unified interface for:
- Step position and completion tracking
- Merging step answers into the wizard's data
- Serialization for logging and review
"""

from typing import Dict, Any
from datetime import datetime
from abc import ABC, abstractmethod
import uuid


class WizardContext(ABC):
    """
    Base class for wizard context.

    Steps are numbered from 1. Subclasses own the actual data and implement:
    - update_data(): merge a partial dict of answers
    - get_data(): read one answer
    """

    def __init__(self):
        """Initialize base context properties."""
        self.wizard_id: str = str(uuid.uuid4())
        self.status: str = "in_progress"  # in_progress, completed, cancelled
        self.created_at: datetime = datetime.now()
        self.updated_at: datetime = datetime.now()
        self.current_step: int = 1

        # Step completion tracking
        self.completed_steps: set = set()

    def mark_step_completed(self, step: int):
        """Mark a step as completed."""
        self.completed_steps.add(step)
        self.touch()

    def touch(self):
        self.updated_at = datetime.now()

    @abstractmethod
    def update_data(self, partial: Dict[str, Any]):
        """
        Merge answers into the context.

        Keys not present in partial must keep their current value.
        """
        pass

    @abstractmethod
    def get_data(self, key: str, default: Any = None) -> Any:
        """Get one answer from the context."""
        pass

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize context to dictionary.

        Subclasses should call super().to_dict() and add their own fields.
        """
        return {
            "wizard_id": self.wizard_id,
            "status": self.status,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
            "current_step": self.current_step,
            "completed_steps": sorted(self.completed_steps),
        }
