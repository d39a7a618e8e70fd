# -*- coding: utf-8 -*-
"""
Profile Step - Step 2 of the Signup Wizard.

Collects the user's name, job title and phone number.
"""

from PyQt5.QtWidgets import QCompleter, QHBoxLayout, QLabel
from PyQt5.QtCore import Qt

from ui.wizards.framework import BaseStep, StepValidationResult
from ui.wizards.signup.steps.form_fields import create_line_edit, labeled
from models.signup import JOB_TITLE_SUGGESTIONS
from services.wizard import SignupStepValidator
from services.translation_manager import tr
from app.config import Config


class ProfileStep(BaseStep):
    """Step 2: Personal profile."""

    def setup_ui(self):
        layout = self.main_layout

        intro = QLabel(tr("signup.profile.intro"))
        intro.setWordWrap(True)
        intro.setStyleSheet(f"color: {Config.TEXT_LIGHT};")
        layout.addWidget(intro)

        name_row = QHBoxLayout()
        name_row.setSpacing(12)
        self.first_name_input = create_line_edit()
        self.last_name_input = create_line_edit()
        name_row.addWidget(labeled(tr("signup.profile.first_name"), self.first_name_input))
        name_row.addWidget(labeled(tr("signup.profile.last_name"), self.last_name_input))
        layout.addLayout(name_row)

        self.job_title_input = create_line_edit(tr("signup.profile.job_title_placeholder"))
        completer = QCompleter(JOB_TITLE_SUGGESTIONS, self.job_title_input)
        completer.setCaseSensitivity(Qt.CaseInsensitive)
        self.job_title_input.setCompleter(completer)
        layout.addWidget(labeled(tr("signup.profile.job_title"), self.job_title_input))

        self.phone_input = create_line_edit()
        layout.addWidget(labeled(tr("signup.profile.phone"), self.phone_input))

        layout.addStretch()

        bindings = (
            (self.first_name_input, "first_name"),
            (self.last_name_input, "last_name"),
            (self.job_title_input, "job_title"),
            (self.phone_input, "user_phone"),
        )
        for widget, key in bindings:
            widget.textChanged.connect(lambda text, key=key: self.save_to_context({key: text}))

    def populate_data(self):
        signup = self.context.signup
        self.first_name_input.setText(signup.first_name)
        self.last_name_input.setText(signup.last_name)
        self.job_title_input.setText(signup.job_title)
        self.phone_input.setText(signup.user_phone)

    def validate(self) -> StepValidationResult:
        return self.create_validation_result(
            SignupStepValidator.validate_profile(self.context.signup)
        )

    def get_step_title(self) -> str:
        return tr("signup.step.profile.title")

    def get_step_description(self) -> str:
        return tr("signup.step.profile.description")
