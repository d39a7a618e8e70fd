# -*- coding: utf-8 -*-
"""
Credentials Step - Step 1 of the Signup Wizard.

Collects email, password and password confirmation.
"""

from PyQt5.QtWidgets import QCheckBox, QLineEdit

from ui.wizards.framework import BaseStep, StepValidationResult
from ui.wizards.signup.steps.form_fields import create_line_edit, labeled
from services.wizard import SignupStepValidator
from services.translation_manager import tr
from app.config import Config


class CredentialsStep(BaseStep):
    """Step 1: Account credentials."""

    def setup_ui(self):
        layout = self.main_layout

        self.email_input = create_line_edit(tr("signup.credentials.email_placeholder"))
        layout.addWidget(labeled(tr("signup.credentials.email"), self.email_input))

        self.password_input = create_line_edit(
            tr("signup.credentials.password_placeholder"), password=True
        )
        layout.addWidget(labeled(
            tr("signup.credentials.password"),
            self.password_input,
            hint=tr("signup.credentials.password_hint"),
        ))

        self.confirm_input = create_line_edit(
            tr("signup.credentials.confirm_placeholder"), password=True
        )
        layout.addWidget(labeled(tr("signup.credentials.confirm_password"), self.confirm_input))

        self.show_password_check = QCheckBox(tr("signup.credentials.show_password"))
        self.show_password_check.setStyleSheet(f"color: {Config.TEXT_LIGHT};")
        self.show_password_check.toggled.connect(self._toggle_password_visibility)
        layout.addWidget(self.show_password_check)

        layout.addStretch()

        self.email_input.textChanged.connect(lambda text: self.save_to_context({"email": text}))
        self.password_input.textChanged.connect(lambda text: self.save_to_context({"password": text}))
        self.confirm_input.textChanged.connect(
            lambda text: self.save_to_context({"confirm_password": text})
        )

    def _toggle_password_visibility(self, visible: bool):
        mode = QLineEdit.Normal if visible else QLineEdit.Password
        self.password_input.setEchoMode(mode)
        self.confirm_input.setEchoMode(mode)

    def populate_data(self):
        signup = self.context.signup
        self.email_input.setText(signup.email)
        self.password_input.setText(signup.password)
        self.confirm_input.setText(signup.confirm_password)

    def validate(self) -> StepValidationResult:
        return self.create_validation_result(
            SignupStepValidator.validate_credentials(self.context.signup)
        )

    def get_step_title(self) -> str:
        return tr("signup.step.account.title")

    def get_step_description(self) -> str:
        return tr("signup.step.account.description")
