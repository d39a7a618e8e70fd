# -*- coding: utf-8 -*-
"""
Invite Team Step - Step 4 of the Signup Wizard.

Lets the user queue team invitations and creates the account.
The step owns the SubmissionCoordinator; the wizard footer buttons
("Create Account", "Skip for now") call submit().

Placeholder invites are listed while the user has added nobody. They are
examples only: read-only, never counted and never submitted.
"""

from typing import List, Optional

from PyQt5.QtWidgets import (
    QComboBox, QFrame, QHBoxLayout, QLabel, QVBoxLayout, QWidget
)
from PyQt5.QtCore import Qt
from PyQt5.QtGui import QFont

from ui.wizards.framework import BaseStep, StepValidationResult
from ui.wizards.signup.signup_context import SignupContext
from ui.wizards.signup.steps.form_fields import INPUT_STYLE, create_line_edit, labeled
from ui.components.action_button import ActionButton
from models.signup import DEFAULT_INVITE_ROLE, INVITE_ROLES, TeamInvite
from services.api_auth_service import AccountService
from services.signup_coordinator import SubmissionCoordinator
from services.wizard import SignupStepValidator
from services.translation_manager import tr, plural_suffix
from app.config import Config
from utils.logger import get_logger

logger = get_logger(__name__)


class InviteTeamStep(BaseStep):
    """Step 4: Team invites and account creation."""

    def __init__(self, context: SignupContext, account_service: AccountService,
                 redirect_delay_ms: Optional[int] = None, parent=None):
        super().__init__(context, parent)
        self._skip_requested = False

        self.coordinator = SubmissionCoordinator(
            account_service, redirect_delay_ms=redirect_delay_ms, parent=self
        )
        self.coordinator.submission_failed.connect(self._show_error)
        self.coordinator.submission_succeeded.connect(self._on_account_created)

    # =========================================================================
    # UI
    # =========================================================================

    def setup_ui(self):
        layout = self.main_layout

        # Submission error alert (dismissible)
        self.alert = QFrame()
        self.alert.setObjectName("submissionAlert")
        self.alert.setStyleSheet(f"""
            QFrame#submissionAlert {{
                background-color: {Config.ERROR_BACKGROUND};
                border: 1px solid {Config.ERROR_COLOR};
                border-radius: 6px;
            }}
        """)
        alert_layout = QHBoxLayout(self.alert)
        alert_layout.setContentsMargins(12, 8, 8, 8)
        self.alert_label = QLabel()
        self.alert_label.setWordWrap(True)
        self.alert_label.setStyleSheet(f"color: {Config.ERROR_COLOR}; border: none;")
        alert_layout.addWidget(self.alert_label, 1)
        self.btn_dismiss = ActionButton(tr("button.dismiss"), variant="ghost", height=30)
        self.btn_dismiss.clicked.connect(self.dismiss_error)
        alert_layout.addWidget(self.btn_dismiss)
        self.alert.setVisible(False)
        layout.addWidget(self.alert)

        self.form_view = self._create_form_view()
        layout.addWidget(self.form_view, 1)

        self.success_view = self._create_success_view()
        self.success_view.setVisible(False)
        layout.addWidget(self.success_view, 1)

    def _create_form_view(self) -> QWidget:
        view = QWidget()
        layout = QVBoxLayout(view)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(12)

        intro = QLabel(tr("signup.team.intro"))
        intro.setWordWrap(True)
        intro.setStyleSheet(f"color: {Config.TEXT_LIGHT};")
        layout.addWidget(intro)

        # Add-invite row
        add_title = QLabel(tr("signup.team.add_member"))
        add_title.setStyleSheet(f"color: {Config.TEXT_COLOR}; font-weight: 600;")
        layout.addWidget(add_title)

        add_row = QHBoxLayout()
        add_row.setSpacing(8)
        self.invite_email_input = create_line_edit(tr("signup.team.email_placeholder"))
        self.invite_name_input = create_line_edit(tr("signup.team.name_placeholder"))
        self.invite_role_combo = self._create_role_combo(DEFAULT_INVITE_ROLE)
        self.btn_add_invite = ActionButton(tr("button.add"), variant="outline", width=80)
        self.btn_add_invite.setEnabled(False)

        add_row.addWidget(labeled(tr("signup.team.email"), self.invite_email_input), 3)
        add_row.addWidget(labeled(tr("signup.team.name"), self.invite_name_input), 2)
        add_row.addWidget(labeled(tr("signup.team.role"), self.invite_role_combo), 1)
        add_row.addWidget(self.btn_add_invite, 0, Qt.AlignBottom)
        layout.addLayout(add_row)

        self.invite_email_input.textChanged.connect(
            lambda text: self.btn_add_invite.setEnabled(bool(text.strip()))
        )
        self.invite_email_input.returnPressed.connect(self.add_invite)
        self.btn_add_invite.clicked.connect(self.add_invite)

        # Invite list
        self.members_label = QLabel()
        members_font = QFont()
        members_font.setBold(True)
        self.members_label.setFont(members_font)
        layout.addWidget(self.members_label)

        self.invites_container = QWidget()
        self.invites_layout = QVBoxLayout(self.invites_container)
        self.invites_layout.setContentsMargins(0, 0, 0, 0)
        self.invites_layout.setSpacing(6)
        layout.addWidget(self.invites_container)

        layout.addStretch()
        return view

    def _create_success_view(self) -> QWidget:
        view = QWidget()
        layout = QVBoxLayout(view)
        layout.setAlignment(Qt.AlignCenter)
        layout.setSpacing(10)

        check = QLabel("✓")
        check.setAlignment(Qt.AlignCenter)
        check.setStyleSheet(f"color: {Config.SUCCESS_COLOR}; font-size: 40px;")
        layout.addWidget(check)

        self.success_title = QLabel(tr("signup.team.success_title"))
        title_font = QFont()
        title_font.setPointSize(16)
        title_font.setBold(True)
        self.success_title.setFont(title_font)
        self.success_title.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.success_title)

        self.success_message = QLabel(tr("signup.team.success_message"))
        self.success_message.setAlignment(Qt.AlignCenter)
        self.success_message.setStyleSheet(f"color: {Config.TEXT_LIGHT};")
        layout.addWidget(self.success_message)

        self.success_invites_label = QLabel()
        self.success_invites_label.setAlignment(Qt.AlignCenter)
        self.success_invites_label.setWordWrap(True)
        self.success_invites_label.setStyleSheet(f"color: {Config.TEXT_LIGHT};")
        self.success_invites_label.setVisible(False)
        layout.addWidget(self.success_invites_label)
        return view

    def _create_role_combo(self, role: str) -> QComboBox:
        combo = QComboBox()
        combo.setStyleSheet(INPUT_STYLE)
        combo.addItems(INVITE_ROLES)
        combo.setCurrentText(role)
        return combo

    def _create_invite_row(self, index: int, invite: TeamInvite, example: bool) -> QWidget:
        row = QFrame()
        row.setObjectName("inviteRow")
        row.setStyleSheet(f"""
            QFrame#inviteRow {{
                border: 1px solid {Config.BORDER_COLOR};
                border-radius: 6px;
                background-color: {Config.CARD_BACKGROUND};
            }}
        """)
        layout = QHBoxLayout(row)
        layout.setContentsMargins(12, 8, 8, 8)

        text = QVBoxLayout()
        text.setSpacing(2)
        name_label = QLabel(invite.display_name)
        name_label.setStyleSheet(f"color: {Config.TEXT_COLOR}; font-weight: 600; border: none;")
        text.addWidget(name_label)
        if invite.name:
            email_label = QLabel(invite.email)
            email_label.setStyleSheet(f"color: {Config.TEXT_LIGHT}; border: none;")
            text.addWidget(email_label)
        layout.addLayout(text, 1)

        if example:
            tag = QLabel(tr("signup.team.example"))
            tag.setStyleSheet(f"color: {Config.PENDING_COLOR}; font-style: italic; border: none;")
            layout.addWidget(tag)
            role_label = QLabel(invite.role)
            role_label.setStyleSheet(f"color: {Config.TEXT_LIGHT}; border: none;")
            layout.addWidget(role_label)
            row.setEnabled(False)
            return row

        role_combo = self._create_role_combo(invite.role)
        role_combo.currentTextChanged.connect(
            lambda role, index=index: self.change_invite_role(index, role)
        )
        layout.addWidget(role_combo)

        btn_remove = ActionButton(tr("button.remove"), variant="ghost", height=32)
        btn_remove.clicked.connect(lambda _checked=False, index=index: self.remove_invite(index))
        layout.addWidget(btn_remove)
        return row

    def _refresh_invites(self):
        """Rebuild the invite list from the context."""
        while self.invites_layout.count():
            item = self.invites_layout.takeAt(0)
            if item.widget():
                item.widget().deleteLater()

        signup = self.context.signup
        example = not signup.has_real_invites()
        self.invite_rows: List[QWidget] = []
        for index, invite in enumerate(signup.display_invites()):
            row = self._create_invite_row(index, invite, example)
            self.invites_layout.addWidget(row)
            self.invite_rows.append(row)

        self.members_label.setText(tr("signup.team.members", count=len(signup.invites)))

    def populate_data(self):
        self._refresh_invites()

    # =========================================================================
    # Invite editing
    # =========================================================================

    def add_invite(self):
        """Append the add-row entry to the user's invites."""
        email = self.invite_email_input.text().strip()
        if not email:
            return
        invite = TeamInvite(
            email=email,
            role=self.invite_role_combo.currentText(),
            name=self.invite_name_input.text().strip(),
        )
        self.save_to_context({"invites": list(self.context.signup.invites) + [invite]})
        logger.debug(f"Invite added: {invite.email} ({invite.role})")

        self.invite_email_input.clear()
        self.invite_name_input.clear()
        self.invite_role_combo.setCurrentText(DEFAULT_INVITE_ROLE)
        self._refresh_invites()

    def remove_invite(self, index: int):
        invites = list(self.context.signup.invites)
        if 0 <= index < len(invites):
            invites.pop(index)
            self.save_to_context({"invites": invites})
            self._refresh_invites()

    def change_invite_role(self, index: int, role: str):
        invites = list(self.context.signup.invites)
        if 0 <= index < len(invites):
            current = invites[index]
            invites[index] = TeamInvite(email=current.email, role=role, name=current.name)
            self.save_to_context({"invites": invites})

    # =========================================================================
    # Submission
    # =========================================================================

    def submit(self, skip_invites: bool = False) -> bool:
        """
        Create the account from the collected answers.

        Returns:
            False when a submission is already running or has succeeded
        """
        self.initialize()
        if self.coordinator.is_busy:
            return False
        self._skip_requested = skip_invites
        self.dismiss_error()
        return self.coordinator.submit(self.context.signup, skip_invites=skip_invites)

    def _show_error(self, message: str):
        self.alert_label.setText(message)
        self.alert.setVisible(True)

    def dismiss_error(self):
        self.coordinator.clear_error()
        self.alert_label.clear()
        self.alert.setVisible(False)

    def _on_account_created(self, user):
        if self._skip_requested:
            # Navigation follows immediately; no confirmation screen
            return
        count = len(self.context.signup.invites)
        if count:
            self.success_invites_label.setText(
                tr("signup.team.success_invites", count=count, plural=plural_suffix(count))
            )
            self.success_invites_label.setVisible(True)
        self.form_view.setVisible(False)
        self.success_view.setVisible(True)

    @property
    def is_success_shown(self) -> bool:
        return self._is_initialized and not self.success_view.isHidden()

    # =========================================================================
    # BaseStep
    # =========================================================================

    def validate(self) -> StepValidationResult:
        return self.create_validation_result(
            SignupStepValidator.validate_invites(self.context.signup)
        )

    def get_step_title(self) -> str:
        return tr("signup.step.team.title")

    def get_step_description(self) -> str:
        return tr("signup.step.team.description")
