# -*- coding: utf-8 -*-
"""
Signup Wizard.

Four-step account creation flow built on the Wizard Framework.

Steps:
1. Account - Email and password
2. Profile - Personal information
3. Company - Company details
4. Team - Invite the team and create the account
"""

from typing import Any, Dict, List, Optional

from PyQt5.QtCore import pyqtSignal
from PyQt5.QtWidgets import QWidget

from ui.wizards.framework import BaseWizard, BaseStep
from ui.wizards.signup.signup_context import SignupContext
from ui.wizards.signup.steps import CredentialsStep, ProfileStep, CompanyStep, InviteTeamStep
from ui.components.action_button import ActionButton
from models.signup import SignupData
from services.api_auth_service import AccountService, ApiAuthService
from services.translation_manager import tr, plural_suffix
from utils.logger import get_logger

logger = get_logger(__name__)


class SignupWizard(BaseWizard):
    """
    Signup Wizard.

    Signals:
        account_created(User): the register call succeeded
        navigation_requested(str): route to open once signup is done
    """

    account_created = pyqtSignal(object)
    navigation_requested = pyqtSignal(str)

    def __init__(self, account_service: Optional[AccountService] = None,
                 redirect_delay_ms: Optional[int] = None, parent: Optional[QWidget] = None):
        self.account_service = account_service or ApiAuthService()
        self.redirect_delay_ms = redirect_delay_ms
        super().__init__(parent)

        coordinator = self.invite_step.coordinator
        coordinator.loading_changed.connect(self._on_loading_changed)
        coordinator.submission_succeeded.connect(self._on_account_created)
        coordinator.navigation_requested.connect(self.navigation_requested.emit)
        self.invite_step.step_data_changed.connect(self._update_navigation_buttons)

    def create_context(self) -> SignupContext:
        return SignupContext()

    def create_steps(self) -> List[BaseStep]:
        self.invite_step = InviteTeamStep(
            self.context, self.account_service, self.redirect_delay_ms, self
        )
        return [
            CredentialsStep(self.context, self),
            ProfileStep(self.context, self),
            CompanyStep(self.context, self),
            self.invite_step,
        ]

    # =========================================================================
    # Data
    # =========================================================================

    @property
    def data(self) -> SignupData:
        return self.context.signup

    def update_data(self, partial: Dict[str, Any]):
        """Merge answers into the signup record; other fields are kept."""
        self.context.update_data(partial)

    # =========================================================================
    # BaseWizard hooks
    # =========================================================================

    def get_wizard_title(self) -> str:
        return tr("signup.title")

    def get_wizard_subtitle(self) -> str:
        return tr("signup.subtitle")

    def get_submit_button_text(self) -> str:
        if self.invite_step.coordinator.is_loading:
            return tr("button.creating_account")
        count = len(self.context.signup.invites)
        if count:
            return tr("button.create_account_with_invites", count=count, plural=plural_suffix(count))
        return tr("button.create_account")

    def _create_footer(self) -> QWidget:
        footer = super()._create_footer()
        self.btn_skip = ActionButton(tr("button.skip_invites"), variant="outline")
        self.btn_skip.clicked.connect(self._handle_skip)
        # Between the stretch and the submit button
        self.footer_layout.insertWidget(self.footer_layout.indexOf(self.btn_next), self.btn_skip)
        return footer

    def on_submit(self):
        logger.info("Create account requested")
        self.invite_step.submit(skip_invites=False)

    def _handle_skip(self):
        logger.info("Skip invites requested")
        self.invite_step.submit(skip_invites=True)

    # =========================================================================
    # Submission feedback
    # =========================================================================

    def _on_loading_changed(self, loading: bool):
        self._update_navigation_buttons()

    def _on_account_created(self, user):
        self.context.status = "completed"
        self.context.touch()
        self.footer.setVisible(False)
        self.account_created.emit(user)

    def _update_navigation_buttons(self, *args):
        super()._update_navigation_buttons()
        loading = self.invite_step.coordinator.is_loading
        self.btn_skip.setVisible(self.navigator.is_last_step())
        self.btn_skip.setEnabled(not loading)
        self.btn_next.setEnabled(not loading)
        self.btn_previous.setEnabled(self.navigator.can_go_previous() and not loading)
