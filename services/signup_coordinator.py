# -*- coding: utf-8 -*-
"""
Signup Submission Coordinator.

Turns the finished signup answers into exactly one register call and
reports the outcome:

    IDLE -> SUBMITTING -> SUCCESS   (terminal, navigation follows)
                       -> FAILED    (user may submit again)

"Create Account" and "Skip for now" share one in-flight guard, so at most
one register request exists at any time.
"""

from enum import Enum
from typing import List, Optional, Set

from PyQt5.QtCore import QObject, QThread, QTimer, pyqtSignal

from app.config import Config, Routes
from models.signup import SignupData, TeamInvite
from services.api_auth_service import AccountService
from services.error_mapper import map_exception
from services.signup_payload import SignupPayload, build_signup_payload
from services.translation_manager import tr
from utils.logger import get_logger

logger = get_logger(__name__)


class SubmissionState(Enum):
    IDLE = "idle"
    SUBMITTING = "submitting"
    SUCCESS = "success"
    FAILED = "failed"


class RegisterWorker(QThread):
    """Background worker for the register call."""

    completed = pyqtSignal(object, object)  # user, error

    def __init__(self, account_service: AccountService, payload: SignupPayload, parent=None):
        super().__init__(parent)
        self.account_service = account_service
        self.payload = payload

    def abandon(self):
        """Drop the result; the call still runs to completion."""
        try:
            self.completed.disconnect()
        except TypeError:
            # Nothing connected
            pass

    def run(self):
        """Run the register call in background."""
        try:
            user = self.account_service.register(self.payload)
        except Exception as e:
            # Delivered to the coordinator on the UI thread
            self.completed.emit(None, e)
            return
        self.completed.emit(user, None)


# Running workers, kept alive independently of the coordinator that started
# them. A QThread must never be destroyed while its run() is executing.
_running_workers: Set[RegisterWorker] = set()


def _track_worker(worker: RegisterWorker):
    _running_workers.add(worker)
    worker.finished.connect(lambda: _forget_worker(worker))


def _forget_worker(worker: RegisterWorker):
    # finished is emitted just before the thread exits
    worker.wait()
    _running_workers.discard(worker)
    worker.deleteLater()


def running_worker_count() -> int:
    return len(_running_workers)


def wait_for_running_workers(msecs: int = -1) -> bool:
    """
    Block until every register call has returned (application shutdown).

    Returns:
        False if a worker was still running when msecs elapsed
    """
    finished = True
    for worker in list(_running_workers):
        worker.abandon()
        if msecs < 0:
            worker.wait()
        else:
            finished = worker.wait(msecs) and finished
    return finished


class SubmissionCoordinator(QObject):
    """
    Owns the account-creation request of the signup wizard.

    Signals:
        state_changed(SubmissionState)
        loading_changed(bool)
        submission_succeeded(User)
        submission_failed(str): user-facing error message
        navigation_requested(str): route to open after success
    """

    state_changed = pyqtSignal(object)
    loading_changed = pyqtSignal(bool)
    submission_succeeded = pyqtSignal(object)
    submission_failed = pyqtSignal(str)
    navigation_requested = pyqtSignal(str)

    def __init__(self, account_service: AccountService,
                 redirect_delay_ms: Optional[int] = None, parent=None):
        super().__init__(parent)
        self.account_service = account_service
        self.redirect_delay_ms = (
            Config.SIGNUP_REDIRECT_DELAY_MS if redirect_delay_ms is None else redirect_delay_ms
        )

        self._state = SubmissionState.IDLE
        self._is_loading = False
        self._skip_invites = False
        self._pending_invites: List[TeamInvite] = []
        self._redirected = False
        self._worker: Optional[RegisterWorker] = None

        self.last_error: str = ""
        self.user = None

    # =========================================================================
    # State
    # =========================================================================

    @property
    def state(self) -> SubmissionState:
        return self._state

    @property
    def is_loading(self) -> bool:
        return self._is_loading

    @property
    def is_busy(self) -> bool:
        return self._state in (SubmissionState.SUBMITTING, SubmissionState.SUCCESS)

    def _set_state(self, state: SubmissionState):
        if state != self._state:
            logger.debug(f"Submission state: {self._state.value} -> {state.value}")
            self._state = state
            self.state_changed.emit(state)

    def _set_loading(self, loading: bool):
        if loading != self._is_loading:
            self._is_loading = loading
            self.loading_changed.emit(loading)

    def clear_error(self):
        """Dismiss the last error message."""
        self.last_error = ""

    # =========================================================================
    # Submission
    # =========================================================================

    def submit(self, data: SignupData, skip_invites: bool = False) -> bool:
        """
        Start account creation.

        Args:
            data: the complete signup answers
            skip_invites: "Skip for now" path; navigates right after success

        Returns:
            False if a request is already running or the account already exists
        """
        if self.is_busy:
            logger.warning(f"Ignoring submit while {self._state.value}")
            return False

        self.last_error = ""
        self._skip_invites = skip_invites
        self._pending_invites = list(data.invites)

        payload = build_signup_payload(data)

        self._set_loading(True)
        self._set_state(SubmissionState.SUBMITTING)
        logger.info(
            f"Submitting signup for {payload.email}"
            f"{' (skip invites)' if skip_invites else ''}"
        )

        self._worker = RegisterWorker(self.account_service, payload)
        self._worker.completed.connect(self._on_register_completed)
        self.destroyed.connect(self._worker.abandon)
        _track_worker(self._worker)
        self._worker.start()
        return True

    def _on_register_completed(self, user, error):
        self._worker = None
        try:
            if error is None:
                self._handle_success(user)
            else:
                self._handle_failure(error)
        finally:
            self._set_loading(False)

    def _handle_success(self, user):
        self.user = user
        logger.info(f"Signup successful: {getattr(user, 'email', user)}")

        if self._pending_invites and not self._skip_invites:
            # No invitation endpoint yet; kept for the follow-up request
            logger.info(
                f"Team invites to be sent ({len(self._pending_invites)}): "
                f"{[invite.email for invite in self._pending_invites]}"
            )

        self._set_state(SubmissionState.SUCCESS)
        self.submission_succeeded.emit(user)

        if self._skip_invites:
            self._redirect()
        else:
            QTimer.singleShot(self.redirect_delay_ms, self._redirect)

    def _handle_failure(self, error: Exception):
        message = map_exception(error, tr("error.signup.failed"))
        logger.error(f"Signup error: {error}", exc_info=error)
        response_data = getattr(error, "response_data", None)
        if response_data:
            logger.error(f"Error response: {response_data}")

        self.last_error = message
        self._set_state(SubmissionState.FAILED)
        self.submission_failed.emit(message)

    def _redirect(self):
        if self._redirected:
            return
        self._redirected = True
        logger.info(f"Redirecting to {Routes.HOME}")
        self.navigation_requested.emit(Routes.HOME)
