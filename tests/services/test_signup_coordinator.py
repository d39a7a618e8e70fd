# -*- coding: utf-8 -*-
"""
Tests for SubmissionCoordinator.

Tests cover:
- Success and delayed redirect
- Skip path (immediate redirect)
- Failure messages
- Shared in-flight guard
- Destruction while a request is running
"""

import pytest
from PyQt5 import sip

from conftest import BlockingAccountService, FakeAccountService
from models.signup import TeamInvite
from services.exceptions import ApiException
from services.signup_coordinator import (
    SubmissionCoordinator, SubmissionState, running_worker_count, wait_for_running_workers
)


@pytest.fixture
def coordinator(qapp, account_service):
    return SubmissionCoordinator(account_service, redirect_delay_ms=50)


class TestSuccess:
    """Test the happy path."""

    def test_submit_registers_once(self, qtbot, coordinator, account_service, complete_signup):
        with qtbot.waitSignal(coordinator.submission_succeeded, timeout=3000) as blocker:
            assert coordinator.submit(complete_signup) is True
            assert coordinator.is_loading is True
            assert coordinator.state == SubmissionState.SUBMITTING

        assert len(account_service.payloads) == 1
        assert account_service.payloads[0].email == "a@b.co"
        assert blocker.args[0].email == "a@b.co"
        assert coordinator.state == SubmissionState.SUCCESS
        assert coordinator.is_loading is False

    def test_redirect_after_delay_exactly_once(self, qtbot, coordinator, complete_signup):
        routes = []
        coordinator.navigation_requested.connect(routes.append)

        with qtbot.waitSignal(coordinator.submission_succeeded, timeout=3000):
            coordinator.submit(complete_signup)
        assert routes == []

        qtbot.waitUntil(lambda: routes == ["/"], timeout=3000)
        qtbot.wait(150)
        assert routes == ["/"]

    def test_skip_redirects_immediately(self, qtbot, coordinator, complete_signup):
        routes = []
        coordinator.navigation_requested.connect(routes.append)

        with qtbot.waitSignal(coordinator.submission_succeeded, timeout=3000):
            coordinator.submit(complete_signup, skip_invites=True)

        assert routes == ["/"]

    def test_invites_do_not_change_payload(self, qtbot, coordinator, account_service, complete_signup):
        complete_signup.invites = [TeamInvite(email="bob@acme.io")]
        with qtbot.waitSignal(coordinator.submission_succeeded, timeout=3000):
            coordinator.submit(complete_signup)
        assert "invites" not in account_service.payloads[0].to_dict()


class TestFailure:
    """Test error reporting."""

    def test_network_error(self, qtbot, qapp, complete_signup):
        coordinator = SubmissionCoordinator(FakeAccountService(error=RuntimeError("Network down")))
        routes = []
        coordinator.navigation_requested.connect(routes.append)

        with qtbot.waitSignal(coordinator.submission_failed, timeout=3000) as blocker:
            coordinator.submit(complete_signup)

        assert blocker.args == ["Network down"]
        assert coordinator.last_error == "Network down"
        assert coordinator.state == SubmissionState.FAILED
        assert coordinator.is_loading is False
        qtbot.wait(50)
        assert routes == []

    def test_server_message(self, qtbot, qapp, complete_signup):
        error = ApiException("409 Client Error", status_code=409,
                             response_data={"message": "Email already exists"})
        coordinator = SubmissionCoordinator(FakeAccountService(error=error))

        with qtbot.waitSignal(coordinator.submission_failed, timeout=3000) as blocker:
            coordinator.submit(complete_signup)

        assert blocker.args == ["Email already exists"]

    def test_retry_after_failure(self, qtbot, qapp, complete_signup):
        service = FakeAccountService(error=RuntimeError("Network down"))
        coordinator = SubmissionCoordinator(service, redirect_delay_ms=0)

        with qtbot.waitSignal(coordinator.submission_failed, timeout=3000):
            coordinator.submit(complete_signup)

        service.error = None
        with qtbot.waitSignal(coordinator.submission_succeeded, timeout=3000):
            assert coordinator.submit(complete_signup) is True
        assert coordinator.last_error == ""
        assert len(service.payloads) == 2

    def test_clear_error(self, qtbot, qapp, complete_signup):
        coordinator = SubmissionCoordinator(FakeAccountService(error=RuntimeError("boom")))
        with qtbot.waitSignal(coordinator.submission_failed, timeout=3000):
            coordinator.submit(complete_signup)
        coordinator.clear_error()
        assert coordinator.last_error == ""


class TestInFlightGuard:
    """Create and skip share one guard."""

    def test_second_submit_ignored_while_submitting(self, qtbot, coordinator, account_service, complete_signup):
        with qtbot.waitSignal(coordinator.submission_succeeded, timeout=3000):
            assert coordinator.submit(complete_signup) is True
            assert coordinator.submit(complete_signup) is False
            assert coordinator.submit(complete_signup, skip_invites=True) is False

        assert len(account_service.payloads) == 1

    def test_no_submit_after_success(self, qtbot, coordinator, account_service, complete_signup):
        with qtbot.waitSignal(coordinator.submission_succeeded, timeout=3000):
            coordinator.submit(complete_signup)

        assert coordinator.submit(complete_signup, skip_invites=True) is False
        assert len(account_service.payloads) == 1


class TestTeardown:
    """The coordinator may be destroyed while its register call is running."""

    def test_destroyed_mid_request(self, qtbot, qapp, complete_signup):
        qtbot.waitUntil(lambda: running_worker_count() == 0, timeout=3000)
        service = BlockingAccountService()
        coordinator = SubmissionCoordinator(service)
        results = []
        coordinator.submission_succeeded.connect(results.append)

        assert coordinator.submit(complete_signup) is True
        assert service.started.wait(3)
        assert running_worker_count() == 1

        sip.delete(coordinator)
        service.release.set()

        qtbot.waitUntil(lambda: running_worker_count() == 0, timeout=3000)
        assert len(service.payloads) == 1
        assert results == []

    def test_wait_for_running_workers(self, qtbot, coordinator, complete_signup):
        coordinator.submit(complete_signup)
        assert wait_for_running_workers(3000) is True
        qtbot.waitUntil(lambda: running_worker_count() == 0, timeout=3000)
