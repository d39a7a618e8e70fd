# -*- coding: utf-8 -*-
"""
Tests for the SignupData aggregate.

Tests cover:
- Defaults
- Shallow merge updates (all-or-nothing)
- Placeholder invites
- Invite roles
"""

import pytest

from models.signup import (
    PLACEHOLDER_INVITES, SignupData, TeamInvite, founded_years
)


class TestDefaults:
    """Test a fresh record."""

    def test_all_fields_empty(self):
        data = SignupData()
        assert data.email == ""
        assert data.company_name == ""
        assert data.invites == []

    def test_placeholders_displayed_when_no_invites(self):
        data = SignupData()
        displayed = data.display_invites()
        assert len(displayed) == 3
        assert [invite.name for invite in displayed] == ["Jane Smith", "Mike Johnson", "Sarah Wilson"]
        assert data.has_real_invites() is False

    def test_placeholders_not_stored(self):
        data = SignupData()
        data.display_invites()
        assert data.invites == []


class TestUpdate:
    """Test merge semantics."""

    def test_update_keeps_other_fields(self):
        data = SignupData(email="x@y.z", password="p")
        data.update({"first_name": "Ada"})
        assert data.email == "x@y.z"
        assert data.password == "p"
        assert data.first_name == "Ada"

    def test_later_update_wins(self):
        data = SignupData()
        data.update({"company_name": "Old"})
        data.update({"company_name": "New"})
        assert data.company_name == "New"

    def test_camel_case_keys_accepted(self):
        data = SignupData()
        data.update({"firstName": "Ada", "companySize": "11-50", "confirmPassword": "pw"})
        assert data.first_name == "Ada"
        assert data.company_size == "11-50"
        assert data.confirm_password == "pw"

    def test_unknown_key_rejected(self):
        data = SignupData()
        with pytest.raises(KeyError):
            data.update({"favourite_color": "blue"})

    def test_unknown_key_leaves_record_untouched(self):
        data = SignupData(email="x@y.z")
        with pytest.raises(KeyError):
            data.update({"email": "new@y.z", "nope": 1})
        assert data.email == "x@y.z"

    def test_invite_dicts_converted(self):
        data = SignupData()
        data.update({"invites": [{"email": "bob@acme.io", "role": "Admin"}]})
        assert data.invites == [TeamInvite(email="bob@acme.io", role="Admin")]
        assert data.display_invites() == data.invites

    def test_duplicate_invites_allowed(self):
        data = SignupData()
        invite = TeamInvite(email="bob@acme.io")
        data.update({"invites": [invite, invite]})
        assert len(data.invites) == 2

    def test_bad_invite_leaves_record_untouched(self):
        data = SignupData(email="x@y.z")
        with pytest.raises(ValueError):
            data.update({"email": "new@y.z", "invites": [{"email": "bob@acme.io", "role": "Owner"}]})
        assert data.email == "x@y.z"
        assert data.invites == []

    @pytest.mark.parametrize("invites", [None, "bob@acme.io", {"email": "bob@acme.io"}, ["bob@acme.io"]])
    def test_invites_must_be_a_list_of_invites(self, invites):
        data = SignupData(company_name="Acme")
        with pytest.raises(ValueError):
            data.update({"company_name": "Other", "invites": invites})
        assert data.company_name == "Acme"
        assert data.invites == []

    @pytest.mark.parametrize("first, second", [
        ({"email": "a@b.co"}, {"first_name": "Ada"}),
        ({"company_name": "Old", "industry": "Retail"}, {"company_name": "New"}),
        ({"firstName": "Ada"}, {"last_name": "Lovelace", "jobTitle": "CEO"}),
        ({"invites": [{"email": "bob@acme.io"}]}, {"invites": [{"email": "eve@acme.io", "role": "Admin"}]}),
        ({"invites": [TeamInvite(email="bob@acme.io")]}, {"country": "Ghana"}),
    ])
    def test_sequential_updates_equal_one_merged_update(self, first, second):
        sequential = SignupData()
        sequential.update(first)
        sequential.update(second)

        merged = SignupData()
        merged.update({**first, **second})

        assert sequential == merged

    def test_from_dict_round_trips_invites(self):
        data = SignupData(email="a@b.co", invites=[TeamInvite(email="bob@acme.io", name="Bob")])
        assert SignupData.from_dict(data.to_dict()) == data


class TestTeamInvite:
    """Test invite entries."""

    def test_default_role(self):
        assert TeamInvite(email="bob@acme.io").role == "Employee"

    def test_invalid_role_rejected(self):
        with pytest.raises(ValueError):
            TeamInvite(email="bob@acme.io", role="Owner")

    def test_display_name_falls_back_to_email(self):
        assert TeamInvite(email="bob@acme.io").display_name == "bob@acme.io"
        assert TeamInvite(email="bob@acme.io", name="Bob").display_name == "Bob"

    def test_placeholder_roles(self):
        assert [invite.role for invite in PLACEHOLDER_INVITES] == ["Manager", "Employee", "Employee"]


def test_founded_years_newest_first():
    years = founded_years(5)
    assert len(years) == 5
    assert int(years[0]) - int(years[-1]) == 4
