import pytest

from app.domain.entities.CellTherapyInterestEntity import CellTherapyStatus
from app.domain.entities.RegistrationEntity import RegistrationStatus
from app.domain.exceptions import ValidationError
from app.domain.services.status_lifecycle import (
    CELL_THERAPY_TRANSITIONS,
    REGISTRATION_TRANSITIONS,
    StatusLifecycle,
    cell_therapy_lifecycle,
    registration_lifecycle,
)


def test_initial_status_is_pending():
    assert registration_lifecycle.initial == "pending"
    assert cell_therapy_lifecycle.initial == "pending"


def test_every_status_has_a_transition_entry():
    assert set(REGISTRATION_TRANSITIONS) == set(RegistrationStatus)
    assert set(CELL_THERAPY_TRANSITIONS) == set(CellTherapyStatus)


def test_terminal_statuses():
    assert registration_lifecycle.is_terminal("approved")
    assert registration_lifecycle.is_terminal("rejected")
    assert not registration_lifecycle.is_terminal("reviewed")
    assert cell_therapy_lifecycle.is_terminal("enrolled")
    assert cell_therapy_lifecycle.is_terminal("withdrawn")


def test_open_mode_allows_any_jump():
    lifecycle = StatusLifecycle(CellTherapyStatus, CELL_THERAPY_TRANSITIONS, enforce=False)
    assert lifecycle.check_transition("pending", "enrolled") == "enrolled"
    assert lifecycle.check_transition("withdrawn", "pending") == "pending"


@pytest.mark.parametrize("enforce", [True, False])
def test_unknown_status_always_rejected(enforce):
    lifecycle = StatusLifecycle(RegistrationStatus, REGISTRATION_TRANSITIONS, enforce=enforce)
    with pytest.raises(ValidationError):
        lifecycle.check_transition("pending", "archived")


class TestEnforcedLifecycle:
    lifecycle = StatusLifecycle(CellTherapyStatus, CELL_THERAPY_TRANSITIONS, enforce=True)

    @pytest.mark.parametrize("current, target", [
        ("pending", "contacted"),
        ("contacted", "eligible"),
        ("contacted", "not_eligible"),
        ("eligible", "enrolled"),
        ("eligible", "withdrawn"),
        ("not_eligible", "withdrawn"),
        ("eligible", "eligible"),
    ])
    def test_allowed(self, current, target):
        assert self.lifecycle.check_transition(current, target) == target

    @pytest.mark.parametrize("current, target", [
        ("pending", "eligible"),
        ("pending", "enrolled"),
        ("enrolled", "pending"),
        ("not_eligible", "enrolled"),
    ])
    def test_rejected(self, current, target):
        with pytest.raises(ValidationError) as exc_info:
            self.lifecycle.check_transition(current, target)
        assert exc_info.value.errors[0]["field"] == "status"


def test_enforcement_follows_config(monkeypatch):
    from app.core import config

    monkeypatch.setattr(config, "ENFORCE_STATUS_TRANSITIONS", True)
    with pytest.raises(ValidationError):
        registration_lifecycle.check_transition("pending", "approved")

    monkeypatch.setattr(config, "ENFORCE_STATUS_TRANSITIONS", False)
    assert registration_lifecycle.check_transition("pending", "approved") == "approved"
