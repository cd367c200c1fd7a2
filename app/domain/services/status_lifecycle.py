"""
Status lifecycle of the two submission kinds.

The transition tables describe the path an admin normally walks a
submission through. By default they are informational only: any status
in the enum may be assigned at any time, which is how the admin
dashboard has always behaved. Set ``ENFORCE_STATUS_TRANSITIONS=true`` to
reject moves that are not in the table.
"""
import logging
from enum import Enum
from typing import Dict, FrozenSet, Optional, Type

from app.core import config
from app.domain.entities.CellTherapyInterestEntity import CellTherapyStatus
from app.domain.entities.RegistrationEntity import RegistrationStatus
from app.domain.exceptions import ValidationError

logger = logging.getLogger(__name__)

REGISTRATION_TRANSITIONS: Dict[RegistrationStatus, FrozenSet[RegistrationStatus]] = {
    RegistrationStatus.PENDING: frozenset({RegistrationStatus.REVIEWED}),
    RegistrationStatus.REVIEWED: frozenset({RegistrationStatus.APPROVED, RegistrationStatus.REJECTED}),
    RegistrationStatus.APPROVED: frozenset(),
    RegistrationStatus.REJECTED: frozenset(),
}

CELL_THERAPY_TRANSITIONS: Dict[CellTherapyStatus, FrozenSet[CellTherapyStatus]] = {
    CellTherapyStatus.PENDING: frozenset({CellTherapyStatus.CONTACTED}),
    CellTherapyStatus.CONTACTED: frozenset({CellTherapyStatus.ELIGIBLE, CellTherapyStatus.NOT_ELIGIBLE}),
    CellTherapyStatus.ELIGIBLE: frozenset({CellTherapyStatus.ENROLLED, CellTherapyStatus.WITHDRAWN}),
    CellTherapyStatus.NOT_ELIGIBLE: frozenset({CellTherapyStatus.WITHDRAWN}),
    CellTherapyStatus.ENROLLED: frozenset(),
    CellTherapyStatus.WITHDRAWN: frozenset(),
}


class StatusLifecycle:
    def __init__(self, status_enum: Type[Enum], transitions: Dict, enforce: Optional[bool] = None):
        self.status_enum = status_enum
        self.transitions = transitions
        self._enforce = enforce

    @property
    def enforce(self) -> bool:
        if self._enforce is None:
            return config.ENFORCE_STATUS_TRANSITIONS
        return self._enforce

    @property
    def initial(self) -> str:
        return self.status_enum("pending").value

    def is_allowed(self, current: str, target: str) -> bool:
        if current == target:
            return True
        return self.status_enum(target) in self.transitions[self.status_enum(current)]

    def is_terminal(self, status: str) -> bool:
        return not self.transitions[self.status_enum(status)]

    def check_transition(self, current: str, target: str) -> str:
        """Return ``target`` if the move is acceptable, else raise ``ValidationError``."""
        try:
            self.status_enum(target)
        except ValueError:
            allowed = ", ".join(s.value for s in self.status_enum)
            raise ValidationError.for_field("status", f"Status must be one of: {allowed}")

        if self.is_allowed(current, target):
            return target

        if self.enforce:
            raise ValidationError.for_field(
                "status", f"Cannot change status from '{current}' to '{target}'"
            )

        logger.info("Status jump %s -> %s is outside the usual lifecycle", current, target)
        return target


registration_lifecycle = StatusLifecycle(RegistrationStatus, REGISTRATION_TRANSITIONS)
cell_therapy_lifecycle = StatusLifecycle(CellTherapyStatus, CELL_THERAPY_TRANSITIONS)
