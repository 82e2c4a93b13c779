"""Employee and payroll status state machines with transition validation."""

from __future__ import annotations

from enum import Enum

from hr_payroll.domain.errors import InvalidStateError


class EmploymentStatus(str, Enum):
    """Employment status values."""

    ACTIVE = "ACTIVE"
    ON_LEAVE = "ON_LEAVE"
    SUSPENDED = "SUSPENDED"
    TERMINATED = "TERMINATED"
    RESIGNED = "RESIGNED"


class PayrollStatus(str, Enum):
    """Payroll record status values."""

    PENDING = "PENDING"
    PROCESSED = "PROCESSED"
    PAID = "PAID"
    CANCELLED = "CANCELLED"


class InvalidTransitionError(InvalidStateError):
    """Raised when an invalid state transition is attempted."""

    def __init__(self, from_status: str, to_status: str, reason: str | None = None):
        self.from_status = from_status
        self.to_status = to_status
        self.reason = reason
        msg = f"Invalid transition from '{_name(from_status)}' to '{_name(to_status)}'"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)


def _name(status: str) -> str:
    return status.value if isinstance(status, Enum) else str(status)


class EmploymentStateMachine:
    """State machine for employee status transitions.

    Allowed transitions:
    - active → suspended
    - active/on_leave/suspended/resigned → active (reactivate)
    - any non-terminated status → terminated
    - terminated → nothing (terminal)

    ON_LEAVE and RESIGNED are never entered by a guarded method; storage
    collaborators may load records in those states.
    """

    VALID_TRANSITIONS: dict[str, list[str]] = {
        EmploymentStatus.ACTIVE: [
            EmploymentStatus.ACTIVE,
            EmploymentStatus.SUSPENDED,
            EmploymentStatus.TERMINATED,
        ],
        EmploymentStatus.ON_LEAVE: [EmploymentStatus.ACTIVE, EmploymentStatus.TERMINATED],
        EmploymentStatus.SUSPENDED: [EmploymentStatus.ACTIVE, EmploymentStatus.TERMINATED],
        EmploymentStatus.RESIGNED: [EmploymentStatus.ACTIVE, EmploymentStatus.TERMINATED],
        EmploymentStatus.TERMINATED: [],  # Terminal state
    }

    # Statuses where the employee may move between departments
    DEPARTMENT_CHANGE_ALLOWED = {EmploymentStatus.ACTIVE}

    @classmethod
    def can_transition(cls, from_status: str, to_status: str) -> bool:
        """Check if a transition is valid."""
        allowed = cls.VALID_TRANSITIONS.get(from_status, [])
        return to_status in allowed

    @classmethod
    def validate_transition(
        cls, from_status: str, to_status: str, reason: str | None = None
    ) -> None:
        """Validate a transition, raising InvalidTransitionError if invalid."""
        if not cls.can_transition(from_status, to_status):
            raise InvalidTransitionError(from_status, to_status, reason)

    @classmethod
    def can_change_department(cls, status: str) -> bool:
        return status in cls.DEPARTMENT_CHANGE_ALLOWED

    @classmethod
    def is_terminal(cls, status: str) -> bool:
        return not cls.VALID_TRANSITIONS.get(status, [])

    @classmethod
    def get_next_statuses(cls, current_status: str) -> list[str]:
        """Get list of valid next statuses from current status."""
        return cls.VALID_TRANSITIONS.get(current_status, [])


class PayrollStateMachine:
    """State machine for payroll status transitions.

    Allowed transitions:
    - pending → processed
    - processed → paid
    - pending → cancelled
    - processed → cancelled
    """

    VALID_TRANSITIONS: dict[str, list[str]] = {
        PayrollStatus.PENDING: [PayrollStatus.PROCESSED, PayrollStatus.CANCELLED],
        PayrollStatus.PROCESSED: [PayrollStatus.PAID, PayrollStatus.CANCELLED],
        PayrollStatus.PAID: [],  # Terminal state
        PayrollStatus.CANCELLED: [],  # Terminal state
    }

    # Statuses where bonuses and deductions may still be added
    AMOUNTS_MUTABLE = {
        PayrollStatus.PENDING,
        PayrollStatus.PROCESSED,
    }

    FINALIZED = {
        PayrollStatus.PAID,
        PayrollStatus.CANCELLED,
    }

    @classmethod
    def can_transition(cls, from_status: str, to_status: str) -> bool:
        """Check if a transition is valid."""
        allowed = cls.VALID_TRANSITIONS.get(from_status, [])
        return to_status in allowed

    @classmethod
    def validate_transition(
        cls, from_status: str, to_status: str, reason: str | None = None
    ) -> None:
        """Validate a transition, raising InvalidTransitionError if invalid."""
        if not cls.can_transition(from_status, to_status):
            raise InvalidTransitionError(from_status, to_status, reason)

    @classmethod
    def can_modify_amounts(cls, status: str) -> bool:
        """Check if bonuses and deductions can still be added."""
        return status in cls.AMOUNTS_MUTABLE

    @classmethod
    def is_finalized(cls, status: str) -> bool:
        return status in cls.FINALIZED

    @classmethod
    def get_next_statuses(cls, current_status: str) -> list[str]:
        """Get list of valid next statuses from current status."""
        return cls.VALID_TRANSITIONS.get(current_status, [])
