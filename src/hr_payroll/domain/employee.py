"""Employee aggregate and its email value object."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date
from uuid import uuid4

from hr_payroll.domain.aggregate import AggregateRoot, Clock
from hr_payroll.domain.errors import (
    CurrencyMismatchError,
    InvalidArgumentError,
    InvalidStateError,
)
from hr_payroll.domain.events import (
    EmployeeCreated,
    EmployeeDepartmentChanged,
    EmployeePromoted,
    EmployeeStatusChanged,
    EmployeeTerminated,
    EmployeeUpdated,
    EventMetadata,
    SalaryAdjusted,
)
from hr_payroll.domain.identifiers import DepartmentId, EmployeeId, IdGenerator
from hr_payroll.domain.money import Money
from hr_payroll.domain.state_machine import (
    EmploymentStateMachine,
    EmploymentStatus,
    InvalidTransitionError,
)

MINIMUM_HIRE_AGE = 18
MINIMUM_NAME_LENGTH = 2

_EMAIL_PATTERN = re.compile(r"[A-Za-z0-9+_.-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}")


@dataclass(frozen=True)
class Email:
    """A syntactically valid, lower-cased email address."""

    value: str

    def __post_init__(self) -> None:
        if self.value is None or not str(self.value).strip():
            raise InvalidArgumentError("Email cannot be null or empty")
        if not isinstance(self.value, str) or not _EMAIL_PATTERN.fullmatch(self.value):
            raise InvalidArgumentError(f"Invalid email format: {self.value}")
        object.__setattr__(self, "value", self.value.lower())

    @classmethod
    def of(cls, value: str) -> Email:
        return cls(value)

    def __str__(self) -> str:
        return self.value


def _add_years(value: date, years: int) -> date:
    """Shift by whole years; Feb 29 falls back to Feb 28 in non-leap years."""
    try:
        return value.replace(year=value.year + years)
    except ValueError:
        return value.replace(year=value.year + years, day=28)


def _validate_name(name: str | None, field_name: str) -> None:
    if name is None or not name.strip():
        raise InvalidArgumentError(f"{field_name} cannot be null or empty")
    if len(name) < MINIMUM_NAME_LENGTH:
        raise InvalidArgumentError(
            f"{field_name} must be at least {MINIMUM_NAME_LENGTH} characters long"
        )


def _validate_job_title(job_title: str | None) -> None:
    if job_title is None or not job_title.strip():
        raise InvalidArgumentError("Job title cannot be null or empty")


def _validate_salary(salary: Money | None) -> None:
    if salary is None:
        raise InvalidArgumentError("Salary cannot be null")


def _validate_dates(date_of_birth: date | None, hire_date: date | None, today: date) -> None:
    if date_of_birth is None:
        raise InvalidArgumentError("Date of birth cannot be null")
    if hire_date is None:
        raise InvalidArgumentError("Hire date cannot be null")
    if date_of_birth > today:
        raise InvalidArgumentError("Date of birth cannot be in the future")
    if hire_date > today:
        raise InvalidArgumentError("Hire date cannot be in the future")
    if _add_years(date_of_birth, MINIMUM_HIRE_AGE) > hire_date:
        raise InvalidArgumentError(
            f"Employee must be at least {MINIMUM_HIRE_AGE} years old at hire date"
        )


class Employee(AggregateRoot[EmployeeId]):
    """Employee aggregate root.

    All mutation goes through the guarded methods below. Each one validates
    first, then mutates, stamps ``last_modified_date`` and records exactly
    one event. A method that raises leaves the employee untouched.

    Status transitions:
    - create → ACTIVE
    - suspend: ACTIVE → SUSPENDED
    - reactivate: any status except TERMINATED → ACTIVE
    - terminate: any status except TERMINATED → TERMINATED (irreversible)
    """

    def __init__(
        self,
        employee_id: EmployeeId,
        first_name: str,
        last_name: str,
        email: Email,
        phone_number: str | None,
        date_of_birth: date,
        hire_date: date,
        department_id: DepartmentId | None,
        job_title: str,
        salary: Money,
        status: EmploymentStatus,
        last_modified_date: date,
        clock: Clock = date.today,
    ) -> None:
        super().__init__(employee_id, clock)
        self._first_name = first_name
        self._last_name = last_name
        self._email = email
        self._phone_number = phone_number
        self._date_of_birth = date_of_birth
        self._hire_date = hire_date
        self._department_id = department_id
        self._job_title = job_title
        self._salary = salary
        self._status = status
        self._last_modified_date = last_modified_date

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------

    @classmethod
    def create(
        cls,
        first_name: str,
        last_name: str,
        email: Email,
        date_of_birth: date,
        hire_date: date,
        job_title: str,
        salary: Money,
        *,
        phone_number: str | None = None,
        department_id: DepartmentId | None = None,
        id_generator: IdGenerator = uuid4,
        clock: Clock = date.today,
    ) -> Employee:
        """Hire a new employee in ACTIVE status and record ``EmployeeCreated``."""
        today = clock()
        _validate_name(first_name, "First name")
        _validate_name(last_name, "Last name")
        if email is None:
            raise InvalidArgumentError("Email cannot be null")
        _validate_dates(date_of_birth, hire_date, today)
        _validate_job_title(job_title)
        _validate_salary(salary)

        employee = cls(
            employee_id=EmployeeId.generate(id_generator),
            first_name=first_name,
            last_name=last_name,
            email=email,
            phone_number=phone_number,
            date_of_birth=date_of_birth,
            hire_date=hire_date,
            department_id=department_id,
            job_title=job_title,
            salary=salary,
            status=EmploymentStatus.ACTIVE,
            last_modified_date=today,
            clock=clock,
        )
        employee._register_event(
            EmployeeCreated(
                metadata=EventMetadata.create(employee.id),
                employee_id=employee.id,
                email=email.value,
                full_name=employee.full_name,
            )
        )
        return employee

    @classmethod
    def reconstitute(
        cls,
        employee_id: EmployeeId,
        first_name: str,
        last_name: str,
        email: Email,
        phone_number: str | None,
        date_of_birth: date,
        hire_date: date,
        department_id: DepartmentId | None,
        job_title: str,
        salary: Money,
        status: EmploymentStatus,
        last_modified_date: date,
        *,
        clock: Clock = date.today,
    ) -> Employee:
        """Rebuild a stored employee without recording any event."""
        return cls(
            employee_id=employee_id,
            first_name=first_name,
            last_name=last_name,
            email=email,
            phone_number=phone_number,
            date_of_birth=date_of_birth,
            hire_date=hire_date,
            department_id=department_id,
            job_title=job_title,
            salary=salary,
            status=EmploymentStatus(status),
            last_modified_date=last_modified_date,
            clock=clock,
        )

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def first_name(self) -> str:
        return self._first_name

    @property
    def last_name(self) -> str:
        return self._last_name

    @property
    def full_name(self) -> str:
        return f"{self._first_name} {self._last_name}"

    @property
    def email(self) -> Email:
        return self._email

    @property
    def phone_number(self) -> str | None:
        return self._phone_number

    @property
    def date_of_birth(self) -> date:
        return self._date_of_birth

    @property
    def hire_date(self) -> date:
        return self._hire_date

    @property
    def department_id(self) -> DepartmentId | None:
        return self._department_id

    @property
    def job_title(self) -> str:
        return self._job_title

    @property
    def salary(self) -> Money:
        return self._salary

    @property
    def status(self) -> EmploymentStatus:
        return self._status

    @property
    def last_modified_date(self) -> date:
        return self._last_modified_date

    @property
    def is_active(self) -> bool:
        return self._status == EmploymentStatus.ACTIVE

    @property
    def years_of_service(self) -> int:
        """Calendar years between hire and today.

        Only the year fields are compared, so someone hired on Dec 31 counts
        one year of service on Jan 1.
        """
        return self._today().year - self._hire_date.year

    # ------------------------------------------------------------------
    # Guarded mutators
    # ------------------------------------------------------------------

    def update_personal_info(
        self, first_name: str, last_name: str, phone_number: str | None
    ) -> None:
        """Replace name and phone number. Allowed in every status."""
        _validate_name(first_name, "First name")
        _validate_name(last_name, "Last name")

        self._first_name = first_name
        self._last_name = last_name
        self._phone_number = phone_number
        self._touch()

        self._register_event(
            EmployeeUpdated(metadata=EventMetadata.create(self.id), employee_id=self.id)
        )

    def change_department(self, new_department_id: DepartmentId) -> None:
        """Move an ACTIVE employee to ``new_department_id``."""
        if new_department_id is None:
            raise InvalidArgumentError("Department ID cannot be null")
        if not EmploymentStateMachine.can_change_department(self._status):
            raise InvalidStateError("Cannot change department for non-active employee")

        old_department_id = self._department_id
        self._department_id = new_department_id
        self._touch()

        self._register_event(
            EmployeeDepartmentChanged(
                metadata=EventMetadata.create(self.id),
                employee_id=self.id,
                old_department_id=old_department_id,
                new_department_id=new_department_id,
            )
        )

    def promote(self, new_job_title: str, new_salary: Money) -> None:
        """Give a new title with a salary no lower than the current one."""
        _validate_job_title(new_job_title)
        _validate_salary(new_salary)
        if new_salary.is_less_than(self._salary):
            raise InvalidArgumentError(
                "New salary cannot be less than current salary for promotion"
            )

        old_salary = self._salary
        self._job_title = new_job_title
        self._salary = new_salary
        self._touch()

        self._register_event(
            EmployeePromoted(
                metadata=EventMetadata.create(self.id),
                employee_id=self.id,
                new_job_title=new_job_title,
                old_salary=old_salary,
                new_salary=new_salary,
            )
        )

    def adjust_salary(self, new_salary: Money) -> None:
        """Set a new salary in the same currency. Decreases are allowed."""
        _validate_salary(new_salary)
        if new_salary.currency != self._salary.currency:
            raise CurrencyMismatchError(
                self._salary.currency,
                new_salary.currency,
                "Currency must match current salary currency",
            )

        old_salary = self._salary
        self._salary = new_salary
        self._touch()

        self._register_event(
            SalaryAdjusted(
                metadata=EventMetadata.create(self.id),
                employee_id=self.id,
                old_salary=old_salary,
                new_salary=new_salary,
            )
        )

    def terminate(self, reason: str | None = None) -> None:
        """End employment. Cannot be undone."""
        EmploymentStateMachine.validate_transition(
            self._status, EmploymentStatus.TERMINATED, "Employee is already terminated"
        )

        self._status = EmploymentStatus.TERMINATED
        self._touch()

        self._register_event(
            EmployeeTerminated(
                metadata=EventMetadata.create(self.id),
                employee_id=self.id,
                reason=reason,
                termination_date=self._last_modified_date,
            )
        )

    def suspend(self) -> None:
        """Suspend an ACTIVE employee."""
        if self._status != EmploymentStatus.ACTIVE:
            raise InvalidTransitionError(
                self._status,
                EmploymentStatus.SUSPENDED,
                "Only active employees can be suspended",
            )
        self._change_status(EmploymentStatus.SUSPENDED)

    def reactivate(self) -> None:
        """Return a non-terminated employee to ACTIVE."""
        EmploymentStateMachine.validate_transition(
            self._status, EmploymentStatus.ACTIVE, "Cannot reactivate terminated employee"
        )
        self._change_status(EmploymentStatus.ACTIVE)

    def _change_status(self, new_status: EmploymentStatus) -> None:
        old_status = self._status
        self._status = new_status
        self._touch()

        self._register_event(
            EmployeeStatusChanged(
                metadata=EventMetadata.create(self.id),
                employee_id=self.id,
                old_status=old_status,
                new_status=new_status,
            )
        )

    def _touch(self) -> None:
        self._last_modified_date = self._today()
