"""Payroll aggregate: one pay-period record for one employee."""

from __future__ import annotations

from datetime import date
from uuid import uuid4

from hr_payroll.domain.aggregate import AggregateRoot, Clock
from hr_payroll.domain.errors import (
    CurrencyMismatchError,
    InvalidArgumentError,
    InvalidStateError,
)
from hr_payroll.domain.events import (
    BonusAdded,
    DeductionAdded,
    EventMetadata,
    PayrollCancelled,
    PayrollCreated,
    PayrollPaid,
    PayrollProcessed,
)
from hr_payroll.domain.identifiers import EmployeeId, IdGenerator, PayrollId
from hr_payroll.domain.money import Money
from hr_payroll.domain.pay_period import PayPeriod
from hr_payroll.domain.state_machine import (
    InvalidTransitionError,
    PayrollStateMachine,
    PayrollStatus,
)


class Payroll(AggregateRoot[PayrollId]):
    """Payroll aggregate root.

    Lifecycle: PENDING → PROCESSED → PAID, with CANCELLED reachable from
    PENDING or PROCESSED. Bonuses and deductions may be added until the
    record is finalized (PAID or CANCELLED).

    Net pay is always ``base_salary + bonus - deductions`` in the base
    salary's currency. It is not clamped at zero: deductions larger than
    base plus bonus produce a negative net pay (see ``has_negative_net_pay``).
    """

    def __init__(
        self,
        payroll_id: PayrollId,
        employee_id: EmployeeId,
        pay_period: PayPeriod,
        base_salary: Money,
        bonus: Money,
        deductions: Money,
        status: PayrollStatus,
        processed_date: date | None = None,
        paid_date: date | None = None,
        clock: Clock = date.today,
    ) -> None:
        super().__init__(payroll_id, clock)
        self._employee_id = employee_id
        self._pay_period = pay_period
        self._base_salary = base_salary
        self._bonus = bonus
        self._deductions = deductions
        self._net_pay = self._compute_net_pay(bonus, deductions)
        self._status = status
        self._processed_date = processed_date
        self._paid_date = paid_date

    @classmethod
    def create(
        cls,
        employee_id: EmployeeId,
        pay_period: PayPeriod,
        base_salary: Money,
        *,
        id_generator: IdGenerator = uuid4,
        clock: Clock = date.today,
    ) -> Payroll:
        """Open a PENDING payroll with zero bonus and deductions."""
        if employee_id is None:
            raise InvalidArgumentError("Employee ID cannot be null")
        if pay_period is None:
            raise InvalidArgumentError("Pay period cannot be null")
        if base_salary is None:
            raise InvalidArgumentError("Base salary cannot be null")

        payroll = cls(
            payroll_id=PayrollId.generate(id_generator),
            employee_id=employee_id,
            pay_period=pay_period,
            base_salary=base_salary,
            bonus=Money.zero(base_salary.currency),
            deductions=Money.zero(base_salary.currency),
            status=PayrollStatus.PENDING,
            clock=clock,
        )
        payroll._register_event(
            PayrollCreated(
                metadata=EventMetadata.create(payroll.id),
                payroll_id=payroll.id,
                employee_id=employee_id,
                pay_period=pay_period,
            )
        )
        return payroll

    @classmethod
    def reconstitute(
        cls,
        payroll_id: PayrollId,
        employee_id: EmployeeId,
        pay_period: PayPeriod,
        base_salary: Money,
        bonus: Money,
        deductions: Money,
        status: PayrollStatus,
        processed_date: date | None,
        paid_date: date | None,
        *,
        clock: Clock = date.today,
    ) -> Payroll:
        """Rebuild a stored payroll without recording any event."""
        return cls(
            payroll_id=payroll_id,
            employee_id=employee_id,
            pay_period=pay_period,
            base_salary=base_salary,
            bonus=bonus,
            deductions=deductions,
            status=PayrollStatus(status),
            processed_date=processed_date,
            paid_date=paid_date,
            clock=clock,
        )

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def employee_id(self) -> EmployeeId:
        return self._employee_id

    @property
    def pay_period(self) -> PayPeriod:
        return self._pay_period

    @property
    def base_salary(self) -> Money:
        return self._base_salary

    @property
    def bonus(self) -> Money:
        return self._bonus

    @property
    def deductions(self) -> Money:
        return self._deductions

    @property
    def net_pay(self) -> Money:
        return self._net_pay

    @property
    def status(self) -> PayrollStatus:
        return self._status

    @property
    def processed_date(self) -> date | None:
        return self._processed_date

    @property
    def paid_date(self) -> date | None:
        return self._paid_date

    @property
    def is_finalized(self) -> bool:
        return PayrollStateMachine.is_finalized(self._status)

    @property
    def has_negative_net_pay(self) -> bool:
        return self._net_pay.is_negative

    # ------------------------------------------------------------------
    # Guarded mutators
    # ------------------------------------------------------------------

    def add_bonus(self, amount: Money) -> None:
        self._validate_amount(amount, "Bonus")

        self._bonus = self._bonus.add(amount)
        self._net_pay = self._compute_net_pay(self._bonus, self._deductions)

        self._register_event(
            BonusAdded(
                metadata=EventMetadata.create(self.id),
                payroll_id=self.id,
                bonus_amount=amount,
            )
        )

    def add_deduction(self, amount: Money, reason: str | None = None) -> None:
        self._validate_amount(amount, "Deduction")

        self._deductions = self._deductions.add(amount)
        self._net_pay = self._compute_net_pay(self._bonus, self._deductions)

        self._register_event(
            DeductionAdded(
                metadata=EventMetadata.create(self.id),
                payroll_id=self.id,
                deduction_amount=amount,
                reason=reason,
            )
        )

    def process(self) -> None:
        PayrollStateMachine.validate_transition(
            self._status, PayrollStatus.PROCESSED, "Only pending payrolls can be processed"
        )

        self._status = PayrollStatus.PROCESSED
        self._processed_date = self._today()

        self._register_event(
            PayrollProcessed(
                metadata=EventMetadata.create(self.id),
                payroll_id=self.id,
                employee_id=self._employee_id,
                net_pay=self._net_pay,
            )
        )

    def mark_as_paid(self) -> None:
        PayrollStateMachine.validate_transition(
            self._status,
            PayrollStatus.PAID,
            "Only processed payrolls can be marked as paid",
        )

        self._status = PayrollStatus.PAID
        self._paid_date = self._today()

        self._register_event(
            PayrollPaid(
                metadata=EventMetadata.create(self.id),
                payroll_id=self.id,
                employee_id=self._employee_id,
                amount=self._net_pay,
                paid_date=self._paid_date,
            )
        )

    def cancel(self, reason: str | None = None) -> None:
        if self._status == PayrollStatus.PAID:
            raise InvalidTransitionError(
                self._status, PayrollStatus.CANCELLED, "Cannot cancel paid payroll"
            )

        self._status = PayrollStatus.CANCELLED

        self._register_event(
            PayrollCancelled(
                metadata=EventMetadata.create(self.id),
                payroll_id=self.id,
                reason=reason,
            )
        )

    def _validate_amount(self, amount: Money | None, field_name: str) -> None:
        if amount is None:
            raise InvalidArgumentError(f"{field_name} cannot be null")
        if not PayrollStateMachine.can_modify_amounts(self._status):
            raise InvalidStateError("Cannot modify finalized payroll")
        if amount.currency != self._base_salary.currency:
            raise CurrencyMismatchError(
                self._base_salary.currency,
                amount.currency,
                f"{field_name} currency must match base salary currency",
            )
        if amount.is_negative:
            raise InvalidArgumentError(f"{field_name} cannot be negative")

    def _compute_net_pay(self, bonus: Money, deductions: Money) -> Money:
        return self._base_salary.add(bonus).subtract(deductions)
