"""Payroll service - opens, adjusts and settles payroll records."""

from __future__ import annotations

import logging
from datetime import date
from uuid import uuid4

from hr_payroll.domain import (
    EmployeeId,
    Money,
    PayPeriod,
    Payroll,
    PayrollId,
    PayrollStatus,
)
from hr_payroll.domain.aggregate import Clock
from hr_payroll.domain.identifiers import IdGenerator
from hr_payroll.events import EventEmitter
from hr_payroll.repositories import EmployeeRepository, PayrollRepository
from hr_payroll.services.base import (
    AggregateService,
    DuplicateEntityError,
    EntityNotFoundError,
)

logger = logging.getLogger(__name__)


class PayrollService(AggregateService):
    """Service for managing payroll records.

    Operations:
    - create_payroll: open a PENDING record (one live record per employee
      and pay period; a cancelled record may be replaced)
    - add_bonus / add_deduction: adjust amounts until finalized
    - process, mark_as_paid, cancel: status transitions
    """

    def __init__(
        self,
        payrolls: PayrollRepository,
        employees: EmployeeRepository | None = None,
        emitter: EventEmitter | None = None,
        id_generator: IdGenerator = uuid4,
        clock: Clock = date.today,
    ) -> None:
        super().__init__(emitter, id_generator, clock)
        self.payrolls = payrolls
        self.employees = employees

    def create_payroll(
        self,
        employee_id: EmployeeId,
        pay_period: PayPeriod,
        base_salary: Money | None = None,
    ) -> Payroll:
        """Open a PENDING payroll.

        When ``base_salary`` is omitted the employee's current salary is used.
        """
        if self.employees is not None and employee_id is not None:
            employee = self.employees.find_by_id(employee_id)
            if employee is None:
                raise EntityNotFoundError("Employee", employee_id)
            if base_salary is None:
                base_salary = employee.salary

        if employee_id is not None and pay_period is not None:
            existing = self.payrolls.find_by_employee_id_and_pay_period(employee_id, pay_period)
            if existing is not None and existing.status != PayrollStatus.CANCELLED:
                raise DuplicateEntityError(
                    f"Payroll for employee {employee_id} and period {pay_period} already exists"
                )

        payroll = Payroll.create(
            employee_id,
            pay_period,
            base_salary,
            id_generator=self.id_generator,
            clock=self.clock,
        )
        self._commit(self.payrolls, payroll)
        logger.info(
            "Created payroll %s for employee %s, period %s", payroll.id, employee_id, pay_period
        )
        return payroll

    def get_payroll(self, payroll_id: PayrollId) -> Payroll:
        payroll = self.payrolls.find_by_id(payroll_id)
        if payroll is None:
            raise EntityNotFoundError("Payroll", payroll_id)
        return payroll

    def list_payrolls(
        self,
        employee_id: EmployeeId | None = None,
        pay_period: PayPeriod | None = None,
        status: PayrollStatus | None = None,
    ) -> list[Payroll]:
        if employee_id is not None:
            payrolls = self.payrolls.find_by_employee_id(employee_id)
        elif pay_period is not None:
            payrolls = self.payrolls.find_by_pay_period(pay_period)
        else:
            payrolls = self.payrolls.find_all()

        if pay_period is not None:
            payrolls = [p for p in payrolls if p.pay_period == pay_period]
        if status is not None:
            payrolls = [p for p in payrolls if p.status == status]
        return payrolls

    def add_bonus(self, payroll_id: PayrollId, amount: Money) -> Payroll:
        payroll = self.get_payroll(payroll_id)
        payroll.add_bonus(amount)
        logger.info("Added bonus %s to payroll %s", amount, payroll_id)
        return self._commit(self.payrolls, payroll)

    def add_deduction(
        self, payroll_id: PayrollId, amount: Money, reason: str | None = None
    ) -> Payroll:
        payroll = self.get_payroll(payroll_id)
        payroll.add_deduction(amount, reason)
        logger.info("Added deduction %s (%s) to payroll %s", amount, reason, payroll_id)
        if payroll.has_negative_net_pay:
            # Allowed; surfaced for review
            logger.warning(
                "Payroll %s net pay is negative (%s) after deduction", payroll_id, payroll.net_pay
            )
        return self._commit(self.payrolls, payroll)

    def process(self, payroll_id: PayrollId) -> Payroll:
        payroll = self.get_payroll(payroll_id)
        payroll.process()
        logger.info("Processed payroll %s, net pay %s", payroll_id, payroll.net_pay)
        return self._commit(self.payrolls, payroll)

    def mark_as_paid(self, payroll_id: PayrollId) -> Payroll:
        payroll = self.get_payroll(payroll_id)
        payroll.mark_as_paid()
        logger.info("Payroll %s paid on %s", payroll_id, payroll.paid_date)
        return self._commit(self.payrolls, payroll)

    def cancel(self, payroll_id: PayrollId, reason: str | None = None) -> Payroll:
        payroll = self.get_payroll(payroll_id)
        payroll.cancel(reason)
        logger.info("Cancelled payroll %s: %s", payroll_id, reason)
        return self._commit(self.payrolls, payroll)
