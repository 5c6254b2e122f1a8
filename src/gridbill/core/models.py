"""Domain models for the GridBill application."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal

from gridbill.core.tariffs import TariffPlan

logger = logging.getLogger(__name__)


class ConsumerStatus(str, enum.Enum):
    ACTIVE = "Active"
    INACTIVE = "Inactive"


class MeterHealth(str, enum.Enum):
    GOOD = "Good"
    NEEDS_MAINTENANCE = "Needs Maintenance"


class BillState(str, enum.Enum):
    """Bill lifecycle: UNPAID is initial, PAID and LATE are reached from it."""

    UNPAID = "Unpaid"
    PAID = "Paid"
    LATE = "Late"


class Status(str, enum.Enum):
    """Outcome of an operation that reports problems instead of raising."""

    OK = "ok"
    STALE_READING = "stale_reading"
    INSUFFICIENT_PAYMENT = "insufficient_payment"
    UNKNOWN_BILL = "unknown_bill"
    UNKNOWN_CONSUMER = "unknown_consumer"
    UNKNOWN_METER = "unknown_meter"


@dataclass(frozen=True)
class Result:
    """A status plus a human-readable message. Truthy only on success."""

    status: Status
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.status is Status.OK

    def __bool__(self) -> bool:
        return self.ok


OK = Result(Status.OK)


@dataclass(eq=False)
class Consumer:
    """A customer registered on a tariff plan."""

    id: int
    name: str
    address: str
    tariff_plan: TariffPlan
    status: ConsumerStatus = ConsumerStatus.ACTIVE

    @property
    def is_active(self) -> bool:
        return self.status is ConsumerStatus.ACTIVE

    def deactivate(self) -> None:
        self.status = ConsumerStatus.INACTIVE

    def __str__(self) -> str:
        return f"{self.id} - {self.name} ({self.tariff_plan.name})"


@dataclass(eq=False)
class Meter:
    """A meter installed for one consumer. Its reading never goes down."""

    id: int
    consumer: Consumer
    last_reading_date: date
    last_reading: int = 0
    health: MeterHealth = MeterHealth.GOOD

    def record_reading(self, value: int, today: date) -> Result:
        """Stores a new reading unless it is below the last one."""
        if value < self.last_reading:
            message = (
                f"Invalid reading {value} for meter {self.id}: "
                f"must be >= last reading {self.last_reading}."
            )
            logger.warning(message)
            return Result(Status.STALE_READING, message)

        self.last_reading = value
        self.last_reading_date = today
        return OK

    def set_health(self, health: MeterHealth) -> None:
        self.health = health

    def __str__(self) -> str:
        return f"Meter {self.id} [{self.consumer}]"


@dataclass(eq=False)
class Bill:
    """A billing event for a consumer; owns its payment and late-fee transitions."""

    bill_no: int
    consumer: Consumer
    units: int
    amount: Decimal
    issued_on: date
    due_date: date
    state: BillState = BillState.UNPAID
    paid_total: Decimal = field(default=Decimal("0"))

    @property
    def is_paid(self) -> bool:
        return self.state is BillState.PAID

    def record_payment(self, payment: Decimal) -> Result:
        """
        Records a payment against the bill.

        A payment covering the full amount settles the bill, whatever its
        current state, so a LATE bill can still be paid off. A smaller payment
        is added to ``paid_total`` but leaves the state unchanged.
        """
        payment = Decimal(str(payment))
        if payment <= 0 and payment < self.amount:
            message = f"Payment of {payment} on bill #{self.bill_no} is not positive."
            logger.warning(message)
            return Result(Status.INSUFFICIENT_PAYMENT, message)

        self.paid_total += payment
        if payment >= self.amount:
            self.state = BillState.PAID
            return OK

        message = (
            f"Partial payment of {payment} on bill #{self.bill_no}; "
            f"bill of {self.amount} still unpaid."
        )
        logger.warning(message)
        return Result(Status.INSUFFICIENT_PAYMENT, message)

    def apply_surcharge(self, today: date, late_fee: Decimal = Decimal("50")) -> bool:
        """
        Adds the late fee and marks the bill LATE if it is unpaid past due.

        Returns True when the bill was escalated. The UNPAID guard means the
        fee is charged at most once.
        """
        if self.state is not BillState.UNPAID or today <= self.due_date:
            return False
        self.amount += late_fee
        self.state = BillState.LATE
        return True

    def __str__(self) -> str:
        return (
            f"Bill #{self.bill_no} | {self.consumer.name} | Units: {self.units} "
            f"| Amount: {self.amount:.2f} | Status: {self.state.value}"
        )
