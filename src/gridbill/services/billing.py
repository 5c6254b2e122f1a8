"""Service responsible for consumers, meters, bills and billing reports."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from gridbill.config import Settings, settings as default_settings
from gridbill.core import calculations, dates
from gridbill.core.dates import Clock, SystemClock
from gridbill.core.models import (
    Bill,
    BillState,
    Consumer,
    Meter,
    MeterHealth,
    OK,
    Result,
    Status,
)
from gridbill.core.repositories.bill import BillRepository
from gridbill.core.repositories.consumer import ConsumerRepository
from gridbill.core.repositories.meter import MeterRepository
from gridbill.core.tariffs import TariffPlan

logger = logging.getLogger(__name__)


class BillingError(Exception):
    """Custom exception for billing errors."""


class StaleReadingError(BillingError):
    """Raised when a bill is requested for a reading below the meter's last one."""

    def __init__(self, meter: Meter, reading: int):
        super().__init__(
            f"Reading {reading} for meter {meter.id} is below "
            f"last reading {meter.last_reading}; no bill generated."
        )
        self.meter = meter
        self.reading = reading


@dataclass(frozen=True)
class BillSummary:
    """A row of the aging report."""

    bill_no: int
    consumer_id: int
    consumer_name: str
    tariff_name: str
    units: int
    amount: Decimal
    due_date: date
    state: BillState
    days_past_due: int


class UtilityService:
    """Orchestrates registration, metering, billing, payments and dunning."""

    def __init__(
        self,
        clock: Clock | None = None,
        consumer_repo: ConsumerRepository | None = None,
        meter_repo: MeterRepository | None = None,
        bill_repo: BillRepository | None = None,
        config: Settings | None = None,
    ):
        self._config = config or default_settings
        self._clock = clock or SystemClock()
        self._consumer_repo = consumer_repo or ConsumerRepository(
            self._config.CONSUMER_ID_BASE
        )
        self._meter_repo = meter_repo or MeterRepository(self._config.METER_ID_BASE)
        self._bill_repo = bill_repo or BillRepository(self._config.BILL_NO_BASE)

    @property
    def clock(self) -> Clock:
        return self._clock

    def register_consumer(self, name: str, address: str, plan: TariffPlan) -> Consumer:
        consumer = Consumer(
            id=self._consumer_repo.next_id(),
            name=name,
            address=address,
            tariff_plan=plan,
        )
        self._consumer_repo.add(consumer)
        logger.info(f"Registered consumer {consumer}.")
        return consumer

    def install_meter(self, consumer: Consumer) -> Meter:
        meter = Meter(
            id=self._meter_repo.next_id(),
            consumer=consumer,
            last_reading_date=dates.one_month_before(self._clock.today()),
        )
        self._meter_repo.add(meter)
        logger.info(f"Installed meter {meter.id} for consumer {consumer.id}.")
        return meter

    def generate_bill(self, meter: Meter, new_reading: int) -> Bill:
        """
        Records ``new_reading`` on the meter and bills the units consumed since
        the previous reading using the consumer's tariff plan.

        Raises:
            StaleReadingError: If the reading is below the meter's last
                reading. The meter is left unchanged and no bill is created.
        """
        today = self._clock.today()
        consumed = calculations.calculate_consumption(new_reading, meter.last_reading)

        if not meter.record_reading(new_reading, today):
            raise StaleReadingError(meter, new_reading)

        consumer = meter.consumer
        amount = consumer.tariff_plan.calculate_charge(consumed)
        bill = Bill(
            bill_no=self._bill_repo.next_id(),
            consumer=consumer,
            units=consumed,
            amount=amount,
            issued_on=today,
            due_date=dates.due_date_for(today, self._config.PAYMENT_DUE_DAYS),
        )
        self._bill_repo.add(bill)
        logger.info(f"Generated {bill}.")
        return bill

    def post_payment(self, bill_no: int, amount: Decimal) -> Result:
        """Applies a payment to the bill with number ``bill_no``."""
        bill = self._bill_repo.get(bill_no)
        if bill is None:
            message = f"Bill #{bill_no} not found."
            logger.warning(message)
            return Result(Status.UNKNOWN_BILL, message)

        result = bill.record_payment(amount)
        if result:
            logger.info(f"Bill #{bill_no} paid in full.")
        return result

    def apply_dunning(self) -> list[Bill]:
        """
        Sweeps every bill and escalates those unpaid past their due date.

        Returns:
            The bills that were moved to LATE by this sweep.
        """
        today = self._clock.today()
        escalated = [
            bill
            for bill in self._bill_repo
            if bill.apply_surcharge(today, self._config.LATE_FEE)
        ]
        for bill in escalated:
            logger.info(
                f"Bill #{bill.bill_no} is overdue since {bill.due_date}; "
                f"late fee applied, new amount {bill.amount}."
            )
        return escalated

    def aging_report(self) -> list[BillSummary]:
        """All bills that are not paid, UNPAID and LATE alike, in issue order."""
        today = self._clock.today()
        return [
            BillSummary(
                bill_no=bill.bill_no,
                consumer_id=bill.consumer.id,
                consumer_name=bill.consumer.name,
                tariff_name=bill.consumer.tariff_plan.name,
                units=bill.units,
                amount=bill.amount,
                due_date=bill.due_date,
                state=bill.state,
                days_past_due=dates.days_past_due(bill.due_date, today),
            )
            for bill in self._bill_repo.outstanding()
        ]

    def revenue_by_tariff_type(self) -> dict[str, Decimal]:
        """Sums amounts of PAID and LATE bills grouped by tariff plan name."""
        totals: dict[str, Decimal] = {}
        for bill in self._bill_repo.in_states(BillState.PAID, BillState.LATE):
            key = bill.consumer.tariff_plan.name
            totals[key] = totals.get(key, Decimal("0")) + bill.amount
        return totals

    def get_consumer(self, consumer_id: int) -> Consumer | None:
        return self._consumer_repo.get(consumer_id)

    def get_meter(self, meter_id: int) -> Meter | None:
        return self._meter_repo.get(meter_id)

    def get_bill(self, bill_no: int) -> Bill | None:
        return self._bill_repo.get(bill_no)

    def consumers(self) -> list[Consumer]:
        return self._consumer_repo.all()

    def meters(self) -> list[Meter]:
        return self._meter_repo.all()

    def bills(self) -> list[Bill]:
        return self._bill_repo.all()

    def bills_for_consumer(self, consumer_id: int) -> list[Bill]:
        return self._bill_repo.get_for_consumer(consumer_id)

    def deactivate_consumer(self, consumer_id: int) -> Result:
        consumer = self._consumer_repo.get(consumer_id)
        if consumer is None:
            message = f"Consumer {consumer_id} not found."
            logger.warning(message)
            return Result(Status.UNKNOWN_CONSUMER, message)
        consumer.deactivate()
        logger.info(f"Consumer {consumer_id} deactivated.")
        return OK

    def flag_meter_maintenance(self, meter_id: int) -> Result:
        meter = self._meter_repo.get(meter_id)
        if meter is None:
            message = f"Meter {meter_id} not found."
            logger.warning(message)
            return Result(Status.UNKNOWN_METER, message)
        meter.set_health(MeterHealth.NEEDS_MAINTENANCE)
        logger.info(f"Meter {meter_id} flagged for maintenance.")
        return OK
