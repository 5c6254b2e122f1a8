"""Tests for the Consumer, Meter and Bill entities."""

from datetime import date, timedelta
from decimal import Decimal

import pytest

from gridbill.core.models import (
    Bill,
    BillState,
    Consumer,
    ConsumerStatus,
    Meter,
    MeterHealth,
    Status,
)
from gridbill.core.tariffs import DomesticTariff

ISSUED = date(2024, 7, 1)
DUE = ISSUED + timedelta(days=15)


@pytest.fixture
def consumer() -> Consumer:
    return Consumer(id=1000, name="Alice", address="City A", tariff_plan=DomesticTariff())


@pytest.fixture
def meter(consumer: Consumer) -> Meter:
    return Meter(id=5000, consumer=consumer, last_reading_date=date(2024, 6, 1))


@pytest.fixture
def bill(consumer: Consumer) -> Bill:
    return Bill(
        bill_no=2000,
        consumer=consumer,
        units=250,
        amount=Decimal("525"),
        issued_on=ISSUED,
        due_date=DUE,
    )


def test_consumer_deactivate(consumer: Consumer):
    assert consumer.is_active
    consumer.deactivate()
    assert consumer.status is ConsumerStatus.INACTIVE
    consumer.deactivate()
    assert not consumer.is_active


def test_consumer_str(consumer: Consumer):
    assert str(consumer) == "1000 - Alice (Domestic)"


def test_record_reading_updates_meter(meter: Meter):
    result = meter.record_reading(120, ISSUED)

    assert result.ok
    assert meter.last_reading == 120
    assert meter.last_reading_date == ISSUED


def test_record_reading_accepts_equal_value(meter: Meter):
    meter.record_reading(120, ISSUED)
    assert meter.record_reading(120, DUE)
    assert meter.last_reading_date == DUE


def test_stale_reading_is_rejected(meter: Meter, caplog):
    meter.record_reading(120, ISSUED)

    result = meter.record_reading(80, DUE)

    assert result.status is Status.STALE_READING
    assert not result
    assert meter.last_reading == 120
    assert meter.last_reading_date == ISSUED
    assert "Invalid reading" in caplog.text


def test_meter_health(meter: Meter):
    assert meter.health is MeterHealth.GOOD
    meter.set_health(MeterHealth.NEEDS_MAINTENANCE)
    assert meter.health is MeterHealth.NEEDS_MAINTENANCE


def test_full_payment_settles_bill(bill: Bill):
    assert bill.record_payment(Decimal("525"))
    assert bill.state is BillState.PAID
    assert bill.paid_total == Decimal("525")


def test_overpayment_settles_bill(bill: Bill):
    assert bill.record_payment(600)
    assert bill.is_paid


def test_partial_payment_keeps_bill_unpaid(bill: Bill, caplog):
    result = bill.record_payment(Decimal("500"))

    assert result.status is Status.INSUFFICIENT_PAYMENT
    assert bill.state is BillState.UNPAID
    assert bill.amount == Decimal("525")
    assert bill.paid_total == Decimal("500")
    assert "Partial payment" in caplog.text


def test_non_positive_payment_is_rejected(bill: Bill):
    assert bill.record_payment(0).status is Status.INSUFFICIENT_PAYMENT
    assert bill.record_payment(-10).status is Status.INSUFFICIENT_PAYMENT
    assert bill.paid_total == Decimal("0")
    assert bill.state is BillState.UNPAID


def test_surcharge_not_applied_before_or_on_due_date(bill: Bill):
    assert not bill.apply_surcharge(ISSUED)
    assert not bill.apply_surcharge(DUE)
    assert bill.state is BillState.UNPAID
    assert bill.amount == Decimal("525")


def test_surcharge_applied_once_after_due_date(bill: Bill):
    after_due = DUE + timedelta(days=1)

    assert bill.apply_surcharge(after_due)
    assert bill.state is BillState.LATE
    assert bill.amount == Decimal("575")

    assert not bill.apply_surcharge(after_due + timedelta(days=30))
    assert bill.amount == Decimal("575")


def test_surcharge_skips_paid_bill(bill: Bill):
    bill.record_payment(Decimal("525"))
    assert not bill.apply_surcharge(DUE + timedelta(days=1))
    assert bill.state is BillState.PAID
    assert bill.amount == Decimal("525")


def test_late_bill_can_still_be_paid(bill: Bill):
    bill.apply_surcharge(DUE + timedelta(days=1))

    assert not bill.record_payment(Decimal("525"))
    assert bill.state is BillState.LATE

    assert bill.record_payment(Decimal("575"))
    assert bill.state is BillState.PAID


def test_bill_str(bill: Bill):
    assert str(bill) == "Bill #2000 | Alice | Units: 250 | Amount: 525.00 | Status: Unpaid"


def test_zero_amount_bill_is_settled_by_zero_payment(consumer: Consumer):
    bill = Bill(
        bill_no=2001,
        consumer=consumer,
        units=0,
        amount=Decimal("0"),
        issued_on=ISSUED,
        due_date=DUE,
    )

    assert bill.record_payment(0)
    assert bill.state is BillState.PAID
    assert not bill.apply_surcharge(DUE + timedelta(days=1))
    assert bill.amount == Decimal("0")
