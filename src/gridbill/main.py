"""Main entry point: runs a demo billing cycle and, optionally, the dunning scheduler."""

import asyncio
import logging
from pathlib import Path

from apscheduler.schedulers.asyncio import AsyncIOScheduler

from gridbill.config import settings
from gridbill.core.tariffs import CommercialTariff, DomesticTariff
from gridbill.services.billing import UtilityService
from gridbill.services.export import ExportService
from gridbill.services.scheduler import SchedulerService

logger = logging.getLogger(__name__)


def run_demo(service: UtilityService, export: ExportService) -> None:
    """Registers two consumers, bills them and prints both reports."""
    alice = service.register_consumer("Alice", "City A", DomesticTariff())
    bob = service.register_consumer("BobCorp", "City B", CommercialTariff())

    alice_meter = service.install_meter(alice)
    bob_meter = service.install_meter(bob)

    alice_bill = service.generate_bill(alice_meter, 250)
    bob_bill = service.generate_bill(bob_meter, 450)
    print(alice_bill)
    print(bob_bill)

    service.post_payment(alice_bill.bill_no, alice_bill.amount)
    service.apply_dunning()

    aging = service.aging_report()
    revenue = service.revenue_by_tariff_type()
    print(export.render_aging_report(aging), end="")
    print(export.render_revenue_report(revenue), end="")

    output = Path(settings.REPORTS_DIR) / f"reports-{service.clock.today()}.html"
    export.write_html(service.clock.today(), aging, revenue, output)
    logger.info(f"Reports written to {output}.")


async def main():
    """Initializes the service and runs the demo."""
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
    )
    logger.info("Starting GridBill...")

    service = UtilityService()
    run_demo(service, ExportService())

    if not settings.RUN_SCHEDULER:
        return

    scheduler = SchedulerService(service, AsyncIOScheduler())
    scheduler.start()
    try:
        await asyncio.Event().wait()
    finally:
        scheduler.shutdown()


def run():
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        logger.info("GridBill stopped manually.")


if __name__ == "__main__":
    run()
