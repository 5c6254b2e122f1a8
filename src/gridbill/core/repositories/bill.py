"""Repository for Bill model."""

from __future__ import annotations

from gridbill.core.models import Bill, BillState
from gridbill.core.repositories.base import BaseRepository


class BillRepository(BaseRepository[Bill]):
    """Bill-specific repository operations."""

    def __init__(self, base: int = 2000) -> None:
        super().__init__(base, key=lambda bill: bill.bill_no)

    def get_for_consumer(self, consumer_id: int) -> list[Bill]:
        return self.filter(lambda b: b.consumer.id == consumer_id)

    def in_states(self, *states: BillState) -> list[Bill]:
        """Get bills whose state is one of ``states``, in insertion order."""
        return self.filter(lambda b: b.state in states)

    def outstanding(self) -> list[Bill]:
        """Bills not yet paid, i.e. UNPAID or LATE."""
        return self.in_states(BillState.UNPAID, BillState.LATE)
