"""Repository for Meter model."""

from __future__ import annotations

from gridbill.core.models import Meter
from gridbill.core.repositories.base import BaseRepository


class MeterRepository(BaseRepository[Meter]):
    """Meter-specific repository operations."""

    def __init__(self, base: int = 5000) -> None:
        super().__init__(base, key=lambda meter: meter.id)

    def get_for_consumer(self, consumer_id: int) -> list[Meter]:
        """Get all meters installed for a specific consumer."""
        return self.filter(lambda m: m.consumer.id == consumer_id)
