"""Repository for Consumer model."""

from __future__ import annotations

from gridbill.core.models import Consumer
from gridbill.core.repositories.base import BaseRepository


class ConsumerRepository(BaseRepository[Consumer]):
    """Consumer-specific repository operations."""

    def __init__(self, base: int = 1000) -> None:
        super().__init__(base, key=lambda consumer: consumer.id)
