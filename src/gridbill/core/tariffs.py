"""Tariff plans mapping consumed units to a charge."""

from __future__ import annotations

from decimal import Decimal

from gridbill.core import calculations
from gridbill.core.calculations import Tier


class TariffPlan:
    """Base class for tiered tariff plans; subclasses set ``name`` and ``tiers``."""

    name: str
    tiers: tuple[Tier, ...]

    def calculate_charge(self, units: int, is_peak_hour: bool = False) -> Decimal:
        """Returns the charge for ``units``, with the peak surcharge if requested."""
        charge = calculations.calculate_tiered_charge(units, self.tiers)
        return calculations.apply_peak_surcharge(charge, is_peak_hour)

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class DomesticTariff(TariffPlan):
    name = "Domestic"
    tiers = (
        Tier(limit=100, rate=Decimal("1.5")),
        Tier(limit=300, rate=Decimal("2.5")),
        Tier(limit=None, rate=Decimal("4.0")),
    )


class CommercialTariff(TariffPlan):
    name = "Commercial"
    tiers = (
        Tier(limit=100, rate=Decimal("3.0")),
        Tier(limit=300, rate=Decimal("5.0")),
        Tier(limit=None, rate=Decimal("7.0")),
    )
