from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import StrEnum


class Metal(StrEnum):
    AU = "au"
    AG = "ag"


# The summary endpoint lists metals in a fixed order and the consumed fields
# carry no metal identifier, so position is the contract.
POSITIONS: dict[Metal, int] = {
    Metal.AU: 0,
    Metal.AG: 1,
}


@dataclass(frozen=True)
class SpotQuote:
    """Spot rate for one metal as reported by the upstream summary."""

    rate: Decimal
    delta: Decimal
    effective_at: str


@dataclass(frozen=True)
class MetalSpots:
    gold: SpotQuote
    silver: SpotQuote

    def quote(self, metal: Metal) -> SpotQuote:
        if metal is Metal.AU:
            return self.gold
        if metal is Metal.AG:
            return self.silver
        msg = f"unknown metal: {metal!r}"
        raise ValueError(msg)


__all__ = ["POSITIONS", "Metal", "MetalSpots", "SpotQuote"]
