from __future__ import annotations

import json
import logging
from decimal import Decimal, InvalidOperation
from typing import Any

from domain.spot import POSITIONS, Metal, MetalSpots, SpotQuote
from utils.formatting import format_two_places

from .provident_client import ProvidentMetalsClient, SchemaError

logger = logging.getLogger(__name__)


def parse_metal_spots(records: Any) -> MetalSpots:
    if not isinstance(records, list):
        raise SchemaError("Spot summary payload is not a list", payload=records)

    needed = max(POSITIONS.values()) + 1
    if len(records) < needed:
        raise SchemaError(f"Spot summary has {len(records)} records, expected at least {needed}", payload=records)

    quotes = {metal: _parse_quote(records[index], metal) for metal, index in POSITIONS.items()}
    return MetalSpots(gold=quotes[Metal.AU], silver=quotes[Metal.AG])


def _parse_quote(entry: Any, metal: Metal) -> SpotQuote:
    if not isinstance(entry, dict):
        raise SchemaError(f"Spot summary record for {metal} is not an object", payload=entry)

    missing = [field for field in ("rate", "delta", "effective_at") if entry.get(field) is None]
    if missing:
        raise SchemaError(f"Spot summary record for {metal} missing {', '.join(missing)}", payload=entry)

    return SpotQuote(
        rate=_to_decimal(entry["rate"], metal, "rate"),
        delta=_to_decimal(entry["delta"], metal, "delta"),
        effective_at=str(entry["effective_at"]),
    )


def _to_decimal(value: Any, metal: Metal, field: str) -> Decimal:
    # bool is an int subclass but never a price
    if isinstance(value, bool):
        raise SchemaError(f"Spot summary {field} for {metal} is not numeric", payload=value)
    try:
        result = Decimal(str(value))
    except InvalidOperation as exc:
        raise SchemaError(f"Spot summary {field} for {metal} is not numeric", payload=value) from exc
    if not result.is_finite():
        raise SchemaError(f"Spot summary {field} for {metal} is not finite", payload=value)
    return result


def build_summary(spots: MetalSpots) -> dict[str, str]:
    """Output mapping; the timestamp is the silver record's, as the feed reports both together."""
    summary: dict[str, str] = {}
    for metal in Metal:
        quote = spots.quote(metal)
        summary[str(metal)] = format_two_places(quote.rate)
        summary[f"{metal}Delta"] = format_two_places(quote.delta)
    summary["time"] = spots.quote(Metal.AG).effective_at
    return summary


def render_summary(summary: dict[str, str]) -> str:
    return json.dumps(summary, separators=(",", ": "), ensure_ascii=False)


def fetch_spot_summary(client: ProvidentMetalsClient) -> str:
    records = client.get_spot_summary()
    spots = parse_metal_spots(records)
    logger.info(
        "Parsed spot quotes gold=%s silver=%s effective_at=%s",
        spots.gold.rate,
        spots.silver.rate,
        spots.silver.effective_at,
    )
    return render_summary(build_summary(spots))


__all__ = ["build_summary", "fetch_spot_summary", "parse_metal_spots", "render_summary"]
