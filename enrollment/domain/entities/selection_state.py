from __future__ import annotations

from dataclasses import dataclass

DEFAULT_CURRENCY = "USD"


@dataclass(frozen=True)
class SelectionState:
    category_id: str | None = None  # e.g. "main", "conv", "placement", "trial"
    bundle_id: str | None = None  # only meaningful under category_id
    currency: str = DEFAULT_CURRENCY  # never None; unknown codes degrade to USD on read
