from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType


@dataclass(frozen=True)
class CurrencyDefinition:
    code: str  # ISO-ish code, e.g. "USD", "KWD"
    symbol: str
    symbol_prefixed: bool  # True -> "$15", False -> "15 KWD"


@dataclass(frozen=True)
class CategoryDefinition:
    id: str
    title: str
    subtitle: str
    description: str


@dataclass(frozen=True)
class BundleDefinition:
    id: str
    title: str
    unit_count: int
    price_by_currency: Mapping[str, float] = field(default_factory=dict)
    per_unit_label_by_currency: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Read-only copies; the caller's dicts stay detached from the catalog
        object.__setattr__(self, "price_by_currency", MappingProxyType(dict(self.price_by_currency)))
        object.__setattr__(
            self, "per_unit_label_by_currency", MappingProxyType(dict(self.per_unit_label_by_currency))
        )
