from __future__ import annotations

from dataclasses import dataclass

from enrollment.application.ports.catalog import CatalogPort
from enrollment.domain.entities.catalog import BundleDefinition, CurrencyDefinition
from enrollment.domain.entities.selection_state import DEFAULT_CURRENCY

FREE_LABEL = "Free"

_USD = CurrencyDefinition(code=DEFAULT_CURRENCY, symbol="$", symbol_prefixed=True)


@dataclass(frozen=True)
class ResolvedPrice:
    amount: int | float
    currency: CurrencyDefinition  # the currency the amount was actually taken from

    @property
    def is_free(self) -> bool:
        return self.amount == 0


class PricingResolver:
    """
    Currency-aware price resolution for bundles.

    Fallback chain for totals: requested currency -> USD -> 0. Unknown currency
    codes are treated exactly like a currency the bundle has no price for.
    Nothing here raises; a zero amount is the "Free" state, not an error.
    """

    def __init__(self, catalog: CatalogPort) -> None:
        self._catalog = catalog

    def effective_currency(self, code: str | None) -> CurrencyDefinition:
        return self._catalog.get_currency(code) or self._catalog.get_currency(DEFAULT_CURRENCY) or _USD

    def resolve_price(self, bundle: BundleDefinition, currency: str | None) -> ResolvedPrice:
        requested = self.effective_currency(currency)
        amount = bundle.price_by_currency.get(requested.code)
        if amount is not None:
            return ResolvedPrice(amount=amount, currency=requested)

        fallback = bundle.price_by_currency.get(DEFAULT_CURRENCY)
        if fallback is not None:
            return ResolvedPrice(amount=fallback, currency=self.effective_currency(DEFAULT_CURRENCY))

        return ResolvedPrice(amount=0, currency=requested)

    def resolve_total(self, bundle: BundleDefinition, currency: str | None) -> int | float:
        return self.resolve_price(bundle, currency).amount

    def format_total(self, bundle: BundleDefinition, currency: str | None) -> str:
        price = self.resolve_price(bundle, currency)
        if price.is_free:
            return FREE_LABEL
        return format_amount(price.amount, price.currency)

    def resolve_per_unit_label(self, bundle: BundleDefinition, currency: str | None) -> str:
        requested = self.effective_currency(currency)
        label = bundle.per_unit_label_by_currency.get(requested.code)
        if label:
            return label

        price = self.resolve_price(bundle, currency)
        if bundle.unit_count:
            per_unit = price.amount / bundle.unit_count
        else:
            per_unit = price.amount
        per_unit = round(per_unit, 2)
        if per_unit == 0:
            return FREE_LABEL
        return f"{format_amount(per_unit, price.currency)} per lesson"


def format_amount(amount: int | float, currency: CurrencyDefinition) -> str:
    value = _format_number(amount)
    if currency.symbol_prefixed:
        return f"{currency.symbol}{value}"
    return f"{value} {currency.code}"


def _format_number(amount: int | float) -> str:
    rounded = round(float(amount), 2)
    if rounded.is_integer():
        return str(int(rounded))
    return f"{rounded:.2f}".rstrip("0").rstrip(".")
