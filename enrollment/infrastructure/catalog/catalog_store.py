from __future__ import annotations

from enrollment.application.ports.catalog import CatalogPort
from enrollment.domain.entities.catalog import BundleDefinition, CategoryDefinition, CurrencyDefinition
from enrollment.infrastructure.catalog.catalog_data import BUNDLES, CATEGORIES, CURRENCIES


class StaticCatalogStore(CatalogPort):
    def __init__(
        self,
        categories: list[CategoryDefinition] | None = None,
        bundles: dict[str, list[BundleDefinition]] | None = None,
        currencies: list[CurrencyDefinition] | None = None,
    ) -> None:
        self._categories = tuple(categories if categories is not None else CATEGORIES)
        source = bundles if bundles is not None else BUNDLES
        self._bundles = {category_id: tuple(items) for category_id, items in source.items()}
        self._currencies = {c.code: c for c in (currencies if currencies is not None else CURRENCIES)}

    def categories_in_order(self) -> list[CategoryDefinition]:
        return list(self._categories)

    def bundles_for(self, category_id: str | None) -> list[BundleDefinition]:
        if not category_id:
            return []
        return list(self._bundles.get(category_id, ()))

    def get_category(self, category_id: str | None) -> CategoryDefinition | None:
        if not category_id:
            return None
        for category in self._categories:
            if category.id == category_id:
                return category
        return None

    def get_bundle(self, category_id: str | None, bundle_id: str | None) -> BundleDefinition | None:
        if not bundle_id:
            return None
        for bundle in self.bundles_for(category_id):
            if bundle.id == bundle_id:
                return bundle
        return None

    def currencies(self) -> list[CurrencyDefinition]:
        return list(self._currencies.values())

    def get_currency(self, code: str | None) -> CurrencyDefinition | None:
        if not code:
            return None
        # Exact match; "kwd" is an unrecognised code like any other
        return self._currencies.get(code)
