from __future__ import annotations

from abc import ABC, abstractmethod

from enrollment.domain.entities.catalog import BundleDefinition, CategoryDefinition, CurrencyDefinition


class CatalogPort(ABC):
    @abstractmethod
    def categories_in_order(self) -> list[CategoryDefinition]:
        """All categories in display order. Stable for the process lifetime."""
        raise NotImplementedError

    @abstractmethod
    def bundles_for(self, category_id: str | None) -> list[BundleDefinition]:
        """Bundles of a category in display order. Empty list for an unknown id."""
        raise NotImplementedError

    @abstractmethod
    def get_category(self, category_id: str | None) -> CategoryDefinition | None:
        raise NotImplementedError

    @abstractmethod
    def get_bundle(self, category_id: str | None, bundle_id: str | None) -> BundleDefinition | None:
        """Bundle lookup scoped to its owning category. None if either id does not resolve."""
        raise NotImplementedError

    @abstractmethod
    def currencies(self) -> list[CurrencyDefinition]:
        raise NotImplementedError

    @abstractmethod
    def get_currency(self, code: str | None) -> CurrencyDefinition | None:
        raise NotImplementedError
