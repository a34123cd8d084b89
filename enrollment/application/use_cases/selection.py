from __future__ import annotations

import logging
from dataclasses import dataclass, replace

from enrollment.application.ports.catalog import CatalogPort
from enrollment.domain.entities.catalog import BundleDefinition, CategoryDefinition
from enrollment.domain.entities.selection_state import SelectionState


@dataclass(frozen=True)
class SelectionResult:
    """Result of a selection change."""

    updated_state: SelectionState
    accepted: bool
    reason: str | None = None  # why the change was refused, if it was


class SelectionUseCase:
    """Category / bundle / currency choice, always relative to the catalog."""

    def __init__(self, catalog: CatalogPort) -> None:
        self._catalog = catalog
        self._logger = logging.getLogger(__name__)

    def select_category(self, state: SelectionState, category_id: str) -> SelectionResult:
        # Bundle is cleared even if the new category reuses the same bundle id
        return SelectionResult(
            updated_state=replace(state, category_id=category_id, bundle_id=None),
            accepted=True,
        )

    def select_bundle(self, state: SelectionState, bundle_id: str) -> SelectionResult:
        if not state.category_id:
            self._logger.warning(
                "Bundle selected without a category",
                extra={"bundle_id": bundle_id, "reason": "category_required"},
            )
            return SelectionResult(updated_state=state, accepted=False, reason="category_required")

        if self._catalog.get_bundle(state.category_id, bundle_id) is None:
            self._logger.warning(
                "Bundle does not belong to current category",
                extra={"category_id": state.category_id, "bundle_id": bundle_id, "reason": "bundle_not_in_category"},
            )
            return SelectionResult(updated_state=state, accepted=False, reason="bundle_not_in_category")

        return SelectionResult(updated_state=replace(state, bundle_id=bundle_id), accepted=True)

    def clear_bundle(self, state: SelectionState) -> SelectionState:
        return replace(state, bundle_id=None)

    def set_currency(self, state: SelectionState, code: str) -> SelectionState:
        # Not validated; PricingResolver falls back for unsupported codes
        return replace(state, currency=code)

    def current_category(self, state: SelectionState) -> CategoryDefinition | None:
        return self._catalog.get_category(state.category_id)

    def current_bundle(self, state: SelectionState) -> BundleDefinition | None:
        return self._catalog.get_bundle(state.category_id, state.bundle_id)
