"""
Tests for selection changes relative to the catalog.
"""

from __future__ import annotations

from enrollment.application.use_cases.selection import SelectionUseCase
from enrollment.domain.entities.catalog import BundleDefinition, CategoryDefinition
from enrollment.domain.entities.selection_state import SelectionState
from enrollment.infrastructure.catalog.catalog_store import StaticCatalogStore


def test_defaults():
    state = SelectionState()
    assert state.category_id is None
    assert state.bundle_id is None
    assert state.currency == "USD"


def test_select_category_clears_bundle(catalog):
    """select A, select bundle under A, select B -> bundle is empty."""
    uc = SelectionUseCase(catalog)
    state = uc.select_category(SelectionState(), "main").updated_state
    state = uc.select_bundle(state, "m10").updated_state
    assert state.bundle_id == "m10"

    state = uc.select_category(state, "conv").updated_state
    assert state.category_id == "conv"
    assert state.bundle_id is None
    assert uc.current_bundle(state) is None


def test_select_category_clears_bundle_with_shared_id():
    """Clearing is by identity of the category change, not by whether the id still resolves."""
    shared = BundleDefinition(id="x", title="Shared", unit_count=5, price_by_currency={"USD": 50})
    catalog = StaticCatalogStore(
        categories=[
            CategoryDefinition(id="a", title="A", subtitle="", description=""),
            CategoryDefinition(id="b", title="B", subtitle="", description=""),
        ],
        bundles={"a": [shared], "b": [shared]},
    )
    uc = SelectionUseCase(catalog)
    state = uc.select_category(SelectionState(), "a").updated_state
    state = uc.select_bundle(state, "x").updated_state
    state = uc.select_category(state, "b").updated_state
    assert state.bundle_id is None


def test_select_bundle_requires_category(catalog):
    uc = SelectionUseCase(catalog)
    result = uc.select_bundle(SelectionState(), "m1")
    assert result.accepted is False
    assert result.reason == "category_required"
    assert result.updated_state == SelectionState()


def test_select_bundle_from_other_category_is_noop(catalog):
    uc = SelectionUseCase(catalog)
    state = uc.select_category(SelectionState(), "main").updated_state
    result = uc.select_bundle(state, "c10")
    assert result.accepted is False
    assert result.reason == "bundle_not_in_category"
    assert result.updated_state is state


def test_current_lookups_never_raise(catalog):
    uc = SelectionUseCase(catalog)
    state = SelectionState(category_id="nope", bundle_id="m1")
    assert uc.current_category(state) is None
    assert uc.current_bundle(state) is None

    state = SelectionState(category_id="main", bundle_id="m1")
    assert uc.current_category(state).title == "Main Course"
    assert uc.current_bundle(state).title == "Quick Start"


def test_set_currency_is_not_validated(catalog):
    uc = SelectionUseCase(catalog)
    state = uc.set_currency(SelectionState(), "XYZ")
    assert state.currency == "XYZ"


def test_catalog_unknown_category_has_no_bundles(catalog):
    assert catalog.bundles_for("unknown") == []
    assert catalog.bundles_for(None) == []
    assert [c.id for c in catalog.categories_in_order()] == ["main", "conv", "placement", "trial"]
    assert [b.id for b in catalog.bundles_for("conv")] == ["c1", "c10", "c20", "c40"]
