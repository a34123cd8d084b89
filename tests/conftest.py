from __future__ import annotations

import pytest

from enrollment.application.use_cases.pricing import PricingResolver
from enrollment.application.use_cases.wizard import WizardStateMachine
from enrollment.domain.entities.wizard_session import WizardSession
from enrollment.infrastructure.catalog.catalog_store import StaticCatalogStore


@pytest.fixture
def catalog() -> StaticCatalogStore:
    return StaticCatalogStore()


@pytest.fixture
def pricing(catalog: StaticCatalogStore) -> PricingResolver:
    return PricingResolver(catalog)


@pytest.fixture
def wizard(catalog: StaticCatalogStore) -> WizardStateMachine:
    return WizardStateMachine(catalog)


@pytest.fixture
def session() -> WizardSession:
    return WizardSession(session_id="test_session")
