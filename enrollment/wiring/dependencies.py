from functools import lru_cache
import logging

from enrollment.core.config import settings
from enrollment.application.ports.catalog import CatalogPort
from enrollment.application.ports.delivery import DeliveryPort
from enrollment.application.ports.session_store import SessionStorePort
from enrollment.application.use_cases.pricing import PricingResolver
from enrollment.application.use_cases.submit_application import SubmitApplicationUseCase
from enrollment.application.use_cases.wizard import WizardStateMachine
from enrollment.application.use_cases.wizard_view import WizardViewBuilder
from enrollment.infrastructure.catalog.catalog_store import StaticCatalogStore
from enrollment.infrastructure.intake.formspree_client import FormspreeIntake
from enrollment.infrastructure.intake.mock_intake import MockIntake
from enrollment.infrastructure.store.memory_store import MemorySessionStore


@lru_cache
def get_catalog() -> CatalogPort:
    return StaticCatalogStore()


@lru_cache
def get_session_store() -> SessionStorePort:
    return MemorySessionStore(limit=settings.SESSION_LIMIT)


@lru_cache
def get_delivery() -> DeliveryPort:
    logger = logging.getLogger(__name__)
    logger.info("ENV=%s INTAKE_ENABLED=%s", settings.ENV, settings.INTAKE_ENABLED)

    if not settings.INTAKE_ENABLED:
        logger.info("Using MockIntake (INTAKE_ENABLED=false)")
        return MockIntake()

    logger.info("Using FormspreeIntake")
    return FormspreeIntake(
        endpoint=settings.INTAKE_ENDPOINT,
        timeout=settings.INTAKE_TIMEOUT_SECONDS,
    )


def get_pricing() -> PricingResolver:
    return PricingResolver(catalog=get_catalog())


def get_wizard() -> WizardStateMachine:
    return WizardStateMachine(catalog=get_catalog())


def get_view_builder() -> WizardViewBuilder:
    return WizardViewBuilder(catalog=get_catalog(), pricing=get_pricing(), wizard=get_wizard())


def get_submit_use_case() -> SubmitApplicationUseCase:
    return SubmitApplicationUseCase(
        wizard=get_wizard(),
        pricing=get_pricing(),
        delivery=get_delivery(),
    )
