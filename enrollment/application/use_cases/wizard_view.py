from __future__ import annotations

from dataclasses import dataclass

from enrollment.application.ports.catalog import CatalogPort
from enrollment.application.use_cases.pricing import PricingResolver
from enrollment.application.use_cases.wizard import WizardStateMachine
from enrollment.domain.entities.applicant import ApplicantFields
from enrollment.domain.entities.catalog import BundleDefinition, CategoryDefinition
from enrollment.domain.entities.submission import SubmissionResult
from enrollment.domain.entities.wizard_session import STEP_LABELS, WizardSession, WizardStep


@dataclass(frozen=True)
class BundleView:
    id: str
    title: str
    unit_count: int
    lessons_label: str  # "1 lesson" / "10 lessons"
    currency: str
    total: int | float
    display_total: str
    display_per_unit: str


@dataclass(frozen=True)
class CategoryView:
    id: str
    title: str
    subtitle: str
    description: str
    bundles: list[BundleView]


@dataclass(frozen=True)
class WizardView:
    session_id: str
    step: WizardStep
    step_label: str
    currency: str
    category: CategoryView | None
    bundle: BundleView | None
    fields: ApplicantFields
    needs_schedule: bool
    ready_to_submit: bool
    result: SubmissionResult
    in_flight: bool


def lessons_label(unit_count: int) -> str:
    return f"{unit_count} lesson{'' if unit_count == 1 else 's'}"


class WizardViewBuilder:
    """Derives everything the UI renders from a session; never mutates it."""

    def __init__(self, catalog: CatalogPort, pricing: PricingResolver, wizard: WizardStateMachine) -> None:
        self._catalog = catalog
        self._pricing = pricing
        self._wizard = wizard

    def bundle_view(self, bundle: BundleDefinition, currency: str) -> BundleView:
        price = self._pricing.resolve_price(bundle, currency)
        return BundleView(
            id=bundle.id,
            title=bundle.title,
            unit_count=bundle.unit_count,
            lessons_label=lessons_label(bundle.unit_count),
            currency=price.currency.code,
            total=price.amount,
            display_total=self._pricing.format_total(bundle, currency),
            display_per_unit=self._pricing.resolve_per_unit_label(bundle, currency),
        )

    def category_view(self, category: CategoryDefinition, currency: str) -> CategoryView:
        return CategoryView(
            id=category.id,
            title=category.title,
            subtitle=category.subtitle,
            description=category.description,
            bundles=[self.bundle_view(b, currency) for b in self._catalog.bundles_for(category.id)],
        )

    def catalog_view(self, currency: str) -> list[CategoryView]:
        return [self.category_view(c, currency) for c in self._catalog.categories_in_order()]

    def build(self, session: WizardSession) -> WizardView:
        currency = session.selection.currency
        category = self._wizard.current_category(session)
        bundle = self._wizard.current_bundle(session)
        return WizardView(
            session_id=session.session_id,
            step=session.step,
            step_label=STEP_LABELS[session.step],
            currency=self._pricing.effective_currency(currency).code,
            category=self.category_view(category, currency) if category else None,
            bundle=self.bundle_view(bundle, currency) if bundle else None,
            fields=session.fields,
            needs_schedule=self._wizard.needs_schedule(session),
            ready_to_submit=self._wizard.is_ready_to_submit(session),
            result=session.result,
            in_flight=session.in_flight,
        )
