from __future__ import annotations

from pydantic import BaseModel, Field

from enrollment.application.use_cases.wizard_view import BundleView, CategoryView, WizardView


class CurrencySchema(BaseModel):
    code: str
    symbol: str
    symbol_prefixed: bool


class BundleSchema(BaseModel):
    id: str
    title: str
    unit_count: int
    lessons_label: str
    currency: str
    total: int | float
    display_total: str
    display_per_unit: str

    @classmethod
    def from_view(cls, view: BundleView) -> BundleSchema:
        return cls(**view.__dict__)


class CategorySchema(BaseModel):
    id: str
    title: str
    subtitle: str
    description: str
    bundles: list[BundleSchema] = Field(default_factory=list)

    @classmethod
    def from_view(cls, view: CategoryView) -> CategorySchema:
        return cls(
            id=view.id,
            title=view.title,
            subtitle=view.subtitle,
            description=view.description,
            bundles=[BundleSchema.from_view(b) for b in view.bundles],
        )


class CatalogResponseSchema(BaseModel):
    currency: str
    currencies: list[CurrencySchema]
    categories: list[CategorySchema]


class ApplicantFieldsSchema(BaseModel):
    full_name: str = ""
    email: str = ""
    phone: str = ""
    country: str = ""
    preferred_date: str = ""
    preferred_time: str = ""


class FieldsUpdateSchema(BaseModel):
    full_name: str | None = None
    email: str | None = None
    phone: str | None = None
    country: str | None = None
    preferred_date: str | None = None
    preferred_time: str | None = None


class SubmissionSchema(BaseModel):
    status: str
    message: str


class WizardViewSchema(BaseModel):
    session_id: str
    step: str
    step_label: str
    currency: str
    category_id: str | None = None
    bundle_id: str | None = None
    category: CategorySchema | None = None
    bundle: BundleSchema | None = None
    fields: ApplicantFieldsSchema
    needs_schedule: bool
    ready_to_submit: bool
    submission: SubmissionSchema
    in_flight: bool

    @classmethod
    def from_view(cls, view: WizardView) -> WizardViewSchema:
        return cls(
            session_id=view.session_id,
            step=view.step.value,
            step_label=view.step_label,
            currency=view.currency,
            category_id=view.category.id if view.category else None,
            bundle_id=view.bundle.id if view.bundle else None,
            category=CategorySchema.from_view(view.category) if view.category else None,
            bundle=BundleSchema.from_view(view.bundle) if view.bundle else None,
            fields=ApplicantFieldsSchema(**view.fields.__dict__),
            needs_schedule=view.needs_schedule,
            ready_to_submit=view.ready_to_submit,
            submission=SubmissionSchema(status=view.result.status.value, message=view.result.message),
            in_flight=view.in_flight,
        )


class SelectCategoryRequestSchema(BaseModel):
    category_id: str


class SelectBundleRequestSchema(BaseModel):
    bundle_id: str


class CurrencyRequestSchema(BaseModel):
    currency: str
