from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from enrollment.api.v1.schemas import (
    CatalogResponseSchema, CategorySchema, CurrencyRequestSchema, CurrencySchema,
    FieldsUpdateSchema, SelectBundleRequestSchema, SelectCategoryRequestSchema,
    WizardViewSchema,
)
from enrollment.application.exceptions import SessionNotFoundError
from enrollment.application.ports.catalog import CatalogPort
from enrollment.application.ports.session_store import SessionStorePort
from enrollment.application.use_cases.pricing import PricingResolver
from enrollment.application.use_cases.submit_application import SubmitApplicationUseCase
from enrollment.application.use_cases.wizard import TransitionResult, WizardStateMachine
from enrollment.application.use_cases.wizard_view import WizardViewBuilder
from enrollment.domain.entities.selection_state import DEFAULT_CURRENCY
from enrollment.domain.entities.wizard_session import WizardSession
from enrollment.wiring.dependencies import (
    get_catalog, get_pricing, get_session_store, get_submit_use_case, get_view_builder, get_wizard,
)

router = APIRouter()
logger = logging.getLogger(__name__)


def _load(store: SessionStorePort, session_id: str) -> WizardSession:
    session = store.get(session_id)
    if session is None:
        raise SessionNotFoundError(session_id)
    return session


def _session_or_404(
    session_id: str,
    store: SessionStorePort = Depends(get_session_store),
) -> WizardSession:
    try:
        return _load(store, session_id)
    except SessionNotFoundError:
        raise HTTPException(status_code=404, detail="Session not found")


def _require(result: TransitionResult) -> None:
    if not result.accepted:
        raise HTTPException(status_code=409, detail=result.guard_reason)


@router.get("/catalog", response_model=CatalogResponseSchema)
def get_catalog_view(
    currency: str = DEFAULT_CURRENCY,
    catalog: CatalogPort = Depends(get_catalog),
    pricing: PricingResolver = Depends(get_pricing),
    views: WizardViewBuilder = Depends(get_view_builder),
):
    return CatalogResponseSchema(
        currency=pricing.effective_currency(currency).code,
        currencies=[
            CurrencySchema(code=c.code, symbol=c.symbol, symbol_prefixed=c.symbol_prefixed)
            for c in catalog.currencies()
        ],
        categories=[CategorySchema.from_view(c) for c in views.catalog_view(currency)],
    )


@router.post("/sessions", response_model=WizardViewSchema, status_code=201)
def create_session(
    store: SessionStorePort = Depends(get_session_store),
    views: WizardViewBuilder = Depends(get_view_builder),
):
    session = store.create()
    logger.info("Wizard session created", extra={"session_id": session.session_id})
    return WizardViewSchema.from_view(views.build(session))


@router.get("/sessions/{session_id}", response_model=WizardViewSchema)
def read_session(
    session: WizardSession = Depends(_session_or_404),
    views: WizardViewBuilder = Depends(get_view_builder),
):
    return WizardViewSchema.from_view(views.build(session))


@router.post("/sessions/{session_id}/category", response_model=WizardViewSchema)
def select_category(
    req: SelectCategoryRequestSchema,
    session: WizardSession = Depends(_session_or_404),
    wizard: WizardStateMachine = Depends(get_wizard),
    views: WizardViewBuilder = Depends(get_view_builder),
):
    _require(wizard.select_category(session, req.category_id))
    return WizardViewSchema.from_view(views.build(session))


@router.post("/sessions/{session_id}/bundle", response_model=WizardViewSchema)
def select_bundle(
    req: SelectBundleRequestSchema,
    session: WizardSession = Depends(_session_or_404),
    wizard: WizardStateMachine = Depends(get_wizard),
    views: WizardViewBuilder = Depends(get_view_builder),
):
    _require(wizard.select_bundle(session, req.bundle_id))
    return WizardViewSchema.from_view(views.build(session))


@router.post("/sessions/{session_id}/back", response_model=WizardViewSchema)
def go_back(
    session: WizardSession = Depends(_session_or_404),
    wizard: WizardStateMachine = Depends(get_wizard),
    views: WizardViewBuilder = Depends(get_view_builder),
):
    _require(wizard.back(session))
    return WizardViewSchema.from_view(views.build(session))


@router.post("/sessions/{session_id}/proceed", response_model=WizardViewSchema)
def proceed(
    session: WizardSession = Depends(_session_or_404),
    wizard: WizardStateMachine = Depends(get_wizard),
    views: WizardViewBuilder = Depends(get_view_builder),
):
    _require(wizard.proceed(session))
    return WizardViewSchema.from_view(views.build(session))


@router.post("/sessions/{session_id}/reset", response_model=WizardViewSchema)
def reset(
    session: WizardSession = Depends(_session_or_404),
    wizard: WizardStateMachine = Depends(get_wizard),
    views: WizardViewBuilder = Depends(get_view_builder),
):
    wizard.reset(session)
    return WizardViewSchema.from_view(views.build(session))


@router.put("/sessions/{session_id}/currency", response_model=WizardViewSchema)
def set_currency(
    req: CurrencyRequestSchema,
    session: WizardSession = Depends(_session_or_404),
    wizard: WizardStateMachine = Depends(get_wizard),
    views: WizardViewBuilder = Depends(get_view_builder),
):
    wizard.set_currency(session, req.currency)
    return WizardViewSchema.from_view(views.build(session))


@router.patch("/sessions/{session_id}/fields", response_model=WizardViewSchema)
def update_fields(
    req: FieldsUpdateSchema,
    session: WizardSession = Depends(_session_or_404),
    wizard: WizardStateMachine = Depends(get_wizard),
    views: WizardViewBuilder = Depends(get_view_builder),
):
    wizard.update_fields(session, **req.model_dump(exclude_none=True))
    return WizardViewSchema.from_view(views.build(session))


@router.post("/sessions/{session_id}/submit", response_model=WizardViewSchema)
async def submit(
    session: WizardSession = Depends(_session_or_404),
    wizard: WizardStateMachine = Depends(get_wizard),
    uc: SubmitApplicationUseCase = Depends(get_submit_use_case),
    views: WizardViewBuilder = Depends(get_view_builder),
):
    # Same gate the submit button applies
    _require(wizard.can_submit(session))
    if session.in_flight:
        raise HTTPException(status_code=409, detail="submission_in_flight")
    if not wizard.is_ready_to_submit(session):
        raise HTTPException(status_code=422, detail="not_ready_to_submit")

    await uc.submit(session)
    return WizardViewSchema.from_view(views.build(session))
