from __future__ import annotations

import logging
from dataclasses import dataclass, replace

from enrollment.application.ports.catalog import CatalogPort
from enrollment.application.use_cases.selection import SelectionUseCase
from enrollment.application.utils.validation_gate import is_ready_to_submit, needs_schedule
from enrollment.domain.entities.applicant import ApplicantFields
from enrollment.domain.entities.catalog import BundleDefinition, CategoryDefinition
from enrollment.domain.entities.selection_state import SelectionState
from enrollment.domain.entities.submission import SubmissionResult
from enrollment.domain.entities.wizard_session import WizardSession, WizardStep

EDITABLE_FIELDS = frozenset(
    {"full_name", "email", "phone", "country", "preferred_date", "preferred_time"}
)


@dataclass(frozen=True)
class TransitionResult:
    accepted: bool
    step: WizardStep
    guard_reason: str | None = None


class WizardStateMachine:
    """
    Step navigation for one session: type -> packages -> details -> apply.

    Forward transitions are guarded on the selection they need, so a session
    can never sit on a step whose category or bundle is missing. A refused
    transition leaves the session exactly as it was.
    """

    def __init__(self, catalog: CatalogPort, selection: SelectionUseCase | None = None) -> None:
        self._catalog = catalog
        self._selection = selection or SelectionUseCase(catalog)
        self._logger = logging.getLogger(__name__)

    def select_category(self, session: WizardSession, category_id: str) -> TransitionResult:
        if session.step != WizardStep.choosing_category:
            return self._refuse(session, "select_category", "wrong_step")
        if self._catalog.get_category(category_id) is None:
            return self._refuse(session, "select_category", "unknown_category")

        result = self._selection.select_category(session.selection, category_id)
        session.selection = result.updated_state
        return self._move(session, WizardStep.choosing_bundle)

    def select_bundle(self, session: WizardSession, bundle_id: str) -> TransitionResult:
        if session.step != WizardStep.choosing_bundle:
            return self._refuse(session, "select_bundle", "wrong_step")

        result = self._selection.select_bundle(session.selection, bundle_id)
        if not result.accepted:
            return self._refuse(session, "select_bundle", result.reason or "bundle_rejected")

        session.selection = result.updated_state
        return self._move(session, WizardStep.reviewing_details)

    def proceed(self, session: WizardSession) -> TransitionResult:
        if session.step != WizardStep.reviewing_details:
            return self._refuse(session, "proceed", "wrong_step")
        if self.current_category(session) is None or self.current_bundle(session) is None:
            return self._refuse(session, "proceed", "selection_incomplete")
        return self._move(session, WizardStep.applying)

    def can_submit(self, session: WizardSession) -> TransitionResult:
        """Submitting is only offered on the apply step, with a resolvable selection."""
        if session.step != WizardStep.applying:
            return self._refuse(session, "submit", "wrong_step")
        if self.current_category(session) is None or self.current_bundle(session) is None:
            return self._refuse(session, "submit", "selection_incomplete")
        return TransitionResult(accepted=True, step=session.step)

    def back(self, session: WizardSession) -> TransitionResult:
        if session.step == WizardStep.choosing_bundle:
            session.selection = self._selection.clear_bundle(session.selection)
            return self._move(session, WizardStep.choosing_category)
        if session.step == WizardStep.reviewing_details:
            return self._move(session, WizardStep.choosing_bundle)
        if session.step == WizardStep.applying:
            return self._move(session, WizardStep.reviewing_details)
        return self._refuse(session, "back", "no_previous_step")

    def reset(self, session: WizardSession) -> TransitionResult:
        """Back to the first step with every slot restored to its initial value."""
        # Bumping the attempt number orphans any submission still in flight
        session.step = WizardStep.choosing_category
        session.selection = SelectionState()
        session.fields = ApplicantFields()
        session.result = SubmissionResult()
        session.in_flight = False
        session.attempt += 1
        self._logger.info("Wizard reset", extra={"session_id": session.session_id, "attempt": session.attempt})
        return TransitionResult(accepted=True, step=session.step)

    def set_currency(self, session: WizardSession, code: str) -> None:
        session.selection = self._selection.set_currency(session.selection, code)

    def update_fields(self, session: WizardSession, **changes: str) -> ApplicantFields:
        unknown = set(changes) - EDITABLE_FIELDS
        if unknown:
            raise ValueError(f"Unknown applicant fields: {', '.join(sorted(unknown))}")
        session.fields = replace(session.fields, **changes)
        return session.fields

    def current_category(self, session: WizardSession) -> CategoryDefinition | None:
        return self._selection.current_category(session.selection)

    def current_bundle(self, session: WizardSession) -> BundleDefinition | None:
        return self._selection.current_bundle(session.selection)

    def needs_schedule(self, session: WizardSession) -> bool:
        return needs_schedule(self.current_category(session), self.current_bundle(session))

    def is_ready_to_submit(self, session: WizardSession) -> bool:
        return is_ready_to_submit(session.fields, self.current_category(session), self.current_bundle(session))

    def _move(self, session: WizardSession, step: WizardStep) -> TransitionResult:
        previous = session.step
        session.step = step
        self._logger.info(
            "Wizard step changed",
            extra={
                "session_id": session.session_id,
                "step": f"{previous.value}->{step.value}",
                "category_id": session.selection.category_id,
                "bundle_id": session.selection.bundle_id,
            },
        )
        return TransitionResult(accepted=True, step=step)

    def _refuse(self, session: WizardSession, action: str, reason: str) -> TransitionResult:
        self._logger.info(
            "Wizard transition refused",
            extra={"session_id": session.session_id, "step": session.step.value, "reason": f"{action}:{reason}"},
        )
        return TransitionResult(accepted=False, step=session.step, guard_reason=reason)
