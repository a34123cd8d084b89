from __future__ import annotations

import logging
from typing import Any

from enrollment.application.dto.application_payload import ApplicationPayload
from enrollment.application.ports.delivery import DeliveryPort
from enrollment.application.use_cases.pricing import PricingResolver
from enrollment.application.use_cases.wizard import WizardStateMachine
from enrollment.domain.entities.catalog import BundleDefinition, CategoryDefinition
from enrollment.domain.entities.delivery_outcome import DeliveryKind, DeliveryOutcome
from enrollment.domain.entities.submission import GENERIC_FAILURE_MESSAGE, SubmissionResult
from enrollment.domain.entities.wizard_session import WizardSession


class SubmitApplicationUseCase:
    """
    Single-attempt async submission of the current session.

    Each attempt is numbered from the session's attempt counter. If the counter
    has moved on by the time delivery returns (reset, or a newer submit), the
    outcome belongs to a stale attempt and is dropped.
    """

    def __init__(
        self,
        wizard: WizardStateMachine,
        pricing: PricingResolver,
        delivery: DeliveryPort,
    ) -> None:
        self._wizard = wizard
        self._pricing = pricing
        self._delivery = delivery
        self._logger = logging.getLogger(__name__)

    async def submit(self, session: WizardSession) -> SubmissionResult:
        category = self._wizard.current_category(session)
        bundle = self._wizard.current_bundle(session)
        if category is None or bundle is None:
            self._logger.warning(
                "Submit ignored, selection incomplete",
                extra={"session_id": session.session_id, "reason": "selection_incomplete"},
            )
            return session.result

        session.attempt += 1
        attempt = session.attempt
        session.result = SubmissionResult.in_flight()
        session.in_flight = True

        payload = self.build_payload(session, category, bundle)
        self._logger.info(
            "Submitting application",
            extra={
                "session_id": session.session_id,
                "attempt": attempt,
                "category_id": category.id,
                "bundle_id": bundle.id,
                "currency": payload.currency,
            },
        )

        try:
            outcome = await self._delivery.deliver(payload)
        except Exception as e:
            self._logger.exception("Delivery raised", extra={"session_id": session.session_id, "attempt": attempt})
            outcome = DeliveryOutcome.transport_failure(str(e) or None)

        result = self._interpret(outcome)

        if session.attempt != attempt:
            self._logger.info(
                "Dropping stale submission outcome",
                extra={"session_id": session.session_id, "attempt": attempt, "status": result.status.value},
            )
            return session.result

        session.result = result
        session.in_flight = False
        self._logger.info(
            "Submission finished",
            extra={"session_id": session.session_id, "attempt": attempt, "status": result.status.value},
        )
        return result

    def build_payload(
        self,
        session: WizardSession,
        category: CategoryDefinition,
        bundle: BundleDefinition,
    ) -> ApplicationPayload:
        fields = session.fields
        currency = session.selection.currency
        price = self._pricing.resolve_price(bundle, currency)
        schedule = self._wizard.needs_schedule(session)

        return ApplicationPayload(
            full_name=fields.full_name,
            email=fields.email,
            phone=fields.phone,
            country=fields.country,
            preferred_date=fields.preferred_date if schedule else "",
            preferred_time=fields.preferred_time if schedule else "",
            course_type=category.title,
            course_type_id=category.id,
            package_title=bundle.title,
            package_id=bundle.id,
            lessons=bundle.unit_count,
            currency=price.currency.code,
            total_price=price.amount,
            display_total_price=self._pricing.format_total(bundle, currency),
            display_price_per_lesson=self._pricing.resolve_per_unit_label(bundle, currency),
        )

    def _interpret(self, outcome: DeliveryOutcome) -> SubmissionResult:
        if outcome.kind == DeliveryKind.accepted:
            return SubmissionResult.success()
        if outcome.kind == DeliveryKind.rejected:
            return SubmissionResult.failure(_first_error_message(outcome.errors))
        return SubmissionResult.failure(outcome.diagnostic)


def _first_error_message(errors: list[Any]) -> str:
    try:
        message = errors[0]["message"]
    except (IndexError, KeyError, TypeError):
        return GENERIC_FAILURE_MESSAGE
    if not isinstance(message, str) or not message.strip():
        return GENERIC_FAILURE_MESSAGE
    return message
