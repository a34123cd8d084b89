"""
Tests for the async submission lifecycle.
"""

from __future__ import annotations

import asyncio

import pytest

from enrollment.application.dto.application_payload import ApplicationPayload
from enrollment.application.ports.delivery import DeliveryPort
from enrollment.application.use_cases.submit_application import SubmitApplicationUseCase
from enrollment.domain.entities.delivery_outcome import DeliveryOutcome
from enrollment.domain.entities.submission import (
    CONFIRMATION_MESSAGE,
    GENERIC_FAILURE_MESSAGE,
    SubmissionResult,
    SubmissionStatus,
)
from enrollment.domain.entities.wizard_session import WizardSession
from enrollment.infrastructure.intake.mock_intake import MockIntake

PAYLOAD_KEYS = {
    "fullName", "email", "phone", "country", "preferredDate", "preferredTime",
    "courseType", "courseTypeId", "packageTitle", "packageId", "lessons",
    "currency", "totalPrice", "displayTotalPrice", "displayPricePerLesson",
}


class RaisingIntake(DeliveryPort):
    def __init__(self, error: Exception) -> None:
        self._error = error

    async def deliver(self, payload: ApplicationPayload) -> DeliveryOutcome:
        raise self._error


class GatedIntake(DeliveryPort):
    """Holds every delivery until released."""

    def __init__(self, outcome: DeliveryOutcome) -> None:
        self.outcome = outcome
        self.started = asyncio.Event()
        self.release = asyncio.Event()

    async def deliver(self, payload: ApplicationPayload) -> DeliveryOutcome:
        self.started.set()
        await self.release.wait()
        return self.outcome


def _ready_session(wizard, category: str = "main", bundle: str = "m10") -> WizardSession:
    session = WizardSession(session_id="submit_test")
    wizard.select_category(session, category)
    wizard.select_bundle(session, bundle)
    wizard.proceed(session)
    wizard.update_fields(
        session,
        full_name="Ana Lopez",
        email="ana@example.com",
        phone="+49 123",
        country="Germany",
        preferred_date="2026-11-02",
        preferred_time="18:00",
    )
    return session


def test_success(wizard, pricing):
    """Valid fields + accepted delivery -> success, not in flight."""
    intake = MockIntake()
    uc = SubmitApplicationUseCase(wizard=wizard, pricing=pricing, delivery=intake)
    session = _ready_session(wizard)

    result = asyncio.run(uc.submit(session))

    assert result == SubmissionResult.success()
    assert result.message == CONFIRMATION_MESSAGE
    assert session.result.status == SubmissionStatus.success
    assert session.in_flight is False
    assert len(intake.delivered) == 1


def test_payload_shape_without_schedule(wizard, pricing):
    """Multi-lesson bundle: schedule keys present but blank."""
    intake = MockIntake()
    uc = SubmitApplicationUseCase(wizard=wizard, pricing=pricing, delivery=intake)
    session = _ready_session(wizard, "main", "m10")
    wizard.set_currency(session, "KWD")

    asyncio.run(uc.submit(session))
    wire = intake.delivered[0].to_wire()

    assert set(wire) == PAYLOAD_KEYS
    assert wire["preferredDate"] == ""
    assert wire["preferredTime"] == ""
    assert wire["courseType"] == "Main Course"
    assert wire["courseTypeId"] == "main"
    assert wire["packageTitle"] == "Starter Pack"
    assert wire["packageId"] == "m10"
    assert wire["lessons"] == 10
    assert wire["currency"] == "KWD"
    assert wire["totalPrice"] == 43
    assert wire["displayTotalPrice"] == "43 KWD"
    assert wire["displayPricePerLesson"] == "4.3 KWD per lesson"


def test_payload_shape_with_schedule(wizard, pricing):
    """Trial: schedule fields are sent, total is Free."""
    intake = MockIntake()
    uc = SubmitApplicationUseCase(wizard=wizard, pricing=pricing, delivery=intake)
    session = _ready_session(wizard, "trial", "t1")

    asyncio.run(uc.submit(session))
    wire = intake.delivered[0].to_wire()

    assert set(wire) == PAYLOAD_KEYS
    assert wire["preferredDate"] == "2026-11-02"
    assert wire["preferredTime"] == "18:00"
    assert wire["totalPrice"] == 0
    assert wire["displayTotalPrice"] == "Free"
    assert wire["currency"] == "USD"


def test_unknown_currency_is_sent_as_usd(wizard, pricing):
    intake = MockIntake()
    uc = SubmitApplicationUseCase(wizard=wizard, pricing=pricing, delivery=intake)
    session = _ready_session(wizard)
    wizard.set_currency(session, "EUR")

    asyncio.run(uc.submit(session))
    wire = intake.delivered[0].to_wire()

    assert wire["currency"] == "USD"
    assert wire["totalPrice"] == 140
    assert wire["displayTotalPrice"] == "$140"


def test_rejection_surfaces_first_error(wizard, pricing):
    intake = MockIntake(DeliveryOutcome.rejected([{"message": "Invalid email"}, {"message": "Other"}]))
    uc = SubmitApplicationUseCase(wizard=wizard, pricing=pricing, delivery=intake)
    session = _ready_session(wizard)

    result = asyncio.run(uc.submit(session))

    assert result == SubmissionResult.failure("Invalid email")
    assert session.result.message == "Invalid email"
    assert session.in_flight is False


@pytest.mark.parametrize(
    "errors",
    [[], ["not a dict"], [{"code": "EMAIL"}], [{"message": ""}], [None]],
)
def test_malformed_rejection_uses_generic_message(wizard, pricing, errors):
    intake = MockIntake(DeliveryOutcome.rejected(errors))
    uc = SubmitApplicationUseCase(wizard=wizard, pricing=pricing, delivery=intake)
    session = _ready_session(wizard)

    result = asyncio.run(uc.submit(session))

    assert result.status == SubmissionStatus.error
    assert result.message == GENERIC_FAILURE_MESSAGE


def test_transport_failure_without_diagnostic(wizard, pricing):
    intake = MockIntake(DeliveryOutcome.transport_failure())
    uc = SubmitApplicationUseCase(wizard=wizard, pricing=pricing, delivery=intake)
    session = _ready_session(wizard)

    result = asyncio.run(uc.submit(session))

    assert result == SubmissionResult.failure(GENERIC_FAILURE_MESSAGE)
    assert session.in_flight is False


def test_transport_failure_with_diagnostic(wizard, pricing):
    intake = MockIntake(DeliveryOutcome.transport_failure("Connection refused"))
    uc = SubmitApplicationUseCase(wizard=wizard, pricing=pricing, delivery=intake)

    result = asyncio.run(uc.submit(_ready_session(wizard)))

    assert result.message == "Connection refused"


def test_raising_delivery_is_a_transport_failure(wizard, pricing):
    uc = SubmitApplicationUseCase(wizard=wizard, pricing=pricing, delivery=RaisingIntake(RuntimeError("boom")))
    session = _ready_session(wizard)
    assert asyncio.run(uc.submit(session)).message == "boom"
    assert session.in_flight is False

    uc = SubmitApplicationUseCase(wizard=wizard, pricing=pricing, delivery=RaisingIntake(RuntimeError()))
    assert asyncio.run(uc.submit(session)).message == GENERIC_FAILURE_MESSAGE


def test_incomplete_selection_is_a_noop(wizard, pricing):
    intake = MockIntake()
    uc = SubmitApplicationUseCase(wizard=wizard, pricing=pricing, delivery=intake)
    session = WizardSession(session_id="empty")

    result = asyncio.run(uc.submit(session))

    assert result == SubmissionResult()
    assert session.in_flight is False
    assert session.attempt == 0
    assert intake.delivered == []


def test_new_attempt_starts_clean(wizard, pricing):
    """A retry after an error shows in-flight with no leftover error text."""
    session = _ready_session(wizard)
    session.result = SubmissionResult.failure("Invalid email")

    async def scenario():
        intake = GatedIntake(DeliveryOutcome.accepted())
        uc = SubmitApplicationUseCase(wizard=wizard, pricing=pricing, delivery=intake)
        task = asyncio.create_task(uc.submit(session))
        await intake.started.wait()
        snapshot = (session.result, session.in_flight)
        intake.release.set()
        return snapshot, await task

    (during, in_flight), final = asyncio.run(scenario())

    assert during == SubmissionResult.in_flight()
    assert during.message == ""
    assert in_flight is True
    assert final.status == SubmissionStatus.success


def test_reset_while_in_flight_drops_late_outcome(wizard, pricing):
    session = _ready_session(wizard)

    async def scenario():
        intake = GatedIntake(DeliveryOutcome.rejected([{"message": "Invalid email"}]))
        uc = SubmitApplicationUseCase(wizard=wizard, pricing=pricing, delivery=intake)
        task = asyncio.create_task(uc.submit(session))
        await intake.started.wait()
        wizard.reset(session)
        intake.release.set()
        return await task

    result = asyncio.run(scenario())

    assert result == SubmissionResult()
    assert session.result == SubmissionResult()
    assert session.in_flight is False
    assert session.selection.category_id is None


def test_newer_attempt_wins_over_older(wizard, pricing):
    session = _ready_session(wizard)

    async def scenario():
        slow = GatedIntake(DeliveryOutcome.transport_failure("timeout"))
        first = asyncio.create_task(
            SubmitApplicationUseCase(wizard=wizard, pricing=pricing, delivery=slow).submit(session)
        )
        await slow.started.wait()
        second = await SubmitApplicationUseCase(wizard=wizard, pricing=pricing, delivery=MockIntake()).submit(session)
        slow.release.set()
        await first
        return second

    second = asyncio.run(scenario())

    assert second.status == SubmissionStatus.success
    assert session.result.status == SubmissionStatus.success
    assert session.in_flight is False
