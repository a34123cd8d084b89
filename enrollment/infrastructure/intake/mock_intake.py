from __future__ import annotations

import logging

from enrollment.application.dto.application_payload import ApplicationPayload
from enrollment.application.ports.delivery import DeliveryPort
from enrollment.domain.entities.delivery_outcome import DeliveryOutcome


class MockIntake(DeliveryPort):
    """Records every payload and answers with a fixed outcome (accepted by default)."""

    def __init__(self, outcome: DeliveryOutcome | None = None) -> None:
        self.outcome = outcome or DeliveryOutcome.accepted()
        self.delivered: list[ApplicationPayload] = []
        self._logger = logging.getLogger(__name__)

    async def deliver(self, payload: ApplicationPayload) -> DeliveryOutcome:
        self.delivered.append(payload)
        self._logger.info(
            "Mock intake received application",
            extra={"bundle_id": payload.package_id, "currency": payload.currency, "status": self.outcome.kind.value},
        )
        return self.outcome
