from __future__ import annotations

import logging

import httpx

from enrollment.application.dto.application_payload import ApplicationPayload
from enrollment.application.exceptions import IntakeConfigurationError
from enrollment.application.ports.delivery import DeliveryPort
from enrollment.core.config import settings
from enrollment.domain.entities.delivery_outcome import DeliveryOutcome


class FormspreeIntake(DeliveryPort):
    def __init__(
        self,
        endpoint: str | None = None,
        timeout: float | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._endpoint = endpoint or settings.INTAKE_ENDPOINT
        if not self._endpoint:
            raise IntakeConfigurationError("INTAKE_ENDPOINT is required for Formspree delivery")

        self._client = client or httpx.AsyncClient(timeout=timeout or settings.INTAKE_TIMEOUT_SECONDS)
        self._logger = logging.getLogger(__name__)

    async def deliver(self, payload: ApplicationPayload) -> DeliveryOutcome:
        headers = {"Content-Type": "application/json", "Accept": "application/json"}
        try:
            resp = await self._client.post(self._endpoint, json=payload.to_wire(), headers=headers)
        except httpx.HTTPError as e:
            self._logger.error("Intake request failed", extra={"reason": type(e).__name__, "error": str(e)})
            return DeliveryOutcome.transport_failure(str(e) or None)

        if resp.is_success:
            self._logger.info("Intake accepted application", extra={"status": resp.status_code})
            return DeliveryOutcome.accepted()

        errors: list = []
        try:
            body = resp.json()
            if isinstance(body, dict) and isinstance(body.get("errors"), list):
                errors = body["errors"]
        except ValueError:
            pass

        self._logger.error(
            "Intake rejected application",
            extra={"status": resp.status_code, "error_count": len(errors)},
        )
        return DeliveryOutcome.rejected(errors)

    async def aclose(self) -> None:
        await self._client.aclose()
