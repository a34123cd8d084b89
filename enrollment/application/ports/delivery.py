from __future__ import annotations

from abc import ABC, abstractmethod

from enrollment.application.dto.application_payload import ApplicationPayload
from enrollment.domain.entities.delivery_outcome import DeliveryOutcome


class DeliveryPort(ABC):
    @abstractmethod
    async def deliver(self, payload: ApplicationPayload) -> DeliveryOutcome:
        """
        Deliver a completed application to the intake endpoint.

        Implementations should report failures through the returned outcome
        (rejected / transport_failure). Callers still treat a raised exception
        as a transport failure.
        """
        raise NotImplementedError
