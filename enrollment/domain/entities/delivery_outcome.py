from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class DeliveryKind(str, Enum):
    accepted = "accepted"
    rejected = "rejected"
    transport_failure = "transport_failure"


@dataclass(frozen=True)
class DeliveryOutcome:
    kind: DeliveryKind
    errors: list[Any] = field(default_factory=list)  # raw error entries from the intake body
    diagnostic: str | None = None

    @classmethod
    def accepted(cls) -> DeliveryOutcome:
        return cls(kind=DeliveryKind.accepted)

    @classmethod
    def rejected(cls, errors: list[Any] | None = None) -> DeliveryOutcome:
        return cls(kind=DeliveryKind.rejected, errors=list(errors or []))

    @classmethod
    def transport_failure(cls, diagnostic: str | None = None) -> DeliveryOutcome:
        return cls(kind=DeliveryKind.transport_failure, diagnostic=diagnostic)
