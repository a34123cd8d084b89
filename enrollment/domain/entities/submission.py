from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

GENERIC_FAILURE_MESSAGE = "Submission failed. Please try again."
CONFIRMATION_MESSAGE = "Submitted! We will contact you by email with the next steps."


class SubmissionStatus(str, Enum):
    idle = "idle"
    in_flight = "in_flight"
    success = "success"
    error = "error"


@dataclass(frozen=True)
class SubmissionResult:
    status: SubmissionStatus = SubmissionStatus.idle
    message: str = ""

    @classmethod
    def in_flight(cls) -> SubmissionResult:
        return cls(status=SubmissionStatus.in_flight)

    @classmethod
    def success(cls, message: str = CONFIRMATION_MESSAGE) -> SubmissionResult:
        return cls(status=SubmissionStatus.success, message=message)

    @classmethod
    def failure(cls, message: str | None) -> SubmissionResult:
        return cls(status=SubmissionStatus.error, message=message or GENERIC_FAILURE_MESSAGE)
