from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from enrollment.domain.entities.applicant import ApplicantFields
from enrollment.domain.entities.selection_state import SelectionState
from enrollment.domain.entities.submission import SubmissionResult


class WizardStep(str, Enum):
    choosing_category = "type"
    choosing_bundle = "packages"
    reviewing_details = "details"
    applying = "apply"


STEP_LABELS: dict[WizardStep, str] = {
    WizardStep.choosing_category: "Choose a course",
    WizardStep.choosing_bundle: "Choose a package",
    WizardStep.reviewing_details: "Package details",
    WizardStep.applying: "Apply",
}


@dataclass
class WizardSession:
    """One user's wizard context. Each slot holds a frozen value and is replaced, never edited."""

    session_id: str
    step: WizardStep = WizardStep.choosing_category
    selection: SelectionState = field(default_factory=SelectionState)
    fields: ApplicantFields = field(default_factory=ApplicantFields)
    result: SubmissionResult = field(default_factory=SubmissionResult)
    in_flight: bool = False
    attempt: int = 0  # monotonic, survives reset so late outcomes can be recognised
    created_at: float | None = None
