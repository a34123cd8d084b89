from __future__ import annotations

from enrollment.domain.entities.applicant import ApplicantFields
from enrollment.domain.entities.catalog import BundleDefinition, CategoryDefinition

# Categories that are booked as a single scheduled session
SCHEDULED_CATEGORY_IDS = frozenset({"trial", "placement"})


def needs_schedule(category: CategoryDefinition | None, bundle: BundleDefinition | None) -> bool:
    """Preferred date/time are required for trial and placement, and for any single-lesson bundle."""
    if category is not None and category.id in SCHEDULED_CATEGORY_IDS:
        return True
    return bundle is not None and bundle.unit_count == 1


def is_ready_to_submit(
    fields: ApplicantFields,
    category: CategoryDefinition | None,
    bundle: BundleDefinition | None,
) -> bool:
    """
    Submit-button gate. Presence checks only; no email/phone format validation.
    """
    base = (fields.full_name, fields.email, fields.phone, fields.country)
    if not all(value.strip() for value in base):
        return False
    if not needs_schedule(category, bundle):
        return True
    return bool(fields.preferred_date.strip() and fields.preferred_time.strip())
