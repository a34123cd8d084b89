from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ApplicationPayload(BaseModel):
    """Flat record sent to the intake endpoint. Every key is always present."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    full_name: str = Field(alias="fullName")
    email: str
    phone: str
    country: str
    preferred_date: str = Field(default="", alias="preferredDate")
    preferred_time: str = Field(default="", alias="preferredTime")

    course_type: str = Field(alias="courseType")
    course_type_id: str = Field(alias="courseTypeId")
    package_title: str = Field(alias="packageTitle")
    package_id: str = Field(alias="packageId")
    lessons: int

    currency: str
    total_price: int | float = Field(alias="totalPrice")
    display_total_price: str = Field(alias="displayTotalPrice")
    display_price_per_lesson: str = Field(alias="displayPricePerLesson")

    def to_wire(self) -> dict[str, object]:
        return self.model_dump(mode="json", by_alias=True)
