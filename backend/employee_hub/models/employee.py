"""Employee records, form payloads, filters and dashboard statistics."""

from __future__ import annotations

from datetime import date
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from employee_hub.core.constants import INDIAN_STATES

Gender = Literal["Male", "Female", "Other"]
GenderFilter = Literal["All", "Male", "Female", "Other"]
StatusFilter = Literal["All", "Active", "Inactive"]


class _CamelModel(BaseModel):
    """Snake_case attributes, camelCase on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Employee(_CamelModel):
    """A record as stored by the remote employee collection."""

    model_config = ConfigDict(frozen=True)

    id: int
    full_name: str = Field(..., min_length=1)
    gender: Gender
    date_of_birth: date
    profile_image: str = ""
    state: str = Field(..., min_length=1)
    is_active: bool

    def to_form_data(self, **changes: object) -> EmployeeFormData:
        """Replace payload carrying this record's fields plus ``changes``.

        Form validation is skipped: the record already lives in the remote
        collection and is resubmitted as stored.
        """
        data = self.model_dump(exclude={"id"})
        data.update(changes)
        return EmployeeFormData.model_construct(**data)


class EmployeeFormData(_CamelModel):
    """Create/replace payload: every mutable field of an Employee, no id."""

    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)

    full_name: str = Field(..., min_length=2)
    gender: Gender
    date_of_birth: date
    profile_image: str = ""
    state: str
    is_active: bool = True

    @field_validator("date_of_birth")
    @classmethod
    def _not_in_future(cls, value: date) -> date:
        if value > date.today():
            raise ValueError("Date of birth cannot be in the future")
        return value

    @field_validator("profile_image")
    @classmethod
    def _image_data_url(cls, value: str) -> str:
        if value and not (value.startswith("data:image/") and ";base64," in value):
            raise ValueError("Profile image must be a base64 image data URL")
        return value

    @field_validator("state")
    @classmethod
    def _known_state(cls, value: str) -> str:
        if not value:
            raise ValueError("State is required")
        if value not in INDIAN_STATES:
            raise ValueError(f"Unknown state: {value}")
        return value

    def to_payload(self) -> dict[str, object]:
        return self.model_dump(mode="json", by_alias=True)


class EmployeeFilters(BaseModel):
    search: str = ""
    gender: GenderFilter = "All"
    status: StatusFilter = "All"


class StateCount(BaseModel):
    state: str
    count: int


class EmployeeStats(BaseModel):
    """Dashboard aggregates over the cached employee list."""

    total: int = 0
    active: int = 0
    inactive: int = 0
    by_gender: dict[str, int] = Field(default_factory=dict)
    top_states: list[StateCount] = Field(default_factory=list)
    distinct_states: int = 0
    active_rate: int = 0
    gender_rates: dict[str, int] = Field(default_factory=dict)
