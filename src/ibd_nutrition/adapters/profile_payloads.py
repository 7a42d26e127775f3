"""Pydantic models for health profile payloads."""

from collections.abc import Mapping
from enum import Enum
from typing import Any, TypeVar

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from ibd_nutrition.adapters.parsing import coerce_bool, coerce_number
from ibd_nutrition.domain.profile import (
    DEFAULT_PROFILE,
    DiseaseActivity,
    DosageUnit,
    LabResult,
    LabStatus,
    MicronutrientProfile,
    Supplement,
    SupplementCategory,
    SupplementFrequency,
)


_E = TypeVar("_E", bound=Enum)


def _parse_enum(enum_type: type[_E], raw: object, default: _E) -> _E:
    text = str(raw or "").strip().lower()
    for member in enum_type:
        if text in (str(member.value).lower(), member.name.lower()):
            return member
    return default


class LabResultPayload(BaseModel):
    model_config = ConfigDict(extra="ignore")

    nutrient: str = ""
    value: float = 0.0
    unit: str = ""
    status: str | None = None
    reference_range: str = Field(
        default="", validation_alias=AliasChoices("reference_range", "referenceRange")
    )

    @field_validator("value", mode="before")
    @classmethod
    def _parse_value(cls, value: object) -> float:
        return coerce_number(value) or 0.0

    def to_domain(self) -> LabResult:
        return LabResult(
            nutrient=self.nutrient,
            value=self.value,
            unit=self.unit,
            status=_parse_enum(LabStatus, self.status, LabStatus.NORMAL),
            reference_range=self.reference_range,
        )


class SupplementPayload(BaseModel):
    """Supplement row; dosage may arrive as text such as "1000"."""

    model_config = ConfigDict(extra="ignore")

    name: str = ""
    category: str | None = None
    dosage: float = 0.0
    unit: str | None = None
    frequency: str | None = None
    is_active: bool = Field(
        default=True, validation_alias=AliasChoices("is_active", "isActive")
    )

    @field_validator("dosage", mode="before")
    @classmethod
    def _parse_dosage(cls, value: object) -> float:
        number = coerce_number(value)
        return number if number is not None and number > 0 else 0.0

    @field_validator("is_active", mode="before")
    @classmethod
    def _parse_active(cls, value: object) -> bool:
        parsed = coerce_bool(value)
        return True if parsed is None else parsed

    def to_domain(self) -> Supplement:
        frequency = str(self.frequency or "").strip().lower().replace(" ", "_")
        category = str(self.category or "").strip().lower().replace(" ", "_")
        return Supplement(
            name=self.name,
            category=_parse_enum(
                SupplementCategory, category, SupplementCategory.OTHER
            ),
            dosage=self.dosage,
            unit=_parse_enum(DosageUnit, self.unit, DosageUnit.UNKNOWN),
            frequency=_parse_enum(
                SupplementFrequency, frequency, SupplementFrequency.DAILY
            ),
            is_active=self.is_active,
        )


class ProfilePayload(BaseModel):
    """Micronutrient profile; camelCase keys from the app are accepted."""

    model_config = ConfigDict(extra="ignore")

    user_id: str | None = Field(
        default=None, validation_alias=AliasChoices("user_id", "userId")
    )
    age: float | None = None
    weight: float | None = Field(
        default=None, validation_alias=AliasChoices("weight", "weight_kg", "weightKg")
    )
    height: float | None = Field(
        default=None, validation_alias=AliasChoices("height", "height_cm", "heightCm")
    )
    gender: str | None = None
    disease_activity: str | None = Field(
        default=None,
        validation_alias=AliasChoices("disease_activity", "diseaseActivity"),
    )
    lab_results: list[LabResultPayload] = Field(
        default_factory=list,
        validation_alias=AliasChoices("lab_results", "labResults"),
    )
    supplements: list[SupplementPayload] = Field(default_factory=list)

    @field_validator("age", "weight", "height", mode="before")
    @classmethod
    def _parse_measure(cls, value: object) -> float | None:
        number = coerce_number(value)
        return number if number is not None and number > 0 else None

    @field_validator("user_id", mode="before")
    @classmethod
    def _parse_user_id(cls, value: object) -> str | None:
        return None if value is None else str(value)

    def to_domain(self) -> MicronutrientProfile:
        return MicronutrientProfile(
            age=int(self.age) if self.age is not None else DEFAULT_PROFILE.age,
            weight_kg=self.weight or DEFAULT_PROFILE.weight_kg,
            height_cm=self.height or DEFAULT_PROFILE.height_cm,
            gender=(self.gender or "").strip() or DEFAULT_PROFILE.gender,
            disease_activity=DiseaseActivity.parse(self.disease_activity),
            lab_results=tuple(lab.to_domain() for lab in self.lab_results),
            supplements=tuple(item.to_domain() for item in self.supplements),
            user_id=self.user_id,
        )


def parse_profile(payload: Mapping[str, Any] | None) -> MicronutrientProfile:
    """Parse a profile payload; a missing payload yields DEFAULT_PROFILE."""
    if payload is None:
        return DEFAULT_PROFILE
    return ProfilePayload.model_validate(dict(payload)).to_domain()
