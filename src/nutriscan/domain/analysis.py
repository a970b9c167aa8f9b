"""Typed models for nutrition label analyses."""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

NUTRIENT_UNITS = frozenset({"g", "%", "mg", "mcg", "µg"})
_UNIT_KEYS = frozenset(unit.casefold() for unit in NUTRIENT_UNITS)


class NutrientEntry(BaseModel):
    """Single nutrient parsed from the analysis text."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    value: float = Field(ge=0.0)
    unit: str

    @field_validator("unit")
    @classmethod
    def _known_unit(cls, value: str) -> str:
        # Case is kept as written, only the spelling is checked.
        if value.casefold() not in _UNIT_KEYS:
            raise ValueError(f"unsupported nutrient unit: {value!r}")
        return value

    @property
    def amount(self) -> str:
        """Value and unit as written on a label, e.g. ``200mg`` or ``2.5g``."""
        shown = str(int(self.value)) if self.value.is_integer() else str(self.value)
        return f"{shown}{self.unit}"


class AnalysisResult(BaseModel):
    """Structured analysis of a nutrition label."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    nutrients: tuple[NutrientEntry, ...] = ()
    health_implications: tuple[str, ...] = ()
    allergens: tuple[str, ...] = ()
    overall_assessment: str = ""
    citations: tuple[str, ...] = ()
