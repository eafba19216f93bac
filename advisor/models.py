# advisor/models.py
from dataclasses import dataclass
from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CompatibilityLevel(str, Enum):
    """Ordered verdict category: Poor < Limited < Good < Excellent."""

    POOR = "Poor"
    LIMITED = "Limited"
    GOOD = "Good"
    EXCELLENT = "Excellent"

    @property
    def rank(self) -> int:
        return list(type(self)).index(self)

    def __lt__(self, other):
        if not isinstance(other, CompatibilityLevel):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other):
        if not isinstance(other, CompatibilityLevel):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other):
        if not isinstance(other, CompatibilityLevel):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other):
        if not isinstance(other, CompatibilityLevel):
            return NotImplemented
        return self.rank >= other.rank

    @classmethod
    def parse(cls, value: str) -> "CompatibilityLevel":
        """Case-insensitive lookup by label, e.g. "good" -> GOOD."""
        wanted = value.strip().lower()
        for level in cls:
            if level.value.lower() == wanted:
                return level
        raise ValueError(f"Unknown compatibility level: {value!r}")


@dataclass(frozen=True)
class HardwareDescriptor:
    cpu_brand: str
    cpu_model: str
    motherboard: str
    graphics_card: str


class Verdict(BaseModel):
    """
    Structured compatibility verdict.

    The shape is the same whether the local rules or a remote evaluator
    produced it. `recommended_versions` travels as `recommendedVersions`
    on the wire; both names are accepted on input.
    """

    model_config = ConfigDict(populate_by_name=True)

    compatibility: CompatibilityLevel
    issues: List[str] = Field(default_factory=list)
    recommended_versions: List[str] = Field(alias="recommendedVersions", min_length=1)
    tips: List[str] = Field(default_factory=list)
    summary: str

    @field_validator("compatibility", mode="before")
    @classmethod
    def _parse_level(cls, value):
        if isinstance(value, str) and not isinstance(value, CompatibilityLevel):
            return CompatibilityLevel.parse(value)
        return value

    def to_payload(self) -> dict:
        """JSON-ready dict using the wire field names."""
        return self.model_dump(mode="json", by_alias=True)
