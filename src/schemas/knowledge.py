from enum import Enum
from typing import FrozenSet, Tuple
from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

class ConditionSeverity(str, Enum):
    EMERGENCY = "emergency"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def rank(self) -> int:
        return SEVERITY_RANK[self]

SEVERITY_RANK = {
    ConditionSeverity.EMERGENCY: 4,
    ConditionSeverity.HIGH: 3,
    ConditionSeverity.MEDIUM: 2,
    ConditionSeverity.LOW: 1,
}

class InteractionSeverity(str, Enum):
    MAJOR = "Major"
    MODERATE = "Moderate"
    MINOR = "Minor"

# Separator used in canonical drug pair keys, e.g. "aspirin-warfarin"
PAIR_SEPARATOR = "-"

def canonical_pair_key(first: str, second: str) -> str:
    """
    Order-independent key for a drug pair. Inputs must already be normalized.
    """
    return PAIR_SEPARATOR.join(sorted((first, second)))


class Symptom(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Stable key, e.g. 'shortnessBreath'")
    name: str
    questions: Tuple[str, ...] = Field((), description="Follow-up prompt keys, in display order")

class SymptomCategory(BaseModel):
    """
    Display grouping only. Matching never looks at categories.
    """
    model_config = ConfigDict(frozen=True)

    name: str
    symptoms: Tuple[Symptom, ...]

class Condition(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    # Tuple keeps the defining order for reporting matched symptoms
    symptoms: Tuple[str, ...] = Field(..., min_length=1)
    severity: ConditionSeverity
    recommendations: Tuple[str, ...] = ()

    @field_validator("symptoms")
    @classmethod
    def symptoms_are_unique(cls, v: Tuple[str, ...]) -> Tuple[str, ...]:
        # A condition is a set of symptoms; a repeat would skew the score
        dupes = sorted({s for s in v if v.count(s) > 1})
        if dupes:
            raise ValueError(f"Duplicate symptom ids: {dupes}")
        return v

    @property
    def symptom_set(self) -> FrozenSet[str]:
        return frozenset(self.symptoms)

class InteractionRule(BaseModel):
    model_config = ConfigDict(frozen=True)

    drugs: Tuple[str, str]
    severity: InteractionSeverity
    summary_key: str
    management_key: str

    @computed_field
    @property
    def key(self) -> str:
        return canonical_pair_key(self.drugs[0].strip().lower(), self.drugs[1].strip().lower())
