from enum import Enum
from typing import Dict, List, Optional, Tuple
from pydantic import BaseModel, Field

from src.schemas.knowledge import ConditionSeverity, InteractionSeverity

# 1. Symptom Matcher output
class Finding(BaseModel):
    condition_id: str
    condition: str = Field(..., description="Display name of the matched condition")
    match_score: int = Field(..., ge=0, le=100)
    severity: ConditionSeverity
    matching_symptoms: List[str]
    recommendations: List[str]

# 2. Interaction Checker output
class InteractionFinding(BaseModel):
    pair: Tuple[str, str] = Field(..., description="Drug names as entered, in input order")
    severity: InteractionSeverity
    summary_key: str
    management_key: str

# 3. Decision Support output
class FindingStatus(str, Enum):
    AT_GOAL = "atGoal"
    NEEDS_ATTENTION = "needsAttention"
    ALERT = "alert"
    DUE = "due"
    INSUFFICIENT_DATA = "insufficientData"

class ClinicalFinding(BaseModel):
    status: FindingStatus
    finding_key: str
    finding_value: Optional[str] = None
    recommendation_key: str
    source: str

# 4. Bundled symptom analysis (what the analyzer screen renders)
class PatientIntake(BaseModel):
    age: Optional[str] = None
    gender: Optional[str] = None
    weight: Optional[str] = None
    height: Optional[str] = None
    known_conditions: Optional[str] = None
    current_medications: Optional[str] = None
    allergies: Optional[str] = None

class AnalysisResult(BaseModel):
    conditions: List[Finding]
    selected_symptoms: List[str]
    # {symptom_id: {question_index: answer}}
    symptom_details: Dict[str, Dict[int, str]] = {}
    patient_info: Optional[PatientIntake] = None
