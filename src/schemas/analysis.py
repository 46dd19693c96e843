from pydantic import BaseModel, Field, ConfigDict
from typing import Dict, List, Optional

from src.schemas.findings import ClinicalFinding, InteractionFinding, PatientIntake
from src.schemas.patient import PatientAttributes

# 1. Input Schemas (Client -> API)
class SymptomAnalysisRequest(BaseModel):
    symptoms: List[str] = Field(..., description="Selected symptom ids")
    details: Dict[str, Dict[int, str]] = Field({}, description="Follow-up answers keyed by symptom id, then question index")
    patient: Optional[PatientIntake] = None

    model_config = ConfigDict(extra="forbid")

class InteractionCheckRequest(BaseModel):
    drugs: List[str] = Field(..., description="Drug names as typed; blanks are ignored")

    model_config = ConfigDict(extra="forbid")

class CDSEvaluationRequest(BaseModel):
    patient: PatientAttributes

    model_config = ConfigDict(extra="forbid")

class BMIRequest(BaseModel):
    weight_kg: Optional[float] = None
    height_cm: Optional[float] = None

    model_config = ConfigDict(extra="forbid")

class BMRRequest(BaseModel):
    weight_kg: Optional[float] = None
    height_cm: Optional[float] = None
    age: Optional[int] = None
    gender: str = "male"

    model_config = ConfigDict(extra="forbid")

class IBWRequest(BaseModel):
    height_cm: Optional[float] = None
    gender: str = "male"

    model_config = ConfigDict(extra="forbid")

class CreatinineClearanceRequest(BaseModel):
    age: Optional[int] = None
    weight_kg: Optional[float] = None
    serum_creatinine: Optional[float] = Field(None, description="mg/dL")
    gender: str = "male"

    model_config = ConfigDict(extra="forbid")

# 2. Output Schemas (API -> Client)
class InteractionCheckResponse(BaseModel):
    # Always True here; "not yet checked" only exists client side
    checked: bool = True
    interactions: List[InteractionFinding]

class CDSEvaluationResponse(BaseModel):
    module: str
    findings: List[ClinicalFinding]

class CalculatorResponse(BaseModel):
    calculator: str
    value: Optional[float] = None
    category: Optional[str] = None
