from typing import Callable, Dict, List, Optional, Tuple
from pydantic import BaseModel

from src.core.config import Settings, settings as default_settings
from src.core.logging import get_engine_logger
from src.schemas.findings import ClinicalFinding, FindingStatus
from src.schemas.patient import PatientAttributes

logger = get_engine_logger("decision_support")

# A rule sees the patient, the already parsed age and the active settings.
# It returns its finding, or None when it does not apply.
Rule = Callable[[PatientAttributes, int, Settings], Optional[ClinicalFinding]]

class UnknownModuleError(KeyError):
    pass

class CDSModule(BaseModel):
    id: str
    name_key: str
    desc_key: str


# --- Hypertension ---

def bp_target(age: int, cfg: Settings) -> Tuple[int, int]:
    return cfg.HTN_TARGET_ELDERLY if age >= cfg.HTN_ELDERLY_AGE else cfg.HTN_TARGET_DEFAULT

def blood_pressure_rule(patient: PatientAttributes, age: int, cfg: Settings) -> Optional[ClinicalFinding]:
    reading = patient.blood_pressure
    if reading is None:
        return ClinicalFinding(
            status=FindingStatus.INSUFFICIENT_DATA,
            finding_key="bpReadingMissing",
            recommendation_key="bpReadingMissingRec",
            source="JNC 8",
        )

    target_systolic, target_diastolic = bp_target(age, cfg)
    if reading.systolic < target_systolic and reading.diastolic < target_diastolic:
        return ClinicalFinding(
            status=FindingStatus.AT_GOAL,
            finding_key="bpAtTarget",
            finding_value=str(reading),
            recommendation_key="bpAtTargetRec",
            source="JNC 8",
        )

    return ClinicalFinding(
        status=FindingStatus.NEEDS_ATTENTION,
        finding_key="bpAboveTarget",
        finding_value=str(reading),
        recommendation_key="bpAboveTargetRec",
        source="JNC 8",
    )

def first_line_therapy_rule(patient: PatientAttributes, age: int, cfg: Settings) -> Optional[ClinicalFinding]:
    # Placeholder: nothing about current therapy is known, so this is a flag, not a check
    if not cfg.CDS_FIRST_LINE_THERAPY_AT_GOAL:
        return None
    return ClinicalFinding(
        status=FindingStatus.AT_GOAL,
        finding_key="firstLineTherapy",
        recommendation_key="firstLineTherapyRec",
        source="JNC 8",
    )


# --- Preventive care ---

def screening_rule(finding_key: str, min_age: int, source: str, female_only: bool = False) -> Rule:
    """
    Builds an age (and optionally sex) gated "screening due" rule.
    """
    def rule(patient: PatientAttributes, age: int, cfg: Settings) -> Optional[ClinicalFinding]:
        if female_only and not patient.is_female():
            return None
        if age < min_age:
            return None
        return ClinicalFinding(
            status=FindingStatus.DUE,
            finding_key=finding_key,
            recommendation_key=f"{finding_key}Rec",
            source=source,
        )
    rule.__name__ = f"{finding_key}_screening_rule"
    return rule


MODULES: Dict[str, CDSModule] = {
    "hypertension": CDSModule(id="hypertension", name_key="htnModule", desc_key="htnModuleDesc"),
    "preventiveCare": CDSModule(id="preventiveCare", name_key="preventiveCareModule", desc_key="preventiveCareModuleDesc"),
}

MODULE_RULES: Dict[str, Tuple[Rule, ...]] = {
    "hypertension": (
        blood_pressure_rule,
        first_line_therapy_rule,
    ),
    "preventiveCare": (
        screening_rule("mammogram", 40, "USPSTF", female_only=True),
        screening_rule("colonoscopy", 45, "USPSTF"),
        screening_rule("lipidPanel", 40, "ACC/AHA"),
        screening_rule("bloodGlucose", 35, "ADA"),
    ),
}


class DecisionSupport:

    @staticmethod
    def list_modules() -> List[CDSModule]:
        return list(MODULES.values())

    @staticmethod
    def evaluate(
        patient: PatientAttributes,
        module_id: str,
        cfg: Optional[Settings] = None,
    ) -> List[ClinicalFinding]:
        """
        Runs every rule of a module against one patient.
        Rules are independent; results come back in module order.
        Without a usable age nothing is evaluated and a single
        insufficient-data finding is returned instead.
        """
        if module_id not in MODULE_RULES:
            raise UnknownModuleError(module_id)
        if cfg is None:
            cfg = default_settings

        age = patient.parsed_age()
        if age is None:
            logger.warning("cds_patient_age_unusable", module=module_id, raw_age=patient.age)
            return [ClinicalFinding(
                status=FindingStatus.INSUFFICIENT_DATA,
                finding_key="insufficientPatientData",
                recommendation_key="insufficientPatientDataRec",
                source="",
            )]

        findings = []
        for rule in MODULE_RULES[module_id]:
            finding = rule(patient, age, cfg)
            if finding is not None:
                findings.append(finding)

        logger.info(
            "cds_module_evaluated",
            module=module_id,
            findings=[f.finding_key for f in findings],
        )
        return findings
