import structlog
from typing import List
from fastapi import APIRouter, HTTPException

from src.api.deps import simulated_latency
from src.core.config import settings
from src.core.metrics import record_run
from src.schemas.analysis import CDSEvaluationRequest, CDSEvaluationResponse
from src.services.decision_support import CDSModule, DecisionSupport, UnknownModuleError
from src.services.vitals import simulate_blood_pressure

router = APIRouter()
logger = structlog.get_logger()

@router.get("/cds/modules", response_model=List[CDSModule])
async def list_modules():
    return DecisionSupport.list_modules()

@router.post("/cds/{module_id}/evaluate", response_model=CDSEvaluationResponse)
async def evaluate_module(module_id: str, payload: CDSEvaluationRequest):
    patient = payload.patient

    # The demo UI had no vitals store; fake a reading only when asked to
    if patient.blood_pressure is None and settings.CDS_SIMULATE_VITALS:
        patient = patient.model_copy(update={"blood_pressure": simulate_blood_pressure()})
        logger.info("cds_vitals_simulated", reading=str(patient.blood_pressure))

    await simulated_latency()

    try:
        findings = DecisionSupport.evaluate(patient, module_id)
    except UnknownModuleError:
        logger.warning("unknown_cds_module_requested", module=module_id)
        raise HTTPException(status_code=404, detail=f"Unknown decision support module '{module_id}'")

    record_run("decision_support", len(findings))
    return CDSEvaluationResponse(module=module_id, findings=findings)
