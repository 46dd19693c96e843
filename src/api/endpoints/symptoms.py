import structlog
from typing import List
from fastapi import APIRouter, Depends

from src.api.deps import simulated_latency
from src.core.knowledge import KnowledgeBase, get_knowledge_base
from src.core.metrics import record_run
from src.schemas.analysis import SymptomAnalysisRequest
from src.schemas.findings import AnalysisResult
from src.schemas.knowledge import Condition, SymptomCategory
from src.services.symptom_matcher import SymptomMatcher

router = APIRouter()
logger = structlog.get_logger()

@router.get("/symptoms", response_model=List[SymptomCategory])
async def list_symptoms(kb: KnowledgeBase = Depends(get_knowledge_base)):
    return list(kb.symptom_categories)

@router.get("/conditions", response_model=List[Condition])
async def list_conditions(kb: KnowledgeBase = Depends(get_knowledge_base)):
    return list(kb.conditions)

@router.post("/symptoms/analyze", response_model=AnalysisResult)
async def analyze_symptoms(
    payload: SymptomAnalysisRequest,
    kb: KnowledgeBase = Depends(get_knowledge_base)
):
    unknown = set(payload.symptoms) - kb.known_symptom_ids()
    if unknown:
        # Not an error: unknown ids just never match
        logger.info("unknown_symptoms_ignored", symptoms=sorted(unknown))

    await simulated_latency()

    result = SymptomMatcher.analyze(
        payload.symptoms,
        kb.conditions,
        symptom_details=payload.details,
        patient_info=payload.patient,
    )
    record_run("symptom_matcher", len(result.conditions))
    return result
