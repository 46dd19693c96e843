from fastapi import APIRouter, Depends

from src.api.deps import simulated_latency
from src.core.knowledge import KnowledgeBase, get_knowledge_base
from src.core.metrics import record_run
from src.schemas.analysis import InteractionCheckRequest, InteractionCheckResponse
from src.services.interaction_checker import InteractionChecker

router = APIRouter()

@router.post("/interactions/check", response_model=InteractionCheckResponse)
async def check_interactions(
    payload: InteractionCheckRequest,
    kb: KnowledgeBase = Depends(get_knowledge_base)
):
    """
    An empty list means "checked, nothing found", including when fewer than
    two drugs were entered.
    """
    await simulated_latency()

    found = InteractionChecker.check(payload.drugs, kb.interaction_table)
    record_run("interaction_checker", len(found))
    return InteractionCheckResponse(interactions=found)
