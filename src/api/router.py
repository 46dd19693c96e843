from fastapi import APIRouter
from src.api.endpoints import calculators, decision_support, interactions, symptoms

api_router = APIRouter()

# Register the endpoints
api_router.include_router(symptoms.router, tags=["Symptom Analysis"])
api_router.include_router(interactions.router, tags=["Drug Interactions"])
api_router.include_router(decision_support.router, tags=["Clinical Decision Support"])
api_router.include_router(calculators.router, tags=["Medical Calculators"])
