from fastapi import APIRouter

from src.core.metrics import record_run
from src.schemas.analysis import (
    BMIRequest,
    BMRRequest,
    CalculatorResponse,
    CreatinineClearanceRequest,
    IBWRequest,
)
from src.services import calculators

router = APIRouter(prefix="/calculators")

# value is None when the inputs can't produce a number; that's a 200, not an error

@router.post("/bmi", response_model=CalculatorResponse)
async def bmi(payload: BMIRequest):
    result = calculators.body_mass_index(payload.weight_kg, payload.height_cm)
    record_run("calculator", int(result is not None))
    if result is None:
        return CalculatorResponse(calculator="bmi")
    value, category = result
    return CalculatorResponse(calculator="bmi", value=value, category=category)

@router.post("/bmr", response_model=CalculatorResponse)
async def bmr(payload: BMRRequest):
    value = calculators.basal_metabolic_rate(payload.weight_kg, payload.height_cm, payload.age, payload.gender)
    record_run("calculator", int(value is not None))
    return CalculatorResponse(calculator="bmr", value=value)

@router.post("/ibw", response_model=CalculatorResponse)
async def ibw(payload: IBWRequest):
    value = calculators.ideal_body_weight(payload.height_cm, payload.gender)
    record_run("calculator", int(value is not None))
    return CalculatorResponse(calculator="ibw", value=value)

@router.post("/creatinine-clearance", response_model=CalculatorResponse)
async def creatinine_clearance(payload: CreatinineClearanceRequest):
    value = calculators.creatinine_clearance(
        payload.age, payload.weight_kg, payload.serum_creatinine, payload.gender
    )
    record_run("calculator", int(value is not None))
    return CalculatorResponse(calculator="creatinine-clearance", value=value)
