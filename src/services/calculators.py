"""
Bedside calculators. Every function returns None when the inputs cannot
produce a meaningful value (missing, zero or negative numbers).
"""
from typing import Optional, Tuple

CM_PER_INCH = 2.54
# Devine formula is only defined above five feet
IBW_MIN_HEIGHT_CM = 152.4

def _positive(*values: Optional[float]) -> bool:
    return all(v is not None and v > 0 for v in values)

def _is_female(gender: Optional[str]) -> bool:
    return (gender or "").strip().lower() == "female"

def bmi_category(bmi: float) -> str:
    if bmi < 18.5:
        return "underweight"
    if bmi < 25:
        return "normalWeight"
    if bmi < 30:
        return "overweight"
    return "obesity"

def body_mass_index(weight_kg: Optional[float], height_cm: Optional[float]) -> Optional[Tuple[float, str]]:
    if not _positive(weight_kg, height_cm):
        return None
    height_m = height_cm / 100
    bmi = weight_kg / (height_m * height_m)
    return bmi, bmi_category(bmi)

def basal_metabolic_rate(
    weight_kg: Optional[float],
    height_cm: Optional[float],
    age: Optional[int],
    gender: Optional[str],
) -> Optional[float]:
    """
    Mifflin-St Jeor, kcal/day.
    """
    if not _positive(weight_kg, height_cm, age):
        return None
    bmr = (10 * weight_kg) + (6.25 * height_cm) - (5 * age)
    return bmr + (-161 if _is_female(gender) else 5)

def ideal_body_weight(height_cm: Optional[float], gender: Optional[str]) -> Optional[float]:
    """
    Devine, kg.
    """
    if height_cm is None or height_cm <= IBW_MIN_HEIGHT_CM:
        return None
    inches_over_five_feet = height_cm / CM_PER_INCH - 60
    base = 45.5 if _is_female(gender) else 50
    return base + 2.3 * inches_over_five_feet

def creatinine_clearance(
    age: Optional[int],
    weight_kg: Optional[float],
    serum_creatinine: Optional[float],
    gender: Optional[str],
) -> Optional[float]:
    """
    Cockcroft-Gault, mL/min. Creatinine in mg/dL.
    """
    if not _positive(age, weight_kg, serum_creatinine):
        return None
    clearance = ((140 - age) * weight_kg) / (72 * serum_creatinine)
    if _is_female(gender):
        clearance *= 0.85
    return clearance
