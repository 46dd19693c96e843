import random
from typing import Optional

from src.schemas.patient import BloodPressureReading

def simulate_blood_pressure(rng: Optional[random.Random] = None) -> BloodPressureReading:
    """
    Demo reading for patients without recorded vitals.
    Only the HTTP layer calls this, and only when CDS_SIMULATE_VITALS is on.
    """
    rng = rng or random.Random()
    return BloodPressureReading(
        systolic=round(rng.uniform(110, 160)),
        diastolic=round(rng.uniform(70, 100)),
    )
