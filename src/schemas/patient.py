import math
import re
from typing import Optional, Union
from pydantic import BaseModel, Field

# Leading whole-number part of a free-text age: "65", "65.5", "65 years"
_LEADING_AGE = re.compile(r"^\s*\+?(\d+)")

class BloodPressureReading(BaseModel):
    systolic: int = Field(..., gt=0, description="mmHg")
    diastolic: int = Field(..., gt=0, description="mmHg")

    def __str__(self) -> str:
        return f"{self.systolic}/{self.diastolic} mmHg"

class PatientAttributes(BaseModel):
    """
    The slice of a patient record the decision-support rules look at.
    Age is kept raw: patient records store it as free text, and the
    evaluator decides whether it is usable.
    """
    age: Optional[Union[int, float, str]] = None
    gender: Optional[str] = Field(None, description="'Male' | 'Female' | 'Other' | ''")
    blood_pressure: Optional[BloodPressureReading] = None

    def parsed_age(self) -> Optional[int]:
        """
        Returns the age in whole years, or None when it is missing,
        non-numeric or negative. Fractional ages are truncated.
        """
        if self.age is None or isinstance(self.age, bool):
            return None
        if isinstance(self.age, int):
            return self.age if self.age >= 0 else None
        if isinstance(self.age, float):
            if not math.isfinite(self.age) or self.age < 0:
                return None
            return math.floor(self.age)

        match = _LEADING_AGE.match(self.age)
        if match is None:
            return None
        return int(match.group(1))

    def is_female(self) -> bool:
        return (self.gender or "").strip().lower() == "female"
