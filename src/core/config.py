from typing import Literal, Tuple
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    # App Config
    PROJECT_NAME: str = "ClinicRules"
    PROJECT_VERSION: str = "0.1.0"
    ENVIRONMENT: Literal["development", "production", "testing"] = "development"
    DEBUG: bool = False
    API_V1_STR: str = "/v1"

    # Symptom Matcher
    # Placeholder cutoff carried over from the clinic UI, not a validated threshold
    SYMPTOM_MATCH_THRESHOLD: int = 20

    # Clinical Decision Support: hypertension targets (systolic, diastolic)
    HTN_ELDERLY_AGE: int = 60
    HTN_TARGET_ELDERLY: Tuple[int, int] = (150, 90)
    HTN_TARGET_DEFAULT: Tuple[int, int] = (140, 90)
    CDS_FIRST_LINE_THERAPY_AT_GOAL: bool = True

    # Presentation boundary only. The engine never reads these.
    CDS_SIMULATE_VITALS: bool = False
    ANALYSIS_DELAY_SECONDS: float = 0.0

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True
    )

settings = Settings()
