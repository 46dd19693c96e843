"""
Static clinical knowledge used by the rule engines.

Display names are English; questions, recommendations and interaction
texts are i18n keys resolved by whatever renders the results.
"""
from typing import Tuple

from src.schemas.knowledge import (
    Condition,
    ConditionSeverity,
    InteractionRule,
    InteractionSeverity,
    Symptom,
    SymptomCategory,
)

def _symptom(symptom_id: str, name: str, question_count: int) -> Symptom:
    questions = tuple(f"{symptom_id}Question{i}" for i in range(1, question_count + 1))
    return Symptom(id=symptom_id, name=name, questions=questions)

def _recs(condition_id: str, count: int = 3) -> Tuple[str, ...]:
    return tuple(f"{condition_id}Rec{i}" for i in range(1, count + 1))


SYMPTOM_CATEGORIES: Tuple[SymptomCategory, ...] = (
    SymptomCategory(name="generalCategory", symptoms=(
        _symptom("fever", "Fever", 2),
        _symptom("fatigue", "Fatigue", 2),
        _symptom("weightLoss", "Weight loss", 2),
        _symptom("nightSweats", "Night sweats", 2),
    )),
    SymptomCategory(name="respiratoryCategory", symptoms=(
        _symptom("cough", "Cough", 3),
        _symptom("shortnessBreath", "Shortness of breath", 2),
        _symptom("chestPain", "Chest pain", 3),
        _symptom("wheezing", "Wheezing", 2),
    )),
    SymptomCategory(name="cardiovascularCategory", symptoms=(
        _symptom("palpitations", "Palpitations", 2),
        _symptom("swelling", "Swelling", 2),
        _symptom("dizziness", "Dizziness", 2),
    )),
    SymptomCategory(name="gastrointestinalCategory", symptoms=(
        _symptom("nausea", "Nausea", 2),
        _symptom("abdominalPain", "Abdominal pain", 3),
        _symptom("diarrhea", "Diarrhea", 3),
        _symptom("constipation", "Constipation", 2),
    )),
    SymptomCategory(name="neurologicalCategory", symptoms=(
        _symptom("headache", "Headache", 3),
        _symptom("visionChanges", "Vision changes", 2),
        _symptom("numbness", "Numbness", 2),
    )),
)

CONDITIONS: Tuple[Condition, ...] = (
    Condition(
        id="myocardialInfarction",
        name="Myocardial infarction",
        symptoms=("chestPain", "shortnessBreath", "nausea", "dizziness"),
        severity=ConditionSeverity.EMERGENCY,
        recommendations=_recs("myocardialInfarction"),
    ),
    Condition(
        id="heartFailure",
        name="Heart failure",
        symptoms=("shortnessBreath", "swelling", "fatigue", "palpitations"),
        severity=ConditionSeverity.HIGH,
        recommendations=_recs("heartFailure"),
    ),
    Condition(
        id="pneumonia",
        name="Pneumonia",
        symptoms=("fever", "cough", "shortnessBreath", "chestPain"),
        severity=ConditionSeverity.HIGH,
        recommendations=_recs("pneumonia"),
    ),
    Condition(
        id="influenza",
        name="Influenza",
        symptoms=("fever", "cough", "fatigue", "headache"),
        severity=ConditionSeverity.MEDIUM,
        recommendations=_recs("influenza"),
    ),
    Condition(
        id="gastroenteritis",
        name="Gastroenteritis",
        symptoms=("nausea", "diarrhea", "abdominalPain", "fever"),
        severity=ConditionSeverity.MEDIUM,
        recommendations=_recs("gastroenteritis"),
    ),
    Condition(
        id="migraine",
        name="Migraine",
        symptoms=("headache", "nausea", "visionChanges"),
        severity=ConditionSeverity.MEDIUM,
        recommendations=_recs("migraine"),
    ),
    Condition(
        id="commonCold",
        name="Common cold",
        symptoms=("cough", "fatigue", "fever"),
        severity=ConditionSeverity.LOW,
        recommendations=_recs("commonCold"),
    ),
)

INTERACTION_RULES: Tuple[InteractionRule, ...] = (
    InteractionRule(
        drugs=("aspirin", "warfarin"),
        severity=InteractionSeverity.MAJOR,
        summary_key="interaction_warfarin_aspirin_summary",
        management_key="interaction_warfarin_aspirin_management",
    ),
    # Same bleeding mechanism as aspirin, so the texts are shared
    InteractionRule(
        drugs=("ibuprofen", "warfarin"),
        severity=InteractionSeverity.MAJOR,
        summary_key="interaction_warfarin_aspirin_summary",
        management_key="interaction_warfarin_aspirin_management",
    ),
    InteractionRule(
        drugs=("lisinopril", "potassium"),
        severity=InteractionSeverity.MODERATE,
        summary_key="interaction_lisinopril_potassium_summary",
        management_key="interaction_lisinopril_potassium_management",
    ),
    InteractionRule(
        drugs=("nitroglycerin", "sildenafil"),
        severity=InteractionSeverity.MAJOR,
        summary_key="interaction_sildenafil_nitroglycerin_summary",
        management_key="interaction_sildenafil_nitroglycerin_management",
    ),
    InteractionRule(
        drugs=("clarithromycin", "simvastatin"),
        severity=InteractionSeverity.MAJOR,
        summary_key="interaction_simvastatin_clarithromycin_summary",
        management_key="interaction_simvastatin_clarithromycin_management",
    ),
    InteractionRule(
        drugs=("ibuprofen", "lisinopril"),
        severity=InteractionSeverity.MODERATE,
        summary_key="interaction_ibuprofen_lisinopril_summary",
        management_key="interaction_ibuprofen_lisinopril_management",
    ),
)
