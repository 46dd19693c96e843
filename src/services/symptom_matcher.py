from typing import Dict, Iterable, List, Optional, Sequence

from src.core.config import settings
from src.core.logging import get_engine_logger
from src.schemas.findings import AnalysisResult, Finding, PatientIntake
from src.schemas.knowledge import Condition

logger = get_engine_logger("symptom_matcher")

def match_score(overlap: int, total: int) -> int:
    """
    round(100 * overlap / total), rounding halves up.
    Integer arithmetic so 12.5 becomes 13 rather than Python's banker's 12.
    """
    return (200 * overlap + total) // (2 * total)

class SymptomMatcher:

    @staticmethod
    def match(
        selected_symptoms: Iterable[str],
        catalog: Sequence[Condition],
        threshold: Optional[int] = None,
    ) -> List[Finding]:
        """
        Scores every condition by the fraction of its defining symptoms present.
        Returns findings with score > threshold, most severe first, then by score.
        Unknown symptom ids simply never overlap.
        """
        if threshold is None:
            threshold = settings.SYMPTOM_MATCH_THRESHOLD

        selected = frozenset(selected_symptoms)
        if not selected:
            return []

        findings = []
        for condition in catalog:
            overlap = condition.symptom_set & selected
            if not overlap:
                continue

            score = match_score(len(overlap), len(condition.symptom_set))
            if score <= threshold:
                continue

            findings.append(Finding(
                condition_id=condition.id,
                condition=condition.name,
                match_score=score,
                severity=condition.severity,
                matching_symptoms=[s for s in condition.symptoms if s in overlap],
                recommendations=list(condition.recommendations),
            ))

        # sort() is stable, so equal keys keep catalog order
        findings.sort(key=lambda f: (f.severity.rank, f.match_score), reverse=True)
        return findings

    @staticmethod
    def analyze(
        selected_symptoms: Sequence[str],
        catalog: Sequence[Condition],
        symptom_details: Optional[Dict[str, Dict[int, str]]] = None,
        patient_info: Optional[PatientIntake] = None,
    ) -> AnalysisResult:
        """
        Runs the matcher and bundles the inputs alongside the ranked findings.
        """
        selected = list(dict.fromkeys(selected_symptoms))
        conditions = SymptomMatcher.match(selected, catalog)

        # Answers for symptoms that were deselected are dropped
        details = {k: dict(v) for k, v in (symptom_details or {}).items() if k in selected}

        logger.info(
            "symptom_analysis_completed",
            selected_count=len(selected),
            matched=[f.condition_id for f in conditions],
        )

        return AnalysisResult(
            conditions=conditions,
            selected_symptoms=selected,
            symptom_details=details,
            patient_info=patient_info,
        )
