import pytest
from pydantic import ValidationError
from src.services.symptom_matcher import SymptomMatcher, match_score
from src.schemas.knowledge import Condition, ConditionSeverity

# --- Scoring ---

def test_match_score_rounds_halves_up():
    assert match_score(1, 8) == 13  # 12.5
    assert match_score(2, 4) == 50
    assert match_score(1, 3) == 33
    assert match_score(2, 3) == 67

# --- Threshold ---

def test_partial_flu_match_is_included(flu_catalog):
    findings = SymptomMatcher.match({"fever", "cough"}, flu_catalog)
    assert len(findings) == 1
    assert findings[0].condition_id == "influenza"
    assert findings[0].match_score == 50
    assert findings[0].matching_symptoms == ["fever", "cough"]

def test_single_symptom_above_cutoff_is_included(flu_catalog):
    findings = SymptomMatcher.match({"fever"}, flu_catalog)
    assert [f.match_score for f in findings] == [25]

def test_score_equal_to_cutoff_is_excluded(flu_catalog):
    # headache hits influenza at 25 but tension headache at exactly 20
    findings = SymptomMatcher.match({"headache"}, flu_catalog)
    assert [f.condition_id for f in findings] == ["influenza"]

def test_threshold_is_tunable(flu_catalog):
    findings = SymptomMatcher.match({"fever"}, flu_catalog, threshold=30)
    assert findings == []

# --- Edge cases ---

def test_empty_selection_returns_nothing(flu_catalog):
    assert SymptomMatcher.match(set(), flu_catalog) == []

def test_unknown_symptoms_are_ignored(flu_catalog):
    findings = SymptomMatcher.match({"fever", "glowingEyes"}, flu_catalog)
    assert len(findings) == 1
    assert findings[0].matching_symptoms == ["fever"]

def test_no_zero_overlap_findings(knowledge_base):
    selected = {"fever", "cough", "nausea"}
    for finding in SymptomMatcher.match(selected, knowledge_base.conditions):
        assert set(finding.matching_symptoms) & selected
        assert finding.match_score > 20

def test_catalog_is_not_mutated(flu_catalog):
    before = [c.model_dump() for c in flu_catalog]
    findings = SymptomMatcher.match({"fever", "headache"}, flu_catalog)
    findings[0].recommendations.append("mutated")
    assert [c.model_dump() for c in flu_catalog] == before

# --- Ranking ---

def test_ranked_by_severity_then_score(knowledge_base):
    selected = {"fever", "cough", "fatigue", "chestPain", "nausea"}
    findings = SymptomMatcher.match(selected, knowledge_base.conditions)

    ranks = [(f.severity.rank, f.match_score) for f in findings]
    for earlier, later in zip(ranks, ranks[1:]):
        assert earlier[0] >= later[0]
        if earlier[0] == later[0]:
            assert earlier[1] >= later[1]

    # Emergency first even though its score is lower than common cold's 100
    assert findings[0].condition_id == "myocardialInfarction"
    assert findings[-1].condition_id == "commonCold"
    assert findings[-1].match_score == 100

def test_ties_keep_catalog_order():
    catalog = [
        Condition(id="a", name="A", symptoms=("x", "y"), severity=ConditionSeverity.HIGH),
        Condition(id="b", name="B", symptoms=("x", "z"), severity=ConditionSeverity.HIGH),
    ]
    findings = SymptomMatcher.match({"x"}, catalog)
    assert [f.condition_id for f in findings] == ["a", "b"]

def test_identical_inputs_give_identical_outputs(knowledge_base):
    selected = ["headache", "nausea", "fever"]
    first = SymptomMatcher.match(selected, knowledge_base.conditions)
    second = SymptomMatcher.match(list(reversed(selected)), knowledge_base.conditions)
    assert first == second

# --- Analysis bundle ---

def test_analyze_drops_details_for_unselected_symptoms(knowledge_base):
    result = SymptomMatcher.analyze(
        ["fever", "cough", "fever"],
        knowledge_base.conditions,
        symptom_details={"fever": {0: "3 days"}, "headache": {0: "mild"}},
    )
    assert result.selected_symptoms == ["fever", "cough"]
    assert result.symptom_details == {"fever": {0: "3 days"}}
    assert result.conditions

# --- Catalog validation ---

def test_condition_rejects_repeated_symptoms():
    with pytest.raises(ValidationError):
        Condition(
            id="flu",
            name="Flu",
            symptoms=("fever", "fever", "cough"),
            severity=ConditionSeverity.MEDIUM,
        )

def test_score_uses_distinct_symptoms():
    condition = Condition(id="flu", name="Flu", symptoms=("fever", "cough"), severity=ConditionSeverity.MEDIUM)
    findings = SymptomMatcher.match(["fever", "fever"], [condition])
    assert findings[0].match_score == 50
    assert findings[0].matching_symptoms == ["fever"]
