import pytest
from pydantic import ValidationError
from src.core.knowledge import build_interaction_table
from src.services.interaction_checker import InteractionChecker
from src.schemas.knowledge import InteractionRule, InteractionSeverity, canonical_pair_key

@pytest.fixture
def table(knowledge_base):
    return knowledge_base.interaction_table

def test_pair_matched_regardless_of_case_and_whitespace(table):
    found = InteractionChecker.check(["Warfarin", " Aspirin "], table)
    assert len(found) == 1
    assert found[0].severity == InteractionSeverity.MAJOR
    # Display keeps what the user typed
    assert found[0].pair == ("Warfarin", " Aspirin ")
    assert found[0].summary_key == "interaction_warfarin_aspirin_summary"

def test_check_is_symmetric(table):
    forward = InteractionChecker.check(["aspirin", "warfarin"], table)
    backward = InteractionChecker.check(["warfarin", "aspirin"], table)

    assert forward[0].severity == backward[0].severity
    assert forward[0].summary_key == backward[0].summary_key
    assert forward[0].management_key == backward[0].management_key
    assert forward[0].pair == ("aspirin", "warfarin")
    assert backward[0].pair == ("warfarin", "aspirin")

@pytest.mark.parametrize("drugs", [[], ["warfarin"], ["warfarin", "  "], ["", "", "aspirin"]])
def test_fewer_than_two_drugs_returns_empty(table, drugs):
    assert InteractionChecker.check(drugs, table) == []

def test_no_match_returns_empty(table):
    assert InteractionChecker.check(["paracetamol", "amoxicillin"], table) == []

def test_findings_follow_pair_enumeration_order(table):
    found = InteractionChecker.check(["ibuprofen", "lisinopril", "warfarin"], table)
    # (0,1) ibuprofen-lisinopril, (0,2) ibuprofen-warfarin; (1,2) has no rule
    assert [f.pair for f in found] == [("ibuprofen", "lisinopril"), ("ibuprofen", "warfarin")]
    assert [f.severity for f in found] == [InteractionSeverity.MODERATE, InteractionSeverity.MAJOR]

def test_duplicate_entries_are_separate_slots(table):
    found = InteractionChecker.check(["warfarin", "aspirin", "Warfarin"], table)
    # Each warfarin pairs with aspirin; the two warfarins are never checked against a self-pair rule
    assert [f.pair for f in found] == [("warfarin", "aspirin"), ("aspirin", "Warfarin")]

def test_rules_declared_in_any_order_are_reachable(table):
    # Declared as ("clarithromycin", "simvastatin") but typed the other way round
    found = InteractionChecker.check(["Simvastatin", "Clarithromycin"], table)
    assert len(found) == 1
    assert found[0].severity == InteractionSeverity.MAJOR

def test_canonical_key_sorts_pair():
    assert canonical_pair_key("warfarin", "aspirin") == "aspirin-warfarin"
    assert canonical_pair_key("aspirin", "warfarin") == "aspirin-warfarin"

def test_table_is_read_only(table):
    with pytest.raises(TypeError):
        table["new-pair"] = None

def test_duplicate_rules_rejected():
    rule = InteractionRule(
        drugs=("a", "b"),
        severity=InteractionSeverity.MINOR,
        summary_key="s",
        management_key="m",
    )
    swapped = rule.model_copy(update={"drugs": ("B", "A")})
    with pytest.raises(ValueError):
        build_interaction_table([rule, swapped])

def test_knowledge_base_is_frozen(knowledge_base):
    with pytest.raises(ValidationError):
        knowledge_base.conditions = ()
