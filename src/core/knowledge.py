from functools import lru_cache
from types import MappingProxyType
from typing import Iterable, Mapping, Tuple
from pydantic import BaseModel, ConfigDict
import structlog

from src.knowledge.catalog import CONDITIONS, INTERACTION_RULES, SYMPTOM_CATEGORIES
from src.schemas.knowledge import Condition, InteractionRule, Symptom, SymptomCategory

logger = structlog.get_logger()

class KnowledgeBase(BaseModel):
    """
    Read-only catalogs shared by every analysis. Built once at startup and
    passed to the engines by reference.
    """
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    symptom_categories: Tuple[SymptomCategory, ...]
    conditions: Tuple[Condition, ...]
    # MappingProxyType keeps the index read-only; pydantic only checks the type
    interaction_table: MappingProxyType

    @property
    def symptoms(self) -> Tuple[Symptom, ...]:
        return tuple(s for category in self.symptom_categories for s in category.symptoms)

    def known_symptom_ids(self) -> frozenset:
        return frozenset(s.id for s in self.symptoms)


def build_interaction_table(rules: Iterable[InteractionRule]) -> Mapping[str, InteractionRule]:
    """
    Indexes rules by canonical pair key. A duplicated pair is a catalog bug.
    """
    table = {}
    for rule in rules:
        if rule.key in table:
            raise ValueError(f"Duplicate interaction rule for pair '{rule.key}'")
        table[rule.key] = rule
    return MappingProxyType(table)


def build_knowledge_base(
    symptom_categories: Iterable[SymptomCategory] = SYMPTOM_CATEGORIES,
    conditions: Iterable[Condition] = CONDITIONS,
    interaction_rules: Iterable[InteractionRule] = INTERACTION_RULES,
) -> KnowledgeBase:
    kb = KnowledgeBase(
        symptom_categories=tuple(symptom_categories),
        conditions=tuple(conditions),
        interaction_table=build_interaction_table(interaction_rules),
    )
    logger.info(
        "knowledge_base_loaded",
        symptoms=len(kb.symptoms),
        conditions=len(kb.conditions),
        interaction_rules=len(kb.interaction_table),
    )
    return kb


@lru_cache(maxsize=1)
def get_knowledge_base() -> KnowledgeBase:
    # Dependency for FastAPI Routes
    return build_knowledge_base()
