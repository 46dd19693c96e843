from typing import List, Mapping, Sequence

from src.core.logging import get_engine_logger
from src.schemas.findings import InteractionFinding
from src.schemas.knowledge import InteractionRule, canonical_pair_key

logger = get_engine_logger("interaction_checker")

class InteractionChecker:

    @staticmethod
    def normalize(name: str) -> str:
        return name.strip().lower()

    @staticmethod
    def check(drug_names: Sequence[str], table: Mapping[str, InteractionRule]) -> List[InteractionFinding]:
        """
        Looks up every unordered pair of entered drugs in the interaction table.
        Each list position is its own slot: a drug entered twice is paired with
        every other entry but never with itself.
        Findings keep the names as typed and come out in pair order.
        """
        # Keep the typed text next to its normalized form; blanks are dropped
        entries = [(raw, InteractionChecker.normalize(raw)) for raw in drug_names]
        entries = [(raw, norm) for raw, norm in entries if norm]

        if len(entries) < 2:
            return []

        found = []
        for i in range(len(entries)):
            for j in range(i + 1, len(entries)):
                rule = table.get(canonical_pair_key(entries[i][1], entries[j][1]))
                if rule is None:
                    continue

                found.append(InteractionFinding(
                    pair=(entries[i][0], entries[j][0]),
                    severity=rule.severity,
                    summary_key=rule.summary_key,
                    management_key=rule.management_key,
                ))

        logger.info(
            "interaction_check_completed",
            drug_count=len(entries),
            interactions_found=len(found),
        )
        return found
