"""Per-item outcome tally for kalle runs"""
from enum import Enum
from typing import Dict, List, Tuple, Type

from kalle.logging_config import get_logger

logger = get_logger(__name__)


class RunSummary:
    """Records the outcome of each processed item, in processing order."""

    def __init__(self, outcome_type: Type[Enum]):
        self.outcome_type = outcome_type
        self.records: List[Tuple[str, Enum]] = []

    def record(self, item: str, outcome: Enum) -> None:
        if not isinstance(outcome, self.outcome_type):
            raise TypeError(
                f"Expected a {self.outcome_type.__name__} outcome, got {outcome!r}"
            )
        self.records.append((item, outcome))
        logger.debug(f"{item}: {outcome.value}")

    def count(self, outcome: Enum) -> int:
        return sum(1 for _, recorded in self.records if recorded == outcome)

    def items(self, outcome: Enum) -> List[str]:
        """Names of the items that ended with `outcome`, in processing order."""
        return [item for item, recorded in self.records if recorded == outcome]

    def counts(self) -> Dict[Enum, int]:
        """Count per outcome, including zero counts, in enum order."""
        return {outcome: self.count(outcome) for outcome in self.outcome_type}

    @property
    def total(self) -> int:
        return len(self.records)
