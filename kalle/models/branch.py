"""Branch model and related enums"""
from enum import Enum
from dataclasses import dataclass


class DeletionDecision(Enum):
    """What to do with one branch during a cleanup run."""
    DELETE = "delete"
    SKIP = "skip"


class BranchOutcome(Enum):
    """Terminal outcome of one branch during a cleanup run."""
    DELETED = "deleted"
    WOULD_DELETE = "would be deleted"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass(frozen=True)
class Branch:
    """A local branch as listed at the start of a run."""
    name: str
    is_current: bool = False
    is_excluded: bool = False

    @property
    def is_candidate(self) -> bool:
        """Whether the branch may be offered for deletion at all."""
        return not (self.is_current or self.is_excluded)
