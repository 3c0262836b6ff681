"""Data models for kalle."""

from .alias import AliasEntry, AliasOutcome, AliasStatus
from .branch import Branch, BranchOutcome, DeletionDecision
from .command import CommandResult, SPAWN_FAILURE_EXIT_CODE

__all__ = [
    "AliasEntry",
    "AliasOutcome",
    "AliasStatus",
    "Branch",
    "BranchOutcome",
    "DeletionDecision",
    "CommandResult",
    "SPAWN_FAILURE_EXIT_CODE",
]
