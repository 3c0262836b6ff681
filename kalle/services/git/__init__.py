"""Git-related services for kalle."""

from .branch_queries import BranchQueries
from .operations import GitOperations

__all__ = [
    "BranchQueries",
    "GitOperations",
]
