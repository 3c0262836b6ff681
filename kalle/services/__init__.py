"""Services used by kalle commands."""

from .executor import CommandExecutor
from .summary_service import RunSummary

__all__ = ["CommandExecutor", "RunSummary"]
