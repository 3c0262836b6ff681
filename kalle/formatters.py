"""Formatting utilities for kalle output."""

from kalle.models.alias import AliasEntry, AliasOutcome
from kalle.models.branch import BranchOutcome
from kalle.services.summary_service import RunSummary


def format_branch_summary(summary: RunSummary, dry_run: bool) -> str:
    """
    Format the closing line of a branch cleanup run.

    Args:
        summary: Outcomes recorded during the run
        dry_run: Whether the run was a dry run

    Returns:
        Single line, e.g. "Branch deletion process completed (Dry Run): 2 would be deleted, 1 skipped, 0 failed."
    """
    if dry_run:
        shown = [BranchOutcome.WOULD_DELETE, BranchOutcome.SKIPPED, BranchOutcome.FAILED]
    else:
        shown = [BranchOutcome.DELETED, BranchOutcome.SKIPPED, BranchOutcome.FAILED]

    counts = ", ".join(f"{summary.count(outcome)} {outcome.value}" for outcome in shown)
    mode = " (Dry Run)" if dry_run else ""
    return f"Branch deletion process completed{mode}: {counts}."


def format_alias_summary(summary: RunSummary) -> str:
    """
    Format the tally line of an alias provisioning run.

    Example:
        "Summary: 1 configured/updated, 7 skipped (already correct), 0 declined, 0 failed."
    """
    counts = ", ".join(
        f"{summary.count(outcome)} {outcome.value}" for outcome in AliasOutcome
    )
    return f"Summary: {counts}."


def format_alias_listing(alias: AliasEntry) -> str:
    """Format one proposed alias, e.g. "  git co -> git checkout"."""
    return f"  {alias.display_key} -> {alias.display_command}"


def format_alias_prompt(alias: AliasEntry) -> str:
    """Format the add/update question for an alias that needs configuring."""
    return f"[{alias.action}] Alias '{alias.key}' -> '{alias.prompt_command}'? [Y/n]: "
