"""Interactive bulk deletion of local branches"""

from typing import Callable, List, Optional, Union

from rich.console import Console
from rich.markup import escape

from kalle.config import Config
from kalle.constants import DRY_RUN_BANNER, DRY_RUN_PREFIX
from kalle.exceptions import CurrentBranchUnknownError, NotAGitRepositoryError
from kalle.formatters import format_branch_summary
from kalle.logging_config import get_logger
from kalle.models.branch import Branch, BranchOutcome, DeletionDecision
from kalle.services.executor import CommandExecutor
from kalle.services.git import BranchQueries, GitOperations
from kalle.services.summary_service import RunSummary

logger = get_logger(__name__)


class BranchCleaner:
    """Deletes local branches, one decision per branch.

    The current branch and any excluded branch are never touched. With
    ``force`` every other branch is deleted without asking; otherwise the user
    is asked per branch and only "y" deletes. ``dry_run`` reports what would
    happen and never runs a mutating git command.
    """

    def __init__(
        self,
        executor: CommandExecutor,
        config: Union[Config, dict],
        console: Optional[Console] = None,
        input_func: Optional[Callable[[str], str]] = None,
    ):
        """Initialize the cleaner.

        Args:
            executor: Runs the git commands
            config: Config object or dict with force/dry_run/exclude_branches
            console: Where user-facing output goes (module console by default)
            input_func: Reads one answer for a prompt (console input by default)
        """
        if isinstance(config, dict):
            self.config = Config.from_dict(config)
        else:
            self.config = config
        self.console = console or Console()
        self._input = input_func or self._console_input
        self.branch_queries = BranchQueries(executor, self.config.git_binary)
        self.git_operations = GitOperations(executor, self.config.git_binary)

    def _console_input(self, prompt: str) -> str:
        return self.console.input(prompt, markup=False)

    def _ask(self, prompt: str) -> str:
        try:
            return self._input(prompt)
        except EOFError:
            return ""

    def run(self) -> RunSummary:
        """Process every local branch once and print the summary line.

        Raises:
            NotAGitRepositoryError: the working directory is not in a work tree
            CurrentBranchUnknownError: git could not report the current branch
        """
        dry_run = self.config.dry_run
        summary = RunSummary(BranchOutcome)

        if dry_run:
            self.console.print(f"[yellow]{escape(DRY_RUN_BANNER)}[/yellow]")

        if not self.branch_queries.is_inside_work_tree():
            raise NotAGitRepositoryError()

        current_branch = self.branch_queries.current_branch()
        if not current_branch:
            raise CurrentBranchUnknownError()

        branches = self.get_branches(current_branch)
        if not branches:
            self.console.print("No local branches found or error fetching branches.")
            return summary

        for branch in branches:
            if not branch.is_candidate:
                logger.debug(
                    f"Leaving {branch.name} alone (current={branch.is_current}, excluded={branch.is_excluded})"
                )
                continue

            decision = self.decide(branch)
            summary.record(branch.name, self.apply(branch, decision))

        self.console.print(format_branch_summary(summary, dry_run))
        return summary

    def get_branches(self, current_branch: str) -> List[Branch]:
        """List local branches, flagging the current and excluded ones."""
        exclude = self.config.exclude_set
        return [
            Branch(name=name, is_current=name == current_branch, is_excluded=name in exclude)
            for name in self.branch_queries.local_branches()
        ]

    def decide(self, branch: Branch) -> DeletionDecision:
        """Decide whether to delete a candidate branch, asking unless forced."""
        if self.config.force:
            return DeletionDecision.DELETE

        verb = f"{DRY_RUN_PREFIX} Would delete" if self.config.dry_run else "Delete"
        response = self._ask(f"{verb} branch '{branch.name}'? (y/n): ")
        if response.strip().lower() == "y":
            return DeletionDecision.DELETE
        return DeletionDecision.SKIP

    def apply(self, branch: Branch, decision: DeletionDecision) -> BranchOutcome:
        """Carry out a decision and report it. Failures do not raise."""
        name = escape(branch.name)

        if decision == DeletionDecision.SKIP:
            self.console.print(f"Skipped branch '{name}'.")
            return BranchOutcome.SKIPPED

        if self.config.dry_run:
            self.console.print(f"[yellow]{escape(DRY_RUN_PREFIX)} Would delete branch '{name}'.[/yellow]")
            return BranchOutcome.WOULD_DELETE

        self.console.print(f"Deleting branch '{name}'...")
        result = self.git_operations.delete_branch(branch.name)
        if result.succeeded:
            self.console.print(f"[green]Successfully deleted branch '{name}'.[/green]")
            if result.output.strip():
                self.console.print(escape(result.output))
            return BranchOutcome.DELETED

        self.console.print(
            f"[red]Failed to delete branch '{name}'. Exit code: {result.exit_code}[/red]"
        )
        if result.output.strip():
            self.console.print(f"Git Error: {escape(result.output)}")
        return BranchOutcome.FAILED
