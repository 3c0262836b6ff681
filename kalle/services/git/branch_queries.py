"""Branch query service for kalle."""

from typing import List, Optional

from kalle.constants import DEFAULT_GIT_BINARY
from kalle.logging_config import get_logger
from kalle.models.command import CommandResult
from kalle.services.executor import CommandExecutor

logger = get_logger(__name__)


class BranchQueries:
    """Read-only queries about the repository's local branches.

    Nothing is cached: every call asks git again.
    """

    def __init__(self, executor: CommandExecutor, git_binary: str = DEFAULT_GIT_BINARY):
        self.executor = executor
        self.git_binary = git_binary

    def _git(self, *args: str) -> CommandResult:
        return self.executor.run(self.git_binary, list(args))

    def is_inside_work_tree(self) -> bool:
        """Check whether the working directory is inside a git work tree."""
        result = self._git("rev-parse", "--is-inside-work-tree")
        if not result.succeeded:
            logger.debug(f"Not inside a work tree: {result.output}")
        return result.succeeded

    def current_branch(self) -> Optional[str]:
        """Get the checked-out branch name, or None if git cannot tell."""
        result = self._git("rev-parse", "--abbrev-ref", "HEAD")
        if not result.succeeded or not result.output.strip():
            logger.debug(f"Could not determine current branch: {result.output}")
            return None
        return result.output.strip()

    def local_branches(self) -> List[str]:
        """Get local branch names in the order git reports them."""
        result = self._git("for-each-ref", "--format=%(refname:short)", "refs/heads/")
        if not result.succeeded:
            logger.debug(f"Error listing local branches: {result.output}")
            return []

        branches = [line.strip() for line in result.output.splitlines()]
        branches = [name for name in branches if name]
        logger.debug(f"Found {len(branches)} local branches")
        return branches
