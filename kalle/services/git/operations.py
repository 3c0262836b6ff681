"""Mutating git operations and global config access"""

import shlex

from kalle.constants import DEFAULT_GIT_BINARY
from kalle.logging_config import get_logger
from kalle.models.command import CommandResult
from kalle.services.executor import CommandExecutor

logger = get_logger(__name__)


class GitOperations:
    """Git commands that read the global config or change branches and aliases."""

    def __init__(self, executor: CommandExecutor, git_binary: str = DEFAULT_GIT_BINARY):
        self.executor = executor
        self.git_binary = git_binary

    def delete_branch(self, branch_name: str) -> CommandResult:
        """Force-delete a local branch, merged or not."""
        logger.info(f"Deleting local branch {branch_name}")
        return self.executor.run(self.git_binary, ["branch", "-D", branch_name])

    def get_global_config(self, key: str) -> CommandResult:
        """Read one key from the global git configuration."""
        return self.executor.run(self.git_binary, ["config", "--global", "--get", key])

    def set_global_config(self, key: str, value: str) -> CommandResult:
        """Set a global config key, replacing every existing value for it."""
        logger.info(f"Setting global {key}")
        return self.executor.run(
            self.git_binary, ["config", "--global", "--replace-all", key, value]
        )

    def set_global_config_via_shell(self, key: str, value: str) -> CommandResult:
        """Set a global config key by running git config through the shell.

        Used for shell-form aliases; the value is single-quoted so the shell
        hands it to git verbatim.
        """
        command_line = " ".join([
            shlex.quote(self.git_binary),
            "config", "--global", "--replace-all",
            shlex.quote(key),
            shlex.quote(value),
        ])
        logger.info(f"Setting global {key} through {self.executor.shell}")
        return self.executor.run_shell(command_line)
