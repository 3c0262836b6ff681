"""External command execution service"""
import os
from typing import List, Optional, Sequence

import git
from git.exc import GitCommandNotFound

from kalle.constants import DEFAULT_SHELL
from kalle.logging_config import get_logger
from kalle.models.command import CommandResult, SPAWN_FAILURE_EXIT_CODE

logger = get_logger(__name__)


class CommandExecutor:
    """Runs external commands synchronously and captures their output.

    This is the only place kalle starts processes. Engines depend on the two
    public methods, so tests can swap in an in-memory implementation.
    """

    def __init__(self, working_dir: Optional[str] = None, shell: str = DEFAULT_SHELL):
        """Initialize the executor.

        Args:
            working_dir: Directory commands run in (defaults to the current directory)
            shell: POSIX shell used by run_shell()
        """
        self.working_dir = working_dir or os.getcwd()
        self.shell = shell

    def _get_git(self) -> git.Git:
        """Get a GitPython command wrapper bound to the working directory.

        Git.execute() runs whatever command list it is given, so it is used
        for non-git programs and the shell as well.
        """
        return git.Git(self.working_dir)

    def run(self, program: str, args: Sequence[str] = ()) -> CommandResult:
        """Run `program` with `args` without a shell."""
        return self._execute([program, *args])

    def run_shell(self, command_line: str) -> CommandResult:
        """Run a full command line through the configured shell."""
        return self._execute([self.shell, "-c", command_line])

    def _execute(self, command: List[str]) -> CommandResult:
        logger.debug(f"Running {command} in {self.working_dir}")
        try:
            status, stdout, stderr = self._get_git().execute(
                command,
                with_extended_output=True,
                with_exceptions=False,
            )
        except (GitCommandNotFound, OSError) as e:
            logger.error(f"An error occurred while trying to run {command[0]}: {e}")
            return CommandResult(f"Exception: {e}", SPAWN_FAILURE_EXIT_CODE)

        # stderr is only of interest when the command failed
        if status != 0:
            output = f"{stdout}\n{stderr}".strip()
        else:
            output = stdout.strip()

        logger.debug(f"Exit code {status} from {command[0]}")
        return CommandResult(output, status)
