"""Interactive provisioning of global git aliases"""

import os
import shutil
import sys
from typing import Callable, List, Optional, Union

from rich.console import Console
from rich.markup import escape

from kalle.config import Config
from kalle.constants import CLEANUP_ALIAS_KEY, CLEANUP_SUBCOMMAND, STATIC_ALIASES
from kalle.exceptions import ExecutablePathError
from kalle.formatters import format_alias_listing, format_alias_prompt, format_alias_summary
from kalle.logging_config import get_logger
from kalle.models.alias import AliasEntry, AliasOutcome, AliasStatus, build_cleanup_command
from kalle.services.executor import CommandExecutor
from kalle.services.git import GitOperations
from kalle.services.summary_service import RunSummary

logger = get_logger(__name__)


def resolve_executable_path(argv0: Optional[str] = None) -> Optional[str]:
    """Find the absolute path of the running kalle executable.

    Args:
        argv0: Program name as invoked (defaults to sys.argv[0])

    Returns:
        Absolute path to an existing executable file, or None when it cannot
        be found or git could not run it
    """
    if argv0 is None:
        argv0 = sys.argv[0] if sys.argv else ""
    if not argv0 or argv0 == "-c":
        return None

    if os.sep in argv0 or (os.altsep and os.altsep in argv0):
        candidate: Optional[str] = argv0
    else:
        candidate = shutil.which(argv0)

    if not candidate:
        logger.debug(f"Could not locate {argv0} on PATH")
        return None

    path = os.path.abspath(candidate)
    if not os.path.isfile(path):
        logger.debug(f"Executable path {path} is not a file")
        return None
    if not os.access(path, os.X_OK):
        logger.debug(f"Executable path {path} is not executable")
        return None
    return path


class AliasProvisioner:
    """Offers to add or update a fixed set of global git aliases.

    Aliases already set to the expected value are skipped without a prompt.
    Every other alias is offered with a default-yes [Y/n] question. Each alias
    is read, decided and written on its own; one failing or being declined
    never affects the rest.
    """

    def __init__(
        self,
        executor: CommandExecutor,
        executable_path: Optional[str],
        config: Union[Config, dict, None] = None,
        console: Optional[Console] = None,
        input_func: Optional[Callable[[str], str]] = None,
    ):
        """Initialize the provisioner.

        Args:
            executor: Runs git (and the shell for shell-form aliases)
            executable_path: Absolute path of this tool, used by the cleanup alias
            config: Config object or dict (only git_binary is used)
            console: Where user-facing output goes
            input_func: Reads one answer for a prompt (console input by default)
        """
        if config is None:
            self.config = Config()
        elif isinstance(config, dict):
            self.config = Config.from_dict(config)
        else:
            self.config = config
        self.executable_path = executable_path
        self.console = console or Console()
        self._input = input_func or self._console_input
        self.git_operations = GitOperations(executor, self.config.git_binary)

    def _console_input(self, prompt: str) -> str:
        return self.console.input(prompt, markup=False)

    def _ask(self, prompt: str) -> str:
        try:
            return self._input(prompt)
        except EOFError:
            return ""

    def build_aliases(self) -> List[AliasEntry]:
        """Desired aliases in prompt order: the static ones, then cleanup.

        Raises:
            ExecutablePathError: the executable path is unknown, so no alias is offered
        """
        if not self.executable_path:
            raise ExecutablePathError()

        aliases = [AliasEntry(key, command) for key, command in STATIC_ALIASES]
        aliases.append(
            AliasEntry(
                CLEANUP_ALIAS_KEY,
                build_cleanup_command(self.executable_path, CLEANUP_SUBCOMMAND),
            )
        )
        return aliases

    def run(self) -> RunSummary:
        """Process every desired alias once and print the tally."""
        aliases = self.build_aliases()
        cleanup_alias = aliases[-1]

        self.console.print(f"[INFO] Detected executable path: {escape(self.executable_path)}")
        self.console.print(
            f"[INFO] Will propose 'git {cleanup_alias.key}' alias for: {escape(cleanup_alias.prompt_command)}"
        )
        self._display_proposed(aliases)

        summary = RunSummary(AliasOutcome)
        for alias in aliases:
            summary.record(alias.key, self.process_alias(alias))
            self.console.print()

        self.console.print("[green]Global Git alias configuration complete.[/green]")
        self.console.print(format_alias_summary(summary))
        return summary

    def _display_proposed(self, aliases: List[AliasEntry]) -> None:
        self.console.print("\nInitializing global Git aliases (interactive)...")
        self.console.print(
            "This will check and offer to add/update the following aliases "
            "in your global Git configuration:\n"
        )
        for alias in aliases:
            self.console.print(escape(format_alias_listing(alias)))
        self.console.print()

    def inspect(self, alias: AliasEntry) -> AliasEntry:
        """Read the alias from the global config and evaluate its status."""
        result = self.git_operations.get_global_config(alias.config_key)
        inspected = alias.with_lookup(result)
        logger.debug(f"{alias.config_key}: {inspected.status.value} (existing={inspected.existing_value!r})")
        return inspected

    def process_alias(self, alias: AliasEntry) -> AliasOutcome:
        """Check one alias, ask if it needs changing, and apply the answer."""
        alias = self.inspect(alias)

        if alias.status == AliasStatus.MATCHES:
            self.console.print(f"[SKIP] Alias '{escape(alias.key)}' already configured correctly.")
            return AliasOutcome.SKIPPED

        response = self._ask(format_alias_prompt(alias))
        if response.strip().lower() == "n":
            self.console.print(f"[yellow][DECLINED] Skipping alias '{escape(alias.key)}'.[/yellow]")
            return AliasOutcome.DECLINED

        return self.configure(alias)

    def configure(self, alias: AliasEntry) -> AliasOutcome:
        """Write the alias to the global config."""
        if alias.is_shell_form:
            result = self.git_operations.set_global_config_via_shell(
                alias.config_key, alias.expected_value
            )
        else:
            result = self.git_operations.set_global_config(alias.config_key, alias.desired_command)

        if result.succeeded:
            self.console.print(f"[green][OK] Successfully configured alias '{escape(alias.key)}'.[/green]")
            return AliasOutcome.CONFIGURED

        self.console.print(
            f"[red][FAIL] Failed to configure alias '{escape(alias.key)}'. Exit code: {result.exit_code}[/red]"
        )
        if result.output.strip():
            self.console.print(f"       Git Error: {escape(result.output)}")
        return AliasOutcome.FAILED
