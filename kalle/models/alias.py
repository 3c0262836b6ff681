"""Git alias model and related enums"""
import re
from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional

from kalle.constants import QUOTE_MARKER, SHELL_ALIAS_PREFIX
from kalle.models.command import CommandResult

# Characters a POSIX shell still interprets inside double quotes
_DOUBLE_QUOTE_SPECIAL = re.compile(r'([\\"$`])')
# A backslash pair in a marked command: an escaped backslash or a quote marker
_MARKED_ESCAPE = re.compile(r'\\([\\"])')
# An unescaped double quote, or a backslash escape, in a shell command
_SHELL_QUOTING = re.compile(r'\\([\\"$`])|"')


class AliasStatus(Enum):
    """How the global config compares to the desired alias."""
    MATCHES = "matches"
    MISSING = "missing"
    MISMATCH = "mismatch"


class AliasOutcome(Enum):
    """Terminal outcome of one alias during a provisioning run."""
    CONFIGURED = "configured/updated"
    SKIPPED = "skipped (already correct)"
    DECLINED = "declined"
    FAILED = "failed"


@dataclass(frozen=True)
class AliasEntry:
    """A desired global alias, optionally paired with what git has now."""
    key: str
    desired_command: str
    existing_value: Optional[str] = None
    status: Optional[AliasStatus] = None

    @property
    def config_key(self) -> str:
        return f"alias.{self.key}"

    @property
    def is_shell_form(self) -> bool:
        return self.desired_command.startswith(SHELL_ALIAS_PREFIX)

    @property
    def expected_value(self) -> str:
        """Value git should report once the alias is configured."""
        if self.is_shell_form:
            return _MARKED_ESCAPE.sub(r"\1", self.desired_command)
        return self.desired_command

    @property
    def prompt_command(self) -> str:
        """Command text shown when asking to add or update the alias."""
        if self.is_shell_form:
            command = self.expected_value[len(SHELL_ALIAS_PREFIX):]
            return _SHELL_QUOTING.sub(lambda match: match.group(1) or "", command)
        return self.desired_command

    @property
    def display_key(self) -> str:
        return self.key if self.is_shell_form else f"git {self.key}"

    @property
    def display_command(self) -> str:
        return self.prompt_command if self.is_shell_form else f"git {self.desired_command}"

    @property
    def action(self) -> str:
        """'Update' when a differing value exists, 'Add' otherwise."""
        return "Update" if self.status == AliasStatus.MISMATCH else "Add"

    def with_lookup(self, result: CommandResult) -> "AliasEntry":
        """Return a copy evaluated against a `git config --get` result.

        A failed lookup or a blank value counts as missing. Otherwise the
        trimmed value either matches the expected value or is a mismatch.
        """
        if not result.succeeded or not result.output.strip():
            return replace(self, existing_value=None, status=AliasStatus.MISSING)

        existing = result.output.strip()
        status = AliasStatus.MATCHES if existing == self.expected_value else AliasStatus.MISMATCH
        return replace(self, existing_value=existing, status=status)


def build_cleanup_command(executable_path: str, subcommand: str) -> str:
    """Shell-form alias command that runs `subcommand` of this executable.

    The path is double-quoted and shell-escaped, so git's shell runs it
    verbatim. In the returned command every quote is written as a
    QUOTE_MARKER and every backslash is doubled.
    """
    quoted_path = '"' + _DOUBLE_QUOTE_SPECIAL.sub(r"\\\1", executable_path) + '"'
    value = f"{SHELL_ALIAS_PREFIX}{quoted_path} {subcommand}"
    return value.replace("\\", "\\\\").replace('"', QUOTE_MARKER)
