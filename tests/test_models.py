"""Tests for kalle data models"""
import pytest

from kalle.models.alias import AliasEntry, AliasStatus, build_cleanup_command
from kalle.models.branch import Branch
from kalle.models.command import CommandResult


class TestAliasEntry:
    """Test alias display and evaluation."""

    def test_plain_alias(self):
        alias = AliasEntry("amend", "commit --amend")

        assert alias.config_key == "alias.amend"
        assert not alias.is_shell_form
        assert alias.expected_value == "commit --amend"
        assert alias.display_key == "git amend"
        assert alias.display_command == "git commit --amend"
        assert alias.prompt_command == "commit --amend"

    def test_shell_alias(self):
        alias = AliasEntry("cleanup", build_cleanup_command("/usr/bin/kalle", "branch-cleanup"))

        assert alias.is_shell_form
        assert alias.desired_command == '!\\"/usr/bin/kalle\\" branch-cleanup'
        assert alias.expected_value == '!"/usr/bin/kalle" branch-cleanup'
        assert alias.display_key == "cleanup"
        assert alias.display_command == "/usr/bin/kalle branch-cleanup"

    @pytest.mark.parametrize("path, expected", [
        ('/opt/a"b/kalle', '!"/opt/a\\"b/kalle" branch-cleanup'),
        ("/opt/$HOME/kalle", '!"/opt/\\$HOME/kalle" branch-cleanup'),
        ("/opt/`id`/kalle", '!"/opt/\\`id\\`/kalle" branch-cleanup'),
        ("/opt/back\\slash/kalle", '!"/opt/back\\\\slash/kalle" branch-cleanup'),
    ])
    def test_shell_alias_escapes_path(self, path, expected):
        alias = AliasEntry("cleanup", build_cleanup_command(path, "branch-cleanup"))

        assert alias.expected_value == expected
        assert alias.prompt_command == f"{path} branch-cleanup"

    @pytest.mark.parametrize("result, status, existing", [
        (CommandResult("checkout", 0), AliasStatus.MATCHES, "checkout"),
        (CommandResult("checkout\n", 0), AliasStatus.MATCHES, "checkout"),
        (CommandResult("switch", 0), AliasStatus.MISMATCH, "switch"),
        (CommandResult("", 1), AliasStatus.MISSING, None),
        (CommandResult("  ", 0), AliasStatus.MISSING, None),
        (CommandResult("Exception: git not found", -1), AliasStatus.MISSING, None),
    ])
    def test_with_lookup(self, result, status, existing):
        alias = AliasEntry("co", "checkout").with_lookup(result)

        assert alias.status == status
        assert alias.existing_value == existing

    def test_action(self):
        mismatch = AliasEntry("co", "checkout").with_lookup(CommandResult("switch", 0))
        missing = AliasEntry("co", "checkout").with_lookup(CommandResult("", 1))

        assert mismatch.action == "Update"
        assert missing.action == "Add"


class TestBranch:
    """Test branch candidacy."""

    @pytest.mark.parametrize("is_current, is_excluded, candidate", [
        (False, False, True),
        (True, False, False),
        (False, True, False),
        (True, True, False),
    ])
    def test_is_candidate(self, is_current, is_excluded, candidate):
        branch = Branch("x", is_current=is_current, is_excluded=is_excluded)
        assert branch.is_candidate is candidate

    def test_branch_is_immutable(self):
        branch = Branch("x")
        with pytest.raises(AttributeError):
            branch.name = "y"
