"""Test doubles shared by the kalle test suite"""
import shlex

from kalle.models.command import CommandResult
from kalle.services.executor import CommandExecutor


OK = CommandResult("", 0)


class FakeExecutor(CommandExecutor):
    """In-memory executor that records calls and returns scripted results.

    ``responses`` maps a command tuple, e.g. ("git", "branch", "-D", "x"), to a
    CommandResult or to a callable taking the command tuple. Commands without a
    response get ``default``, which succeeds with empty output unless given.
    """

    def __init__(self, responses=None, working_dir="/fake/repo", default=OK):
        super().__init__(working_dir=working_dir)
        self.responses = dict(responses or {})
        self.default = default
        self.calls = []

    def _respond(self, command):
        self.calls.append(command)
        response = self.responses.get(command, self.default)
        if callable(response):
            response = response(command)
        return response

    def run(self, program, args=()):
        return self._respond((program, *args))

    def run_shell(self, command_line):
        return self._respond((self.shell, "-c", command_line))

    def mutating_calls(self):
        """Calls that would change branches or config."""
        return [
            call for call in self.calls
            if call[1:3] == ("branch", "-D")
            or "--replace-all" in call
            or (call[1:2] == ("-c",) and "--replace-all" in call[2])
        ]

    def deleted_branches(self):
        return [call[3] for call in self.calls if call[1:3] == ("branch", "-D")]


class RepoExecutor(FakeExecutor):
    """FakeExecutor scripted as a repository with the given branches."""

    def __init__(self, branches, current, delete_failures=None):
        super().__init__()
        self.responses.update({
            ("git", "rev-parse", "--is-inside-work-tree"): CommandResult("true", 0),
            ("git", "rev-parse", "--abbrev-ref", "HEAD"): CommandResult(current, 0),
            ("git", "for-each-ref", "--format=%(refname:short)", "refs/heads/"):
                CommandResult("\n".join(branches), 0),
        })
        for name in branches:
            self.responses[("git", "branch", "-D", name)] = CommandResult(
                f"Deleted branch {name} (was abc1234).", 0
            )
        for name, result in (delete_failures or {}).items():
            self.responses[("git", "branch", "-D", name)] = result


class GlobalConfigExecutor(FakeExecutor):
    """FakeExecutor backed by a dict standing in for the global git config."""

    def __init__(self, values=None, fail_keys=()):
        super().__init__()
        self.values = dict(values or {})
        self.fail_keys = set(fail_keys)

    def run(self, program, args=()):
        command = (program, *args)
        self.calls.append(command)
        args = list(args)
        if args[:3] == ["config", "--global", "--get"]:
            key = args[3]
            if key in self.values:
                return CommandResult(self.values[key], 0)
            return CommandResult("", 1)
        if args[:3] == ["config", "--global", "--replace-all"]:
            return self._set(args[3], args[4])
        return OK

    def run_shell(self, command_line):
        self.calls.append((self.shell, "-c", command_line))
        args = shlex.split(command_line)
        if args[1:4] == ["config", "--global", "--replace-all"]:
            return self._set(args[4], args[5])
        return CommandResult("sh: unknown command", 127)

    def _set(self, key, value):
        if key in self.fail_keys:
            return CommandResult("error: could not lock config file", 255)
        self.values[key] = value
        return OK


class ScriptedInput:
    """Answers prompts from a list and remembers what was asked."""

    def __init__(self, *answers):
        self.answers = list(answers)
        self.prompts = []

    def __call__(self, prompt):
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)


def output_of(console):
    """Text written to a console created by the `console` fixture."""
    return console.file.getvalue()
