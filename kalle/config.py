"""Configuration handling for kalle"""

from dataclasses import dataclass, field
from typing import FrozenSet, List

from kalle.constants import DEFAULT_GIT_BINARY, DEFAULT_SHELL


@dataclass
class Config:
    """Configuration for kalle commands with validation."""

    # Branch cleanup
    force: bool = False
    dry_run: bool = False
    exclude_branches: List[str] = field(default_factory=list)

    # Output
    verbose: bool = False
    debug: bool = False

    # External tools
    git_binary: str = DEFAULT_GIT_BINARY
    shell: str = DEFAULT_SHELL

    def __post_init__(self):
        """Validate configuration after initialization."""
        self._validate_exclude_branches()
        self._validate_git_binary()
        self._validate_shell()

    def _validate_exclude_branches(self):
        """Validate exclude_branches and normalize it to unique, stripped names."""
        if not isinstance(self.exclude_branches, (list, tuple)):
            raise ValueError("exclude_branches must be a list")

        normalized: List[str] = []
        for name in self.exclude_branches:
            if not isinstance(name, str):
                raise ValueError(f"exclude_branches entries must be strings, got {name!r}")
            name = name.strip()
            if name and name not in normalized:
                normalized.append(name)
        self.exclude_branches = normalized

    def _validate_git_binary(self):
        """Validate git_binary is not empty."""
        if not self.git_binary or not self.git_binary.strip():
            raise ValueError("git_binary cannot be empty")
        self.git_binary = self.git_binary.strip()

    def _validate_shell(self):
        """Validate shell is not empty."""
        if not self.shell or not self.shell.strip():
            raise ValueError("shell cannot be empty")
        self.shell = self.shell.strip()

    @property
    def exclude_set(self) -> FrozenSet[str]:
        return frozenset(self.exclude_branches)

    def to_dict(self) -> dict:
        """Convert config to dictionary."""
        return {
            "force": self.force,
            "dry_run": self.dry_run,
            "exclude_branches": list(self.exclude_branches),
            "verbose": self.verbose,
            "debug": self.debug,
            "git_binary": self.git_binary,
            "shell": self.shell,
        }

    def get(self, key: str, default=None):
        """Get config value by key."""
        return getattr(self, key, default)

    @classmethod
    def from_dict(cls, config_dict: dict) -> "Config":
        """Create Config from dictionary, ignoring unknown keys."""
        known_fields = {
            "force",
            "dry_run",
            "exclude_branches",
            "verbose",
            "debug",
            "git_binary",
            "shell",
        }

        filtered = {k: v for k, v in config_dict.items() if k in known_fields}
        return cls(**filtered)
