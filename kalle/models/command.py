"""Result model for external command execution"""
from dataclasses import dataclass

# Reserved for processes that could not be started at all
SPAWN_FAILURE_EXIT_CODE = -1


@dataclass(frozen=True)
class CommandResult:
    """Captured outcome of one external command."""
    output: str
    exit_code: int

    @property
    def succeeded(self) -> bool:
        return self.exit_code == 0

    @property
    def spawn_failed(self) -> bool:
        return self.exit_code == SPAWN_FAILURE_EXIT_CODE
