"""Custom exceptions for kalle"""


class KalleError(Exception):
    """Base exception for all kalle errors."""
    pass


class PreconditionError(KalleError):
    """Raised when a command cannot start; no work has been done yet."""
    pass


class NotAGitRepositoryError(PreconditionError):
    """Exception raised when the working directory is not inside a git work tree."""

    def __init__(self):
        super().__init__("Not in a git repository.")


class CurrentBranchUnknownError(PreconditionError):
    """Exception raised when the checked-out branch cannot be determined."""

    def __init__(self):
        super().__init__("Could not determine the current branch.")


class ExecutablePathError(PreconditionError):
    """Exception raised when the running executable's path cannot be resolved."""

    def __init__(self):
        super().__init__(
            "Could not determine the executable path. Skipping git alias configuration."
        )
