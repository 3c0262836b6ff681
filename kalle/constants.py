"""Shared constants for kalle."""

from typing import Tuple


# Git aliases offered by `kalle init-aliases`, in prompt order
STATIC_ALIASES: Tuple[Tuple[str, str], ...] = (
    ("co", "checkout"),
    ("ci", "commit"),
    ("st", "status"),
    ("br", "branch"),
    ("amend", "commit --amend"),
    ("cob", "checkout -B"),
    ("nuke", "reset --hard"),
)

CLEANUP_ALIAS_KEY = "cleanup"
CLEANUP_SUBCOMMAND = "branch-cleanup"

# A leading "!" makes git run the alias through a shell
SHELL_ALIAS_PREFIX = "!"
# Escaped quote used inside shell-form alias commands
QUOTE_MARKER = '\\"'


DRY_RUN_PREFIX = "[Dry Run]"
DRY_RUN_BANNER = "*** Dry Run Mode: No branches will be deleted. ***"


DEFAULT_GIT_BINARY = "git"
DEFAULT_SHELL = "/bin/sh"
DEFAULT_DOCKER_BINARY = "docker"


# Image optimization
VALID_IMAGE_EXTENSIONS: Tuple[str, ...] = (".jpg", ".jpeg", ".png")

MOZJPEG_IMAGE = "kallehauge/mozjpeg:latest"
MOZJPEG_DEFAULT_QUALITY = 75

GUETZLI_IMAGE = "kallehauge/guetzli:latest"
GUETZLI_DEFAULT_QUALITY = 95
GUETZLI_DEFAULT_MEMLIMIT = 6000  # MB
