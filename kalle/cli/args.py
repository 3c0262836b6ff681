"""Command-line argument parsing for kalle."""

import argparse

from kalle.__version__ import __version__
from kalle.constants import (
    CLEANUP_SUBCOMMAND,
    GUETZLI_DEFAULT_MEMLIMIT,
    GUETZLI_DEFAULT_QUALITY,
    MOZJPEG_DEFAULT_QUALITY,
)

BRANCH_CLEANUP_EPILOG = """\
Examples:
  kalle branch-cleanup --exclude main develop      # Interactive deletion, keeping 'main' and 'develop'
  kalle branch-cleanup -f                          # Delete every local branch except the current one
  kalle branch-cleanup -f --exclude main develop   # Same, but also keep 'main' and 'develop'
  kalle branch-cleanup --dry-run -f                # Show what -f would delete
"""

INIT_ALIASES_EPILOG = """\
Aliases offered (each prompts [Y/n], default Yes):
  git co    = git checkout
  git ci    = git commit
  git st    = git status
  git br    = git branch
  git amend = git commit --amend
  git cob   = git checkout -B
  git nuke  = git reset --hard (use with caution!)
  cleanup   = <path_to_kalle> branch-cleanup

Aliases already set correctly are skipped. Aliases set to something else are
offered as an update.
"""


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level parser with one subparser per command."""
    parser = argparse.ArgumentParser(
        prog="kalle",
        description="Kalle CLI Tools - A collection of helpful command-line utilities.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Show verbose output")
    parser.add_argument(
        "--debug", action="store_true", help="Show debug information for troubleshooting"
    )
    parser.add_argument("--version", action="version", version=f"kalle {__version__}")

    subparsers = parser.add_subparsers(dest="command", metavar="<command>")
    subparsers.required = True

    cleanup = subparsers.add_parser(
        CLEANUP_SUBCOMMAND,
        help="Interactively delete local branches other than the current one",
        epilog=BRANCH_CLEANUP_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    cleanup.add_argument(
        "-f", "--force", action="store_true", help="Force delete branches without prompting"
    )
    cleanup.add_argument(
        "--exclude",
        nargs="+",
        action="extend",
        default=[],
        metavar="BRANCH",
        help="Branches to exclude from deletion. Can be used multiple times.",
    )
    cleanup.add_argument(
        "--dry-run",
        action="store_true",
        help="Show which branches would be deleted without actually deleting them",
    )

    subparsers.add_parser(
        "init-aliases",
        help="Interactively configure useful global git aliases",
        epilog=INIT_ALIASES_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    mozjpeg = subparsers.add_parser("mozjpeg", help="Optimize JPEG images using mozjpeg (Docker)")
    mozjpeg.add_argument(
        "--quality",
        type=int,
        default=MOZJPEG_DEFAULT_QUALITY,
        help=f"Quality of the output image (0-100; 5-95 is recommended, default: {MOZJPEG_DEFAULT_QUALITY})",
    )
    mozjpeg.add_argument(
        "-u", "--update", action="store_true", help="Update the mozjpeg Docker image"
    )
    mozjpeg.add_argument("input", nargs="?", help="Input image file path")
    mozjpeg.add_argument("output", nargs="?", help="Output image file path")

    guetzli = subparsers.add_parser(
        "guetzli", help="Optimize JPEG images using Google's Guetzli (Docker)"
    )
    guetzli.add_argument(
        "--quality",
        type=int,
        default=GUETZLI_DEFAULT_QUALITY,
        help=f"Quality of the output image (84-100, default: {GUETZLI_DEFAULT_QUALITY})",
    )
    guetzli.add_argument(
        "--memlimit",
        type=int,
        default=GUETZLI_DEFAULT_MEMLIMIT,
        help=f"Memory limit in MB (default: {GUETZLI_DEFAULT_MEMLIMIT})",
    )
    guetzli.add_argument(
        "--verbose",
        dest="trace",
        action="store_true",
        help="Print a verbose trace of all attempts",
    )
    guetzli.add_argument(
        "-u", "--update", action="store_true", help="Update the Guetzli Docker image"
    )
    guetzli.add_argument("input", nargs="?", help="Input image file path")
    guetzli.add_argument("output", nargs="?", help="Output image file path")

    name = subparsers.add_parser("name", help="Greet a name with the current date and time")
    name.add_argument("name", help="The name to display")

    return parser


def parse_args(argv=None):
    """Parse command-line arguments."""
    return build_parser().parse_args(argv)
