"""Command-line interface for kalle.

This package provides argument parsing; the entry point lives in
kalle.cli.main.
"""

from .args import build_parser, parse_args

__all__ = ["build_parser", "parse_args"]
