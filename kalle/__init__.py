"""
kalle - personal git helper commands
"""

from .__version__ import __version__
from .core import AliasProvisioner, BranchCleaner
from .cli.main import main

__all__ = ["AliasProvisioner", "BranchCleaner", "main", "__version__"]
