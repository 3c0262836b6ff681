"""Command engines for kalle."""

from .alias_provisioner import AliasProvisioner, resolve_executable_path
from .branch_cleanup import BranchCleaner
from .image_optimizer import DockerImageOptimizer, GuetzliOptimizer, MozjpegOptimizer

__all__ = [
    "AliasProvisioner",
    "BranchCleaner",
    "DockerImageOptimizer",
    "GuetzliOptimizer",
    "MozjpegOptimizer",
    "resolve_executable_path",
]
