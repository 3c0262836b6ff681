"""Entry point for the kalle command"""

import sys
from datetime import datetime

from rich.console import Console
from rich.markup import escape

from kalle.cli.args import parse_args
from kalle.config import Config
from kalle.constants import CLEANUP_SUBCOMMAND
from kalle.core import (
    AliasProvisioner,
    BranchCleaner,
    GuetzliOptimizer,
    MozjpegOptimizer,
    resolve_executable_path,
)
from kalle.exceptions import ExecutablePathError, PreconditionError
from kalle.logging_config import get_logger, setup_logging
from kalle.services.executor import CommandExecutor

console = Console()
logger = get_logger(__name__)


def run_branch_cleanup(args, config: Config) -> int:
    executor = CommandExecutor(shell=config.shell)
    BranchCleaner(executor, config, console=console).run()
    # Individual deletion failures are reported, not fatal
    return 0


def run_init_aliases(args, config: Config) -> int:
    executor = CommandExecutor(shell=config.shell)
    provisioner = AliasProvisioner(
        executor, resolve_executable_path(), config=config, console=console
    )
    provisioner.run()
    return 0


def run_mozjpeg(args, config: Config) -> int:
    optimizer = MozjpegOptimizer(
        CommandExecutor(shell=config.shell), quality=args.quality, console=console
    )
    if args.update:
        return optimizer.update_image()
    return optimizer.optimize(args.input, args.output)


def run_guetzli(args, config: Config) -> int:
    optimizer = GuetzliOptimizer(
        CommandExecutor(shell=config.shell),
        quality=args.quality,
        memlimit=args.memlimit,
        verbose=args.trace,
        console=console,
    )
    if args.update:
        return optimizer.update_image()
    return optimizer.optimize(args.input, args.output)


def run_name(args, config: Config) -> int:
    now = datetime.now()
    console.print(f"\nHello, {escape(args.name)}, on {now:%x} at {now:%H:%M}!")
    return 0


COMMANDS = {
    CLEANUP_SUBCOMMAND: run_branch_cleanup,
    "init-aliases": run_init_aliases,
    "mozjpeg": run_mozjpeg,
    "guetzli": run_guetzli,
    "name": run_name,
}


def main(argv=None) -> int:
    """Main entry point for the application."""
    parsed_args = parse_args(argv)
    setup_logging(verbose=parsed_args.verbose, debug=parsed_args.debug)

    try:
        config = Config(
            force=getattr(parsed_args, "force", False),
            dry_run=getattr(parsed_args, "dry_run", False),
            exclude_branches=getattr(parsed_args, "exclude", []),
            verbose=parsed_args.verbose,
            debug=parsed_args.debug,
        )

        if parsed_args.debug:
            console.print("[yellow]Debug mode enabled[/yellow]")
            console.print("[yellow]Configuration:[/yellow]")
            for key, value in config.to_dict().items():
                console.print(f"  {key}: {escape(str(value))}")

        handler = COMMANDS[parsed_args.command]
        logger.debug(f"Running command {parsed_args.command}")
        return handler(parsed_args, config)
    except ExecutablePathError as e:
        console.print(f"[yellow]\\[WARN] {escape(str(e))}[/yellow]")
        return 1
    except PreconditionError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        return 1
    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        return 1
    except Exception as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        if parsed_args.debug:
            console.print_exception()
        return 1


if __name__ == "__main__":
    sys.exit(main())
