"""Docker-backed JPEG optimizers"""

import os
import shlex
from abc import ABC, abstractmethod
from typing import List, Optional

from rich.console import Console
from rich.markup import escape

from kalle.constants import (
    DEFAULT_DOCKER_BINARY,
    GUETZLI_DEFAULT_MEMLIMIT,
    GUETZLI_DEFAULT_QUALITY,
    GUETZLI_IMAGE,
    MOZJPEG_DEFAULT_QUALITY,
    MOZJPEG_IMAGE,
    VALID_IMAGE_EXTENSIONS,
)
from kalle.logging_config import get_logger
from kalle.models.command import CommandResult
from kalle.services.executor import CommandExecutor

logger = get_logger(__name__)


def has_valid_image_extension(file_path: str) -> bool:
    """Check the file extension against the supported image types."""
    extension = os.path.splitext(file_path)[1].lower()
    return extension in VALID_IMAGE_EXTENSIONS


class DockerImageOptimizer(ABC):
    """Shared flow for optimizers that run inside a Docker image.

    Subclasses set `label` and `image` and build the container invocation.
    """

    label = ""
    image = ""

    def __init__(
        self,
        executor: CommandExecutor,
        console: Optional[Console] = None,
        docker_binary: str = DEFAULT_DOCKER_BINARY,
    ):
        self.executor = executor
        self.console = console or Console()
        self.docker_binary = docker_binary

    @property
    def image_name(self) -> str:
        """Image reference without the tag."""
        return self.image.rsplit(":", 1)[0]

    def update_image(self) -> int:
        """Pull the latest image. Returns a process exit status."""
        self.console.print(f"Updating {self.label} Docker image...")
        result = self.executor.run(self.docker_binary, ["pull", self.image])
        if result.succeeded:
            self.console.print(f"[green]Successfully updated {self.label} Docker image.[/green]")
            if result.output:
                self.console.print(escape(result.output))
        else:
            self.console.print(f"[red]Error updating Docker image. Exit code: {result.exit_code}[/red]")
            if result.output:
                self.console.print(f"Docker Error: {escape(result.output)}")
        return 1 if result.spawn_failed else result.exit_code

    def image_exists(self) -> bool:
        """Check whether the image is available locally."""
        result = self.executor.run(
            self.docker_binary,
            ["images", self.image, "--format", "{{.Repository}}:{{.Tag}}"],
        )
        return result.succeeded and bool(result.output.strip())

    def validate(self, input_file: Optional[str], output_file: Optional[str]) -> Optional[str]:
        """Return an error message for unusable paths, or None if they are fine."""
        if not input_file or not output_file:
            return "Both input and output file paths are required."

        extensions = ", ".join(VALID_IMAGE_EXTENSIONS)
        if not has_valid_image_extension(input_file):
            return f"Input file must have one of these extensions: {extensions}"
        if not has_valid_image_extension(output_file):
            return f"Output file must have one of these extensions: {extensions}"
        return None

    def optimize(self, input_file: Optional[str], output_file: Optional[str]) -> int:
        """Optimize one image. Returns a process exit status."""
        error = self.validate(input_file, output_file)
        if error:
            self.console.print(f"[red]Error: {escape(error)}[/red]")
            return 1

        input_path = os.path.join(self.executor.working_dir, input_file)
        if not os.path.isfile(input_path):
            self.console.print(f"[red]Error: Input file '{escape(input_file)}' does not exist.[/red]")
            return 1

        if not self.image_exists():
            self.console.print(f"{self.image_name} Docker image not found. Updating...")
            self.update_image()

        output_dir = os.path.dirname(os.path.join(self.executor.working_dir, output_file))
        if output_dir and not os.path.isdir(output_dir):
            os.makedirs(output_dir, exist_ok=True)

        result = self._run_container(input_file, output_file)
        if result.succeeded:
            self.console.print(f"[green]Successfully optimized image: {escape(output_file)}[/green]")
            if result.output:
                self.console.print(escape(result.output))
            return 0

        self.console.print(f"[red]Error optimizing image. Exit code: {result.exit_code}[/red]")
        if result.output:
            self.console.print(f"Docker Error: {escape(result.output)}")
        return 1 if result.spawn_failed else result.exit_code

    def _volume(self, target: str) -> str:
        return f"{self.executor.working_dir}:{target}"

    @abstractmethod
    def _run_container(self, input_file: str, output_file: str) -> CommandResult:
        """Run the optimizer container on one image."""


class MozjpegOptimizer(DockerImageOptimizer):
    """mozjpeg writes the optimized image to stdout, so it runs through the shell."""

    label = "mozjpeg"
    image = MOZJPEG_IMAGE

    def __init__(self, executor: CommandExecutor, quality: int = MOZJPEG_DEFAULT_QUALITY, **kwargs):
        super().__init__(executor, **kwargs)
        self.quality = quality

    def _run_container(self, input_file: str, output_file: str) -> CommandResult:
        command_line = " ".join([
            shlex.quote(self.docker_binary), "run",
            "-v", shlex.quote(self._volume("/data")),
            shlex.quote(self.image_name),
            "-optimize", "-progressive",
            "-quality", str(self.quality),
            shlex.quote(input_file),
            ">", shlex.quote(output_file),
        ])
        logger.debug(f"mozjpeg command: {command_line}")
        return self.executor.run_shell(command_line)


class GuetzliOptimizer(DockerImageOptimizer):
    """Guetzli needs roughly 300MB of memory per megapixel of input."""

    label = "Guetzli"
    image = GUETZLI_IMAGE

    def __init__(
        self,
        executor: CommandExecutor,
        quality: int = GUETZLI_DEFAULT_QUALITY,
        memlimit: int = GUETZLI_DEFAULT_MEMLIMIT,
        verbose: bool = False,
        **kwargs,
    ):
        super().__init__(executor, **kwargs)
        self.quality = quality
        self.memlimit = memlimit
        self.verbose = verbose

    def guetzli_options(self) -> List[str]:
        options = ["--verbose"] if self.verbose else []
        options += ["--quality", str(self.quality), "--memlimit", str(self.memlimit)]
        return options

    def _run_container(self, input_file: str, output_file: str) -> CommandResult:
        args = ["run", "-v", self._volume("/images"), self.image_name]
        args += self.guetzli_options()
        args += [input_file, output_file]
        return self.executor.run(self.docker_binary, args)
