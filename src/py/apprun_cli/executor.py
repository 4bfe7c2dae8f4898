"""External command executors.

This module provides executor classes for the JavaScript package managers
(npm, Yarn, pnpm, Bun) and for git, used while initializing a project.
"""

import json
import logging
import platform
import shutil
import subprocess
from pathlib import Path
from typing import ClassVar

from apprun_cli._utils import LOGGER_NAME
from apprun_cli.exceptions import CommandExecutionError, ExecutableNotFoundError

__all__ = (
    "BunExecutor",
    "CommandExecutor",
    "GitExecutor",
    "JSExecutor",
    "NodeExecutor",
    "PnpmExecutor",
    "YarnExecutor",
)

logger = logging.getLogger(LOGGER_NAME)


class CommandExecutor:
    """Generic blocking command executor."""

    bin_name: ClassVar[str]

    def __init__(self, executable_path: "Path | str | None" = None) -> None:
        self.executable_path = executable_path

    def _resolve_executable(self) -> str:
        if self.executable_path:
            return str(self.executable_path)
        path = shutil.which(self.bin_name)
        if path is None:
            raise ExecutableNotFoundError(self.bin_name)
        return path

    def execute(self, args: list[str], cwd: Path) -> None:
        """Execute a command and wait for it to finish.

        Raises:
            CommandExecutionError: If the command exits with a non-zero status.
        """
        executable = self._resolve_executable()
        # Avoid double-prefixing the executable when callers pass it explicitly
        command = args if args and Path(args[0]).name == Path(executable).name else [executable, *args]
        logger.debug("Running %s in %s", command, cwd)
        process = subprocess.run(
            command,
            cwd=cwd,
            shell=platform.system() == "Windows",
            check=False,
            stdout=None,  # inherit for live output
            stderr=subprocess.PIPE,
        )
        if process.returncode != 0:
            stderr = process.stderr.decode() if process.stderr else ""
            raise CommandExecutionError(command, process.returncode, stderr)


class JSExecutor(CommandExecutor):
    """Base class for JavaScript package managers."""

    init_args: ClassVar["list[str] | None"] = None
    add_command: ClassVar[str] = "add"
    save_flag: ClassVar["str | None"] = None
    save_dev_flag: ClassVar[str] = "--dev"

    def init(self, cwd: Path) -> None:
        """Create a default package.json.

        Package managers whose own ``init`` also writes tsconfig.json, .gitignore
        or other project files get a minimal manifest written directly instead.
        """
        if self.init_args is not None:
            self.execute(list(self.init_args), cwd)
            return
        package_json = cwd / "package.json"
        logger.debug("Writing minimal manifest %s", package_json)
        payload = {"name": cwd.name or "app", "version": "1.0.0"}
        package_json.write_text(json.dumps(payload, indent=2) + "\n", encoding="utf-8")

    def add(self, packages: list[str], cwd: Path, dev: bool = False) -> None:
        """Add packages to package.json and install them."""
        if not packages:
            return
        flag = self.save_dev_flag if dev else self.save_flag
        args = [self.add_command, *packages]
        if flag:
            args.append(flag)
        self.execute(args, cwd)

    @property
    def start_command(self) -> list[str]:
        """Get the command to start the dev server (e.g., npm run start)."""
        return [self.bin_name, "run", "start"]

    @property
    def build_command(self) -> list[str]:
        """Get the command to build for production (e.g., npm run build)."""
        return [self.bin_name, "run", "build"]


class NodeExecutor(JSExecutor):
    """Node.js executor."""

    bin_name = "npm"
    init_args = ["init", "-y"]
    add_command = "install"
    save_flag = "--save"
    save_dev_flag = "--save-dev"


class YarnExecutor(JSExecutor):
    """Yarn executor."""

    bin_name = "yarn"


class PnpmExecutor(JSExecutor):
    """PNPM executor."""

    bin_name = "pnpm"
    init_args = ["init"]
    save_dev_flag = "--save-dev"


class BunExecutor(JSExecutor):
    """Bun executor."""

    bin_name = "bun"


class GitExecutor(CommandExecutor):
    """Git executor."""

    bin_name = "git"

    def init_repository(self, cwd: Path) -> None:
        """Initialize a git repository in ``cwd``."""
        self.execute(["init"], cwd)
