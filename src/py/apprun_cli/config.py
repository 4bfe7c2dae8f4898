"""Scaffolding configuration."""

import os
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from apprun_cli.executor import GitExecutor, JSExecutor

__all__ = (
    "DEFAULT_DEPENDENCIES",
    "DEFAULT_DEV_DEPENDENCIES",
    "DEFAULT_SCRIPTS",
    "EXECUTOR_NAMES",
    "TRUE_VALUES",
    "ScaffoldConfig",
)

TRUE_VALUES = {"True", "true", "1", "yes", "Y", "T"}

ExecutorName = Literal["npm", "yarn", "pnpm", "bun"]
EXECUTOR_NAMES: tuple[str, ...] = ("npm", "yarn", "pnpm", "bun")

DEFAULT_DEPENDENCIES: tuple[str, ...] = ("apprun",)
DEFAULT_DEV_DEPENDENCIES: tuple[str, ...] = ("webpack", "webpack-dev-server", "ts-loader", "typescript")
DEFAULT_SCRIPTS: dict[str, str] = {"start": "webpack-dev-server", "build": "webpack -p"}


def _dependencies_factory() -> list[str]:
    return list(DEFAULT_DEPENDENCIES)


def _dev_dependencies_factory() -> list[str]:
    return list(DEFAULT_DEV_DEPENDENCIES)


def _scripts_factory() -> dict[str, str]:
    return dict(DEFAULT_SCRIPTS)


@dataclass
class ScaffoldConfig:
    """Settings for project initialization.

    Attributes:
        executor: JavaScript package manager (npm, yarn, pnpm, bun).
        executable_path: Explicit path to the package manager binary.
        install: Install dependencies after creating package.json.
        init_git: Initialize a git repository.
        dependencies: Runtime packages to install.
        dev_dependencies: Development packages to install.
        scripts: npm scripts added to package.json when missing.
    """

    executor: "ExecutorName" = field(default_factory=lambda: os.getenv("APPRUN_EXECUTOR", "npm"))  # type: ignore[assignment]
    executable_path: "str | None" = None
    install: bool = field(default_factory=lambda: os.getenv("APPRUN_NO_INSTALL", "False") not in TRUE_VALUES)
    init_git: bool = True
    dependencies: list[str] = field(default_factory=_dependencies_factory)
    dev_dependencies: list[str] = field(default_factory=_dev_dependencies_factory)
    scripts: dict[str, str] = field(default_factory=_scripts_factory)
    _js_executor: "JSExecutor | None" = field(default=None, repr=False)
    _git_executor: "GitExecutor | None" = field(default=None, repr=False)

    def __post_init__(self) -> None:
        """Normalize and validate settings.

        Raises:
            ValueError: If the executor name is not supported.
        """
        self.executor = self.executor.strip().lower()  # type: ignore[assignment]
        if self.executor not in EXECUTOR_NAMES:
            msg = f"Invalid executor: {self.executor!r}. Expected one of: {', '.join(EXECUTOR_NAMES)}"
            raise ValueError(msg)

    @property
    def js_executor(self) -> "JSExecutor":
        """Get the package manager executor instance.

        Returns:
            The configured JavaScript executor.
        """
        if self._js_executor is None:
            self._js_executor = self._create_js_executor()
        return self._js_executor

    @property
    def git_executor(self) -> "GitExecutor":
        """Get the git executor instance."""
        if self._git_executor is None:
            from apprun_cli.executor import GitExecutor

            self._git_executor = GitExecutor()
        return self._git_executor

    def _create_js_executor(self) -> "JSExecutor":
        from apprun_cli.executor import BunExecutor, NodeExecutor, PnpmExecutor, YarnExecutor

        if self.executor == "bun":
            return BunExecutor(self.executable_path)
        if self.executor == "yarn":
            return YarnExecutor(self.executable_path)
        if self.executor == "pnpm":
            return PnpmExecutor(self.executable_path)
        return NodeExecutor(self.executable_path)
