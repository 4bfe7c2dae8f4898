from collections.abc import Generator
from pathlib import Path

import pytest

from apprun_cli.config import ScaffoldConfig
from apprun_cli.exceptions import CommandExecutionError
from apprun_cli.executor import GitExecutor, JSExecutor

# Environment variables that may affect test behavior - clear before each test
_APPRUN_ENV_VARS = [
    "APPRUN_EXECUTOR",
    "APPRUN_NO_INSTALL",
]


@pytest.fixture(autouse=True)
def clean_apprun_env(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Clear apprun-related environment variables before each test for isolation."""
    for var in _APPRUN_ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    yield


class FakeJSExecutor(JSExecutor):
    """Records calls instead of running a package manager."""

    bin_name = "npm"

    def __init__(self, fail_add: bool = False) -> None:
        super().__init__()
        self.fail_add = fail_add
        self.inits: list[Path] = []
        self.adds: list[tuple[list[str], Path, bool]] = []

    def init(self, cwd: Path) -> None:
        self.inits.append(cwd)
        (cwd / "package.json").write_text('{\n  "name": "demo",\n  "version": "1.0.0"\n}\n', encoding="utf-8")

    def add(self, packages: list[str], cwd: Path, dev: bool = False) -> None:
        if self.fail_add:
            raise CommandExecutionError(["npm", "install", *packages], 1, "boom")
        self.adds.append((list(packages), cwd, dev))


class FakeGitExecutor(GitExecutor):
    def __init__(self) -> None:
        super().__init__()
        self.initialized: list[Path] = []

    def init_repository(self, cwd: Path) -> None:
        self.initialized.append(cwd)


@pytest.fixture
def fake_js_executor() -> FakeJSExecutor:
    return FakeJSExecutor()


@pytest.fixture
def fake_git_executor() -> FakeGitExecutor:
    return FakeGitExecutor()


@pytest.fixture
def scaffold_config(fake_js_executor: FakeJSExecutor, fake_git_executor: FakeGitExecutor) -> ScaffoldConfig:
    """A config whose executors never leave the process."""
    return ScaffoldConfig(_js_executor=fake_js_executor, _git_executor=fake_git_executor)


@pytest.fixture
def project_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """An empty directory that is also the working directory."""
    root = tmp_path / "project"
    root.mkdir()
    monkeypatch.chdir(root)
    return root
