import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from apprun_cli.__metadata__ import __version__
from apprun_cli.cli import apprun_cli
from apprun_cli.config import ScaffoldConfig
from apprun_cli.executor import JSExecutor
from tests.conftest import FakeGitExecutor, FakeJSExecutor


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def patched_executors(
    monkeypatch: pytest.MonkeyPatch, fake_js_executor: FakeJSExecutor, fake_git_executor: FakeGitExecutor
) -> tuple[FakeJSExecutor, FakeGitExecutor]:
    """Route every executor the CLI builds to in-process fakes."""

    def _create(self: ScaffoldConfig) -> JSExecutor:
        fake_js_executor.bin_name = self.executor
        return fake_js_executor

    monkeypatch.setattr(ScaffoldConfig, "_create_js_executor", _create)
    monkeypatch.setattr(ScaffoldConfig, "git_executor", property(lambda self: fake_git_executor))
    return fake_js_executor, fake_git_executor


def test_no_flags_prints_help(runner: CliRunner, project_dir: Path) -> None:
    """Test that invoking without flags prints usage and writes nothing."""
    result = runner.invoke(apprun_cli, [])

    assert result.exit_code == 0
    assert "Usage: apprun" in result.output
    assert "--init" in result.output
    assert "--component" in result.output
    assert list(project_dir.iterdir()) == []


def test_version(runner: CliRunner) -> None:
    """Test that --version reports the package version."""
    result = runner.invoke(apprun_cli, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.output


def test_component_flag(runner: CliRunner, project_dir: Path) -> None:
    """Test that -c creates the component file and reports it."""
    result = runner.invoke(apprun_cli, ["-c", "Todo"])

    assert result.exit_code == 0, result.output
    target = project_dir / "Todo.tsx"
    assert f"Creating component Todo: {target} ... Done" in result.output
    assert "export default class TodoComponent extends Component" in target.read_text(encoding="utf-8")


def test_component_flag_existing_file(runner: CliRunner, project_dir: Path) -> None:
    """Test that an existing component file is left untouched."""
    (project_dir / "Todo.tsx").write_text("mine", encoding="utf-8")

    result = runner.invoke(apprun_cli, ["--component", "Todo"])

    assert result.exit_code == 0
    assert f"No change made. File exists: {project_dir / 'Todo.tsx'}" in result.output
    assert (project_dir / "Todo.tsx").read_text(encoding="utf-8") == "mine"


def test_init_flag(
    runner: CliRunner, project_dir: Path, patched_executors: tuple[FakeJSExecutor, FakeGitExecutor]
) -> None:
    """Test that -i runs the full initialization sequence."""
    js_executor, git_executor = patched_executors

    result = runner.invoke(apprun_cli, ["-i"])

    assert result.exit_code == 0, result.output
    assert js_executor.inits == [project_dir]
    assert git_executor.initialized == [project_dir]
    for name in ("webpack.config.js", "tsconfig.json", "index.html", "main.tsx", ".gitignore"):
        assert f"Creating: {project_dir / name} ... Done" in result.output
    assert "Run `npm run start` to start, `npm run build` to build." in result.output


def test_init_flag_options(
    runner: CliRunner, project_dir: Path, patched_executors: tuple[FakeJSExecutor, FakeGitExecutor]
) -> None:
    """Test that --executor, --no-install and --no-git are honored."""
    js_executor, git_executor = patched_executors

    result = runner.invoke(apprun_cli, ["--init", "--executor", "yarn", "--no-install", "--no-git"])

    assert result.exit_code == 0, result.output
    assert js_executor.adds == []
    assert git_executor.initialized == []
    assert "Run `yarn run start` to start," in result.output


def test_init_flag_executor_from_env(
    runner: CliRunner, project_dir: Path, patched_executors: tuple[FakeJSExecutor, FakeGitExecutor]
) -> None:
    """Test that APPRUN_EXECUTOR selects the package manager."""
    result = runner.invoke(apprun_cli, ["--init", "--no-git"], env={"APPRUN_EXECUTOR": "bun"})

    assert result.exit_code == 0, result.output
    assert "Run `bun run start` to start," in result.output


def test_init_and_component_run_in_order(
    runner: CliRunner, project_dir: Path, patched_executors: tuple[FakeJSExecutor, FakeGitExecutor]
) -> None:
    """Test that init runs before component generation regardless of flag order."""
    result = runner.invoke(apprun_cli, ["--component", "Todo", "--init"])

    assert result.exit_code == 0, result.output
    assert result.output.index("main.tsx ... Done") < result.output.index("Creating component Todo")
    assert (project_dir / "Todo.tsx").exists()
    scripts = json.loads((project_dir / "package.json").read_text(encoding="utf-8"))["scripts"]
    assert scripts["start"] == "webpack-dev-server"


def test_init_failure_exits_non_zero(
    runner: CliRunner, project_dir: Path, patched_executors: tuple[FakeJSExecutor, FakeGitExecutor]
) -> None:
    """Test that an install failure aborts the run with exit code 1."""
    js_executor, _ = patched_executors
    js_executor.fail_add = True

    result = runner.invoke(apprun_cli, ["--init", "-c", "Todo"])

    assert result.exit_code == 1
    assert "failed with return code 1" in result.output
    assert not (project_dir / "Todo.tsx").exists()


def test_component_write_failure_exits_non_zero(runner: CliRunner, project_dir: Path) -> None:
    """Test that a failed component write exits with code 1."""
    result = runner.invoke(apprun_cli, ["-c", "missing/Todo"])

    assert result.exit_code == 1
    assert "Could not write" in result.output


def test_empty_component_name_prints_help(runner: CliRunner, project_dir: Path) -> None:
    """Test that an empty component name counts as not supplied."""
    result = runner.invoke(apprun_cli, ["-c", ""])

    assert result.exit_code == 0
    assert "Usage: apprun" in result.output
    assert "Creating component" not in result.output
    assert list(project_dir.iterdir()) == []


def test_empty_component_name_with_init_skips_component(
    runner: CliRunner, project_dir: Path, patched_executors: tuple[FakeJSExecutor, FakeGitExecutor]
) -> None:
    """Test that an empty component name alongside --init writes no component."""
    result = runner.invoke(apprun_cli, ["--init", "--component", ""])

    assert result.exit_code == 0, result.output
    assert not (project_dir / ".tsx").exists()
    assert "Creating component" not in result.output
