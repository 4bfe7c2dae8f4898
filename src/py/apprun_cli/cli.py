from pathlib import Path
from typing import Optional

from click import Choice, Context, command, option, pass_context, version_option

from apprun_cli.__metadata__ import __version__
from apprun_cli.config import EXECUTOR_NAMES


@command(name="apprun", context_settings={"help_option_names": ["-h", "--help"]})
@version_option(__version__, "-V", "--version", prog_name="apprun")
@option("-i", "--init", "init", help="Initialize AppRun Project", default=False, is_flag=True)
@option("-c", "--component", "component", metavar="<file>", help="Generate AppRun component", default=None)
@option(
    "--executor",
    type=Choice(EXECUTOR_NAMES, case_sensitive=False),
    envvar="APPRUN_EXECUTOR",
    help="The JavaScript package manager used to install dependencies.",
    default="npm",
    show_default=True,
)
@option(
    "--no-install",
    envvar="APPRUN_NO_INSTALL",
    help="Do not execute the installation commands after generating templates.",
    type=bool,
    default=False,
    required=False,
    show_default=True,
    is_flag=True,
)
@option("--no-git", help="Do not initialize a git repository.", type=bool, default=False, is_flag=True)
@option("--verbose", type=bool, help="Enable verbose output.", default=False, is_flag=True)
@pass_context
def apprun_cli(
    ctx: "Context",
    init: "bool",
    component: "Optional[str]",
    executor: "str",
    no_install: "bool",
    no_git: "bool",
    verbose: "bool",
) -> None:
    """Scaffold AppRun projects and components."""
    from rich.markup import escape

    from apprun_cli._utils import configure_logging, console
    from apprun_cli.commands import create_component, init_project
    from apprun_cli.config import ScaffoldConfig
    from apprun_cli.exceptions import ApprunCliError

    configure_logging(verbose)

    if not init and not component:
        console.print(ctx.get_help(), markup=False)
        return

    root_path = Path.cwd()
    try:
        if init:
            config = ScaffoldConfig(executor=executor, install=not no_install, init_git=not no_git)  # type: ignore[arg-type]
            init_project(root_path, config)
            start = " ".join(config.js_executor.start_command)
            build = " ".join(config.js_executor.build_command)
            console.print(f"[bold green]Project initialized.[/] Run `{start}` to start, `{build}` to build.")
        if component:
            create_component(root_path, component)
    except ApprunCliError as e:
        console.print(f"[bold red]{escape(str(e))}[/]")
        ctx.exit(1)
