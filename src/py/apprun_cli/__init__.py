"""apprun-cli: scaffolding for AppRun projects.

Initialize a project in the current directory::

    apprun --init

Generate a component::

    apprun --component Todo

The same operations are available from Python:
    from pathlib import Path
    from apprun_cli import ScaffoldConfig, create_component, init_project

    init_project(Path.cwd(), ScaffoldConfig(executor="pnpm"))
    create_component(Path.cwd(), "Todo")
"""

from apprun_cli.__metadata__ import __version__
from apprun_cli.commands import create_component, init_project
from apprun_cli.config import ScaffoldConfig

__all__ = (
    "ScaffoldConfig",
    "__version__",
    "create_component",
    "init_project",
)
