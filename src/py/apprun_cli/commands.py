"""Project commands.

This module sequences the scaffolding core with the package manager and git
to initialize a project, and generates components.
"""

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from apprun_cli._utils import LOGGER_NAME, console
from apprun_cli.exceptions import PackageManifestError

if TYPE_CHECKING:
    from apprun_cli.config import ScaffoldConfig
    from apprun_cli.scaffolding import MaterializeResult

logger = logging.getLogger(LOGGER_NAME)

PACKAGE_JSON = "package.json"


def add_npm_scripts(package_json: Path, scripts: "dict[str, str]") -> list[str]:
    """Add npm scripts to ``package.json`` without replacing existing ones.

    Args:
        package_json: Path to the manifest.
        scripts: Script names mapped to their commands.

    Raises:
        PackageManifestError: If the manifest is missing or not a JSON object.

    Returns:
        Names of the scripts that were added.
    """
    try:
        payload: Any = json.loads(package_json.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise PackageManifestError(str(package_json), "file not found") from exc
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise PackageManifestError(str(package_json), str(exc)) from exc

    if not isinstance(payload, dict):
        raise PackageManifestError(str(package_json), "expected a JSON object")

    existing = payload.get("scripts")
    if existing is None:
        existing = {}
    elif not isinstance(existing, dict):
        raise PackageManifestError(str(package_json), "'scripts' must be an object")

    added = [name for name in scripts if not existing.get(name)]
    if not added:
        return []

    for name in added:
        existing[name] = scripts[name]
    payload["scripts"] = existing
    package_json.write_text(json.dumps(payload, indent=2) + "\n", encoding="utf-8")
    logger.debug("Added npm scripts %s to %s", added, package_json)
    return added


def init_project(root_path: Path, config: "ScaffoldConfig") -> "list[MaterializeResult]":
    """Initialize an AppRun project in ``root_path``.

    Creates package.json if needed, installs dependencies, writes the project
    templates, adds the start/build scripts and initializes git. The first
    failure aborts the remaining steps; files already written are kept.

    Args:
        root_path: Project root directory.
        config: Scaffolding settings.

    Returns:
        The materialize results for the project templates.
    """
    from apprun_cli.scaffolding import generate_project

    executor = config.js_executor
    package_json = root_path / PACKAGE_JSON

    if not package_json.exists():
        console.print("Initializing package.json")
        executor.init(root_path)

    if config.install:
        console.print("Installing packages. This might take a couple minutes.")
        executor.add(config.dev_dependencies, root_path, dev=True)
        executor.add(config.dependencies, root_path)

    results = generate_project(root_path)

    console.print("Adding npm scripts")
    add_npm_scripts(package_json, config.scripts)

    if config.init_git:
        console.print("Initializing git")
        config.git_executor.init_repository(root_path)

    return results


def create_component(root_path: Path, name: str) -> "MaterializeResult":
    """Generate the ``<name>.tsx`` component skeleton in ``root_path``.

    Returns:
        The materialize result.
    """
    from apprun_cli.scaffolding import generate_component

    return generate_component(root_path, name)
