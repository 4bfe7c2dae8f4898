"""Project scaffolding generator.

This module renders templates and writes them to disk. Existing files are
never overwritten.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from rich.markup import escape

from apprun_cli._utils import LOGGER_NAME, console
from apprun_cli.exceptions import TemplateWriteError
from apprun_cli.scaffolding.templates import PLACEHOLDER, PROJECT_TEMPLATES, TemplateType, get_template

logger = logging.getLogger(LOGGER_NAME)


class MaterializeOutcome(str, Enum):
    """Result of a single materialize call."""

    CREATED = "created"
    SKIPPED_EXISTS = "skipped-exists"


@dataclass(frozen=True)
class MaterializeResult:
    """Outcome of writing one file.

    Attributes:
        path: Absolute path of the target
        outcome: Whether the file was created or left alone
        label: Report label used for the file
    """

    path: Path
    outcome: MaterializeOutcome
    label: str

    @property
    def created(self) -> bool:
        return self.outcome is MaterializeOutcome.CREATED


def render_template(body: str, value: "str | None" = None) -> str:
    """Replace every ``#name`` token in ``body`` with ``value``.

    The replacement is a single left-to-right pass over ``body``. A run such as
    ``##name`` keeps its first hash and becomes ``#<value>``, and the value
    itself is never scanned again.

    Args:
        body: Template text.
        value: Substitution value. ``None`` leaves the body untouched.

    Returns:
        The rendered text.
    """
    if value is None:
        return body
    return body.replace(PLACEHOLDER, value)


def _entry_exists(path: Path) -> bool:
    # is_symlink catches dangling links that exists() reports as missing
    return path.exists() or path.is_symlink()


def materialize(path: "Path | str", text: str, label: str = "Creating") -> MaterializeResult:
    """Write ``text`` to ``path`` unless something already exists there.

    Args:
        path: Target file path. Relative paths resolve against the working directory.
        text: File content.
        label: Report label printed before the path.

    Raises:
        TemplateWriteError: If the filesystem refuses the write.

    Returns:
        The materialize result.
    """
    target = Path(path).absolute()

    if _entry_exists(target):
        logger.debug("Skipping %s, an entry already exists", target)
        console.print(escape(f"No change made. File exists: {target}"))
        return MaterializeResult(path=target, outcome=MaterializeOutcome.SKIPPED_EXISTS, label=label)

    console.print(escape(f"{label}: {target} ... "), end="")
    try:
        with target.open("x", encoding="utf-8", newline="") as handle:
            handle.write(text)
    except OSError as exc:
        console.print("Failed")
        raise TemplateWriteError(str(target), exc.strerror or str(exc)) from exc
    console.print("Done")
    logger.debug("Wrote %d characters to %s", len(text), target)
    return MaterializeResult(path=target, outcome=MaterializeOutcome.CREATED, label=label)


def generate_project(root_dir: "Path | str") -> list[MaterializeResult]:
    """Write the project-level templates into ``root_dir``.

    Args:
        root_dir: Project root directory.

    Returns:
        One result per project template, in write order.
    """
    root = Path(root_dir)
    results: list[MaterializeResult] = []
    for template_type in PROJECT_TEMPLATES:
        template = get_template(template_type)
        results.append(materialize(root / template.target, render_template(template.body), template.label))
    return results


def generate_component(root_dir: "Path | str", name: str) -> MaterializeResult:
    """Write a component skeleton named ``name`` into ``root_dir``.

    Args:
        root_dir: Directory the component file is written to.
        name: Component name, used verbatim as file name and class prefix.

    Returns:
        The materialize result for ``<name>.tsx``.
    """
    template = get_template(TemplateType.COMPONENT)
    return materialize(
        Path(root_dir) / render_template(template.target, name),
        render_template(template.body, name),
        render_template(template.label, name),
    )
