"""Project scaffolding module for apprun-cli.

This module provides the template catalog and the generator behind the
``apprun --init`` and ``apprun --component`` commands.
"""

from apprun_cli.scaffolding.generator import (
    MaterializeOutcome,
    MaterializeResult,
    generate_component,
    generate_project,
    materialize,
    render_template,
)
from apprun_cli.scaffolding.templates import ScaffoldTemplate, TemplateType, get_available_templates, get_template

__all__ = [
    "MaterializeOutcome",
    "MaterializeResult",
    "ScaffoldTemplate",
    "TemplateType",
    "generate_component",
    "generate_project",
    "get_available_templates",
    "get_template",
    "materialize",
    "render_template",
]
