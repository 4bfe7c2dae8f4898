"""Template definitions for scaffolding.

This module defines the fixed catalog of templates used to bootstrap an
AppRun project and its components.
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType

from apprun_cli.exceptions import UnknownTemplateError

PLACEHOLDER = "#name"
"""Token replaced by the substitution value when a template is rendered."""


class TemplateType(str, Enum):
    """Registered template identifiers."""

    WEBPACK_CONFIG = "webpack-config"
    TSCONFIG = "tsconfig"
    GITIGNORE = "gitignore"
    INDEX_HTML = "index-html"
    MAIN = "main"
    COMPONENT = "component"


@dataclass(frozen=True)
class ScaffoldTemplate:
    """An immutable text blueprint.

    Attributes:
        name: Display name for the template
        type: Template identifier
        body: Template text, may contain ``#name`` placeholders
        target: File name written relative to the project root. The component
            template uses ``#name.tsx`` and is rendered like the body.
        label: Text printed in front of the path when the file is created
    """

    name: str
    type: TemplateType
    body: str
    target: str
    label: str = "Creating"


# webpack 2.x
WEBPACK_CONFIG = """const path = require('path');
module.exports = {
  entry: {
    'app': './main.tsx',
  },
  output: {
    filename: '[name].js'
  },
  resolve: {
    extensions: ['.webpack.js', '.web.js', '.ts', '.tsx', '.js']
  },
  module: {
    rules: [
      { test: /\\.tsx?$/, loader: 'ts-loader' }
    ]
  },
  devServer: {
  }
}"""

TSCONFIG = """{
  "compilerOptions": {
    "target": "es5",
    "jsx": "react",
    "reactNamespace": "app",
    "lib": ["dom", "es2015", "es5"]
  }
}"""

GITIGNORE = """.DS_Store
node_modules
*.log
"""

INDEX_HTML = """<!doctype html>
<html>
<head>
  <meta charset="utf-8">
  <title>apprun</title>
</head>
<body>
  <div id="my-app"></div>
  <script src="app.js"></script>
</body>
</html>"""

MAIN_TSX = """import app from './node_modules/apprun/index';
const model = 'Hello world - AppRun';
const view = (state) => <h1>{state}</h1>;
const update = {
}
const element = document.getElementById('my-app');
app.start(element, model, view, update);
"""

COMPONENT_TSX = """import app, {Component} from './node_modules/apprun/index';

export default class #nameComponent extends Component {
  state = '#name';

  view = (state) => {
    return <div>
      <h1>{state}</h1>
    </div>
  }

  update = {
    '##name': state => state,
  }
}


// to use this component in main.tsx
// import #name from './#name';
// const element = document.getElementById('my-app');
// new #name().mount(element);
"""


SCAFFOLD_TEMPLATES: "MappingProxyType[TemplateType, ScaffoldTemplate]" = MappingProxyType(
    {
        TemplateType.WEBPACK_CONFIG: ScaffoldTemplate(
            name="Webpack config",
            type=TemplateType.WEBPACK_CONFIG,
            body=WEBPACK_CONFIG,
            target="webpack.config.js",
        ),
        TemplateType.TSCONFIG: ScaffoldTemplate(
            name="TypeScript config",
            type=TemplateType.TSCONFIG,
            body=TSCONFIG,
            target="tsconfig.json",
        ),
        TemplateType.GITIGNORE: ScaffoldTemplate(
            name="Git ignore list",
            type=TemplateType.GITIGNORE,
            body=GITIGNORE,
            target=".gitignore",
        ),
        TemplateType.INDEX_HTML: ScaffoldTemplate(
            name="HTML entry point",
            type=TemplateType.INDEX_HTML,
            body=INDEX_HTML,
            target="index.html",
        ),
        TemplateType.MAIN: ScaffoldTemplate(
            name="Application entry",
            type=TemplateType.MAIN,
            body=MAIN_TSX,
            target="main.tsx",
        ),
        TemplateType.COMPONENT: ScaffoldTemplate(
            name="Component",
            type=TemplateType.COMPONENT,
            body=COMPONENT_TSX,
            target=f"{PLACEHOLDER}.tsx",
            label=f"Creating component {PLACEHOLDER}",
        ),
    }
)

PROJECT_TEMPLATES: tuple[TemplateType, ...] = (
    TemplateType.WEBPACK_CONFIG,
    TemplateType.TSCONFIG,
    TemplateType.INDEX_HTML,
    TemplateType.MAIN,
    TemplateType.GITIGNORE,
)
"""Templates written by project initialization, in write order."""


def get_available_templates() -> list[ScaffoldTemplate]:
    """Get all registered templates.

    Returns:
        List of available ScaffoldTemplate instances.
    """
    return list(SCAFFOLD_TEMPLATES.values())


def get_template(template_id: "TemplateType | str") -> ScaffoldTemplate:
    """Get a specific template.

    Args:
        template_id: The template identifier (enum or string).

    Raises:
        UnknownTemplateError: If the identifier is not registered.

    Returns:
        The matching ScaffoldTemplate.
    """
    if isinstance(template_id, TemplateType):
        return SCAFFOLD_TEMPLATES[template_id]
    try:
        return SCAFFOLD_TEMPLATES[TemplateType(template_id)]
    except ValueError:
        raise UnknownTemplateError(str(template_id)) from None
