import json
from pathlib import Path

import click

from .api import json_schema_to_typescript
from .pipeline import ConversionOptions, ParseError
from .pipeline.schema_ast import tree_to_dict
from .tool_types import ToolDefinition, generate_tool_types
from .utils import snake_to_pascal_case


@click.command()
@click.option("--name", "-n", default=None, type=str, help="Name of the exported type (defaults to the file name)")
@click.option("--config", "-c", default=None, type=click.Path(exists=True, resolve_path=True))
@click.option("--interface", is_flag=True, default=False, help="Declare objects with 'interface' instead of 'type'")
@click.option("--indent", default=None, type=int, help="Initial indentation level")
@click.option("--tree", is_flag=True, default=False, help="Print the parsed type tree as JSON instead of TypeScript")
@click.option("--tools", is_flag=True, default=False, help="Treat the input as a list of tool definitions")
@click.argument("path", default=None, type=click.Path(exists=True, resolve_path=True))
@click.argument("output", required=False, default=None, type=click.Path(resolve_path=True))
def json_schema_to_ts(name, config, interface, indent, tree, tools, path, output):
    with open(path) as f:
        schema = json.load(f)

    if config is not None:
        with open(config) as f:
            options = ConversionOptions.from_dict(json.load(f))
    else:
        options = ConversionOptions()

    # CLI flags override the config file
    if interface:
        options.use_type_alias = False
    if indent is not None:
        options.indent = indent
    if tree:
        options.return_tree = True

    if tools:
        if not isinstance(schema, list):
            raise click.ClickException("Tool definitions must be a JSON array")
        out = generate_tool_types([ToolDefinition.from_dict(t) for t in schema])
    else:
        if name is None and not options.type_name:
            name = snake_to_pascal_case(Path(path).stem)
        if name is not None:
            options.type_name = name

        try:
            result = json_schema_to_typescript(schema, options)
        except ParseError as e:
            raise click.ClickException(str(e)) from e

        if result.tree is not None:
            out = json.dumps(tree_to_dict(result.tree), indent=2)
        else:
            out = result.code

    if output is None:
        click.echo(out)
    else:
        with open(output, "w") as f:
            f.write(out + "\n")
