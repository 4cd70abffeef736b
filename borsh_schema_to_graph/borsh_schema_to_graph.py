import json
import logging

import click

from .cli_utils import reconstruct_command_line
from .pipeline import GraphConfig, GraphPipeline, OutputFormat, SchemaGraphError, TokenSource, TypeWalker, get_schema

logger = logging.getLogger(__name__)


def _load_json(path):
    with open(path) as f:
        try:
            return json.load(f)
        except json.JSONDecodeError as e:
            raise click.ClickException(f"Invalid JSON in {path}: {e}") from e


def _load_config(path):
    data = _load_json(path)
    if not isinstance(data, dict):
        raise click.ClickException(f"Config file {path} must hold a JSON object")
    try:
        return GraphConfig.from_dict(data)
    except ValueError as e:
        raise click.ClickException(f"Invalid config in {path}: {e}") from e


def _write(output, text):
    if output is None or output == "-":
        click.echo(text, nl=False)
        return
    with open(output, "w") as f:
        f.write(text)
    logger.info("Wrote %s", output)


def _describe(node):
    parts = [node.kind.value]
    if node.name is not None:
        parts.append(node.name)
    if node.term is not None:
        parts.append(f"<{node.term}>")
    return " ".join(parts)


@click.group()
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log traversal details")
def borsh_schema_to_graph(verbose):
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)


@borsh_schema_to_graph.command()
@click.argument("path", type=click.Path(exists=True, resolve_path=True))
@click.option("--output", "-o", default=None, type=click.Path(resolve_path=True))
def schema(path, output):
    """Normalize a schema container and print it as JSON."""
    try:
        type_schema = get_schema(_load_json(path))
    except SchemaGraphError as e:
        raise click.ClickException(str(e)) from e
    _write(output, type_schema.to_json() + "\n")


@borsh_schema_to_graph.command()
@click.argument("path", type=click.Path(exists=True, resolve_path=True))
@click.option("--no-expand", is_flag=True, default=False, help="Do not dereference shared types")
def walk(path, no_expand):
    """Print every node of the normalized schema, depth first."""
    try:
        type_schema = get_schema(_load_json(path))
    except SchemaGraphError as e:
        raise click.ClickException(str(e)) from e

    for parent, node in TypeWalker(type_schema, expand_terms=not no_expand):
        parent_text = _describe(parent) if parent is not None else "-"
        click.echo(f"{parent_text} -> {_describe(node)}")


@borsh_schema_to_graph.command()
@click.option("--config", "-c", default=None, type=click.Path(exists=True, resolve_path=True))
@click.option("--base-uri", "-b", default=None, type=str)
@click.option("--token-source", "-t", default=None, type=click.Choice([t.value for t in TokenSource]))
@click.option("--seed", "-s", default=None, type=str)
@click.option("--format", "-f", "output_format", default=None, type=click.Choice([f.value for f in OutputFormat]))
@click.argument("schema_path", type=click.Path(exists=True, resolve_path=True))
@click.argument("value_path", type=click.Path(exists=True, resolve_path=True))
@click.argument("output", default="-", type=click.Path(allow_dash=True, resolve_path=True))
def graph(config, base_uri, token_source, seed, output_format, schema_path, value_path, output):
    """Describe a JSON value of the schema's root type."""
    if config is not None:
        config = _load_config(config)
    else:
        config = GraphConfig()

    # CLI flags override the config file
    if base_uri is not None:
        config.base_uri = base_uri
    if token_source is not None:
        config.token_source = TokenSource(token_source)
    if seed is not None:
        config.seed = seed
    if output_format is not None:
        config.output_format = OutputFormat(output_format)

    comment = f"Generated by {reconstruct_command_line(graph)}"
    try:
        pipeline = GraphPipeline(_load_json(schema_path), config)
        out = pipeline.generate(_load_json(value_path), comment=comment)
    except SchemaGraphError as e:
        raise click.ClickException(str(e)) from e
    _write(output, out)
