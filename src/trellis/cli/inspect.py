"""CLI command: trellis inspect -- display a template's component tree."""

from __future__ import annotations

import sys

import click

from trellis.model.template import ComponentTemplate
from trellis.parser import ParseError, parse_template_file


def _format_attribute_list(node: ComponentTemplate) -> str:
    parts = []
    for attribute in node.attributes:
        key = attribute.key
        if attribute.conditional is not None:
            key += f"?{{ {attribute.conditional} }}"
        parts.append(f"{key}: {attribute.value}")
    return "{ " + ", ".join(parts) + " }" if parts else ""


def _echo_tree(node: ComponentTemplate, depth: int = 0) -> None:
    attributes = _format_attribute_list(node)
    line = f"{'    ' * depth}{node.component_class}"
    if attributes:
        line += f" {attributes}"
    click.echo(f"{line}  (line {node.line})")
    for child in node.children:
        _echo_tree(child, depth + 1)


@click.command()
@click.argument("template", type=click.Path(exists=True, dir_okay=False))
@click.option("--encoding", default="utf-8", envvar="TRELLIS_ENCODING", help="Source encoding")
def inspect(template: str, encoding: str) -> None:
    """Parse a template file and display its component tree."""
    try:
        root = parse_template_file(template, encoding=encoding)
    except ParseError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)

    nodes = list(root.walk())
    click.echo(f"Root:       {root.component_class}")
    click.echo(f"Components: {len(nodes)}")
    click.echo(f"Depth:      {root.depth}")
    click.echo()
    _echo_tree(root)
