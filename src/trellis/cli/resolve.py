"""CLI command: trellis resolve -- print each component's resolved attributes."""

from __future__ import annotations

import sys

import click

from trellis.cascade import CascadeContext, ResolvedComponent, resolve_tree
from trellis.errors import ConditionError
from trellis.model.state import RuntimeState
from trellis.parser import ParseError, parse_template_file
from trellis.stylesheet import Stylesheet, parse_stylesheet_file


def _parse_state(pairs: tuple[str, ...]) -> RuntimeState:
    updates: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key.strip():
            raise click.BadParameter(f"expected key=value, got {pair!r}", param_hint="--state")
        updates[key.strip()] = value.strip()
    state = RuntimeState()
    state.apply_updates(updates)
    return state


def _echo_resolved(node: ResolvedComponent, depth: int = 0) -> None:
    attributes = node.attributes
    indent = "    " * depth
    click.echo(f"{indent}{attributes.component_class}  (line {attributes.component_line})")
    for key, value in attributes.values.items():
        origin = attributes.origins.get(key)
        suffix = f"  <- {origin}" if origin is not None else ""
        click.echo(f"{indent}  {key} = {value}{suffix}")
    for child in node.children:
        _echo_resolved(child, depth + 1)


@click.command()
@click.argument("template", type=click.Path(exists=True, dir_okay=False))
@click.option("--style", type=click.Path(exists=True, dir_okay=False), default=None, help="Stylesheet file")
@click.option("--state", "state_pairs", multiple=True, help="Runtime state entry as key=value (repeatable)")
@click.option("--encoding", default="utf-8", envvar="TRELLIS_ENCODING", help="Source encoding")
def resolve(template: str, style: str | None, state_pairs: tuple[str, ...], encoding: str) -> None:
    """Resolve every component of a template against a stylesheet and runtime state."""
    state = _parse_state(state_pairs)

    try:
        root = parse_template_file(template, encoding=encoding)
        stylesheet = parse_stylesheet_file(style, encoding=encoding) if style else Stylesheet()
    except ParseError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)

    try:
        resolved = resolve_tree(root, CascadeContext(stylesheet=stylesheet, state=state))
    except ConditionError as exc:
        click.echo(f"Condition error: {exc}", err=True)
        sys.exit(1)

    _echo_resolved(resolved)
