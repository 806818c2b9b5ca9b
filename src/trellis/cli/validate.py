"""CLI command: trellis validate -- parse and validate a template and stylesheet."""

from __future__ import annotations

import sys
from dataclasses import replace
from pathlib import Path

import click

from trellis.config import TrellisConfig
from trellis.model.diagnostic import Severity
from trellis.parser import ParseError, parse_template_file
from trellis.stylesheet import Stylesheet, parse_stylesheet_file
from trellis.validation import validate as run_validate


@click.command()
@click.argument("template", type=click.Path(exists=True, dir_okay=False))
@click.option("--style", type=click.Path(exists=True, dir_okay=False), default=None, help="Stylesheet file")
@click.option("--classes", default=None, envvar="TRELLIS_CLASSES", help="Comma-separated known component classes")
@click.option("--encoding", default="utf-8", envvar="TRELLIS_ENCODING", help="Source encoding")
def validate(template: str, style: str | None, classes: str | None, encoding: str) -> None:
    """Parse and validate a template (and optional stylesheet).

    Prints diagnostics (errors, warnings, info) and exits with code 0 if
    no errors are found, or code 1 if there are errors.
    """
    config = replace(TrellisConfig.from_env(), encoding=encoding)
    if classes is not None:
        known = frozenset(c.strip() for c in classes.split(",") if c.strip())
        config = replace(config, known_classes=known)

    try:
        root = parse_template_file(template, encoding=config.encoding)
        stylesheet = parse_stylesheet_file(style, encoding=config.encoding) if style else Stylesheet()
    except ParseError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)

    diagnostics = run_validate(root, stylesheet, config)

    if not diagnostics:
        click.echo(f"OK: {Path(template).name} is valid (0 diagnostics)")
        sys.exit(0)

    errors = [d for d in diagnostics if d.is_error]
    warnings = [d for d in diagnostics if d.is_warning]
    infos = [d for d in diagnostics if d.severity is Severity.INFO]

    for diag in diagnostics:
        click.echo(str(diag))

    click.echo()
    click.echo(
        f"Summary: {len(errors)} error(s), {len(warnings)} warning(s), {len(infos)} info"
    )

    if errors:
        sys.exit(1)
    sys.exit(0)
