"""Markup validator: runs all validation rules and reports diagnostics."""

from __future__ import annotations

from typing import Callable

from trellis.config import TrellisConfig
from trellis.model.diagnostic import Diagnostic
from trellis.model.template import ComponentTemplate
from trellis.stylesheet.model import Stylesheet
from trellis.validation.rules import ALL_RULES


class ValidationError(Exception):
    """Raised when validation produces ERROR-severity diagnostics."""

    def __init__(self, diagnostics: list[Diagnostic]) -> None:
        self.diagnostics = diagnostics
        messages = [str(d) for d in diagnostics if d.is_error]
        super().__init__(
            f"Validation failed with {len(messages)} error(s): " + "; ".join(messages)
        )


RuleFunc = Callable[[ComponentTemplate, Stylesheet, TrellisConfig], list[Diagnostic]]


def validate(
    template: ComponentTemplate,
    stylesheet: Stylesheet | None = None,
    config: TrellisConfig | None = None,
    extra_rules: list[RuleFunc] | None = None,
) -> list[Diagnostic]:
    """Run all validation rules against *template* and *stylesheet*.

    Returns the full list of diagnostics (errors, warnings, info).
    """
    stylesheet = stylesheet if stylesheet is not None else Stylesheet()
    config = config if config is not None else TrellisConfig()
    rules: list[RuleFunc] = list(ALL_RULES)
    if extra_rules:
        rules.extend(extra_rules)
    diagnostics: list[Diagnostic] = []
    for rule in rules:
        diagnostics.extend(rule(template, stylesheet, config))
    return diagnostics


def validate_or_raise(
    template: ComponentTemplate,
    stylesheet: Stylesheet | None = None,
    config: TrellisConfig | None = None,
    extra_rules: list[RuleFunc] | None = None,
) -> list[Diagnostic]:
    """Run validation; raises :class:`ValidationError` if any ERROR diagnostics exist.

    Returns the non-error diagnostics (warnings/info) when no errors are found.
    The built-in rules never emit ERROR, so only *extra_rules* can make
    this raise.
    """
    diagnostics = validate(template, stylesheet, config, extra_rules=extra_rules)
    errors = [d for d in diagnostics if d.is_error]
    if errors:
        raise ValidationError(errors)
    return diagnostics
