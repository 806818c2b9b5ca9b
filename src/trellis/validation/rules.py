"""Validation rules for templates and stylesheets.

Each rule is a function taking a template, a stylesheet and the config and
returning a list of Diagnostic objects describing any issues found.  None
of these problems stop parsing; they flag markup that is probably wrong.
"""

from __future__ import annotations

import re
from typing import Iterator

from trellis.config import TrellisConfig
from trellis.model.diagnostic import Diagnostic, Severity
from trellis.model.template import Attribute, ComponentTemplate
from trellis.model.value import Value, ValueKind
from trellis.stylesheet.model import Stylesheet

# Clause pattern understood by the bundled evaluator: [!]key or key (=|!=) value
_CLAUSE_RE = re.compile(
    r"^\s*(!\s*)?[A-Za-z_][A-Za-z0-9_.-]*\s*((!?=)\s*[^=!&]*)?\s*$"
)


def _declarations(
    template: ComponentTemplate, stylesheet: Stylesheet
) -> Iterator[tuple[Attribute, str, int]]:
    """Yield every attribute with its source name and line."""
    for rule in stylesheet.rules:
        for attribute in rule.attributes:
            yield attribute, stylesheet.name, attribute.line or rule.line
    for node in template.walk():
        for attribute in node.attributes:
            yield attribute, "template", attribute.line or node.line


def _percentages(value: Value) -> Iterator[int]:
    if value.kind is ValueKind.PERCENTAGE:
        yield value.data
    elif value.kind is ValueKind.TUPLE:
        for item in value.data:
            yield from _percentages(item)


# ---------------------------------------------------------------------------
# Class rules
# ---------------------------------------------------------------------------


def check_known_classes(
    template: ComponentTemplate, stylesheet: Stylesheet, config: TrellisConfig
) -> list[Diagnostic]:
    """Component classes should be registered (only when known_classes is set)."""
    if not config.known_classes:
        return []
    diagnostics: list[Diagnostic] = []
    for node in template.walk():
        if node.component_class not in config.known_classes:
            diagnostics.append(
                Diagnostic(
                    rule="check_known_classes",
                    severity=Severity.WARNING,
                    message=f"Unknown component class '{node.component_class}'.",
                    line=node.line,
                    fix=f"Use one of: {', '.join(sorted(config.known_classes))}.",
                )
            )
    return diagnostics


def check_unused_style_rules(
    template: ComponentTemplate, stylesheet: Stylesheet, config: TrellisConfig
) -> list[Diagnostic]:
    """Style rules that match no component in the template are reported."""
    used = {node.component_class for node in template.walk()}
    return [
        Diagnostic(
            rule="check_unused_style_rules",
            severity=Severity.INFO,
            message=f"Style rule for '{rule.class_matcher}' matches no component.",
            line=rule.line,
            source=stylesheet.name,
        )
        for rule in stylesheet.rules
        if rule.class_matcher not in used
    ]


# ---------------------------------------------------------------------------
# Value rules
# ---------------------------------------------------------------------------


def check_percentage_range(
    template: ComponentTemplate, stylesheet: Stylesheet, config: TrellisConfig
) -> list[Diagnostic]:
    """Percentage literals should fall inside the configured range."""
    low, high = config.percentage_range
    diagnostics: list[Diagnostic] = []
    for attribute, source, line in _declarations(template, stylesheet):
        for coefficient in _percentages(attribute.value):
            if not low <= coefficient <= high:
                diagnostics.append(
                    Diagnostic(
                        rule="check_percentage_range",
                        severity=Severity.WARNING,
                        message=(
                            f"Percentage {coefficient}% for '{attribute.key}' "
                            f"is outside {low}-{high}%."
                        ),
                        line=line,
                        source=source,
                    )
                )
    return diagnostics


def check_condition_syntax(
    template: ComponentTemplate, stylesheet: Stylesheet, config: TrellisConfig
) -> list[Diagnostic]:
    """Conditionals should be valid for the bundled evaluator.

    Valid syntax: ``key``, ``!key``, ``key=value``, ``key!=value``, joined by ``&&``.
    """
    diagnostics: list[Diagnostic] = []
    for attribute, source, line in _declarations(template, stylesheet):
        cond = (attribute.conditional or "").strip()
        if not cond:
            continue
        for clause in cond.split("&&"):
            if not _CLAUSE_RE.match(clause):
                diagnostics.append(
                    Diagnostic(
                        rule="check_condition_syntax",
                        severity=Severity.WARNING,
                        message=f"Invalid condition syntax: '{clause.strip()}' in '{cond}'.",
                        line=line,
                        source=source,
                        fix="Conditions use key, !key, key=value or key!=value separated by &&.",
                    )
                )
                break  # one diagnostic per attribute is sufficient
    return diagnostics


ALL_RULES = [
    check_known_classes,
    check_unused_style_rules,
    check_percentage_range,
    check_condition_syntax,
]
