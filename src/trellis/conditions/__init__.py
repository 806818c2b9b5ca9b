"""Condition expression evaluator for conditional attributes.

The cascade treats conditionals as opaque strings and hands them to any
callable ``(expression, state) -> bool``.  This module is the bundled
implementation of that contract.

Grammar:
    ConditionExpr = Clause ( '&&' Clause )*
    Clause        = Key | '!' Key | Key Operator Literal
    Operator      = '=' | '!='
"""

from __future__ import annotations

import re
from typing import Any, Protocol

from trellis.errors import ConditionError

__all__ = ["ConditionEvaluator", "evaluate_condition", "resolve_key", "is_truthy"]

_KEY_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_.-]*$")
_FALSY = frozenset({"", "0", "false", "no", "off"})


class ConditionEvaluator(Protocol):
    """Decides whether a conditional expression holds for a runtime state."""

    def __call__(self, expression: str, state: Any) -> bool: ...


def resolve_key(key: str, state: Any) -> Any:
    """Look *key* up in *state* (a RuntimeState, a mapping or None)."""
    if state is None:
        return None
    return state.get(key)


def is_truthy(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() not in _FALSY


def _check_key(key: str, clause: str) -> str:
    if not _KEY_RE.match(key):
        raise ConditionError(f"Invalid key {key!r} in clause {clause!r}")
    return key


def _parse_clause(clause: str) -> tuple[str, str, str]:
    """Parse a single clause like 'hovering', '!disabled' or 'tab=settings'.

    Returns (key, operator, literal); bare keys use operator 'truthy' and
    negated keys 'falsy'.
    """
    clause = clause.strip()

    # Try '!=' first (longer operator) to avoid partial match on '='
    if "!=" in clause:
        idx = clause.index("!=")
        key = _check_key(clause[:idx].strip(), clause)
        return key, "!=", clause[idx + 2:].strip()

    if "=" in clause:
        idx = clause.index("=")
        key = _check_key(clause[:idx].strip(), clause)
        return key, "=", clause[idx + 1:].strip()

    if clause.startswith("!"):
        return _check_key(clause[1:].strip(), clause), "falsy", ""

    return _check_key(clause, clause), "truthy", ""


def evaluate_condition(expression: str, state: Any) -> bool:
    """Evaluate a conditional expression against the runtime state.

    Empty/whitespace-only expressions return True.  Clauses joined by
    '&&' are AND-combined.  Missing keys compare as the empty string.
    Every clause is parsed before any is evaluated, so a malformed clause
    raises :class:`ConditionError` regardless of state.
    """
    if not expression or not expression.strip():
        return True

    clauses = [_parse_clause(clause_str) for clause_str in expression.split("&&")]

    for key, operator, literal in clauses:
        value = resolve_key(key, state)

        if operator == "truthy":
            if not is_truthy(value):
                return False
        elif operator == "falsy":
            if is_truthy(value):
                return False
        else:
            resolved = "" if value is None else str(value)
            if isinstance(value, bool):
                resolved = str(value).lower()
            if operator == "=" and resolved != literal:
                return False
            if operator == "!=" and resolved == literal:
                return False

    return True
