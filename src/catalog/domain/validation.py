"""Ordered, fail-fast input validation.

A validation is a list of ``Rule`` objects evaluated in order. The first
rule whose check fails produces a ``Violation``; later rules are never
evaluated, so a rule may safely assume every earlier rule passed (for
example, reading ``view.category.id`` after checking ``view.category``).
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Callable, Iterable

from catalog.domain.exceptions import ValidationError


@dataclass(frozen=True)
class Violation:
    field: str
    message: str


@dataclass(frozen=True)
class Rule:
    """``check`` returns True when the input satisfies the rule."""

    field: str
    message: str
    check: Callable[[], bool]


def first_violation(rules: Iterable[Rule]) -> Violation | None:
    for rule in rules:
        if not rule.check():
            return Violation(field=rule.field, message=rule.message)
    return None


def ensure_valid(rules: Iterable[Rule]) -> None:
    """Raise ValidationError for the first failing rule, if any."""
    violation = first_violation(rules)
    if violation is not None:
        raise ValidationError(violation.message)


# --- Common checks ------------------------------------------------------------


def is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def is_non_negative(value) -> bool:
    return value is not None and value >= 0


def is_finite(value: Decimal) -> bool:
    return value.is_finite()
