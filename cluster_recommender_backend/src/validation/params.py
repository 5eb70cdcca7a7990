"""Path parameter validation.

ParamRules is a small rule engine keyed by tag. validate_path_param builds a
guard that checks one path parameter against one or more tags and stops the
request on the first failing rule.
"""
from __future__ import annotations

from typing import Callable, Dict, Iterable, Optional

from fastapi import Request

from src.core.errors import BadParamsError

# A rule returns None when the value passes, otherwise the failure cause.
Rule = Callable[[str], Optional[str]]


class ParamRules:
    """Read-only mapping of validation tags to rules."""

    def __init__(self, rules: Dict[str, Rule]):
        self._rules = dict(rules)

    @classmethod
    def for_providers(cls, providers: Iterable[str]) -> "ParamRules":
        known = frozenset(providers)

        def _provider(value: str) -> Optional[str]:
            if value not in known:
                return f"unsupported provider: {value}; supported providers: {', '.join(sorted(known))}"
            return None

        return cls({"required": _required, "provider": _provider})

    def check(self, value: str, *tags: str) -> Optional[str]:
        """Return the first failure cause for value, or None if all tags pass."""
        for tag in tags:
            try:
                rule = self._rules[tag]
            except KeyError:
                raise ValueError(f"unknown validation tag: {tag}") from None
            cause = rule(value)
            if cause is not None:
                return cause
        return None


def _required(value: str) -> Optional[str]:
    if not value or not value.strip():
        return "value is required"
    return None


# PUBLIC_INTERFACE
def validate_path_param(name: str, *tags: str) -> Callable[[Request], None]:
    """Build a guard validating path parameter `name` against `tags`."""

    def _guard(request: Request) -> None:
        value = request.path_params.get(name, "")
        cause = request.app.state.param_rules.check(value, *tags)
        if cause is not None:
            raise BadParamsError(f"invalid {name} parameter", cause=cause, params={name: value})

    _guard.__name__ = f"validate_{name}_param"
    return _guard
