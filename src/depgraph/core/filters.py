"""Filter rules: partial-match predicates over module identity.

A rule is written as ``organization[:name[:version]]``. Each component is a
shell-style glob (``*``, ``?``, ``[...]``), matched case-sensitively; an
omitted or empty component, or a lone ``*``, matches anything.

Semantics across a rule set:

- Within one rule, every specified component must match (conjunction).
- Across rules, any matching rule is enough (disjunction).
- An empty rule set matches every module.

Examples::

    FilterRule.parse("org.typelevel")            # any cats/fs2/... module
    FilterRule.parse("com.fasterxml*:jackson-*")  # all jackson artifacts
    FilterRule.parse("*:*:*-SNAPSHOT")            # snapshot versions only
"""

from __future__ import annotations

from dataclasses import dataclass
from fnmatch import fnmatchcase
from typing import Iterable, Sequence

from depgraph.core.model import ModuleId
from depgraph.exceptions import FilterRuleError

_SEPARATOR = ":"
_WILDCARD = "*"


def _component_matches(pattern: str | None, value: str) -> bool:
    if pattern is None:
        return True
    return fnmatchcase(value, pattern)


@dataclass(frozen=True)
class FilterRule:
    """A match pattern over a ``ModuleId``.

    Attributes:
        organization: Glob for the organization, or None for any.
        name: Glob for the module name, or None for any.
        version: Glob for the version, or None for any.
    """

    organization: str | None = None
    name: str | None = None
    version: str | None = None

    @classmethod
    def parse(cls, token: str) -> FilterRule:
        """Parse a ``organization[:name[:version]]`` token.

        Raises:
            FilterRuleError: If the token has more than three components.
        """
        parts = token.strip().split(_SEPARATOR)
        if len(parts) > 3:
            raise FilterRuleError(
                f"Invalid filter rule {token!r}: expected organization[:name[:version]]"
            )
        parts += [""] * (3 - len(parts))
        org, name, version = (
            None if p.strip() in ("", _WILDCARD) else p.strip() for p in parts
        )
        return cls(organization=org, name=name, version=version)

    def matches(self, module_id: ModuleId) -> bool:
        return (
            _component_matches(self.organization, module_id.organization)
            and _component_matches(self.name, module_id.name)
            and _component_matches(self.version, module_id.version)
        )

    def __str__(self) -> str:
        return _SEPARATOR.join(
            p if p is not None else _WILDCARD
            for p in (self.organization, self.name, self.version)
        )


def parse_filter_rules(tokens: Iterable[str]) -> tuple[FilterRule, ...]:
    """Parse every token into a ``FilterRule``; blank tokens are skipped."""
    return tuple(FilterRule.parse(t) for t in tokens if t.strip())


def matches_any(rules: Sequence[FilterRule], module_id: ModuleId) -> bool:
    """True if ``module_id`` satisfies at least one rule, or ``rules`` is empty."""
    if not rules:
        return True
    return any(rule.matches(module_id) for rule in rules)
