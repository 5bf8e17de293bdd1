"""Resolve user-typed module identity tokens against a graph.

Used by ``what-depends-on``: the user types an organization and, optionally,
a name and version. Tokens are compared exactly against the known module
ids; the match must be unique. When no ids are known yet (the graph has not
been computed), three free-form tokens are accepted as-is.

``complete_module_tokens`` is the pure half of shell completion: given the
tokens typed so far and the prefix of the current one, it lists candidate
values. The CLI adapts it to click's completion protocol.
"""

from __future__ import annotations

from typing import Iterable, Sequence

from depgraph.core.model import ModuleId
from depgraph.exceptions import ModuleLookupError


def match_module_id(tokens: Sequence[str], known: Iterable[ModuleId]) -> ModuleId:
    """Resolve identity tokens to exactly one ``ModuleId``.

    Args:
        tokens: ``[organization]``, ``[organization, name]`` or
            ``[organization, name, version]``.
        known: Module ids present in the graph. May be empty.

    Returns:
        The unique matching id, or a freshly constructed id when ``known``
        is empty and all three tokens were given.

    Raises:
        ModuleLookupError: When the tokens match no module, match several
            modules, or are malformed.
    """
    tokens = [t.strip() for t in tokens]
    if not 1 <= len(tokens) <= 3 or any(not t for t in tokens):
        raise ModuleLookupError(tokens, "expected <organization> [<name> [<version>]]")

    candidates = sorted(set(known))
    if not candidates:
        if len(tokens) != 3:
            raise ModuleLookupError(tokens, "no modules known, expected <organization> <name> <version>")
        return ModuleId(*tokens)

    matches = [c for c in candidates if _matches_tokens(c, tokens)]
    if not matches:
        raise ModuleLookupError(tokens)
    if len(matches) > 1:
        options = ", ".join(m.id_string for m in matches)
        raise ModuleLookupError(tokens, f"ambiguous module (candidates: {options})")
    return matches[0]


def _matches_tokens(module_id: ModuleId, tokens: Sequence[str]) -> bool:
    fields = (module_id.organization, module_id.name, module_id.version)
    return all(field == token for field, token in zip(fields, tokens))


def complete_module_tokens(
    previous: Sequence[str],
    prefix: str,
    known: Iterable[ModuleId],
) -> list[str]:
    """List completions for the next identity token.

    Args:
        previous: Tokens already typed (0 to 2 of them).
        prefix: Partial text of the token being completed.
        known: Module ids present in the graph.

    Returns:
        Sorted, de-duplicated candidate values starting with ``prefix``.
    """
    position = len(previous)
    if position > 2:
        return []
    values = {
        (m.organization, m.name, m.version)[position]
        for m in known
        if _matches_tokens(m, previous)
    }
    return sorted(v for v in values if v.startswith(prefix))
