"""Tests for module identity matching and completion."""

from __future__ import annotations

import pytest

from depgraph.core.matching import complete_module_tokens, match_module_id
from depgraph.core.model import ModuleId
from depgraph.exceptions import ModuleLookupError
from factories import mid

KNOWN = [
    mid("org:lib-a:1.0"),
    mid("org:lib-a:2.0"),
    mid("org:lib-b:1.0"),
    mid("com.other:tool:3.1"),
]


class TestMatchModuleId:
    """Resolving typed tokens to exactly one known id."""

    def test_exact_match(self) -> None:
        assert match_module_id(["org", "lib-a", "2.0"], KNOWN) == mid("org:lib-a:2.0")

    def test_partial_unique_match(self) -> None:
        assert match_module_id(["com.other"], KNOWN) == mid("com.other:tool:3.1")
        assert match_module_id(["org", "lib-b"], KNOWN) == mid("org:lib-b:1.0")

    def test_unknown_name_fails(self) -> None:
        with pytest.raises(ModuleLookupError, match="no such module: org lib-z") as info:
            match_module_id(["org", "lib-z"], KNOWN)
        assert info.value.tokens == ("org", "lib-z")

    def test_ambiguous_partial_input_fails(self) -> None:
        with pytest.raises(ModuleLookupError, match="ambiguous module"):
            match_module_id(["org", "lib-a"], KNOWN)

    def test_no_prefix_matching(self) -> None:
        with pytest.raises(ModuleLookupError):
            match_module_id(["or"], KNOWN)

    @pytest.mark.parametrize("tokens", [[], ["a", "b", "c", "d"], ["org", ""]])
    def test_malformed_tokens(self, tokens: list[str]) -> None:
        with pytest.raises(ModuleLookupError, match="expected <organization>"):
            match_module_id(tokens, KNOWN)

    def test_empty_graph_accepts_three_free_tokens(self) -> None:
        assert match_module_id(["x", "y", "1"], []) == ModuleId("x", "y", "1")

    def test_empty_graph_requires_three_tokens(self) -> None:
        with pytest.raises(ModuleLookupError, match="no modules known"):
            match_module_id(["x", "y"], [])


class TestCompleteModuleTokens:
    """Candidate values for shell completion."""

    def test_organizations(self) -> None:
        assert complete_module_tokens([], "", KNOWN) == ["com.other", "org"]

    def test_names_with_prefix(self) -> None:
        assert complete_module_tokens(["org"], "lib-", KNOWN) == ["lib-a", "lib-b"]

    def test_versions(self) -> None:
        assert complete_module_tokens(["org", "lib-a"], "", KNOWN) == ["1.0", "2.0"]

    def test_nothing_after_version(self) -> None:
        assert complete_module_tokens(["org", "lib-a", "1.0"], "", KNOWN) == []

    def test_unknown_prefix(self) -> None:
        assert complete_module_tokens(["nope"], "", KNOWN) == []
