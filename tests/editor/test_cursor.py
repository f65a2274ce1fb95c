"""Tests for cursor context extraction."""

from __future__ import annotations

import pytest

from usenav.editor.cursor import chain_before_cursor, member_at, specifier_at
from usenav.resolution.models import ReferenceChain


class TestSpecifierAt:
    """Tests for specifier_at."""

    LINE = "const Repo = use('App/Services/Repo')"

    @pytest.mark.parametrize("column", [13, 20, 37])
    def test_column_inside_call(self, column: int) -> None:
        assert specifier_at(self.LINE, column) == "App/Services/Repo"

    def test_column_outside_call(self) -> None:
        assert specifier_at(self.LINE, 6) is None

    def test_picks_the_call_under_the_cursor(self) -> None:
        line = "const A = use('App/A'), B = use(\"App/B\")"
        assert specifier_at(line, 15) == "App/A"
        assert specifier_at(line, 35) == "App/B"

    def test_backtick_and_leading_slash(self) -> None:
        assert specifier_at("use(`/App/Models/Org`)", 5) == "/App/Models/Org"

    def test_no_call(self) -> None:
        assert specifier_at("const x = require('y')", 12) is None


class TestChainBeforeCursor:
    """Tests for chain_before_cursor."""

    def test_single_head(self) -> None:
        assert chain_before_cursor("  Repo.", 7) == ReferenceChain("Repo")

    def test_head_and_tail(self) -> None:
        line = "await Org.repository."
        assert chain_before_cursor(line, len(line)) == ReferenceChain("Org", "repository")

    def test_only_text_before_column_counts(self) -> None:
        line = "Repo.search(x)"
        assert chain_before_cursor(line, 5) == ReferenceChain("Repo")

    def test_no_trailing_dot(self) -> None:
        assert chain_before_cursor("Repo", 4) is None

    def test_longer_chains_keep_last_two_segments(self) -> None:
        line = "a.b.c."
        assert chain_before_cursor(line, len(line)) == ReferenceChain("b", "c")

    def test_self_reference_is_returned_as_is(self) -> None:
        chain = chain_before_cursor("this.", 5)
        assert chain is not None
        assert chain.is_self


class TestMemberAt:
    """Tests for member_at."""

    def test_member_of_head(self) -> None:
        line = "Repo.search('acme')"
        assert member_at(line, 7) == (ReferenceChain("Repo"), "search")

    def test_member_of_tail(self) -> None:
        line = "Org.repository.list()"
        assert member_at(line, 16) == (ReferenceChain("Org", "repository"), "list")

    def test_cursor_at_word_end(self) -> None:
        line = "Repo.search"
        assert member_at(line, len(line)) == (ReferenceChain("Repo"), "search")

    def test_word_without_chain(self) -> None:
        assert member_at("search()", 2) is None

    def test_cursor_on_head(self) -> None:
        assert member_at("Repo.search()", 1) is None

    def test_cursor_on_whitespace(self) -> None:
        assert member_at("Repo.search()   ", 15) is None
