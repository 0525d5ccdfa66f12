"""Tests for word-level text helpers."""

from __future__ import annotations

import pytest

from tocmap.utils.text import compare_ignore_case, fold_case, split_words, word_edit_distance


class TestSplitWords:
    """Test split_words function."""

    def test_split_on_all_delimiters(self) -> None:
        """Should split on dash, hash, underscore, space and slash."""
        result = split_words("docs/getting-started#intro_page one")

        assert result == ["docs", "getting", "started", "intro", "page", "one"]

    def test_discard_empty_tokens(self) -> None:
        """Should drop empty tokens between consecutive delimiters."""
        assert split_words("/a//b--c/") == ["a", "b", "c"]

    def test_only_delimiters(self) -> None:
        assert split_words("-#_ /") == []

    def test_keeps_dots_and_case(self) -> None:
        """Should not split on dots or change case."""
        assert split_words("a/TOC.md") == ["a", "TOC.md"]


class TestFoldCase:
    """Test per-character case folding."""

    def test_ascii(self) -> None:
        assert fold_case("Docs/toc.md") == "DOCS/TOC.MD"

    def test_keeps_length(self) -> None:
        """Characters with multi-character upper case stay unchanged."""
        assert fold_case("straße") == "STRAßE"

    def test_compare_ignore_case(self) -> None:
        assert compare_ignore_case("Docs/A/TOC.md", "docs/a/toc.md") == 0
        assert compare_ignore_case("a", "B") < 0
        assert compare_ignore_case("B", "a") > 0

    def test_compare_sharp_s(self) -> None:
        """Sharp s is not equal to SS when ignoring case."""
        assert compare_ignore_case("ß", "SS") != 0


class TestWordEditDistance:
    """Test word_edit_distance function."""

    def test_identical(self) -> None:
        assert word_edit_distance(["a", "b"], ["a", "b"]) == 0

    def test_case_insensitive(self) -> None:
        """Words equal ignoring case should match."""
        assert word_edit_distance(["Azure", "Functions"], ["azure", "FUNCTIONS"]) == 0

    def test_sharp_s_words(self) -> None:
        assert word_edit_distance(["Straße"], ["STRAßE"]) == 0
        assert word_edit_distance(["straße"], ["STRASSE"]) == 1

    def test_empty_sequences(self) -> None:
        assert word_edit_distance([], []) == 0
        assert word_edit_distance(["a", "b", "c"], []) == 3
        assert word_edit_distance([], ["a"]) == 1

    def test_substitution(self) -> None:
        assert word_edit_distance(["a", "b", "c"], ["a", "x", "c"]) == 1

    def test_insertion_and_deletion(self) -> None:
        assert word_edit_distance(["a", "c"], ["a", "b", "c"]) == 1
        assert word_edit_distance(["a", "b", "c"], ["a", "c"]) == 1

    def test_transposition_costs_two(self) -> None:
        assert word_edit_distance(["a", "b"], ["b", "a"]) == 2

    def test_words_are_atomic(self) -> None:
        """A one-letter difference inside a word is a full substitution."""
        assert word_edit_distance(["function"], ["functions"]) == 1
        assert word_edit_distance(["abc"], ["xyz"]) == 1

    @pytest.mark.parametrize(
        ("source", "target"),
        [
            (["azure", "functions"], ["docs", "functions", "TOC.md"]),
            (["x"], ["docs", "a", "TOC.md"]),
            (["a", "b", "c", "d"], ["d", "c"]),
        ],
    )
    def test_symmetric(self, source: list[str], target: list[str]) -> None:
        assert word_edit_distance(source, target) == word_edit_distance(target, source)

    def test_document_against_toc_path(self) -> None:
        """Shared words lower the distance to a TOC path."""
        names = split_words("azure-functions")

        assert word_edit_distance(names, split_words("docs/functions/TOC.md")) == 2
        assert word_edit_distance(names, split_words("docs/alpha/TOC.md")) == 3

    def test_returns_plain_int(self) -> None:
        assert type(word_edit_distance(["a"], ["b"])) is int
