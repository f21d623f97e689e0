"""Tests for multi-pattern combinators and bulk helpers."""

import pytest

from globmatch import FilterMode, filter_texts, match_all, match_any, match_multiple, match_texts

SOURCES = ["*.zig", "*.c", "*.h"]


@pytest.mark.parametrize(
    "text,expected",
    [("main.zig", True), ("test.c", True), ("header.h", True), ("script.py", False), ("README.md", False)],
)
def test_match_any_source_files(text: str, expected: bool) -> None:
    assert match_any(SOURCES, text) is expected
    assert match_multiple(SOURCES, text) is expected


def test_match_any_with_negation() -> None:
    patterns = ["*.txt", "!test_*"]
    assert match_any(patterns, "file.txt")
    assert match_any(patterns, "production.log")
    assert match_any(patterns, "test_file.txt")
    assert not match_any(patterns, "test_file.md")


def test_match_any_prefix_or_suffix() -> None:
    patterns = ["test_*", "*_test"]
    assert match_any(patterns, "test_file")
    assert match_any(patterns, "file_test")
    assert not match_any(patterns, "production")


@pytest.mark.parametrize(
    "text,expected",
    [("test_main.zig", True), ("test_main.c", False), ("main.zig", False), ("production.rs", False)],
)
def test_match_all_basic(text: str, expected: bool) -> None:
    assert match_all(["test_*", "*.zig"], text) is expected


def test_match_all_single_pattern() -> None:
    assert match_all(["*.txt"], "file.txt")
    assert not match_all(["*.txt"], "file.md")


def test_match_all_with_wildcards() -> None:
    patterns = ["src/*", "*.zig", "*main*"]
    assert match_all(patterns, "src/main.zig")
    assert not match_all(patterns, "src/test.zig")
    assert not match_all(patterns, "lib/main.zig")


def test_match_all_with_negation() -> None:
    patterns = ["*.txt", "!test_*"]
    assert match_all(patterns, "file.txt")
    assert not match_all(patterns, "test_file.txt")
    assert not match_all(patterns, "test_file.md")


@pytest.mark.parametrize("text", ["", "anything"])
def test_empty_pattern_collections(text: str) -> None:
    assert match_any([], text) is False
    assert match_all([], text) is True


def test_combinators_accept_generators() -> None:
    assert match_any((p for p in SOURCES), "a.h")
    assert match_all((p for p in ["a*", "*z"]), "abz")


def test_malformed_pattern_does_not_poison_others() -> None:
    assert match_any(["[", "*.c"], "main.c")
    assert not match_all(["[", "*.c"], "main.c")


def test_short_circuit_stops_at_first_verdict() -> None:
    seen = []

    def patterns():
        for pattern in ["*.c", "*.h", "*.zig"]:
            seen.append(pattern)
            yield pattern

    assert match_any(patterns(), "x.h")
    assert seen == ["*.c", "*.h"]


def test_match_texts() -> None:
    assert match_texts("a*c", ["abc", "def", "abdefc"]) == [True, False, True]
    assert match_texts("a*c", []) == []


class TestFilterTexts:
    texts = ["main.zig", "test_main.zig", "util.c", "notes.md"]

    def test_any_is_default(self) -> None:
        assert filter_texts(SOURCES, self.texts) == ["main.zig", "test_main.zig", "util.c"]

    def test_all(self) -> None:
        assert filter_texts(["test_*", "*.zig"], self.texts, mode="all") == ["test_main.zig"]
        assert filter_texts(["test_*", "*.zig"], self.texts, mode=FilterMode.ALL) == ["test_main.zig"]

    def test_exclusion_list(self) -> None:
        assert filter_texts(["!*.md"], self.texts) == ["main.zig", "test_main.zig", "util.c"]

    def test_empty_patterns(self) -> None:
        assert filter_texts([], self.texts) == []
        assert filter_texts([], self.texts, mode="all") == self.texts

    def test_unknown_mode(self) -> None:
        with pytest.raises(ValueError):
            filter_texts(SOURCES, self.texts, mode="some")


def test_filter_texts_accepts_pattern_generator() -> None:
    patterns = (pattern for pattern in ["*.c"])
    assert filter_texts(patterns, ["a.c", "b.h", "c.c"]) == ["a.c", "c.c"]
