import re

import pytest

from pathignore.matcher import Cancelled, Context, MatcherError, MatchType
from pathignore.regexmatch import RegexMatcher, RegexOptions, quote_patterns


@pytest.mark.parametrize("parallel", [False, True])
@pytest.mark.parametrize(
    "options, count",
    [
        (RegexOptions(patterns=["foo"]), 1),
        (RegexOptions(patterns=["foo", "bar.*"]), 2),
        (RegexOptions(patterns=["foo.bar", "baz*"], literals=True), 1),
    ],
)
def test_new_matcher_valid(options, count, parallel):
    matcher = RegexMatcher(options, parallel)
    assert len(matcher.patterns) == count
    assert matcher.parallel is parallel


@pytest.mark.parametrize("parallel", [False, True])
@pytest.mark.parametrize(
    "options",
    [RegexOptions(patterns=[]), RegexOptions(patterns=["["])],
)
def test_new_matcher_invalid(options, parallel):
    with pytest.raises(MatcherError):
        RegexMatcher(options, parallel)


MATCH_CASES = [
    (RegexOptions(patterns=["foo"]), "foo", True),
    (RegexOptions(patterns=["foo"]), "bar", False),
    (RegexOptions(patterns=["foo", "bar"]), "foo", True),
    (RegexOptions(patterns=["foo", "bar"]), "bar", True),
    (RegexOptions(patterns=["foo", "bar"]), "baz", False),
    (RegexOptions(patterns=["foo.bar"], literals=True), "foo.bar", True),
    (RegexOptions(patterns=["foo.bar"], literals=True), "fooxbar", False),
    (RegexOptions(patterns=["foo.bar"]), "fooxbar", True),
    (RegexOptions(patterns=["foo"]), "", False),
]


@pytest.mark.parametrize("options, path, want", MATCH_CASES)
def test_match(options, path, want):
    assert RegexMatcher(options).match(path) is want


@pytest.mark.parametrize("options, path, want", MATCH_CASES)
def test_parallel_match(options, path, want):
    assert RegexMatcher(options, parallel=True).match(path) is want


def test_sequential_source_is_path():
    info = RegexMatcher(RegexOptions(patterns=["^foo"])).match_info("foobar")
    assert info.src == "foobar"
    assert info.type is MatchType.REGEX


def test_parallel_source_is_pattern():
    info = RegexMatcher(RegexOptions(patterns=["^x", "^foo"]), parallel=True).match_info("foobar")
    assert info.src == "^foo"
    assert info.type is MatchType.REGEX


def test_type():
    assert RegexMatcher(RegexOptions(patterns=["foo"])).type() is MatchType.REGEX


@pytest.mark.parametrize("parallel", [False, True])
def test_cancelled_context(parallel):
    matcher = RegexMatcher(RegexOptions(patterns=["foo"]), parallel)
    ctx = Context()
    ctx.cancel()
    with pytest.raises(Cancelled):
        matcher.match("foo", ctx)


def test_quote_patterns_are_literal():
    quoted = quote_patterns(["foo.bar", "baz*"])
    assert len(quoted) == 2
    assert re.fullmatch(quoted[0], "foo.bar")
    assert re.fullmatch(quoted[0], "fooxbar") is None
    assert re.fullmatch(quoted[1], "baz*")
    assert re.fullmatch(quoted[1], "bazzz") is None