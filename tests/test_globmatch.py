import pytest

from pathignore.globmatch import (
    Glob,
    GlobCompileError,
    GlobMatcher,
    GlobOptions,
    compile_glob,
    quote_meta,
)
from pathignore.matcher import Cancelled, Context, MatchType


def test_lenient_matcher():
    matcher, errors = GlobMatcher.lenient(
        GlobOptions(patterns=["node_modules/**/*.js", "*.css"], raw_patterns=["*.log"])
    )
    assert errors == []
    assert len(matcher.globs) == 3
    assert matcher.parallel is False


def test_lenient_matcher_invalid():
    invalid = "*[a-"
    matcher, errors = GlobMatcher.lenient(
        GlobOptions(patterns=["node_modules/**/*.js", "*.css", invalid], raw_patterns=["*.log"])
    )
    assert len(errors) == 1
    assert isinstance(errors[0], GlobCompileError)
    assert errors[0].pattern == invalid
    assert len(matcher.globs) == 3
    assert matcher.parallel is False


def test_strict_matcher():
    matcher = GlobMatcher.strict(
        GlobOptions(patterns=["node_modules/**/*.js", "*.css"], raw_patterns=["*.log"])
    )
    assert len(matcher.globs) == 3
    assert matcher.parallel is False


def test_strict_matcher_invalid():
    invalid = "*[a-"
    with pytest.raises(GlobCompileError) as info:
        GlobMatcher.strict(
            GlobOptions(patterns=["node_modules/**/*.js", "*.css", invalid], raw_patterns=["*.log"])
        )
    assert info.value.pattern == invalid


def test_glob():
    assert compile_glob("*test*").match("atest.go") is True


MATCH_CASES = [
    (GlobOptions(patterns=["*.go"]), "main.go", False, True),
    (GlobOptions(patterns=["*.go"]), "main.txt", False, False),
    (GlobOptions(patterns=["*.txt", "*.go"]), "file.txt", False, True),
    (GlobOptions(patterns=["*.txt", "*.go"]), "file.go", False, True),
    (GlobOptions(patterns=["*.txt", "*.go"]), "file.md", False, False),
    (GlobOptions(raw_patterns=["foo/bar.txt"]), "foo/bar.txt", False, True),
    (GlobOptions(raw_patterns=["foo/bar.txt"]), "foo/baz.txt", False, False),
    (GlobOptions(patterns=["*.log"], raw_patterns=["foo/bar.txt"]), "debug.log", False, True),
    (GlobOptions(patterns=["*.log"], raw_patterns=["foo/bar.txt"]), "foo/bar.txt", False, True),
    (GlobOptions(patterns=["*.txt", "*.go", "*.md"]), "document.md", True, True),
    (GlobOptions(patterns=["*.txt", "*.go", "*.md"]), "image.png", True, False),
]


@pytest.mark.parametrize("options, path, parallel, expected", MATCH_CASES)
def test_match(options, path, parallel, expected):
    matcher = GlobMatcher.strict(options, parallel)
    assert matcher.match(path) is expected


@pytest.mark.parametrize("parallel", [True, False])
def test_cancelled_context(parallel):
    matcher = GlobMatcher.strict(GlobOptions(patterns=["*.txt", "*.go", "*.md"]), parallel)
    ctx = Context()
    ctx.cancel()
    with pytest.raises(Cancelled):
        matcher.match("document.md", ctx)


def test_match_info_source_is_path():
    matcher = GlobMatcher.strict(GlobOptions(patterns=["*.go"]))
    info = matcher.match_info("main.go")
    assert info.src == "main.go"
    assert info.type is MatchType.GLOB
    assert matcher.type() is MatchType.GLOB


def test_empty_parallel_matcher_matches_nothing():
    assert GlobMatcher([], parallel=True).match("anything") is False


@pytest.mark.parametrize(
    "pattern, text, expected",
    [
        ("foo/*", "foo/bar", True),
        ("foo/*", "bar/foo", False),
        ("{a,b}.txt", "a.txt", True),
        ("{a,b}.txt", "b.txt", True),
        ("{a,b}.txt", "c.txt", False),
        ("[!a-z].txt", "1.txt", True),
        ("[!a-z].txt", "a.txt", False),
        ("[abc]", "b", True),
        ("[abc]", "d", False),
        ("file?.go", "file1.go", True),
        ("file?.go", "file.go", False),
        ("\\*.go", "*.go", True),
        ("\\*.go", "a.go", False),
    ],
)
def test_glob_syntax(pattern, text, expected):
    assert Glob(pattern).match(text) is expected


@pytest.mark.parametrize("pattern", ["[", "*[a-", "{a,b", "[a"])
def test_malformed_globs(pattern):
    with pytest.raises(GlobCompileError) as info:
        compile_glob(pattern)
    assert info.value.pattern == pattern


@pytest.mark.parametrize("text", ["a*b", "[x]{y,z}?", "back\\slash", "plain.txt"])
def test_quote_meta_round_trip(text):
    glob = compile_glob(quote_meta(text))
    assert glob.match(text) is True
    assert glob.match(text + "x") is False