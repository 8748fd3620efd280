"""Matching paths against gitignore-style pattern lines."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from pathignore.matcher import (
    Context,
    MatcherError,
    MatchInfo,
    MatchType,
    PathMatcher,
    PatternSet,
    ensure_context,
)

_ESCAPED_FIRST_CHAR = re.compile(r"^[#!]")
_DIR_FILE = re.compile(r"[^/+]/.*\*\.")
_QUESTION_MARK = re.compile(r"(^|[^\\])\?")
_PLACEHOLDER = "#$~"


@dataclass(frozen=True)
class Rule:
    """One gitignore line: its source text, the regular expression it became, and its polarity."""

    src: str
    pattern: str
    negate: bool = False


@dataclass
class GitIgnoreOptions:
    """Pattern lines, and optionally a gitignore file whose lines are added after them."""

    patterns: List[str] = field(default_factory=list)
    file_path: str = ""


def parse_line(line: str) -> Optional[Rule]:
    """Turn one gitignore line into a rule, or None for blank lines and comments."""
    source = line
    line = line.rstrip("\r")

    if line.startswith("#"):
        return None

    line = line.strip(" ")
    if not line:
        return None

    dir_only = line.endswith("/")
    anchored = "/" in line[:-1]

    negate = line.startswith("!")
    if negate:
        line = line[1:]

    line = line.replace("[!", "[^")

    if _ESCAPED_FIRST_CHAR.match(line):
        line = line[1:]

    if _DIR_FILE.search(line) and not line.startswith("/"):
        line = "/" + line

    line = line.replace(".", r"\.")

    if line.startswith("/**/"):
        line = line[1:]

    line = _QUESTION_MARK.sub(r"\1[^/]", line)

    line = line.replace("/**/", "(?:/|/.+/)")
    line = line.replace("**/", "(?:|." + _PLACEHOLDER + "/)")
    line = line.replace("/**", "/." + _PLACEHOLDER)

    line = line.replace("\\*", "\\" + _PLACEHOLDER)
    line = line.replace("*", "[^/]*")
    line = line.replace(_PLACEHOLDER, "*")

    expr = line + ("(?:|.*)$" if dir_only else "(?:|/.*)$")
    if anchored:
        if line.startswith("/"):
            expr = expr[1:]
        expr = "^(?:|/)" + expr
    else:
        expr = "^(?:|.*/)" + expr

    return Rule(src=source, pattern=expr, negate=negate)


def read_patterns(path: str) -> List[str]:
    """The lines of a gitignore file, split on newlines only."""
    with open(path, encoding="utf-8", newline="") as handle:
        return handle.read().split("\n")


def _compile(rule: Rule) -> "re.Pattern[str]":
    try:
        return re.compile(rule.pattern)
    except re.error as exc:
        raise MatcherError(f"compile pattern {rule.src} - {exc}") from exc


class GitIgnoreMatcher(PathMatcher):
    """Ignores a path when a positive rule matches it and no negation rule does.

    Sequential matchers report the gitignore line that matched. Parallel ones
    search all rules of each polarity together and report the regular
    expression that matched; a matching negation there is reported as the match.
    """

    def __init__(self, options: GitIgnoreOptions, parallel: bool = False) -> None:
        patterns = list(options.patterns)
        if not patterns and not options.file_path:
            raise MatcherError("at least one gitignore source required: file or lines")

        if options.file_path:
            try:
                patterns.extend(read_patterns(options.file_path))
            except OSError as exc:
                raise MatcherError(f"read gitignore file: {exc}") from exc

        self.sources: Tuple[str, ...] = tuple(patterns)
        self.parallel = parallel

        positive: List[Tuple[Rule, Optional["re.Pattern[str]"]]] = []
        negative: List[Tuple[Rule, Optional["re.Pattern[str]"]]] = []
        for line in patterns:
            rule = parse_line(line)
            if rule is None:
                continue
            compiled = None if parallel else _compile(rule)
            (negative if rule.negate else positive).append((rule, compiled))

        self.pos_rules: Tuple[Rule, ...] = tuple(rule for rule, _ in positive)
        self.neg_rules: Tuple[Rule, ...] = tuple(rule for rule, _ in negative)
        self._positive = positive
        self._negative = negative
        self._pos_set: Optional[PatternSet] = None
        self._neg_set: Optional[PatternSet] = None

        if parallel:
            try:
                self._pos_set = PatternSet(rule.pattern for rule in self.pos_rules)
            except MatcherError as exc:
                raise MatcherError(f"parallel: pattern set - {exc}") from exc
            if self.neg_rules:
                try:
                    self._neg_set = PatternSet(rule.pattern for rule in self.neg_rules)
                except MatcherError as exc:
                    raise MatcherError(f"parallel: negation pattern set - {exc}") from exc

    def type(self) -> MatchType:
        return MatchType.GITIGNORE

    def match(self, path: str, ctx: Optional[Context] = None) -> bool:
        """Whether the path is ignored by the gitignore rules."""
        return self.match_info(path, ctx).ok()

    def match_info(self, path: str, ctx: Optional[Context] = None) -> MatchInfo:
        ctx = ensure_context(ctx)
        path = path.replace(os.sep, "/")

        source = ""
        if self._pos_set is not None:
            ctx.raise_if_cancelled()
            source = self._pos_set.matches(path) or ""
        else:
            for rule, regex in self._positive:
                ctx.raise_if_cancelled()
                if regex.search(path):
                    source = rule.src
                    break

        if not source:
            return MatchInfo("", MatchType.GITIGNORE)

        if self._neg_set is not None:
            ctx.raise_if_cancelled()
            negated = self._neg_set.matches(path)
            return MatchInfo(negated or source, MatchType.GITIGNORE)

        for rule, regex in self._negative:
            ctx.raise_if_cancelled()
            if regex.search(path):
                return MatchInfo("", MatchType.GITIGNORE)
        return MatchInfo(source, MatchType.GITIGNORE)