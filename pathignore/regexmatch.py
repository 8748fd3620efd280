"""Matching paths against regular expressions."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from pathignore.matcher import (
    Context,
    MatcherError,
    MatchInfo,
    MatchType,
    PathMatcher,
    PatternSet,
    ensure_context,
)


@dataclass
class RegexOptions:
    """Patterns for a regex matcher; with literals the patterns are matched as plain text."""

    patterns: List[str] = field(default_factory=list)
    literals: bool = False


def quote_patterns(patterns: Iterable[str]) -> List[str]:
    """Escape every pattern so it matches only its own text."""
    return [re.escape(pattern) for pattern in patterns]


class RegexMatcher(PathMatcher):
    """Ignores a path when any pattern is found in it.

    Sequential matchers report the path as the match source; parallel ones
    search all patterns together and report the pattern that matched.
    """

    def __init__(self, options: RegexOptions, parallel: bool = False) -> None:
        patterns = list(options.patterns)
        if not patterns:
            raise MatcherError("at least one pattern required for regex matcher")
        if options.literals:
            patterns = ["|".join(quote_patterns(patterns))]

        self.patterns = tuple(patterns)
        self.parallel = parallel
        self._set: Optional[PatternSet] = None
        self._regexps: List[re.Pattern] = []

        if parallel:
            try:
                self._set = PatternSet(patterns)
            except MatcherError as exc:
                raise MatcherError(f"patterns compilation - {exc}") from exc
            return

        for pattern in patterns:
            try:
                self._regexps.append(re.compile(pattern))
            except re.error as exc:
                raise MatcherError(f"pattern({pattern}) compilation - {exc}") from exc

    def type(self) -> MatchType:
        return MatchType.REGEX

    def match(self, path: str, ctx: Optional[Context] = None) -> bool:
        """Whether the path is ignored by any pattern."""
        return self.match_info(path, ctx).ok()

    def match_info(self, path: str, ctx: Optional[Context] = None) -> MatchInfo:
        ctx = ensure_context(ctx)
        ctx.raise_if_cancelled()

        if self._set is not None:
            return MatchInfo(self._set.matches(path) or "", MatchType.REGEX)

        for regex in self._regexps:
            ctx.raise_if_cancelled()
            if regex.search(path):
                return MatchInfo(path, MatchType.REGEX)
        return MatchInfo("", MatchType.REGEX)