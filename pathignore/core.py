"""Combining regex, gitignore and glob strategies into one ignore check."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from pathignore.gitignore import GitIgnoreMatcher, GitIgnoreOptions
from pathignore.globmatch import GlobMatcher, GlobOptions
from pathignore.matcher import (
    NO_MATCH,
    Context,
    MatcherError,
    MatchInfo,
    PathMatcher,
    ensure_context,
)
from pathignore.regexmatch import RegexMatcher, RegexOptions

_MAX_TIMEOUT = 3600.0


@dataclass
class Options:
    """Which strategies to use, a timeout in seconds (0 means one hour) and whether to match in parallel."""

    regex: Optional[RegexOptions] = None
    glob: Optional[GlobOptions] = None
    gitignore: Optional[GitIgnoreOptions] = None
    timeout: float = 0.0
    parallel: bool = False


class PathIgnore:
    """Ignores a path when any configured strategy matches it.

    Strategies are tried in the order regex, gitignore, glob; the first match wins.
    """

    def __init__(self, options: Options) -> None:
        if options.regex is None and options.glob is None and options.gitignore is None:
            raise MatcherError("at least one matching strategy required")

        matchers: List[PathMatcher] = []

        if options.regex is not None:
            try:
                matchers.append(RegexMatcher(options.regex, options.parallel))
            except MatcherError as exc:
                raise MatcherError(f"regex - {exc}") from exc

        if options.gitignore is not None:
            try:
                matchers.append(GitIgnoreMatcher(options.gitignore, options.parallel))
            except MatcherError as exc:
                raise MatcherError(f"gitignore - {exc}") from exc

        if options.glob is not None:
            try:
                matchers.append(GlobMatcher.strict(options.glob, options.parallel))
            except MatcherError as exc:
                raise MatcherError(f"glob - {exc}") from exc

        self.matchers = tuple(matchers)
        self.timeout = options.timeout

    def match(self, path: str, ctx: Optional[Context] = None) -> bool:
        """True when the path is ignored by any strategy."""
        return self.match_info(path, ctx).ok()

    def match_info(self, path: str, ctx: Optional[Context] = None) -> MatchInfo:
        """Describe the first strategy that matches the path, or NO_MATCH."""
        scope = ensure_context(ctx).with_timeout(self.timeout or _MAX_TIMEOUT)
        try:
            for matcher in self.matchers:
                info = matcher.match_info(path, scope)
                if info.ok():
                    return info
            return NO_MATCH
        finally:
            scope.cancel()