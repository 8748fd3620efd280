"""Shell-style glob patterns and a matcher built on them.

In these globs ``*`` and ``**`` match any run of characters, path separators
included; ``?`` matches one character; ``[abc]``, ``[a-z]`` and their ``[!...]``
negations match one character; ``{a,b}`` matches any alternative; and a
backslash makes the next character literal.
"""

from __future__ import annotations

import re
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Optional, Tuple, Union

from pathignore.matcher import (
    Context,
    MatcherError,
    MatchInfo,
    MatchType,
    PathMatcher,
    ensure_context,
)

_SPECIALS = frozenset("*?\\[]{}")
_NOTHING = "(?!)"


class GlobCompileError(MatcherError):
    """A glob pattern could not be compiled."""

    def __init__(self, pattern: str, reason: str) -> None:
        super().__init__(reason)
        self.pattern = pattern
        self.reason = reason


class _Parser:
    def __init__(self, pattern: str) -> None:
        self.text = pattern
        self.pos = 0

    def fail(self, reason: str) -> GlobCompileError:
        return GlobCompileError(self.text, reason)

    def peek(self) -> Optional[str]:
        return self.text[self.pos] if self.pos < len(self.text) else None

    def next(self) -> str:
        ch = self.peek()
        if ch is None:
            raise self.fail("unexpected end of input")
        self.pos += 1
        return ch

    def sequence(self, in_terms: bool) -> str:
        parts: List[str] = []
        while (ch := self.peek()) is not None:
            if in_terms and ch in ",}":
                return "".join(parts)
            self.pos += 1
            if ch == "\\":
                escaped = self.peek()
                if escaped is not None:
                    self.pos += 1
                    parts.append(re.escape(escaped))
            elif ch == "*":
                while self.peek() == "*":
                    self.pos += 1
                parts.append(".*")
            elif ch == "?":
                parts.append(".")
            elif ch == "[":
                parts.append(self.char_class())
            elif ch == "{":
                parts.append(self.alternatives())
            else:
                parts.append(re.escape(ch))
        if in_terms:
            raise self.fail("unexpected end of input")
        return "".join(parts)

    def alternatives(self) -> str:
        options = []
        while True:
            options.append(self.sequence(in_terms=True))
            if self.next() == "}":
                return "(?:" + "|".join(options) + ")"

    def char_class(self) -> str:
        negate = self.peek() == "!"
        if negate:
            self.pos += 1
        low = self.next()
        if self.peek() == "-":
            self.pos += 1
            high = self.next()
            if self.next() != "]":
                raise self.fail("expected close range character")
            if low > high:
                return "." if negate else _NOTHING
            prefix = "^" if negate else ""
            return f"[{prefix}{re.escape(low)}-{re.escape(high)}]"

        self.pos -= 1
        chars: List[str] = []
        while (ch := self.next()) != "]":
            chars.append(self.next() if ch == "\\" else ch)
        if not chars:
            return "." if negate else _NOTHING
        prefix = "^" if negate else ""
        return "[" + prefix + "".join(re.escape(c) for c in chars) + "]"


class Glob:
    """A compiled glob pattern matched against whole strings."""

    def __init__(self, pattern: str) -> None:
        self.pattern = pattern
        self._regex = re.compile(_Parser(pattern).sequence(in_terms=False), re.DOTALL)

    def match(self, text: str) -> bool:
        return self._regex.fullmatch(text) is not None

    def __repr__(self) -> str:
        return f"Glob({self.pattern!r})"


def compile_glob(pattern: str) -> Glob:
    """Compile a glob pattern, raising GlobCompileError when it is malformed."""
    return Glob(pattern)


def quote_meta(text: str) -> str:
    """Escape glob metacharacters so the result matches text literally."""
    return "".join("\\" + ch if ch in _SPECIALS else ch for ch in text)


@dataclass
class GlobOptions:
    """Glob patterns, and raw patterns that are matched literally."""

    patterns: List[str] = field(default_factory=list)
    raw_patterns: List[str] = field(default_factory=list)


def _compile_each(options: GlobOptions) -> Iterator[Union[Glob, GlobCompileError]]:
    for pattern in options.patterns:
        try:
            yield compile_glob(pattern)
        except GlobCompileError as exc:
            yield exc
    for raw in options.raw_patterns:
        try:
            yield compile_glob(quote_meta(raw))
        except GlobCompileError as exc:
            yield GlobCompileError(raw, exc.reason)


class GlobMatcher(PathMatcher):
    """Ignores a path when any glob matches it; the match source is the path."""

    def __init__(self, globs: Iterable[Glob], parallel: bool = False) -> None:
        self.globs: Tuple[Glob, ...] = tuple(globs)
        self.parallel = parallel

    @classmethod
    def lenient(cls, options: GlobOptions) -> Tuple["GlobMatcher", List[GlobCompileError]]:
        """Build a sequential matcher from the valid patterns and report the invalid ones."""
        globs: List[Glob] = []
        errors: List[GlobCompileError] = []
        for item in _compile_each(options):
            (errors if isinstance(item, GlobCompileError) else globs).append(item)
        return cls(globs), errors

    @classmethod
    def strict(cls, options: GlobOptions, parallel: bool = False) -> "GlobMatcher":
        """Build a matcher, raising on the first invalid pattern."""
        globs: List[Glob] = []
        for item in _compile_each(options):
            if isinstance(item, GlobCompileError):
                raise item
            globs.append(item)
        return cls(globs, parallel)

    def type(self) -> MatchType:
        return MatchType.GLOB

    def match(self, path: str, ctx: Optional[Context] = None) -> bool:
        """Whether the path is ignored by any glob."""
        return self.match_info(path, ctx).ok()

    def match_info(self, path: str, ctx: Optional[Context] = None) -> MatchInfo:
        ctx = ensure_context(ctx)
        ctx.raise_if_cancelled()

        if self.parallel:
            return MatchInfo(path if self._any_concurrent(path, ctx) else "", MatchType.GLOB)

        for glob in self.globs:
            ctx.raise_if_cancelled()
            if glob.match(path):
                return MatchInfo(path, MatchType.GLOB)
        return MatchInfo("", MatchType.GLOB)

    def _any_concurrent(self, path: str, ctx: Context) -> bool:
        """Try every glob at once; a cancelled context ends the search without a match."""
        if not self.globs:
            return False
        scope = ctx.with_timeout(None)

        def attempt(glob: Glob) -> bool:
            return not scope.cancelled() and glob.match(path)

        with ThreadPoolExecutor() as pool:
            futures = [pool.submit(attempt, glob) for glob in self.globs]
            try:
                return any(future.result() for future in as_completed(futures))
            finally:
                scope.cancel()
                for future in futures:
                    future.cancel()