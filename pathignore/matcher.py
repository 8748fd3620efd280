"""Shared matcher vocabulary: match types, results, cancellation and pattern sets."""

from __future__ import annotations

import enum
import re
import threading
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterable, Optional


class MatchType(enum.IntEnum):
    """The strategy that produced a match."""

    UNKNOWN = 0
    GITIGNORE = 1
    GLOB = 2
    REGEX = 3

    def __str__(self) -> str:
        return _TYPE_NAMES.get(self, "unknown")


_TYPE_NAMES = {
    MatchType.GITIGNORE: "gitignore",
    MatchType.GLOB: "glob",
    MatchType.REGEX: "regex",
}


@dataclass(frozen=True)
class MatchInfo:
    """Outcome of matching one path: the source that matched and its strategy."""

    src: str = ""
    type: MatchType = MatchType.UNKNOWN

    def ok(self) -> bool:
        return self.src != ""

    def __str__(self) -> str:
        if self.type is MatchType.UNKNOWN:
            return ""
        return f"{self.type}:{self.src}"


NO_MATCH = MatchInfo()


class MatcherError(Exception):
    """Raised when a matcher cannot be built or a match cannot complete."""


class Cancelled(MatcherError):
    """The matching context was cancelled."""

    def __init__(self, message: str = "context canceled") -> None:
        super().__init__(message)


class DeadlineExceeded(MatcherError):
    """The matching context ran past its deadline."""

    def __init__(self, message: str = "context deadline exceeded") -> None:
        super().__init__(message)


class Context:
    """A cancellation scope with an optional timeout, in seconds, and an optional parent."""

    def __init__(self, timeout: Optional[float] = None, parent: Optional["Context"] = None) -> None:
        self._parent = parent
        self._deadline = None if timeout is None else time.monotonic() + timeout
        self._lock = threading.Lock()
        self._cause: Optional[type] = None

    @property
    def deadline(self) -> Optional[float]:
        """Monotonic time at which this context expires, if it has its own deadline."""
        return self._deadline

    def _settle(self, cause: type) -> type:
        with self._lock:
            if self._cause is None:
                self._cause = cause
            return self._cause

    def cancel(self) -> None:
        """Cancel this context and every context derived from it."""
        self._settle(Cancelled)

    def error(self) -> Optional[MatcherError]:
        """The reason this context is done, or None while it is still live."""
        cause = self._cause
        if cause is None and self._parent is not None:
            parent_error = self._parent.error()
            if parent_error is not None:
                cause = self._settle(type(parent_error))
        if cause is None and self._deadline is not None and time.monotonic() >= self._deadline:
            cause = self._settle(DeadlineExceeded)
        return None if cause is None else cause()

    def cancelled(self) -> bool:
        return self.error() is not None

    def raise_if_cancelled(self) -> None:
        err = self.error()
        if err is not None:
            raise err

    def with_timeout(self, timeout: Optional[float]) -> "Context":
        """A child context that ends at the timeout or when this one ends."""
        return Context(timeout, parent=self)


def ensure_context(ctx: Optional[Context]) -> Context:
    """Return ctx, or a fresh context without deadline when none is given."""
    return Context() if ctx is None else ctx


class PathMatcher(ABC):
    """A strategy that decides whether a path is ignored."""

    @abstractmethod
    def type(self) -> MatchType:
        """The strategy of this matcher."""

    @abstractmethod
    def match_info(self, path: str, ctx: Optional[Context] = None) -> MatchInfo:
        """Match a path and describe what matched."""

    def match(self, path: str, ctx: Optional[Context] = None) -> bool:
        """True when the path is ignored."""
        return self.match_info(path, ctx).ok()


class PatternSet:
    """A set of regular expressions searched together; reports the first pattern that matches."""

    def __init__(self, patterns: Iterable[str]) -> None:
        self.patterns = tuple(patterns)
        if not self.patterns:
            raise MatcherError("empty input patterns")
        try:
            self._compiled = [re.compile(pattern) for pattern in self.patterns]
        except re.error as exc:
            raise MatcherError(str(exc)) from exc

    def matches(self, path: str) -> Optional[str]:
        """The source of the lowest-indexed pattern found in path, or None."""
        return next(
            (src for src, regex in zip(self.patterns, self._compiled) if regex.search(path)),
            None,
        )