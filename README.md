# pathignore

`pathignore` answers one question: should this path be ignored?

It combines three ways of describing paths to skip:

- **gitignore rules** in the syntax of a `.gitignore` file, with negation
  (`!keep.txt`), anchoring (`/TODO`), directory-only rules (`build/`), `**`
  in any position, `?`, character classes (`[a-z]`, `[!a-z]`) and
  backslash escapes;
- **glob patterns** such as `*.{txt,log}` or `docs/**/*.md`, plus raw paths
  that are matched literally. In these globs `*` and `**` both match across
  `/`, and a glob must match the whole path;
- **regular expressions**, searched anywhere in the path, or literal strings
  that are escaped for you.

The package has no dependencies outside the standard library.

## Installing

```
pip install pathignore
```

## Checking a path

Build a `PathIgnore` from an `Options` value that switches on one or more
strategies, then ask it about paths:

```python
from pathignore.core import Options, PathIgnore
from pathignore.gitignore import GitIgnoreOptions
from pathignore.globmatch import GlobOptions
from pathignore.regexmatch import RegexOptions

ignore = PathIgnore(
    Options(
        gitignore=GitIgnoreOptions(patterns=["build/", "*.log", "!keep.log"]),
        glob=GlobOptions(patterns=["docs/**/*.md"]),
        regex=RegexOptions(patterns=[r"^tmp-\d+$"]),
    )
)

ignore.match("src/build/")         # True
ignore.match("logs/debug.log")     # True
ignore.match("keep.log")           # False, the negation wins
ignore.match("docs/api/index.md")  # True
ignore.match("tmp-42")             # True
ignore.match("src/main.py")        # False
```

Directories are told apart from files by a trailing `/` on the path you pass:
`build/` matches `"build/"` but not `"build"`. On systems whose path
separator is not `/`, the gitignore strategy converts it to `/` first.

The strategies are tried in a fixed order: regular expressions, then
gitignore rules, then globs. The first one that matches decides.

`match_info` returns a `MatchInfo` instead of a plain boolean. Its `ok()`
tells whether the path matched, and its string form names the strategy and
what matched, for example `gitignore:*.log`. What is reported as matched
depends on the strategy: the gitignore line for gitignore rules, the path
itself for globs and for regular expressions. A path that nothing matches
gives `NO_MATCH`, whose string form is empty.

Rules for gitignore can also be read from a file; its lines are added after
any `patterns` given:

```python
GitIgnoreOptions(file_path=".gitignore")
```

`RegexOptions(patterns=[...], literals=True)` escapes every pattern and joins
them into one expression, so `"foo.bar"` matches only the text `foo.bar`.

## Parallel matching and timeouts

Setting `parallel=True` in `Options` changes how each strategy works:

- regular expressions and gitignore rules are kept as one pattern set per
  strategy (and, for gitignore, one for negations), and the reported match is
  the regular expression that matched rather than the path or gitignore line;
- globs are tried concurrently on a thread pool.

Parallel gitignore matching differs in two ways worth knowing. It needs at
least one non-negated rule, or building fails. And a negation rule that
matches does not un-ignore the path: it is reported as the match instead, so
`keep.log` in the example above would count as ignored.

A `timeout` in `Options`, in seconds, bounds each check; `0` (the default)
means one hour. Each check can also be given a `Context`; cancelling it, or
letting its deadline pass, stops the check with a `Cancelled` or
`DeadlineExceeded` error.

```python
from pathignore.matcher import Context

ctx = Context(timeout=0.5)
ignore.match("some/path", ctx)
```

`Context.with_timeout` makes a child context that ends with its parent or at
its own deadline, whichever comes first.

## Errors

Every error raised by the package is a `MatcherError`. Building a
`PathIgnore` fails when no strategy is given, when the regex strategy has no
patterns or a pattern does not compile, when a glob does not compile, or when
a gitignore strategy has neither patterns nor a file, or its file cannot be
read. The message starts with the strategy at fault (`regex - `,
`gitignore - `, `glob - `) and the original error is kept as its cause; for
globs that cause is a `GlobCompileError` whose `pattern` attribute holds the
offending pattern.

## Using a single strategy

Each strategy also works on its own through `GitIgnoreMatcher`,
`GlobMatcher` and `RegexMatcher`, which share the `match`, `match_info` and
`type` methods of `PathMatcher`. `GitIgnoreMatcher` and `RegexMatcher` take
their options and a `parallel` flag. `GlobMatcher.strict(options, parallel)`
raises on the first bad glob; `GlobMatcher.lenient(options)` returns a
sequential matcher built from every pattern that compiles, together with a
list of `GlobCompileError`s for those that did not.

Lower-level helpers are available too: `parse_line` and `read_patterns` in
`pathignore.gitignore`, `compile_glob` and `quote_meta` in
`pathignore.globmatch`, `quote_patterns` in `pathignore.regexmatch`, and
`PatternSet` in `pathignore.matcher`.

## What it does not do

`pathignore` is a library only. It has no command-line tool, does not walk
directories or look at the file system to decide whether a path is a
directory, and does not find or combine `.gitignore` files across a tree:
it checks the path strings you give it against the rules you give it.

## Running the tests

```
pip install -e ".[test]"
pytest
```