"""Traversal filters.

A filter is any predicate over a path string. Scan and removal consult it
at every visited node, directories included, so rejecting a directory
prunes its whole subtree. Pattern matchers are concrete filters.
"""

import fnmatch
import os
import re
from collections.abc import Callable, Iterable
from typing import Protocol, runtime_checkable


@runtime_checkable
class PathFilter(Protocol):
    """Predicate deciding whether a path takes part in a traversal."""

    def __call__(self, path: str) -> bool: ...


class PatternFilter:
    """Accept paths in which a regular expression matches anywhere.

    Args:
        pattern: Regular expression source or compiled pattern.
    """

    def __init__(self, pattern: str | re.Pattern[str]) -> None:
        self._pattern = re.compile(pattern) if isinstance(pattern, str) else pattern

    @property
    def pattern(self) -> re.Pattern[str]:
        """The compiled regular expression."""
        return self._pattern

    def __call__(self, path: str) -> bool:
        return self._pattern.search(path) is not None

    def __repr__(self) -> str:
        return f"PatternFilter({self._pattern.pattern!r})"


class GlobFilter:
    """Accept paths matching any glob pattern.

    A pattern matches when it matches either the full path or its base
    name, so ``*.txt`` works without a leading ``**/``.

    Args:
        patterns: Glob-style patterns (fnmatch syntax).
        exclude: Invert the filter: accept paths that match none of the patterns.
    """

    def __init__(self, patterns: Iterable[str], *, exclude: bool = False) -> None:
        self._patterns = tuple(patterns)
        self._exclude = exclude

    def __call__(self, path: str) -> bool:
        name = os.path.basename(path)
        matched = any(
            fnmatch.fnmatch(path, pattern) or fnmatch.fnmatch(name, pattern)
            for pattern in self._patterns
        )
        return not matched if self._exclude else matched

    def __repr__(self) -> str:
        return f"GlobFilter({list(self._patterns)!r}, exclude={self._exclude})"


class FilesOnly:
    """Apply a filter to non-directories only; directories always pass.

    Useful with pattern filters such as ``*.txt``, which would otherwise
    reject (and prune) every directory on the way down.
    """

    def __init__(self, inner: PathFilter) -> None:
        self._inner = inner

    def __call__(self, path: str) -> bool:
        if os.path.isdir(path) and not os.path.islink(path):
            return True
        return self._inner(path)


class AllOf:
    """Accept paths accepted by every wrapped filter."""

    def __init__(self, *filters: PathFilter) -> None:
        self._filters = filters

    def __call__(self, path: str) -> bool:
        return all(f(path) for f in self._filters)


FilterLike = PathFilter | Callable[[str], bool] | re.Pattern[str] | None


def as_filter(value: FilterLike) -> PathFilter | None:
    """Coerce a filter-like value into a PathFilter.

    Args:
        value: None (accept everything), a compiled regular expression, or
            any callable taking a path string.

    Returns:
        A PathFilter, or None when every path is accepted.

    Raises:
        TypeError: If the value is neither callable nor a pattern.
    """
    if value is None:
        return None
    if isinstance(value, re.Pattern):
        return PatternFilter(value)
    if callable(value):
        return value
    msg = f"Filter must be callable or a compiled pattern, got {type(value).__name__}"
    raise TypeError(msg)
