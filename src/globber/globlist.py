"""Ordered lists of globs with any/all queries."""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, Union

from .compiler import fold_case
from .match import Glob, matches

logger = logging.getLogger(__name__)

GlobLike = Union[str, Glob]


def _bucket(items: Iterable[GlobLike], case_sensitive: bool) -> list[Glob]:
    # a bare string would otherwise iterate as one-character patterns
    if isinstance(items, str):
        raise TypeError(f"Expected a collection of patterns, got the string {items!r}")
    return [
        item if isinstance(item, Glob) else Glob.compile(item, case_sensitive)
        for item in items
    ]


class GlobList:
    """An immutable list of globs split into two buckets.

    Case-sensitive globs are matched against the subject as given.
    Case-insensitive globs are matched against the subject folded once
    per query, and only when that bucket is non-empty.  Pre-built
    :class:`Glob` values are placed by their own ``case_sensitive`` flag,
    whichever argument they are passed in.
    """

    def __init__(
        self,
        case_sensitive: Iterable[GlobLike] = (),
        case_insensitive: Iterable[GlobLike] = (),
    ) -> None:
        globs = _bucket(case_sensitive, True) + _bucket(case_insensitive, False)
        self._sensitive = tuple(g for g in globs if g.case_sensitive)
        self._insensitive = tuple(g for g in globs if not g.case_sensitive)
        logger.debug(
            "[globber.build] case_sensitive=%d case_insensitive=%d",
            len(self._sensitive),
            len(self._insensitive),
        )

    @classmethod
    def build(cls, patterns: Iterable[str], case_sensitive: bool = True) -> GlobList:
        """Compile *patterns* into a list sharing one case-sensitivity flag.

        The first pattern that fails to compile raises
        :class:`~globber.models.CompileError`; no partial list is returned.
        """
        if case_sensitive:
            return cls(case_sensitive=patterns)
        return cls(case_insensitive=patterns)

    @property
    def globs(self) -> list[Glob]:
        """Return every glob, case-sensitive bucket first."""
        return list(self._sensitive) + list(self._insensitive)

    def _pairs(self, subject: str) -> Iterator[tuple[Glob, str]]:
        """Yield each glob with the form of *subject* it should see."""
        for glob in self._sensitive:
            yield glob, subject
        if self._insensitive:
            folded = fold_case(subject)
            for glob in self._insensitive:
                yield glob, folded

    # ── Queries ──────────────────────────────────────────────────────

    def any_match(self, subject: str) -> bool:
        """Return True if at least one glob matches.  Empty lists never match."""
        for glob, text in self._pairs(subject):
            if matches(glob.pattern, text):
                logger.debug(
                    "[globber.match] pattern=%s subject=%s", glob.source, subject
                )
                return True
        return False

    def all_match(self, subject: str) -> bool:
        """Return True if every glob matches.  Empty lists always match."""
        for glob, text in self._pairs(subject):
            if not matches(glob.pattern, text):
                logger.debug(
                    "[globber.miss] pattern=%s subject=%s", glob.source, subject
                )
                return False
        return True

    def matching_patterns(self, subject: str) -> list[str]:
        """Return the source text of every glob that matches *subject*.

        Useful for debugging and audit trails.
        """
        return [glob.source for glob, text in self._pairs(subject) if matches(glob.pattern, text)]

    def __iter__(self) -> Iterator[Glob]:
        return iter(self.globs)

    def __len__(self) -> int:
        return len(self._sensitive) + len(self._insensitive)

    def __bool__(self) -> bool:
        return len(self) > 0

    def __repr__(self) -> str:
        sources = [g.source for g in self._sensitive]
        folded = [g.source for g in self._insensitive]
        return f"GlobList(case_sensitive={sources!r}, case_insensitive={folded!r})"
