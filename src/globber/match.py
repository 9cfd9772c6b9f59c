"""Matching engine for compiled ``*`` glob patterns."""

from __future__ import annotations

from dataclasses import dataclass

from .compiler import compile_pattern, fold_case
from .models import (
    AnyEnd,
    AnyUntil,
    AnyUntilExactEnd,
    CompiledPattern,
    ExactStart,
    MatchAny,
    MatchBothEnds,
    MatchEnd,
    MatchFull,
    MatchStart,
    Multipart,
    Segment,
)


def _find_at_end(literal: str, subject: str, start: int) -> bool:
    """Return True if *literal* occurs at or after *start* and ends *subject*.

    Each rejected candidate resumes the search one character past its own
    starting index, so overlapping occurrences are still considered.
    """
    end = len(subject)
    found = subject.find(literal, start)
    while found != -1:
        if found + len(literal) == end:
            return True
        found = subject.find(literal, found + 1)
    return False


def _match_segments(segments: tuple[Segment, ...], subject: str) -> bool:
    """Walk *segments* over *subject* in a single forward pass.

    Every segment commits to the leftmost position where it can be
    satisfied.  A later segment failing never re-runs an earlier one.
    """
    if not segments:
        return False

    pos = 0
    for segment in segments:
        if isinstance(segment, AnyEnd):
            return True
        if isinstance(segment, ExactStart):
            if not subject.startswith(segment.literal, pos):
                return False
            pos += len(segment.literal)
        elif isinstance(segment, AnyUntil):
            found = subject.find(segment.literal, pos)
            if found == -1:
                return False
            pos = found + len(segment.literal)
        elif isinstance(segment, AnyUntilExactEnd):
            return _find_at_end(segment.literal, subject, pos)
    return True


def matches(compiled: CompiledPattern, subject: str) -> bool:
    """Return True when *subject* matches *compiled*.

    Matching is total: any compiled pattern and any subject, including
    the empty string, produce a boolean.
    """
    if isinstance(compiled, MatchAny):
        return True
    if isinstance(compiled, MatchFull):
        return subject == compiled.literal
    if isinstance(compiled, MatchStart):
        return subject.startswith(compiled.prefix)
    if isinstance(compiled, MatchEnd):
        return subject.endswith(compiled.suffix)
    if isinstance(compiled, MatchBothEnds):
        # prefix and suffix may not share characters
        return (
            len(subject) >= len(compiled.prefix) + len(compiled.suffix)
            and subject.startswith(compiled.prefix)
            and subject.endswith(compiled.suffix)
        )
    if isinstance(compiled, Multipart):
        return _match_segments(compiled.segments, subject)
    raise TypeError(f"Unsupported pattern type: {type(compiled).__name__}")


@dataclass(frozen=True)
class Glob:
    """A compiled pattern together with its case-sensitivity setting.

    When ``case_sensitive`` is false, ``pattern`` was compiled from the
    case-folded source and subjects are folded the same way before
    matching.
    """

    source: str
    pattern: CompiledPattern
    case_sensitive: bool = True

    @classmethod
    def compile(cls, source: str, case_sensitive: bool = True) -> Glob:
        text = source if case_sensitive else fold_case(source)
        return cls(
            source=source,
            pattern=compile_pattern(text),
            case_sensitive=case_sensitive,
        )

    def matches(self, subject: str) -> bool:
        if not self.case_sensitive:
            subject = fold_case(subject)
        return matches(self.pattern, subject)


def compile_glob(pattern: str, case_sensitive: bool = True) -> Glob:
    """Compile *pattern* into a :class:`Glob`."""
    return Glob.compile(pattern, case_sensitive)


def compile_and_match(pattern: str, subject: str, case_sensitive: bool = True) -> bool:
    """Compile *pattern* once and match it against *subject*.

    Raises :class:`~globber.models.CompileError` for adjacent wildcards.
    """
    return compile_glob(pattern, case_sensitive).matches(subject)
