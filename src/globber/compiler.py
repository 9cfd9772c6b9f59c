"""Pattern compiler: turns a ``*`` glob into a :data:`CompiledPattern`."""

from __future__ import annotations

import logging

from .models import (
    AnyEnd,
    AnyUntil,
    AnyUntilExactEnd,
    CompiledPattern,
    CompileError,
    ExactStart,
    MatchAny,
    MatchBothEnds,
    MatchEnd,
    MatchFull,
    MatchStart,
    Multipart,
    Segment,
)

logger = logging.getLogger(__name__)

WILDCARD = "*"


def fold_case(text: str) -> str:
    """Case-fold *text* for case-insensitive matching.

    Uppercasing is applied to patterns and subjects alike; it is not
    locale aware.
    """
    return text.upper()


def _compile_multipart(pattern: str, pieces: list[str]) -> Multipart:
    head, middle, tail = pieces[0], pieces[1:-1], pieces[-1]

    segments: list[Segment] = []
    if head:
        segments.append(ExactStart(head))

    # Index of the wildcard that closes the current interior span.
    position = len(head) + 1
    for literal in middle:
        position += len(literal)
        if not literal:
            raise CompileError(pattern, position)
        segments.append(AnyUntil(literal))
        position += 1

    if tail:
        segments.append(AnyUntilExactEnd(tail))
    else:
        segments.append(AnyEnd())
    return Multipart(tuple(segments))


def compile_pattern(pattern: str) -> CompiledPattern:
    """Compile *pattern* into its matcher representation.

    - ``*`` compiles to :class:`MatchAny`
    - no wildcard compiles to :class:`MatchFull` (exact equality)
    - a single wildcard compiles to :class:`MatchStart`,
      :class:`MatchEnd` or :class:`MatchBothEnds` depending on where it sits
    - two or more wildcards compile to a :class:`Multipart`

    Raises :class:`CompileError` when two wildcards are adjacent.
    """
    pieces = pattern.split(WILDCARD)
    wildcards = len(pieces) - 1

    compiled: CompiledPattern
    if pattern == WILDCARD:
        compiled = MatchAny()
    elif wildcards == 0:
        compiled = MatchFull(pattern)
    elif wildcards == 1:
        before, after = pieces
        if not before:
            compiled = MatchEnd(after)
        elif not after:
            compiled = MatchStart(before)
        else:
            compiled = MatchBothEnds(before, after)
    else:
        compiled = _compile_multipart(pattern, pieces)

    logger.debug(
        "[globber.compile] pattern=%s kind=%s",
        pattern,
        type(compiled).__name__,
    )
    return compiled
