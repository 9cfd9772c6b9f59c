"""Data models for globber."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union


class CompileError(ValueError):
    """Raised when a pattern produces an empty literal between two wildcards.

    ``position`` is the index of the second wildcard of the adjacent pair,
    so ``pattern[position - 1:position + 1] == "**"``.
    """

    def __init__(self, pattern: str, position: int) -> None:
        self.pattern = pattern
        self.position = position
        super().__init__(
            f"Adjacent wildcards at position {position} in pattern {pattern!r}"
        )


# ── Multipart segments ───────────────────────────────────────────────────


@dataclass(frozen=True)
class ExactStart:
    """Subject must begin with ``literal``.  Only ever the first segment."""

    literal: str


@dataclass(frozen=True)
class AnyUntil:
    """Skip ahead to the first occurrence of ``literal`` (never empty)."""

    literal: str


@dataclass(frozen=True)
class AnyUntilExactEnd:
    """Like :class:`AnyUntil`, but the occurrence must end the subject."""

    literal: str


@dataclass(frozen=True)
class AnyEnd:
    """Trailing wildcard: accept whatever is left."""


Segment = Union[ExactStart, AnyUntil, AnyUntilExactEnd, AnyEnd]


# ── Compiled patterns ────────────────────────────────────────────────────


@dataclass(frozen=True)
class MatchAny:
    """The pattern ``*``."""


@dataclass(frozen=True)
class MatchFull:
    """No wildcard: the subject must equal ``literal``."""

    literal: str


@dataclass(frozen=True)
class MatchStart:
    """``prefix*``"""

    prefix: str


@dataclass(frozen=True)
class MatchEnd:
    """``*suffix``"""

    suffix: str


@dataclass(frozen=True)
class MatchBothEnds:
    """``prefix*suffix``"""

    prefix: str
    suffix: str


@dataclass(frozen=True)
class Multipart:
    """Two or more wildcards, decomposed into an ordered run of segments.

    ``ExactStart`` (if any) comes first, and the last segment is always
    either ``AnyEnd`` or ``AnyUntilExactEnd``.
    """

    segments: tuple[Segment, ...]


CompiledPattern = Union[
    MatchAny, MatchFull, MatchStart, MatchEnd, MatchBothEnds, Multipart
]


# ── GlobList documents ───────────────────────────────────────────────────


@dataclass
class Metadata:
    """Descriptive metadata for a pattern list."""

    name: str
    description: str = ""
    labels: dict[str, str] = field(default_factory=dict)


@dataclass
class Defaults:
    """Settings applied to entries that don't override them."""

    case_sensitive: bool = True


@dataclass
class PatternEntry:
    """A single pattern as written in a document.

    ``case_sensitive`` of ``None`` means "use the document default".
    """

    pattern: str
    case_sensitive: bool | None = None

    def resolve(self, defaults: Defaults) -> bool:
        if self.case_sensitive is None:
            return defaults.case_sensitive
        return self.case_sensitive


@dataclass
class GlobListDocument:
    """A complete pattern list loaded from YAML."""

    api_version: str = "globber/v1"
    kind: str = "GlobList"
    metadata: Metadata = field(default_factory=lambda: Metadata(name="unnamed"))
    defaults: Defaults = field(default_factory=Defaults)
    patterns: list[PatternEntry] = field(default_factory=list)
