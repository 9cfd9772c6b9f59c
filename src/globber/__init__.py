"""globber: compile ``*`` wildcard patterns once, match strings against them fast."""

from __future__ import annotations

__version__ = "0.1.0"

from .compiler import compile_pattern, fold_case
from .globlist import GlobList
from .loader import (
    build_glob_list,
    load_glob_list,
    load_glob_list_from_dict,
    load_glob_list_from_str,
)
from .match import Glob, compile_and_match, compile_glob, matches
from .models import (
    AnyEnd,
    AnyUntil,
    AnyUntilExactEnd,
    CompiledPattern,
    CompileError,
    Defaults,
    ExactStart,
    GlobListDocument,
    MatchAny,
    MatchBothEnds,
    MatchEnd,
    MatchFull,
    MatchStart,
    Metadata,
    Multipart,
    PatternEntry,
    Segment,
)

__all__ = [
    "AnyEnd",
    "AnyUntil",
    "AnyUntilExactEnd",
    "CompileError",
    "CompiledPattern",
    "Defaults",
    "ExactStart",
    "Glob",
    "GlobList",
    "GlobListDocument",
    "MatchAny",
    "MatchBothEnds",
    "MatchEnd",
    "MatchFull",
    "MatchStart",
    "Metadata",
    "Multipart",
    "PatternEntry",
    "Segment",
    "build_glob_list",
    "compile_and_match",
    "compile_glob",
    "compile_pattern",
    "fold_case",
    "load_glob_list",
    "load_glob_list_from_dict",
    "load_glob_list_from_str",
    "matches",
]
