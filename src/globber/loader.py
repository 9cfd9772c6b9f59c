"""YAML/dict loader for GlobList documents."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from .globlist import GlobList
from .match import Glob
from .models import Defaults, GlobListDocument, Metadata, PatternEntry

logger = logging.getLogger(__name__)


def _parse_flag(raw: Any, where: str) -> bool | None:
    if raw is None or isinstance(raw, bool):
        return raw
    raise ValueError(f"Invalid case_sensitive in {where}: {raw!r} (expected true or false)")


def _parse_entry(raw: Any) -> PatternEntry:
    if isinstance(raw, str):
        return PatternEntry(pattern=raw)
    if isinstance(raw, dict) and isinstance(raw.get("pattern"), str):
        return PatternEntry(
            pattern=raw["pattern"],
            case_sensitive=_parse_flag(raw.get("case_sensitive"), raw["pattern"]),
        )
    raise ValueError(f"Invalid pattern entry: {raw!r} (expected a string or a mapping with 'pattern')")


def _parse_defaults(raw: dict[str, Any] | None) -> Defaults:
    if not raw:
        return Defaults()
    flag = _parse_flag(raw.get("case_sensitive"), "defaults")
    return Defaults(case_sensitive=True if flag is None else flag)


def _parse_patterns(raw: Any) -> list[PatternEntry]:
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise ValueError(f"Invalid patterns: {raw!r} (expected a list)")
    return [_parse_entry(p) for p in raw]


def _parse_metadata(raw: dict[str, Any] | None) -> Metadata:
    if not raw:
        return Metadata(name="unnamed")
    return Metadata(
        name=raw.get("name", "unnamed"),
        description=raw.get("description", ""),
        labels=raw.get("labels") or {},
    )


def load_glob_list_from_dict(data: dict[str, Any]) -> GlobListDocument:
    """Parse a GlobListDocument from a raw dictionary (e.g. parsed YAML/JSON)."""
    api_version = data.get("apiVersion", "globber/v1")
    kind = data.get("kind", "GlobList")
    if kind != "GlobList":
        raise ValueError(f"Unsupported kind: {kind} (expected GlobList)")
    return GlobListDocument(
        api_version=api_version,
        kind=kind,
        metadata=_parse_metadata(data.get("metadata")),
        defaults=_parse_defaults(data.get("defaults")),
        patterns=_parse_patterns(data.get("patterns")),
    )


def load_glob_list_from_str(text: str, source: str = "<string>") -> GlobListDocument:
    """Parse a GlobListDocument from YAML text.

    An empty document yields an empty list.  Malformed YAML is reported as
    a ``ValueError`` naming *source*.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid YAML in {source}: {exc}") from exc
    if data is None:
        return GlobListDocument()
    if not isinstance(data, dict):
        raise ValueError(f"Expected a YAML mapping at the top level of {source}")
    return load_glob_list_from_dict(data)


def load_glob_list(path: str | Path) -> GlobListDocument:
    path = Path(path)
    logger.debug("[globber.read] path=%s", path)
    return load_glob_list_from_str(path.read_text(encoding="utf-8"), source=str(path))


def build_glob_list(document: GlobListDocument) -> GlobList:
    """Compile every entry of *document* into a :class:`GlobList`.

    Raises :class:`~globber.models.CompileError` on the first bad pattern.
    """
    globs = [
        Glob.compile(entry.pattern, entry.resolve(document.defaults))
        for entry in document.patterns
    ]
    logger.debug(
        "[globber.load] name=%s patterns=%d",
        document.metadata.name,
        len(globs),
    )
    return GlobList(globs)
