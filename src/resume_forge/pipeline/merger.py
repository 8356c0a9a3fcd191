"""Merge several source resumes into one."""

from __future__ import annotations

import copy
import logging
from functools import reduce
from typing import Any

from resume_forge.errors import BuildError, ErrorKind
from resume_forge.models.resume import ResumeDocument, SourceDocument

logger = logging.getLogger(__name__)


def is_mixed(sources: list[SourceDocument]) -> bool:
    """True when the sources do not all share the first source's dialect."""
    expected = sources[0].dialect
    return any(s.dialect is not expected for s in sources[1:])


def merge_sources(sources: list[SourceDocument]) -> ResumeDocument:
    """Fold sources right-to-left into a single resume.

    The rightmost source is the base; every source to its left is
    deep-extended with the accumulated result, so values from sources further
    right take precedence. A single source is returned as-is.
    """
    if not sources:
        raise BuildError(ErrorKind.SOURCE_NOT_FOUND)

    first = sources[0]
    if len(sources) == 1:
        return ResumeDocument(data=first.data, dialect=first.dialect, source=first.path)

    if is_mixed(sources):
        raise BuildError(
            ErrorKind.MIXED_DIALECT_MERGE,
            attempted=", ".join(f"{s.path} ({s.dialect.value})" for s in sources),
        )

    merged = reduce(
        lambda acc, left: deep_extend(left, acc),
        reversed([s.data for s in sources[:-1]]),
        copy.deepcopy(sources[-1].data),
    )
    logger.debug("Merged %d %s sources", len(sources), first.dialect.value)
    return ResumeDocument(data=merged, dialect=first.dialect, source=first.path)


def deep_extend(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge ``override`` onto a copy of ``base``.

    Mappings merge key by key; scalars and lists from ``override`` replace
    the value in ``base``.
    """
    result = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(result.get(key), dict):
            result[key] = deep_extend(result[key], value)
        else:
            result[key] = copy.deepcopy(value)
    return result
