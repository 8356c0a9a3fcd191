"""Load source resume files into SourceDocuments."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from resume_forge.errors import BuildError, ErrorKind
from resume_forge.models.resume import Dialect, ResumeDocument, SourceDocument

logger = logging.getLogger(__name__)


@dataclass
class LoadResult:
    """One source file: either a parsed document or the reason it failed."""

    path: Path
    document: SourceDocument | None = None
    error: BuildError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def load_sources(paths: list[str | Path], sort: bool = False) -> list[LoadResult]:
    """Load each source path. Failures are recorded per file, never raised."""
    return [load_source(p, sort=sort) for p in paths]


def load_source(file_path: str | Path, sort: bool = False) -> LoadResult:
    path = Path(file_path)
    try:
        raw = path.read_text(encoding="utf-8-sig")
    except OSError as exc:
        logger.debug("Failed to read %s", path, exc_info=True)
        return LoadResult(
            path=path,
            error=BuildError(ErrorKind.READ_ERROR, attempted=str(path), inner=exc),
        )
    except UnicodeDecodeError as exc:
        return LoadResult(
            path=path,
            error=BuildError(ErrorKind.PARSE_ERROR, "Source resume is not valid UTF-8",
                             attempted=str(path), inner=exc),
        )

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        return LoadResult(
            path=path,
            error=BuildError(ErrorKind.PARSE_ERROR, attempted=str(path), inner=exc),
        )

    if not isinstance(data, dict):
        return LoadResult(
            path=path,
            error=BuildError(
                ErrorKind.PARSE_ERROR,
                f"Expected a JSON object, got {type(data).__name__}",
                attempted=str(path),
            ),
        )

    dialect = Dialect.detect(data)
    if sort:
        data = ResumeDocument(data=data, dialect=dialect).sorted().data

    logger.debug("Loaded %s source %s", dialect.value, path)
    return LoadResult(path=path, document=SourceDocument(path=path, data=data, dialect=dialect))
