"""Pydantic models for source and merged resume documents."""

from __future__ import annotations

import copy
import json
from enum import Enum
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict


class Dialect(str, Enum):
    FRESH = "FRESH"
    JRS = "JRS"

    @classmethod
    def detect(cls, data: dict[str, Any]) -> "Dialect":
        """JSON Resume documents carry a top-level ``basics`` object; FRESH ones don't."""
        return cls.JRS if "basics" in data else cls.FRESH


# (container path, date key) pairs sorted newest first by ResumeDocument.sorted()
_DATED_COLLECTIONS: dict[Dialect, list[tuple[tuple[str, ...], str]]] = {
    Dialect.FRESH: [
        (("employment", "history"), "start"),
        (("education", "history"), "start"),
        (("service", "history"), "start"),
        (("projects",), "start"),
        (("writing",), "date"),
        (("recognition",), "date"),
    ],
    Dialect.JRS: [
        (("work",), "startDate"),
        (("education",), "startDate"),
        (("volunteer",), "startDate"),
        (("projects",), "startDate"),
        (("publications",), "releaseDate"),
        (("awards",), "date"),
    ],
}


class SourceDocument(BaseModel):
    """A parsed source resume file."""

    model_config = ConfigDict(frozen=True)

    path: Path
    data: dict[str, Any]
    dialect: Dialect


class ResumeDocument(BaseModel):
    """In-memory resume handed to the format generators."""

    data: dict[str, Any]
    dialect: Dialect
    source: Path | None = None

    @classmethod
    def from_data(cls, data: dict[str, Any], source: Path | None = None) -> "ResumeDocument":
        return cls(data=data, dialect=Dialect.detect(data), source=source)

    @property
    def name(self) -> str:
        if self.dialect is Dialect.JRS:
            return (self.data.get("basics") or {}).get("name", "")
        return self.data.get("name", "")

    def to_json(self, indent: int | None = 2) -> str:
        return json.dumps(self.data, ensure_ascii=False, indent=indent)

    def to_yaml(self) -> str:
        return yaml.safe_dump(self.data, sort_keys=False, allow_unicode=True)

    def sorted(self) -> "ResumeDocument":
        """Return a copy with dated history entries ordered newest first."""
        data = copy.deepcopy(self.data)
        for path, date_key in _DATED_COLLECTIONS[self.dialect]:
            container: Any = data
            for key in path[:-1]:
                container = container.get(key) if isinstance(container, dict) else None
            if not isinstance(container, dict):
                continue
            items = container.get(path[-1])
            if isinstance(items, list):
                container[path[-1]] = sorted(
                    items,
                    key=lambda item: str(item.get(date_key, "")) if isinstance(item, dict) else "",
                    reverse=True,
                )
        return self.model_copy(update={"data": data})
