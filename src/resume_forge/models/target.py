"""Build targets and per-target generation results."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from resume_forge.errors import BuildError
from resume_forge.models.theme import FormatDescriptor


@dataclass
class GenerationResult:
    """Outcome of generating one target: a written path or an error."""

    value: Path | None = None
    error: BuildError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class TargetDescriptor:
    file: Path
    fmt: FormatDescriptor | None
    result: GenerationResult | None = None

    @property
    def format_name(self) -> str:
        return self.fmt.name.value if self.fmt else self.file.suffix.lstrip(".")
