"""Application configuration loaded from resume-forge.yaml."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml

PDF_ENGINES = ("weasyprint", "fpdf", "none")
CSS_MODES = ("embed", "link")

CONFIG_ENV_VAR = "RESUME_FORGE_CONFIG"
CONFIG_FILENAME = "resume-forge.yaml"


@dataclass(frozen=True)
class BuildDefaults:
    theme: str = "modern"
    pdf: str | None = None
    css: str = "embed"
    wrap: int = 60
    prettify: bool = True
    sort: bool = False
    tips: bool = True

    def __post_init__(self) -> None:
        if isinstance(self.wrap, bool):
            raise ValueError(f"wrap must be an integer, got {self.wrap!r}")
        try:
            object.__setattr__(self, "wrap", int(self.wrap))
        except (TypeError, ValueError):
            raise ValueError(f"wrap must be an integer, got {self.wrap!r}") from None
        if not 1 <= self.wrap <= 500:
            raise ValueError(f"wrap must be between 1 and 500, got {self.wrap}")
        if self.pdf is not None and self.pdf not in PDF_ENGINES:
            raise ValueError(f"pdf must be one of {PDF_ENGINES}, got {self.pdf!r}")
        if self.css not in CSS_MODES:
            raise ValueError(f"css must be one of {CSS_MODES}, got {self.css!r}")


@dataclass(frozen=True)
class OutputConfig:
    default_destination: str = "out/resume.all"

    def __post_init__(self) -> None:
        if not isinstance(self.default_destination, str) or not self.default_destination.strip():
            raise ValueError("default_destination must be a non-empty path")


@dataclass(frozen=True)
class AppConfig:
    build: BuildDefaults = field(default_factory=BuildDefaults)
    output: OutputConfig = field(default_factory=OutputConfig)


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load config from YAML file, falling back to defaults."""
    if path is None:
        candidates = []
        if os.environ.get(CONFIG_ENV_VAR):
            candidates.append(Path(os.environ[CONFIG_ENV_VAR]))
        candidates.append(Path.cwd() / CONFIG_FILENAME)
        for c in candidates:
            if c.exists():
                path = c
                break

    raw: dict = {}
    if path is not None:
        p = Path(path)
        if p.exists():
            raw = yaml.safe_load(p.read_text(encoding="utf-8")) or {}

    if not isinstance(raw, dict):
        raise ValueError(f"Config must be a mapping, got {type(raw).__name__}")
    sections = {}
    for key, cls in (("build", BuildDefaults), ("output", OutputConfig)):
        section = raw.get(key) or {}
        if not isinstance(section, dict):
            raise ValueError(f"{key} must be a mapping, got {section!r}")
        try:
            sections[key] = cls(**section)
        except TypeError as e:
            raise ValueError(f"Unknown {key} setting: {e}") from e
    return AppConfig(**sections)
