"""Locate and load resume themes."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import BaseModel

from resume_forge.errors import BuildError, ErrorKind
from resume_forge.models.theme import (
    FormatDescriptor,
    FreshTheme,
    JrsTheme,
    OutputFormat,
    Theme,
)

logger = logging.getLogger(__name__)

THEMES_DIR = Path(__file__).parent.parent / "themes"
MANIFEST_FILENAME = "theme.json"
JRS_THEME_MARKER = "jsonresume-theme-"
JRS_TEMPLATE = "resume.html"
JRS_STYLESHEET = "style.css"


class FormatManifest(BaseModel):
    templates: list[str] = []
    title: str | None = None


class ThemeManifest(BaseModel):
    name: str
    title: str | None = None
    css: str | None = None
    formats: dict[str, FormatManifest]


def locate_theme(name: str) -> Path:
    """Resolve a theme name to a folder: packaged themes first, then the filesystem."""
    packaged = THEMES_DIR / name
    if packaged.is_dir():
        return packaged
    candidate = Path(name).expanduser().resolve()
    if candidate.is_dir():
        return candidate
    raise BuildError(ErrorKind.THEME_NOT_FOUND, attempted=name)


def load_theme(folder: Path, name: str) -> Theme:
    """Load the theme in ``folder``.

    Names containing ``jsonresume-theme-`` load as JSON Resume themes,
    everything else as a FRESH theme described by ``theme.json``.
    """
    try:
        if JRS_THEME_MARKER in name:
            theme = _load_jrs_theme(folder)
        else:
            theme = _load_fresh_theme(folder)
    except (OSError, ValueError) as exc:
        raise BuildError(ErrorKind.THEME_LOAD_FAILURE, attempted=name, inner=exc) from exc
    logger.debug("Loaded %r from %s", theme, folder)
    return theme


def list_themes() -> list[str]:
    """List packaged theme names."""
    return sorted(p.parent.name for p in THEMES_DIR.glob(f"*/{MANIFEST_FILENAME}"))


def _load_fresh_theme(folder: Path) -> FreshTheme:
    manifest_path = folder / MANIFEST_FILENAME
    manifest = ThemeManifest.model_validate_json(manifest_path.read_text(encoding="utf-8"))

    formats: dict[OutputFormat, FormatDescriptor] = {}
    for key, spec in manifest.formats.items():
        fmt = OutputFormat.parse(key)
        if fmt is None:
            raise ValueError(f"Theme {manifest.name!r} declares unknown format {key!r}")
        for template in spec.templates:
            if not (folder / template).is_file():
                raise FileNotFoundError(f"Template {template!r} for format {key!r} not found in {folder}")
        formats[fmt] = FormatDescriptor(
            name=fmt,
            ext=fmt.value,
            title=spec.title or fmt.value,
            templates=list(spec.templates),
        )

    css_path = None
    if manifest.css:
        css_path = folder / manifest.css
        if not css_path.is_file():
            raise FileNotFoundError(f"Stylesheet {manifest.css!r} not found in {folder}")

    return FreshTheme(
        name=manifest.name,
        folder=folder,
        formats=formats,
        css_path=css_path,
        title=manifest.title,
    )


def _load_jrs_theme(folder: Path) -> JrsTheme:
    if not (folder / JRS_TEMPLATE).is_file():
        raise FileNotFoundError(f"JSON Resume theme has no {JRS_TEMPLATE}: {folder}")
    css_path = folder / JRS_STYLESHEET
    formats = {
        fmt: FormatDescriptor(name=fmt, ext=fmt.value, title=fmt.value, templates=[JRS_TEMPLATE])
        for fmt in (OutputFormat.HTML, OutputFormat.PDF)
    }
    return JrsTheme(
        name=folder.name,
        folder=folder,
        formats=formats,
        css_path=css_path if css_path.is_file() else None,
        template=JRS_TEMPLATE,
    )
