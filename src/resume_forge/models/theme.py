"""Theme and output format models."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field


class OutputFormat(str, Enum):
    HTML = "html"
    PDF = "pdf"
    DOCX = "docx"
    MD = "md"
    TXT = "txt"
    JSON = "json"
    YML = "yml"
    PNG = "png"

    @classmethod
    def parse(cls, text: str | None) -> "OutputFormat | None":
        """Map a format name, file extension or alias to a format, or None."""
        if not text:
            return None
        key = text.strip().lower().lstrip(".")
        key = FORMAT_ALIASES.get(key, key)
        try:
            return cls(key)
        except ValueError:
            return None


FORMAT_ALIASES: dict[str, str] = {
    "doc": "docx",
    "yaml": "yml",
    "htm": "html",
    "markdown": "md",
    "text": "txt",
}


class FormatDescriptor(BaseModel):
    name: OutputFormat
    ext: str
    title: str
    templates: list[str] = Field(default_factory=list)
    freebie: bool = False


class Theme:
    """A loaded theme: a folder of templates plus the formats it declares."""

    renders_jrs: bool = False

    def __init__(
        self,
        name: str,
        folder: Path,
        formats: dict[OutputFormat, FormatDescriptor],
        css_path: Path | None = None,
        title: str | None = None,
    ):
        self.name = name
        self.folder = folder
        self.formats = formats
        self.css_path = css_path
        self.title = title or name

    def get_format(self, text: str | OutputFormat | None) -> FormatDescriptor | None:
        fmt = text if isinstance(text, OutputFormat) else OutputFormat.parse(text)
        if fmt is None:
            return None
        return self.formats.get(fmt)

    def has_format(self, text: str | OutputFormat | None) -> bool:
        return self.get_format(text) is not None

    def __repr__(self) -> str:
        names = ", ".join(f.value for f in self.formats)
        return f"{type(self).__name__}({self.name!r}, formats=[{names}])"


class FreshTheme(Theme):
    """Template-driven theme rendering FRESH documents."""

    renders_jrs = False


class JrsTheme(Theme):
    """JSON Resume style theme; renders JRS documents through ``render``."""

    renders_jrs = True

    def __init__(self, *args: Any, template: str = "resume.html", **kwargs: Any):
        super().__init__(*args, **kwargs)
        self.template = template

    def render(self, resume_data: dict[str, Any], options: Any = None, css_href: str | None = None) -> str:
        from resume_forge.templates.renderer import render_jrs

        return render_jrs(self, resume_data, options, css_href=css_href)
